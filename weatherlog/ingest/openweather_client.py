"""OpenWeatherMap current-conditions client."""

import logging
import os

import httpx

from weatherlog.errors import MalformedResponseError, NetworkError, ProviderError

logger = logging.getLogger(__name__)

OPENWEATHER_BASE_URL = "https://api.openweathermap.org"
CURRENT_WEATHER_PATH = "/data/2.5/weather"


class OpenWeatherClient:
    """Single-shot GET against /data/2.5/weather. No retries."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = OPENWEATHER_BASE_URL,
        units: str = "metric",
        timeout: float = 5.0,
    ):
        self.api_key = api_key or os.environ.get("OPENWEATHER_API_KEY", "")
        self.base_url = base_url.rstrip("/")
        self.units = units
        self.timeout = timeout

    def get_current_weather(self, city: str) -> dict:
        """Fetch current conditions for a city name.

        Raises ProviderError on a non-2xx response, carrying the provider's
        own message, and NetworkError on transport failure.
        """
        if not self.api_key:
            raise ProviderError("OPENWEATHER_API_KEY not set")

        url = f"{self.base_url}{CURRENT_WEATHER_PATH}"
        params = {"q": city, "units": self.units, "appid": self.api_key}
        try:
            resp = httpx.get(url, params=params, timeout=self.timeout)
        except httpx.RequestError as e:
            logger.error("OpenWeather request failed for city=%s: %s", city, e)
            raise NetworkError(f"Request failed: {e}") from e

        if not resp.is_success:
            message = _error_message(resp)
            logger.warning(
                "OpenWeather returned %d for city=%s: %s",
                resp.status_code, city, message,
            )
            raise ProviderError(message, resp.status_code)

        try:
            return resp.json()
        except ValueError as e:
            raise MalformedResponseError("Invalid JSON response from provider") from e


def _error_message(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"HTTP {resp.status_code}"
