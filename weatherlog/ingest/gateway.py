"""Weather gateway: city name in, normalized Reading out."""

import logging
import math

from weatherlog.errors import EmptyInputError, MalformedResponseError
from weatherlog.ingest.icons import icon_category
from weatherlog.ingest.openweather_client import OpenWeatherClient
from weatherlog.models.reading import Reading

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Please enter a city name!"


class WeatherGateway:
    def __init__(self, client: OpenWeatherClient):
        self.client = client

    def fetch_reading(self, city_name: str) -> Reading:
        """Look up current conditions and normalize them.

        Blank input is rejected before any request is made.
        """
        if city_name is None or not city_name.strip():
            raise EmptyInputError(EMPTY_INPUT_MESSAGE)

        raw = self.client.get_current_weather(city_name.strip())
        reading = _extract_reading(raw)
        logger.info(
            "Fetched %s: %d°C, %d%% humidity, icon=%s",
            reading.location, reading.temperature_celsius,
            reading.humidity_percent, reading.icon,
        )
        return reading


def _extract_reading(raw: dict) -> Reading:
    """Build a Reading from an OpenWeatherMap current-weather body."""
    try:
        weather = raw.get("weather") or [{}]
        main = raw["main"]
        return Reading(
            temperature_celsius=math.floor(main["temp"]),
            humidity_percent=int(main["humidity"]),
            wind_speed=float(raw["wind"]["speed"]),
            location=str(raw["name"]),
            icon=icon_category(weather[0].get("icon")),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise MalformedResponseError(f"Unexpected provider response: {e}") from e
