"""HTTP client for the history API, used by the UI when the store is remote."""

import logging

import httpx

from weatherlog.errors import NetworkError, StoreError, ValidationError
from weatherlog.models.reading import HistoryRecord, Reading

logger = logging.getLogger(__name__)

SAVE_PATH = "/save_weather"
HISTORY_PATH = "/get_weather_history"


class HistoryClient:
    """Same append/list_recent surface as HistoryService, over HTTP."""

    def __init__(self, base_url: str, timeout: float = 5.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def append(self, reading: Reading) -> HistoryRecord:
        body = self._request("POST", SAVE_PATH, reading.to_payload())
        data = dict(body.get("data") or reading.to_payload())
        data["id"] = body["id"]
        # The API echoes the payload; the store timestamp is not part of it
        data.setdefault("time_search", "")
        return HistoryRecord.from_row(data)

    def list_recent(self, limit: int = 10) -> list[HistoryRecord]:
        """Server caps at ten rows; limit only trims further client-side."""
        body = self._request("GET", HISTORY_PATH)
        logger.debug("Loaded %s history records", body.get("count"))
        return [HistoryRecord.from_row(item) for item in body.get("data") or []][:limit]

    def _request(self, method: str, path: str, payload: dict | None = None) -> dict:
        url = f"{self.base_url}{path}"
        try:
            resp = httpx.request(method, url, json=payload, timeout=self.timeout)
        except httpx.RequestError as e:
            logger.error("History API request failed: %s %s -> %s", method, path, e)
            raise NetworkError(f"Request failed: {e}") from e

        try:
            body = resp.json()
        except ValueError as e:
            raise StoreError(
                f"HTTP {resp.status_code}: invalid JSON", resp.status_code
            ) from e

        if not isinstance(body, dict) or not body.get("success"):
            message = (
                body.get("message") if isinstance(body, dict) else None
            ) or f"HTTP {resp.status_code}"
            logger.error("History API %d: %s %s -> %s", resp.status_code, method, path, message)
            if resp.status_code == 400:
                raise ValidationError(message)
            raise StoreError(message, resp.status_code)
        return body
