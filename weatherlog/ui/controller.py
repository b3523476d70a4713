"""Presentation controller: mount, search and toggle over an immutable ViewState."""

import logging
from collections.abc import Callable
from typing import Protocol

from weatherlog.errors import (
    EmptyInputError,
    MalformedResponseError,
    NetworkError,
    ProviderError,
    StoreError,
    ValidationError,
)
from weatherlog.ingest.gateway import EMPTY_INPUT_MESSAGE, WeatherGateway
from weatherlog.models.reading import HistoryRecord, Reading
from weatherlog.ui import state as view

logger = logging.getLogger(__name__)


class HistoryBackend(Protocol):
    def append(self, reading: Reading) -> HistoryRecord: ...

    def list_recent(self, limit: int = 10) -> list[HistoryRecord]: ...


class WeatherController:
    """Drives the four UI paths. Each call runs its requests sequentially.

    Provider problems and empty input go to `alert`; store and network
    problems on the history side are only logged.
    """

    def __init__(
        self,
        gateway: WeatherGateway,
        history: HistoryBackend,
        alert: Callable[[str], None],
        default_city: str = "London",
        history_limit: int = 10,
    ):
        self.gateway = gateway
        self.history = history
        self.alert = alert
        self.default_city = default_city
        self.history_limit = history_limit
        self.state = view.ViewState()

    def mount(self) -> view.ViewState:
        """Show the default city (not persisted) and load history."""
        self.search(self.default_city, persist=False)
        self.load_history()
        return self.state

    def search(self, city: str, persist: bool = True) -> Reading | None:
        """Look up a city; on success persist it and refresh history.

        Returns the new reading, or None when the lookup failed.
        """
        if not city or not city.strip():
            self.alert(EMPTY_INPUT_MESSAGE)
            return None

        try:
            reading = self.gateway.fetch_reading(city)
        except EmptyInputError as e:
            self.alert(str(e))
            return None
        except ProviderError as e:
            self.alert(e.message)
            self.state = view.without_reading(self.state)
            return None
        except (NetworkError, MalformedResponseError):
            logger.exception("Error fetching weather data for %r", city)
            self.state = view.without_reading(self.state)
            return None

        self.state = view.with_reading(self.state, reading)
        if persist:
            self._save(reading)
        return reading

    def load_history(self) -> None:
        try:
            records = self.history.list_recent(self.history_limit)
        except (StoreError, NetworkError) as e:
            logger.error("Failed to load history: %s", e)
            return
        logger.info("Loaded %d history records", len(records))
        self.state = view.with_history(self.state, records)

    def toggle_history(self) -> view.ViewState:
        self.state = view.toggle_history(self.state)
        return self.state

    def _save(self, reading: Reading) -> None:
        try:
            record = self.history.append(reading)
        except (ValidationError, StoreError, NetworkError) as e:
            logger.error("Save failed: %s", e)
            return
        logger.info("Saved lookup id=%d", record.id)
        self.load_history()
