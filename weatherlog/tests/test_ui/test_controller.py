"""Tests for the presentation controller paths."""

from unittest.mock import MagicMock

import httpx
import pytest
import respx

from weatherlog.errors import MalformedResponseError, NetworkError, ProviderError, StoreError
from weatherlog.history.service import HistoryService
from weatherlog.ingest.gateway import WeatherGateway
from weatherlog.ingest.openweather_client import OpenWeatherClient
from weatherlog.models.reading import HistoryRecord, IconCategory, Reading
from weatherlog.ui.controller import WeatherController

WEATHER_URL = "https://owm.test/data/2.5/weather"


def _record(record_id: int, location: str = "Paris") -> HistoryRecord:
    return HistoryRecord(record_id, "40", location, "21", "3.2", "2026-10-19 12:00:00")


@pytest.fixture
def alerts() -> list[str]:
    return []


@pytest.fixture
def gateway() -> MagicMock:
    return MagicMock(spec=WeatherGateway)


@pytest.fixture
def backend() -> MagicMock:
    mock = MagicMock(spec=HistoryService)
    mock.list_recent.return_value = []
    return mock


@pytest.fixture
def controller(gateway: MagicMock, backend: MagicMock, alerts: list[str]) -> WeatherController:
    return WeatherController(gateway, backend, alerts.append)


class TestMount:
    def test_default_city_not_persisted(
        self, controller, gateway, backend, paris_reading: Reading
    ):
        gateway.fetch_reading.return_value = paris_reading
        backend.list_recent.return_value = [_record(1)]

        state = controller.mount()
        gateway.fetch_reading.assert_called_once_with("London")
        backend.append.assert_not_called()
        assert state.reading == paris_reading
        assert state.history == (_record(1),)
        assert state.show_history is False

    def test_history_loads_even_if_lookup_fails(self, controller, gateway, backend, alerts):
        gateway.fetch_reading.side_effect = ProviderError("Invalid API key", 401)
        backend.list_recent.return_value = [_record(1)]

        state = controller.mount()
        assert state.reading is None
        assert state.history == (_record(1),)
        assert alerts == ["Invalid API key"]


class TestSearch:
    def test_success_persists_then_reloads(
        self, controller, gateway, backend, paris_reading: Reading
    ):
        gateway.fetch_reading.return_value = paris_reading
        backend.append.return_value = _record(5)
        backend.list_recent.return_value = [_record(5)]

        result = controller.search("Paris")
        assert result == paris_reading
        backend.append.assert_called_once_with(paris_reading)
        backend.list_recent.assert_called_once_with(10)
        assert controller.state.history == (_record(5),)

    @pytest.mark.parametrize("city", ["", "   "])
    def test_empty_input(self, controller, gateway, backend, alerts, city):
        before = controller.state
        assert controller.search(city) is None
        assert alerts == ["Please enter a city name!"]
        gateway.fetch_reading.assert_not_called()
        backend.append.assert_not_called()
        assert controller.state is before

    def test_provider_error_clears_reading(
        self, controller, gateway, backend, alerts, paris_reading: Reading
    ):
        gateway.fetch_reading.return_value = paris_reading
        backend.append.return_value = _record(1)
        controller.search("Paris")
        backend.reset_mock()

        gateway.fetch_reading.side_effect = ProviderError("city not found", 404)
        history_before = controller.state.history
        assert controller.search("Atlantis") is None
        assert alerts == ["city not found"]
        assert controller.state.reading is None
        assert controller.state.history == history_before
        backend.append.assert_not_called()

    def test_network_error_is_logged_not_alerted(self, controller, gateway, backend, alerts):
        gateway.fetch_reading.side_effect = NetworkError("down")
        assert controller.search("Paris") is None
        assert alerts == []
        assert controller.state.reading is None
        backend.append.assert_not_called()

    def test_save_failure_keeps_history(
        self, controller, gateway, backend, alerts, paris_reading: Reading
    ):
        backend.list_recent.return_value = [_record(1)]
        controller.load_history()
        backend.list_recent.reset_mock()

        gateway.fetch_reading.return_value = paris_reading
        backend.append.side_effect = StoreError("Database error: locked")

        assert controller.search("Paris") == paris_reading
        assert controller.state.reading == paris_reading
        assert controller.state.history == (_record(1),)
        backend.list_recent.assert_not_called()
        assert alerts == []

    def test_history_failure_keeps_previous(self, controller, backend):
        backend.list_recent.return_value = [_record(1)]
        controller.load_history()
        backend.list_recent.side_effect = NetworkError("down")
        controller.load_history()
        assert controller.state.history == (_record(1),)


class TestToggle:
    def test_no_io(self, controller, gateway, backend):
        assert controller.toggle_history().show_history is True
        assert controller.toggle_history().show_history is False
        gateway.fetch_reading.assert_not_called()
        backend.list_recent.assert_not_called()


class TestEndToEnd:
    @pytest.fixture
    def live(self, history: HistoryService, alerts: list[str]) -> WeatherController:
        client = OpenWeatherClient(api_key="test-key", base_url="https://owm.test")
        return WeatherController(WeatherGateway(client), history, alerts.append)

    @respx.mock
    def test_paris(self, live: WeatherController, history: HistoryService, paris_response: dict):
        history.append({"humidity": "70", "location": "Oslo", "temperature": "4", "windSpeed": "6"})
        respx.get(WEATHER_URL).mock(return_value=httpx.Response(200, json=paris_response))

        reading = live.search("Paris")
        assert reading == Reading(21, 40, 3.2, "Paris", IconCategory.CLEAR)
        assert live.state.reading == reading

        head = live.state.history[0]
        assert head.location == "Paris"
        assert (head.temperature, head.humidity, head.wind_speed) == ("21", "40", "3.2")
        assert head.id == max(r.id for r in live.state.history)

    @respx.mock
    def test_not_found(self, live: WeatherController, history: HistoryService, alerts: list[str]):
        respx.get(WEATHER_URL).mock(
            return_value=httpx.Response(404, json={"cod": "404", "message": "city not found"})
        )

        assert live.search("Atlantis") is None
        assert alerts == ["city not found"]
        assert live.state.reading is None
        assert history.list_recent() == []

    @respx.mock
    def test_empty_search_issues_no_request(self, live: WeatherController, alerts: list[str]):
        route = respx.get(WEATHER_URL).mock(return_value=httpx.Response(200, json={}))

        assert live.search("") is None
        assert not route.called
        assert alerts == ["Please enter a city name!"]


class TestMalformedResponse:
    def test_logged_without_alert(self, controller, gateway, backend, alerts,
                                  paris_reading: Reading):
        gateway.fetch_reading.return_value = paris_reading
        backend.append.return_value = _record(1)
        controller.search("Paris")

        gateway.fetch_reading.side_effect = MalformedResponseError("Unexpected provider response")
        assert controller.search("Paris") is None
        assert alerts == []
        assert controller.state.reading is None

    @respx.mock
    def test_invalid_json_body(self, history: HistoryService, alerts: list[str]):
        client = OpenWeatherClient(api_key="test-key", base_url="https://owm.test")
        live = WeatherController(WeatherGateway(client), history, alerts.append)
        respx.get(WEATHER_URL).mock(return_value=httpx.Response(200, text="<html>"))

        assert live.search("Paris") is None
        assert alerts == []
        assert history.list_recent() == []
