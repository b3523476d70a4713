"""Exception hierarchy shared by the gateway, the history store and the UI."""


class WeatherlogError(Exception):
    """Base class for all weatherlog errors."""


class EmptyInputError(WeatherlogError):
    """Raised when a lookup is attempted with an empty city name."""


class ProviderError(WeatherlogError):
    """Raised when the weather provider rejects a request or returns garbage."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NetworkError(WeatherlogError):
    """Raised on transport failure (DNS, connect, read timeout)."""


class ValidationError(WeatherlogError):
    """Raised when a history payload is missing a required field."""


class StoreError(WeatherlogError):
    """Raised when the history store cannot be read or written."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class MalformedResponseError(WeatherlogError):
    """Raised when a 2xx provider body cannot be parsed into a Reading."""
