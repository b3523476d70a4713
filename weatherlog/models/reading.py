"""Weather reading and history record models."""

from dataclasses import dataclass
from enum import StrEnum


def format_number(value: int | float) -> str:
    """Shortest text for a provider number: 3.0 becomes "3", 0.0 becomes "0"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class IconCategory(StrEnum):
    CLEAR = "clear"
    CLOUDS = "clouds"
    DRIZZLE = "drizzle"
    RAIN = "rain"
    SNOW = "snow"


@dataclass(frozen=True)
class Reading:
    temperature_celsius: int  # floored
    humidity_percent: int
    wind_speed: float
    location: str
    icon: IconCategory

    def to_payload(self) -> dict[str, str]:
        """Stringified append payload, keyed the way the history API expects."""
        return {
            "humidity": format_number(self.humidity_percent),
            "location": self.location,
            "temperature": format_number(self.temperature_celsius),
            "windSpeed": format_number(self.wind_speed),
        }


@dataclass(frozen=True)
class HistoryRecord:
    id: int
    humidity: str
    location: str
    temperature: str
    wind_speed: str
    time_search: str  # YYYY-MM-DD HH:MM:SS, UTC

    @classmethod
    def from_row(cls, row: dict) -> "HistoryRecord":
        """Build a record from a DB row or a history API item."""
        wind = row["wind_speed"] if "wind_speed" in row else row["windSpeed"]
        return cls(
            id=int(row["id"]),
            humidity=str(row["humidity"]),
            location=str(row["location"]),
            temperature=str(row["temperature"]),
            wind_speed=str(wind),
            time_search=str(row["time_search"]),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "humidity": self.humidity,
            "location": self.location,
            "temperature": self.temperature,
            "windSpeed": self.wind_speed,
            "time_search": self.time_search,
        }
