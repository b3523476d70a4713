"""Plain-text renderers for the current reading and the history panel."""

from datetime import UTC, datetime

from weatherlog.models.reading import HistoryRecord, IconCategory, Reading
from weatherlog.ui.state import ViewState

ICON_GLYPHS: dict[IconCategory, str] = {
    IconCategory.CLEAR: "☀",
    IconCategory.CLOUDS: "☁",
    IconCategory.DRIZZLE: "🌦",
    IconCategory.RAIN: "🌧",
    IconCategory.SNOW: "❄",
}

NO_HISTORY = "No search history available yet"


def format_timestamp(value: str, tz=None) -> str:
    """Store timestamp to e.g. 'Dec 12, 2024, 03:45 PM'.

    Stored values are naive UTC; they are shown in `tz` (local time when
    None). Unparseable input is returned unchanged.
    """
    try:
        dt = datetime.fromisoformat(value)
    except (TypeError, ValueError):
        return value
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    dt = dt.astimezone(tz)
    return f"{dt:%b} {dt.day}, {dt:%Y, %I:%M %p}"


def format_reading(reading: Reading) -> str:
    lines = [
        f"{ICON_GLYPHS[reading.icon]}  {reading.icon.value}",
        f"{reading.temperature_celsius}°c",
        reading.location,
        f"Humidity: {reading.humidity_percent} % | Wind Speed: {reading.wind_speed} Km/h",
    ]
    return "\n".join(lines)


def format_history_entry(record: HistoryRecord, tz=None) -> str:
    return "\n".join([
        f"📍 {record.location}",
        f"   {format_timestamp(record.time_search, tz)}",
        f"   {record.temperature}°C | {record.humidity}% | {record.wind_speed} Km/h",
    ])


def format_history(records: tuple[HistoryRecord, ...] | list[HistoryRecord], tz=None) -> str:
    if not records:
        return NO_HISTORY
    return "\n".join(format_history_entry(r, tz) for r in records)


def toggle_label(show_history: bool) -> str:
    return "[Hide History]" if show_history else "[Show History]"


def render(state: ViewState, tz=None) -> str:
    """Whole screen: reading (if any), toggle, and the panel when shown."""
    parts = []
    if state.reading is not None:
        parts.append(format_reading(state.reading))
    parts.append(toggle_label(state.show_history))
    if state.show_history:
        parts.append("Search History")
        parts.append(format_history(state.history, tz))
    return "\n\n".join(parts)
