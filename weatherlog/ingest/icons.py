"""OpenWeatherMap icon code to local icon category."""

from weatherlog.models.reading import IconCategory

# Day ("d") and night ("n") variants collapse to the same category
ICON_CODES: dict[str, IconCategory] = {
    "01d": IconCategory.CLEAR,
    "01n": IconCategory.CLEAR,
    "02d": IconCategory.CLOUDS,
    "02n": IconCategory.CLOUDS,
    "03d": IconCategory.CLOUDS,
    "03n": IconCategory.CLOUDS,
    "04d": IconCategory.DRIZZLE,
    "04n": IconCategory.DRIZZLE,
    "09d": IconCategory.RAIN,
    "09n": IconCategory.RAIN,
    "10d": IconCategory.RAIN,
    "10n": IconCategory.RAIN,
    "13d": IconCategory.SNOW,
    "13n": IconCategory.SNOW,
}


def icon_category(code: str | None) -> IconCategory:
    """Map a provider icon code, falling back to CLEAR for unknown codes."""
    if code is None:
        return IconCategory.CLEAR
    return ICON_CODES.get(code, IconCategory.CLEAR)
