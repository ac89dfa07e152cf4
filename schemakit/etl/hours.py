"""Opening-hours parsing for LocalBusiness schemas."""

import logging
import re
from typing import List, Mapping, Set

from schemakit.models import OpeningHoursSpec

logger = logging.getLogger(__name__)

DAY_NAMES = {
    "monday": "Monday",
    "tuesday": "Tuesday",
    "wednesday": "Wednesday",
    "thursday": "Thursday",
    "friday": "Friday",
    "saturday": "Saturday",
    "sunday": "Sunday",
}
CLOSED_KEYWORD = "closed"

TIME_RANGE_REGEX = re.compile(
    r"(\d{1,2}:\d{2}\s*(?:AM|PM)?)\s*-\s*(\d{1,2}:\d{2}\s*(?:AM|PM)?)",
    re.IGNORECASE,
)
TIME_TOKEN_REGEX = re.compile(r"^(\d{1,2}):(\d{2})\s*(AM|PM)?$", re.IGNORECASE)


def parse_time_token(token: str) -> str:
    """Convert ``9:00 AM`` / ``17:30`` style tokens to 24-hour ``HH:MM``.

    Raises ValueError for anything else, including out-of-range hours such as
    ``13:00 PM`` or ``24:00``.
    """
    match = TIME_TOKEN_REGEX.match(token.strip())
    if not match:
        raise ValueError(f"unrecognised time token: {token!r}")

    hour = int(match.group(1))
    minute = int(match.group(2))
    meridiem = (match.group(3) or "").upper()

    if minute > 59:
        raise ValueError(f"minute out of range in {token!r}")
    if meridiem:
        if not 1 <= hour <= 12:
            raise ValueError(f"hour out of range for 12-hour clock in {token!r}")
        hour = hour % 12
        if meridiem == "PM":
            hour += 12
    elif hour > 23:
        raise ValueError(f"hour out of range in {token!r}")

    return f"{hour:02d}:{minute:02d}"


def normalize_day(day: str) -> str:
    return DAY_NAMES.get(day.strip().lower(), day)


def format_opening_hours(hours: Mapping[str, str]) -> List[OpeningHoursSpec]:
    """Turn ``{"monday": "9:00 AM - 5:00 PM", ...}`` into opening-hours specs.

    Days marked "Closed" are skipped. Entries without a recognisable time range
    are dropped rather than reported. Keys that normalize to the same day
    ("monday" and "Monday") yield only the first spec for that day.
    """
    specs: List[OpeningHoursSpec] = []
    seen: Set[str] = set()
    for day, text in hours.items():
        day_name = normalize_day(day)
        if day_name in seen:
            logger.debug("Dropping duplicate hours entry %r for %s", day, day_name)
            continue
        text = text or ""

        if text.strip().lower() == CLOSED_KEYWORD:
            continue

        match = TIME_RANGE_REGEX.search(text)
        if not match:
            logger.debug("Dropping hours for %s: no time range in %r", day_name, text)
            continue

        try:
            opens = parse_time_token(match.group(1))
            closes = parse_time_token(match.group(2))
        except ValueError as exc:
            logger.debug("Dropping hours for %s: %s", day_name, exc)
            continue

        seen.add(day_name)
        specs.append(OpeningHoursSpec(day_of_week=day_name, opens=opens, closes=closes))
    return specs
