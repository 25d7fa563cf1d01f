"""
Conversion of raw XML field text into typed values

Blank means empty or whitespace only. Each helper maps blank input to its
documented default and raises FormatError on anything it cannot parse.
"""

import logging
import re
from datetime import date, datetime, time
from typing import Tuple

from .exceptions import FormatError
from .models import ContentRating, Status, Weekday

logger = logging.getLogger(__name__)

INT_PATTERN = re.compile(r"[+-]?[0-9]+")
DECIMAL_PATTERN = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)")
DATE_FORMAT = "%Y-%m-%d"
TIME_FORMATS = ["%I:%M %p", "%I:%M%p", "%I %p", "%I%p", "%H:%M", "%H:%M:%S"]

STATUSES = {
    "Continuing": Status.CONTINUING,
    "Ended": Status.ENDED,
    "Unknown": Status.UNKNOWN,
}

WEEKDAYS = {day.value: day for day in Weekday}

CONTENT_RATINGS = {
    "TV-Y": ContentRating.TV_Y,
    "TV-Y7": ContentRating.TV_Y7,
    "TV-G": ContentRating.TV_G,
    "TV-PG": ContentRating.TV_PG,
    "TV-14": ContentRating.TV_14,
    "TV-MA": ContentRating.TV_MA,
}


def is_blank(text: str | None) -> bool:
    return text is None or not text.strip()


def optional_text(text: str) -> str | None:
    """Return text unchanged, or None when blank"""
    return None if is_blank(text) else text


def optional_int(text: str, field: str = "value") -> int | None:
    if is_blank(text):
        return None
    value = text.strip()
    if not INT_PATTERN.fullmatch(value):
        raise FormatError(field, text, "integer")
    return int(value)


def int_or_default(text: str, default: int = 0, field: str = "value") -> int:
    """Parse an integer, falling back to default only for blank input"""
    value = optional_int(text, field)
    return default if value is None else value


def optional_float(text: str, field: str = "value") -> float | None:
    if is_blank(text):
        return None
    value = text.strip()
    if not DECIMAL_PATTERN.fullmatch(value):
        raise FormatError(field, text, "decimal")
    return float(value)


def parse_date(text: str, field: str = "value") -> date | None:
    if is_blank(text):
        return None
    try:
        return datetime.strptime(text.strip(), DATE_FORMAT).date()
    except ValueError as e:
        raise FormatError(field, text, "date (YYYY-MM-DD)") from e


def parse_time(text: str, field: str = "value") -> time | None:
    """Parse an air time such as '9:00 PM' or '21:00'"""
    if is_blank(text):
        return None

    value = text.strip()
    for fmt in TIME_FORMATS:
        try:
            return datetime.strptime(value, fmt).time()
        except ValueError:
            continue

    raise FormatError(field, text, "time of day")


def parse_weekday(text: str, field: str = "value") -> Weekday | None:
    if is_blank(text):
        return None
    try:
        return WEEKDAYS[text.strip()]
    except KeyError as e:
        raise FormatError(field, text, "day of week") from e


def parse_status(text: str, field: str = "value") -> Status:
    if is_blank(text):
        return Status.UNKNOWN
    try:
        return STATUSES[text.strip()]
    except KeyError as e:
        raise FormatError(field, text, "series status") from e


def parse_content_rating(text: str) -> ContentRating:
    """
    Map a raw certification string to a ContentRating

    Unrecognized certifications map to UNKNOWN rather than failing the whole
    show, and are logged so new values can be added to the table.
    """
    if is_blank(text):
        return ContentRating.UNKNOWN

    rating = CONTENT_RATINGS.get(text.strip())
    if rating is None:
        logger.warning(f"Unrecognized content rating {text!r}, using Unknown")
        return ContentRating.UNKNOWN
    return rating


def split_pipe_list(text: str) -> Tuple[str, ...]:
    """Split a '|'-delimited field, dropping empty segments"""
    if not text:
        return ()
    return tuple(part for part in text.split("|") if part)
