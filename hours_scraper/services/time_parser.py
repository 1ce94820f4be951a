"""
Clock time and time range parsing.
Turns tokens like "5:30 a.m." or "9am - 5pm" into ClockTime / TimeRange values.
"""

import re
from typing import Optional

from ..models import ClockTime, TimeRange
from ..utils.patterns import (
    TIME_PREFIX_PATTERN,
    TIME_SUFFIX_PATTERN,
    TIME_12H_MINUTES,
    TIME_12H_HOUR_ONLY,
    TIME_24H,
    RANGE_LABEL_PATTERN,
    RANGE_SEPARATORS,
)

_TRAILING_PUNCTUATION = ' .,;:!'


def _strip_noise(text: str) -> str:
    text = TIME_SUFFIX_PATTERN.sub('', text.strip())
    return text.rstrip(_TRAILING_PUNCTUATION)


def _to_24_hour(hour: int, meridiem: str) -> int:
    if meridiem == 'p' and hour != 12:
        return hour + 12
    if meridiem == 'a' and hour == 12:
        return 0
    return hour


def _clock(hour: int, minute: int) -> Optional[ClockTime]:
    if 0 <= hour <= 23 and 0 <= minute <= 59:
        return ClockTime(hour=hour, minute=minute)
    return None


def parse_time(text: Optional[str]) -> Optional[ClockTime]:
    """
    Parse a single clock time.

    Examples:
      "9:30 PM"   -> 21:30
      "12:00 AM"  -> 00:00
      "from 9 am" -> 09:00
      "17:00"     -> 17:00
      "25:00"     -> None

    Returns None for anything that is not a valid time.
    """
    if not text:
        return None

    normalized = TIME_PREFIX_PATTERN.sub('', text.strip().lower())
    normalized = _strip_noise(normalized)
    if not normalized:
        return None

    match = TIME_12H_MINUTES.search(normalized)
    if match:
        hour = _to_24_hour(int(match.group(1)), match.group(3))
        return _clock(hour, int(match.group(2)))

    match = TIME_12H_HOUR_ONLY.search(normalized)
    if match:
        return _clock(_to_24_hour(int(match.group(1)), match.group(2)), 0)

    match = TIME_24H.match(normalized)
    if match:
        return _clock(int(match.group(1)), int(match.group(2)))

    return None


def _separator_pattern(separator: str) -> re.Pattern:
    token = re.escape(separator)
    if separator.isalpha():
        # whole words only ("to" must not split "Stop")
        token = r'\b' + token + r'\b'
    return re.compile(r'(.+?)\s*' + token + r'\s*(.+)', re.IGNORECASE | re.DOTALL)


_SEPARATOR_PATTERNS = [_separator_pattern(sep) for sep in RANGE_SEPARATORS]


def parse_time_range(text: Optional[str]) -> Optional[TimeRange]:
    """
    Parse an opening/closing pair such as "9:00 AM - 5:00 PM" or
    "5:30 a.m. to 9 p.m.".

    The first separator (in priority order) that splits the text decides
    the halves; if those halves are not both times the range is rejected.
    """
    if not text:
        return None

    cleaned = RANGE_LABEL_PATTERN.sub('', text.strip())

    for pattern in _SEPARATOR_PATTERNS:
        match = pattern.match(cleaned)
        if not match:
            continue

        open_time = parse_time(match.group(1).strip())
        close_time = parse_time(_strip_noise(match.group(2)))

        if open_time and close_time:
            return TimeRange(open=open_time, close=close_time)
        return None

    return None
