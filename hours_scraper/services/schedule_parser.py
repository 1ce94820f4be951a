"""
Free-text schedule parsing.
Turns a block like "Mon - Fri: 9am-5pm. Sunday: Closed" into per-day entries.
"""

from typing import List, Optional

from ..models import DaySchedule, TimeRange, ClockTime, Weekday, WEEKDAYS
from ..utils import get_logger
from ..utils.patterns import (
    HOURS_24_PATTERN,
    HOURS_DAILY_PATTERN,
    HOURS_CALL_PATTERN,
    SCHEDULE_LINE_SPLIT,
    DAY_RANGE_LINE,
    DAY_LIST_LINE,
    SINGLE_DAY_LINE,
)
from .day_resolver import DayResolver
from .time_parser import parse_time_range

ALL_DAY = TimeRange(open=ClockTime(hour=0, minute=0), close=ClockTime(hour=23, minute=59))


def merge_by_day(entries: List[DaySchedule], into: Optional[List[DaySchedule]] = None) -> List[DaySchedule]:
    """
    Merge entries into an accumulated list, one entry per day.
    A later entry for a day replaces the earlier one wholesale.
    """
    merged = into if into is not None else []
    for entry in entries:
        for i, existing in enumerate(merged):
            if existing.day == entry.day:
                merged[i] = entry.model_copy()
                break
        else:
            merged.append(entry.model_copy())
    return merged


def complete_week(entries: List[DaySchedule]) -> List[DaySchedule]:
    """
    Drop unfinished entries, mark missing days closed and return all
    seven days in Monday..Sunday order.
    """
    week = [entry for entry in entries if entry.is_finalized]
    present = {entry.day for entry in week}

    for day in WEEKDAYS:
        if day not in present:
            week.append(DaySchedule.closed(day))

    week.sort(key=lambda entry: entry.day.order)
    return week


class ScheduleParser:
    """
    Parse a block of text into DaySchedule entries.

    The output may cover fewer than seven days and may name a day more
    than once; callers merge and backfill.

    Line shapes, tried per line:
    - "Monday - Friday: 9am-5pm"   (day range; ends processing of the line)
    - "Mon, Wed, Fri: 9am-5pm"     (day list)
    - "Sunday: Closed"             (single day)
    """

    MAX_LINE_LENGTH = 200

    def __init__(self, day_resolver: Optional[DayResolver] = None):
        self.days = day_resolver or DayResolver()
        self.logger = get_logger()

    def parse(self, text: str) -> List[DaySchedule]:
        """Parse one candidate fragment."""
        if not text:
            return []

        if HOURS_24_PATTERN.search(text):
            return self.all_week(ALL_DAY)

        if HOURS_DAILY_PATTERN.search(text):
            time_range = parse_time_range(text)
            if time_range:
                return self.all_week(time_range)

        results: List[DaySchedule] = []

        for line in SCHEDULE_LINE_SPLIT.split(text):
            line = line.strip()
            if not line or len(line) > self.MAX_LINE_LENGTH:
                continue

            range_entries = self._parse_day_range(line)
            if range_entries is not None:
                results.extend(range_entries)
                continue

            results.extend(self._parse_day_list(line))
            results.extend(self._parse_single_day(line))

        if results:
            self.logger.debug(f"Parsed {len(results)} day entries from fragment: {text[:60]!r}")

        return results

    def parse_location_hours(self, text: str) -> List[DaySchedule]:
        """
        Parse the hours of one location card.
        "Call for hours" yields an empty schedule, which is not the same as
        closed every day.
        """
        if not text:
            return []

        if HOURS_24_PATTERN.search(text):
            return self.all_week(ALL_DAY)

        if HOURS_CALL_PATTERN.search(text):
            return []

        return self.parse(text)

    @staticmethod
    def all_week(time_range: TimeRange) -> List[DaySchedule]:
        return [DaySchedule.open_with(day, time_range) for day in WEEKDAYS]

    def _parse_day_range(self, line: str) -> Optional[List[DaySchedule]]:
        """Returns None when the line is not a resolvable day range."""
        match = DAY_RANGE_LINE.search(line)
        if not match:
            return None

        start = self.days.resolve(match.group(1))
        end = self.days.resolve(match.group(2))
        if start is None or end is None or start.order > end.order:
            return None

        days = WEEKDAYS[start.order:end.order + 1]
        return self._apply(days, match.group(3).strip())

    def _parse_day_list(self, line: str) -> List[DaySchedule]:
        match = DAY_LIST_LINE.search(line)
        if not match:
            return []

        days = self.days.find_days(match.group(1).strip())
        if not days:
            return []

        return self._apply(days, match.group(2).strip())

    def _parse_single_day(self, line: str) -> List[DaySchedule]:
        match = SINGLE_DAY_LINE.search(line)
        if not match:
            return []

        day = self.days.resolve(match.group(1))
        if day is None:
            return []

        hours_text = match.group(2).strip()
        if 'closed' in hours_text.lower():
            return [DaySchedule.closed(day)]

        time_range = parse_time_range(hours_text)
        if time_range:
            return [DaySchedule.open_with(day, time_range)]

        return []

    @staticmethod
    def _apply(days: List[Weekday], hours_text: str) -> List[DaySchedule]:
        """Open every day with the parsed range, otherwise mark them closed."""
        time_range = None
        if 'closed' not in hours_text.lower():
            time_range = parse_time_range(hours_text)

        if time_range:
            return [DaySchedule.open_with(day, time_range) for day in days]
        return [DaySchedule.closed(day) for day in days]
