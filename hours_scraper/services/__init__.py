"""
Service modules for parsing times, days, schedules and phone numbers.
"""

from .normalizer_phone import PhoneNormalizer
from .time_parser import parse_time, parse_time_range
from .day_resolver import DayResolver
from .schedule_parser import ScheduleParser, merge_by_day, complete_week

__all__ = [
    'PhoneNormalizer',
    'parse_time',
    'parse_time_range',
    'DayResolver',
    'ScheduleParser',
    'merge_by_day',
    'complete_week',
]
