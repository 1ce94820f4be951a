"""
Day name resolution.
Maps tokens such as "Mon", "tu" or "Wednesday" to canonical weekdays.
"""

import re
from typing import Dict, List, Mapping, Optional

from ..models import Weekday, WEEKDAYS
from ..utils.patterns import DAY_ABBREVIATIONS

_WORD_PATTERN = re.compile(r'[a-z]+')


class DayResolver:
    """
    Resolve day tokens against an abbreviation table.

    A token matches when it is a known abbreviation, or when a canonical
    day name starts with it ("tues" -> tuesday). No typo tolerance.
    """

    def __init__(self, abbreviations: Mapping[str, str] = DAY_ABBREVIATIONS):
        self.abbreviations: Dict[str, Weekday] = {
            token.lower(): Weekday(day) for token, day in abbreviations.items()
        }

    def resolve(self, token: Optional[str]) -> Optional[Weekday]:
        """Return the weekday a single token names, or None."""
        if not token:
            return None

        token = token.strip().lower()
        if token in self.abbreviations:
            return self.abbreviations[token]

        # Single letters are ambiguous (s, t)
        if len(token) < 2:
            return None

        for day in WEEKDAYS:
            if day.value.startswith(token):
                return day

        return None

    def find_days(self, text: str) -> List[Weekday]:
        """
        Collect every weekday mentioned in a span of text, in order of
        discovery and without duplicates.
        """
        lowered = text.lower()
        found: List[Weekday] = []

        for word in _WORD_PATTERN.findall(lowered):
            day = self.resolve(word)
            if day and day not in found:
                found.append(day)

        # Plural or run-together forms ("mondays", "monday-friday")
        for day in WEEKDAYS:
            if day.value in lowered and day not in found:
                found.append(day)

        return found
