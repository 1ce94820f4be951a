"""
Multi-location listing extractor.
Decomposes "Find a location" style pages into one record per location.

Strategies:
1. Repeating cards (article / *location* / *result* / *card* elements)
2. Line-by-line reconstruction of the page text, anchored on addresses
"""

import re
from typing import List, Optional, Set

from .base import BaseExtractor
from ..document import HtmlDocument
from ..models import LocationRecord, DaySchedule
from ..services import PhoneNormalizer, ScheduleParser, merge_by_day, complete_week
from ..utils.patterns import (
    ADDRESS_PATTERN,
    CATEGORY_PATTERN,
    FACILITY_CATEGORIES,
    TIME_SIGNAL_PATTERN,
    DAY_LEADING_PATTERN,
    LOCATION_CARD_SELECTOR,
    LOCATION_NAME_SELECTOR,
    clean_whitespace,
)

UNKNOWN_LOCATION = 'Unknown Location'


class LocationExtractor(BaseExtractor):
    """
    Extract location records (name, address, phone, category, hours).
    """

    MIN_CARD_LENGTH = 50
    MAX_CARD_LENGTH = 3000
    MAX_FALLBACK_NAME_LENGTH = 100

    def __init__(
        self,
        schedule_parser: Optional[ScheduleParser] = None,
        phone_normalizer: Optional[PhoneNormalizer] = None,
        address_pattern: re.Pattern = ADDRESS_PATTERN,
        category_pattern: re.Pattern = CATEGORY_PATTERN,
        categories=FACILITY_CATEGORIES,
    ):
        super().__init__()
        self.schedule_parser = schedule_parser or ScheduleParser()
        self.phones = phone_normalizer or PhoneNormalizer()
        self.address_pattern = address_pattern
        self.category_pattern = category_pattern
        self._categories = {category.lower(): category for category in categories}

    def is_locations_list(self, document: HtmlDocument) -> bool:
        """Heuristic: does this page list several locations?"""
        body = document.body_text().lower()
        if 'locations' not in body:
            return False

        return (
            'results' in body
            or 'showing' in body
            or document.count('article') > 1
            or document.count('[class*="location"]') > 1
        )

    def extract(self, document: HtmlDocument) -> List[LocationRecord]:
        """Extract all locations, falling back to text reconstruction."""
        locations = self._extract_from_cards(document)

        if not locations:
            self.logger.debug("No location cards found, reconstructing from page text")
            return self.extract_from_lines(document.body_lines())

        return self._dedupe(locations)

    def extract_from_lines(self, lines: List[str]) -> List[LocationRecord]:
        """Rebuild location records from an ordered sequence of text lines."""
        reconstructor = _LineReconstructor(self)
        for line in lines:
            reconstructor.feed(line.strip())
        return reconstructor.finish()

    # ------------------------------------------------------------------
    # Field extraction
    # ------------------------------------------------------------------

    def find_address(self, text: str) -> Optional[re.Match]:
        return self.address_pattern.search(text)

    def find_category(self, text: str) -> Optional[str]:
        match = self.category_pattern.search(text)
        if not match:
            return None
        return self._categories.get(match.group(1).lower(), match.group(1))

    def parse_hours(self, text: str) -> List[DaySchedule]:
        """Per-location hours as a full week, or empty when none are given."""
        entries = self.schedule_parser.parse_location_hours(text)
        if not entries:
            return []
        return complete_week(merge_by_day(entries))

    # ------------------------------------------------------------------
    # Card strategy
    # ------------------------------------------------------------------

    def _extract_from_cards(self, document: HtmlDocument) -> List[LocationRecord]:
        locations = []
        seen_addresses: Set[str] = set()

        for element in document.select(LOCATION_CARD_SELECTOR):
            text = document.text_of(element)
            if not self.MIN_CARD_LENGTH <= len(text) <= self.MAX_CARD_LENGTH:
                continue

            flat = clean_whitespace(text)

            name = clean_whitespace(document.text_of(document.find_first(element, LOCATION_NAME_SELECTOR)))
            if not name:
                first_line = text.split('\n')[0].strip()
                if len(first_line) < self.MAX_FALLBACK_NAME_LENGTH:
                    name = first_line

            address_match = self.find_address(flat)
            address = address_match.group(1).strip() if address_match else None

            if address:
                if address.lower() in seen_addresses:
                    continue
                seen_addresses.add(address.lower())

            if not name and not address:
                continue

            locations.append(LocationRecord(
                name=name or UNKNOWN_LOCATION,
                address=address,
                phone=self.phones.find(flat),
                category=self.find_category(flat),
                hours=self.parse_hours(text),
            ))

        self.logger.debug(f"Extracted {len(locations)} location card(s)")
        return locations

    @staticmethod
    def _dedupe(locations: List[LocationRecord]) -> List[LocationRecord]:
        unique = []
        keys: Set[str] = set()
        for location in locations:
            if location.dedup_key not in keys:
                keys.add(location.dedup_key)
                unique.append(location)
        return unique


class _LineReconstructor:
    """
    State machine for the text fallback.

    Holds the record being assembled and the most recent category heading.
    Every unseen address starts a new record; the lines after it (until the
    next address) may fill in its phone and hours.
    """

    MIN_LINE_LENGTH = 10
    MAX_LINE_LENGTH = 500
    MIN_NAME_LENGTH = 5
    MAX_NAME_LENGTH = 150

    def __init__(self, extractor: LocationExtractor):
        self.extractor = extractor
        self.locations: List[LocationRecord] = []
        self.seen_addresses: Set[str] = set()
        self.current: Optional[LocationRecord] = None
        self.category_context: Optional[str] = None
        self.previous_line: Optional[str] = None

    def feed(self, line: str):
        if not (self.MIN_LINE_LENGTH < len(line) < self.MAX_LINE_LENGTH):
            return

        previous, self.previous_line = self.previous_line, line

        category = self.extractor.find_category(line)
        if category:
            self.category_context = category

        address_match = self.extractor.find_address(line)
        if address_match:
            address = address_match.group(1).strip()
            if address.lower() in self.seen_addresses:
                return
            self.seen_addresses.add(address.lower())

            self._flush()
            self.current = LocationRecord(
                name=self._name_for(line, address_match, previous) or UNKNOWN_LOCATION,
                address=address,
                category=self.category_context,
            )

        if self.current is None:
            return

        if not self.current.phone:
            self.current.phone = self.extractor.phones.find(line)

        if not self.current.hours:
            self.current.hours = self.extractor.parse_hours(line)

    def finish(self) -> List[LocationRecord]:
        self._flush()
        return self.locations

    def _flush(self):
        if self.current is not None and not self.current.is_empty:
            self.locations.append(self.current)
        self.current = None

    def _name_for(self, line: str, address_match: re.Match, previous: Optional[str]) -> Optional[str]:
        """Name from the line above, else from the text before the address."""
        if previous and self._usable_name(previous):
            if not TIME_SIGNAL_PATTERN.search(previous) and not DAY_LEADING_PATTERN.match(previous):
                return previous

        before = line[:address_match.start()].strip(' ,-–|')
        if self._usable_name(before):
            return before

        return None

    def _usable_name(self, text: str) -> bool:
        return self.MIN_NAME_LENGTH < len(text) < self.MAX_NAME_LENGTH
