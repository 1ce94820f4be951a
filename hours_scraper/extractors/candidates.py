"""
Hours candidate discovery.
Finds JSON-LD blocks and text fragments that probably describe opening hours.
"""

import json
from typing import Any, List

from .base import BaseExtractor
from ..document import HtmlDocument
from ..models import HoursCandidates
from ..utils.patterns import (
    HOURS_KEYWORDS,
    HOURS_HEADING_KEYWORDS,
    DAY_NAMES,
    CANDIDATE_TEXT_SELECTOR,
    HOURS_HEADING_SELECTOR,
    has_time_signal,
)


class CandidateFinder(BaseExtractor):
    """
    Collect hours candidates from a page.

    Text nodes pass a two-stage filter: they must mention an hours keyword
    or a time, and then must actually carry a weekday name or a time.
    Headings such as "Hours" or "Visiting Hours" contribute the text that
    follows them.
    """

    MIN_TEXT_LENGTH = 10
    MAX_TEXT_LENGTH = 500

    def __init__(self, keywords=HOURS_KEYWORDS, heading_keywords=HOURS_HEADING_KEYWORDS):
        super().__init__()
        self.keywords = tuple(keywords)
        self.heading_keywords = tuple(heading_keywords)

    def extract(self, document: HtmlDocument) -> HoursCandidates:
        structured = self.extract_structured_data(document)
        fragments = self.find_hours_content(document)

        self.logger.debug(
            f"Found {len(structured)} structured data block(s), "
            f"{len(fragments)} hours fragment(s)"
        )

        return HoursCandidates(structured_data=structured, fragments=fragments)

    def extract_structured_data(self, document: HtmlDocument) -> List[Any]:
        """Decode every JSON-LD block, skipping malformed ones."""
        items = []
        for block in document.json_ld_blocks():
            try:
                items.append(json.loads(block))
            except (json.JSONDecodeError, ValueError) as e:
                self.logger.debug(f"Skipping invalid JSON-LD block: {e}")
                continue
        return items

    def find_hours_content(self, document: HtmlDocument) -> List[str]:
        """Text fragments likely to contain hours, de-duplicated in page order."""
        content = []

        for element in document.select(CANDIDATE_TEXT_SELECTOR):
            text = document.text_of(element)
            if not self._within(text, self.MIN_TEXT_LENGTH, self.MAX_TEXT_LENGTH):
                continue

            lower = text.lower()
            if not (any(keyword in lower for keyword in self.keywords) or has_time_signal(text)):
                continue

            if any(day in lower for day in DAY_NAMES) or has_time_signal(text):
                content.append(text)

        for heading in document.select(HOURS_HEADING_SELECTOR):
            title = document.text_of(heading).lower()
            if not any(keyword in title for keyword in self.heading_keywords):
                continue

            next_text = document.text_of(document.next_sibling_element(heading))
            if next_text and len(next_text) < self.MAX_TEXT_LENGTH:
                content.append(next_text)

            sibling_text = document.text_of(document.first_sibling(heading, ('p', 'div')))
            if sibling_text and len(sibling_text) < self.MAX_TEXT_LENGTH:
                content.append(sibling_text)

        return list(dict.fromkeys(content))
