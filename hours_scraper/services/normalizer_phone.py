"""
Phone number normalization service.
Listing pages print numbers in many shapes; records store DDD-DDD-DDDD.
"""

import re
from typing import Optional

from ..utils.patterns import PHONE_PATTERNS


class PhoneNormalizer:
    """
    Find and normalize US phone numbers.
    """

    def __init__(self, patterns=PHONE_PATTERNS):
        self.patterns = patterns

    @staticmethod
    def extract_digits(phone: str) -> Optional[str]:
        """Extract exactly 10 digits from a phone number."""
        if not phone:
            return None

        digits = re.sub(r'\D', '', phone)
        return digits if len(digits) == 10 else None

    @staticmethod
    def normalize(raw_phone: str) -> Optional[str]:
        """
        Format a phone number as DDD-DDD-DDDD.

        Examples:
          "(217) 555-0100" -> "217-555-0100"
          "217.555.0100"   -> "217-555-0100"
        """
        digits = PhoneNormalizer.extract_digits(raw_phone)
        if not digits:
            return None

        return f"{digits[:3]}-{digits[3:6]}-{digits[6:]}"

    def find(self, text: str) -> Optional[str]:
        """Return the first phone number in text, normalized, or None."""
        if not text:
            return None

        for pattern in self.patterns:
            match = pattern.search(text)
            if match:
                return self.normalize(match.group(0))

        return None
