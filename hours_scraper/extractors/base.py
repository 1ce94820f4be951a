"""
Base extractor class.
All extractors inherit from this to ensure consistent interface.
"""

from abc import ABC, abstractmethod
from typing import Any

from ..document import HtmlDocument
from ..utils import get_logger


class BaseExtractor(ABC):
    """
    Abstract base class for all extractors.
    Extractors are synchronous and side-effect free: given a parsed
    document they return plain data, never raising for odd markup.
    """

    def __init__(self):
        self.logger = get_logger()

    @abstractmethod
    def extract(self, document: HtmlDocument) -> Any:
        """
        Extract data from a parsed page.

        Args:
            document: Parsed HTML page

        Returns:
            Extracted data (empty when nothing was found)
        """
        pass

    @staticmethod
    def _within(text: str, minimum: int, maximum: int) -> bool:
        """True when minimum < len(text) < maximum."""
        return minimum < len(text) < maximum
