"""
Data extraction modules.
Each extractor handles a specific type of data extraction.
"""

from .base import BaseExtractor
from .candidates import CandidateFinder
from .locations import LocationExtractor

__all__ = [
    'BaseExtractor',
    'CandidateFinder',
    'LocationExtractor',
]
