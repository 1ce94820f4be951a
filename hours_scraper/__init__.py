"""
Business hours extraction from web pages.

    >>> import asyncio
    >>> from hours_scraper import extract
    >>> result = asyncio.run(extract("https://example.com/contact"))
    >>> result.to_dict()["regularHours"]
"""

from typing import Optional

from .errors import HoursScraperError, FetchError, ExtractionError
from .models import (
    Weekday,
    ClockTime,
    TimeRange,
    DaySchedule,
    LocationRecord,
    ExtractionSource,
    SingleLocationResult,
    LocationsListResult,
    ExtractionResult,
    ExtractorConfig,
)
from .orchestrator import HoursExtractionOrchestrator, run_extraction

__version__ = '1.0.0'


async def extract(
    url: str,
    timezone: str = "America/Chicago",
    country: str = "US",
    config: Optional[ExtractorConfig] = None
) -> ExtractionResult:
    """Fetch url and extract its business hours (or its locations)."""
    orchestrator = HoursExtractionOrchestrator(config=config)
    return await orchestrator.extract(url, timezone=timezone, country=country)


__all__ = [
    'extract',
    'run_extraction',
    'HoursExtractionOrchestrator',
    'HoursScraperError',
    'FetchError',
    'ExtractionError',
    'Weekday',
    'ClockTime',
    'TimeRange',
    'DaySchedule',
    'LocationRecord',
    'ExtractionSource',
    'SingleLocationResult',
    'LocationsListResult',
    'ExtractionResult',
    'ExtractorConfig',
]
