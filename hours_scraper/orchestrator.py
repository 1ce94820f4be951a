"""
Main orchestrator for the business hours extractor.
Coordinates fetching, candidate discovery, schedule parsing and scoring.
"""

import time
from datetime import datetime
from typing import Any, Iterable, List, Optional, Tuple

import pytz

from .browser import DocumentFetcher, HttpFetcher, create_fetcher
from .document import HtmlDocument
from .errors import ExtractionError
from .extractors import CandidateFinder, LocationExtractor
from .models import (
    ExtractorConfig,
    ExtractionResult,
    ExtractionSource,
    HoursCandidates,
    LocationsListResult,
    RawCounts,
    SingleLocationResult,
)
from .output import JsonResultWriter
from .services import ScheduleParser, merge_by_day, complete_week
from .utils import init_logger, get_logger

STRUCTURED_DATA_CONFIDENCE = 0.9
HTML_CONTENT_CONFIDENCE = 0.8
DEFAULT_CONFIDENCE = 0.5
LOW_CONFIDENCE = 0.3

LOCATIONS_FOUND_CONFIDENCE = 0.8
NO_LOCATIONS_CONFIDENCE = 0.3

OPENING_HOURS_FIELDS = ('openingHours', 'openingHoursSpecification')


class HoursExtractionOrchestrator:
    """
    Turn a web page into a weekly schedule or a list of locations.

    extract() fetches the page; extract_from_html() runs the parsing
    pipeline on markup already in hand and never raises for odd input.
    """

    def __init__(
        self,
        config: Optional[ExtractorConfig] = None,
        fetcher: Optional[DocumentFetcher] = None,
        schedule_parser: Optional[ScheduleParser] = None,
        candidate_finder: Optional[CandidateFinder] = None,
        location_extractor: Optional[LocationExtractor] = None,
    ):
        self.config = config or ExtractorConfig()
        self.fetcher = fetcher or HttpFetcher(self.config)
        self.schedule_parser = schedule_parser or ScheduleParser()
        self.candidate_finder = candidate_finder or CandidateFinder()
        self.location_extractor = location_extractor or LocationExtractor(self.schedule_parser)
        self.logger = get_logger()

    async def extract(
        self,
        url: str,
        timezone: Optional[str] = None,
        country: Optional[str] = None
    ) -> ExtractionResult:
        """
        Fetch a page and extract its hours.

        Raises:
            ExtractionError: when the page cannot be fetched or processed
        """
        try:
            html = await self.fetcher.fetch(url)

            if self.config.debug_mode and self.config.debug_save_html:
                self.logger.save_debug_html(html, url)

            return self.extract_from_html(html, url, timezone, country)

        except ExtractionError:
            raise
        except Exception as e:
            raise ExtractionError(f"Failed to process business hours: {e}", url=url) from e

    def extract_from_html(
        self,
        html: str,
        url: str,
        timezone: Optional[str] = None,
        country: Optional[str] = None
    ) -> ExtractionResult:
        """Run the parsing pipeline on already-fetched markup."""
        timezone = timezone or self.config.timezone
        country = country or self.config.country

        document = HtmlDocument(html)
        candidates = self.candidate_finder.extract(document)

        if self.location_extractor.is_locations_list(document):
            self.logger.debug(f"{url} looks like a locations list")
            return self._locations_list(document, candidates, url, timezone, country)

        return self._single_location(candidates, url, timezone, country)

    def _locations_list(
        self,
        document: HtmlDocument,
        candidates: HoursCandidates,
        url: str,
        timezone: str,
        country: str
    ) -> LocationsListResult:
        locations = self.location_extractor.extract(document)

        return LocationsListResult(
            url=url,
            extracted_at=_now(),
            timezone=timezone,
            country=country,
            locations=locations,
            confidence=LOCATIONS_FOUND_CONFIDENCE if locations else NO_LOCATIONS_CONFIDENCE,
            source=ExtractionSource.HTML_CONTENT,
            raw_data=RawCounts(structured_data_count=len(candidates.structured_data)),
        )

    def _single_location(
        self,
        candidates: HoursCandidates,
        url: str,
        timezone: str,
        country: str
    ) -> SingleLocationResult:
        source = ExtractionSource.HTML_CONTENT
        confidence = DEFAULT_CONFIDENCE

        entries = []

        # openingHours values are detected, not decoded
        if self._find_opening_hours(candidates.structured_data):
            source = ExtractionSource.STRUCTURED_DATA
            confidence = STRUCTURED_DATA_CONFIDENCE
        else:
            for fragment in candidates.fragments:
                merge_by_day(self.schedule_parser.parse(fragment), into=entries)

            if entries:
                confidence = HTML_CONTENT_CONFIDENCE

        regular_hours = complete_week(entries)

        if all(not day.is_open or day.is_closed for day in regular_hours):
            confidence = min(confidence, LOW_CONFIDENCE)

        return SingleLocationResult(
            url=url,
            extracted_at=_now(),
            timezone=timezone,
            country=country,
            regular_hours=regular_hours,
            confidence=confidence,
            source=source,
            raw_data=RawCounts(
                structured_data_count=len(candidates.structured_data),
                hours_content_count=len(candidates.fragments),
            ),
        )

    def _find_opening_hours(self, items: Iterable[Any]) -> Optional[str]:
        """First usable openingHours string in the JSON-LD items, if any."""
        for item in _walk_structured(items):
            for field in OPENING_HOURS_FIELDS:
                value = item.get(field)
                if isinstance(value, str) and len(value.split()) >= 2:
                    self.logger.debug(f"Structured {field} found: {value!r}")
                    return value
        return None


def _walk_structured(items: Iterable[Any]):
    """Yield JSON-LD objects, looking inside top-level lists and @graph."""
    for item in items:
        if isinstance(item, list):
            yield from _walk_structured(item)
        elif isinstance(item, dict):
            yield item
            graph = item.get('@graph')
            if isinstance(graph, list):
                yield from _walk_structured(graph)


def _now() -> datetime:
    return datetime.now(pytz.utc)


async def run_extraction(config: ExtractorConfig) -> Tuple[List[ExtractionResult], List[ExtractionError]]:
    """
    Extract hours for every configured URL, one after another, and write
    the results file.

    Returns:
        (results, failures)
    """
    logger = init_logger(
        debug_mode=config.debug_mode,
        debug_log_file=config.debug_log_file if config.debug_mode else None
    )

    logger.print_header("Business Hours Extraction")

    start_time = time.time()

    results: List[ExtractionResult] = []
    failures: List[ExtractionError] = []

    writer = JsonResultWriter(output_file=config.output_file)

    progress = logger.create_progress()
    task = None
    if progress:
        task = progress.add_task("Extracting", total=len(config.urls))
        progress.start()

    try:
        async with create_fetcher(config) as fetcher:
            orchestrator = HoursExtractionOrchestrator(config=config, fetcher=fetcher)

            for url in config.urls:
                logger.info(f"Processing: {url}")

                try:
                    result = await orchestrator.extract(url, config.timezone, config.country)
                except ExtractionError as e:
                    logger.error(f"Failed: {url}: {e}")
                    failures.append(e)
                else:
                    results.append(result)
                    logger.success(f"Completed: {url} (confidence {result.confidence:.1f})")

                if progress:
                    progress.advance(task)
    finally:
        if progress:
            progress.stop()

    writer.write(results, failures)

    logger.print_table(
        "Results",
        [_summary_row(result) for result in results],
        ["URL", "Mode", "Source", "Confidence", "Found"]
    )

    logger.print_summary(
        total=len(config.urls),
        successful=len(results),
        failed=len(failures),
        duration=time.time() - start_time
    )

    logger.info(f"Output written to: {config.output_file}")

    return results, failures


def _summary_row(result: ExtractionResult) -> list:
    if isinstance(result, LocationsListResult):
        mode, found = "locations", f"{result.location_count} location(s)"
    else:
        open_days = sum(1 for day in result.regular_hours if day.is_open)
        mode, found = "single", f"{open_days} open day(s)"
    return [result.url, mode, result.source.value, f"{result.confidence:.1f}", found]
