"""
Data models for the business hours extractor.
All models use Pydantic for validation and serialization.
"""

from typing import Any, Optional, List, Literal, Union
from datetime import datetime
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, model_serializer, field_validator


class Weekday(str, Enum):
    """Canonical weekday, Monday first."""
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @property
    def order(self) -> int:
        """Canonical position, 0 for Monday."""
        return WEEKDAYS.index(self)


WEEKDAYS = list(Weekday)


class ExtractionSource(str, Enum):
    """Where the reported schedule came from."""
    STRUCTURED_DATA = "structured_data"
    HTML_CONTENT = "html_content"


class ClockTime(BaseModel):
    """A 24-hour wall clock time. Serialized as "HH:MM"."""
    model_config = ConfigDict(frozen=True)

    hour: int = Field(ge=0, le=23)
    minute: int = Field(default=0, ge=0, le=59)

    @model_serializer
    def _serialize(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


class TimeRange(BaseModel):
    """Opening and closing time for one stretch of a day."""
    model_config = ConfigDict(frozen=True)

    open: ClockTime
    close: ClockTime


class DaySchedule(BaseModel):
    """Hours for a single weekday."""
    model_config = ConfigDict(populate_by_name=True)

    day: Weekday
    is_open: bool = Field(default=False, alias="isOpen")
    is_closed: bool = Field(default=False, alias="isClosed")
    hours: List[TimeRange] = Field(default_factory=list)

    @classmethod
    def open_with(cls, day: Weekday, time_range: TimeRange) -> "DaySchedule":
        return cls(day=day, is_open=True, is_closed=False, hours=[time_range])

    @classmethod
    def closed(cls, day: Weekday) -> "DaySchedule":
        return cls(day=day, is_open=False, is_closed=True)

    @property
    def is_finalized(self) -> bool:
        """Open with hours, or closed without."""
        if self.is_open:
            return bool(self.hours) and not self.is_closed
        return self.is_closed and not self.hours


class LocationRecord(BaseModel):
    """One entry on a multi-location listing page."""
    name: str = ""
    address: Optional[str] = None
    phone: Optional[str] = None
    category: Optional[str] = None
    hours: List[DaySchedule] = Field(default_factory=list)

    @property
    def dedup_key(self) -> str:
        return ((self.name or "") + (self.address or "")).lower()

    @property
    def is_empty(self) -> bool:
        return not self.name and not self.address


class HoursCandidates(BaseModel):
    """Raw material found on a page before any schedule parsing."""
    structured_data: List[Any] = Field(default_factory=list)
    fragments: List[str] = Field(default_factory=list)


class RawCounts(BaseModel):
    """Diagnostic counts reported alongside a result."""
    model_config = ConfigDict(populate_by_name=True)

    structured_data_count: int = Field(default=0, alias="structuredDataCount")
    hours_content_count: Optional[int] = Field(default=None, alias="hoursContentCount")


class _ResultBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: str
    extracted_at: datetime = Field(alias="extractedAt")
    timezone: str = "America/Chicago"
    country: str = "US"
    confidence: float = Field(ge=0.0, le=1.0)
    source: ExtractionSource = ExtractionSource.HTML_CONTENT
    raw_data: RawCounts = Field(default_factory=RawCounts, alias="rawData")

    def to_dict(self) -> dict:
        """Plain JSON-ready record using the camelCase wire names."""
        data = self.model_dump(mode='json', by_alias=True)
        data['rawData'] = self.raw_data.model_dump(by_alias=True, exclude_none=True)
        return data


class SingleLocationResult(_ResultBase):
    """Weekly schedule for a single business."""
    is_locations_list: Literal[False] = Field(default=False, alias="isLocationsList")
    regular_hours: List[DaySchedule] = Field(default_factory=list, alias="regularHours")


class LocationsListResult(_ResultBase):
    """Several locations, each with its own schedule."""
    is_locations_list: Literal[True] = Field(default=True, alias="isLocationsList")
    locations: List[LocationRecord] = Field(default_factory=list)

    @property
    def location_count(self) -> int:
        return len(self.locations)

    def to_dict(self) -> dict:
        data = super().to_dict()
        data['locationCount'] = self.location_count
        return data


ExtractionResult = Union[SingleLocationResult, LocationsListResult]


class ExtractorConfig(BaseModel):
    """Configuration for the extractor."""

    # Input
    urls: List[str] = Field(default_factory=list)

    # Fetching
    request_timeout_sec: float = 10.0
    user_agent: Optional[str] = None
    render_javascript: bool = False
    headless: bool = True
    page_timeout_ms: int = 30000

    # Request defaults
    timezone: str = "America/Chicago"
    country: str = "US"

    # Output
    output_file: str = "./output/business-hours.json"

    # Debug
    debug_mode: bool = False
    debug_save_html: bool = True
    debug_log_file: str = "./debug/debug.log"

    @field_validator('country')
    @classmethod
    def _upper_country(cls, value: str) -> str:
        return value.strip().upper()
