"""Shared pytest fixtures."""

from pathlib import Path

import pytest

from hours_scraper.services import ScheduleParser

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def single_location_html() -> str:
    return read_fixture("single_location.html")


@pytest.fixture
def structured_data_html() -> str:
    return read_fixture("structured_data.html")


@pytest.fixture
def locations_cards_html() -> str:
    return read_fixture("locations_cards.html")


@pytest.fixture
def locations_text_html() -> str:
    return read_fixture("locations_text.html")



@pytest.fixture
def schedule_parser() -> ScheduleParser:
    return ScheduleParser()
