"""Unit tests for weekday token resolution."""

import pytest

from hours_scraper.models import Weekday
from hours_scraper.services import DayResolver


@pytest.fixture
def resolver() -> DayResolver:
    return DayResolver()


class TestResolve:
    @pytest.mark.parametrize("token,expected", [
        ("Monday", Weekday.MONDAY),
        ("mon", Weekday.MONDAY),
        ("Tu", Weekday.TUESDAY),
        ("tues", Weekday.TUESDAY),
        ("WED", Weekday.WEDNESDAY),
        ("th", Weekday.THURSDAY),
        ("thurs", Weekday.THURSDAY),
        ("fri", Weekday.FRIDAY),
        ("Sa", Weekday.SATURDAY),
        ("SUNDAY", Weekday.SUNDAY),
    ])
    def test_known_tokens(self, resolver, token, expected) -> None:
        assert resolver.resolve(token) == expected

    @pytest.mark.parametrize("token", ["", None, "s", "t", "xyz", "mondy", "weekend"])
    def test_unknown_tokens(self, resolver, token) -> None:
        assert resolver.resolve(token) is None

    def test_custom_table(self) -> None:
        resolver = DayResolver({"lun": "monday"})
        assert resolver.resolve("Lun") == Weekday.MONDAY
        assert resolver.resolve("mon") == Weekday.MONDAY  # prefix of the canonical name


class TestFindDays:
    def test_list_in_discovery_order(self, resolver) -> None:
        assert resolver.find_days("Fri, Mon & Wed") == [
            Weekday.FRIDAY,
            Weekday.MONDAY,
            Weekday.WEDNESDAY,
        ]

    def test_plural_names(self, resolver) -> None:
        assert resolver.find_days("Mondays and Wednesdays") == [Weekday.MONDAY, Weekday.WEDNESDAY]

    def test_no_duplicates(self, resolver) -> None:
        assert resolver.find_days("Sunday, sunday, Sun") == [Weekday.SUNDAY]

    def test_nothing_found(self, resolver) -> None:
        assert resolver.find_days("Holidays") == []
