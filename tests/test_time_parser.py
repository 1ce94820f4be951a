"""Unit tests for clock time and time range parsing."""

import pytest

from hours_scraper.models import ClockTime, TimeRange
from hours_scraper.services import parse_time, parse_time_range


def _t(hour: int, minute: int = 0) -> ClockTime:
    return ClockTime(hour=hour, minute=minute)


# ---------------------------------------------------------------------------
# parse_time
# ---------------------------------------------------------------------------

class TestParseTime:
    @pytest.mark.parametrize("text,expected", [
        ("9:30 PM", _t(21, 30)),
        ("9:30 a.m.", _t(9, 30)),
        ("5:00 PM", _t(17, 0)),
        ("12:00 AM", _t(0, 0)),
        ("12:15 pm", _t(12, 15)),
        ("9 am", _t(9)),
        ("5 p.m.", _t(17)),
        ("12 pm", _t(12)),
        ("12am", _t(0)),
        ("17:00", _t(17)),
        ("09:05", _t(9, 5)),
    ])
    def test_valid_times(self, text, expected) -> None:
        assert parse_time(text) == expected

    def test_leading_words_are_ignored(self) -> None:
        assert parse_time("from 9 am") == _t(9)
        assert parse_time("until 6:30 pm") == _t(18, 30)

    def test_trailing_noise_is_ignored(self) -> None:
        assert parse_time("9 p.m. daily") == _t(21)
        assert parse_time("5 pm, except holidays") == _t(17)

    @pytest.mark.parametrize("text", ["25:00", "13:00 pm", "9:75 am", "24:00"])
    def test_out_of_range_is_rejected(self, text) -> None:
        assert parse_time(text) is None

    @pytest.mark.parametrize("text", ["", None, "noon", "by appointment", "9"])
    def test_non_times_are_rejected(self, text) -> None:
        assert parse_time(text) is None

    def test_serializes_as_hh_mm(self) -> None:
        assert str(parse_time("7:05 pm")) == "19:05"
        assert TimeRange(open=_t(9), close=_t(17)).model_dump() == {
            "open": "09:00",
            "close": "17:00",
        }


# ---------------------------------------------------------------------------
# parse_time_range
# ---------------------------------------------------------------------------

class TestParseTimeRange:
    def test_hyphen(self) -> None:
        assert parse_time_range("9:00 AM - 5:00 PM") == TimeRange(open=_t(9), close=_t(17))

    def test_word_separator_with_meridiem_periods(self) -> None:
        assert parse_time_range("5:30 a.m. to 9 p.m.") == TimeRange(open=_t(5, 30), close=_t(21))

    def test_dashes(self) -> None:
        assert parse_time_range("8am – 4pm") == TimeRange(open=_t(8), close=_t(16))
        assert parse_time_range("8am—4pm") == TimeRange(open=_t(8), close=_t(16))

    def test_until_and_through(self) -> None:
        assert parse_time_range("10 am until 2 pm") == TimeRange(open=_t(10), close=_t(14))
        assert parse_time_range("10 am through 2 pm") == TimeRange(open=_t(10), close=_t(14))

    def test_leading_label_is_stripped(self) -> None:
        assert parse_time_range("Hours: 9am-5pm") == TimeRange(open=_t(9), close=_t(17))
        assert parse_time_range("Open 7:00 - 19:00") == TimeRange(open=_t(7), close=_t(19))

    def test_close_time_noise_is_stripped(self) -> None:
        assert parse_time_range("6 am - 10 pm daily") == TimeRange(open=_t(6), close=_t(22))

    def test_unparsable_half_is_absent(self) -> None:
        assert parse_time_range("Hours: call us") is None
        assert parse_time_range("9 am - whenever") is None

    def test_first_separator_decides(self) -> None:
        # The hyphen splits first and "noon" is not a time; "to" is never tried
        assert parse_time_range("9 to 11 am - noon") is None

    def test_to_inside_a_word_does_not_split(self) -> None:
        assert parse_time_range("Stop by 9am") is None

    def test_empty(self) -> None:
        assert parse_time_range("") is None
        assert parse_time_range(None) is None
