"""Unit tests for free-text schedule parsing, merging and week completion."""

from hours_scraper.models import ClockTime, DaySchedule, TimeRange, Weekday, WEEKDAYS
from hours_scraper.services import ScheduleParser, merge_by_day, complete_week


def _range(open_hour: int, close_hour: int) -> TimeRange:
    return TimeRange(open=ClockTime(hour=open_hour), close=ClockTime(hour=close_hour))


def _week(parser: ScheduleParser, text: str) -> dict:
    """Parse, merge and complete; keyed by weekday."""
    week = complete_week(merge_by_day(parser.parse(text)))
    return {entry.day: entry for entry in week}


# ---------------------------------------------------------------------------
# ScheduleParser.parse
# ---------------------------------------------------------------------------

class TestParse:
    def test_day_range_and_closed_day(self, schedule_parser) -> None:
        week = _week(schedule_parser, "Monday - Friday: 9am-5pm. Sunday: Closed")

        for day in WEEKDAYS[:5]:
            assert week[day].is_open
            assert week[day].hours == [_range(9, 17)]

        assert week[Weekday.SATURDAY].is_closed
        assert week[Weekday.SUNDAY].is_closed
        assert week[Weekday.SUNDAY].hours == []

    def test_open_24_hours(self, schedule_parser) -> None:
        entries = schedule_parser.parse("We are open 24 hours")

        assert [entry.day for entry in entries] == WEEKDAYS
        for entry in entries:
            assert entry.is_open
            assert str(entry.hours[0].open) == "00:00"
            assert str(entry.hours[0].close) == "23:59"

    def test_daily(self, schedule_parser) -> None:
        entries = schedule_parser.parse("Open daily 6am - 10pm")

        assert len(entries) == 7
        assert all(entry.hours == [_range(6, 22)] for entry in entries)

    def test_day_list(self, schedule_parser) -> None:
        week = _week(schedule_parser, "Mon, Wed and Fri: 10am - 4pm")

        open_days = [day for day, entry in week.items() if entry.is_open]
        assert open_days == [Weekday.MONDAY, Weekday.WEDNESDAY, Weekday.FRIDAY]
        assert week[Weekday.WEDNESDAY].hours == [_range(10, 16)]
        assert week[Weekday.TUESDAY].is_closed

    def test_single_day_without_colon(self, schedule_parser) -> None:
        week = _week(schedule_parser, "Saturday 10:00 AM - 2:00 PM")

        assert week[Weekday.SATURDAY].hours == [_range(10, 14)]
        assert week[Weekday.SUNDAY].is_closed

    def test_abbreviated_prefix(self, schedule_parser) -> None:
        week = _week(schedule_parser, "Tues: 9am - 5pm")
        assert week[Weekday.TUESDAY].hours == [_range(9, 17)]

    def test_meridiem_periods_do_not_split_lines(self, schedule_parser) -> None:
        week = _week(schedule_parser, "Monday - Friday: 8 a.m. - 4:30 p.m.")

        assert week[Weekday.MONDAY].hours == [
            TimeRange(open=ClockTime(hour=8), close=ClockTime(hour=16, minute=30))
        ]

    def test_closing_meridiem_ends_the_line(self, schedule_parser) -> None:
        week = _week(
            schedule_parser,
            "Monday - Friday: 9 a.m. - 5 p.m. Saturday: 10 a.m. - 2 p.m. Sunday: Closed.",
        )

        for day in WEEKDAYS[:5]:
            assert week[day].hours == [_range(9, 17)]
        assert week[Weekday.SATURDAY].is_open
        assert week[Weekday.SATURDAY].hours == [_range(10, 14)]
        assert week[Weekday.SUNDAY].is_closed

    def test_meridiem_followed_by_to_stays_one_range(self, schedule_parser) -> None:
        week = _week(schedule_parser, "Monday - Friday: 5:30 a.m. to 9 p.m.")

        assert week[Weekday.FRIDAY].hours == [
            TimeRange(open=ClockTime(hour=5, minute=30), close=ClockTime(hour=21))
        ]

    def test_period_delimited_block(self, schedule_parser) -> None:
        week = _week(
            schedule_parser,
            "Monday - Friday: 8:00 AM - 5:00 PM. Saturday: 9:00 AM - 1:00 PM. Sunday: Closed.",
        )

        assert [week[day].hours for day in WEEKDAYS[:5]] == [[_range(8, 17)]] * 5
        assert week[Weekday.SATURDAY].hours == [_range(9, 13)]
        assert week[Weekday.SUNDAY].is_closed
        assert week[Weekday.SUNDAY].hours == []

    def test_parsing_is_repeatable(self, schedule_parser) -> None:
        text = "Mon - Fri: 7:30 a.m. - 6 p.m. Sat: 9am - noon; Sun: Closed"

        first = schedule_parser.parse(text)
        second = schedule_parser.parse(text)

        assert first == second
        assert complete_week(merge_by_day(first)) == complete_week(merge_by_day(second))

    def test_unparsable_hours_mark_range_closed(self, schedule_parser) -> None:
        entries = schedule_parser.parse("Mon-Fri: by appointment")

        assert [entry.day for entry in entries] == WEEKDAYS[:5]
        assert all(entry.is_closed for entry in entries)

    def test_lines_over_limit_are_ignored(self, schedule_parser) -> None:
        line = "Monday: 9am - 5pm " + "x" * 200
        assert schedule_parser.parse(line) == []

    def test_no_schedule(self, schedule_parser) -> None:
        assert schedule_parser.parse("") == []
        assert schedule_parser.parse("Family dentistry since 1998") == []


class TestParseLocationHours:
    def test_call_for_hours_is_empty(self, schedule_parser) -> None:
        assert schedule_parser.parse_location_hours("Please call for hours") == []

    def test_open_24_hrs(self, schedule_parser) -> None:
        entries = schedule_parser.parse_location_hours("Open 24 hrs")
        assert len(entries) == 7 and all(entry.is_open for entry in entries)

    def test_falls_through_to_parse(self, schedule_parser) -> None:
        entries = schedule_parser.parse_location_hours("Sunday: Closed")
        assert entries and all(entry.day == Weekday.SUNDAY and entry.is_closed for entry in entries)


# ---------------------------------------------------------------------------
# merge_by_day / complete_week
# ---------------------------------------------------------------------------

class TestMergeByDay:
    def test_later_entry_replaces_earlier(self) -> None:
        first = [DaySchedule.open_with(Weekday.MONDAY, _range(9, 17))]
        second = [DaySchedule.closed(Weekday.MONDAY)]

        merged = merge_by_day(second, into=merge_by_day(first))

        assert len(merged) == 1
        assert merged[0].is_closed and merged[0].hours == []

    def test_accumulates_distinct_days(self) -> None:
        merged = merge_by_day([
            DaySchedule.open_with(Weekday.TUESDAY, _range(8, 12)),
            DaySchedule.closed(Weekday.SUNDAY),
        ])
        assert [entry.day for entry in merged] == [Weekday.TUESDAY, Weekday.SUNDAY]


class TestCompleteWeek:
    def test_backfills_and_orders(self) -> None:
        week = complete_week([
            DaySchedule.closed(Weekday.SUNDAY),
            DaySchedule.open_with(Weekday.WEDNESDAY, _range(9, 17)),
        ])

        assert [entry.day for entry in week] == WEEKDAYS
        assert week[2].is_open
        assert all(entry.is_closed for i, entry in enumerate(week) if i != 2)

    def test_unfinished_entries_are_dropped(self) -> None:
        unfinished = DaySchedule(day=Weekday.MONDAY, is_open=True)
        week = complete_week([unfinished])

        assert week[0].is_closed
        assert not week[0].is_open

    def test_empty_input_is_a_closed_week(self) -> None:
        week = complete_week([])
        assert len(week) == 7
        assert all(entry.is_closed and not entry.is_open for entry in week)
