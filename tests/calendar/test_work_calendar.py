"""
tests/calendar/test_work_calendar.py

Covers:
  - Weekend detection with the default Mon–Fri weekmask
  - Holiday input forms (date, ISO string, Holiday record, date-time)
  - Holiday add / remove
  - next_working_day, working_days, count_working_days
  - Custom weekmasks
  - Invalid configuration
"""

import datetime as dt

import pytest

from workqueue.calendar import CalendarError, Holiday, WorkCalendar
from workqueue.calendar.calendar import as_day

# 2024-01-01 is a Monday.
MON = dt.date(2024, 1, 1)
TUE = dt.date(2024, 1, 2)
FRI = dt.date(2024, 1, 5)
SAT = dt.date(2024, 1, 6)
SUN = dt.date(2024, 1, 7)
NEXT_MON = dt.date(2024, 1, 8)


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def work_week():
    """Standard Mon–Fri calendar without holidays."""
    return WorkCalendar()


@pytest.fixture
def new_year():
    """Mon–Fri with New Year's Day off."""
    return WorkCalendar(holidays=[Holiday(MON, name="New Year", kind="public")])


# ── Weekends ──────────────────────────────────────────────────────────────────

class TestWeekends:

    def test_saturday_and_sunday_are_off(self, work_week):
        assert work_week.is_non_working_day(SAT)
        assert work_week.is_non_working_day(SUN)

    def test_weekdays_are_working(self, work_week):
        for offset in range(5):
            assert not work_week.is_non_working_day(MON + dt.timedelta(days=offset))

    def test_callable_matches_method(self, work_week):
        for offset in range(14):
            day = MON + dt.timedelta(days=offset)
            assert work_week(day) == work_week.is_non_working_day(day)

    def test_returns_plain_bool(self, work_week):
        assert type(work_week(SAT)) is bool

    def test_default_weekmask(self, work_week):
        assert work_week.weekmask == (1, 1, 1, 1, 1, 0, 0)


# ── Holidays ──────────────────────────────────────────────────────────────────

class TestHolidays:

    def test_holiday_record_is_off(self, new_year):
        assert new_year(MON)
        assert not new_year(TUE)

    def test_iso_string_holiday(self):
        cal = WorkCalendar(holidays=["2024-01-02"])
        assert cal(TUE)

    def test_datetime_holiday_uses_calendar_date(self):
        cal = WorkCalendar(holidays=[dt.datetime(2024, 1, 2, 17, 45)])
        assert cal(TUE)
        assert cal(dt.datetime(2024, 1, 2, 0, 0))

    def test_holiday_keeps_name_and_kind(self, new_year):
        (hol,) = new_year.holidays
        assert hol.date == MON
        assert hol.name == "New Year"
        assert hol.kind == "public"

    def test_iso_datetime_string_holiday(self):
        cal = WorkCalendar(holidays=["2024-01-02T08:30:00"])
        assert cal(TUE)

    def test_holiday_record_coerces_iso_string(self):
        assert Holiday("2024-01-01").date == MON

    def test_add_holiday(self, work_week):
        work_week.add_holiday(TUE, name="Shutdown")
        assert work_week(TUE)
        assert work_week.holidays[0].name == "Shutdown"

    def test_add_holiday_twice_keeps_latest(self, work_week):
        work_week.add_holiday(TUE, name="first")
        work_week.add_holiday(TUE, name="second")
        assert len(work_week.holidays) == 1
        assert work_week.holidays[0].name == "second"

    def test_remove_holiday(self, new_year):
        new_year.remove_holiday(MON)
        assert not new_year(MON)
        assert new_year.holidays == ()

    def test_remove_unknown_holiday_is_noop(self, new_year):
        new_year.remove_holiday(TUE)
        assert len(new_year.holidays) == 1

    def test_holidays_sorted_by_date(self):
        cal = WorkCalendar(holidays=["2024-03-01", "2024-01-15", "2024-02-10"])
        dates = [h.date for h in cal.holidays]
        assert dates == sorted(dates)

    def test_weekend_holiday_changes_nothing(self, work_week):
        work_week.add_holiday(SAT)
        assert work_week(SAT)
        assert work_week.count_working_days(MON, SUN) == 5


# ── Range queries ─────────────────────────────────────────────────────────────

class TestRangeQueries:

    def test_next_working_day_from_working_day(self, work_week):
        assert work_week.next_working_day(MON) == MON

    def test_next_working_day_from_saturday(self, work_week):
        assert work_week.next_working_day(SAT) == NEXT_MON

    def test_next_working_day_skips_holiday(self):
        cal = WorkCalendar(holidays=[NEXT_MON])
        assert cal.next_working_day(SAT) == dt.date(2024, 1, 9)

    def test_next_working_day_returns_date(self, work_week):
        assert isinstance(work_week.next_working_day(SUN), dt.date)

    def test_working_days_in_week(self, work_week):
        days = work_week.working_days(MON, SUN)
        assert days == [MON + dt.timedelta(days=i) for i in range(5)]

    def test_working_days_excludes_holiday(self, new_year):
        assert new_year.working_days(MON, FRI)[0] == TUE
        assert len(new_year.working_days(MON, FRI)) == 4

    def test_working_days_single_day(self, work_week):
        assert work_week.working_days(MON, MON) == [MON]
        assert work_week.working_days(SAT, SAT) == []

    def test_reversed_range_is_empty(self, work_week):
        assert work_week.working_days(FRI, MON) == []
        assert work_week.count_working_days(FRI, MON) == 0

    def test_count_january(self, work_week):
        assert work_week.count_working_days(MON, dt.date(2024, 1, 31)) == 23

    def test_count_matches_list(self, new_year):
        end = dt.date(2024, 3, 31)
        assert new_year.count_working_days(MON, end) == len(new_year.working_days(MON, end))


# ── Custom weekmasks ──────────────────────────────────────────────────────────

class TestWeekmask:

    def test_six_day_week_string(self):
        cal = WorkCalendar("1111110")
        assert not cal(SAT)
        assert cal(SUN)

    def test_string_with_spaces(self):
        assert WorkCalendar("11111 00").weekmask == (1, 1, 1, 1, 1, 0, 0)

    def test_bool_sequence(self):
        cal = WorkCalendar([True] * 7)
        assert not cal(SUN)

    def test_repr(self, new_year):
        r = repr(new_year)
        assert "WorkCalendar(weekmask='1111100'" in r
        assert "holidays=1" in r


# ── Invalid configuration ─────────────────────────────────────────────────────

class TestInvalid:

    def test_all_zero_weekmask_raises(self):
        with pytest.raises(CalendarError):
            WorkCalendar([0] * 7)

    def test_short_weekmask_raises(self):
        with pytest.raises(CalendarError):
            WorkCalendar([1, 1, 1, 1, 1, 0])

    def test_bad_flag_raises(self):
        with pytest.raises(CalendarError):
            WorkCalendar([1, 1, 1, 1, 1, 0, 2])

    def test_bad_weekmask_string_raises(self):
        with pytest.raises(CalendarError):
            WorkCalendar("11111xx")

    def test_bad_holiday_string_raises(self):
        with pytest.raises(CalendarError):
            WorkCalendar(holidays=["not-a-date"])

    def test_trailing_junk_in_date_string_raises(self):
        with pytest.raises(CalendarError):
            as_day("2024-01-01garbage")

    def test_non_date_raises(self):
        with pytest.raises(CalendarError):
            as_day(20240101)

    def test_calendar_error_is_value_error(self):
        assert issubclass(CalendarError, ValueError)
