"""
workqueue.calendar
~~~~~~~~~~~~~~~~~~

Working-day calendar.  A WorkCalendar marks weekdays as working or not via a
Monday-first weekmask, with optional dated holiday overrides.

Basic usage::

    from datetime import date
    from workqueue.calendar import WorkCalendar

    cal = WorkCalendar([1, 1, 1, 1, 1, 0, 0])       # Mon–Fri
    cal.add_holiday(date(2024, 1, 1), name="New Year")
    cal.next_working_day(date(2024, 1, 1))          # → 2024-01-02

The calendar is callable, so it can be handed straight to the scheduler as
its non-working-day predicate::

    cal(date(2024, 1, 6))                           # Saturday → True

Public API
----------
WorkCalendar   The main class.
Holiday        A dated non-working day with an optional name and kind.
CalendarError  Base exception for all calendar-related errors.
"""

from __future__ import annotations

from workqueue.calendar._exceptions import CalendarError
from workqueue.calendar.calendar import DEFAULT_WEEKMASK, Holiday, WorkCalendar

__all__ = [
    "DEFAULT_WEEKMASK",
    "Holiday",
    "WorkCalendar",
    "CalendarError",
]
