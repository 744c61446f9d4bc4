from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Union

import numpy as np

from ._exceptions import CalendarError

DEFAULT_WEEKMASK: tuple[int, ...] = (1, 1, 1, 1, 1, 0, 0)

DateLike = Union[dt.date, str]


def as_day(value: DateLike) -> dt.date:
    """Coerce a date, date-time or ISO ``YYYY-MM-DD`` string to a calendar date."""
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str):
        try:
            return dt.date.fromisoformat(value)
        except ValueError:
            pass
        try:
            return dt.datetime.fromisoformat(value).date()
        except ValueError as exc:
            raise CalendarError(f"Not an ISO calendar date: {value!r}.") from exc
    raise CalendarError(
        f"Expected a date or ISO date string; got {type(value).__name__}."
    )


@dataclass(frozen=True, slots=True)
class Holiday:
    """A dated non-working day."""

    date: dt.date
    name: str = ""
    kind: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "date", as_day(self.date))


def _as_holiday(value: Union[Holiday, DateLike]) -> Holiday:
    if isinstance(value, Holiday):
        return value
    return Holiday(as_day(value))


def _parse_weekmask(weekmask: Union[str, Sequence[int]]) -> tuple[int, ...]:
    if isinstance(weekmask, str):
        flags: list[object] = [c for c in weekmask if not c.isspace()]
        flags = [int(c) if c in "01" else c for c in flags]
    else:
        flags = list(weekmask)

    for w in flags:
        if w not in (0, 1):
            raise CalendarError(f"Weekmask flags must be 0 or 1; got {w!r}.")
    if len(flags) != 7:
        raise CalendarError(
            f"Weekmask must have 7 entries (Mon–Sun); got {len(flags)}."
        )
    mask = tuple(int(w) for w in flags)
    if not any(mask):
        raise CalendarError(
            "Weekmask has no working day; capacity can never be consumed."
        )
    return mask


class WorkCalendar:
    """
    Working-day calendar over calendar dates.

    A day is non-working when its weekday is off in the weekmask or when it
    is listed as a holiday.  Queries go through a compiled
    ``numpy.busdaycalendar`` which is rebuilt whenever the holidays change.
    """

    def __init__(
        self,
        weekmask: Union[str, Sequence[int]] = DEFAULT_WEEKMASK,
        holidays: Optional[Iterable[Union[Holiday, DateLike]]] = None,
    ) -> None:
        self._weekmask: tuple[int, ...] = _parse_weekmask(weekmask)
        self._holidays: dict[dt.date, Holiday] = {}
        for value in holidays or ():
            hol = _as_holiday(value)
            self._holidays[hol.date] = hol
        self._compile()

    def _compile(self) -> None:
        days = np.array(sorted(self._holidays), dtype="datetime64[D]")
        self._busdaycal = np.busdaycalendar(
            weekmask=np.array(self._weekmask, dtype=bool),
            holidays=days,
        )

    # ── holiday management ───────────────────────────────────────────────

    def add_holiday(self, day: DateLike, name: str = "", kind: str = "") -> None:
        hol = Holiday(as_day(day), name=name, kind=kind)
        self._holidays[hol.date] = hol
        self._compile()

    def remove_holiday(self, day: DateLike) -> None:
        if self._holidays.pop(as_day(day), None) is not None:
            self._compile()

    # ── queries ──────────────────────────────────────────────────────────

    def is_non_working_day(self, day: DateLike) -> bool:
        d = np.datetime64(as_day(day), "D")
        return not bool(np.is_busday(d, busdaycal=self._busdaycal))

    def __call__(self, day: DateLike) -> bool:
        return self.is_non_working_day(day)

    def next_working_day(self, day: DateLike) -> dt.date:
        """First working day at or after ``day``."""
        d = np.busday_offset(
            np.datetime64(as_day(day), "D"), 0,
            roll="forward", busdaycal=self._busdaycal,
        )
        return d.item()

    def working_days(self, start: DateLike, end: DateLike) -> list[dt.date]:
        """Working days in the closed range ``[start, end]``."""
        s, e = as_day(start), as_day(end)
        if e < s:
            return []
        span = np.arange(np.datetime64(s, "D"), np.datetime64(e, "D") + 1)
        mask = np.is_busday(span, busdaycal=self._busdaycal)
        return span[mask].tolist()

    def count_working_days(self, start: DateLike, end: DateLike) -> int:
        s, e = as_day(start), as_day(end)
        if e < s:
            return 0
        return int(np.busday_count(
            np.datetime64(s, "D"), np.datetime64(e, "D") + 1,
            busdaycal=self._busdaycal,
        ))

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def weekmask(self) -> tuple[int, ...]:
        return self._weekmask

    @property
    def holidays(self) -> tuple[Holiday, ...]:
        return tuple(self._holidays[d] for d in sorted(self._holidays))

    def __repr__(self) -> str:
        return (
            f"WorkCalendar(weekmask={''.join(map(str, self._weekmask))!r}, "
            f"holidays={len(self._holidays)})"
        )
