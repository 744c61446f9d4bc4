from __future__ import annotations

import datetime as dt
import logging
import numbers
from decimal import Decimal
from typing import Callable, Hashable, Iterable, Optional

from workqueue.calendar import WorkCalendar
from workqueue.calendar.calendar import DateLike, as_day

from ._exceptions import InvalidCapacity, InvalidJob, NonTerminatingSchedule
from .models import DailyAllocation, Job, JobCompletion, Money, Plan, as_money

logger = logging.getLogger(__name__)

DEFAULT_MAX_DAY_ADVANCES: int = 365 * 10

NonWorkingDay = Callable[[dt.date], bool]


class _Cursor:
    """Date cursor for a single run; only ever moves forward."""

    __slots__ = ("day", "advances", "_is_non_working_day", "_limit")

    def __init__(self, day: dt.date, is_non_working_day: NonWorkingDay, limit: int) -> None:
        self.day = day
        self.advances = 0
        self._is_non_working_day = is_non_working_day
        self._limit = limit

    def step(self) -> None:
        if self.advances >= self._limit:
            raise NonTerminatingSchedule(
                f"No schedule within {self._limit} day advances (stopped at "
                f"{self.day.isoformat()}); check the calendar and daily capacity."
            )
        self.day += dt.timedelta(days=1)
        self.advances += 1

    def settle(self) -> dt.date:
        """Move past non-working days onto the first working day at or after the cursor."""
        while self._is_non_working_day(self.day):
            self.step()
        return self.day


def _validate_jobs(jobs: Iterable[Job]) -> list[tuple[Job, Decimal]]:
    queue: list[tuple[Job, Decimal]] = []
    seen: set[Hashable] = set()
    for job in jobs:
        qty = job.quantity
        if isinstance(qty, bool) or not isinstance(qty, numbers.Integral):
            raise InvalidJob(f"Job {job.id!r}: quantity must be a whole number; got {qty!r}.")
        if qty < 0:
            raise InvalidJob(f"Job {job.id!r}: quantity must be non-negative; got {qty}.")
        unit_cost = as_money(job.unit_cost)
        if unit_cost is None:
            raise InvalidJob(f"Job {job.id!r}: unit cost must be a finite amount; got {job.unit_cost!r}.")
        if unit_cost < 0:
            raise InvalidJob(f"Job {job.id!r}: unit cost must be non-negative; got {unit_cost}.")
        if job.id in seen:
            raise InvalidJob(f"Job id {job.id!r} appears more than once in the queue.")
        seen.add(job.id)
        queue.append((job, int(qty) * unit_cost))
    return queue


class CapacityScheduler:
    """
    Spreads an ordered job queue over working days against a fixed daily budget.

    The scheduler only holds its configuration; every call to ``schedule``
    builds its own cursor and budget, so one instance can serve many queues.
    """

    def __init__(
        self,
        daily_capacity: Optional[Money],
        is_non_working_day: Optional[NonWorkingDay] = None,
        *,
        max_day_advances: int = DEFAULT_MAX_DAY_ADVANCES,
    ) -> None:
        capacity = as_money(daily_capacity)
        if capacity is None or capacity <= 0:
            raise InvalidCapacity(
                f"Team has no configured daily capacity (got {daily_capacity!r})."
            )
        if max_day_advances < 1:
            raise ValueError("max_day_advances must be at least 1.")
        self._capacity = capacity
        self._is_non_working_day = (
            is_non_working_day if is_non_working_day is not None else WorkCalendar()
        )
        self._max_day_advances = int(max_day_advances)

    def schedule(self, jobs: Iterable[Job], start_date: DateLike) -> Plan:
        queue = _validate_jobs(jobs)
        start = as_day(start_date)
        cursor = _Cursor(start, self._is_non_working_day, self._max_day_advances)
        budget = self._capacity

        completions: list[JobCompletion] = []
        days: dict[dt.date, list[tuple[Hashable, Decimal]]] = {}

        for priority, (job, cost) in enumerate(queue, start=1):
            if cost == 0:
                day = cursor.settle()
                completions.append(JobCompletion(job, priority, cost, day, day, budget))
                logger.debug("job %r costs nothing; done on %s", job.id, day)
                continue

            remaining = cost
            started: Optional[dt.date] = None
            while True:
                day = cursor.settle()
                amount = min(remaining, budget)
                if amount > 0:
                    if started is None:
                        started = day
                    remaining -= amount
                    budget -= amount
                    days.setdefault(day, []).append((job.id, amount))
                if remaining == 0:
                    break
                cursor.step()
                budget = self._capacity

            completions.append(JobCompletion(job, priority, cost, started, day, budget))
            logger.debug(
                "job %r (%s) scheduled %s..%s, %s left that day",
                job.id, cost, started, day, budget,
            )

        daily = tuple(
            DailyAllocation(day, self._capacity, tuple(allocs))
            for day, allocs in days.items()
        )
        logger.debug(
            "planned %d jobs over %d working days from %s (%d day advances)",
            len(completions), len(daily), start, cursor.advances,
        )
        return Plan(tuple(completions), daily)

    @property
    def daily_capacity(self) -> Decimal:
        return self._capacity

    @property
    def max_day_advances(self) -> int:
        return self._max_day_advances

    def __repr__(self) -> str:
        return (
            f"CapacityScheduler(daily_capacity={self._capacity}, "
            f"max_day_advances={self._max_day_advances})"
        )


def compute_plan(
    jobs: Iterable[Job],
    daily_capacity: Optional[Money],
    start_date: DateLike,
    is_non_working_day: Optional[NonWorkingDay] = None,
    *,
    max_day_advances: int = DEFAULT_MAX_DAY_ADVANCES,
) -> list[JobCompletion]:
    """
    Schedule ``jobs`` in queue order and return one completion record per job.

    Raises InvalidCapacity, InvalidJob or NonTerminatingSchedule (all
    SchedulerError) without returning a partial plan.
    """
    scheduler = CapacityScheduler(
        daily_capacity, is_non_working_day, max_day_advances=max_day_advances
    )
    return list(scheduler.schedule(jobs, start_date).completions)
