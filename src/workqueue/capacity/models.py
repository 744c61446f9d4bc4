from __future__ import annotations

import datetime as dt
import numbers
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Hashable, Iterator, Mapping, Optional, Union

import numpy as np

Money = Union[Decimal, int, float, str]


def as_money(value: object) -> Optional[Decimal]:
    """
    Convert ``value`` to a finite Decimal, or return None when it cannot be.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")`` rather
    than its binary expansion.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value))
        except (InvalidOperation, ValueError):
            return None
    return amount if amount.is_finite() else None


@dataclass(frozen=True, slots=True)
class Job:
    """
    A queued sub-job.  Only ``quantity`` and ``unit_cost`` drive scheduling;
    the descriptive fields are carried through to the completion record.
    """

    id: Hashable
    quantity: int
    unit_cost: Money
    order_number: Optional[str] = None
    customer_name: Optional[str] = None
    product_name: Optional[str] = None
    color: Optional[str] = None
    size: Optional[str] = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    @property
    def total_cost(self) -> Decimal:
        unit_cost = as_money(self.unit_cost)
        if unit_cost is None:
            raise ValueError(f"Job {self.id!r} has no usable unit cost: {self.unit_cost!r}.")
        qty = self.quantity
        if isinstance(qty, bool) or not isinstance(qty, numbers.Integral):
            raise ValueError(f"Job {self.id!r} quantity must be a whole number; got {qty!r}.")
        return int(qty) * unit_cost


@dataclass(frozen=True, slots=True)
class JobCompletion:
    job: Job
    priority: int
    total_cost: Decimal
    start_date: dt.date
    completion_date: dt.date
    remaining_capacity: Decimal

    @property
    def job_id(self) -> Hashable:
        return self.job.id

    @property
    def quantity(self) -> int:
        return self.job.quantity


@dataclass(frozen=True, slots=True)
class DailyAllocation:
    """Cost absorbed on one working day, per job in queue order."""

    date: dt.date
    capacity: Decimal
    allocations: tuple[tuple[Hashable, Decimal], ...]

    @property
    def used(self) -> Decimal:
        return sum((amount for _, amount in self.allocations), Decimal(0))

    @property
    def remaining(self) -> Decimal:
        return self.capacity - self.used

    @property
    def utilization(self) -> float:
        return float(self.used / self.capacity)


@dataclass(frozen=True, slots=True)
class Plan:
    completions: tuple[JobCompletion, ...]
    daily: tuple[DailyAllocation, ...] = ()

    def __len__(self) -> int:
        return len(self.completions)

    def __iter__(self) -> Iterator[JobCompletion]:
        return iter(self.completions)

    @property
    def total_cost(self) -> Decimal:
        return sum((c.total_cost for c in self.completions), Decimal(0))

    @property
    def start_date(self) -> Optional[dt.date]:
        if not self.completions:
            return None
        return min(c.start_date for c in self.completions)

    @property
    def completion_date(self) -> Optional[dt.date]:
        if not self.completions:
            return None
        return max(c.completion_date for c in self.completions)

    def utilization(self) -> np.ndarray:
        """Fraction of the daily capacity used on each allocated day."""
        return np.array([d.utilization for d in self.daily], dtype=float)
