from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Hashable, Optional

from workqueue.calendar.calendar import DateLike, as_day
from workqueue.capacity import JobCompletion, Plan

PLAN_NAME_PREFIX = "Production plan"
UNKNOWN_TEAM = "Unknown Team"
CENT = Decimal("0.01")


@dataclass(frozen=True, slots=True)
class PlanItem:
    sub_job_id: Hashable
    order_number: Optional[str]
    customer_name: Optional[str]
    product_name: Optional[str]
    color_name: Optional[str]
    size_name: Optional[str]
    quantity: int
    completion_date: dt.date
    job_cost: Decimal
    priority: int

    @classmethod
    def from_completion(cls, completion: JobCompletion) -> "PlanItem":
        job = completion.job
        return cls(
            sub_job_id=job.id,
            order_number=job.order_number,
            customer_name=job.customer_name,
            product_name=job.product_name,
            color_name=job.color,
            size_name=job.size,
            quantity=job.quantity,
            completion_date=completion.completion_date,
            job_cost=completion.total_cost,
            priority=completion.priority,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "sub_job_id": self.sub_job_id,
            "order_number": self.order_number,
            "customer_name": self.customer_name,
            "product_name": self.product_name,
            "color_name": self.color_name,
            "size_name": self.size_name,
            "quantity": self.quantity,
            "completion_date": self.completion_date.isoformat(),
            "job_cost": str(self.job_cost.quantize(CENT, rounding=ROUND_HALF_UP)),
            "priority": self.priority,
        }


@dataclass(frozen=True, slots=True)
class ProductionPlanRecord:
    team_id: Hashable
    name: str
    start_date: dt.date
    items: tuple[PlanItem, ...]

    @property
    def total_cost(self) -> Decimal:
        return sum((item.job_cost for item in self.items), Decimal(0))

    def to_dict(self) -> dict[str, Any]:
        return {
            "team_id": self.team_id,
            "name": self.name,
            "start_date": self.start_date.isoformat(),
            "plan_items": [item.to_dict() for item in self.items],
        }


def build_plan_record(
    plan: Plan,
    team_id: Hashable,
    team_name: Optional[str],
    start_date: DateLike,
    created_at: dt.datetime,
) -> ProductionPlanRecord:
    """
    Turn a computed plan into the record saved for a team.

    ``created_at`` only names the plan; it is passed in so the record is
    reproducible.
    """
    name = f"{PLAN_NAME_PREFIX} {team_name or UNKNOWN_TEAM} - {created_at:%d/%m/%Y %H:%M}"
    return ProductionPlanRecord(
        team_id=team_id,
        name=name,
        start_date=as_day(start_date),
        items=tuple(PlanItem.from_completion(c) for c in plan),
    )
