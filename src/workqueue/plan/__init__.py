"""
workqueue.plan
~~~~~~~~~~~~~~

Production-plan records built from a computed schedule, in the shape the
application persists: one item per queued sub-job with its priority,
completion date and cost.

Basic usage::

    from datetime import date, datetime
    from workqueue.capacity import CapacityScheduler
    from workqueue.plan import build_plan_record

    plan = CapacityScheduler(2000).schedule(jobs, date(2024, 1, 1))
    record = build_plan_record(
        plan, team_id="T1", team_name="Sewing A",
        start_date=date(2024, 1, 1), created_at=datetime(2024, 1, 1, 8, 30),
    )
    record.name                                     # → "Production plan Sewing A - 01/01/2024 08:30"
    record.to_dict()
"""

from workqueue.plan.record import (
    PLAN_NAME_PREFIX,
    PlanItem,
    ProductionPlanRecord,
    build_plan_record,
)

__all__ = [
    "PLAN_NAME_PREFIX",
    "PlanItem",
    "ProductionPlanRecord",
    "build_plan_record",
]
