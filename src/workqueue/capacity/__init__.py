"""
workqueue.capacity
~~~~~~~~~~~~~~~~~~

Daily-capacity scheduler for a team's production queue.

Jobs are taken strictly in queue order.  Each working day a team can absorb
``daily_capacity`` worth of production cost; a job whose cost exceeds what is
left of the day spills over onto the following working day(s), and the next
job starts on whatever budget the previous one left behind.

Basic usage::

    from datetime import date
    from workqueue.capacity import Job, compute_plan
    from workqueue.calendar import WorkCalendar

    jobs = [Job("A", quantity=10, unit_cost=350)]
    completions = compute_plan(jobs, 2000, date(2024, 1, 1), WorkCalendar())
    completions[0].completion_date                  # → 2024-01-02

Full plan with the per-day breakdown::

    from workqueue.capacity import CapacityScheduler

    scheduler = CapacityScheduler(2000, WorkCalendar())
    plan = scheduler.schedule(jobs, date(2024, 1, 1))
    plan.utilization()                              # → array([1.  , 0.75])
"""

from workqueue.capacity._exceptions import (
    InvalidCapacity,
    InvalidJob,
    NonTerminatingSchedule,
    SchedulerError,
)
from workqueue.capacity.models import DailyAllocation, Job, JobCompletion, Plan
from workqueue.capacity.scheduler import (
    DEFAULT_MAX_DAY_ADVANCES,
    CapacityScheduler,
    compute_plan,
)

__all__ = [
    "CapacityScheduler",
    "compute_plan",
    "DEFAULT_MAX_DAY_ADVANCES",
    "Job",
    "JobCompletion",
    "DailyAllocation",
    "Plan",
    "SchedulerError",
    "InvalidCapacity",
    "InvalidJob",
    "NonTerminatingSchedule",
]
