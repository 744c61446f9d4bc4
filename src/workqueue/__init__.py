"""
workqueue
~~~~~~~~~

Production work-queue planning: working-day calendars, a daily-capacity
scheduler that spreads an ordered queue of sub-jobs across working days, and
the production-plan record built from its result.
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
