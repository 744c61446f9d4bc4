class SchedulerError(ValueError):
    """Base class for errors that abort a scheduling run."""


class InvalidCapacity(SchedulerError):
    """The team's daily capacity is missing, zero, negative or not finite."""


class InvalidJob(SchedulerError):
    """A queued job carries an unusable quantity, unit cost or id."""


class NonTerminatingSchedule(SchedulerError):
    """The run exceeded its day-advance ceiling."""
