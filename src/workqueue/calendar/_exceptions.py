class CalendarError(ValueError):
    """Raised when a calendar is configured with invalid data."""
