class MeetupValidationError(Exception):
    """Raised when a meetup request is well-formed but breaks a meetup rule (e.g. a past date)."""


class MeetupPermissionError(Exception):
    """Raised when the caller may not act on a meetup, or its date no longer allows the action."""
