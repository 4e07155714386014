"""
Error types raised by the wayfarer engines.

Every failure is surfaced to the caller as an exception; nothing is
silently replaced with a default (an unknown timezone is never treated
as UTC).
"""


class WayfarerError(Exception):
    """Base class for all wayfarer errors."""


class UnknownTimeZone(WayfarerError):
    """Raised when an IANA timezone name cannot be resolved."""

    def __init__(self, tz_name: str):
        self.tz_name = tz_name
        super().__init__(f"Unknown timezone: {tz_name!r}")


class InvalidInput(WayfarerError, ValueError):
    """Raised for non-finite or out-of-domain input values."""

    def __init__(self, field: str, value: object, reason: str):
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}={value!r}: {reason}")
