# chronoalgebra/core/exceptions.py
from __future__ import annotations


class CoreError(Exception):
    """Base error for all core-domain exceptions."""


# ---- Validation / construction errors ----
class InvalidRelation(CoreError, ValueError):
    """Raised when a Relation is built from out-of-domain or misordered codes."""


class InvalidTimeObject(CoreError, ValueError):
    """Raised when a CalendarTimeObject is constructed with invalid inputs."""


class InvalidTimeRange(CoreError, ValueError):
    """Raised when a TimeRange (or one of its iteration helpers) gets invalid inputs."""


class InvalidTimeValue(CoreError, ValueError):
    """Raised when a calendar cannot parse a raw value into a time object."""


# ---- Hierarchy errors ----
class HierarchyError(CoreError):
    """Raised when a parent chain is deeper than the configured maximum."""


# ---- Calendar gaps (kept apart from algebra errors) ----
class CalendarOperationNotImplemented(CoreError, NotImplementedError):
    """Raised when a calendar does not implement a granularity operation."""

    def __init__(self, calendar: object, operation: str) -> None:
        self.calendar_name = type(calendar).__name__
        self.operation = operation
        super().__init__(f"Method {self.calendar_name}.{operation}() not implemented yet.")
