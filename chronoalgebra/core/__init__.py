"""
Core domain objects for chronoalgebra.

This module defines the calendar-agnostic model:
- RelationCode / Relation: algebra of how two intervals relate
- TimeObject / CalendarTimeObject: periods in a parent/child hierarchy
- TimeRange: lazily enumerable span of periods at one granularity
- Calendar: base class supplying relations and instance interning

The core layer never performs date arithmetic; concrete calendars do.
"""

from .relation import RelationCode, Relation
from .timeobject import TimeObject, CalendarTimeObject
from .timerange import TimeRange
from .calendar import Calendar
from .interning import Interner
from .exceptions import (
    CoreError,
    InvalidRelation,
    InvalidTimeObject,
    InvalidTimeRange,
    InvalidTimeValue,
    HierarchyError,
    CalendarOperationNotImplemented,
)


__all__ = [
    # algebra
    "RelationCode",
    "Relation",

    # domain objects
    "TimeObject",
    "CalendarTimeObject",
    "TimeRange",
    "Calendar",
    "Interner",

    # exceptions
    "CoreError",
    "InvalidRelation",
    "InvalidTimeObject",
    "InvalidTimeRange",
    "InvalidTimeValue",
    "HierarchyError",
    "CalendarOperationNotImplemented",
]
