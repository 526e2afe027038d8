# chronoalgebra/core/calendar.py
from __future__ import annotations

from typing import Any, Hashable

from .exceptions import CalendarOperationNotImplemented
from .hierarchy import relate as relate_hierarchy
from .interning import Interner
from .relation import Relation
from .timeobject import CalendarTimeObject, TimeObject
from .timerange import TimeRange


class Calendar:
    """
    Granularity-specific authority over a tree of time objects.

    The base class only knows how to relate objects (by walking their
    hierarchy) and how to intern them. Subclasses provide the arithmetic:
    `next`, `children`, `parent`, `of` and `serialize`. Every operation a
    subclass leaves out raises CalendarOperationNotImplemented.
    """

    # granularity tags of the tree roots; empty means any root is accepted
    root_granularities: tuple[Hashable, ...] = ()

    def __init__(self) -> None:
        self._instances: Interner[CalendarTimeObject] = Interner()

    # ---- relations ----
    def relate(self, a: TimeObject, b: TimeObject) -> Relation:
        """Relation of `a` to `b`; unrelated (never an error) across calendars."""
        if a is b:
            return Relation.equal()
        if isinstance(a, TimeRange):
            return a.relation_to(b)
        if isinstance(b, TimeRange):
            return b.relation_to(a).inverse()
        if a.calendar is not self or b.calendar is not self:
            return Relation.unrelated()
        return relate_hierarchy(a, b)

    def contains(self, obj: object) -> bool:
        """Whether `obj` is a time object (or range) produced by this calendar."""
        return isinstance(obj, (CalendarTimeObject, TimeRange)) and obj.calendar is self

    def is_comparable(self, obj: object) -> bool:
        """Whether `obj` belongs to this calendar's granularity tree."""
        if isinstance(obj, TimeRange):
            bound = obj.start if obj.start is not None else obj.end
            return obj.calendar is self and (bound is None or self.is_comparable(bound))
        if not isinstance(obj, CalendarTimeObject) or obj.calendar is not self:
            return False
        return not self.root_granularities or obj.root.granularity in self.root_granularities

    def range(
        self,
        start: CalendarTimeObject | None = None,
        end: CalendarTimeObject | None = None,
    ) -> TimeRange:
        return TimeRange(self, start, end)

    # ---- granularity operations (subclass responsibility) ----
    def next(self, obj: CalendarTimeObject, quantity: int = 1) -> CalendarTimeObject | None:
        raise CalendarOperationNotImplemented(self, "next")

    def children(self, obj: CalendarTimeObject) -> TimeRange | None:
        raise CalendarOperationNotImplemented(self, "children")

    def parent(self, obj: CalendarTimeObject) -> CalendarTimeObject | None:
        raise CalendarOperationNotImplemented(self, "parent")

    def of(self, source: Any) -> CalendarTimeObject:
        raise CalendarOperationNotImplemented(self, "of")

    def serialize(self, obj: CalendarTimeObject) -> str:
        raise CalendarOperationNotImplemented(self, "serialize")

    # ---- instance management ----
    def _intern(
        self,
        granularity: Hashable,
        parent: CalendarTimeObject | None,
        number: int,
    ) -> CalendarTimeObject:
        return self._instances.get(
            (granularity, parent, number),
            lambda: CalendarTimeObject(self, granularity, parent, number),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(instances={len(self._instances)})"
