# chronoalgebra/core/timerange.py
from __future__ import annotations

from dataclasses import dataclass
from itertools import islice, takewhile
from typing import TYPE_CHECKING, Hashable, Iterator

from .exceptions import InvalidTimeRange
from .relation import Relation, RelationCode
from .timeobject import CalendarTimeObject, TimeObject

if TYPE_CHECKING:
    from .calendar import Calendar


@dataclass(frozen=True, slots=True)
class TimeRange:
    """
    Span [start, end] of time objects at one granularity.

    Either bound may be None, meaning unbounded in that direction.
    Immutable; `iterate()` builds a fresh lazy generator on every call, so
    a range can be enumerated any number of times.
    """
    calendar: "Calendar"
    start: CalendarTimeObject | None = None
    end: CalendarTimeObject | None = None

    def __post_init__(self) -> None:
        if self.calendar is None:
            raise InvalidTimeRange("TimeRange.calendar must not be None.")

        for label, bound in (("start", self.start), ("end", self.end)):
            if bound is None:
                continue
            if not isinstance(bound, CalendarTimeObject):
                raise InvalidTimeRange(f"TimeRange.{label} must be a CalendarTimeObject or None.")
            if bound.calendar is not self.calendar:
                raise InvalidTimeRange(f"TimeRange.{label} belongs to a different calendar.")

        if self.start is not None and self.end is not None:
            if self.start.granularity != self.end.granularity:
                raise InvalidTimeRange(
                    f"TimeRange bounds differ in granularity: "
                    f"{self.start.granularity!r} vs {self.end.granularity!r}."
                )
            if self.calendar.relate(self.start, self.end).is_to_right():
                raise InvalidTimeRange("TimeRange.start must not lie after TimeRange.end.")

    # ---- constructors ----
    @classmethod
    def of(cls, calendar: "Calendar", start: CalendarTimeObject, end: CalendarTimeObject) -> "TimeRange":
        return cls(calendar, start, end)

    @classmethod
    def starting(cls, calendar: "Calendar", start: CalendarTimeObject) -> "TimeRange":
        return cls(calendar, start, None)

    @classmethod
    def until(cls, calendar: "Calendar", end: CalendarTimeObject) -> "TimeRange":
        return cls(calendar, None, end)

    @classmethod
    def infinity(cls, calendar: "Calendar") -> "TimeRange":
        return cls(calendar, None, None)

    # ---- properties ----
    @property
    def granularity(self) -> Hashable | None:
        bound = self.start if self.start is not None else self.end
        return None if bound is None else bound.granularity

    @property
    def is_bounded(self) -> bool:
        return self.start is not None and self.end is not None

    # ---- iteration ----
    def iterate(self) -> Iterator[CalendarTimeObject]:
        """
        Lazily yield start, next(start), ... up to and including `end`.

        Without a start the result is empty; without an end it is infinite
        (bound it with `take` or itertools.islice).
        """
        if self.start is None:
            return iter(())

        steps = self._recurse(self.start)
        if self.end is None:
            return steps

        end = self.end
        relate = self.calendar.relate
        return takewhile(lambda current: not relate(current, end).is_to_right(), steps)

    def _recurse(self, seed: CalendarTimeObject) -> Iterator[CalendarTimeObject]:
        current: CalendarTimeObject | None = seed
        while current is not None:
            yield current
            current = self.calendar.next(current, 1)

    def __iter__(self) -> Iterator[CalendarTimeObject]:
        return self.iterate()

    def take(self, count: int) -> Iterator[CalendarTimeObject]:
        """At most `count` leading elements of `iterate()`."""
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise InvalidTimeRange(f"take() expects a non-negative int, got {count!r}.")
        return islice(self.iterate(), count)

    # ---- relations ----
    def relation_to(self, other: TimeObject) -> Relation:
        """
        Relation of the whole span to `other`.

        The start boundary is classified by `start` and the end boundary by
        `end`. An open side lies strictly beyond `other`, unless `other` is
        a range that is open on the same side.
        """
        if other is self or other == self:
            return Relation.equal()
        if other.calendar is not self.calendar:
            return Relation.unrelated()
        if self.start is None and self.end is None and not self.calendar.is_comparable(other):
            return Relation.unrelated()

        other_is_range = isinstance(other, TimeRange)

        if self.start is not None:
            left = self.calendar.relate(self.start, other).left_code
        elif other_is_range and other.start is None:
            left = RelationCode.AT_LEFT
        else:
            left = RelationCode.LEFT

        if self.end is not None:
            right = self.calendar.relate(self.end, other).right_code
        elif other_is_range and other.end is None:
            right = RelationCode.AT_RIGHT
        else:
            right = RelationCode.RIGHT

        return Relation.of_sides(left, right)

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, (CalendarTimeObject, TimeRange)):
            return False
        return self.relation_to(item).contains()
