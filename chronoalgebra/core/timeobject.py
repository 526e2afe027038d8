# chronoalgebra/core/timeobject.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Hashable, Iterator, Protocol, runtime_checkable

from .exceptions import InvalidTimeObject
from .relation import Relation

if TYPE_CHECKING:
    from .calendar import Calendar
    from .timerange import TimeRange


@runtime_checkable
class TimeObject(Protocol):
    """Structural interface of anything positioned in a calendar hierarchy."""

    @property
    def calendar(self) -> "Calendar": ...

    @property
    def parent(self) -> "TimeObject | None": ...

    def relation_to(self, other: "TimeObject") -> Relation: ...

    def children(self) -> "TimeRange | None": ...


@dataclass(frozen=True, slots=True)
class CalendarTimeObject:
    """
    A time point/period at some granularity, owned by exactly one Calendar.

    One concrete type serves every granularity: `granularity` is a tag
    (e.g. "year", "month"), `parent` the enclosing period (None for roots)
    and `number` the sequence number among the siblings sharing `parent`.
    Siblings are numbered consecutively.

    Instances are normally obtained from a calendar, which interns them so
    that equal values are the same object.
    """
    calendar: "Calendar" = field(repr=False)
    granularity: Hashable
    parent: "CalendarTimeObject | None" = field(repr=False)
    number: int

    _children: "TimeRange | None" = field(default=None, init=False, repr=False, compare=False)
    _children_loaded: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.calendar is None:
            raise InvalidTimeObject("CalendarTimeObject.calendar must not be None.")
        if isinstance(self.number, bool) or not isinstance(self.number, int):
            raise InvalidTimeObject("CalendarTimeObject.number must be an int.")
        if self.parent is not None:
            if not isinstance(self.parent, CalendarTimeObject):
                raise InvalidTimeObject("CalendarTimeObject.parent must be a CalendarTimeObject or None.")
            if self.parent.calendar is not self.calendar:
                raise InvalidTimeObject("CalendarTimeObject.parent belongs to a different calendar.")

    # ---- hierarchy ----
    def children(self) -> "TimeRange | None":
        if not self._children_loaded:
            object.__setattr__(self, "_children", self.calendar.children(self))
            object.__setattr__(self, "_children_loaded", True)
        return self._children

    def ancestors(self) -> Iterator["CalendarTimeObject"]:
        """Parent, grandparent, ... up to the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    @property
    def depth(self) -> int:
        return sum(1 for _ in self.ancestors())

    @property
    def root(self) -> "CalendarTimeObject":
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def is_first_child(self) -> bool:
        """True when this object opens its parent's children range."""
        if self.parent is None:
            return False
        siblings = self.parent.children()
        return siblings is not None and siblings.start == self

    def is_last_child(self) -> bool:
        """True when this object closes its parent's children range."""
        if self.parent is None:
            return False
        siblings = self.parent.children()
        return siblings is not None and siblings.end == self

    # ---- relations / navigation ----
    def relation_to(self, other: TimeObject) -> Relation:
        return self.calendar.relate(self, other)

    def next(self, quantity: int = 1) -> "CalendarTimeObject | None":
        return self.calendar.next(self, quantity)

    def __str__(self) -> str:
        return self.calendar.serialize(self)
