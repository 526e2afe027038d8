# test/conftest.py
import pytest

from chronoalgebra.core import Calendar, CalendarTimeObject, TimeRange


TICKS_PER_BLOCK = 4
SUBTICKS_PER_TICK = 3

_LEVELS = ("block", "tick", "subtick")
_FANOUT = {"tick": TICKS_PER_BLOCK, "subtick": SUBTICKS_PER_TICK}


class TickCalendar(Calendar):
    """
    Integer test calendar: blocks (roots) > 4 ticks > 3 subticks.

    Every object maps to an absolute index at its level, so stepping is
    plain integer arithmetic.
    """

    root_granularities = ("block",)

    def block(self, n: int) -> CalendarTimeObject:
        return self._intern("block", None, n)

    def tick(self, block: int, n: int) -> CalendarTimeObject:
        return self._intern("tick", self.block(block), n)

    def subtick(self, block: int, tick: int, n: int) -> CalendarTimeObject:
        return self._intern("subtick", self.tick(block, tick), n)

    def _index(self, obj: CalendarTimeObject) -> int:
        if obj.parent is None:
            return obj.number
        return self._index(obj.parent) * _FANOUT[obj.granularity] + obj.number

    def _from_index(self, granularity: str, index: int) -> CalendarTimeObject:
        if granularity == "block":
            return self.block(index)
        parent_granularity = _LEVELS[_LEVELS.index(granularity) - 1]
        parent_index, n = divmod(index, _FANOUT[granularity])
        return self._intern(granularity, self._from_index(parent_granularity, parent_index), n)

    def next(self, obj, quantity=1):
        return self._from_index(obj.granularity, self._index(obj) + quantity)

    def parent(self, obj):
        return obj.parent

    def children(self, obj):
        level = _LEVELS.index(obj.granularity)
        if level == len(_LEVELS) - 1:
            return None
        child = _LEVELS[level + 1]
        first = self._intern(child, obj, 0)
        last = self._intern(child, obj, _FANOUT[child] - 1)
        return TimeRange(self, first, last)

    def serialize(self, obj):
        parts = []
        node = obj
        while node is not None:
            parts.append(str(node.number))
            node = node.parent
        return ".".join(reversed(parts))


class StubCalendar(Calendar):
    """Calendar that implements no granularity operation at all."""


@pytest.fixture
def cal():
    return TickCalendar()


@pytest.fixture
def other_cal():
    return TickCalendar()


@pytest.fixture
def stub():
    return StubCalendar()
