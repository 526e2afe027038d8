# test/test_timeobject.py
import pytest

from chronoalgebra.core import CalendarTimeObject, InvalidTimeObject, TimeObject, TimeRange


def test_calendar_interns_objects(cal):
    assert cal.tick(0, 1) is cal.tick(0, 1)
    assert cal.tick(0, 1).parent is cal.block(0)
    assert cal.next(cal.tick(0, 3)) is cal.tick(1, 0)


def test_structural_interface(cal):
    assert isinstance(cal.block(0), TimeObject)
    assert not isinstance("2024", TimeObject)


def test_hierarchy_accessors(cal):
    sub = cal.subtick(2, 1, 0)
    assert sub.depth == 2
    assert sub.root is cal.block(2)
    assert list(sub.ancestors()) == [cal.tick(2, 1), cal.block(2)]
    assert cal.block(2).depth == 0
    assert cal.block(2).root is cal.block(2)


def test_first_and_last_child(cal):
    assert cal.tick(0, 0).is_first_child()
    assert not cal.tick(0, 0).is_last_child()
    assert cal.tick(0, 3).is_last_child()
    assert not cal.tick(0, 2).is_first_child()
    assert not cal.block(0).is_first_child()
    assert not cal.block(0).is_last_child()


def test_children_are_cached(cal):
    calls = {"n": 0}
    original = cal.children

    def counting_children(obj):
        calls["n"] += 1
        return original(obj)

    cal.children = counting_children
    block = cal.block(11)
    first = block.children()
    second = block.children()
    assert first is second
    assert calls["n"] == 1

    leaf = cal.subtick(11, 0, 0)
    assert leaf.children() is None
    assert leaf.children() is None
    assert calls["n"] == 2


def test_next_and_str_delegate_to_calendar(cal):
    assert cal.tick(0, 2).next() is cal.tick(0, 3)
    assert cal.tick(0, 2).next(-3) is cal.tick(-1, 3)
    assert str(cal.subtick(1, 2, 0)) == "1.2.0"


def test_equality_ignores_cached_children(cal):
    block = cal.block(3)
    block.children()
    assert block == CalendarTimeObject(cal, "block", None, 3)
    assert hash(block) == hash(CalendarTimeObject(cal, "block", None, 3))


def test_repr_shows_granularity_and_number(cal):
    assert repr(cal.tick(0, 2)) == "CalendarTimeObject(granularity='tick', number=2)"


@pytest.mark.parametrize("number", ["1", 1.0, None, True])
def test_rejects_non_int_number(cal, number):
    with pytest.raises(InvalidTimeObject):
        CalendarTimeObject(cal, "block", None, number)


def test_rejects_foreign_parent(cal, other_cal):
    with pytest.raises(InvalidTimeObject):
        CalendarTimeObject(cal, "tick", other_cal.block(0), 0)
    with pytest.raises(InvalidTimeObject):
        CalendarTimeObject(cal, "tick", "block 0", 0)
    with pytest.raises(InvalidTimeObject):
        CalendarTimeObject(None, "block", None, 0)


def test_object_is_immutable(cal):
    with pytest.raises(AttributeError):
        cal.block(0).number = 4
