# test/test_calendar.py
import pytest

from chronoalgebra.core import (
    Calendar,
    CalendarOperationNotImplemented,
    CoreError,
    Relation,
    TimeRange,
)


@pytest.mark.parametrize(
    "operation, call",
    [
        ("next", lambda c, obj: c.next(obj)),
        ("children", lambda c, obj: c.children(obj)),
        ("parent", lambda c, obj: c.parent(obj)),
        ("serialize", lambda c, obj: c.serialize(obj)),
        ("of", lambda c, obj: c.of("2024")),
    ],
)
def test_unimplemented_operations_fail_loudly(stub, operation, call):
    obj = stub._intern("year", None, 2024)
    with pytest.raises(CalendarOperationNotImplemented) as exc:
        call(stub, obj)
    assert exc.value.operation == operation
    assert exc.value.calendar_name == "StubCalendar"
    assert f"StubCalendar.{operation}()" in str(exc.value)


def test_not_implemented_is_distinct_from_algebra_errors(stub):
    with pytest.raises(NotImplementedError):
        stub.next(stub._intern("year", None, 1))
    assert issubclass(CalendarOperationNotImplemented, CoreError)
    assert not issubclass(CalendarOperationNotImplemented, ValueError)


def test_stub_still_relates_roots(stub):
    a = stub._intern("year", None, 1)
    b = stub._intern("year", None, 2)
    assert stub.relate(a, b) is Relation.left_adjoining()
    assert a.relation_to(a) is Relation.equal()


def test_stub_children_walk_surfaces_not_implemented(stub):
    year = stub._intern("year", None, 1)
    month = stub._intern("month", year, 1)
    with pytest.raises(CalendarOperationNotImplemented):
        month.relation_to(year)


def test_str_of_object_uses_serialize(stub):
    with pytest.raises(CalendarOperationNotImplemented):
        str(stub._intern("year", None, 1))


def test_contains(cal, other_cal):
    assert cal.contains(cal.block(0))
    assert cal.contains(cal.range(cal.block(0), cal.block(1)))
    assert not cal.contains(other_cal.block(0))
    assert not cal.contains("block 0")


def test_relate_is_total_across_calendars(cal, other_cal):
    assert cal.relate(other_cal.block(0), other_cal.block(1)) is Relation.unrelated()
    assert cal.relate(cal.block(0), other_cal.block(0)) is Relation.unrelated()


def test_range_factory(cal):
    rng = cal.range(cal.block(0))
    assert isinstance(rng, TimeRange)
    assert rng.calendar is cal
    assert rng.end is None


def test_repr_counts_instances():
    cal = Calendar()
    assert repr(cal) == "Calendar(instances=0)"
    cal._intern("year", None, 1)
    cal._intern("year", None, 1)
    assert repr(cal) == "Calendar(instances=1)"


def test_is_comparable_checks_calendar_and_root(cal, other_cal, stub):
    assert cal.is_comparable(cal.subtick(1, 2, 0))
    assert cal.is_comparable(cal.range(cal.block(0)))
    assert cal.is_comparable(cal.range())
    assert not cal.is_comparable(cal._intern("era", None, 0))
    assert not cal.is_comparable(cal.range(None, cal._intern("era", None, 0)))
    assert not cal.is_comparable(other_cal.block(0))
    assert not cal.is_comparable("block 0")
    # no declared roots: anything of its own
    assert stub.is_comparable(stub._intern("era", None, 0))
    assert not stub.is_comparable(cal.block(0))
