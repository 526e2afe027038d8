# chronoalgebra/core/hierarchy.py
"""
Relation resolution between time objects of one calendar tree.

Objects at different depths are aligned on the shallower one's depth by
walking up the deeper object's parents; the coarse relation found there is
then sharpened with the deeper object's position (leading/trailing
descendant) inside that ancestor.
"""
from __future__ import annotations

import logging

from .exceptions import HierarchyError
from .relation import Relation, RelationCode
from .timeobject import CalendarTimeObject
from ..utils.config import SETTINGS

logger = logging.getLogger(__name__)


def depth(obj: CalendarTimeObject, *, max_depth: int | None = None) -> int:
    """Number of ancestors of `obj`; raises HierarchyError beyond `max_depth`."""
    limit = SETTINGS.max_depth if max_depth is None else max_depth
    n = 0
    for _ in obj.ancestors():
        n += 1
        if n > limit:
            raise HierarchyError(
                f"Parent chain of {obj!r} is deeper than max_depth={limit}."
            )
    return n


def ancestor_at(obj: CalendarTimeObject, levels_up: int) -> CalendarTimeObject:
    node = obj
    for _ in range(levels_up):
        if node.parent is None:
            raise HierarchyError(f"{obj!r} has fewer than {levels_up} ancestors.")
        node = node.parent
    return node


def is_leading(obj: CalendarTimeObject, ancestor: CalendarTimeObject) -> bool:
    """True when `obj` shares its start boundary with `ancestor`."""
    node = obj
    while node is not ancestor and node != ancestor:
        if not node.is_first_child():
            return False
        node = node.parent
    return True


def is_trailing(obj: CalendarTimeObject, ancestor: CalendarTimeObject) -> bool:
    """True when `obj` shares its end boundary with `ancestor`."""
    node = obj
    while node is not ancestor and node != ancestor:
        if not node.is_last_child():
            return False
        node = node.parent
    return True


def relate(
    a: CalendarTimeObject,
    b: CalendarTimeObject,
    *,
    max_depth: int | None = None,
) -> Relation:
    """
    Relation of `a` to `b`.

    Incomparable operands (other calendar, disjoint granularity trees)
    yield Relation.unrelated(); this function never raises for them.
    """
    if a is b:
        return Relation.equal()
    if a.calendar is not b.calendar:
        return Relation.unrelated()

    depth_a = depth(a, max_depth=max_depth)
    depth_b = depth(b, max_depth=max_depth)

    if depth_a > depth_b:
        result = _relate_descendant(a, b, depth_a - depth_b)
    elif depth_a < depth_b:
        result = _relate_descendant(b, a, depth_b - depth_a).inverse()
    else:
        result = _relate_peers(a, b)

    logger.debug("relate(%r, %r) -> %r", a, b, result)
    return result


def _relate_peers(a: CalendarTimeObject, b: CalendarTimeObject) -> Relation:
    """Relation between two objects at the same depth."""
    if a == b:
        return Relation.equal()
    if a.granularity != b.granularity:
        return Relation.unrelated()

    if a.parent is None or b.parent is None:
        # both roots: one infinite sibling sequence
        return _relate_siblings(a, b)

    parents = _relate_peers(a.parent, b.parent)
    if not parents.exists():
        return Relation.unrelated()
    if parents.equals():
        return _relate_siblings(a, b)

    if parents.is_to_left():
        if parents.is_left_adjacent() and a.is_last_child() and b.is_first_child():
            return Relation.left_adjoining()
        return Relation.left()

    if parents.is_right_adjacent() and a.is_first_child() and b.is_last_child():
        return Relation.right_adjoining()
    return Relation.right()


def _relate_siblings(a: CalendarTimeObject, b: CalendarTimeObject) -> Relation:
    if a.number == b.number:
        return Relation.equal()
    if a.number < b.number:
        return Relation.left_adjoining() if b.number - a.number == 1 else Relation.left()
    return Relation.right_adjoining() if a.number - b.number == 1 else Relation.right()


def _relate_descendant(
    deep: CalendarTimeObject,
    other: CalendarTimeObject,
    levels_up: int,
) -> Relation:
    """Relation of `deep` to `other`, where `deep` sits `levels_up` levels lower."""
    ancestor = ancestor_at(deep, levels_up)
    coarse = _relate_peers(ancestor, other)

    if not coarse.exists():
        return Relation.unrelated()

    if coarse.equals():
        left = RelationCode.AT_LEFT if is_leading(deep, ancestor) else RelationCode.INSIDE
        right = RelationCode.AT_RIGHT if is_trailing(deep, ancestor) else RelationCode.INSIDE
        return Relation.of_sides(left, right)

    if coarse.is_to_left():
        if coarse.is_left_adjacent() and is_trailing(deep, ancestor):
            return Relation.left_adjoining()
        return Relation.left()

    if coarse.is_right_adjacent() and is_leading(deep, ancestor):
        return Relation.right_adjoining()
    return Relation.right()
