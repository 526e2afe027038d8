# chronoalgebra/core/relation.py
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .exceptions import InvalidRelation


class RelationCode(IntEnum):
    """
    Position of one boundary of interval A relative to the span of interval B.

    NONE is a sentinel for "not comparable", not a position.
    """
    NONE = 0
    LEFT = 1
    AT_LEFT = 2
    INSIDE = 3
    AT_RIGHT = 4
    RIGHT = 5


_NONE = RelationCode.NONE
_LEFT = RelationCode.LEFT
_AT_LEFT = RelationCode.AT_LEFT
_INSIDE = RelationCode.INSIDE
_AT_RIGHT = RelationCode.AT_RIGHT
_RIGHT = RelationCode.RIGHT

_NAMES: dict[tuple[RelationCode, RelationCode], str] = {
    (_NONE, _NONE): "unrelated",
    (_LEFT, _LEFT): "left",
    (_LEFT, _AT_LEFT): "left_adjoining",
    (_LEFT, _INSIDE): "left_intersecting",
    (_LEFT, _AT_RIGHT): "left_overlapping",
    (_LEFT, _RIGHT): "overlapping",
    (_AT_LEFT, _AT_LEFT): "at_left",
    (_AT_LEFT, _INSIDE): "left_inside",
    (_AT_LEFT, _AT_RIGHT): "equal",
    (_AT_LEFT, _RIGHT): "right_overlapping",
    (_INSIDE, _INSIDE): "inside",
    (_INSIDE, _AT_RIGHT): "right_inside",
    (_INSIDE, _RIGHT): "right_intersecting",
    (_AT_RIGHT, _AT_RIGHT): "at_right",
    (_AT_RIGHT, _RIGHT): "right_adjoining",
    (_RIGHT, _RIGHT): "right",
}

# Rendering glyphs
_EMPTY = "_"
_FILL = "="
_BOUNDARY = "|"
_FILLED_BOUNDARY = "#"

_TEMPLATE = _EMPTY * 2 + _BOUNDARY * 5 + _EMPTY * 2
_INDICES = {_LEFT: 0, _AT_LEFT: 2, _INSIDE: 4, _AT_RIGHT: 6, _RIGHT: 8}


def _to_code(value: object, side: str) -> RelationCode:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRelation(f"{side} must be a RelationCode or int, got {type(value).__name__}.")
    try:
        return RelationCode(value)
    except ValueError as e:
        allowed = ",".join(str(int(c)) for c in RelationCode)
        raise InvalidRelation(f"{side} must be one of ({allowed}), got {value!r}.") from e


@dataclass(frozen=True, slots=True)
class Relation:
    """
    How interval A relates to a reference interval B.

    `left_code` classifies A's start boundary and `right_code` A's end boundary
    against B's span. Any NONE side collapses to the unrelated value, so there
    are exactly 16 distinct relations; use `of_sides` or the named constructors
    to get the canonical instances.

    Example::

        r = Relation.of_sides(RelationCode.LEFT, RelationCode.AT_LEFT)
        r is Relation.left_adjoining()   # True
        str(r)                           # '==#||||__'
    """
    left_code: RelationCode
    right_code: RelationCode

    def __post_init__(self) -> None:
        left = _to_code(self.left_code, "leftRelation")
        right = _to_code(self.right_code, "rightRelation")

        if left is _NONE or right is _NONE:
            left = right = _NONE
        elif left > right:
            raise InvalidRelation("leftRelation must be less than or equal to rightRelation.")

        object.__setattr__(self, "left_code", left)
        object.__setattr__(self, "right_code", right)

    # ---- construction ----
    @classmethod
    def of_sides(cls, left_relation: RelationCode | int, right_relation: RelationCode | int) -> "Relation":
        left = _to_code(left_relation, "leftRelation")
        right = _to_code(right_relation, "rightRelation")
        if left is _NONE or right is _NONE:
            return _CANONICAL[(_NONE, _NONE)]
        if left > right:
            raise InvalidRelation("leftRelation must be less than or equal to rightRelation.")
        return _CANONICAL[(left, right)]

    @classmethod
    def unrelated(cls) -> "Relation":
        return cls.of_sides(_NONE, _NONE)

    @classmethod
    def left(cls) -> "Relation":
        return cls.of_sides(_LEFT, _LEFT)

    @classmethod
    def left_adjoining(cls) -> "Relation":
        return cls.of_sides(_LEFT, _AT_LEFT)

    @classmethod
    def left_intersecting(cls) -> "Relation":
        return cls.of_sides(_LEFT, _INSIDE)

    @classmethod
    def left_overlapping(cls) -> "Relation":
        return cls.of_sides(_LEFT, _AT_RIGHT)

    @classmethod
    def overlapping(cls) -> "Relation":
        return cls.of_sides(_LEFT, _RIGHT)

    @classmethod
    def at_left(cls) -> "Relation":
        return cls.of_sides(_AT_LEFT, _AT_LEFT)

    @classmethod
    def left_inside(cls) -> "Relation":
        return cls.of_sides(_AT_LEFT, _INSIDE)

    @classmethod
    def equal(cls) -> "Relation":
        return cls.of_sides(_AT_LEFT, _AT_RIGHT)

    @classmethod
    def right_overlapping(cls) -> "Relation":
        return cls.of_sides(_AT_LEFT, _RIGHT)

    @classmethod
    def inside(cls) -> "Relation":
        return cls.of_sides(_INSIDE, _INSIDE)

    @classmethod
    def right_inside(cls) -> "Relation":
        return cls.of_sides(_INSIDE, _AT_RIGHT)

    @classmethod
    def right_intersecting(cls) -> "Relation":
        return cls.of_sides(_INSIDE, _RIGHT)

    @classmethod
    def at_right(cls) -> "Relation":
        return cls.of_sides(_AT_RIGHT, _AT_RIGHT)

    @classmethod
    def right_adjoining(cls) -> "Relation":
        return cls.of_sides(_AT_RIGHT, _RIGHT)

    @classmethod
    def right(cls) -> "Relation":
        return cls.of_sides(_RIGHT, _RIGHT)

    @classmethod
    def all(cls) -> tuple["Relation", ...]:
        """All 16 canonical relations, unrelated first."""
        return tuple(_CANONICAL.values())

    # ---- predicates ----
    def exists(self) -> bool:
        return self.left_code is not _NONE

    def equals(self) -> bool:
        return self.exists() and self.left_code is _AT_LEFT and self.right_code is _AT_RIGHT

    def contains(self) -> bool:
        return self.exists() and self.left_code <= _AT_LEFT and self.right_code >= _AT_RIGHT

    def is_contained(self) -> bool:
        return self.exists() and self.left_code > _AT_LEFT and self.right_code < _AT_RIGHT

    def intersects(self) -> bool:
        return self.exists() and self.left_code < _AT_RIGHT and self.right_code > _AT_LEFT

    def is_to_left(self) -> bool:
        return self.exists() and self.left_code < _AT_LEFT

    def lies_to_left(self) -> bool:
        return self.exists() and self.left_code < _AT_LEFT and self.right_code <= _AT_LEFT

    def is_to_right(self) -> bool:
        return self.exists() and self.right_code > _AT_RIGHT

    def lies_to_right(self) -> bool:
        return self.exists() and self.left_code >= _AT_RIGHT and self.right_code > _AT_RIGHT

    def is_left_adjacent(self) -> bool:
        return self.right_code is _AT_LEFT

    def is_right_adjacent(self) -> bool:
        return self.left_code is _AT_RIGHT

    def is_adjacent(self) -> bool:
        return self.is_left_adjacent() or self.is_right_adjacent()

    def aligns_left(self) -> bool:
        return self.left_code is _AT_LEFT

    def aligns_right(self) -> bool:
        return self.right_code is _AT_RIGHT

    # ---- derived relations ----
    def inverse(self) -> "Relation":
        """
        Relation of the reference interval B to A (operands swapped).

        Exact for every relation between non-degenerate intervals; the point
        relations at_left/at_right map to the relation of B to a point on its
        start/end boundary.
        """
        if not self.exists():
            return self

        left, right = self.left_code, self.right_code

        # B's start boundary, seen from A
        if left is _LEFT:
            if right is _LEFT:
                inv_left = _RIGHT
            elif right is _AT_LEFT:
                inv_left = _AT_RIGHT
            else:
                inv_left = _INSIDE
        elif left is _AT_LEFT:
            inv_left = _AT_LEFT
        else:
            inv_left = _LEFT

        # B's end boundary, seen from A
        if right is _RIGHT:
            if left < _AT_RIGHT:
                inv_right = _INSIDE
            elif left is _AT_RIGHT:
                inv_right = _AT_LEFT
            else:
                inv_right = _LEFT
        elif right is _AT_RIGHT:
            inv_right = _AT_RIGHT
        else:
            inv_right = _RIGHT

        return Relation.of_sides(inv_left, inv_right)

    @property
    def name(self) -> str:
        return _NAMES[(self.left_code, self.right_code)]

    # ---- rendering ----
    def __str__(self) -> str:
        if not self.exists():
            return _EMPTY * len(_TEMPLATE)

        left_index = _INDICES[self.left_code]
        right_index = _INDICES[self.right_code]

        glyphs = list(_TEMPLATE)
        for i in range(left_index, right_index + 1):
            glyphs[i] = _FILLED_BOUNDARY if glyphs[i] == _BOUNDARY else _FILL
        return "".join(glyphs)

    def __repr__(self) -> str:
        return f"Relation.{self.name}"


_CANONICAL: dict[tuple[RelationCode, RelationCode], Relation] = {
    codes: Relation(*codes) for codes in _NAMES
}
