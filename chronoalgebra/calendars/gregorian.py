# chronoalgebra/calendars/gregorian.py
from __future__ import annotations

import datetime as _dt
import logging
from typing import Any

import numpy as np

from chronoalgebra.core import (
    Calendar,
    CalendarTimeObject,
    InvalidTimeObject,
    InvalidTimeValue,
    TimeRange,
)

logger = logging.getLogger(__name__)


# granularity -> numpy datetime64 unit, coarsest first
UNITS: dict[str, str] = {
    "year": "Y",
    "month": "M",
    "day": "D",
    "hour": "h",
    "minute": "m",
    "second": "s",
    "millisecond": "ms",
}

GRANULARITIES: tuple[str, ...] = tuple(UNITS)
_BY_UNIT: dict[str, str] = {unit: name for name, unit in UNITS.items()}

# months and days are numbered from 1 inside their parent, everything else from 0
_FIRST_NUMBER: dict[str, int] = {"month": 1, "day": 1}


def _parent_granularity(granularity: str) -> str | None:
    i = GRANULARITIES.index(granularity)
    return None if i == 0 else GRANULARITIES[i - 1]


def _child_granularity(granularity: str) -> str | None:
    i = GRANULARITIES.index(granularity)
    return None if i == len(GRANULARITIES) - 1 else GRANULARITIES[i + 1]


class GregorianCalendar(Calendar):
    """
    Proleptic Gregorian calendar backed by numpy datetime64.

    Granularities, coarsest first: year > month > day > hour > minute >
    second > millisecond. Years are the roots of the tree.

    Basic usage::

        cal = GregorianCalendar()
        march = cal.of("2024-03")
        day = cal.of("2024-03-05")
        day.relation_to(march).is_contained()   # True
        [str(d) for d in cal.children(march).take(2)]   # ['2024-03-01', '2024-03-02']
    """

    root_granularities = ("year",)

    # ---- parsing / serialization ----
    def of(self, source: Any, granularity: str | None = None) -> CalendarTimeObject:
        if isinstance(source, CalendarTimeObject):
            if source.calendar is not self:
                raise InvalidTimeValue("Time object belongs to a different calendar.")
            source = self.to_datetime64(source)

        value = self._parse(source)
        unit, _ = np.datetime_data(value.dtype)

        if granularity is None:
            if unit not in _BY_UNIT:
                raise InvalidTimeValue(
                    f"Unsupported resolution {unit!r} for {source!r}; "
                    f"pass granularity= one of {GRANULARITIES}."
                )
            granularity = _BY_UNIT[unit]
        elif granularity not in UNITS:
            raise InvalidTimeValue(
                f"Unknown granularity {granularity!r}; expected one of {GRANULARITIES}."
            )

        obj = self._build(value.astype(f"datetime64[{UNITS[granularity]}]"), granularity)
        logger.debug("of(%r) -> %s %s", source, granularity, obj.number)
        return obj

    def _parse(self, source: Any) -> np.datetime64:
        if isinstance(source, np.datetime64):
            value = source
        elif isinstance(source, (str, _dt.date)):
            try:
                value = np.datetime64(source)
            except ValueError as e:
                raise InvalidTimeValue(f"Cannot parse {source!r} as a Gregorian time value.") from e
        else:
            raise InvalidTimeValue(
                f"Expected str, date, datetime or numpy.datetime64, got {type(source).__name__}."
            )
        if np.isnat(value):
            raise InvalidTimeValue(f"{source!r} is not a time (NaT).")
        return value

    def serialize(self, obj: CalendarTimeObject) -> str:
        return str(self.to_datetime64(obj))

    def to_datetime64(self, obj: CalendarTimeObject) -> np.datetime64:
        """numpy value of `obj`, in the unit of its granularity."""
        self._check(obj)
        unit = UNITS[obj.granularity]
        if obj.parent is None:
            return np.datetime64(obj.number - 1970, "Y")
        start = self.to_datetime64(obj.parent).astype(f"datetime64[{unit}]")
        return start + np.timedelta64(obj.number - _FIRST_NUMBER.get(obj.granularity, 0), unit)

    # ---- navigation ----
    def next(self, obj: CalendarTimeObject, quantity: int = 1) -> CalendarTimeObject | None:
        self._check(obj)
        unit = UNITS[obj.granularity]
        return self._build(self.to_datetime64(obj) + np.timedelta64(quantity, unit), obj.granularity)

    def parent(self, obj: CalendarTimeObject) -> CalendarTimeObject | None:
        self._check(obj)
        return obj.parent

    def children(self, obj: CalendarTimeObject) -> TimeRange | None:
        self._check(obj)
        child = _child_granularity(obj.granularity)
        if child is None:
            return None

        unit = UNITS[child]
        value = self.to_datetime64(obj)
        first = value.astype(f"datetime64[{unit}]")
        last = (value + 1).astype(f"datetime64[{unit}]") - np.timedelta64(1, unit)
        return TimeRange(self, self._build(first, child), self._build(last, child))

    # ---- helpers ----
    def _build(self, value: np.datetime64, granularity: str) -> CalendarTimeObject:
        parent_granularity = _parent_granularity(granularity)
        if parent_granularity is None:
            return self._intern(granularity, None, int(value.astype(np.int64)) + 1970)

        parent_unit = UNITS[parent_granularity]
        unit = UNITS[granularity]
        parent_value = value.astype(f"datetime64[{parent_unit}]")
        offset = int((value - parent_value.astype(f"datetime64[{unit}]")).astype(np.int64))

        parent = self._build(parent_value, parent_granularity)
        return self._intern(granularity, parent, offset + _FIRST_NUMBER.get(granularity, 0))

    def _check(self, obj: CalendarTimeObject) -> None:
        if not isinstance(obj, CalendarTimeObject) or obj.calendar is not self:
            raise InvalidTimeObject(f"{obj!r} is not a time object of this calendar.")
        if obj.granularity not in UNITS:
            raise InvalidTimeObject(f"Unknown granularity {obj.granularity!r}.")
