from .gregorian import GregorianCalendar, GRANULARITIES

__all__ = ["GregorianCalendar", "GRANULARITIES"]
