"""Hierarchical time objects and an interval relation algebra."""

__version__ = "0.1.0"
