"""Helpers for common list algorithms: transforms, statistics, set operations, searches and greedy allocation."""

__version__ = "0.1.0"
__all__ = ["transform", "stats", "sets", "search", "greedy"]