"""Hierarchical loggers, logging events, layouts, filters and per-thread diagnostic contexts."""

__version__ = "1.6.0"