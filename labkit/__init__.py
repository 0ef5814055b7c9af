"""Byte-scanning helpers, caches, queues and small data-shaping tools."""

__version__ = "0.1.0"