"""Functional helpers for sequences, mappings, channels, conditions, errors and JSON HTTP."""

__version__ = "0.1.0"

__all__ = [
    "channel",
    "concurrency",
    "condition",
    "errors",
    "find",
    "func",
    "httpclient",
    "intersect",
    "mapping",
]