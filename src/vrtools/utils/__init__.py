"""Utility functions for vrtools."""

from .jpeg import APP1_MARKER, count_app1_segments, iter_app1_segments

__all__ = [
    # JPEG scanning
    "APP1_MARKER",
    "iter_app1_segments",
    "count_app1_segments",
]
