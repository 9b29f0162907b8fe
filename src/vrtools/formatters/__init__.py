"""Output formatters for vrtools."""

from .default import format_default, format_report
from .json import format_json
from .quiet import format_quiet

__all__ = [
    "format_default",
    "format_report",
    "format_json",
    "format_quiet",
]
