"""Quiet output formatter - one-line summary."""

from vrtools.models import ConversionResult


def format_quiet(result: ConversionResult) -> str:
    """Format a conversion result as a one-line summary.

    Format: output path | left + right -> composite | source XMP
    """
    parts = []
    parts.append(result.output_path)
    parts.append(f"{result.left} + {result.right} -> {result.composite}")
    parts.append(f"{result.source} XMP")
    return " | ".join(parts)
