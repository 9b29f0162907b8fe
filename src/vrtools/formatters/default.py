"""Default output formatter - human-readable conversion summary."""

from vrtools.models import ConversionResult, XMPReport


def format_default(result: ConversionResult) -> str:
    """Format a conversion result as the CLI success message."""
    return f"Success! Output saved to: {result.output_path}"


def format_report(report: XMPReport) -> str:
    """Format an inspection report.

    Shows segment counts, which XMP blocks exist and where the right-eye
    payload was found.
    """
    lines = []
    lines.append("=" * 60)
    lines.append(f"File: {report.path}")
    lines.append("=" * 60)
    lines.append(f"  APP1 segments:    {report.app1_segments}")
    lines.append(f"  Standard XMP:     {'yes' if report.has_standard_xmp else 'no'}")
    if report.has_extended_xmp:
        lines.append(f"  Extended XMP:     yes ({report.extended_chunks} chunks)")
    else:
        lines.append("  Extended XMP:     no")

    if report.has_payload:
        lines.append(
            f"  Right eye:        {report.payload_length} base64 characters "
            f"({report.payload_source} XMP)"
        )
    else:
        lines.append("  Right eye:        not found")
    return "\n".join(lines)
