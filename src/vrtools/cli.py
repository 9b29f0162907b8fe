"""
Command-line interface for vrtools.

Usage:
  vrtools photo.jpg                        # Writes photo-converted.jpg
  vrtools photo.jpg photo-sbs.jpg          # Custom output path
  vrtools --inspect photo.jpg              # Show XMP / right-eye info only
  vrtools --right-eye right.jpg photo.jpg  # Also save the raw right eye
  vrtools --json photo.jpg                 # JSON result
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from vrtools._version import __version__
from vrtools.convert import convert_to_side_by_side, extract_right_eye, inspect_file
from vrtools.errors import VR180Error
from vrtools.formatters import format_default, format_json, format_quiet, format_report
from vrtools.logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="vrtools",
        description="VR180 to side-by-side converter.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Arguments:
  input        Path to a VR180 JPEG image (with embedded right eye in XMP metadata)
  output       Optional output path. If not specified, creates <input>-converted.jpg

Examples:
  vrtools photo.jpg
  vrtools photo.jpg photo-sbs.jpg
  vrtools --inspect photo.jpg
        """,
    )
    parser.add_argument("input", help="VR180 JPEG image")
    parser.add_argument("output", nargs="?", help="Output path (default: <input>-converted.<ext>)")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--right-eye",
        metavar="PATH",
        help="Also write the embedded right-eye JPEG to PATH",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    parser.add_argument(
        "--inspect",
        action="store_true",
        help="Report XMP and right-eye payload info without converting",
    )

    # Output mode (mutually exclusive)
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument("--json", action="store_true", help="Print the result as JSON")
    mode_group.add_argument("-q", "--quiet", action="store_true", help="One-line summary only")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for vrtools CLI."""
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    try:
        if args.inspect:
            report = inspect_file(args.input)
            print(format_json(report) if args.json else format_report(report))
            return 0 if report.has_payload else 1

        if not (args.json or args.quiet):
            print(f"Converting {Path(args.input).name}...")
        result = convert_to_side_by_side(args.input, args.output)

        if args.right_eye:
            extract_right_eye(args.input, args.right_eye)

        if args.json:
            print(format_json(result))
        elif args.quiet:
            print(format_quiet(result))
        else:
            print(format_default(result))
            if args.right_eye:
                print(f"Right eye saved to: {args.right_eye}")
        return 0

    except (VR180Error, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
