"""JPEG container scanning utilities."""

from __future__ import annotations

import struct
from collections.abc import Iterator

from vrtools.models import Segment

# Application segment 1 (EXIF / XMP)
APP1_MARKER = b"\xff\xe1"

# Marker (2) + length (2)
SEGMENT_HEADER_SIZE = 4


def iter_app1_segments(data: bytes) -> Iterator[Segment]:
    """Yield every APP1 segment found in a JPEG byte stream.

    This is a permissive scan, not a marker-table walk: any ``FF E1`` pair
    is treated as a segment start, and scanning moves on one byte at a time
    between matches so that damaged streams still yield what they can.

    The big-endian length after the marker includes its own two bytes. A
    payload running past the end of the buffer is clamped. A segment whose
    length would end it before its payload starts is skipped.

    Args:
        data: Full JPEG file content

    Yields:
        Segment objects in stream order
    """
    size = len(data)
    pos = 0
    while pos < size - SEGMENT_HEADER_SIZE:
        # Equivalent to stepping byte-by-byte until the next marker pair
        pos = data.find(APP1_MARKER, pos, size - SEGMENT_HEADER_SIZE + 1)
        if pos == -1:
            return

        (length,) = struct.unpack_from(">H", data, pos + 2)
        start = pos + SEGMENT_HEADER_SIZE
        end = min(pos + 2 + length, size)

        if end <= start:
            pos += 1
            continue

        yield Segment(marker=APP1_MARKER, offset=pos, length=length, payload=data[start:end])
        pos = end


def count_app1_segments(data: bytes) -> int:
    """Count APP1 segments in a JPEG byte stream."""
    return sum(1 for _ in iter_app1_segments(data))
