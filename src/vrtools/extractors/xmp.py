"""Standard and extended XMP extraction from JPEG APP1 segments.

A JPEG carries at most one standard XMP packet (64 KB limit). Larger
metadata, such as a VR180 right-eye image, is split into extended XMP
chunks. Each extended chunk segment is laid out as:

    "http://ns.adobe.com/xmp/extension/\\0"
    GUID            32 bytes, ASCII hex MD5 of the full extended packet
    full length      4 bytes, big-endian
    chunk offset     4 bytes, big-endian
    chunk data      to end of segment

Chunks may appear in any order and are reassembled by offset.
"""

from __future__ import annotations

import struct
from collections.abc import Iterable, Iterator

from loguru import logger

from vrtools.models import ExtendedChunk, Segment, XMPPackets
from vrtools.utils.jpeg import iter_app1_segments

STANDARD_XMP_MARKER = b"http://ns.adobe.com/xap/1.0/\x00"
EXTENDED_XMP_MARKER = b"http://ns.adobe.com/xmp/extension/\x00"

GUID_SIZE = 32
# GUID + full length + chunk offset
EXTENDED_HEADER_SIZE = GUID_SIZE + 4 + 4


def extract_standard_xmp(data: bytes) -> str | None:
    """Return the first standard XMP packet in a JPEG, or None."""
    return _standard_xmp_from_segments(iter_app1_segments(data))


def _standard_xmp_from_segments(segments: Iterable[Segment]) -> str | None:
    for segment in segments:
        index = segment.payload.find(STANDARD_XMP_MARKER)
        if index == -1:
            continue
        try:
            return segment.payload[index + len(STANDARD_XMP_MARKER) :].decode("utf-8")
        except UnicodeDecodeError:
            logger.debug("Standard XMP at offset {} is not valid UTF-8", segment.offset)
    return None


def parse_extended_chunk(segment: Segment) -> ExtendedChunk | None:
    """Parse an extended XMP chunk from an APP1 segment.

    Args:
        segment: APP1 segment to inspect

    Returns:
        ExtendedChunk, or None if the segment is not an extended XMP chunk
        or its header is truncated
    """
    payload = segment.payload
    index = payload.find(EXTENDED_XMP_MARKER)
    if index == -1:
        return None

    header = index + len(EXTENDED_XMP_MARKER)
    if header + EXTENDED_HEADER_SIZE >= len(payload):
        logger.debug("Extended XMP chunk at offset {} has no data", segment.offset)
        return None

    guid = payload[header : header + GUID_SIZE].decode("ascii", errors="replace")
    full_length, chunk_offset = struct.unpack_from(">II", payload, header + GUID_SIZE)
    return ExtendedChunk(
        guid=guid,
        full_length=full_length,
        offset=chunk_offset,
        data=payload[header + EXTENDED_HEADER_SIZE :],
    )


def collect_extended_chunks(segments: Iterable[Segment]) -> list[ExtendedChunk]:
    """Collect every extended XMP chunk, in discovery order."""
    chunks = []
    for segment in segments:
        chunk = parse_extended_chunk(segment)
        if chunk is not None:
            chunks.append(chunk)
    return chunks


def reassemble_extended_chunks(chunks: Iterable[ExtendedChunk]) -> bytes:
    """Concatenate chunk data ordered by declared offset, not discovery order."""
    ordered = sorted(chunks, key=lambda chunk: chunk.offset)
    return b"".join(chunk.data for chunk in ordered)


def _extended_xmp_from_chunks(chunks: list[ExtendedChunk]) -> str | None:
    if not chunks:
        return None
    combined = reassemble_extended_chunks(chunks)
    logger.debug("Reassembled {} extended XMP chunks ({} bytes)", len(chunks), len(combined))
    try:
        return combined.decode("utf-8")
    except UnicodeDecodeError:
        logger.debug("Reassembled extended XMP is not valid UTF-8")
        return None


def extract_extended_xmp(data: bytes) -> str | None:
    """Return the reassembled extended XMP packet in a JPEG, or None."""
    return _extended_xmp_from_chunks(collect_extended_chunks(iter_app1_segments(data)))


def extract_all_xmp(data: bytes) -> str:
    """Return standard XMP followed by extended XMP (empty if neither exists)."""
    return read_xmp_packets(data).combined


def read_xmp_packets(data: bytes) -> XMPPackets:
    """Extract standard and extended XMP in a single segment scan.

    Args:
        data: Full JPEG file content

    Returns:
        XMPPackets with whatever was found
    """
    segments = list(iter_app1_segments(data))
    chunks = collect_extended_chunks(segments)
    packets = XMPPackets(
        standard=_standard_xmp_from_segments(segments),
        extended=_extended_xmp_from_chunks(chunks),
        app1_segments=len(segments),
        extended_chunks=len(chunks),
    )
    logger.debug(
        "Found {} APP1 segments (standard XMP: {}, extended chunks: {})",
        packets.app1_segments,
        packets.standard is not None,
        packets.extended_chunks,
    )
    return packets


def iter_xmp_candidates(packets: XMPPackets) -> Iterator[tuple[str, str]]:
    """Yield (source, text) pairs to search for the right-eye payload.

    Order: standard alone, extended alone, then both concatenated. Producers
    usually put large payloads in the extended block, but some use the
    standard one.
    """
    if packets.standard is not None:
        yield "standard", packets.standard
    if packets.extended is not None:
        yield "extended", packets.extended
    yield "combined", packets.combined
