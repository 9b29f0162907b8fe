"""Tests for standard and extended XMP extraction."""

import struct

from conftest import (
    EXTENDED_MARKER,
    GUID,
    STANDARD_MARKER,
    app1,
    extended_xmp_segments,
    insert_segments,
    jpeg_bytes,
    plain_xmp,
    standard_xmp_segment,
)

from vrtools.extractors import (
    collect_extended_chunks,
    extract_all_xmp,
    extract_extended_xmp,
    extract_standard_xmp,
    iter_xmp_candidates,
    parse_extended_chunk,
    read_xmp_packets,
    reassemble_extended_chunks,
)
from vrtools.models import ExtendedChunk, Segment, XMPPackets
from vrtools.utils import iter_app1_segments


def extended_segment(offset: int, data: bytes, full_length: int = 0) -> bytes:
    return app1(EXTENDED_MARKER + GUID + struct.pack(">II", full_length, offset) + data)


class TestStandardXMP:
    """Test extract_standard_xmp."""

    def test_extracts_text_after_marker(self):
        """Test the text following the namespace marker is returned."""
        data = insert_segments(jpeg_bytes((8, 8)), [standard_xmp_segment("<x:xmpmeta/>")])

        assert extract_standard_xmp(data) == "<x:xmpmeta/>"

    def test_first_match_wins(self):
        """Test only the first standard XMP segment is used."""
        data = standard_xmp_segment("first") + standard_xmp_segment("second")

        assert extract_standard_xmp(data) == "first"

    def test_skips_exif_segment(self):
        """Test an EXIF APP1 segment before the XMP one is ignored."""
        data = app1(b"Exif\x00\x00" + b"\x00" * 20) + standard_xmp_segment("xmp")

        assert extract_standard_xmp(data) == "xmp"

    def test_missing(self):
        """Test None is returned without a marker."""
        assert extract_standard_xmp(app1(b"Exif\x00\x00")) is None
        assert extract_standard_xmp(b"not a jpeg at all") is None

    def test_marker_without_nul_does_not_match(self):
        """Test the marker must be followed by a NUL byte."""
        assert extract_standard_xmp(app1(b"http://ns.adobe.com/xap/1.0/<x/>")) is None

    def test_invalid_utf8_skips_to_next(self):
        """Test a segment that is not valid UTF-8 is passed over."""
        data = app1(STANDARD_MARKER + b"\xff\xfebad") + standard_xmp_segment("good")
        assert extract_standard_xmp(data) == "good"


class TestExtendedXMP:
    """Test extended XMP chunk parsing and reassembly."""

    def test_parse_chunk_header(self):
        """Test GUID, full length and offset are read big-endian."""
        raw = extended_segment(0x01020304, b"data", full_length=0x0A0B0C0D)
        segment = next(iter_app1_segments(raw))
        chunk = parse_extended_chunk(segment)

        assert chunk is not None
        assert chunk.guid == GUID.decode()
        assert chunk.full_length == 0x0A0B0C0D
        assert chunk.offset == 0x01020304
        assert chunk.data == b"data"

    def test_parse_chunk_without_data(self):
        """Test a chunk with a bare header is skipped."""
        segment = Segment(
            marker=b"\xff\xe1",
            offset=0,
            length=0,
            payload=EXTENDED_MARKER + GUID + struct.pack(">II", 0, 0),
        )

        assert parse_extended_chunk(segment) is None

    def test_parse_non_extended_segment(self):
        """Test ordinary segments are not chunks."""
        segment = Segment(marker=b"\xff\xe1", offset=0, length=7, payload=b"Exif\x00")

        assert parse_extended_chunk(segment) is None

    def test_reassemble_orders_by_offset(self):
        """Test chunks are joined by declared offset, not discovery order."""
        chunks = [ExtendedChunk(offset=100, data=b"B"), ExtendedChunk(offset=0, data=b"A")]

        assert reassemble_extended_chunks(chunks) == b"AB"

    def test_out_of_order_segments(self):
        """Test segments stored out of order reassemble correctly."""
        data = extended_segment(6, b"world") + extended_segment(0, b"hello ")

        assert extract_extended_xmp(data) == "hello world"

    def test_collect_keeps_discovery_order(self):
        """Test collection itself does not sort."""
        data = extended_segment(6, b"world") + extended_segment(0, b"hello ")
        chunks = collect_extended_chunks(iter_app1_segments(data))

        assert [c.offset for c in chunks] == [6, 0]

    def test_split_multibyte_character(self):
        """Test UTF-8 is decoded only after reassembly."""
        encoded = "café".encode()
        data = extended_segment(4, encoded[4:]) + extended_segment(0, encoded[:4])

        assert extract_extended_xmp(data) == "café"

    def test_missing(self):
        """Test None is returned without chunks."""
        assert extract_extended_xmp(standard_xmp_segment("xmp")) is None

    def test_invalid_utf8_is_absent(self):
        """Test reassembled bytes that are not valid UTF-8 give None."""
        assert extract_extended_xmp(extended_segment(0, b"\xff\xfe")) is None

    def test_many_chunks(self):
        """Test a payload spread over many reversed chunks."""
        xmp = "<x>" + "A" * 20000 + "</x>"
        segments = extended_xmp_segments(xmp, chunk_size=1500)
        segments.reverse()

        assert extract_extended_xmp(b"".join(segments)) == xmp


class TestXMPPackets:
    """Test combined extraction and candidate ordering."""

    def test_read_both(self):
        """Test standard and extended packets are read in one pass."""
        data = standard_xmp_segment("S") + extended_segment(0, b"E")
        packets = read_xmp_packets(data)

        assert packets.standard == "S"
        assert packets.extended == "E"
        assert packets.app1_segments == 2
        assert packets.extended_chunks == 1
        assert packets.has_xmp is True
        assert packets.combined == "SE"
        assert extract_all_xmp(data) == "SE"

    def test_no_xmp(self):
        """Test files without XMP report nothing."""
        packets = read_xmp_packets(jpeg_bytes((8, 8)))

        assert packets.has_xmp is False
        assert packets.combined == ""
        assert extract_all_xmp(b"") == ""

    def test_candidate_order(self):
        """Test standard, then extended, then combined."""
        packets = XMPPackets(standard="S", extended="E")

        assert list(iter_xmp_candidates(packets)) == [
            ("standard", "S"),
            ("extended", "E"),
            ("combined", "SE"),
        ]

    def test_candidates_skip_missing(self):
        """Test absent packets are not offered alone."""
        packets = XMPPackets(standard=plain_xmp())

        assert [source for source, _ in iter_xmp_candidates(packets)] == ["standard", "combined"]
