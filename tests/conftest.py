"""Pytest configuration and fixtures.

VR180 photos are synthesized with Pillow: a primary JPEG with the right eye
embedded as base64 in standard or extended XMP APP1 segments.
"""

import base64
import io
import os
import struct

import pytest
from loguru import logger
from PIL import Image

from vrtools.config import reset_config

STANDARD_MARKER = b"http://ns.adobe.com/xap/1.0/\x00"
EXTENDED_MARKER = b"http://ns.adobe.com/xmp/extension/\x00"
GUID = b"0123456789ABCDEF0123456789ABCDEF"

GIMAGE_NS = 'xmlns:GImage="http://ns.google.com/photos/1.0/image/"'


def jpeg_bytes(size: tuple[int, int], noise: bool = True, color: str = "red") -> bytes:
    """Encode a test image as JPEG.

    Noise keeps the encoded size well above the payload length floor.
    """
    if noise:
        image = Image.merge("RGB", [Image.effect_noise(size, 80) for _ in range(3)])
    else:
        image = Image.new("RGB", size, color)
    buffer = io.BytesIO()
    image.save(buffer, format="JPEG", quality=95)
    return buffer.getvalue()


def app1(payload: bytes) -> bytes:
    """Wrap a payload in an APP1 segment."""
    return b"\xff\xe1" + struct.pack(">H", len(payload) + 2) + payload


def standard_xmp_segment(xmp: str) -> bytes:
    return app1(STANDARD_MARKER + xmp.encode("utf-8"))


def extended_xmp_segments(xmp: str, chunk_size: int = 4000) -> list[bytes]:
    """Split XMP into extended chunk segments, in offset order."""
    data = xmp.encode("utf-8")
    segments = []
    for offset in range(0, len(data), chunk_size):
        header = GUID + struct.pack(">II", len(data), offset)
        segments.append(app1(EXTENDED_MARKER + header + data[offset : offset + chunk_size]))
    return segments


def insert_segments(jpeg: bytes, segments: list[bytes]) -> bytes:
    """Insert segments right after the SOI marker."""
    return jpeg[:2] + b"".join(segments) + jpeg[2:]


def attribute_xmp(value: str) -> str:
    return (
        '<x:xmpmeta xmlns:x="adobe:ns:meta/">'
        '<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#">'
        f'<rdf:Description rdf:about="" {GIMAGE_NS} GImage:Mime="image/jpeg" '
        f'GImage:Data="{value}"/>'
        "</rdf:RDF></x:xmpmeta>"
    )


def plain_xmp() -> str:
    return (
        '<x:xmpmeta xmlns:x="adobe:ns:meta/">'
        '<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#">'
        '<rdf:Description rdf:about="" '
        'xmlns:xmpNote="http://ns.adobe.com/xmp/note/" '
        f'xmpNote:HasExtendedXMP="{GUID.decode()}"/>'
        "</rdf:RDF></x:xmpmeta>"
    )


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch, tmp_path):
    """Keep user config files and VRTOOLS_* variables out of tests."""
    import vrtools.config

    monkeypatch.setattr(vrtools.config, "CONFIG_LOCATIONS", [tmp_path / "missing.yaml"])
    for key in list(os.environ):
        if key.startswith("VRTOOLS_"):
            monkeypatch.delenv(key)
    reset_config()
    yield
    reset_config()
    logger.disable("vrtools")


@pytest.fixture
def left_jpeg() -> bytes:
    return jpeg_bytes((100, 50))


@pytest.fixture
def right_jpeg() -> bytes:
    return jpeg_bytes((80, 60))


@pytest.fixture
def right_base64(right_jpeg) -> str:
    return base64.b64encode(right_jpeg).decode("ascii")


@pytest.fixture
def standard_vr180(tmp_path, left_jpeg, right_base64):
    """VR180 photo with the right eye in standard XMP."""
    path = tmp_path / "standard.jpg"
    path.write_bytes(insert_segments(left_jpeg, [standard_xmp_segment(attribute_xmp(right_base64))]))
    return path


@pytest.fixture
def extended_vr180(tmp_path, left_jpeg, right_base64):
    """VR180 photo with the right eye split over reversed extended XMP chunks."""
    segments = extended_xmp_segments(attribute_xmp(right_base64))
    segments.reverse()
    path = tmp_path / "extended.jpg"
    path.write_bytes(insert_segments(left_jpeg, [standard_xmp_segment(plain_xmp())] + segments))
    return path
