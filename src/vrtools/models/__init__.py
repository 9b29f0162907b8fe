"""Pydantic models for vrtools."""

from .result import ConversionResult, ImageSize
from .segment import ExtendedChunk, Segment
from .xmp import XMPPackets, XMPReport

__all__ = [
    # Container
    "Segment",
    "ExtendedChunk",
    # XMP
    "XMPPackets",
    "XMPReport",
    # Results
    "ConversionResult",
    "ImageSize",
]
