"""XMP packet and inspection models."""

from pydantic import BaseModel


class XMPPackets(BaseModel):
    """Standard and extended XMP text found in a JPEG."""

    standard: str | None = None
    extended: str | None = None
    app1_segments: int = 0
    extended_chunks: int = 0

    @property
    def has_xmp(self) -> bool:
        """Check if any XMP text was found."""
        return self.standard is not None or self.extended is not None

    @property
    def combined(self) -> str:
        """Return standard XMP followed by extended XMP."""
        return (self.standard or "") + (self.extended or "")


class XMPReport(BaseModel):
    """What the metadata pipeline found in a file, without decoding images."""

    path: str
    app1_segments: int = 0
    has_standard_xmp: bool = False
    has_extended_xmp: bool = False
    extended_chunks: int = 0
    payload_source: str | None = None
    payload_length: int = 0

    @property
    def has_payload(self) -> bool:
        """Check if a right-eye payload was located."""
        return self.payload_source is not None
