"""Binary container models."""

from pydantic import BaseModel


class Segment(BaseModel):
    """A JPEG marker segment with its raw payload."""

    marker: bytes
    offset: int
    length: int
    payload: bytes

    @property
    def end(self) -> int:
        """Return the byte position just past this segment."""
        return self.offset + 2 + self.length


class ExtendedChunk(BaseModel):
    """One fragment of a split extended XMP packet.

    Only ``offset`` drives reassembly; ``guid`` and ``full_length`` are kept
    for inspection.
    """

    guid: str = ""
    full_length: int = 0
    offset: int
    data: bytes
