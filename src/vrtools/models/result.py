"""Conversion result models."""

from pydantic import BaseModel


class ImageSize(BaseModel):
    """Pixel dimensions of an image."""

    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


class ConversionResult(BaseModel):
    """Outcome of a successful side-by-side conversion."""

    input_path: str
    output_path: str
    left: ImageSize
    right: ImageSize
    composite: ImageSize
    payload_length: int
    source: str
