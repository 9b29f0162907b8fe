"""Errors raised by the VR180 conversion pipeline.

Every stage of a conversion fails with its own exception type. All of them
derive from ``VR180Error`` so callers can catch the whole family at once,
and ``str(error)`` is the user-facing message.
"""

from __future__ import annotations

from pathlib import Path


class VR180Error(Exception):
    """Base class for VR180 conversion errors."""

    message: str = "VR180 conversion failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class VR180FileNotFoundError(VR180Error, FileNotFoundError):
    """Input file does not exist."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"File not found: {self.path}")


class InvalidImageDataError(VR180Error):
    """Image bytes could not be parsed at all."""

    message = "Invalid image data"


class NoMetadataError(VR180Error):
    """No XMP packet was found in the container."""

    message = "No XMP metadata found in image"


class NoRightEyeDataError(VR180Error):
    """XMP was found but holds no acceptable right-eye payload."""

    def __init__(self, key: str = "GImage:Data") -> None:
        self.key = key
        super().__init__(f"No right eye image data ({key}) found in XMP metadata")


class Base64DecodingError(VR180Error):
    """The extracted payload is not valid base64."""

    message = "Failed to decode base64 right eye image data"


class RightEyeDecodingError(VR180Error):
    """Decoded payload bytes are not an image."""

    message = "Failed to decode right eye image"


class LeftEyeDecodingError(VR180Error):
    """Primary JPEG image could not be decoded."""

    message = "Failed to decode left eye (main) image"


class CompositeCreationError(VR180Error):
    """The side-by-side canvas could not be created or filled."""

    message = "Failed to create side-by-side composite image"


class SaveError(VR180Error):
    """Writing the output image failed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to save image: {reason}")
