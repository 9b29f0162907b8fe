"""VR180 to side-by-side conversion."""

from __future__ import annotations

import base64
import binascii
import io
import os
from pathlib import Path

from loguru import logger
from PIL import Image, UnidentifiedImageError

from vrtools.composite import create_side_by_side
from vrtools.config import OutputConfig, VRToolsConfig, get_config
from vrtools.errors import (
    Base64DecodingError,
    InvalidImageDataError,
    LeftEyeDecodingError,
    NoMetadataError,
    NoRightEyeDataError,
    RightEyeDecodingError,
    SaveError,
    VR180FileNotFoundError,
)
from vrtools.extractors import find_stereo_payload, read_xmp_packets
from vrtools.models import ConversionResult, ImageSize, XMPReport

PathLike = str | os.PathLike[str]


def read_input(path: PathLike) -> bytes:
    """Read an input file, failing with VR180FileNotFoundError if it is not a file."""
    path = Path(path)
    if not path.is_file():
        raise VR180FileNotFoundError(path)
    return path.read_bytes()


def extract_right_eye_base64(data: bytes, config: VRToolsConfig | None = None) -> tuple[str, str]:
    """Find the base64 right-eye image in a JPEG's XMP metadata.

    Args:
        data: Full JPEG file content
        config: Configuration (default: global config)

    Returns:
        (source, base64 text); source names the XMP block it came from

    Raises:
        NoMetadataError: If the file has no XMP at all
        NoRightEyeDataError: If no XMP candidate holds an accepted payload
    """
    config = config or get_config()
    packets = read_xmp_packets(data)
    if not packets.has_xmp:
        raise NoMetadataError()

    found = find_stereo_payload(packets, config.payload)
    if found is None:
        raise NoRightEyeDataError(config.payload.key)
    return found


def decode_payload(text: str) -> bytes:
    """Decode base64 right-eye text, raising Base64DecodingError on failure."""
    try:
        decoded = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise Base64DecodingError() from e
    if not decoded:
        raise Base64DecodingError()
    return decoded


def load_image(data: bytes) -> Image.Image:
    """Decode image bytes into a fully loaded Pillow image.

    Raises:
        InvalidImageDataError: If the bytes are not a decodable image
    """
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        raise InvalidImageDataError() from e
    return image


def generate_output_path(input_path: PathLike, output: OutputConfig | None = None) -> Path:
    """Return ``<dir>/<stem>-converted.<ext>`` for an input path.

    The input extension is kept; files without one get ``jpg``.
    """
    output = output or get_config().output
    path = Path(input_path)
    extension = path.suffix[1:] or output.default_extension
    return path.with_name(f"{path.stem}{output.suffix}.{extension}")


def save_image(image: Image.Image, path: PathLike, quality: int | None = None) -> None:
    """Encode an image as JPEG and write it.

    Raises:
        SaveError: If encoding or writing fails
    """
    if quality is None:
        quality = get_config().output.quality

    options = {"quality": quality}
    icc_profile = image.info.get("icc_profile")
    if icc_profile:
        options["icc_profile"] = icc_profile

    try:
        image.save(path, format="JPEG", **options)
    except (OSError, ValueError, KeyError) as e:
        raise SaveError(str(e) or e.__class__.__name__) from e


def convert_to_side_by_side(
    input_path: PathLike,
    output_path: PathLike | None = None,
    *,
    config: VRToolsConfig | None = None,
) -> ConversionResult:
    """Convert a VR180 photo into a side-by-side stereo JPEG.

    The primary JPEG image is the left eye; the right eye is the base64
    JPEG embedded in XMP. Each stage fails with its own VR180Error and
    nothing is retried.

    Args:
        input_path: Path to the VR180 JPEG
        output_path: Where to write the result (default: <stem>-converted.<ext>
            next to the input)
        config: Configuration (default: global config)

    Returns:
        ConversionResult describing the written file

    Raises:
        VR180Error: A subclass naming the stage that failed
    """
    config = config or get_config()
    data = read_input(input_path)

    source, right_base64 = extract_right_eye_base64(data, config)
    right_data = decode_payload(right_base64)

    try:
        left = load_image(data)
    except InvalidImageDataError as e:
        raise LeftEyeDecodingError() from e

    try:
        right = load_image(right_data)
    except InvalidImageDataError as e:
        raise RightEyeDecodingError() from e

    logger.debug("Left eye {}x{}, right eye {}x{}", *left.size, *right.size)
    composite = create_side_by_side(left, right)

    if output_path is None:
        output_path = generate_output_path(input_path, config.output)
    save_image(composite, output_path, config.output.quality)
    logger.debug("Wrote {}", output_path)

    return ConversionResult(
        input_path=str(input_path),
        output_path=str(output_path),
        left=ImageSize(width=left.width, height=left.height),
        right=ImageSize(width=right.width, height=right.height),
        composite=ImageSize(width=composite.width, height=composite.height),
        payload_length=len(right_base64),
        source=source,
    )


def extract_right_eye(
    input_path: PathLike,
    output_path: PathLike,
    *,
    config: VRToolsConfig | None = None,
) -> Path:
    """Write the embedded right-eye JPEG to its own file, unchanged.

    Raises:
        VR180Error: A subclass naming the stage that failed
    """
    config = config or get_config()
    data = read_input(input_path)
    _, right_base64 = extract_right_eye_base64(data, config)
    right_data = decode_payload(right_base64)

    try:
        load_image(right_data)
    except InvalidImageDataError as e:
        raise RightEyeDecodingError() from e

    path = Path(output_path)
    try:
        path.write_bytes(right_data)
    except OSError as e:
        raise SaveError(str(e)) from e
    return path


def inspect_file(input_path: PathLike, *, config: VRToolsConfig | None = None) -> XMPReport:
    """Report what the metadata pipeline finds in a file, without decoding images.

    Raises:
        VR180FileNotFoundError: If the file does not exist
    """
    config = config or get_config()
    data = read_input(input_path)
    packets = read_xmp_packets(data)

    report = XMPReport(
        path=str(input_path),
        app1_segments=packets.app1_segments,
        has_standard_xmp=packets.standard is not None,
        has_extended_xmp=packets.extended is not None,
        extended_chunks=packets.extended_chunks,
    )
    found = find_stereo_payload(packets, config.payload) if packets.has_xmp else None
    if found is not None:
        report.payload_source, payload = found
        report.payload_length = len(payload)
    return report
