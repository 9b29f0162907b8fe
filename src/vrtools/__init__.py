"""vrtools - VR180 photo toolkit.

Extract the right-eye image embedded in a VR180 photo's XMP metadata and
build a side-by-side stereo JPEG.

Usage:
    from vrtools import convert_to_side_by_side

    result = convert_to_side_by_side("photo.jpg")
    print(result.output_path)      # photo-converted.jpg
    print(result.composite)        # e.g. 10080x5040

    # Inspect metadata without decoding images
    report = inspect_file("photo.jpg")
    print(report.payload_source)   # "extended"
"""

from loguru import logger

from vrtools._version import __version__
from vrtools.composite import create_side_by_side
from vrtools.config import VRToolsConfig, get_config, load_config, reset_config
from vrtools.convert import (
    convert_to_side_by_side,
    decode_payload,
    extract_right_eye,
    extract_right_eye_base64,
    generate_output_path,
    inspect_file,
    load_image,
    save_image,
)
from vrtools.errors import (
    Base64DecodingError,
    CompositeCreationError,
    InvalidImageDataError,
    LeftEyeDecodingError,
    NoMetadataError,
    NoRightEyeDataError,
    RightEyeDecodingError,
    SaveError,
    VR180Error,
    VR180FileNotFoundError,
)
from vrtools.extractors import (
    extract_extended_xmp,
    extract_payload_from_xmp,
    extract_standard_xmp,
    read_xmp_packets,
)
from vrtools.models import ConversionResult, ImageSize, XMPPackets, XMPReport

# Library code stays silent unless the application opts in
logger.disable("vrtools")

__all__ = [
    # Version
    "__version__",
    # Main functions
    "convert_to_side_by_side",
    "extract_right_eye",
    "inspect_file",
    # Pipeline stages
    "extract_right_eye_base64",
    "decode_payload",
    "load_image",
    "create_side_by_side",
    "generate_output_path",
    "save_image",
    "extract_standard_xmp",
    "extract_extended_xmp",
    "read_xmp_packets",
    "extract_payload_from_xmp",
    # Models
    "ConversionResult",
    "ImageSize",
    "XMPPackets",
    "XMPReport",
    # Config
    "VRToolsConfig",
    "get_config",
    "load_config",
    "reset_config",
    # Errors
    "VR180Error",
    "VR180FileNotFoundError",
    "InvalidImageDataError",
    "NoMetadataError",
    "NoRightEyeDataError",
    "Base64DecodingError",
    "RightEyeDecodingError",
    "LeftEyeDecodingError",
    "CompositeCreationError",
    "SaveError",
]
