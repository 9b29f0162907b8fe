"""XMP and right-eye payload extractors for vrtools."""

from vrtools.extractors.payload import (
    MATCHERS,
    Matcher,
    clean_payload,
    extract_payload_from_xmp,
    find_stereo_payload,
    is_valid_payload,
    match_attribute,
    match_element,
    match_fallback_scan,
    match_loose,
    match_namespaced_attribute,
)
from vrtools.extractors.xmp import (
    EXTENDED_XMP_MARKER,
    STANDARD_XMP_MARKER,
    collect_extended_chunks,
    extract_all_xmp,
    extract_extended_xmp,
    extract_standard_xmp,
    iter_xmp_candidates,
    parse_extended_chunk,
    read_xmp_packets,
    reassemble_extended_chunks,
)

__all__ = [
    # XMP
    "STANDARD_XMP_MARKER",
    "EXTENDED_XMP_MARKER",
    "extract_standard_xmp",
    "extract_extended_xmp",
    "extract_all_xmp",
    "parse_extended_chunk",
    "collect_extended_chunks",
    "reassemble_extended_chunks",
    "read_xmp_packets",
    "iter_xmp_candidates",
    # Payload
    "Matcher",
    "MATCHERS",
    "match_attribute",
    "match_element",
    "match_namespaced_attribute",
    "match_loose",
    "match_fallback_scan",
    "is_valid_payload",
    "clean_payload",
    "extract_payload_from_xmp",
    "find_stereo_payload",
]
