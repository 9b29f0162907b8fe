"""Locate the base64 right-eye image inside XMP text.

Producers differ in namespace prefixes, quoting and pretty-printing, so
this is heuristic text scanning rather than XML parsing. Each matcher is an
independent function returning a raw candidate or None; candidates are
tried in ``MATCHERS`` order and the first one that passes validation wins.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence

from loguru import logger

from vrtools.config import PayloadConfig, get_config
from vrtools.extractors.xmp import iter_xmp_candidates
from vrtools.models import XMPPackets

Matcher = Callable[[str, PayloadConfig], str | None]

BASE64_PATTERN = re.compile(r"^[A-Za-z0-9+/=\s]+$")
WHITESPACE_PATTERN = re.compile(r"\s")
VALUE_START_PATTERN = re.compile(r'[=">]')
BASE64_ALPHABET = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/=")


def _search(pattern: str, xmp: str) -> str | None:
    match = re.search(pattern, xmp, re.DOTALL)
    return match.group(1) if match else None


def _local_name(key: str) -> str:
    """Return the part of a prefixed XMP name after the colon."""
    return key.rsplit(":", 1)[-1]


def match_attribute(xmp: str, payload: PayloadConfig) -> str | None:
    """Match ``GImage:Data="..."``."""
    return _search(rf'{re.escape(payload.key)}="([^"]+)"', xmp)


def match_element(xmp: str, payload: PayloadConfig) -> str | None:
    """Match ``<GImage:Data>...</GImage:Data>``."""
    key = re.escape(payload.key)
    return _search(rf"<{key}>([^<]+)</{key}>", xmp)


def match_namespaced_attribute(xmp: str, payload: PayloadConfig) -> str | None:
    """Match ``Data="..."`` in a tag that also declares the vendor image namespace."""
    name = re.escape(_local_name(payload.key))
    hint = re.escape(payload.namespace_hint)
    return _search(rf'{name}="([^"]+)"[^>]*xmlns[^>]*{hint}[^>]*image', xmp)


def match_loose(xmp: str, payload: PayloadConfig) -> str | None:
    """Match the key followed by a tag close and text up to the next tag."""
    return _search(rf"{re.escape(payload.key)}[^>]*>([^<]+)<", xmp)


def match_fallback_scan(xmp: str, payload: PayloadConfig) -> str | None:
    """Collect base64 characters after the first occurrence of the key.

    Starts after the first ``=``, ``"`` or ``>`` following the key and stops
    at the next ``<`` or ``"``. Anything outside the base64 alphabet,
    whitespace included, is skipped.
    """
    index = xmp.find(payload.key)
    if index == -1:
        return None

    start = VALUE_START_PATTERN.search(xmp, index + len(payload.key))
    if start is None:
        return None

    chars = []
    for char in xmp[start.end() :]:
        if char in BASE64_ALPHABET:
            chars.append(char)
        elif char in '<"':
            break
    return "".join(chars) or None


# Tried in order; first candidate passing validation wins
MATCHERS: tuple[Matcher, ...] = (
    match_attribute,
    match_element,
    match_namespaced_attribute,
    match_loose,
    match_fallback_scan,
)


def is_valid_payload(candidate: str, min_length: int | None = None) -> bool:
    """Check a candidate is long enough and made only of base64 characters.

    The length is measured before whitespace is stripped.
    """
    if min_length is None:
        min_length = get_config().payload.min_length
    return len(candidate) > min_length and BASE64_PATTERN.match(candidate) is not None


def clean_payload(candidate: str) -> str:
    """Remove all whitespace (including pretty-printing newlines)."""
    return WHITESPACE_PATTERN.sub("", candidate)


def extract_payload_from_xmp(
    xmp: str,
    payload: PayloadConfig | None = None,
    matchers: Sequence[Matcher] = MATCHERS,
) -> str | None:
    """Return the first accepted base64 payload in XMP text.

    Args:
        xmp: XMP text to search
        payload: Search configuration (default: global config)
        matchers: Matcher functions, tried in order

    Returns:
        Base64 text with whitespace removed, or None
    """
    if payload is None:
        payload = get_config().payload

    for matcher in matchers:
        candidate = matcher(xmp, payload)
        if candidate is None:
            continue
        if is_valid_payload(candidate, payload.min_length):
            logger.debug("{} accepted a {}-character payload", matcher.__name__, len(candidate))
            return clean_payload(candidate)
        logger.debug("{} candidate rejected ({} characters)", matcher.__name__, len(candidate))
    return None


def find_stereo_payload(
    packets: XMPPackets,
    payload: PayloadConfig | None = None,
    matchers: Sequence[Matcher] = MATCHERS,
) -> tuple[str, str] | None:
    """Search each XMP candidate text in turn for the right-eye payload.

    Returns:
        (source, base64 text) where source is "standard", "extended" or
        "combined", or None if no candidate holds an accepted payload
    """
    for source, text in iter_xmp_candidates(packets):
        found = extract_payload_from_xmp(text, payload, matchers)
        if found is not None:
            logger.debug("Right-eye payload found in {} XMP", source)
            return source, found
    return None
