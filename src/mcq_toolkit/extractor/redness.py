"""
Module: extractor.redness

Purpose:
    Decide whether a run color counts as "the correct-answer color".
    Deliberately permissive: any strongly red-dominant color passes, so the
    range of reds a word processor emits are all accepted.

Key Functions:
    - is_redish(): Red-dominance predicate for w:color values
    - parse_hex_color(): Decode "RRGGBB" into channels

Used By:
    - extractor.marker: Classifies run colors
"""

from __future__ import annotations

from typing import Optional, Tuple

MIN_RED = 150
DOMINANCE_RATIO = 0.7


def parse_hex_color(value: str) -> Optional[Tuple[int, int, int]]:
    """
    Decode the first six hex characters of a color value.

    Args:
        value: Color without leading '#', e.g. "FF0000"

    Returns:
        (r, g, b) tuple, or None if the value is malformed
    """
    if len(value) < 6:
        return None
    try:
        return (
            int(value[0:2], 16),
            int(value[2:4], 16),
            int(value[4:6], 16),
        )
    except ValueError:
        return None


def is_redish(color: Optional[str]) -> bool:
    """
    Check if a color value is red-dominant.

    Rejects missing values, values shorter than six characters, the
    word-processor keyword "auto" and black. Otherwise true iff
    R > 150 and both G and B are below 70% of R.

    Args:
        color: Color string such as "FF0000", "#C00000" or "auto"

    Returns:
        True if the color marks a correct answer

    Example:
        >>> is_redish("FF0000")
        True
        >>> is_redish("#C00000")
        True
        >>> is_redish("auto")
        False
    """
    if not color:
        return False

    value = color.strip()
    if value.startswith("#"):
        value = value[1:]
    if len(value) < 6:
        return False
    if value.lower() in ("auto", "000000"):
        return False

    channels = parse_hex_color(value)
    if channels is None:
        return False

    r, g, b = channels
    return r > MIN_RED and g < r * DOMINANCE_RATIO and b < r * DOMINANCE_RATIO
