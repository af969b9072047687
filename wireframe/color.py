"""Packed RGBA colours: packing, unpacking, blending and hex parsing."""

from __future__ import annotations

BACKGROUND = 255
FOREGROUND = 0xFFFFFFFF

_MASK32 = 0xFFFFFFFF
_HEX_DIGITS = {c: int(c, 16) for c in "0123456789abcdefABCDEF"}


def get_rgba(r: int, g: int, b: int, a: int) -> int:
    """Pack four channel values into one 32-bit RGBA integer."""
    return ((r << 24) | (g << 16) | (b << 8) | a) & _MASK32


def split_rgba(color: int) -> tuple[int, int, int, int]:
    """Unpack a 32-bit RGBA integer into its (r, g, b, a) channels."""
    color &= _MASK32
    return (color >> 24, (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)


def interpolate_component(c1: int, c2: int, maximum: int, t: int) -> int:
    """Blend one channel linearly: step ``t`` of ``maximum`` from ``c1`` to ``c2``."""
    if maximum == 0:
        raise ValueError("maximum must not be zero")
    remaining = (maximum - t) & _MASK32
    total = (c1 * remaining + c2 * t) & _MASK32
    return total // maximum


def interpolate_colors(c1: int, c2: int, maximum: int, t: int) -> int:
    """Blend two packed colours channel by channel."""
    channels = (
        interpolate_component(a, b, maximum, t)
        for a, b in zip(split_rgba(c1), split_rgba(c2))
    )
    return get_rgba(*channels)


def hex_digit_value(char: str) -> int:
    """Value of a hexadecimal digit; any other character counts as 0."""
    return _HEX_DIGITS.get(char, 0)


def convert_color(text: str | None) -> int:
    """Parse a colour written as ``0xRRGGBBAA``; ``None`` gives the foreground colour.

    The first two characters are taken to be the prefix and skipped.
    Characters that are not hex digits count as the digit 0.
    """
    if text is None:
        return FOREGROUND
    value = 0
    for char in text[2:]:
        value = (value * 16 + hex_digit_value(char)) & _MASK32
    return value