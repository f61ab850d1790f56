"""Conversion of 0xRRGGBB colours to pixel values of a TrueColor visual."""

from __future__ import annotations


def _mask_span(mask: int) -> tuple[int, int]:
    """Return the shift and the bit width of one contiguous channel mask."""
    if mask <= 0:
        raise ValueError(f"channel mask must be positive, got {mask:#x}")
    shift = (mask & -mask).bit_length() - 1
    mask >>= shift
    width = 0
    while mask & 1:
        mask >>= 1
        width += 1
    return shift, width


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Return (red shift, red bits, green shift, green bits, blue shift, blue bits)."""
    return tuple(
        value
        for mask in (red_mask, green_mask, blue_mask)
        for value in _mask_span(mask)
    )


def good_color(color: int, depth: int, shifts: tuple[int, ...]) -> int:
    """Map an 0xRRGGBB colour to a pixel value for a visual of ``depth`` bits.

    Visuals of depth 24 or more take the colour unchanged; shallower ones
    get each channel scaled down into the place given by ``shifts``.
    """
    if depth >= 24:
        return color
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )