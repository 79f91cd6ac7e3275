"""Luminance extraction and 2-bit quantisation of a single pixel."""

from __future__ import annotations

from collections.abc import Sequence

# Level count requested by the diffusion engine (0, 85, 170, 255).
TWO_BIT = 4

MAX_VALUE = 255


def luminance(pixel: Sequence[int]) -> int:
    """ITU-R BT.601 luma of an RGB triple, as an int in ``0..255``."""
    r, g, b = pixel[0], pixel[1], pixel[2]
    return (299 * int(r) + 587 * int(g) + 114 * int(b)) // 1000


def quantize(sample: int, levels: int = TWO_BIT) -> tuple[int, int]:
    """Snap *sample* to the nearest of *levels* evenly spaced values.

    The levels span ``0..255``; a sample exactly half-way between two
    levels goes to the upper one.

    Returns:
        ``(level, error)`` where ``error = sample - level``.
    """
    if levels < 2:
        msg = f"Need at least 2 quantisation levels, got {levels}"
        raise ValueError(msg)

    steps = levels - 1
    index = (sample * steps * 2 + MAX_VALUE) // (MAX_VALUE * 2)
    level = index * MAX_VALUE // steps
    return level, sample - level
