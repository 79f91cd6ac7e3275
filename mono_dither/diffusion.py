"""Generic error-diffusion engine.

Each visited pixel is reduced to a 2-bit luminance level and the signed
quantisation error is pushed forward to not-yet-visited neighbours
according to a weighted kernel.  The pass is single-threaded and works
in place: a pixel's luminance already contains every bit of error that
earlier pixels diffused into it, so there is no separate error buffer.

Scan order is row-major starting at the *second* row.  The first row is
never quantised and, since no registered kernel reaches upwards, it is
returned exactly as it came in.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from mono_dither.pixel import MAX_VALUE, TWO_BIT, luminance, quantize

logger = logging.getLogger(__name__)

Offset = tuple[int, int, int]


def map_to_2d(index: int, width: int) -> tuple[int, int]:
    """Row-major linear index → ``(x, y)``."""
    y, x = divmod(index, width)
    return x, y


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero (``//`` floors)."""
    q = abs(numerator) // abs(denominator)
    return q if (numerator < 0) == (denominator < 0) else -q


def _clamp(value: int) -> int:
    return 0 if value < 0 else MAX_VALUE if value > MAX_VALUE else value


def diffuse(
    image: np.ndarray,
    kernel: Sequence[Offset],
    total_weight: int,
) -> None:
    """Dither *image* in place to 4 grey levels.

    Args:
        image:        (H, W, 3) uint8 - mutated in place.
        kernel:       ``(dx, dy, weight)`` triples relative to the current
                      pixel.  Offsets are signed; targets falling outside
                      the canvas are dropped, never wrapped.
        total_weight: Denominator applied to every weight.  Must be
                      non-zero; it is not checked.

    Every channel of a diffusion target receives the same
    ``error * weight / total_weight`` (truncated toward zero) and is
    clamped to ``0..255``.
    """
    height, width = image.shape[:2]
    logger.debug(
        "Diffusing %dx%d image with %d-tap kernel (/%d)",
        width, height, len(kernel), total_weight,
    )

    # Plain ints are far quicker to poke one at a time than numpy scalars.
    pixels: list[list[list[int]]] = image.tolist()

    for i in range(width, width * height):
        x, y = map_to_2d(i, width)
        pixel = pixels[y][x]

        level, error = quantize(luminance(pixel), TWO_BIT)
        pixel[0] = pixel[1] = pixel[2] = level

        if error == 0:
            continue

        for dx, dy, weight in kernel:
            tx, ty = x + dx, y + dy
            if not (0 <= tx < width and 0 <= ty < height):
                continue
            share = _trunc_div(error * weight, total_weight)
            target = pixels[ty][tx]
            target[0] = _clamp(target[0] + share)
            target[1] = _clamp(target[1] + share)
            target[2] = _clamp(target[2] + share)

    image[...] = np.asarray(pixels, dtype=np.uint8).reshape(image.shape)
