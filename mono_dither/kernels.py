"""Registry of named error-diffusion kernels.

Each kernel is a fixed table of ``(dx, dy, weight)`` taps plus the
denominator the weights are divided by.  Registering a new kernel means
adding one table below and one entry to :data:`KERNELS`; the matching
image transform is generated from the registry.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import numpy as np
from PIL import Image

from mono_dither.diffusion import Offset, diffuse


@dataclass(frozen=True)
class DiffusionKernel:
    """An immutable diffusion table.

    Attributes:
        name:         Registry key, e.g. ``"floyd-steinberg"``.
        offsets:      ``(dx, dy, weight)`` taps, in diffusion order.
        total_weight: Denominator for every weight.
    """

    name: str
    offsets: tuple[Offset, ...]
    total_weight: int

    @property
    def weight_sum(self) -> int:
        return sum(w for _, _, w in self.offsets)

    @property
    def rows_below(self) -> int:
        """How many rows under the current one the kernel reaches."""
        return max(dy for _, dy, _ in self.offsets)

    def apply(self, image: np.ndarray) -> np.ndarray:
        """Dither an (H, W, 3) uint8 array in place and return it."""
        diffuse(image, self.offsets, self.total_weight)
        return image


# -- Tables --------------------------------------------------------------

FLOYD_STEINBERG = DiffusionKernel("floyd-steinberg", (
                            (1, 0, 7),
    (-1, 1, 3), (0, 1, 5), (1, 1, 1),
), 16)

JARVIS_JUDICE_NINKE = DiffusionKernel("jarvis-judice-ninke", (
                                        (1, 0, 7), (2, 0, 5),
    (-2, 1, 3), (-1, 1, 5), (0, 1, 7), (1, 1, 5), (2, 1, 3),
    (-2, 2, 1), (-1, 2, 3), (0, 2, 5), (1, 2, 3), (2, 2, 1),
), 48)

# Only 6/8 of the error is passed on; the rest is dropped on purpose.
ATKINSON = DiffusionKernel("atkinson", (
                           (1, 0, 1), (2, 0, 1),
    (-1, 1, 1), (0, 1, 1), (1, 1, 1),
                (0, 2, 1),
), 8)

BURKES = DiffusionKernel("burkes", (
                                        (1, 0, 8), (2, 0, 4),
    (-2, 1, 2), (-1, 1, 4), (0, 1, 8), (1, 1, 4), (2, 1, 2),
), 32)

STUCKI = DiffusionKernel("stucki", (
                                        (1, 0, 8), (2, 0, 4),
    (-2, 1, 2), (-1, 1, 4), (0, 1, 8), (1, 1, 4), (2, 1, 2),
    (-2, 2, 1), (-1, 2, 2), (0, 2, 4), (1, 2, 2), (2, 2, 1),
), 42)

SIERRA = DiffusionKernel("sierra", (
                                        (1, 0, 5), (2, 0, 3),
    (-2, 1, 2), (-1, 1, 4), (0, 1, 5), (1, 1, 4), (2, 1, 2),
                (-1, 2, 2), (0, 2, 3), (1, 2, 2),
), 32)

TWO_ROW_SIERRA = DiffusionKernel("two-row-sierra", (
                                        (1, 0, 4), (2, 0, 3),
    (-2, 1, 1), (-1, 1, 2), (0, 1, 3), (1, 1, 2), (2, 1, 1),
), 16)

SIERRA_LITE = DiffusionKernel("sierra-lite", (
                (1, 0, 2),
    (-1, 1, 1), (0, 1, 1),
), 4)

KERNELS: dict[str, DiffusionKernel] = {
    k.name: k
    for k in (
        FLOYD_STEINBERG,
        JARVIS_JUDICE_NINKE,
        ATKINSON,
        BURKES,
        STUCKI,
        SIERRA,
        TWO_ROW_SIERRA,
        SIERRA_LITE,
    )
}


# -- Transforms ----------------------------------------------------------

Transform = Callable[[Image.Image], Image.Image]


def _make_transform(kernel: DiffusionKernel) -> Transform:
    def transform(image: Image.Image) -> Image.Image:
        pixels = np.array(image.convert("RGB"), dtype=np.uint8)
        kernel.apply(pixels)
        return Image.fromarray(pixels)

    transform.__name__ = kernel.name.replace("-", "_")
    transform.__doc__ = (
        f"Dither *image* to 4 grey levels with the {kernel.name} kernel."
    )
    return transform


TRANSFORMS: dict[str, Transform] = {
    name: _make_transform(kernel) for name, kernel in KERNELS.items()
}

floyd_steinberg = TRANSFORMS["floyd-steinberg"]
jarvis_judice_ninke = TRANSFORMS["jarvis-judice-ninke"]
atkinson = TRANSFORMS["atkinson"]
burkes = TRANSFORMS["burkes"]
stucki = TRANSFORMS["stucki"]
sierra = TRANSFORMS["sierra"]
two_row_sierra = TRANSFORMS["two-row-sierra"]
sierra_lite = TRANSFORMS["sierra-lite"]


def _normalise(name: str) -> str:
    return name.strip().lower().replace("_", "-")


def get_kernel(name: str) -> DiffusionKernel:
    """Look up a kernel by registry key (underscores are accepted)."""
    kernel = KERNELS.get(_normalise(name))
    if kernel is None:
        available = ", ".join(KERNELS)
        msg = f"Unknown kernel '{name}'. Available: {available}"
        raise ValueError(msg)
    return kernel


def get_transform(name: str) -> Transform:
    """Look up the image transform registered for *name*."""
    return TRANSFORMS[get_kernel(name).name]
