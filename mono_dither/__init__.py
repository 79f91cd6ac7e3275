"""
Mono Dither
===========

Reduce continuous-tone images to 4 grey levels with error diffusion.
Ships eight classic kernels:

- **Floyd-Steinberg**, **Jarvis-Judice-Ninke**, **Atkinson**, **Burkes**
- **Stucki**, **Sierra**, **Two-Row Sierra**, **Sierra Lite**
"""

__version__ = "0.1.0"

from mono_dither.config import DitherConfig
from mono_dither.diffusion import diffuse, map_to_2d
from mono_dither.image_io import (
    compute_target_size,
    load_image,
    make_comparison_grid,
    save_image,
)
from mono_dither.kernels import (
    KERNELS,
    TRANSFORMS,
    DiffusionKernel,
    atkinson,
    burkes,
    floyd_steinberg,
    get_kernel,
    get_transform,
    jarvis_judice_ninke,
    sierra,
    sierra_lite,
    stucki,
    two_row_sierra,
)
from mono_dither.pixel import TWO_BIT, luminance, quantize

__all__ = [
    "KERNELS",
    "TRANSFORMS",
    "TWO_BIT",
    "DiffusionKernel",
    "DitherConfig",
    "atkinson",
    "burkes",
    "compute_target_size",
    "diffuse",
    "floyd_steinberg",
    "get_kernel",
    "get_transform",
    "jarvis_judice_ninke",
    "load_image",
    "luminance",
    "make_comparison_grid",
    "map_to_2d",
    "quantize",
    "save_image",
    "sierra",
    "sierra_lite",
    "stucki",
    "two_row_sierra",
]
