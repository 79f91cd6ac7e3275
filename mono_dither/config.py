"""Centralised configuration via a frozen dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class DitherConfig:
    """All tuneable parameters for a dithering run.

    Attributes:
        kernel:          Registry key of the diffusion kernel, or ``"all"``
                         (batch only) to run every registered kernel.
        max_side:        Downscale so the longest side is at most this
                         (aspect ratio preserved).  ``None`` keeps the size.
        pixel_upscale:   Each output pixel becomes n x n in the saved file.
        output_format:   Image format for saved files.
        save_comparison: Also write an Original | Dithered sheet.
        input_dir:       Folder to scan for source images.
        output_dir:      Folder for results.
    """

    kernel: str = "floyd-steinberg"

    # Scaling
    max_side: int | None = None
    pixel_upscale: int = 1

    # Output
    output_format: str = "png"
    save_comparison: bool = False

    # Paths
    input_dir: Path = field(default_factory=lambda: Path("images"))
    output_dir: Path = field(default_factory=lambda: Path("output"))

    SUPPORTED_EXTENSIONS: frozenset[str] = frozenset(
        {".jpg", ".jpeg", ".png", ".bmp", ".tiff", ".tif", ".webp", ".gif"}
    )
