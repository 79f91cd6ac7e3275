"""Rich command-line interface powered by Typer."""

from __future__ import annotations

import logging
import time
from pathlib import Path

import numpy as np
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from mono_dither.config import DitherConfig
from mono_dither.image_io import load_image, make_comparison_grid, save_image
from mono_dither.kernels import KERNELS, DiffusionKernel, get_kernel

app = typer.Typer(
    name="mono-dither",
    help="Reduce images to 4 grey levels with error-diffusion dithering.",
    add_completion=False,
    rich_markup_mode="rich",
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, markup=True)],
    )


def _collect_images(folder: Path, extensions: frozenset[str]) -> list[Path]:
    if not folder.exists():
        return []
    return sorted(
        f for f in folder.iterdir()
        if f.is_file() and f.suffix.lower() in extensions
    )


def _resolve_kernels(name: str, allow_all: bool = False) -> list[DiffusionKernel]:
    if allow_all and name.lower() == "all":
        return list(KERNELS.values())
    try:
        return [get_kernel(name)]
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e


def _luminance_drift(original: np.ndarray, dithered: np.ndarray) -> float:
    """Absolute change in mean luminance over the rows that get dithered."""
    if original.shape[0] < 2:
        return 0.0
    weights = np.array([299, 587, 114], dtype=np.int64)
    before = (original[1:].astype(np.int64) @ weights) // 1000
    after = (dithered[1:].astype(np.int64) @ weights) // 1000
    return float(abs(before.mean() - after.mean()))


# Defaults come from DitherConfig - single source of truth
_DEFAULTS = DitherConfig()


# -- batch command -----------------------------------------------------

@app.command()
def batch(
    input_dir: Path = typer.Option(
        _DEFAULTS.input_dir, "--input", "-i", help="Folder with source images",
    ),
    output_dir: Path = typer.Option(
        _DEFAULTS.output_dir, "--output", "-o", help="Results folder",
    ),
    kernel: str = typer.Option(
        _DEFAULTS.kernel, "--kernel", "-k",
        help="Kernel name, or 'all' to run every registered kernel",
    ),
    max_side: int | None = typer.Option(
        _DEFAULTS.max_side, "--max-side", "-m",
        help="Shrink so the longest side is at most this (aspect preserved)",
    ),
    upscale: int = typer.Option(
        _DEFAULTS.pixel_upscale, "--upscale", "-u", help="Pixel upscale factor",
    ),
    comparison: bool = typer.Option(
        _DEFAULTS.save_comparison, "--comparison/--no-comparison",
        help="Also save an Original | Dithered sheet",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Dither all images in INPUT_DIR and write results to OUTPUT_DIR."""
    _setup_logging(verbose)
    logger = logging.getLogger("mono_dither")

    cfg = DitherConfig(
        kernel=kernel,
        max_side=max_side,
        pixel_upscale=upscale,
        save_comparison=comparison,
        input_dir=input_dir,
        output_dir=output_dir,
    )
    kernels = _resolve_kernels(cfg.kernel, allow_all=True)

    images = _collect_images(input_dir, cfg.SUPPORTED_EXTENSIONS)
    if not images:
        console.print(f"\n[yellow]No images found in {input_dir}/[/yellow]")
        console.print("Place .jpg / .png / ... files there and re-run.\n")
        raise typer.Exit(0)

    output_dir.mkdir(parents=True, exist_ok=True)

    console.print(Panel.fit(
        f"[bold]MONO DITHER[/bold]\n"
        f"Kernels: {', '.join(k.name for k in kernels)}\n"
        f"Max side: {cfg.max_side}  |  Upscale: {cfg.pixel_upscale}\n"
        f"Images: {len(images)}",
        border_style="cyan",
    ))

    failed = 0
    for idx, img_path in enumerate(images, 1):
        stem = img_path.stem
        console.rule(f"[bold cyan][{idx}/{len(images)}] {img_path.name}[/bold cyan]")

        try:
            source = load_image(img_path, cfg.max_side)
        except OSError as e:
            logger.error("Could not read %s: %s", img_path, e)
            failed += 1
            continue

        h, w = source.shape[:2]
        logger.info("Source: %dx%d = %d pixels", w, h, w * h)

        for k in kernels:
            t0 = time.perf_counter()
            dithered = k.apply(source.copy())
            elapsed = time.perf_counter() - t0

            out_path = output_dir / f"{stem}_{k.name}.{cfg.output_format}"
            save_image(dithered, out_path, cfg.pixel_upscale)

            if cfg.save_comparison:
                comp_path = output_dir / f"{stem}_{k.name}_comparison.{cfg.output_format}"
                make_comparison_grid(
                    source, dithered, comp_path, k.name, cfg.pixel_upscale,
                )

            drift = _luminance_drift(source, dithered)
            console.print(
                f"  [green]✓[/green] {out_path.name}  "
                f"[dim]{w}x{h}  drift={drift:.2f}  time={elapsed:.2f}s[/dim]"
            )

    if failed:
        console.print(Panel.fit(
            f"[bold yellow]DONE with {failed} unreadable file(s)[/bold yellow]"
            f" - results in [bold]{output_dir}/[/bold]",
            border_style="yellow",
        ))
    else:
        console.print(Panel.fit(
            f"[bold green]ALL DONE[/bold green] - results in [bold]{output_dir}/[/bold]",
            border_style="green",
        ))


# -- single-image command ----------------------------------------------

@app.command()
def single(
    source: Path = typer.Argument(..., help="Path to the source image"),
    output: Path = typer.Option(Path("output/dithered.png"), "--output", "-o"),
    kernel: str = typer.Option(_DEFAULTS.kernel, "--kernel", "-k"),
    max_side: int | None = typer.Option(_DEFAULTS.max_side, "--max-side", "-m"),
    upscale: int = typer.Option(_DEFAULTS.pixel_upscale, "--upscale", "-u"),
    comparison: bool = typer.Option(
        _DEFAULTS.save_comparison, "--comparison/--no-comparison",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Dither a single image."""
    _setup_logging(verbose)

    (k,) = _resolve_kernels(kernel)

    if not source.is_file():
        console.print(f"[red]Error:[/red] File not found: {source}")
        raise typer.Exit(1)

    try:
        img = load_image(source, max_side)
    except OSError as e:
        console.print(f"[red]Error:[/red] Could not read {source}: {e}")
        raise typer.Exit(1) from e

    h, w = img.shape[:2]
    dithered = k.apply(img.copy())
    save_image(dithered, output, upscale)

    if comparison:
        comp_path = output.with_name(f"{output.stem}_comparison{output.suffix}")
        make_comparison_grid(img, dithered, comp_path, k.name, upscale)

    drift = _luminance_drift(img, dithered)
    console.print(
        f"[green]✓[/green] Saved to {output}  "
        f"[dim]{k.name}  {w}x{h}  drift={drift:.2f}[/dim]"
    )


# -- kernel listing ----------------------------------------------------

@app.command("kernels")
def list_kernels() -> None:
    """List the registered diffusion kernels."""
    table = Table(title="Diffusion kernels", border_style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Taps", justify="right")
    table.add_column("Rows below", justify="right")
    table.add_column("Weights", justify="right")

    for k in KERNELS.values():
        table.add_row(
            k.name,
            str(len(k.offsets)),
            str(k.rows_below),
            f"{k.weight_sum}/{k.total_weight}",
        )
    console.print(table)


if __name__ == "__main__":
    app()
