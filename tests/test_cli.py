"""Tests for the Typer command-line interface."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
from PIL import Image
from typer.testing import CliRunner

from mono_dither.cli import app
from mono_dither.kernels import KERNELS

runner = CliRunner()


@pytest.fixture
def image_dir(tmp_path: Path) -> Path:
    folder = tmp_path / "images"
    folder.mkdir()
    rng = np.random.default_rng(11)
    for name in ("a.png", "b.png"):
        Image.fromarray(
            rng.integers(0, 256, (10, 14, 3), dtype=np.uint8),
        ).save(folder / name)
    (folder / "notes.txt").write_text("not an image")
    return folder


class TestKernelsCommand:
    def test_lists_registry(self) -> None:
        result = runner.invoke(app, ["kernels"])
        assert result.exit_code == 0
        assert "floyd-steinberg" in result.output
        assert "sierra-lite" in result.output


class TestSingle:
    def test_writes_output(self, image_dir: Path, tmp_path: Path) -> None:
        out = tmp_path / "out" / "dithered.png"
        result = runner.invoke(
            app,
            ["single", str(image_dir / "a.png"), "-o", str(out), "-k", "atkinson"],
        )
        assert result.exit_code == 0, result.output
        arr = np.array(Image.open(out))
        assert arr.shape == (10, 14, 3)
        np.testing.assert_array_equal(arr[1:, :, 0], arr[1:, :, 2])

    def test_comparison_sheet(self, image_dir: Path, tmp_path: Path) -> None:
        out = tmp_path / "d.png"
        result = runner.invoke(
            app, ["single", str(image_dir / "a.png"), "-o", str(out), "--comparison"],
        )
        assert result.exit_code == 0, result.output
        assert (tmp_path / "d_comparison.png").exists()

    def test_unknown_kernel(self, image_dir: Path, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            ["single", str(image_dir / "a.png"), "-o", str(tmp_path / "x.png"),
             "-k", "bayer"],
        )
        assert result.exit_code == 1
        assert "Unknown kernel" in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["single", str(tmp_path / "nope.png")])
        assert result.exit_code == 1


class TestBatch:
    def test_all_kernels(self, image_dir: Path, tmp_path: Path) -> None:
        out_dir = tmp_path / "results"
        result = runner.invoke(
            app, ["batch", "-i", str(image_dir), "-o", str(out_dir), "-k", "all"],
        )
        assert result.exit_code == 0, result.output
        produced = sorted(p.name for p in out_dir.iterdir())
        assert len(produced) == 2 * len(KERNELS)
        assert "a_stucki.png" in produced

    def test_upscale(self, image_dir: Path, tmp_path: Path) -> None:
        out_dir = tmp_path / "results"
        result = runner.invoke(
            app, ["batch", "-i", str(image_dir), "-o", str(out_dir), "-u", "2"],
        )
        assert result.exit_code == 0, result.output
        img = Image.open(out_dir / "b_floyd-steinberg.png")
        assert img.size == (28, 20)

    def test_empty_folder(self, tmp_path: Path) -> None:
        empty = tmp_path / "empty"
        empty.mkdir()
        result = runner.invoke(
            app, ["batch", "-i", str(empty), "-o", str(tmp_path / "o")],
        )
        assert result.exit_code == 0
        assert "No images found" in result.output
