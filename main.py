#!/usr/bin/env python3
"""
main.py — Quick-start entry point.

Drop images into ``images/`` and run:

    python main.py batch

Or pick a kernel:

    python -m mono_dither.cli batch --kernel all
    python -m mono_dither.cli single my_photo.jpg --kernel atkinson
"""

from mono_dither.cli import app

if __name__ == "__main__":
    app()
