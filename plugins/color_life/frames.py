"""
Frame I/O via Pillow.

Decodes an input image into a float grid and writes grids out as numbered
PNG frames. Any failure surfaces as DecodeError / EncodeError.
"""

import io
import os
import sys

from PIL import Image

from .errors import DecodeError, EncodeError
from .grid import from_rgb8, to_rgb8


def frame_path(prefix, index):
    """prefix + 4-digit zero-padded index + '.png'."""
    return f"{prefix}{index:04d}.png"


def load_grid(source):
    """Decode an image into an (H, W, 3) float grid.

    Args:
        source: file path, '-' for standard input, or a binary file object
    """
    label = "<stdin>" if source == "-" else getattr(source, "name", source)
    try:
        if source == "-":
            source = io.BytesIO(sys.stdin.buffer.read())
        with Image.open(source) as img:
            pixels = img.convert("RGB")
            return from_rgb8(pixels)
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise DecodeError(f"Cannot decode input image {label}: {e}") from e


def save_frame(grid, prefix, index):
    """Write grid as frame number index. Returns the written path."""
    path = frame_path(prefix, index)
    try:
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        Image.fromarray(to_rgb8(grid)).save(path, format="PNG")
    except (OSError, ValueError) as e:
        raise EncodeError(f"Cannot write frame {path}: {e}") from e
    return path
