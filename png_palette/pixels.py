# png_palette/pixels.py
from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Union

import numpy as np
from PIL import Image, ImageOps

from .constants import OPAQUE_ALPHA
from .core_types import Color, U8Image, U8Rows
from .palette import Palette

"""
Pixel sources: decoded images (NumPy arrays or Pillow images) as Color streams.
"""

ImageSource = Union[Image.Image, np.ndarray, str, Path]


def _rgba_rows(pixels: np.ndarray) -> U8Rows:
    """Validate a uint8 (H,W,3/4) image or (N,3/4) row array; return (N,4) rows."""
    arr = np.asarray(pixels)
    if arr.dtype != np.uint8 or arr.ndim not in (2, 3) or arr.shape[-1] not in (3, 4):
        raise TypeError(
            f"expected uint8 (H,W,3/4) or (N,3/4) pixels, got {arr.dtype} {arr.shape}"
        )
    rows = arr.reshape(-1, arr.shape[-1])
    if rows.shape[1] == 4:
        return rows
    alpha = np.full((rows.shape[0], 1), OPAQUE_ALPHA, dtype=np.uint8)
    return np.concatenate([rows, alpha], axis=1)


def iter_pixels(pixels: np.ndarray) -> Iterator[Color]:
    """Yield every pixel as a Color in row-major order. RGB input is opaque."""
    for r, g, b, a in _rgba_rows(pixels).tolist():
        yield Color(r, g, b, a)


def unique_colors(pixels: np.ndarray) -> List[Color]:
    """Distinct pixel colours, sorted."""
    rows = _rgba_rows(pixels)
    if rows.shape[0] == 0:
        return []
    uniques = np.unique(rows, axis=0)
    return [Color(r, g, b, a) for r, g, b, a in uniques.tolist()]


def image_to_rgba_array(image: Image.Image) -> U8Image:
    """Pillow image (any mode, tRNS included) -> uint8 (H,W,4)."""
    rgba = image if image.mode == "RGBA" else image.convert("RGBA")
    return np.array(rgba, dtype=np.uint8)


def load_rgba(path: Union[str, Path]) -> U8Image:
    """Open an image with Pillow, honour EXIF orientation, return uint8 (H,W,4)."""
    with Image.open(path) as im0:
        im = ImageOps.exif_transpose(im0)
        return image_to_rgba_array(im)


def palette_from_image(source: ImageSource) -> Palette:
    """Palette of the distinct colours of an image, array or image file."""
    if isinstance(source, Image.Image):
        arr = image_to_rgba_array(source)
    elif isinstance(source, np.ndarray):
        arr = source
    else:
        arr = load_rgba(source)
    return Palette.from_pixels(unique_colors(arr))


__all__ = [
    "ImageSource",
    "iter_pixels",
    "unique_colors",
    "image_to_rgba_array",
    "load_rgba",
    "palette_from_image",
]
