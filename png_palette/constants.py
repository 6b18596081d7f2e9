# png_palette/constants.py
"""
Shared constants used across the project.

- Channel / byte layout (OPAQUE_ALPHA, TRUECOLOR_BYTES, ...)
- Indexed storage ceiling (MAX_INDEXED_COLORS)
- PNG header colour type values (COLOR_*)
- CLI defaults (IMAGE_EXTENSIONS, PAYLOAD suffixes)
"""
from __future__ import annotations

from typing import FrozenSet

# =========================
# Channels and byte layout
# =========================
CHANNEL_MIN: int = 0
CHANNEL_MAX: int = 255

# Alpha value meaning "fully opaque" for 8-bit channels.
OPAQUE_ALPHA: int = CHANNEL_MAX

# Bytes per PLTE entry (R, G, B).
TRUECOLOR_BYTES: int = 3

# One byte per pixel addresses at most 256 entries; a palette must stay below it.
MAX_INDEXED_COLORS: int = 256

# =========================
# PNG header colour types
# =========================
COLOR_GRAYSCALE: int = 0
COLOR_TRUECOLOR: int = 2
COLOR_INDEXED: int = 3
COLOR_GRAYSCALE_ALPHA: int = 4
COLOR_TRUECOLOR_ALPHA: int = 6

# =========================
# CLI
# =========================
IMAGE_EXTENSIONS: FrozenSet[str] = frozenset({".png", ".gif", ".bmp", ".webp", ".tif", ".tiff"})
PLTE_SUFFIX: str = ".plte"
TRNS_SUFFIX: str = ".trns"

__all__ = [
    "CHANNEL_MIN",
    "CHANNEL_MAX",
    "OPAQUE_ALPHA",
    "TRUECOLOR_BYTES",
    "MAX_INDEXED_COLORS",
    "COLOR_GRAYSCALE",
    "COLOR_TRUECOLOR",
    "COLOR_INDEXED",
    "COLOR_GRAYSCALE_ALPHA",
    "COLOR_TRUECOLOR_ALPHA",
    "IMAGE_EXTENSIONS",
    "PLTE_SUFFIX",
    "TRNS_SUFFIX",
]
