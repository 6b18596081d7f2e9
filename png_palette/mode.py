# png_palette/mode.py
from __future__ import annotations

from enum import IntEnum
from typing import Literal, Union

from .constants import (
    COLOR_GRAYSCALE,
    COLOR_GRAYSCALE_ALPHA,
    COLOR_INDEXED,
    COLOR_TRUECOLOR,
    COLOR_TRUECOLOR_ALPHA,
)
from .palette import Palette

"""
Colour mode selection helpers.

Exports:
- ColorMode: PNG header colour types.
- best_mode(palette) -> ColorMode
- can_store(mode, palette) -> bool
- effective_mode(requested, palette) -> ColorMode
- channel_count(mode) -> int
- mode_from_name(name) -> ColorMode

Notes:
- best_mode checks grayscale first (smallest per pixel whatever the palette
  size), then indexed (only below 256 colours), then falls back to truecolor.
"""


class ColorMode(IntEnum):
    GRAYSCALE = COLOR_GRAYSCALE
    TRUECOLOR = COLOR_TRUECOLOR
    INDEXED = COLOR_INDEXED
    GRAYSCALE_ALPHA = COLOR_GRAYSCALE_ALPHA
    TRUECOLOR_ALPHA = COLOR_TRUECOLOR_ALPHA


RequestedMode = Union[Literal["auto"], ColorMode, int, str]

_CHANNELS = {
    ColorMode.GRAYSCALE: 1,
    ColorMode.TRUECOLOR: 3,
    ColorMode.INDEXED: 1,
    ColorMode.GRAYSCALE_ALPHA: 2,
    ColorMode.TRUECOLOR_ALPHA: 4,
}


def best_mode(palette: Palette) -> ColorMode:
    """Smallest colour mode that stores every colour of `palette` losslessly."""
    if palette.is_grayscale():
        return ColorMode.GRAYSCALE if palette.is_opaque() else ColorMode.GRAYSCALE_ALPHA
    if palette.is_indexable():
        return ColorMode.INDEXED
    return ColorMode.TRUECOLOR if palette.is_opaque() else ColorMode.TRUECOLOR_ALPHA


def can_store(mode: ColorMode, palette: Palette) -> bool:
    """
    True if `mode` represents every colour of `palette` without loss.
      - grayscale modes need grey colours; the non-alpha one needs opacity
      - indexed needs fewer than 256 colours (alpha goes in tRNS)
      - truecolor needs opacity, truecolor+alpha always works
    """
    mode = ColorMode(mode)
    if mode is ColorMode.GRAYSCALE:
        return palette.is_grayscale() and palette.is_opaque()
    if mode is ColorMode.GRAYSCALE_ALPHA:
        return palette.is_grayscale()
    if mode is ColorMode.INDEXED:
        return palette.is_indexable()
    if mode is ColorMode.TRUECOLOR:
        return palette.is_opaque()
    return True


def mode_from_name(name: str) -> ColorMode:
    """'indexed', 'Truecolor_Alpha', 'grayscale-alpha', ... -> ColorMode."""
    key = name.strip().upper().replace("-", "_")
    try:
        return ColorMode[key]
    except KeyError:
        choices = ", ".join(m.name.lower() for m in ColorMode)
        raise ValueError(f"unknown colour mode {name!r}; expected one of {choices}") from None


def effective_mode(requested: RequestedMode, palette: Palette) -> ColorMode:
    """
    Resolve a requested mode into a concrete one.
    - "auto" -> best_mode(palette)
    - explicit mode (enum, header value or name) stays as is if it can store the palette
    """
    if isinstance(requested, str) and requested.strip().lower() == "auto":
        return best_mode(palette)
    if isinstance(requested, str):
        mode = mode_from_name(requested)
    else:
        mode = ColorMode(requested)
    if not can_store(mode, palette):
        raise ValueError(
            f"mode {mode.name.lower()} cannot store this palette losslessly "
            f"({palette.size()} colours, grayscale={palette.is_grayscale()}, "
            f"opaque={palette.is_opaque()})"
        )
    return mode


def channel_count(mode: ColorMode) -> int:
    """Samples per pixel for `mode`."""
    return _CHANNELS[ColorMode(mode)]


__all__ = [
    "ColorMode",
    "RequestedMode",
    "best_mode",
    "can_store",
    "effective_mode",
    "mode_from_name",
    "channel_count",
]
