# png_palette/errors.py
"""
Error taxonomy.

Every error derives from PaletteError and from the builtin it specialises,
so callers can catch either.

  MalformedPalette : PLTE / tRNS payload cannot describe a palette.
  NotDecodable     : positional lookup on a palette without a decoding table.
  NotEncodable     : index lookup before the encoding table was built.
  IndexOutOfRange  : positional lookup outside the decoding table.
  ColorNotFound    : index lookup for a colour that is not a member.
  InvalidChannel   : colour channel outside 0..255 (or not an int).
"""
from __future__ import annotations


class PaletteError(Exception):
    """Base class for all png_palette errors."""


class MalformedPalette(PaletteError, ValueError):
    """Raised when chunk payload bytes cannot be decoded into a palette."""


class NotDecodable(PaletteError, RuntimeError):
    """Raised by Palette.color_at when no decoding table was supplied."""


class NotEncodable(PaletteError, RuntimeError):
    """Raised by Palette.index_of before the encoding table exists."""


class IndexOutOfRange(PaletteError, IndexError):
    """Raised by Palette.color_at for an index outside the decoding table."""


class ColorNotFound(PaletteError, KeyError):
    """Raised by Palette.index_of for a colour the palette never contained."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class InvalidChannel(PaletteError, ValueError):
    """Raised when a colour is built from an out-of-range channel value."""


__all__ = [
    "PaletteError",
    "MalformedPalette",
    "NotDecodable",
    "NotEncodable",
    "IndexOutOfRange",
    "ColorNotFound",
    "InvalidChannel",
]
