# png_palette/__init__.py
"""
png_palette package.

Purpose:
  Palette construction and colour mode selection for a PNG codec. See
  palette_report.py for the CLI.

Public API:
  Color                    : immutable RGBA value.
  Palette                  : unique sorted colours + decoding / encoding tables.
  palette_from_chunks      : PLTE (+ tRNS) payload -> decode-ready Palette.
  palette_from_pixel_source: pixel stream -> Palette.
  palette_to_plte_payload  : Palette -> PLTE payload (builds encoding table).
  palette_to_trns_payload  : Palette -> tRNS payload.
  best_mode / ColorMode    : smallest lossless colour mode.
  errors                   : MalformedPalette, NotDecodable, NotEncodable, ...

Quick start:
  from png_palette import palette_from_chunks, best_mode
  pal = palette_from_chunks(plte, trns)
  pal.color_at(3)
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import constants
from . import core_types
from . import errors
from . import palette
from . import chunks
from . import mode
from . import pixels
from . import utils

from .core_types import Color
from .palette import Palette
from .chunks import (
    encode_palette_chunks,
    palette_from_chunks,
    palette_from_pixel_source,
    palette_to_plte_payload,
    palette_to_trns_payload,
    trim_trns_payload,
)
from .mode import ColorMode, best_mode, effective_mode
from .pixels import palette_from_image
from .errors import (
    ColorNotFound,
    IndexOutOfRange,
    InvalidChannel,
    MalformedPalette,
    NotDecodable,
    NotEncodable,
    PaletteError,
)

__all__ = [
    "__version__",
    # namespaces
    "constants",
    "core_types",
    "errors",
    "palette",
    "chunks",
    "mode",
    "pixels",
    "utils",
    # values / containers
    "Color",
    "Palette",
    # chunk adapters
    "palette_from_chunks",
    "palette_from_pixel_source",
    "palette_to_plte_payload",
    "palette_to_trns_payload",
    "trim_trns_payload",
    "encode_palette_chunks",
    "palette_from_image",
    # modes
    "ColorMode",
    "best_mode",
    "effective_mode",
    # errors
    "PaletteError",
    "MalformedPalette",
    "NotDecodable",
    "NotEncodable",
    "IndexOutOfRange",
    "ColorNotFound",
    "InvalidChannel",
]
