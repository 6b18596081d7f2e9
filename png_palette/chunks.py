# png_palette/chunks.py
from __future__ import annotations

"""
PLTE / tRNS payload adapters.

Exports:
  palette_from_chunks(plte_payload, trns_payload=None) -> Palette
  palette_from_pixel_source(pixels) -> Palette
  palette_to_plte_payload(palette) -> bytes
  palette_to_trns_payload(palette) -> bytes
  trim_trns_payload(payload) -> bytes
  encode_palette_chunks(palette) -> (plte, trns | None)

Notes:
  - Only raw chunk payloads are handled here; chunk framing and CRCs belong
    to the container layer.
  - Decode keeps the on-disk order in the palette's decoding table, because
    pixel data addresses colours by that position.
  - Encode writes colours in the palette's canonical order and builds its
    encoding table as a side effect.
  - A tRNS payload shorter than the PLTE payload only covers its prefix;
    later entries are opaque. Bytes past the last PLTE entry are ignored.
"""

from typing import Iterable, Optional, Tuple, Union

import numpy as np

from .constants import OPAQUE_ALPHA, TRUECOLOR_BYTES
from .core_types import Color
from .errors import MalformedPalette
from .palette import Palette

BytesLike = Union[bytes, bytearray, memoryview]


def _payload_array(payload: BytesLike, name: str) -> np.ndarray:
    if not isinstance(payload, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} payload must be bytes-like, got {type(payload).__name__}")
    return np.frombuffer(bytes(payload), dtype=np.uint8)


# Decode


def palette_from_chunks(
    plte_payload: BytesLike, trns_payload: Optional[BytesLike] = None
) -> Palette:
    """
    Build a decode-ready palette from a PLTE payload and optional tRNS payload.

    Every 3 PLTE bytes are one colour's (r, g, b). tRNS byte i is the alpha of
    colour i; without tRNS every colour is opaque.
    """
    plte = _payload_array(plte_payload, "PLTE")
    if plte.size % TRUECOLOR_BYTES != 0:
        raise MalformedPalette(
            f"PLTE payload of {plte.size} bytes is not a multiple of {TRUECOLOR_BYTES}"
        )
    rgb = plte.reshape(-1, TRUECOLOR_BYTES)
    n_entries = rgb.shape[0]

    alpha = np.full(n_entries, OPAQUE_ALPHA, dtype=np.uint8)
    if trns_payload is not None:
        trns = _payload_array(trns_payload, "tRNS")
        covered = min(trns.size, n_entries)
        alpha[:covered] = trns[:covered]

    rgba = np.column_stack([rgb, alpha])
    decoding_table = [Color(r, g, b, a) for r, g, b, a in rgba.tolist()]
    return Palette.from_colors(decoding_table, decoding_table)


def palette_from_pixel_source(pixels: Iterable[Color]) -> Palette:
    """Palette of the distinct colours in a pixel stream (encode path)."""
    return Palette.from_pixels(pixels)


# Encode


def palette_to_plte_payload(palette: Palette) -> bytes:
    """
    (r, g, b) of every colour in canonical order.

    Builds the palette's encoding table, so index_of() works afterwards.
    """
    palette.build_encoding_table()
    rows = np.array(
        [c.to_truecolor_bytes() for c in palette.colors], dtype=np.uint8
    ).reshape(-1, TRUECOLOR_BYTES)
    return rows.tobytes()


def palette_to_trns_payload(palette: Palette) -> bytes:
    """Alpha of every colour, in the same order as palette_to_plte_payload()."""
    return bytes(c.a for c in palette.colors)


def trim_trns_payload(payload: BytesLike) -> bytes:
    """Drop trailing opaque entries; a decoder treats missing entries as opaque."""
    return bytes(payload).rstrip(bytes([OPAQUE_ALPHA]))


def encode_palette_chunks(palette: Palette) -> Tuple[bytes, Optional[bytes]]:
    """
    Payloads for indexed storage: (PLTE, tRNS). tRNS is None for an opaque
    palette and otherwise trimmed of trailing opaque entries.
    """
    if not palette.is_indexable():
        raise ValueError(f"palette of {palette.size()} colours is not indexable")
    plte = palette_to_plte_payload(palette)
    if palette.is_opaque():
        return plte, None
    return plte, trim_trns_payload(palette_to_trns_payload(palette))


__all__ = [
    "BytesLike",
    "palette_from_chunks",
    "palette_from_pixel_source",
    "palette_to_plte_payload",
    "palette_to_trns_payload",
    "trim_trns_payload",
    "encode_palette_chunks",
]
