# png_palette/palette.py
from __future__ import annotations

"""
Palette container.

A palette is the set of distinct colours an image uses, kept in canonical
(ascending) order, with two optional lookup tables:

  decoding table : colours in the exact order they appeared in a PLTE payload,
                   supplied at construction. Used by color_at().
  encoding table : colour -> position in canonical order, built once when the
                   palette is written out. Used by index_of().

Exports:
  Palette
  EncodingState  ("not_built" | "built")
"""

import threading
from types import MappingProxyType
from typing import (
    Dict,
    FrozenSet,
    Iterable,
    Iterator,
    Literal,
    Mapping,
    Optional,
    Sequence,
    Tuple,
)

from .constants import MAX_INDEXED_COLORS
from .core_types import Color
from .errors import ColorNotFound, IndexOutOfRange, NotDecodable, NotEncodable

EncodingState = Literal["not_built", "built"]


def _as_colors(values: Iterable[Color], what: str) -> Tuple[Color, ...]:
    out = tuple(values)
    for c in out:
        if not isinstance(c, Color):
            raise TypeError(f"{what} must contain Color values, got {type(c).__name__}")
    return out


class Palette:
    """Unique, sorted colour collection with optional decode/encode tables."""

    __slots__ = (
        "_members",
        "_colors",
        "_decoding_table",
        "_encoding_table",
        "_encoding_lock",
    )

    def __init__(
        self,
        colors: Iterable[Color] = (),
        decoding_table: Optional[Sequence[Color]] = None,
    ) -> None:
        self._members: FrozenSet[Color] = frozenset(_as_colors(colors, "colors"))
        self._colors: Tuple[Color, ...] = tuple(sorted(self._members))
        self._decoding_table: Optional[Tuple[Color, ...]] = (
            None
            if decoding_table is None
            else _as_colors(decoding_table, "decoding_table")
        )
        self._encoding_table: Optional[Dict[Color, int]] = None
        self._encoding_lock = threading.Lock()

    # Construction

    @classmethod
    def from_colors(
        cls,
        colors: Iterable[Color],
        decoding_table: Optional[Sequence[Color]] = None,
    ) -> "Palette":
        """Palette of the distinct colours in `colors`; decoding_table is kept verbatim."""
        return cls(colors, decoding_table)

    @classmethod
    def from_pixels(cls, pixels: Iterable[Color]) -> "Palette":
        """Palette of the distinct colours found while scanning an image."""
        return cls(pixels, None)

    # Collection protocol

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[Color]:
        return iter(self._colors)

    def __contains__(self, color: object) -> bool:
        return color in self._members

    def __repr__(self) -> str:
        return (
            f"Palette(size={len(self)}, can_decode={self.can_decode()}, "
            f"encoding={self.encoding_state})"
        )

    @property
    def colors(self) -> Tuple[Color, ...]:
        """Members in canonical order."""
        return self._colors

    @property
    def decoding_table(self) -> Optional[Tuple[Color, ...]]:
        return self._decoding_table

    # Properties

    def size(self) -> int:
        return len(self._colors)

    def is_indexable(self) -> bool:
        """True if every colour can be addressed by a single index byte."""
        return self.size() < MAX_INDEXED_COLORS

    def is_opaque(self) -> bool:
        return all(c.is_opaque() for c in self._colors)

    def is_grayscale(self) -> bool:
        return all(c.is_grayscale() for c in self._colors)

    def can_decode(self) -> bool:
        return self._decoding_table is not None

    def can_encode(self) -> bool:
        return self._encoding_table is not None

    @property
    def encoding_state(self) -> EncodingState:
        return "built" if self._encoding_table is not None else "not_built"

    # Lookups

    def color_at(self, index: int) -> Color:
        """Colour stored at `index` in the originating PLTE payload."""
        table = self._decoding_table
        if table is None:
            raise NotDecodable("palette has no decoding table")
        if index < 0 or index >= len(table):
            raise IndexOutOfRange(
                f"palette index {index} outside decoding table of {len(table)} entries"
            )
        return table[index]

    def index_of(self, color: Color) -> int:
        """Position `color` occupies in the emitted PLTE payload."""
        table = self._encoding_table
        if table is None:
            raise NotEncodable("encoding table not built; write the PLTE payload first")
        try:
            return table[color]
        except KeyError:
            raise ColorNotFound(f"{color!r} is not a member of this palette") from None

    # Encoding table

    def build_encoding_table(self) -> Mapping[Color, int]:
        """
        Assign each colour its canonical position. Built once; later calls
        return the same table.
        """
        if self._encoding_table is None:
            with self._encoding_lock:
                if self._encoding_table is None:
                    self._encoding_table = {c: i for i, c in enumerate(self._colors)}
        return MappingProxyType(self._encoding_table)


__all__ = ["Palette", "EncodingState"]
