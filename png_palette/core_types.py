# png_palette/core_types.py
from __future__ import annotations

"""
Core type aliases, the Color value object, and lightweight helpers.
"""

from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np
from numpy.typing import NDArray

from .constants import CHANNEL_MAX, CHANNEL_MIN, OPAQUE_ALPHA
from .errors import InvalidChannel

# Basic aliases

RGBTuple = Tuple[int, int, int]
RGBATuple = Tuple[int, int, int, int]
HexStr = str

U8Image = NDArray[np.uint8]  # (H, W, 3) or (H, W, 4)
U8Rows = NDArray[np.uint8]  # (N, 3) or (N, 4)

ChannelValue = Union[int, np.integer]


def _checked_channel(name: str, value: ChannelValue) -> int:
    """Return value as a plain int, or raise InvalidChannel."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidChannel(f"channel {name} must be an integer, got {value!r}")
    v = int(value)
    if v < CHANNEL_MIN or v > CHANNEL_MAX:
        raise InvalidChannel(f"channel {name}={v} outside {CHANNEL_MIN}..{CHANNEL_MAX}")
    return v


# Value objects


@dataclass(frozen=True, order=True)
class Color:
    """
    Immutable RGBA colour with 8-bit channels.

    Ordering is lexicographic on (r, g, b, a), which matches ordering on the
    packed 0xRRGGBBAA integer. Palettes rely on it for sorting and dedup.
    """

    r: int
    g: int
    b: int
    a: int = OPAQUE_ALPHA

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            object.__setattr__(self, name, _checked_channel(name, getattr(self, name)))

    # Constructors

    @classmethod
    def from_channels(
        cls,
        r: ChannelValue,
        g: ChannelValue,
        b: ChannelValue,
        a: ChannelValue = OPAQUE_ALPHA,
    ) -> "Color":
        return cls(r, g, b, a)  # type: ignore[arg-type]

    @classmethod
    def grayscale(cls, value: ChannelValue, a: ChannelValue = OPAQUE_ALPHA) -> "Color":
        """Grey teint: value replicated into r, g and b."""
        return cls(value, value, value, a)  # type: ignore[arg-type]

    @classmethod
    def from_packed(cls, value: int) -> "Color":
        """Build from a 32-bit 0xRRGGBBAA integer."""
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidChannel(f"packed colour must be an integer, got {value!r}")
        v = int(value)
        if v < 0 or v > 0xFFFFFFFF:
            raise InvalidChannel(f"packed colour {v:#x} outside 32 bits")
        return cls((v >> 24) & 0xFF, (v >> 16) & 0xFF, (v >> 8) & 0xFF, v & 0xFF)

    @classmethod
    def from_hex(cls, hex_str: str) -> "Color":
        return cls(*hex_to_rgba(hex_str))

    # Predicates

    def is_opaque(self) -> bool:
        return self.a == OPAQUE_ALPHA

    def is_grayscale(self) -> bool:
        """True if r == g == b. Alpha is ignored."""
        return self.r == self.g == self.b

    # Ordering / conversion

    def compare(self, other: "Color") -> int:
        """Three-way comparison under the total order: -1, 0 or 1."""
        mine = self.to_packed()
        theirs = other.to_packed()
        return (mine > theirs) - (mine < theirs)

    def to_packed(self) -> int:
        return (self.r << 24) | (self.g << 16) | (self.b << 8) | self.a

    def to_truecolor_bytes(self) -> RGBTuple:
        """(r, g, b) as written to a PLTE payload."""
        return (self.r, self.g, self.b)

    def to_rgba(self) -> RGBATuple:
        return (self.r, self.g, self.b, self.a)

    def to_hex(self, include_alpha: bool = False) -> HexStr:
        text = rgb_to_hex(self.to_truecolor_bytes())
        return f"{text}{self.a:02x}" if include_alpha else text


# Small helpers


def rgb_to_hex(rgb: RGBTuple) -> HexStr:
    """RGB tuple to lowercase hex string '#rrggbb'."""
    return f"#{rgb[0]:02x}{rgb[1]:02x}{rgb[2]:02x}"


def hex_to_rgba(hex_str: str) -> RGBATuple:
    """
    Parse '#rgb', '#rrggbb' or '#rrggbbaa' (case-insensitive, '#' optional)
    into an RGBA tuple. Missing alpha means opaque.
    """
    s = hex_str.strip().lower().lstrip("#")
    if len(s) == 3:
        s = "".join(ch * 2 for ch in s)
    if len(s) == 6:
        s = f"{s}ff"
    if len(s) != 8:
        raise ValueError(f"hex must be '#rgb', '#rrggbb' or '#rrggbbaa', got {hex_str!r}")
    try:
        return (int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16), int(s[6:8], 16))
    except ValueError:
        raise ValueError(f"invalid hex digits in {hex_str!r}") from None


__all__ = [
    # aliases / types
    "RGBTuple",
    "RGBATuple",
    "HexStr",
    "U8Image",
    "U8Rows",
    "ChannelValue",
    # value objects
    "Color",
    # helpers
    "rgb_to_hex",
    "hex_to_rgba",
]
