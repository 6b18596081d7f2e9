"""Tests for png_palette.core_types: Color value object and hex helpers."""

import numpy as np
import pytest

from png_palette.core_types import Color, hex_to_rgba, rgb_to_hex
from png_palette.errors import InvalidChannel, PaletteError


class TestColorConstruction:
    def test_from_channels(self):
        c = Color.from_channels(1, 2, 3, 4)
        assert (c.r, c.g, c.b, c.a) == (1, 2, 3, 4)

    def test_alpha_defaults_to_opaque(self):
        assert Color.from_channels(10, 20, 30).a == 255

    def test_grayscale_replicates_value(self):
        assert Color.grayscale(77, 10) == Color(77, 77, 77, 10)

    def test_accepts_numpy_integers(self):
        c = Color(np.uint8(200), np.int64(1), 2, 3)
        assert c.r == 200
        assert type(c.r) is int

    @pytest.mark.parametrize("bad", [-1, 256, 1000])
    def test_out_of_range_channel(self, bad):
        with pytest.raises(InvalidChannel):
            Color.from_channels(0, bad, 0)

    def test_out_of_range_alpha(self):
        with pytest.raises(InvalidChannel):
            Color(0, 0, 0, 256)

    def test_non_integer_channel(self):
        with pytest.raises(InvalidChannel):
            Color(0.5, 0, 0)  # type: ignore[arg-type]

    def test_bool_channel_rejected(self):
        with pytest.raises(InvalidChannel):
            Color(True, 0, 0)  # type: ignore[arg-type]

    def test_invalid_channel_is_value_error(self):
        with pytest.raises(ValueError):
            Color(300, 0, 0)
        with pytest.raises(PaletteError):
            Color(300, 0, 0)

    def test_immutable(self):
        c = Color(1, 2, 3)
        with pytest.raises(AttributeError):
            c.r = 5  # type: ignore[misc]


class TestColorPredicates:
    def test_opaque(self):
        assert Color(1, 2, 3, 255).is_opaque()
        assert not Color(1, 2, 3, 254).is_opaque()

    def test_grayscale_ignores_alpha(self):
        assert Color(9, 9, 9, 0).is_grayscale()
        assert not Color(9, 9, 8).is_grayscale()


class TestColorOrdering:
    def test_equality_is_structural(self):
        assert Color(1, 2, 3, 4) == Color(1, 2, 3, 4)
        assert hash(Color(1, 2, 3, 4)) == hash(Color(1, 2, 3, 4))
        assert Color(1, 2, 3, 4) != Color(1, 2, 3, 5)

    def test_lexicographic_order(self):
        colors = [Color(0, 0, 1), Color(0, 1, 0), Color(1, 0, 0), Color(0, 0, 1, 0)]
        assert sorted(colors) == [
            Color(0, 0, 1, 0),
            Color(0, 0, 1),
            Color(0, 1, 0),
            Color(1, 0, 0),
        ]

    def test_order_matches_packed_value(self):
        colors = [Color(5, 200, 3, 9), Color(5, 199, 255, 255), Color(4, 255, 255, 255)]
        assert sorted(colors) == sorted(colors, key=Color.to_packed)

    def test_compare(self):
        a, b = Color(1, 2, 3), Color(1, 2, 4)
        assert a.compare(b) == -1
        assert b.compare(a) == 1
        assert a.compare(Color(1, 2, 3)) == 0


class TestColorConversion:
    def test_truecolor_bytes(self):
        assert Color(10, 20, 30, 40).to_truecolor_bytes() == (10, 20, 30)

    def test_rgba(self):
        assert Color(10, 20, 30, 40).to_rgba() == (10, 20, 30, 40)

    def test_packed(self):
        c = Color(0x12, 0x34, 0x56, 0x78)
        assert c.to_packed() == 0x12345678
        assert Color.from_packed(0x12345678) == c

    def test_packed_out_of_range(self):
        with pytest.raises(InvalidChannel):
            Color.from_packed(1 << 32)

    def test_hex(self):
        assert Color(255, 0, 16).to_hex() == "#ff0010"
        assert Color(255, 0, 16, 128).to_hex(include_alpha=True) == "#ff001080"
        assert Color.from_hex("#ff001080") == Color(255, 0, 16, 128)


class TestHexHelpers:
    def test_rgb_to_hex(self):
        assert rgb_to_hex((0, 128, 255)) == "#0080ff"

    def test_short_hex(self):
        assert hex_to_rgba("#fff") == (255, 255, 255, 255)

    def test_no_hash_uppercase(self):
        assert hex_to_rgba("FF0000") == (255, 0, 0, 255)

    @pytest.mark.parametrize("bad", ["#ff", "#fffff", "#gggggg", ""])
    def test_invalid_hex(self, bad):
        with pytest.raises(ValueError):
            hex_to_rgba(bad)
