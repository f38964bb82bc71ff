"""Tests for RGB332 color quantization."""

import pytest

from picross.image_processing.quantization import (
    color_to_index,
    index_to_color,
    index_to_css,
)
from picross.models import PixelData


class TestColorToIndex:
    def test_transparent_maps_to_zero(self):
        assert color_to_index(PixelData(255, 255, 255, 128)) == 0
        assert color_to_index(PixelData(255, 255, 255, 0)) == 0

    def test_black_is_remapped_to_one(self):
        assert color_to_index(PixelData(0, 0, 0, 255)) == 1
        assert color_to_index(PixelData(31, 31, 63, 255)) == 1

    def test_bit_packing(self):
        assert color_to_index(PixelData(255, 255, 255, 255)) == 255
        assert color_to_index(PixelData(255, 0, 0, 255)) == 0b11100000
        assert color_to_index(PixelData(0, 255, 0, 255)) == 0b00011100
        assert color_to_index(PixelData(0, 0, 255, 255)) == 0b00000011

    def test_custom_alpha_threshold(self):
        pixel = PixelData(255, 0, 0, 100)
        assert color_to_index(pixel, alpha_threshold=50) == 0b11100000
        assert color_to_index(pixel, alpha_threshold=100) == 0


class TestIndexToColor:
    @pytest.mark.parametrize("index", [0, -1, -200])
    def test_non_positive_is_transparent(self, index):
        assert index_to_color(index) == PixelData(0, 0, 0, 0)

    def test_extremes(self):
        assert index_to_color(255) == PixelData(255, 255, 255, 255)
        assert index_to_color(1) == PixelData(0, 0, 85, 255)

    def test_channels_expand_by_bit_replication(self):
        # red field 0b100 -> 0b10010010
        assert index_to_color(0b10000000).r == 146

    def test_round_trip_is_idempotent(self):
        outputs = {
            color_to_index(PixelData(r, g, b, 255))
            for r in range(0, 256, 8)
            for g in range(0, 256, 8)
            for b in range(0, 256, 16)
        }
        outputs.add(color_to_index(PixelData(0, 0, 0, 0)))
        for index in outputs:
            assert color_to_index(index_to_color(index)) == index

    def test_css_string(self):
        assert index_to_css(255) == "rgb(255, 255, 255)"
        assert index_to_css(0b11100000) == "rgb(255, 0, 0)"
