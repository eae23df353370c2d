"""Tests for hex2ansi.core.palette — hex parsing, quantization and palette indices."""

import pytest
from hex2ansi.core.palette import (
    CUBE_LEVELS,
    convert,
    cube_index,
    hex_to_rgb,
    palette_index_to_rgb,
    quantize,
    rgb_to_hex,
    rgb_to_palette_index,
)
from hex2ansi.core.types import InvalidHexColour


class TestHexToRgb:
    def test_white(self):
        assert hex_to_rgb('#ffffff') == (255, 255, 255)

    def test_black(self):
        assert hex_to_rgb('#000000') == (0, 0, 0)

    def test_orange(self):
        assert hex_to_rgb('#ff5733') == (255, 87, 51)

    def test_uppercase(self):
        assert hex_to_rgb('#FF5733') == (255, 87, 51)

    def test_short_hex(self):
        assert hex_to_rgb('#fff') == (255, 255, 255)

    def test_no_hash(self):
        assert hex_to_rgb('ff0000') == (255, 0, 0)

    def test_surrounding_whitespace(self):
        assert hex_to_rgb('  #2563eb\n') == (37, 99, 235)

    @pytest.mark.parametrize('text', ['invalid', '#ff', '#ffffffff', '#gg0000', '', '#', '##ff5733'])
    def test_invalid_hex_raises(self, text):
        with pytest.raises(InvalidHexColour):
            hex_to_rgb(text)

    def test_invalid_is_value_error(self):
        with pytest.raises(ValueError, match="invalid hex colour: 'zz'"):
            hex_to_rgb('zz')


class TestRgbToHex:
    def test_pads_zeros(self):
        assert rgb_to_hex((0, 5, 16)) == '#000510'

    def test_round_trip(self):
        for code in ['#000000', '#ffffff', '#ff5733', '#2563eb', '#0a0b0c']:
            assert rgb_to_hex(hex_to_rgb(code)) == code

    def test_round_trip_every_byte_in_each_channel(self):
        for value in range(256):
            for rgb in [(value, 0x12, 0xef), (0x12, value, 0xef), (0x12, 0xef, value)]:
                code = rgb_to_hex(rgb)
                assert hex_to_rgb(code) == rgb
                assert rgb_to_hex(hex_to_rgb(code)) == code

    def test_round_trip_lowercases(self):
        assert rgb_to_hex(hex_to_rgb('#ABCDEF')) == '#abcdef'


class TestQuantize:
    def test_zero(self):
        assert quantize(0) == 0

    def test_max(self):
        assert quantize(255) == 5

    def test_threshold(self):
        assert quantize(74) == 0
        assert quantize(75) == 1

    def test_cube_levels_map_to_themselves(self):
        for level, value in enumerate(CUBE_LEVELS):
            assert quantize(value) == level

    def test_truncates(self):
        # (114 - 35) / 40 = 1.975
        assert quantize(114) == 1
        assert quantize(115) == 2

    def test_out_of_range(self):
        with pytest.raises(ValueError):
            quantize(256)
        with pytest.raises(ValueError):
            quantize(-1)


class TestRgbToPaletteIndex:
    def test_black(self):
        assert rgb_to_palette_index(0, 0, 0) == 16

    def test_white(self):
        assert rgb_to_palette_index(255, 255, 255) == 231

    def test_orange(self):
        # (255, 87, 51) -> levels (5, 1, 0) -> 16 + 180 + 6 + 0
        assert rgb_to_palette_index(255, 87, 51) == 202

    def test_pure_blue(self):
        assert rgb_to_palette_index(0, 0, 255) == 21

    def test_cube_index(self):
        assert cube_index(0, 0, 0) == 16
        assert cube_index(5, 5, 5) == 231
        assert cube_index(1, 2, 3) == 16 + 36 + 12 + 3


class TestPaletteIndexToRgb:
    def test_cube_corners(self):
        assert palette_index_to_rgb(16) == (0, 0, 0)
        assert palette_index_to_rgb(231) == (255, 255, 255)

    def test_orange(self):
        assert palette_index_to_rgb(202) == (255, 95, 0)

    def test_system_colours(self):
        assert palette_index_to_rgb(0) == (0, 0, 0)
        assert palette_index_to_rgb(9) == (255, 0, 0)
        assert palette_index_to_rgb(15) == (255, 255, 255)

    def test_grayscale(self):
        assert palette_index_to_rgb(232) == (8, 8, 8)
        assert palette_index_to_rgb(255) == (238, 238, 238)

    def test_cube_inverts_quantize(self):
        for index in range(16, 232):
            assert rgb_to_palette_index(*palette_index_to_rgb(index)) == index

    def test_out_of_range(self):
        with pytest.raises(ValueError):
            palette_index_to_rgb(256)


class TestConvert:
    def test_orange(self):
        c = convert('#FF5733')
        assert c.hexcode == '#ff5733'
        assert c.rgb == (255, 87, 51)
        assert c.index == 202
        assert c.palette_rgb == (255, 95, 0)

    def test_invalid(self):
        with pytest.raises(InvalidHexColour):
            convert('#12345')
