import pytest

from wireframe.color import (
    FOREGROUND,
    convert_color,
    get_rgba,
    hex_digit_value,
    interpolate_colors,
    interpolate_component,
    split_rgba,
)


def test_get_rgba_packs_channels():
    assert get_rgba(0x12, 0x34, 0x56, 0x78) == 0x12345678


@pytest.mark.parametrize("color", [0, 0xFFFFFFFF, 0x12345678, 0xFF0000FF])
def test_split_and_pack_round_trip(color):
    assert get_rgba(*split_rgba(color)) == color


def test_split_rgba_channels():
    assert split_rgba(0x12345678) == (0x12, 0x34, 0x56, 0x78)


def test_interpolate_component_endpoints():
    assert interpolate_component(10, 200, 8, 0) == 10
    assert interpolate_component(10, 200, 8, 8) == 200


def test_interpolate_component_midpoint():
    assert interpolate_component(0, 255, 2, 1) == 127


def test_interpolate_colors_start_is_first_color():
    assert interpolate_colors(0x11223344, 0xAABBCCDD, 10, 0) == 0x11223344


def test_interpolate_colors_same_colour_is_constant():
    for t in range(5):
        assert interpolate_colors(0x80402010, 0x80402010, 5, t) == 0x80402010


def test_interpolate_zero_maximum_raises():
    with pytest.raises(ValueError):
        interpolate_colors(0, 0xFFFFFFFF, 0, 0)


def test_hex_digit_value():
    assert hex_digit_value("7") == 7
    assert hex_digit_value("a") == hex_digit_value("A")
    assert hex_digit_value("g") == 0


def test_convert_color_parses_hex():
    assert convert_color("0xFF0000") == 0xFF0000
    assert convert_color("0xff") == 255


def test_convert_color_none_is_foreground():
    assert convert_color(None) == FOREGROUND
    assert FOREGROUND == 4294967295


def test_convert_color_non_hex_counts_as_zero():
    assert convert_color("0xF\n") == convert_color("0xF0")