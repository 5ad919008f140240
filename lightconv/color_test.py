from colormath.color_conversions import convert_color
from colormath.color_objects import HSLColor, HSVColor
import pytest

from .color import hex_to_rgb, hex_to_xy, hsl_to_hsb, rgb_to_hex_string, rgb_to_xy
from .errors import ConversionError
from .state import Hsb, Rgb, Xy


def test_rgb_to_xy():
    expected_pairs = [
        ((255, 255, 255), Xy(0.3227, 0.329)),
        ((255, 0, 0), Xy(0.7006, 0.2993)),
        ((0, 0, 255), Xy(0.1355, 0.0399)),
    ]
    for rgb, xy in expected_pairs:
        assert rgb_to_xy(*rgb) == xy


def test_rgb_to_xy_black():
    assert rgb_to_xy(0, 0, 0) == Xy(0, 0)


def test_hex_to_xy():
    assert hex_to_xy("#FFFFFF") == rgb_to_xy(255, 255, 255)
    assert hex_to_xy("ff0000") == Xy(0.7006, 0.2993)


def test_hex_to_rgb():
    expected_pairs = [
        ("#FF0000", Rgb(255, 0, 0)),
        ("00FF00", Rgb(0, 255, 0)),
        ("#0000ff", Rgb(0, 0, 255)),
        ("#1a2B3c", Rgb(26, 43, 60)),
        ("000000", Rgb(0, 0, 0)),
    ]
    for hex_color, rgb in expected_pairs:
        assert hex_to_rgb(hex_color) == rgb


def test_hex_to_rgb_malformed():
    for hex_color in ["", "#", "#FFF", "#FF00001", "GG0000", "0x00FF", "##FF0000", " FF0000"]:
        with pytest.raises(ConversionError):
            hex_to_rgb(hex_color)


def test_hex_to_xy_malformed():
    with pytest.raises(ConversionError):
        hex_to_xy("#12345Z")


def test_rgb_to_hex_string():
    assert rgb_to_hex_string(255, 0, 128) == "#FF0080"
    assert rgb_to_hex_string(1, 2, 3, prefix="") == "010203"

    with pytest.raises(ConversionError):
        rgb_to_hex_string(256, 0, 0)
    with pytest.raises(ConversionError):
        rgb_to_hex_string(0, -1, 0)


def test_hex_round_trip():
    for rgb in [(0, 0, 0), (255, 255, 255), (12, 200, 99), (128, 64, 32), (1, 254, 17)]:
        assert hex_to_rgb(rgb_to_hex_string(*rgb)) == Rgb(*rgb)


def test_hsl_to_hsb():
    expected_pairs = [
        ((0, 100, 50), Hsb(0, 1, 1)),
        ((120, 100, 25), Hsb(120, 1, 0.5)),
        ((0, 0, 0), Hsb(0, 0, 0)),
        ((0, 0, 100), Hsb(0, 0, 1)),
        ((720, 100, 50), Hsb(0, 1, 1)),
    ]
    for hsl, hsb in expected_pairs:
        assert hsl_to_hsb(*hsl) == hsb


def test_hsl_to_hsb_negative_hue():
    hsb = hsl_to_hsb(-30, 50, 50)
    assert hsb.h == 330
    assert hsb.s == pytest.approx(2 / 3)
    assert hsb.b == pytest.approx(0.75)


def test_hsl_to_hsb_matches_colormath():
    for h, s, l in [(200, 60, 40), (10, 80, 70), (300, 35, 20), (45, 100, 90)]:
        hsv = convert_color(HSLColor(h, s / 100, l / 100), HSVColor)
        hsb = hsl_to_hsb(h, s, l)
        assert hsb.h == pytest.approx(hsv.hsv_h, abs=1e-6)
        assert hsb.s == pytest.approx(hsv.hsv_s, abs=1e-6)
        assert hsb.b == pytest.approx(hsv.hsv_v, abs=1e-6)
