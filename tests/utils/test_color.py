# tests/utils/test_color.py

import pytest

from slime_sprite.utils.color import (
    darken,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    lighten,
    shift_color,
)


def test_hex_to_hsl_primaries() -> None:
    assert hex_to_hsl("#ff0000") == pytest.approx((0.0, 100.0, 50.0))
    h, s, l = hex_to_hsl("#00ff00")
    assert h == pytest.approx(120.0)
    assert s == pytest.approx(100.0)
    assert l == pytest.approx(50.0)


def test_hsl_to_hex_is_lowercase() -> None:
    assert hsl_to_hex(0, 100, 50) == "#ff0000"
    assert hsl_to_hex(240, 100, 50) == "#0000ff"


@pytest.mark.parametrize("color", ["#5bb8f5", "#f56b4a", "#2d1b4e", "#ffd700", "#b0d0db"])
def test_round_trip(color: str) -> None:
    assert hsl_to_hex(*hex_to_hsl(color)) == color


def test_uppercase_input_accepted() -> None:
    assert hex_to_rgb("#FFD700") == (255, 215, 0)


def test_malformed_color_raises() -> None:
    with pytest.raises(ValueError):
        hex_to_rgb("#zzzzzz")


def test_lighten_and_darken_clamp() -> None:
    assert lighten("#000000", 50) == "#808080"
    assert lighten("#ffffff", 30) == "#ffffff"
    assert darken("#ffffff", 100) == "#000000"
    assert darken("#000000", 10) == "#000000"


def test_lighten_keeps_hue() -> None:
    h0, _, l0 = hex_to_hsl("#3578d8")
    h1, _, l1 = hex_to_hsl(lighten("#3578d8", 12))
    assert h1 == pytest.approx(h0, abs=1.0)
    assert l1 == pytest.approx(l0 + 12, abs=0.5)


def test_shift_color_rotates_hue() -> None:
    assert shift_color("#ff0000", 120, 0) == "#00ff00"
    assert shift_color("#ff0000", -120, 0) == "#0000ff"


def test_shift_color_clamps_lightness() -> None:
    assert shift_color("#ffffff", 0, 10) == "#f2f2f2"
    assert shift_color("#000000", 0, -10) == "#0d0d0d"
