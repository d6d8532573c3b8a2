import pytest

from slime_sprite.shapes import SHAPES, ShapeLayout, get_shape
from slime_sprite.types import BodyVariant


def test_every_variant_has_a_shape() -> None:
    assert set(SHAPES.keys()) == set(BodyVariant)


@pytest.mark.parametrize("variant", list(BodyVariant))
def test_paths_are_closed(variant: BodyVariant) -> None:
    shape = SHAPES[variant]
    for path in (shape.body_path, shape.inner_path, shape.icon_body_path, shape.icon_inner_path):
        assert path.startswith("M")
        assert path.rstrip().endswith("Z")
    assert 0.8 <= shape.layout.face_scale <= 1.2


def test_unknown_variant_falls_back_to_round() -> None:
    assert get_shape("hexagon") is SHAPES[BodyVariant.ROUND]
    assert get_shape(None) is SHAPES[BodyVariant.ROUND]
    assert get_shape("ghost") is SHAPES[BodyVariant.GHOST]


def test_layout_offsets() -> None:
    round_layout = SHAPES[BodyVariant.ROUND].layout
    assert (round_layout.eye_spread, round_layout.eye_offset_y, round_layout.mouth_offset_y) == (0, 0, 0)

    layout = ShapeLayout(eye_center_y=44, mouth_center_y=58, eye_spacing=12, face_scale=0.95)
    assert layout.eye_offset_y == -4
    assert layout.mouth_offset_y == -3
    assert layout.eye_spread == pytest.approx(12 / 0.95 - 13)
    assert ShapeLayout(50, 63, 14, 1.0).eye_spread == 1
