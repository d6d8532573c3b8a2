import re
from typing import List

import pytest

from slime_sprite.layers.expression import (
    EYES,
    MOUTHS,
    blink_svg,
    blush_fragment,
    eyes_svg,
    face_group,
    face_transform,
    icon_blush_svg,
    icon_eyes_svg,
    mouth_svg,
    spread_eyes,
)
from slime_sprite.renderer.sprite import build_full_document
from slime_sprite.shapes import FACE_CENTER_X, SHAPES
from slime_sprite.types import BodyVariant, LayerName, Personality

IRIS = "#e83a1e"


def test_every_personality_has_a_face() -> None:
    assert set(EYES) == set(Personality)
    assert set(MOUTHS) == set(Personality)


@pytest.mark.parametrize("personality", list(Personality))
def test_eyes_use_iris_and_highlights(personality: Personality) -> None:
    eyes = eyes_svg(personality, IRIS)
    assert IRIS in eyes
    assert 'fill="white"' in eyes
    assert mouth_svg(personality)


def test_energetic_exclamation() -> None:
    assert ">!</text>" in eyes_svg(Personality.ENERGETIC, IRIS)
    assert "<text" not in eyes_svg(Personality.GENTLE, IRIS)


def test_personalities_differ() -> None:
    assert len({eyes_svg(p, IRIS) for p in Personality}) == len(Personality)
    assert len(set(MOUTHS.values())) == len(Personality)


def test_face_transform() -> None:
    assert face_transform(SHAPES[BodyVariant.ROUND].layout, 0) == "translate(0,0) scale(1)"
    layout = SHAPES[BodyVariant.ELONGATED].layout
    assert face_transform(layout, layout.eye_offset_y) == "translate(2.5,-1.6) scale(0.95)"
    assert face_group(layout, 0, "<g/>").startswith('<g transform="translate(')


def test_blink_uses_body_color() -> None:
    blink = blink_svg("#5bb8f5")
    assert blink.count('fill="#5bb8f5"') == 2
    assert 'values="0;0;0;0.95;0;0;0"' in blink


def test_tsundere_blushes_stronger() -> None:
    gentle = blush_fragment(Personality.GENTLE, "#ffa4c4", "u1")
    tsundere = blush_fragment(Personality.TSUNDERE, "#ffa4c4", "u1")
    assert 'opacity="0.35"' in gentle.markup
    assert 'opacity="0.65"' in tsundere.markup
    assert 'rx="8.5"' in tsundere.markup
    assert 'id="blr_u1"' in gentle.defs
    assert gentle.markup.count("url(#blr_u1)") == 2


def test_icon_eyes() -> None:
    eyes = icon_eyes_svg(IRIS)
    assert eyes.count(f'fill="{IRIS}"') == 2
    assert icon_blush_svg("#ffa4c4").count("<ellipse") == 2


def sclera_centers(markup: str) -> List[float]:
    """Rendered x of both gentle-eye scleras (authored at 37 and 63)."""
    outer = re.match(r'<g transform="translate\(([-\d.]+),[-\d.]+\) scale\(([\d.]+)\)">', markup)
    assert outer is not None
    dx, scale = float(outer.group(1)), float(outer.group(2))
    shifts = [float(v) for v in re.findall(r'<g transform="translate\(([-\d.]+),0\)">', markup)]
    if not shifts:
        shifts = [0.0, 0.0]
    return [dx + scale * (cx + shift) for cx, shift in zip((37.0, 63.0), shifts)]


@pytest.mark.parametrize("variant", [BodyVariant.WIDE, BodyVariant.TALL, BodyVariant.CUBE, BodyVariant.ROUND])
def test_eye_spacing_sets_gap_and_keeps_face_centered(variant: BodyVariant) -> None:
    layout = SHAPES[variant].layout
    markup = face_group(
        layout, layout.eye_offset_y, eyes_svg(Personality.GENTLE, IRIS, layout.eye_spread)
    )
    left, right = sclera_centers(markup)
    assert right - left == pytest.approx(2 * layout.eye_spacing, abs=0.01)
    assert (left + right) / 2 == pytest.approx(FACE_CENTER_X, abs=0.01)


def test_wide_and_tall_eye_gaps_differ() -> None:
    wide = SHAPES[BodyVariant.WIDE].layout
    tall = SHAPES[BodyVariant.TALL].layout
    assert (wide.eye_spacing, tall.eye_spacing) == (16, 11)
    assert wide.eye_spread > 0 > tall.eye_spread


def test_composed_eyes_follow_the_silhouette() -> None:
    for species_id in range(40):
        doc = build_full_document("water", "gentle", "common", species_id)
        left, right = sclera_centers(doc.layer(LayerName.EYES).markup)
        assert (left + right) / 2 == pytest.approx(FACE_CENTER_X, abs=0.01)
        blink = doc.layer(LayerName.BLINK).markup
        assert blink.count("<rect") == 2


def test_zero_spread_leaves_eyes_unwrapped() -> None:
    assert spread_eyes(("<a/>", "<b/>"), 0) == "<a/><b/>"
    assert spread_eyes(("<a/>", "<b/>"), 1.5) == (
        '<g transform="translate(-1.5,0)"><a/></g><g transform="translate(1.5,0)"><b/></g>'
    )
