import re
from typing import Iterator

import pytest

from slime_sprite.accessories import StaticAccessory, register_accessory, unregister_accessory
from slime_sprite.config import RenderConfig
from slime_sprite.renderer.sprite import (
    FULL_VIEW_BOX,
    ICON_VIEW_BOX,
    SpriteRenderer,
    build_full_document,
    build_icon_document,
    render_full,
    render_icon,
)
from slime_sprite.types import Grade, LayerName
from slime_sprite.utils.svg import DATA_URI_PREFIX

ICON_LAYERS = (
    LayerName.APPENDAGE,
    LayerName.OUTLINE_GLOW,
    LayerName.BODY,
    LayerName.JELLY,
    LayerName.BUBBLES,
    LayerName.DOME_HIGHLIGHT,
    LayerName.SPECULAR,
    LayerName.MARKING,
    LayerName.EYES,
    LayerName.MOUTH,
    LayerName.BLUSH,
    LayerName.GRADE_OVERLAY,
    LayerName.ACCESSORIES,
)


@pytest.fixture
def top_hat() -> Iterator[str]:
    register_accessory(
        StaticAccessory(
            id="test-top-hat",
            markup='<rect x="38" y="-4" width="24" height="16" fill="#222"/>',
            definitions='<linearGradient id="test-top-hat-band"/>',
        )
    )
    yield "test-top-hat"
    unregister_accessory("test-top-hat")


def ids(svg: str) -> list:
    return re.findall(r'\bid="([^"]+)"', svg)


def test_full_layer_order() -> None:
    doc = build_full_document("fire", "energetic", "legendary", 42)
    assert doc.layer_names == tuple(LayerName)
    assert doc.view_box == FULL_VIEW_BOX
    assert (doc.width, doc.height) == (240, 240)


def test_icon_layer_order() -> None:
    doc = build_icon_document("fire", 40, "legendary", species_id=42)
    assert doc.layer_names == ICON_LAYERS
    assert doc.view_box == ICON_VIEW_BOX
    assert (doc.width, doc.height) == (80, 80)


def test_full_svg_envelope() -> None:
    svg = build_full_document("water", "gentle").to_svg()
    assert svg.startswith(
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="-10 -15 120 120" width="240" height="240"'
    )
    assert svg.endswith("</svg>")
    assert svg.count("<defs>") == 1


@pytest.mark.parametrize("grade", list(Grade))
def test_every_definition_is_namespaced(grade: Grade) -> None:
    for species_id in (0, 7, 777, 888, 999):
        for element in ("dark", "celestial", "fire"):
            full = build_full_document(element, "tsundere", grade.value, species_id).to_svg()
            uid = f"{element}_{grade.value}_{species_id}"
            found = ids(full)
            assert len(found) == len(set(found))
            assert all(uid in def_id for def_id in found)

            icon = build_icon_document(element, 40, grade.value, species_id=species_id).to_svg()
            found = ids(icon)
            assert len(found) == len(set(found))
            assert all(f"ic_{uid}" in def_id for def_id in found)


def test_references_resolve() -> None:
    svg = build_full_document("celestial", "curious", "mythic", 31).to_svg()
    defined = set(ids(svg))
    for referenced in re.findall(r"url\(#([^)]+)\)", svg):
        assert referenced in defined


def test_body_carries_grade_filter() -> None:
    body = build_full_document("fire", "chill", "epic", 3).layer(LayerName.BODY).markup
    assert '<g filter="url(#halo_fire_epic_3)"><path' in body
    assert "url(#shadow_fire_epic_3)" in body
    assert "url(#bg_fire_epic_3)" in body

    plain = build_full_document("fire", "chill", "common", 3).layer(LayerName.BODY).markup
    assert "url(#halo_" not in plain


def test_accessories_are_painted_last(top_hat: str) -> None:
    svg = build_full_document("ice", "foodie", "rare", 5, [top_hat, "missing"]).to_svg()
    assert svg.endswith('<rect x="38" y="-4" width="24" height="16" fill="#222"/></svg>')
    assert '<linearGradient id="test-top-hat-band"/>' in svg


def test_icon_accessories_are_scaled(top_hat: str) -> None:
    doc = build_icon_document("ice", accessory_overlays=[top_hat])
    assert doc.layer(LayerName.ACCESSORIES).markup == (
        '<g transform="scale(0.5)"><rect x="38" y="-4" width="24" height="16" fill="#222"/></g>'
    )
    assert build_icon_document("ice").layer(LayerName.ACCESSORIES).markup == ""


def test_render_functions_return_data_uris() -> None:
    assert render_full("fire", "energetic").startswith(DATA_URI_PREFIX)
    assert render_icon("fire").startswith(DATA_URI_PREFIX)
    assert render_full("fire", "energetic", "epic", 9) == build_full_document(
        "fire", "energetic", "epic", 9
    ).to_data_uri()


def test_icon_size() -> None:
    doc = build_icon_document("grass", 24)
    assert 'width="48" height="48"' in doc.to_svg()


def test_renderer_honours_config() -> None:
    renderer = SpriteRenderer(RenderConfig(full_size=128, icon_size=16, data_uri=False))
    full = renderer.full("earth", "chill", "uncommon", 12)
    assert full.startswith("<svg")
    assert 'width="128" height="128"' in full
    icon = renderer.icon("earth", "uncommon", species_id=12)
    assert 'width="32" height="32"' in icon
    assert 'width="20" height="20"' in renderer.icon("earth", size=10)


def test_default_renderer_returns_data_uris() -> None:
    renderer = SpriteRenderer()
    assert renderer.full("wind", "gentle") == render_full("wind", "gentle")
    assert renderer.icon("wind") == render_icon("wind")


def test_non_integer_species_is_a_type_error() -> None:
    with pytest.raises(TypeError):
        render_full("fire", "gentle", "common", 4.5)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        render_icon("fire", 40, "common", None, "42")  # type: ignore[arg-type]
