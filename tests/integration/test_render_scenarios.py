import re
from urllib.parse import unquote

from slime_sprite import build_full_document, build_icon_document, render_full, render_icon
from slime_sprite.palette import ELEMENT_COLORS, get_species_colors
from slime_sprite.shapes import SHAPES
from slime_sprite.traits import select_traits
from slime_sprite.types import BodyVariant, Element, LayerName
from slime_sprite.utils.color import darken, shift_color
from slime_sprite.utils.svg import DATA_URI_PREFIX


def decode(uri: str) -> str:
    assert uri.startswith(DATA_URI_PREFIX)
    return unquote(uri[len(DATA_URI_PREFIX):])


def test_render_is_deterministic() -> None:
    for args in (("fire", "energetic", "legendary", 42), ("dark", "chill", "mythic", 9001)):
        assert render_full(*args) == render_full(*args)
    assert render_icon("ice", 40, "epic", None, 3) == render_icon("ice", 40, "epic", None, 3)


def test_legendary_fire_scenario() -> None:
    svg = decode(render_full("fire", "energetic", "legendary", 42))
    base = ELEMENT_COLORS[Element.FIRE]
    light, body, dark = (shift_color(c, -12, 2) for c in (base.light, base.body, base.dark))
    gradient = re.search(r'<radialGradient id="bg_fire_legendary_42".*?</radialGradient>', svg)
    assert gradient is not None
    assert re.findall(r'stop-color="([^"]+)"', gradient.group(0)) == [
        light,
        body,
        dark,
        darken(dark, 10),
    ]
    # energetic eyes
    assert ">!</text>" in svg
    # legendary crown and motes
    assert 'id="gem_fire_legendary_42"' in svg
    assert 'points="40,14 42,4 46,12 50,2 54,12 58,4 60,14" fill="url(#gem_fire_legendary_42)"' in svg
    # species 42 is a bean with stripes
    assert SHAPES[BodyVariant.BEAN].body_path in svg
    assert 'id="patclip_fire_legendary_42"' in svg


def test_unknown_tags_render_like_defaults() -> None:
    unknown = decode(render_full("plasma", "grumpy", "ultra", 5))
    default = decode(render_full("water", "gentle", "common", 5))
    assert unknown.replace("plasma_ultra_5", "water_common_5") == default

    assert decode(render_full(None, None, None)).startswith("<svg")
    unknown_icon = decode(render_icon("plasma", 40, "ultra", None, 5))
    default_icon = decode(render_icon("water", 40, "common", None, 5))
    assert unknown_icon.replace("plasma_ultra_5", "water_common_5") == default_icon


def test_icon_matches_full_colors() -> None:
    colors = get_species_colors("poison", 321)
    variant = select_traits(321).variant
    full = build_full_document("poison", "curious", "rare", 321)
    icon = build_icon_document("poison", 40, "rare", species_id=321)
    assert colors.iris in full.layer(LayerName.EYES).markup
    assert colors.iris in icon.layer(LayerName.EYES).markup
    assert SHAPES[variant].icon_body_path in icon.layer(LayerName.BODY).markup
    assert SHAPES[variant].body_path in full.layer(LayerName.BODY).markup
    assert "url(#ic_poison_rare_321)" in icon.to_svg()
    assert "bg_poison_rare_321" in full.to_svg()


def test_hidden_species_ignore_element() -> None:
    fire = decode(render_full("fire", "gentle", "common", 777))
    water = decode(render_full("water", "gentle", "common", 777))
    assert 'id="rainbow_joy_fire_common_777"' in fire
    assert fire.replace("fire_common_777", "X") != water.replace("water_common_777", "X")
    # only the element decorations and particles differ
    fire_doc = build_full_document("fire", "gentle", "common", 777)
    water_doc = build_full_document("water", "gentle", "common", 777)
    for name in (LayerName.BODY, LayerName.APPENDAGE, LayerName.MARKING, LayerName.EYES):
        assert fire_doc.layer(name).markup.replace("fire_", "") == water_doc.layer(name).markup.replace(
            "water_", ""
        )


def test_many_sprites_on_one_page_do_not_collide() -> None:
    page = "".join(
        build_full_document(element.value, "gentle", grade, species).to_svg()
        for element in Element
        for grade in ("common", "mythic")
        for species in (1, 2)
    )
    found = re.findall(r'\bid="([^"]+)"', page)
    assert len(found) == len(set(found))
