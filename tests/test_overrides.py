from xml.etree import ElementTree

import pytest

from slime_sprite.overrides import HIDDEN_SPECIES, get_override
from slime_sprite.state import derive_sprite
from slime_sprite.types import AppendageType, BodyVariant, MarkingType, PatternType


def test_registered_species() -> None:
    assert set(HIDDEN_SPECIES.keys()) == {777, 888, 999}
    assert get_override(42) is None
    assert get_override(0) is None


@pytest.mark.parametrize(
    "species_id, variant, appendage, pattern, marking, body, iris",
    [
        (777, BodyVariant.STAR, AppendageType.TINY_WINGS, PatternType.NONE, MarkingType.STAR_MARK, "#FFD700", "#FF6347"),
        (888, BodyVariant.GHOST, AppendageType.TENTACLES, PatternType.SWIRL, MarkingType.SCAR, "#2D1B4E", "#9B59B6"),
        (999, BodyVariant.DIAMOND, AppendageType.SINGLE_HORN, PatternType.DIAMOND_TILES, MarkingType.DIAMOND_MARK, "#FFD700", "#FF4500"),
    ],
)
def test_override_takes_precedence(species_id, variant, appendage, pattern, marking, body, iris) -> None:
    for element in ("fire", "water", "celestial", "unknown"):
        state = derive_sprite(element, "gentle", "common", species_id)
        assert state.override is HIDDEN_SPECIES[species_id]
        assert state.traits.variant == variant
        assert state.traits.appendage == appendage
        assert state.traits.pattern == pattern
        assert state.traits.marking == marking
        assert state.colors.body == body
        assert state.colors.iris == iris


@pytest.mark.parametrize(
    "species_id, def_prefix",
    [(777, "rainbow_joy_"), (888, "shadow_im_"), (999, "prism_999_")],
)
def test_override_fragments_are_namespaced(species_id: int, def_prefix: str) -> None:
    entry = HIDDEN_SPECIES[species_id]
    defs = entry.extra_defs("fire_epic_7")
    overlay = entry.extra_overlay("fire_epic_7")
    assert f'id="{def_prefix}fire_epic_7"' in defs
    assert f"url(#{def_prefix}fire_epic_7)" in overlay
    assert entry.extra_defs("water_common_1") != defs


@pytest.mark.parametrize("species_id", [777, 888, 999])
def test_override_fragments_are_well_formed(species_id: int) -> None:
    entry = HIDDEN_SPECIES[species_id]
    for fragment in (entry.extra_defs("u"), entry.extra_overlay("u")):
        root = ElementTree.fromstring(f'<svg xmlns="http://www.w3.org/2000/svg">{fragment}</svg>')
        assert len(root) >= 1


def test_one_piece_crown() -> None:
    overlay = HIDDEN_SPECIES[999].extra_overlay("u")
    assert '<polygon points="40,14 42,4 46,12 50,2 54,12 58,4 60,14" fill="#FFD700" opacity="0.7"/>' in overlay
    assert '<circle cx="50" cy="6" r="2.5" fill="#FF4500" opacity="0.8"/>' in overlay
    defs = HIDDEN_SPECIES[888].extra_defs("u")
    assert '<feGaussianBlur in="SourceGraphic" stdDeviation="4" result="blur"/>' in defs
