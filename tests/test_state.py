from slime_sprite.palette import get_species_colors
from slime_sprite.shapes import SHAPES
from slime_sprite.state import derive_sprite, make_uid
from slime_sprite.traits import select_traits
from slime_sprite.types import Element, Grade, Personality, RenderMode


def test_derive_sprite_resolves_tags() -> None:
    state = derive_sprite("Fire", "ENERGETIC", "legendary", 42)
    assert state.element == Element.FIRE
    assert state.personality == Personality.ENERGETIC
    assert state.grade == Grade.LEGENDARY
    assert state.override is None
    assert state.colors == get_species_colors("fire", 42)
    assert state.traits == select_traits(42)
    assert state.shape is SHAPES[state.traits.variant]


def test_unknown_tags_fall_back() -> None:
    state = derive_sprite("plasma", "grumpy", "ultra", 5)
    assert state.element == Element.WATER
    assert state.personality == Personality.GENTLE
    assert state.grade == Grade.COMMON
    assert state.colors == get_species_colors("water", 5)


def test_uid_uses_raw_tags() -> None:
    assert make_uid("fire", "epic", 42, RenderMode.FULL) == "fire_epic_42"
    assert make_uid("fire", "epic", 42, RenderMode.ICON) == "ic_fire_epic_42"
    assert make_uid("plasma", "ultra", 5, RenderMode.FULL) == "plasma_ultra_5"
    assert make_uid("fire ball", "epic", 1, RenderMode.FULL) == "fire_ball_epic_1"


def test_modes_share_palette_and_traits() -> None:
    full = derive_sprite("ice", "chill", "rare", 123, RenderMode.FULL)
    icon = derive_sprite("ice", "chill", "rare", 123, RenderMode.ICON)
    assert full.colors == icon.colors
    assert full.traits == icon.traits
    assert full.uid != icon.uid
