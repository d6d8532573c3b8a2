"""Element palettes and per-species color derivation.

Each element owns a fixed seven-color palette. Individual species get a
subtle, deterministic variation of their element's palette: a single hue
rotation (up to +/-14 degrees) and lightness offset (up to +/-5 points)
applied uniformly to all seven colors, so relative contrast inside the
palette is preserved. Species ``0`` is the canonical reference appearance and
receives the base palette untouched.
"""

from dataclasses import dataclass, fields
from typing import Iterator, Optional

from pyrsistent import pmap
from pyrsistent.typing import PMap

from slime_sprite.types import (
    DEFAULT_ELEMENT,
    Element,
    HexColor,
    SpeciesID,
    resolve_element,
)
from slime_sprite.utils.color import shift_color
from slime_sprite.utils.hash import species_hash

HUE_SALT = 100
LIGHTNESS_SALT = 101
MAX_HUE_SHIFT = 14
MAX_LIGHTNESS_SHIFT = 5


@dataclass(frozen=True)
class SlimeColors:
    """Seven named colors used throughout a sprite.

    Attributes:
        body: Main body fill (gradient midpoint).
        light: Highlight end of the body gradient.
        dark: Shadow end of the body gradient, appendages.
        accent: Element decorations and sparkles.
        iris: Eye iris fill.
        glow: Subsurface glow tint.
        blush: Cheek blush.
    """

    body: HexColor
    light: HexColor
    dark: HexColor
    accent: HexColor
    iris: HexColor
    glow: HexColor
    blush: HexColor

    def __iter__(self) -> Iterator[HexColor]:
        for field in fields(self):
            yield getattr(self, field.name)

    def shifted(self, hue_shift: float, light_shift: float) -> "SlimeColors":
        """Return a copy with every color shifted by the same amounts."""
        return SlimeColors(
            **{
                field.name: shift_color(getattr(self, field.name), hue_shift, light_shift)
                for field in fields(self)
            }
        )


ELEMENT_COLORS: PMap[Element, SlimeColors] = pmap(
    {
        Element.WATER: SlimeColors(
            body="#5BB8F5", light="#B0DEFF", dark="#3578D8", accent="#D0EDFF",
            iris="#2B7AE8", glow="#89C4FF", blush="#FFA4C4",
        ),
        Element.FIRE: SlimeColors(
            body="#F56B4A", light="#FFB89C", dark="#C8382A", accent="#FF9F43",
            iris="#E83A1E", glow="#FF8866", blush="#FFB088",
        ),
        Element.GRASS: SlimeColors(
            body="#48D48E", light="#AEF5CE", dark="#289A60", accent="#80FFB8",
            iris="#22AA58", glow="#6AE8A0", blush="#FFB8D0",
        ),
        Element.LIGHT: SlimeColors(
            body="#F2D66A", light="#FFF8C0", dark="#D4A428", accent="#FFFDE0",
            iris="#E8B820", glow="#FFE878", blush="#FFD0A0",
        ),
        Element.DARK: SlimeColors(
            body="#9080D0", light="#C8B8F5", dark="#6050A0", accent="#D8D0FF",
            iris="#7858CC", glow="#A898E0", blush="#D8A0E0",
        ),
        Element.ICE: SlimeColors(
            body="#88F0F0", light="#D0FAFA", dark="#50B8C0", accent="#E8FFFF",
            iris="#38C8D8", glow="#A0F0F8", blush="#E0C0FF",
        ),
        Element.ELECTRIC: SlimeColors(
            body="#FFD060", light="#FFF4C0", dark="#D0A038", accent="#FFFAD8",
            iris="#E8A810", glow="#FFE078", blush="#FFE0A0",
        ),
        Element.POISON: SlimeColors(
            body="#7860E8", light="#A898FF", dark="#4830B8", accent="#D0C8F8",
            iris="#6838E0", glow="#9878F0", blush="#D8A0F0",
        ),
        Element.EARTH: SlimeColors(
            body="#D06848", light="#FFC0A0", dark="#A04030", accent="#FFD8C8",
            iris="#C04828", glow="#F09870", blush="#FFB898",
        ),
        Element.WIND: SlimeColors(
            body="#B0D0DB", light="#F0F5F8", dark="#7FA8B8", accent="#FFFFFF",
            iris="#88A8B8", glow="#C8D8E0", blush="#F0C0D0",
        ),
        Element.CELESTIAL: SlimeColors(
            body="#FF80B0", light="#FFC0D8", dark="#C84880", accent="#FFE0F0",
            iris="#E830A0", glow="#FFA0C8", blush="#FFA8D8",
        ),
    }
)


def base_palette(element: Optional[str]) -> SlimeColors:
    """Base palette for ``element``; unknown elements use the water palette."""
    return ELEMENT_COLORS.get(resolve_element(element), ELEMENT_COLORS[DEFAULT_ELEMENT])


def hue_shift_for(species_id: SpeciesID) -> int:
    return species_hash(species_id, HUE_SALT) % (2 * MAX_HUE_SHIFT + 1) - MAX_HUE_SHIFT


def lightness_shift_for(species_id: SpeciesID) -> int:
    return (
        species_hash(species_id, LIGHTNESS_SALT) % (2 * MAX_LIGHTNESS_SHIFT + 1)
        - MAX_LIGHTNESS_SHIFT
    )


def derive_palette(base: SlimeColors, species_id: SpeciesID) -> SlimeColors:
    """Apply the species' deterministic hue/lightness shift to ``base``."""
    if species_id == 0:
        return base
    return base.shifted(hue_shift_for(species_id), lightness_shift_for(species_id))


def get_species_colors(element: Optional[str], species_id: SpeciesID) -> SlimeColors:
    """Derived palette for a ``(element, species)`` pair."""
    return derive_palette(base_palette(element), species_id)
