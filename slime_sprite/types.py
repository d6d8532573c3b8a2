"""Common type aliases and tag enumerations.

Every semantic input of the renderer is a free-form string tag supplied by the
caller (element, personality, grade). The enums below name the recognized
values; :func:`resolve_tag` maps any input onto a member, falling back to a
documented default for unrecognized or forward-incompatible tags.

Trait enums (``BodyVariant``, ``PatternType``, ``AppendageType``,
``MarkingType``) back the append-only catalogs in :mod:`slime_sprite.traits`;
their *definition order is significant* and must only ever be extended at the
end.
"""

import logging
from enum import StrEnum, auto
from typing import Optional, Type, TypeVar

logger = logging.getLogger(__name__)

SpeciesID = int
HexColor = str


class Element(StrEnum):
    """Elemental type: selects the base palette and the decoration set."""

    WATER = auto()
    FIRE = auto()
    GRASS = auto()
    LIGHT = auto()
    DARK = auto()
    ICE = auto()
    ELECTRIC = auto()
    POISON = auto()
    EARTH = auto()
    WIND = auto()
    CELESTIAL = auto()


class Personality(StrEnum):
    """Behavioral archetype: selects eye, mouth and blush glyphs."""

    ENERGETIC = auto()
    CHILL = auto()
    FOODIE = auto()
    CURIOUS = auto()
    TSUNDERE = auto()
    GENTLE = auto()


class Grade(StrEnum):
    """Rarity tier, declared in ascending order of visual intensity."""

    COMMON = auto()
    UNCOMMON = auto()
    RARE = auto()
    EPIC = auto()
    LEGENDARY = auto()
    MYTHIC = auto()


class BodyVariant(StrEnum):
    ROUND = auto()
    ELONGATED = auto()
    SPIKY = auto()
    FLAT = auto()
    TEARDROP = auto()
    BLOB = auto()
    MUSHROOM = auto()
    STAR = auto()
    CUBE = auto()
    TALL = auto()
    WIDE = auto()
    DIAMOND = auto()
    BEAN = auto()
    GHOST = auto()
    CRESCENT = auto()


class PatternType(StrEnum):
    NONE = auto()
    STRIPES = auto()
    SPOTS = auto()
    SWIRL = auto()
    CHEVRONS = auto()
    GRADIENT_BAND = auto()
    DIAMOND_TILES = auto()
    HALF_TONE = auto()


class AppendageType(StrEnum):
    NONE = auto()
    SMALL_HORNS = auto()
    SINGLE_HORN = auto()
    CAT_EARS = auto()
    BUNNY_EARS = auto()
    ANTENNA = auto()
    TINY_WINGS = auto()
    TAIL_CURL = auto()
    TAIL_SPIKE = auto()
    TENTACLES = auto()
    FINS = auto()
    SPIKES_TOP = auto()


class MarkingType(StrEnum):
    NONE = auto()
    STAR_MARK = auto()
    HEART = auto()
    SCAR = auto()
    PATCH = auto()
    DIAMOND_MARK = auto()
    CROSS = auto()


class RenderMode(StrEnum):
    """Output mode: detailed ``full`` sprite or reduced-geometry ``icon``."""

    FULL = auto()
    ICON = auto()


class LayerName(StrEnum):
    """Named layers of the composed document, declared in z-order."""

    GROUND_SHADOW = auto()
    APPENDAGE = auto()
    OUTLINE_GLOW = auto()
    BODY = auto()
    PATTERN = auto()
    JELLY = auto()
    SUBSURFACE_GLOW = auto()
    GRADE_BODY = auto()
    BUBBLES = auto()
    DOME_HIGHLIGHT = auto()
    SPECULAR = auto()
    RIM_LIGHT = auto()
    MARKING = auto()
    OVERRIDE_OVERLAY = auto()
    ELEMENT_DECOR = auto()
    ELEMENT_PARTICLES = auto()
    EYES = auto()
    BLINK = auto()
    MOUTH = auto()
    BLUSH = auto()
    SPECIES_FEATURES = auto()
    GRADE_OVERLAY = auto()
    ACCESSORIES = auto()


DEFAULT_ELEMENT = Element.WATER
DEFAULT_PERSONALITY = Personality.GENTLE
DEFAULT_GRADE = Grade.COMMON
DEFAULT_VARIANT = BodyVariant.ROUND

E = TypeVar("E", bound=StrEnum)


def resolve_tag(enum_cls: Type[E], value: Optional[str], default: E) -> E:
    """Map a caller-supplied tag onto ``enum_cls``.

    Matching is case-insensitive and ignores surrounding whitespace. Anything
    unrecognized (including ``None``) resolves to ``default``; the renderer
    never rejects a tag.

    Args:
        enum_cls: Target string enum.
        value: Raw tag as received from the caller.
        default: Member returned when ``value`` is not recognized.

    Returns:
        E: The matching member or ``default``.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        for member in enum_cls:
            if member.value == key:
                return member
    logger.debug(
        "Unrecognized %s tag %r, falling back to %s",
        enum_cls.__name__,
        value,
        default.value,
    )
    return default


def resolve_element(value: Optional[str]) -> Element:
    return resolve_tag(Element, value, DEFAULT_ELEMENT)


def resolve_personality(value: Optional[str]) -> Personality:
    return resolve_tag(Personality, value, DEFAULT_PERSONALITY)


def resolve_grade(value: Optional[str]) -> Grade:
    return resolve_tag(Grade, value, DEFAULT_GRADE)


def resolve_variant(value: Optional[str]) -> BodyVariant:
    return resolve_tag(BodyVariant, value, DEFAULT_VARIANT)
