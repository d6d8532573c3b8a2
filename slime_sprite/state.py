"""Derived sprite state shared by the full and icon output modes.

Everything that depends on the caller's tags and identity (palette, traits,
silhouette, namespace key) is resolved here exactly once. Layer generators
only ever read a :class:`SpriteState`; they never look at raw tags.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from slime_sprite.overrides import OverrideEntry, get_override
from slime_sprite.palette import SlimeColors, get_species_colors
from slime_sprite.shapes import Shape, get_shape
from slime_sprite.traits import TraitSelection, select_traits
from slime_sprite.types import (
    Element,
    Grade,
    Personality,
    RenderMode,
    SpeciesID,
    resolve_element,
    resolve_grade,
    resolve_personality,
)
from slime_sprite.utils.svg import sanitize_uid

logger = logging.getLogger(__name__)

ICON_UID_PREFIX = "ic_"


@dataclass(frozen=True)
class SpriteState:
    """Resolved inputs of one render call.

    Attributes:
        element: Resolved element (drives decorations and particles).
        personality: Resolved personality (drives the face).
        grade: Resolved grade (drives grade effects).
        species_id: Numeric species identity.
        uid: Namespace key for every definition id in the document.
        colors: Derived or override palette.
        traits: Selected or override traits.
        shape: Silhouette for ``traits.variant``.
        override: Hidden-species entry, if ``species_id`` has one.
    """

    element: Element
    personality: Personality
    grade: Grade
    species_id: SpeciesID
    uid: str
    colors: SlimeColors
    traits: TraitSelection
    shape: Shape
    override: Optional[OverrideEntry] = None


def make_uid(element: Optional[str], grade: Optional[str], species_id: SpeciesID, mode: RenderMode) -> str:
    """Namespace key built from the caller's raw tags.

    The raw tags are used (not the resolved ones) so two different unknown
    tags never share definitions on the same page.
    """
    prefix = ICON_UID_PREFIX if mode == RenderMode.ICON else ""
    return sanitize_uid(f"{prefix}{element}_{grade}_{species_id}")


def derive_sprite(
    element: Optional[str],
    personality: Optional[str],
    grade: Optional[str],
    species_id: SpeciesID,
    mode: RenderMode = RenderMode.FULL,
) -> SpriteState:
    """Resolve tags, check overrides, derive palette and traits.

    Args:
        element: Element tag; unknown values fall back to ``water``.
        personality: Personality tag; unknown values fall back to ``gentle``.
        grade: Grade tag; unknown values fall back to ``common``.
        species_id: Species identity.
        mode: Output mode, only affects the uid prefix.

    Returns:
        SpriteState: State consumed by the layer generators.
    """
    override = get_override(species_id)
    if override is not None:
        logger.debug("Species %d uses hidden override %r", species_id, override.name)
        colors = override.colors
        traits = TraitSelection(
            variant=override.variant,
            pattern=override.pattern,
            appendage=override.appendage,
            marking=override.marking,
        )
    else:
        colors = get_species_colors(element, species_id)
        traits = select_traits(species_id)

    return SpriteState(
        element=resolve_element(element),
        personality=resolve_personality(personality),
        grade=resolve_grade(grade),
        species_id=species_id,
        uid=make_uid(element, grade, species_id, mode),
        colors=colors,
        traits=traits,
        shape=get_shape(traits.variant),
        override=override,
    )
