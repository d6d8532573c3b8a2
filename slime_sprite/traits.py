"""Deterministic trait selection.

A species' silhouette, pattern, appendage and marking are each chosen from an
append-only catalog with :func:`slime_sprite.utils.hash.pick`, using a
distinct salt per trait so the four choices are independent.

Catalog order is part of the persisted appearance of every species: entries
may be appended, never inserted or reordered. ``tests/test_traits.py`` pins a
golden set of selections to catch accidental edits.
"""

from dataclasses import dataclass

from pyrsistent import pvector
from pyrsistent.typing import PVector

from slime_sprite.types import (
    AppendageType,
    BodyVariant,
    MarkingType,
    PatternType,
    SpeciesID,
)
from slime_sprite.utils.hash import pick

VARIANT_SALT = 1
PATTERN_SALT = 2
APPENDAGE_SALT = 3
MARKING_SALT = 4

BODY_VARIANTS: PVector[BodyVariant] = pvector(BodyVariant)
PATTERN_TYPES: PVector[PatternType] = pvector(PatternType)
APPENDAGE_TYPES: PVector[AppendageType] = pvector(AppendageType)
MARKING_TYPES: PVector[MarkingType] = pvector(MarkingType)


@dataclass(frozen=True)
class TraitSelection:
    """The four independently selected visual traits of a species."""

    variant: BodyVariant
    pattern: PatternType
    appendage: AppendageType
    marking: MarkingType


def select_traits(species_id: SpeciesID) -> TraitSelection:
    """Pick every trait for ``species_id`` from the catalogs."""
    return TraitSelection(
        variant=pick(BODY_VARIANTS, species_id, VARIANT_SALT),
        pattern=pick(PATTERN_TYPES, species_id, PATTERN_SALT),
        appendage=pick(APPENDAGE_TYPES, species_id, APPENDAGE_SALT),
        marking=pick(MARKING_TYPES, species_id, MARKING_SALT),
    )
