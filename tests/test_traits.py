from typing import Tuple

import pytest

from slime_sprite.traits import (
    APPENDAGE_TYPES,
    BODY_VARIANTS,
    MARKING_TYPES,
    PATTERN_TYPES,
    TraitSelection,
    select_traits,
)
from slime_sprite.types import AppendageType, BodyVariant, MarkingType, PatternType


def test_catalog_sizes() -> None:
    assert len(BODY_VARIANTS) == 15
    assert len(PATTERN_TYPES) == 8
    assert len(APPENDAGE_TYPES) == 12
    assert len(MARKING_TYPES) == 7


def test_catalog_prefix_order() -> None:
    # Entries may only be appended; the existing order is part of every species' look.
    assert list(BODY_VARIANTS[:4]) == [
        BodyVariant.ROUND,
        BodyVariant.ELONGATED,
        BodyVariant.SPIKY,
        BodyVariant.FLAT,
    ]
    assert BODY_VARIANTS[14] == BodyVariant.CRESCENT
    assert PATTERN_TYPES[0] == PatternType.NONE
    assert PATTERN_TYPES[7] == PatternType.HALF_TONE
    assert APPENDAGE_TYPES[0] == AppendageType.NONE
    assert APPENDAGE_TYPES[11] == AppendageType.SPIKES_TOP
    assert MARKING_TYPES[0] == MarkingType.NONE
    assert MARKING_TYPES[6] == MarkingType.CROSS


GOLDEN: Tuple[Tuple[int, TraitSelection], ...] = (
    (
        0,
        TraitSelection(
            BodyVariant.MUSHROOM, PatternType.DIAMOND_TILES, AppendageType.SPIKES_TOP, MarkingType.CROSS
        ),
    ),
    (
        1,
        TraitSelection(
            BodyVariant.STAR, PatternType.SWIRL, AppendageType.SINGLE_HORN, MarkingType.HEART
        ),
    ),
    (
        2,
        TraitSelection(
            BodyVariant.CRESCENT, PatternType.SPOTS, AppendageType.NONE, MarkingType.PATCH
        ),
    ),
    (
        42,
        TraitSelection(
            BodyVariant.BEAN, PatternType.STRIPES, AppendageType.ANTENNA, MarkingType.DIAMOND_MARK
        ),
    ),
    (
        123,
        TraitSelection(
            BodyVariant.ELONGATED, PatternType.CHEVRONS, AppendageType.TENTACLES, MarkingType.SCAR
        ),
    ),
    (
        1000,
        TraitSelection(
            BodyVariant.CRESCENT, PatternType.HALF_TONE, AppendageType.TAIL_CURL, MarkingType.NONE
        ),
    ),
)


@pytest.mark.parametrize("species_id, expected", GOLDEN)
def test_golden_selections(species_id: int, expected: TraitSelection) -> None:
    assert select_traits(species_id) == expected


def test_selection_is_deterministic() -> None:
    assert [select_traits(i) for i in range(50)] == [select_traits(i) for i in range(50)]


def test_selection_covers_catalogs() -> None:
    selections = [select_traits(i) for i in range(1, 2000)]
    assert {s.variant for s in selections} == set(BODY_VARIANTS)
    assert {s.pattern for s in selections} == set(PATTERN_TYPES)
    assert {s.appendage for s in selections} == set(APPENDAGE_TYPES)
    assert {s.marking for s in selections} == set(MARKING_TYPES)
