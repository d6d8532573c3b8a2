import pytest

from slime_sprite.layers.appendage import (
    FULL_APPENDAGES,
    ICON_APPENDAGES,
    appendage_svg,
    icon_appendage_svg,
)
from slime_sprite.layers.marking import icon_marking_svg, marking_svg
from slime_sprite.layers.pattern import PATTERNS, pattern_fragment
from slime_sprite.palette import ELEMENT_COLORS
from slime_sprite.shapes import SHAPES
from slime_sprite.types import AppendageType, BodyVariant, Element, MarkingType, PatternType
from slime_sprite.utils.color import lighten

COLORS = ELEMENT_COLORS[Element.GRASS]
BODY = SHAPES[BodyVariant.BLOB].body_path


def test_none_pattern_is_empty() -> None:
    assert not pattern_fragment(PatternType.NONE, COLORS, "u", BODY)


@pytest.mark.parametrize("pattern", [p for p in PatternType if p != PatternType.NONE])
def test_patterns_are_clipped_to_the_body(pattern: PatternType) -> None:
    assert pattern in PATTERNS
    fragment = pattern_fragment(pattern, COLORS, "grass_common_9", BODY)
    assert fragment.defs == f'<clipPath id="patclip_grass_common_9"><path d="{BODY}"/></clipPath>'
    assert fragment.markup.startswith('<g clip-path="url(#patclip_grass_common_9)">')


def test_pattern_uses_lightened_body() -> None:
    fragment = pattern_fragment(PatternType.STRIPES, COLORS, "u", BODY)
    assert lighten(COLORS.body, 12) in fragment.markup


@pytest.mark.parametrize("appendage", list(AppendageType))
def test_appendages(appendage: AppendageType) -> None:
    full = appendage_svg(appendage, COLORS)
    icon = icon_appendage_svg(appendage, COLORS)
    if appendage == AppendageType.NONE:
        assert full == icon == ""
    else:
        assert appendage in FULL_APPENDAGES and appendage in ICON_APPENDAGES
        assert full and icon
        assert full != icon


@pytest.mark.parametrize("marking", list(MarkingType))
def test_markings(marking: MarkingType) -> None:
    full = marking_svg(marking, COLORS)
    icon = icon_marking_svg(marking, COLORS)
    if marking == MarkingType.NONE:
        assert full == icon == ""
    else:
        assert full and icon
