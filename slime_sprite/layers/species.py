"""Per-species face details (freckles, beauty mark, sweat drop...).

The feature is chosen by ``species_hash(id, 200) % 8``. Species ``0`` never
gets one. The last slot is intentionally empty so roughly one species in
eight has a plain face.
"""

from typing import Callable, Tuple

from slime_sprite.palette import SlimeColors
from slime_sprite.types import SpeciesID
from slime_sprite.utils.color import darken
from slime_sprite.utils.hash import species_hash
from slime_sprite.utils.svg import animate, tag

FEATURE_SALT = 200
TEARDROP_BLUE = "#88CCFF"

FeatureFn = Callable[[SlimeColors, str], str]


def _freckles(c: SlimeColors, dot: str) -> str:
    dots = ((28, 54, 0.8, 0.3), (31, 56, 0.7, 0.25), (26, 57, 0.6, 0.28))
    return "".join(
        tag("circle", cx=cx, cy=cy, r=r, fill=dot, opacity=o)
        for x, cy, r, o in dots
        for cx in (x, 100 - x)
    )


def _beauty_mark(c: SlimeColors, dot: str) -> str:
    return tag("circle", cx=28, cy=52, r=1.2, fill=dot, opacity=0.45)


def _rosy_nose(c: SlimeColors, dot: str) -> str:
    return tag("circle", cx=50, cy=56, r=2, fill="#FFB0B0", opacity=0.4)


def _sweat_drop(c: SlimeColors, dot: str) -> str:
    return tag("path", d="M74,38 Q75,34 76,38 Q75,42 74,38", fill=TEARDROP_BLUE, opacity=0.5) + tag(
        "circle", cx=74.8, cy=36.5, r=0.6, fill="white", opacity=0.4
    )


def _eye_sparkle(c: SlimeColors, dot: str) -> str:
    return tag(
        "polygon",
        animate("opacity", "0.65;0.25;0.65", "2s"),
        points="30,42 30.8,44 33,44.5 31,45.5 31.5,47.5 30,46 28.5,47.5 29,45.5 27,44.5 29.2,44",
        fill="white",
        opacity=0.65,
    )


def _tear_mark(c: SlimeColors, dot: str) -> str:
    return tag(
        "path", d="M33,56 Q32,60 33,62", fill="none", stroke=TEARDROP_BLUE,
        stroke_width=0.8, opacity=0.35, stroke_linecap="round",
    )


def _blush_lines(c: SlimeColors, dot: str) -> str:
    strokes = ((24, 54, 0.35), (26, 53, 0.3), (28, 54, 0.25), (72, 54, 0.35), (74, 53, 0.3), (76, 54, 0.25))
    return "".join(
        tag(
            "line", x1=x, y1=y, x2=x + 2, y2=y + 4, stroke=c.blush,
            stroke_width=0.7, opacity=o, stroke_linecap="round",
        )
        for x, y, o in strokes
    )


def _plain(c: SlimeColors, dot: str) -> str:
    return ""


FEATURES: Tuple[FeatureFn, ...] = (
    _freckles,
    _beauty_mark,
    _rosy_nose,
    _sweat_drop,
    _eye_sparkle,
    _tear_mark,
    _blush_lines,
    _plain,
)


def feature_index(species_id: SpeciesID) -> int:
    return species_hash(species_id, FEATURE_SALT) % len(FEATURES)


def species_features_svg(species_id: SpeciesID, colors: SlimeColors) -> str:
    if species_id == 0:
        return ""
    return FEATURES[feature_index(species_id)](colors, darken(colors.body, 20))
