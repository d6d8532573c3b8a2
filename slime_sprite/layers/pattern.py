"""Body surface patterns, clipped to the silhouette."""

from typing import Callable, Dict

from slime_sprite.document import EMPTY, Fragment
from slime_sprite.palette import SlimeColors
from slime_sprite.types import PatternType
from slime_sprite.utils.color import darken, lighten
from slime_sprite.utils.svg import ref, tag

PatternFn = Callable[[str, str], str]


def _stripes(light: str, dark: str) -> str:
    return "".join(
        tag("line", x1=0, y1=y, x2=100, y2=y, stroke=light, stroke_width=w, opacity=o)
        for y, w, o in ((30, 4, 0.18), (50, 3, 0.15), (70, 4, 0.18))
    )


def _spots(light: str, dark: str) -> str:
    return "".join(
        tag("circle", cx=x, cy=y, r=r, fill=light, opacity=o)
        for x, y, r, o in (
            (35, 35, 6, 0.2),
            (62, 42, 5, 0.18),
            (44, 65, 7, 0.16),
            (68, 68, 4, 0.2),
            (30, 55, 3.5, 0.15),
        )
    )


def _swirl(light: str, dark: str) -> str:
    return tag(
        "path", d="M50,30 Q60,40 50,55 Q40,65 50,75", fill="none",
        stroke=light, stroke_width=3, opacity=0.2,
    ) + tag(
        "path", d="M38,35 Q48,45 38,58", fill="none",
        stroke=light, stroke_width=2, opacity=0.15,
    )


def _chevrons(light: str, dark: str) -> str:
    return "".join(
        tag(
            "path", d=f"M20,{y + 10} L50,{y} L80,{y + 10}", fill="none",
            stroke=light, stroke_width=w, opacity=o,
        )
        for y, w, o in ((30, 3, 0.18), (45, 2.5, 0.15), (60, 2, 0.12))
    )


def _gradient_band(light: str, dark: str) -> str:
    return tag("rect", x=0, y=40, width=100, height=20, fill=dark, opacity=0.12) + tag(
        "rect", x=0, y=42, width=100, height=16, fill=light, opacity=0.08
    )


def _diamond_tiles(light: str, dark: str) -> str:
    return "".join(
        tag(
            "polygon",
            points=f"{cx},{cy - 10} {cx + 10},{cy} {cx},{cy + 10} {cx - 10},{cy}",
            fill=light,
            opacity=o,
        )
        for cx, cy, o in ((50, 35, 0.15), (35, 55, 0.12), (65, 55, 0.12), (50, 70, 0.1))
    )


# Rows of halftone dots: (y, ((x, r, opacity), ...))
_HALF_TONE_ROWS = (
    (30, ((30, 2, 0.18), (42, 2.5, 0.16), (54, 3, 0.14), (66, 2.5, 0.12))),
    (45, ((36, 3, 0.16), (50, 3.5, 0.14), (64, 3, 0.12))),
    (60, ((30, 2.5, 0.14), (44, 2, 0.12), (58, 2.5, 0.1), (70, 2, 0.08))),
)


def _half_tone(light: str, dark: str) -> str:
    return "".join(
        tag("circle", cx=x, cy=y, r=r, fill=dark, opacity=o)
        for y, dots in _HALF_TONE_ROWS
        for x, r, o in dots
    )


PATTERNS: Dict[PatternType, PatternFn] = {
    PatternType.STRIPES: _stripes,
    PatternType.SPOTS: _spots,
    PatternType.SWIRL: _swirl,
    PatternType.CHEVRONS: _chevrons,
    PatternType.GRADIENT_BAND: _gradient_band,
    PatternType.DIAMOND_TILES: _diamond_tiles,
    PatternType.HALF_TONE: _half_tone,
}


def pattern_fragment(
    pattern: PatternType, colors: SlimeColors, uid: str, body_path: str
) -> Fragment:
    """Pattern overlay clipped to ``body_path`` through ``patclip_<uid>``."""
    draw = PATTERNS.get(pattern)
    if draw is None:
        return EMPTY
    clip_id = f"patclip_{uid}"
    content = draw(lighten(colors.body, 12), darken(colors.body, 8))
    return Fragment(
        defs=tag("clipPath", tag("path", d=body_path), id=clip_id),
        markup=tag("g", content, clip_path=ref(clip_id)),
    )
