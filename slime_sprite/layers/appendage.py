"""Appendages drawn behind the body (horns, ears, wings, tails...)."""

from typing import Callable, Dict

from slime_sprite.palette import SlimeColors
from slime_sprite.types import AppendageType
from slime_sprite.utils.color import lighten
from slime_sprite.utils.svg import tag

AppendageFn = Callable[[SlimeColors], str]


def _pair(left: str, right: str, **attrs) -> str:
    return tag("path", d=left, **attrs) + tag("path", d=right, **attrs)


# Full sprite, 100-unit space.


def _small_horns(c: SlimeColors) -> str:
    ridge = lighten(c.dark, 15)
    return _pair(
        "M36,20 L32,6 L40,16", "M64,20 L68,6 L60,16", fill=c.dark, opacity=0.8
    ) + _pair(
        "M34,14 L33,8", "M66,14 L67,8",
        fill="none", stroke=ridge, stroke_width=0.8, opacity=0.4,
    )


def _single_horn(c: SlimeColors) -> str:
    return tag("path", d="M50,18 L48,2 L52,2 Z", fill=c.body, opacity=0.85) + tag(
        "path", d="M49,14 L49,4", fill="none", stroke="white", stroke_width=0.8, opacity=0.3
    )


def _cat_ears(c: SlimeColors) -> str:
    return _pair(
        "M26,30 L20,8 L38,22", "M74,30 L80,8 L62,22", fill=c.body, opacity=0.85
    ) + _pair(
        "M26,28 L22,12 L36,22", "M74,28 L78,12 L64,22",
        fill=lighten(c.body, 20), opacity=0.4,
    )


def _bunny_ears(c: SlimeColors) -> str:
    return _pair(
        "M36,20 Q32,0 28,-10 Q34,0 40,16",
        "M64,20 Q68,0 72,-10 Q66,0 60,16",
        fill=c.body, opacity=0.8, stroke=c.dark, stroke_width=0.5,
    ) + _pair(
        "M33,10 Q32,2 30,-4", "M67,10 Q68,2 70,-4",
        fill="none", stroke=lighten(c.body, 25), stroke_width=2, opacity=0.35,
    )


def _antenna(c: SlimeColors) -> str:
    parts = []
    for base_x, tip_x in ((42, 36), (58, 64)):
        parts.append(
            tag("line", x1=base_x, y1=18, x2=tip_x, y2=2, stroke=c.dark, stroke_width=1.5, opacity=0.7)
        )
    for tip_x in (36, 64):
        parts.append(tag("circle", cx=tip_x, cy=2, r=3, fill=c.accent, opacity=0.85))
    for glint_x in (35, 63):
        parts.append(tag("circle", cx=glint_x, cy=1, r=1.2, fill="white", opacity=0.5))
    return "".join(parts)


def _tiny_wings(c: SlimeColors) -> str:
    return _pair(
        "M18,48 Q4,36 8,24 Q12,34 18,40",
        "M82,48 Q96,36 92,24 Q88,34 82,40",
        fill=c.light, opacity=0.5, stroke=c.body, stroke_width=0.5,
    ) + _pair(
        "M16,44 Q6,32 10,22", "M84,44 Q94,32 90,22",
        fill="none", stroke=c.accent, stroke_width=1, opacity=0.3,
    )


def _tail_curl(c: SlimeColors) -> str:
    return tag(
        "path", d="M78,68 Q92,62 94,50 Q96,40 88,36", fill="none", stroke=c.body,
        stroke_width=3.5, stroke_linecap="round", opacity=0.7,
    ) + tag("circle", cx=88, cy=36, r=3, fill=c.accent, opacity=0.6)


def _tail_spike(c: SlimeColors) -> str:
    return tag(
        "path", d="M78,66 L94,58 L86,54 L96,44", fill="none", stroke=c.dark,
        stroke_width=2.5, stroke_linecap="round", opacity=0.7,
    ) + tag("polygon", points="96,44 92,40 98,38", fill=c.dark, opacity=0.6)


def _tentacles(c: SlimeColors) -> str:
    return "".join(
        tag(
            "path", d=d, fill="none", stroke=c.body, stroke_width=w,
            stroke_linecap="round", opacity=o,
        )
        for d, w, o in (
            ("M28,82 Q22,92 18,96", 2.5, 0.5),
            ("M40,84 Q38,94 34,98", 2, 0.45),
            ("M60,84 Q62,94 66,98", 2, 0.45),
            ("M72,82 Q78,92 82,96", 2.5, 0.5),
        )
    )


def _fins(c: SlimeColors) -> str:
    return _pair(
        "M18,50 Q8,46 6,38 Q10,44 16,44", "M82,50 Q92,46 94,38 Q90,44 84,44",
        fill=c.body, opacity=0.6,
    ) + tag("path", d="M46,16 Q50,8 54,16", fill=c.body, opacity=0.55)


def _spikes_top(c: SlimeColors) -> str:
    return "".join(
        tag("polygon", points=points, fill=c.dark, opacity=o)
        for points, o in (
            ("34,20 32,8 38,18", 0.65),
            ("44,18 43,4 48,16", 0.7),
            ("56,18 57,4 52,16", 0.7),
            ("66,20 68,8 62,18", 0.65),
        )
    )


FULL_APPENDAGES: Dict[AppendageType, AppendageFn] = {
    AppendageType.SMALL_HORNS: _small_horns,
    AppendageType.SINGLE_HORN: _single_horn,
    AppendageType.CAT_EARS: _cat_ears,
    AppendageType.BUNNY_EARS: _bunny_ears,
    AppendageType.ANTENNA: _antenna,
    AppendageType.TINY_WINGS: _tiny_wings,
    AppendageType.TAIL_CURL: _tail_curl,
    AppendageType.TAIL_SPIKE: _tail_spike,
    AppendageType.TENTACLES: _tentacles,
    AppendageType.FINS: _fins,
    AppendageType.SPIKES_TOP: _spikes_top,
}


# Icon, 50-unit space. Reduced strokes, no secondary detail.


def _icon_small_horns(c: SlimeColors) -> str:
    return _pair("M18,10 L16,3 L20,8", "M32,10 L34,3 L30,8", fill=c.dark, opacity=0.7)


def _icon_single_horn(c: SlimeColors) -> str:
    return tag("path", d="M25,9 L24,1 L26,1 Z", fill=c.body, opacity=0.8)


def _icon_cat_ears(c: SlimeColors) -> str:
    return _pair("M13,15 L10,4 L19,11", "M37,15 L40,4 L31,11", fill=c.body, opacity=0.8)


def _icon_bunny_ears(c: SlimeColors) -> str:
    return _pair(
        "M18,10 Q16,0 14,-5 Q17,0 20,8", "M32,10 Q34,0 36,-5 Q33,0 30,8",
        fill=c.body, opacity=0.7,
    )


def _icon_antenna(c: SlimeColors) -> str:
    return (
        tag("line", x1=21, y1=9, x2=18, y2=1, stroke=c.dark, stroke_width=1, opacity=0.6)
        + tag("line", x1=29, y1=9, x2=32, y2=1, stroke=c.dark, stroke_width=1, opacity=0.6)
        + tag("circle", cx=18, cy=1, r=1.5, fill=c.accent, opacity=0.8)
        + tag("circle", cx=32, cy=1, r=1.5, fill=c.accent, opacity=0.8)
    )


def _icon_tiny_wings(c: SlimeColors) -> str:
    return _pair(
        "M9,24 Q2,18 4,12 Q6,17 9,20", "M41,24 Q48,18 46,12 Q44,17 41,20",
        fill=c.light, opacity=0.45,
    )


def _icon_tail_curl(c: SlimeColors) -> str:
    return tag(
        "path", d="M39,34 Q46,31 47,25", fill="none", stroke=c.body,
        stroke_width=2, stroke_linecap="round", opacity=0.6,
    )


def _icon_tail_spike(c: SlimeColors) -> str:
    return tag(
        "path", d="M39,33 L47,29 L48,22", fill="none", stroke=c.dark,
        stroke_width=1.5, stroke_linecap="round", opacity=0.6,
    )


def _icon_tentacles(c: SlimeColors) -> str:
    return (
        tag("path", d="M14,41 Q11,46 9,48", fill="none", stroke=c.body,
            stroke_width=1.5, stroke_linecap="round", opacity=0.4)
        + tag("path", d="M20,42 Q19,47 17,49", fill="none", stroke=c.body,
              stroke_width=1, opacity=0.35)
        + tag("path", d="M30,42 Q31,47 33,49", fill="none", stroke=c.body,
              stroke_width=1, opacity=0.35)
        + tag("path", d="M36,41 Q39,46 41,48", fill="none", stroke=c.body,
              stroke_width=1.5, stroke_linecap="round", opacity=0.4)
    )


def _icon_fins(c: SlimeColors) -> str:
    return _pair(
        "M9,25 Q4,23 3,19 Q5,22 8,22", "M41,25 Q46,23 47,19 Q45,22 42,22",
        fill=c.body, opacity=0.5,
    )


def _icon_spikes_top(c: SlimeColors) -> str:
    return "".join(
        tag("polygon", points=points, fill=c.dark, opacity=o)
        for points, o in (
            ("17,10 16,4 19,9", 0.6),
            ("22,9 21.5,2 24,8", 0.65),
            ("28,9 28.5,2 26,8", 0.65),
            ("33,10 34,4 31,9", 0.6),
        )
    )


ICON_APPENDAGES: Dict[AppendageType, AppendageFn] = {
    AppendageType.SMALL_HORNS: _icon_small_horns,
    AppendageType.SINGLE_HORN: _icon_single_horn,
    AppendageType.CAT_EARS: _icon_cat_ears,
    AppendageType.BUNNY_EARS: _icon_bunny_ears,
    AppendageType.ANTENNA: _icon_antenna,
    AppendageType.TINY_WINGS: _icon_tiny_wings,
    AppendageType.TAIL_CURL: _icon_tail_curl,
    AppendageType.TAIL_SPIKE: _icon_tail_spike,
    AppendageType.TENTACLES: _icon_tentacles,
    AppendageType.FINS: _icon_fins,
    AppendageType.SPIKES_TOP: _icon_spikes_top,
}


def appendage_svg(appendage: AppendageType, colors: SlimeColors) -> str:
    draw = FULL_APPENDAGES.get(appendage)
    return draw(colors) if draw else ""


def icon_appendage_svg(appendage: AppendageType, colors: SlimeColors) -> str:
    draw = ICON_APPENDAGES.get(appendage)
    return draw(colors) if draw else ""
