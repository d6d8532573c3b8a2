"""Grade (rarity) effects.

Each grade is a :class:`GradeEffect` variant exposing the same contract:

* :meth:`GradeEffect.bundle` for the full sprite,
* :meth:`GradeEffect.icon_bundle` for the icon.

Both return a :class:`GradeEffectBundle`. The composer never branches on the
grade itself; it places the four bundle parts into their fixed layers:

* ``defs`` go into the document definitions,
* ``body_filter`` is a filter id applied to the body path,
* ``body_overlay`` is drawn right above the jelly layers,
* ``overlay`` is drawn above the face, below accessories.

Visual complexity strictly increases up the ladder so a grade can be read at
a glance: ``common`` has one sparkle, ``mythic`` has wings, horns, eight
cosmic particles and a hue-rotating body glow with a matching outline.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from pyrsistent import pmap
from pyrsistent.typing import PMap

from slime_sprite.palette import SlimeColors
from slime_sprite.types import DEFAULT_GRADE, Grade
from slime_sprite.utils.color import lighten
from slime_sprite.utils.svg import animate, animate_transform, ref, sparkle_points, tag

RAINBOW = ("#FF6B6B", "#FECA57", "#55EFC4", "#48DBFB", "#A29BFE", "#FF6B6B")
GOLD = "#FFD700"
PALE_GOLD = "#FFEAA7"


@dataclass(frozen=True)
class GradeEffectBundle:
    defs: str = ""
    overlay: str = ""
    body_filter: Optional[str] = None
    body_overlay: str = ""


NO_EFFECT = GradeEffectBundle()


def _stops(*stops: Tuple[str, str], opacity: Optional[float] = None) -> str:
    return "".join(
        tag("stop", offset=offset, stop_color=color, stop_opacity=opacity)
        for offset, color in stops
    )


def _pulsing_stop(offset: str, color: str, values: str, dur: str = "3s") -> str:
    low = values.split(";")[0]
    return tag(
        "stop", animate("stop-opacity", values, dur),
        offset=offset, stop_color=color, stop_opacity=low,
    )


def _glow_filter(filter_id: str, blur: float, rgba: str) -> str:
    """Blurred color halo merged under the source graphic."""
    return tag(
        "filter",
        tag("feGaussianBlur", in_="SourceGraphic", stdDeviation=blur, result="blur"),
        tag("feColorMatrix", in_="blur", type="matrix", values=rgba, result="glow"),
        tag("feMerge", tag("feMergeNode", in_="glow"), tag("feMergeNode", in_="SourceGraphic")),
        id=filter_id, x="-30%", y="-30%", width="160%", height="160%",
    )


def _twinkle(cx: float, cy: float, r: float, fill: str, opacity: float, values: str, dur: str) -> str:
    return tag(
        "polygon", animate("opacity", values, dur),
        points=sparkle_points(cx, cy, r), fill=fill, opacity=opacity,
    )


def _flicker(cx: float, cy: float, r: float, fill: str, opacity: float, values: str, dur: str) -> str:
    return tag("circle", animate("opacity", values, dur), cx=cx, cy=cy, r=r, fill=fill, opacity=opacity)


def _icon_sparkles() -> str:
    return _twinkle(12, 18.5, 2.8, "white", 0.7, "0.7;0.2;0.7", "2s") + _twinkle(
        38, 20, 2, "white", 0.5, "0.2;0.7;0.2", "1.5s"
    )


def _icon_glow(uid: str) -> GradeEffectBundle:
    glow_id = f"iglow_{uid}"
    return GradeEffectBundle(
        defs=tag(
            "filter",
            tag("feGaussianBlur", in_="SourceGraphic", stdDeviation=2, result="blur"),
            tag(
                "feColorMatrix", in_="blur", type="matrix",
                values="1 0 0 0 0  0 1 0 0 0  0 0 1 0 0  0 0 0 0.3 0", result="glow",
            ),
            tag("feMerge", tag("feMergeNode", in_="glow"), tag("feMergeNode", in_="SourceGraphic")),
            id=glow_id, x="-20%", y="-20%", width="140%", height="140%",
        ),
        body_filter=glow_id,
    )


class GradeEffect(ABC):
    """Visual treatment of one grade."""

    grade: Grade

    @abstractmethod
    def bundle(self, colors: SlimeColors, uid: str, body_path: str) -> GradeEffectBundle:
        ...

    def icon_bundle(self, uid: str) -> GradeEffectBundle:
        return NO_EFFECT


class CommonEffect(GradeEffect):
    grade = Grade.COMMON

    def bundle(self, colors: SlimeColors, uid: str, body_path: str) -> GradeEffectBundle:
        return GradeEffectBundle(overlay=_twinkle(78, 28, 2.5, "white", 0.5, "0.5;0.15;0.5", "3.5s"))


class UncommonEffect(GradeEffect):
    """Mint aura around the body and two slowly spinning sparkles."""

    grade = Grade.UNCOMMON

    def bundle(self, colors: SlimeColors, uid: str, body_path: str) -> GradeEffectBundle:
        aura_id = f"aura_{uid}"
        spinners = (
            (76, 32, 3, 0.75, "0.75;0.3;0.75", "2.5s", "6s"),
            (22, 68, 2.5, 0.6, "0.3;0.7;0.3", "2s", "5s"),
        )
        overlay = "".join(
            tag(
                "g",
                tag(
                    "polygon",
                    animate("opacity", fade, fade_dur),
                    tag(
                        "animateTransform", attributeName="transform", type="rotate",
                        from_=0, to=360, dur=spin_dur, repeatCount="indefinite",
                    ),
                    points=sparkle_points(0, 0, r), fill="white", opacity=o,
                ),
                transform=f"translate({x},{y})",
            )
            for x, y, r, o, fade, fade_dur, spin_dur in spinners
        )
        return GradeEffectBundle(
            defs=_glow_filter(aura_id, 4, "0 0 0 0 0.33  0 0 0 0 0.94  0 0 0 0 0.77  0 0 0 0.35 0"),
            overlay=overlay,
            body_filter=aura_id,
        )


class RareEffect(GradeEffect):
    """Shimmer sweeping inside the body plus six twinkling stars."""

    grade = Grade.RARE

    def bundle(self, colors: SlimeColors, uid: str, body_path: str) -> GradeEffectBundle:
        clip_id = f"rareclip_{uid}"
        shimmer_id = f"rareshimmer_{uid}"
        defs = tag("clipPath", tag("path", d=body_path), id=clip_id) + tag(
            "linearGradient",
            _pulsing_stop("0%", colors.accent, "0;0.12;0"),
            _pulsing_stop("50%", colors.light, "0.06;0.18;0.06"),
            _pulsing_stop("100%", colors.accent, "0;0.12;0"),
            id=shimmer_id, x1="0%", y1="0%", x2="100%", y2="100%",
        )
        stars = (
            (24, 32, 4, "white", 0.8, "0.8;0.15;0.8", "2s"),
            (76, 36.5, 3.5, "white", 0.7, "0.2;0.8;0.2", "1.8s"),
            (68, 70.5, 2.5, "white", 0.65, "0.65;0.1;0.65", "2.2s"),
            (30, 67.5, 2.5, colors.accent, 0.6, "0.6;0.1;0.6", "1.6s"),
            (82, 54.5, 2.5, "white", 0.55, "0.55;0.1;0.55", "2.4s"),
            (18, 50.5, 2.5, colors.accent, 0.5, "0.1;0.6;0.1", "1.9s"),
        )
        overlay = tag(
            "rect", x=0, y=0, width=100, height=100, fill=ref(shimmer_id), clip_path=ref(clip_id)
        ) + tag("g", *(_twinkle(*star) for star in stars))
        return GradeEffectBundle(defs=defs, overlay=overlay)

    def icon_bundle(self, uid: str) -> GradeEffectBundle:
        return GradeEffectBundle(overlay=_icon_sparkles())


class EpicEffect(GradeEffect):
    """Violet halo, a rotating rainbow ring, a jeweled crown and four stars."""

    grade = Grade.EPIC

    def bundle(self, colors: SlimeColors, uid: str, body_path: str) -> GradeEffectBundle:
        rainbow_id = f"rainbow_{uid}"
        halo_id = f"halo_{uid}"
        defs = tag(
            "linearGradient",
            _stops(("0%", "#FF6B6B"), ("25%", "#FECA57"), ("50%", "#48DBFB"), ("75%", "#FF9FF3"), ("100%", "#FF6B6B")),
            id=rainbow_id, x1="0%", y1="0%", x2="100%", y2="0%",
        ) + _glow_filter(halo_id, 3, "0 0 0 0 0.64  0 0 0 0 0.6  0 0 0 0 1  0 0 0 0.35 0")
        ring = tag(
            "g",
            tag(
                "ellipse", animate("opacity", "0.45;0.2;0.45", "3s"),
                cx=50, cy=18, rx=18, ry=4.5, fill="none", stroke=ref(rainbow_id),
                stroke_width=1.5, opacity=0.45,
            ),
            tag(
                "animateTransform", attributeName="transform", type="rotate",
                from_="0 50 18", to="360 50 18", dur="12s", repeatCount="indefinite",
            ),
            transform_origin="50 18",
        )
        crown = (
            tag("polygon", points="40,16 42,8 46,14 50,5 54,14 58,8 60,16", fill=colors.accent, opacity=0.7)
            + tag("polygon", points="42,16 43,10 46,14 50,7 54,14 57,10 58,16", fill="white", opacity=0.25)
            + tag("circle", cx=50, cy=8, r=1.5, fill="#FF6B6B", opacity=0.6)
            + tag("circle", cx=44, cy=12, r=1, fill="#48DBFB", opacity=0.5)
            + tag("circle", cx=56, cy=12, r=1, fill="#55EFC4", opacity=0.5)
        )
        stars = "".join(
            _twinkle(*star)
            for star in (
                (24, 34.5, 4.5, "white", 0.7, "0.7;0.2;0.7", "2s"),
                (77, 39, 3, "white", 0.55, "0.3;0.7;0.3", "1.7s"),
                (20, 62.5, 2.5, colors.accent, 0.5, "0.5;0.1;0.5", "2.3s"),
                (80, 60.5, 2.5, colors.accent, 0.45, "0.15;0.55;0.15", "1.9s"),
            )
        )
        return GradeEffectBundle(defs=defs, overlay=ring + crown + stars, body_filter=halo_id)

    def icon_bundle(self, uid: str) -> GradeEffectBundle:
        return GradeEffectBundle(overlay=_icon_sparkles())


class LegendaryEffect(GradeEffect):
    """Gold glow, aura ring, gem crown, six gold motes and a pulsing body shimmer."""

    grade = Grade.LEGENDARY

    def bundle(self, colors: SlimeColors, uid: str, body_path: str) -> GradeEffectBundle:
        shimmer_id = f"shimmer_{uid}"
        glow_id = f"lglow_{uid}"
        gem_id = f"gem_{uid}"
        defs = (
            tag(
                "linearGradient",
                _pulsing_stop("0%", PALE_GOLD, "0;0.3;0"),
                _pulsing_stop("50%", GOLD, "0.15;0.4;0.15"),
                _pulsing_stop("100%", PALE_GOLD, "0;0.3;0"),
                id=shimmer_id, x1="0%", y1="0%", x2="100%", y2="100%",
            )
            + _glow_filter(glow_id, 5, "0 0 0 0 1  0 0 0 0 0.92  0 0 0 0 0.65  0 0 0 0.4 0")
            + tag(
                "radialGradient",
                _stops(("0%", "#FFF8DC"), ("50%", GOLD), ("100%", "#DAA520")),
                id=gem_id, cx="50%", cy="30%", r="50%",
            )
        )
        ring = tag(
            "ellipse", animate("opacity", "0.4;0.15;0.4", "3s"),
            cx=50, cy=16, rx=20, ry=5, fill="none", stroke=GOLD, stroke_width=1.8, opacity=0.4,
        )
        crown = (
            tag("polygon", points="40,14 42,4 46,12 50,2 54,12 58,4 60,14", fill=ref(gem_id), opacity=0.7)
            + tag("circle", cx=50, cy=6, r=2, fill="#FF6B6B", opacity=0.7)
            + tag("circle", cx=43, cy=8, r=1.5, fill="#48DBFB", opacity=0.6)
            + tag("circle", cx=57, cy=8, r=1.5, fill="#55EFC4", opacity=0.6)
        )
        motes = "".join(
            _flicker(*mote)
            for mote in (
                (18, 40, 2.5, GOLD, 0.6, "0.6;0.1;0.6", "1.5s"),
                (82, 35, 2.7, PALE_GOLD, 0.55, "0.2;0.7;0.2", "2s"),
                (74, 68, 2, GOLD, 0.45, "0.45;0;0.45", "1.8s"),
                (26, 72, 1.8, PALE_GOLD, 0.5, "0.5;0.1;0.5", "2.2s"),
                (14, 56, 2.3, GOLD, 0.4, "0.1;0.5;0.1", "1.6s"),
                (86, 55, 2, PALE_GOLD, 0.35, "0.35;0;0.35", "2.5s"),
            )
        )
        shimmer = tag(
            "g",
            tag("path", d=body_path, fill=ref(shimmer_id)),
            animate_transform("scale", "1.0;1.02;1.0", "2s"),
            transform_origin="50 55",
        )
        return GradeEffectBundle(
            defs=defs, overlay=ring + crown + motes, body_filter=glow_id, body_overlay=shimmer
        )

    def icon_bundle(self, uid: str) -> GradeEffectBundle:
        return _icon_glow(uid)


class MythicEffect(GradeEffect):
    """Hue-cycling glow, feather wings, horns, cosmic motes and a rainbow outline."""

    grade = Grade.MYTHIC

    def _wing(self, strokes: Sequence[str], colors: SlimeColors, wing_id: str) -> str:
        inner, outer, lower = strokes
        return tag(
            "g",
            tag(
                "path", animate("opacity", "0.65;0.3;0.65", "2s"),
                d=inner, fill="none", stroke=ref(wing_id), stroke_width=3, stroke_linecap="round",
            ),
            tag(
                "path", animate("opacity", "0.45;0.2;0.45", "2.2s"),
                d=outer, fill="none", stroke=colors.accent, stroke_width=2.2,
                opacity=0.45, stroke_linecap="round",
            ),
            tag(
                "path", animate("opacity", "0.4;0.18;0.4", "1.8s"),
                d=lower, fill="none", stroke=colors.light, stroke_width=2,
                opacity=0.4, stroke_linecap="round",
            ),
            opacity=0.65,
        )

    def bundle(self, colors: SlimeColors, uid: str, body_path: str) -> GradeEffectBundle:
        glow_id = f"mythic_{uid}"
        wing_id = f"wing_{uid}"
        outline_id = f"mythicOutline_{uid}"
        outline_hue_id = f"mythicOutlineHue_{uid}"
        defs = (
            tag(
                "filter",
                tag("feGaussianBlur", in_="SourceGraphic", stdDeviation=6, result="blur"),
                tag(
                    "feColorMatrix", animate("values", "0;360", "4s"),
                    in_="blur", type="hueRotate", values=0, result="glow",
                ),
                tag(
                    "feColorMatrix", in_="glow", type="matrix",
                    values="1 0 0 0 0  0 1 0 0 0  0 0 1 0 0  0 0 0 0.5 0", result="finalGlow",
                ),
                tag("feMerge", tag("feMergeNode", in_="finalGlow"), tag("feMergeNode", in_="SourceGraphic")),
                id=glow_id, x="-30%", y="-30%", width="160%", height="160%",
            )
            + tag(
                "linearGradient",
                tag("stop", offset="0%", stop_color=colors.light, stop_opacity=0.5),
                tag("stop", offset="100%", stop_color=colors.accent, stop_opacity=0.2),
                id=wing_id, x1="0%", y1="0%", x2="100%", y2="100%",
            )
            + tag(
                "linearGradient",
                _stops(*zip(("0%", "20%", "40%", "60%", "80%", "100%"), RAINBOW)),
                id=outline_id, x1="0%", y1="0%", x2="100%", y2="100%",
            )
            + tag(
                "filter",
                tag("feColorMatrix", animate("values", "0;360", "5s"), type="hueRotate", values=0),
                id=outline_hue_id,
            )
        )
        wings = self._wing(
            ("M18,48 Q6,38 10,22", "M16,44 Q4,32 6,18", "M20,52 Q10,44 14,30"), colors, wing_id
        ) + self._wing(
            ("M82,48 Q94,38 90,22", "M84,44 Q96,32 94,18", "M80,52 Q90,44 86,30"), colors, wing_id
        )
        ridge = lighten(colors.dark, 20)
        horns = (
            tag("path", d="M38,20 Q34,6 30,2 L36,14 Z", fill=colors.dark, opacity=0.7)
            + tag("path", d="M62,20 Q66,6 70,2 L64,14 Z", fill=colors.dark, opacity=0.7)
            + tag("path", d="M36,16 Q34,10 32,6", fill="none", stroke=ridge, stroke_width=0.8, opacity=0.4)
            + tag("path", d="M64,16 Q66,10 68,6", fill="none", stroke=ridge, stroke_width=0.8, opacity=0.4)
        )
        cosmic = "".join(
            _flicker(*mote)
            for mote in (
                (14, 50, 1.8, "#FF6B6B", 0.7, "0.7;0;0.7", "1.5s"),
                (86, 44, 2, "#74B9FF", 0.6, "0;0.8;0", "2s"),
                (20, 28, 1.5, "#55EFC4", 0.55, "0.55;0;0.55", "1.8s"),
                (80, 66, 1.3, PALE_GOLD, 0.6, "0.6;0.1;0.6", "1.3s"),
                (28, 74, 1.5, "#A29BFE", 0.5, "0;0.6;0", "2.2s"),
                (72, 18, 1.2, "#FD79A8", 0.45, "0.45;0;0.45", "1.6s"),
                (10, 64, 1, "#FECA57", 0.4, "0.1;0.5;0.1", "2.5s"),
                (90, 58, 1.2, "#FF6B6B", 0.35, "0.35;0;0.35", "1.9s"),
            )
        )
        outline = tag(
            "path", d=body_path, fill="none", stroke=ref(outline_id), stroke_width=2,
            opacity=0.4, filter=ref(outline_hue_id),
        )
        return GradeEffectBundle(
            defs=defs, overlay=wings + horns + cosmic + outline, body_filter=glow_id
        )

    def icon_bundle(self, uid: str) -> GradeEffectBundle:
        return _icon_glow(uid)


GRADE_EFFECTS: PMap[Grade, GradeEffect] = pmap(
    {
        effect.grade: effect
        for effect in (
            CommonEffect(),
            UncommonEffect(),
            RareEffect(),
            EpicEffect(),
            LegendaryEffect(),
            MythicEffect(),
        )
    }
)


def get_grade_effect(grade: Grade) -> GradeEffect:
    return GRADE_EFFECTS.get(grade, GRADE_EFFECTS[DEFAULT_GRADE])
