"""Element decorations and ambient particles.

Each element gets a static glyph cluster near the upper body and a looping
particle overlay. Particles live in the side margins and the top band of the
canvas so they never cover the face.
"""

from typing import Callable, Dict

from slime_sprite.document import Fragment
from slime_sprite.palette import SlimeColors
from slime_sprite.types import DEFAULT_ELEMENT, Element
from slime_sprite.utils.color import darken, lighten
from slime_sprite.utils.svg import animate, ref, rotate_forever, sparkle_points, tag

DecorFn = Callable[[SlimeColors], str]
ParticleFn = Callable[[SlimeColors, str], Fragment]

LEAF = "#30D070"
LEAF_VEIN = "#22AA50"


def _spin(cx: float, cy: float, dur: str, content: str) -> str:
    return tag("g", content, rotate_forever(cx, cy, dur), transform_origin=f"{cx} {cy}")


# Static decorations.


def _fire_decor(c: SlimeColors) -> str:
    inner = lighten(c.accent, 15)
    return "".join(
        tag("path", d=d, fill=fill, opacity=o)
        for d, fill, o in (
            ("M42,20 Q38,10 42,2 Q44,12 48,6 Q46,14 50,18", c.accent, 0.9),
            ("M50,18 Q52,8 56,2 Q54,12 58,6 Q56,14 58,20", c.accent, 0.85),
            ("M42,22 Q40,14 43,6 Q44,14 48,10 Q46,16 50,20", inner, 0.6),
            ("M50,20 Q52,12 55,6 Q54,14 57,10 Q56,16 58,22", inner, 0.55),
        )
    )


def _water_decor(c: SlimeColors) -> str:
    return (
        tag("ellipse", cx=70, cy=30, rx=5, ry=6.5, fill=c.accent, opacity=0.7)
        + tag("ellipse", cx=69, cy=28, rx=2.5, ry=3, fill="white", opacity=0.45)
        + tag("circle", cx=77, cy=42, r=3, fill=c.accent, opacity=0.55)
        + tag("circle", cx=76, cy=41, r=1.2, fill="white", opacity=0.35)
        + tag("circle", cx=26, cy=36, r=2, fill=c.accent, opacity=0.4)
        + tag("circle", cx=25.5, cy=35.5, r=0.8, fill="white", opacity=0.3)
    )


def _grass_decor(c: SlimeColors) -> str:
    return (
        tag("path", d="M62,22 Q74,14 70,4 Q66,16 58,12 Q62,20 62,22", fill=LEAF, opacity=0.85)
        + tag("path", d="M65,20 Q68,14 68,8", fill="none", stroke=LEAF_VEIN, stroke_width=1, opacity=0.7)
        + tag("path", d="M65,16 Q67,14 66,12", fill="none", stroke=LEAF_VEIN, stroke_width=0.7, opacity=0.5)
        + tag(
            "path", d="M34,76 Q28,72 30,66", fill="none", stroke=LEAF,
            stroke_width=1.5, stroke_linecap="round", opacity=0.5,
        )
        + tag("circle", cx=34, cy=76, r=2, fill=LEAF, opacity=0.6)
    )


def _light_decor(c: SlimeColors) -> str:
    return (
        tag("polygon", points="70,16 72,24 80,26 72,28 70,36 68,28 60,26 68,24", fill=c.accent, opacity=0.85)
        + tag("polygon", points="70,20 71,24 75,26 71,28 70,32 69,28 65,26 69,24", fill="white", opacity=0.55)
        + tag("circle", cx=30, cy=28, r=2, fill=c.accent, opacity=0.4)
        + tag("circle", cx=28, cy=32, r=1, fill=c.accent, opacity=0.3)
    )


def _dark_decor(c: SlimeColors) -> str:
    # crescent: accent disc partially covered by a body-colored disc
    return (
        tag("circle", cx=70, cy=22, r=7, fill=c.accent, opacity=0.75)
        + tag("circle", cx=73, cy=19, r=6, fill=c.body)
        + tag("circle", cx=30, cy=30, r=2, fill=c.accent, opacity=0.3)
        + tag("circle", cx=27, cy=70, r=1.5, fill=c.accent, opacity=0.25)
        + tag("circle", cx=74, cy=66, r=1.2, fill=c.accent, opacity=0.2)
    )


def _ice_decor(c: SlimeColors) -> str:
    crystal = (
        tag(
            "polygon", points="0,-8 7,-4 7,4 0,8 -7,4 -7,-4", fill=c.accent, opacity=0.7,
            stroke=darken(c.accent, 10), stroke_width=0.6,
        )
        + tag("line", x1=-5, y1=-2, x2=5, y2=2, stroke="white", stroke_width=0.5, opacity=0.4)
        + tag("line", x1=-3, y1=3, x2=3, y2=-3, stroke="white", stroke_width=0.5, opacity=0.3)
        + tag("circle", cx=0, cy=0, r=2, fill="white", opacity=0.5)
    )
    return tag("g", crystal, opacity=0.85, transform="translate(72,20)") + tag(
        "polygon", points="28,30 31,24 34,32", fill=c.accent, opacity=0.4
    )


def _electric_decor(c: SlimeColors) -> str:
    return (
        tag("polygon", points="70,12 64,24 70,24 62,38 74,22 68,22 74,12", fill=c.accent, opacity=0.9)
        + tag("polygon", points="70,14 66,24 70,24 64,34 72,23 68,23 72,14", fill="white", opacity=0.45)
        + tag("circle", cx=68, cy=25, r=2, fill="white", opacity=0.3)
        + tag("circle", cx=28, cy=28, r=1.8, fill=c.accent, opacity=0.3)
    )


def _poison_decor(c: SlimeColors) -> str:
    bubbles = "".join(
        tag("circle", cx=x, cy=y, r=r, fill=c.accent, opacity=o)
        + tag("circle", cx=hx, cy=hy, r=hr, fill="white", opacity=ho)
        for (x, y, r, o), (hx, hy, hr, ho) in (
            ((72, 24, 6, 0.65), (70, 22, 2.5, 0.35)),
            ((78, 36, 3.5, 0.5), (77, 35, 1.5, 0.25)),
            ((27, 32, 3, 0.4), (26, 31, 1.2, 0.2)),
        )
    )
    return bubbles + tag("ellipse", cx=76, cy=44, rx=1, ry=2, fill=c.accent, opacity=0.35)


def _earth_decor(c: SlimeColors) -> str:
    return (
        tag("polygon", points="68,16 76,20 74,28 66,26 64,20", fill=c.dark, opacity=0.7)
        + tag("polygon", points="70,18 74,20 73,26 68,24 66,20", fill=c.accent, opacity=0.4)
        + tag("polygon", points="70,17 72,19 71,20 69,19", fill="white", opacity=0.2)
        + tag(
            "polygon", points="28,66 34,68 32,74 26,72", fill=c.dark, opacity=0.35,
            transform="rotate(-10 30 70)",
        )
        + tag("circle", cx=24, cy=34, r=2, fill=c.dark, opacity=0.25)
    )


def _wind_decor(c: SlimeColors) -> str:
    return "".join(
        tag(
            "path", d=d, fill="none", stroke=c.dark, stroke_width=w,
            opacity=o, stroke_linecap="round",
        )
        for d, w, o in (
            ("M62,18 Q74,14 78,22 Q80,30 72,28", 1.8, 0.5),
            ("M26,28 Q18,26 20,34 Q22,38 26,36", 1.4, 0.4),
            ("M74,38 Q82,34 80,42", 1.2, 0.3),
        )
    ) + tag("circle", cx=76, cy=18, r=1, fill=c.dark, opacity=0.3)


def _celestial_decor(c: SlimeColors) -> str:
    return (
        tag(
            "polygon",
            points="72,16 73.5,21 78,22 74,24.5 75,29 72,26.5 69,29 70,24.5 66,22 70.5,21",
            fill=c.accent,
            opacity=0.85,
        )
        + tag(
            "polygon",
            points="72,19 73,21 75,22 73,23.5 73.5,26 72,25 70.5,26 71,23.5 69,22 71,21",
            fill="white",
            opacity=0.45,
        )
        + "".join(
            tag("circle", cx=x, cy=y, r=r, fill=c.accent, opacity=o)
            for x, y, r, o in ((28, 24, 2, 0.5), (25, 30, 1.2, 0.35), (78, 44, 1.5, 0.4), (80, 50, 0.8, 0.25))
        )
    )


DECORATIONS: Dict[Element, DecorFn] = {
    Element.FIRE: _fire_decor,
    Element.WATER: _water_decor,
    Element.GRASS: _grass_decor,
    Element.LIGHT: _light_decor,
    Element.DARK: _dark_decor,
    Element.ICE: _ice_decor,
    Element.ELECTRIC: _electric_decor,
    Element.POISON: _poison_decor,
    Element.EARTH: _earth_decor,
    Element.WIND: _wind_decor,
    Element.CELESTIAL: _celestial_decor,
}


# Particles.


def _fire_particles(c: SlimeColors, uid: str) -> Fragment:
    embers = (
        (22, 30, 1.8, "#FF6633", 0.7, 8, "2s", 0.15),
        (78, 26, 1.4, "#FF8844", 0.6, 8, "2.4s", 0.1),
        (30, 70, 1.2, "#FFAA44", 0.5, 8, "1.8s", 0.1),
        (70, 74, 1.5, "#FF7733", 0.55, 8, "2.2s", 0.1),
        (50, 14, 1, "#FFCC44", 0.45, 6, "1.6s", 0.05),
    )
    return Fragment(
        markup=tag(
            "g",
            *(
                tag(
                    "circle",
                    animate("cy", f"{y};{y - rise};{y}", dur),
                    animate("opacity", f"{o};{low};{o}", dur),
                    cx=x, cy=y, r=r, fill=fill, opacity=o,
                )
                for x, y, r, fill, o, rise, dur, low in embers
            ),
        )
    )


def _water_particles(c: SlimeColors, uid: str) -> Fragment:
    # (cx, cy, rx, ry, opacity, swollen rx, swollen ry, period)
    drops = (
        (20, 34, 1.5, 2.2, 0.5, 2, 3, "2s"),
        (80, 42, 1.2, 1.8, 0.45, 1.7, 2.6, "2.3s"),
        (28, 72, 1, 1.5, 0.4, 1.4, 2.2, "1.8s"),
        (74, 68, 1.3, 2, 0.35, 1.8, 2.8, "2.5s"),
    )
    return Fragment(
        markup=tag(
            "g",
            *(
                tag(
                    "ellipse",
                    animate("ry", f"{ry};{big_ry};{ry}", dur),
                    animate("rx", f"{rx};{big_rx};{rx}", dur),
                    cx=x, cy=y, rx=rx, ry=ry, fill=c.accent, opacity=o,
                )
                for x, y, rx, ry, o, big_rx, big_ry, dur in drops
            ),
        )
    )


def _grass_particles(c: SlimeColors, uid: str) -> Fragment:
    leaves = ((18, 28, "#44DD77", 0.5, "5s"), (82, 36, "#33CC66", 0.4, "6s"), (26, 74, "#55EE88", 0.35, "4.5s"))
    return Fragment(
        markup=tag(
            "g",
            *(
                _spin(
                    x, y, dur,
                    tag(
                        "path",
                        d=f"M{x - 2},{y} Q{x},{y - 4} {x + 2},{y} Q{x},{y + 4} {x - 2},{y}",
                        fill=fill,
                        opacity=o,
                    ),
                )
                for x, y, fill, o, dur in leaves
            ),
        )
    )


def _ice_particles(c: SlimeColors, uid: str) -> Fragment:
    flakes = (
        (18, 30, 6, c.accent, 0.5, "6s"),
        (82, 26, 5, "white", 0.45, "5s"),
        (24, 70, 4, c.accent, 0.35, "6s"),
        (76, 66, 5, "white", 0.3, "5.5s"),
    )
    return Fragment(
        markup=tag(
            "g",
            *(
                _spin(
                    x, y, dur,
                    tag(
                        "text", "*", x=x, y=y, font_size=size, fill=fill,
                        text_anchor="middle", opacity=o, font_family="sans-serif",
                    ),
                )
                for x, y, size, fill, o, dur in flakes
            ),
        )
    )


def _electric_particles(c: SlimeColors, uid: str) -> Fragment:
    sparks = (
        ("M16,36 L18,32 L17,35 L20,30", "#FFE040", 1.2, 0.6, "0.6;0;0.6;0;0.6", "1.5s"),
        ("M82,44 L84,40 L83,43 L86,38", "#FFCC20", 1, 0.5, "0;0.5;0;0.5;0", "1.8s"),
        ("M24,72 L26,68 L25,71 L28,66", "#FFD830", 1.1, 0.45, "0.45;0;0.45;0;0.45", "1.6s"),
    )
    return Fragment(
        markup=tag(
            "g",
            *(
                tag(
                    "path", animate("opacity", values, dur), d=d, fill="none", stroke=stroke,
                    stroke_width=w, opacity=o, stroke_linecap="round",
                )
                for d, stroke, w, o, values, dur in sparks
            ),
        )
    )


def _dark_particles(c: SlimeColors, uid: str) -> Fragment:
    blur_id = f"ep_{uid}_blur"
    wisps = (
        (18, 40, 3, 1.5, 0.4, 0.1, -3, "2.5s"),
        (82, 50, 2.5, 1.2, 0.35, 0.05, 3, "2s"),
        (22, 70, 2, 1, 0.3, 0.05, -3, "3s"),
        (78, 72, 2.5, 1.3, 0.25, 0, 3, "2.2s"),
    )
    return Fragment(
        defs=tag("filter", tag("feGaussianBlur", stdDeviation=1.5), id=blur_id),
        markup=tag(
            "g",
            *(
                tag(
                    "ellipse",
                    animate("opacity", f"{o};{low};{o}", dur),
                    animate("cx", f"{x};{x + drift};{x}", dur),
                    cx=x, cy=y, rx=rx, ry=ry, fill=c.dark, opacity=o, filter=ref(blur_id),
                )
                for x, y, rx, ry, o, low, drift, dur in wisps
            ),
        ),
    )


def _poison_particles(c: SlimeColors, uid: str) -> Fragment:
    bubbles = (
        (20, 60, 2, 1.2, 0.4, 0.1, "3s"),
        (80, 56, 1.5, 0.8, 0.35, 0.05, "2.5s"),
        (30, 74, 1.8, 1, 0.3, 0.05, "3.5s"),
    )
    return Fragment(
        markup=tag(
            "g",
            *(
                tag(
                    "circle",
                    animate("cy", f"{y};{y - 12};{y}", dur),
                    animate("r", f"{r};{r_low};{r}", dur),
                    animate("opacity", f"{o};{low};{o}", dur),
                    cx=x, cy=y, r=r, fill=c.accent, opacity=o,
                )
                for x, y, r, r_low, o, low, dur in bubbles
            ),
        )
    )


def _earth_particles(c: SlimeColors, uid: str) -> Fragment:
    rocks = (
        ("16,44 19,40 22,43 20,46", 0.35, 0.15, "3s"),
        ("80,50 83,47 85,51 82,53", 0.3, 0.1, "2.5s"),
        ("24,76 27,73 29,77 26,79", 0.25, 0.08, "3.5s"),
    )
    return Fragment(
        markup=tag(
            "g",
            *(
                tag(
                    "polygon", animate("opacity", f"{o};{low};{o}", dur),
                    points=points, fill=c.dark, opacity=o,
                )
                for points, o, low, dur in rocks
            ),
        )
    )


def _wind_particles(c: SlimeColors, uid: str) -> Fragment:
    gusts = (
        ("M14,38 Q10,36 8,40 Q6,44 10,42", 1, 0.35, "0.35;0.1;0.35", "2s"),
        ("M86,32 Q90,30 92,34 Q94,38 90,36", 0.8, 0.3, "0.3;0.05;0.3", "2.5s"),
        ("M12,62 Q8,60 6,64 Q4,68 8,66", 0.9, 0.25, "0.25;0.05;0.25", "1.8s"),
        ("M88,58 Q92,56 94,60 Q96,64 92,62", 1, 0.3, "0.1;0.35;0.1", "2.2s"),
    )
    return Fragment(
        markup=tag(
            "g",
            *(
                tag(
                    "path", animate("opacity", values, dur), d=d, fill="none", stroke=c.dark,
                    stroke_width=w, opacity=o, stroke_linecap="round",
                )
                for d, w, o, values, dur in gusts
            ),
        )
    )


def _light_particles(c: SlimeColors, uid: str) -> Fragment:
    motes = (
        (18, 32, 1.5, "#FFD700", 0.6, "0.6;0.1;0.6", "1.5;2;1.5", "1.5s"),
        (82, 28, 1.2, "#FFEC8B", 0.5, "0.5;0.05;0.5", "1.2;1.8;1.2", "2s"),
        (22, 70, 1, "#FFD700", 0.4, "0.4;0;0.4", "1;1.5;1", "1.8s"),
        (78, 66, 1.3, "#FFEC8B", 0.45, "0.1;0.5;0.1", "1.3;1.8;1.3", "2.2s"),
    )
    return Fragment(
        markup=tag(
            "g",
            *(
                tag(
                    "circle",
                    animate("opacity", fade, dur),
                    animate("r", pulse, dur),
                    cx=x, cy=y, r=r, fill=fill, opacity=o,
                )
                for x, y, r, fill, o, fade, pulse, dur in motes
            ),
        )
    )


def _celestial_particles(c: SlimeColors, uid: str) -> Fragment:
    hue_id = f"ep_{uid}_hue"
    dust = (
        (18, 33, "#FF80B0", 0.55, "0.55;0.15;0.55", "2s"),
        (82, 28.5, "#FFC0D8", 0.45, "0.2;0.55;0.2", "1.8s"),
        (22, 74.5, "#FFE0F0", 0.4, "0.4;0.1;0.4", "2.5s"),
        (78, 70.5, "#FF80B0", 0.35, "0.1;0.4;0.1", "2.2s"),
    )
    hue_filter = tag(
        "filter",
        tag("feColorMatrix", animate("values", "0;360", "6s"), type="hueRotate", values=0),
        id=hue_id,
    )
    return Fragment(
        defs=hue_filter,
        markup=tag(
            "g",
            *(
                tag(
                    "polygon", animate("opacity", values, dur),
                    points=sparkle_points(x, y, 3), fill=fill, opacity=o,
                )
                for x, y, fill, o, values, dur in dust
            ),
            filter=ref(hue_id),
        ),
    )


PARTICLES: Dict[Element, ParticleFn] = {
    Element.FIRE: _fire_particles,
    Element.WATER: _water_particles,
    Element.GRASS: _grass_particles,
    Element.ICE: _ice_particles,
    Element.ELECTRIC: _electric_particles,
    Element.DARK: _dark_particles,
    Element.POISON: _poison_particles,
    Element.EARTH: _earth_particles,
    Element.WIND: _wind_particles,
    Element.LIGHT: _light_particles,
    Element.CELESTIAL: _celestial_particles,
}


def decor_svg(element: Element, colors: SlimeColors) -> str:
    return DECORATIONS.get(element, DECORATIONS[DEFAULT_ELEMENT])(colors)


def particles_fragment(element: Element, colors: SlimeColors, uid: str) -> Fragment:
    return PARTICLES.get(element, PARTICLES[DEFAULT_ELEMENT])(colors, uid)
