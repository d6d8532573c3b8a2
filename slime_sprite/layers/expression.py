"""Personality-driven face glyphs.

Eyes and mouths are authored once, in a local face space centered near
``(50, 48)`` and sized for the ``round`` silhouette. :func:`face_transform`
moves and scales a glyph group onto any other silhouette using its
:class:`~slime_sprite.shapes.ShapeLayout`.

Every eye glyph stacks sclera, iris, pupil and specular highlights; most
styles add a lighter iris ring and a personality-specific decoration.
"""

from typing import Callable, Dict, Tuple

from slime_sprite.document import Fragment
from slime_sprite.shapes import FACE_CENTER_X, FACE_EYE_Y, ShapeLayout
from slime_sprite.types import DEFAULT_PERSONALITY, Personality
from slime_sprite.utils.color import lighten
from slime_sprite.utils.svg import animate, fmt, ref, tag

PUPIL = "#1A1A2E"
INK = "#2D3436"
MOUTH_FILL = "#C83C28"
TONGUE = "#FF8888"

Point = Tuple[float, float]
# Left-eye and right-eye markup, kept apart so each can follow the eye spacing.
Side = Tuple[str, str]
EyeFn = Callable[[str], Side]


def face_transform(layout: ShapeLayout, offset_y: float) -> str:
    """``transform`` placing a face glyph group on a silhouette.

    The group is shifted vertically by ``offset_y`` and scaled about the face
    anchor, so the face stays centered on ``x = 50`` at any scale.
    """
    s = layout.face_scale
    dx = FACE_CENTER_X * (1 - s)
    dy = offset_y + FACE_EYE_Y * (1 - s)
    return f"translate({fmt(dx)},{fmt(dy)}) scale({fmt(s)})"


def _pair(shape: str, left: Point, right: Point, **attrs) -> Side:
    """Same glyph at two centers (``cx``/``cy``)."""
    return (
        tag(shape, cx=left[0], cy=left[1], **attrs),
        tag(shape, cx=right[0], cy=right[1], **attrs),
    )


def _sides(*parts: Side) -> Side:
    return "".join(p[0] for p in parts), "".join(p[1] for p in parts)


def spread_eyes(sides: Side, spread: float) -> str:
    """Join both eyes, pushing each ``spread`` units away from the center."""
    left, right = sides
    if not spread:
        return left + right
    return tag("g", left, transform=f"translate({fmt(-spread)},0)") + tag(
        "g", right, transform=f"translate({fmt(spread)},0)"
    )


def _star_pupil(cx: float) -> str:
    offsets = (
        (0, -5.5), (1.8, -1.5), (5.5, -0.8), (2.2, 1.8), (2.8, 5.5),
        (0, 3), (-2.8, 5.5), (-2.2, 1.8), (-5.5, -0.8), (-1.8, -1.5),
    )
    points = " ".join(f"{fmt(cx + dx)},{fmt(49 + dy)}" for dx, dy in offsets)
    return tag("path", d=f"M{points.replace(' ', ' L')} Z", fill=PUPIL)


def _energetic_eyes(iris: str) -> Side:
    return _sides(
        _pair("ellipse", (37, 48), (63, 48), rx=10.5, ry=11, fill="white"),
        _pair("ellipse", (38, 49), (64, 49), rx=7.5, ry=8, fill=iris),
        _pair("ellipse", (38, 49), (64, 49), rx=5.5, ry=6, fill=lighten(iris, 15)),
        _pair("ellipse", (38, 49), (64, 49), rx=3.5, ry=4, fill=PUPIL),
        _pair("circle", (41, 45), (67, 45), r=3.8, fill="white", opacity=0.92),
        _pair("circle", (35, 52), (61, 52), r=2, fill="white", opacity=0.6),
        _pair("circle", (43, 47), (69, 47), r=1, fill="white", opacity=0.95),
        (
            "",
            tag(
                "text", "!", x=74, y=38, font_size=8, font_weight="bold",
                fill="#FF6B6B", opacity=0.75, font_family="sans-serif",
            ),
        ),
    )


def _chill_eyes(iris: str) -> Side:
    lid = dict(fill="none", stroke=INK, stroke_width=1.8, stroke_linecap="round")
    return _sides(
        _pair("ellipse", (37, 50), (63, 50), rx=9.5, ry=5, fill="white"),
        _pair("ellipse", (37, 51), (63, 51), rx=7, ry=3.5, fill=iris),
        _pair("ellipse", (37, 51), (63, 51), rx=4, ry=2.2, fill=PUPIL),
        (tag("path", d="M29,48 Q37,45 45,48", **lid), tag("path", d="M55,48 Q63,45 71,48", **lid)),
        _pair("circle", (40, 49), (66, 49), r=1.5, fill="white", opacity=0.7),
    )


def _foodie_eyes(iris: str) -> Side:
    return _sides(
        _pair("ellipse", (37, 48), (63, 48), rx=10, ry=10.5, fill="white"),
        _pair("ellipse", (37, 49), (63, 49), rx=7.5, ry=8, fill=iris),
        (_star_pupil(37), _star_pupil(63)),
        _pair("circle", (40, 45), (66, 45), r=3, fill="white", opacity=0.85),
        _pair("circle", (34, 51), (60, 51), r=1.2, fill="white", opacity=0.5),
        # drool
        (tag("ellipse", cx=44, cy=56, rx=1, ry=2, fill="white", opacity=0.35), ""),
    )


def _curious_eyes(iris: str) -> Side:
    ring = lighten(iris, 12)
    # left eye is bigger
    return _sides(
        (
            tag("ellipse", cx=36, cy=48, rx=12.5, ry=13, fill="white"),
            tag("ellipse", cx=64, cy=48, rx=8.5, ry=9.5, fill="white"),
        ),
        (
            tag("ellipse", cx=37, cy=49, rx=8.5, ry=9, fill=iris),
            tag("ellipse", cx=65, cy=49, rx=6.5, ry=7, fill=iris),
        ),
        (
            tag("ellipse", cx=37, cy=49, rx=6, ry=6.5, fill=ring),
            tag("ellipse", cx=65, cy=49, rx=4.5, ry=5, fill=ring),
        ),
        (
            tag("ellipse", cx=37, cy=49, rx=4, ry=4.5, fill=PUPIL),
            tag("ellipse", cx=65, cy=49, rx=3, ry=3.5, fill=PUPIL),
        ),
        (
            tag("circle", cx=40, cy=45, r=4.2, fill="white", opacity=0.9),
            tag("circle", cx=68, cy=45, r=3.2, fill="white", opacity=0.9),
        ),
        (
            tag("circle", cx=34, cy=53, r=1.8, fill="white", opacity=0.5)
            + tag("circle", cx=42, cy=47, r=0.9, fill="white", opacity=0.7),
            tag("circle", cx=63, cy=52, r=1.3, fill="white", opacity=0.5),
        ),
    )


def _tsundere_eyes(iris: str) -> Side:
    brow = dict(stroke=INK, stroke_width=3.2, stroke_linecap="round")
    return _sides(
        (
            tag("line", x1=27, y1=38, x2=44, y2=41, **brow),
            tag("line", x1=56, y1=41, x2=73, y2=38, **brow),
        ),
        _pair("ellipse", (37, 49), (63, 49), rx=10, ry=10, fill="white"),
        _pair("ellipse", (38, 50), (64, 50), rx=7, ry=7.5, fill=iris),
        _pair("ellipse", (38, 50), (64, 50), rx=4, ry=4.2, fill=PUPIL),
        _pair("circle", (41, 46), (67, 46), r=3.2, fill="white", opacity=0.88),
        _pair("circle", (35, 53), (61, 53), r=1.5, fill="white", opacity=0.5),
    )


def _gentle_eyes(iris: str) -> Side:
    return _sides(
        _pair("ellipse", (37, 48), (63, 48), rx=10.5, ry=11, fill="white"),
        _pair("ellipse", (38, 49), (64, 49), rx=7.5, ry=8, fill=iris),
        _pair("ellipse", (38, 49), (64, 49), rx=5.5, ry=6, fill=lighten(iris, 12)),
        _pair("ellipse", (38, 49), (64, 49), rx=3.5, ry=4, fill=PUPIL),
        _pair("circle", (41, 45), (67, 45), r=3.8, fill="white", opacity=0.9),
        _pair("circle", (35, 52), (61, 52), r=1.8, fill="white", opacity=0.45),
        _pair("circle", (43, 48), (69, 48), r=0.8, fill="white", opacity=0.7),
        _pair("circle", (40, 47), (66, 47), r=0.6, fill="white", opacity=0.8),
        _pair("circle", (36, 46), (62, 46), r=0.5, fill="white", opacity=0.6),
    )


EYES: Dict[Personality, EyeFn] = {
    Personality.ENERGETIC: _energetic_eyes,
    Personality.CHILL: _chill_eyes,
    Personality.FOODIE: _foodie_eyes,
    Personality.CURIOUS: _curious_eyes,
    Personality.TSUNDERE: _tsundere_eyes,
    Personality.GENTLE: _gentle_eyes,
}

MOUTHS: Dict[Personality, str] = {
    # D-shaped grin with tongue
    Personality.ENERGETIC: tag(
        "path", d="M36,60 Q50,73 64,60", fill=MOUTH_FILL, stroke=INK, stroke_width=1.8
    )
    + tag(
        "path", d="M36,60 Q50,65 64,60", fill="none", stroke=INK,
        stroke_width=1.8, stroke_linecap="round",
    )
    + tag("ellipse", cx=50, cy=67, rx=5, ry=3, fill=TONGUE, opacity=0.8),
    Personality.CHILL: tag(
        "path", d="M41,61 Q45,64 50,62 Q55,64 59,61", fill="none", stroke=INK,
        stroke_width=2, stroke_linecap="round",
    ),
    Personality.FOODIE: tag(
        "path", d="M36,60 Q50,76 64,60", fill=MOUTH_FILL, stroke=INK, stroke_width=1.8
    )
    + tag("ellipse", cx=50, cy=67, rx=7, ry=3.5, fill=TONGUE)
    + tag("ellipse", cx=58, cy=62, rx=1.5, ry=3.5, fill="white", opacity=0.25),
    Personality.CURIOUS: tag(
        "ellipse", cx=50, cy=62, rx=5.5, ry=6, fill=MOUTH_FILL, stroke=INK, stroke_width=1.5
    )
    + tag("ellipse", cx=50, cy=61, rx=3, ry=2.5, fill="white", opacity=0.2),
    # omega cat mouth
    Personality.TSUNDERE: tag(
        "path", d="M42,62 Q46,58 50,62 Q54,58 58,62", fill="none", stroke=INK,
        stroke_width=2.2, stroke_linecap="round",
    ),
    Personality.GENTLE: tag(
        "path", d="M40,60 Q50,67 60,60", fill="none", stroke=INK,
        stroke_width=2.2, stroke_linecap="round",
    ),
}


def eyes_svg(personality: Personality, iris: str, spread: float = 0.0) -> str:
    return spread_eyes(EYES.get(personality, EYES[DEFAULT_PERSONALITY])(iris), spread)


def mouth_svg(personality: Personality) -> str:
    return MOUTHS.get(personality, MOUTHS[DEFAULT_PERSONALITY])


def blink_svg(body_color: str, spread: float = 0.0) -> str:
    """Body-colored lids that flash over the eyes once per cycle."""
    blink = animate("opacity", "0;0;0;0.95;0;0;0", "4.5s")
    left, right = (
        tag("rect", blink, x=x, y=42, width=22, height=14, fill=body_color, opacity=0, rx=4)
        for x in (27, 53)
    )
    return spread_eyes((left, right), spread)


def blush_fragment(personality: Personality, blush: str, uid: str) -> Fragment:
    """Blurred cheek blush; tsundere blushes larger and stronger."""
    filter_id = f"blr_{uid}"
    if personality == Personality.TSUNDERE:
        blur, centers, rx, ry, opacity = 1.5, ((24, 56), (76, 56)), 8.5, 5, 0.65
    else:
        blur, centers, rx, ry, opacity = 1.2, ((25, 56), (75, 56)), 7, 4, 0.35
    cheeks = "".join(
        tag(
            "ellipse", cx=cx, cy=cy, rx=rx, ry=ry, fill=blush,
            opacity=opacity, filter=ref(filter_id),
        )
        for cx, cy in centers
    )
    return Fragment(
        defs=tag("filter", tag("feGaussianBlur", stdDeviation=blur), id=filter_id),
        markup=cheeks,
    )


def face_group(layout: ShapeLayout, offset_y: float, content: str) -> str:
    return tag("g", content, transform=face_transform(layout, offset_y))


# Icon face: one fixed friendly expression at 50-unit scale.


def icon_eyes_svg(iris: str) -> str:
    return "".join(
        left + right
        for left, right in (
            _pair("ellipse", (20, 28), (30, 28), rx=4.5, ry=5, fill="white"),
            _pair("ellipse", (20.5, 29), (30.5, 29), rx=3.2, ry=3.5, fill=iris),
            _pair("ellipse", (20.5, 29), (30.5, 29), rx=2, ry=2.2, fill=PUPIL),
            _pair("circle", (22, 27), (32, 27), r=1.5, fill="white", opacity=0.9),
        )
    )


ICON_MOUTH = tag(
    "path", d="M22,35 Q25,38 28,35", fill="none", stroke=INK,
    stroke_width=1, stroke_linecap="round",
)


def icon_blush_svg(blush: str) -> str:
    return "".join(_pair("ellipse", (15, 33), (35, 33), rx=3.5, ry=2, fill=blush, opacity=0.3))
