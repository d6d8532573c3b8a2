"""Small body markings on the lower right of the silhouette."""

from slime_sprite.palette import SlimeColors
from slime_sprite.types import MarkingType
from slime_sprite.utils.color import darken, lighten
from slime_sprite.utils.svg import tag


def _cross(x1, y1, x2, y2, color: str, width: float, opacity: float) -> str:
    common = dict(stroke=color, stroke_width=width, opacity=opacity, stroke_linecap="round")
    return tag("line", x1=x1, y1=y1, x2=x2, y2=y2, **common) + tag(
        "line", x1=x2, y1=y1, x2=x1, y2=y2, **common
    )


def marking_svg(marking: MarkingType, colors: SlimeColors) -> str:
    """Marking in the 100-unit full sprite space."""
    mark = darken(colors.body, 15)
    if marking == MarkingType.STAR_MARK:
        return tag(
            "polygon",
            points="72,58 73.5,62 77,63 74,65 75,69 72,67 69,69 70,65 67,63 70.5,62",
            fill=mark,
            opacity=0.35,
        )
    if marking == MarkingType.HEART:
        return tag(
            "path",
            d="M70,56 Q72,52 75,54 Q78,56 75,60 L72,64 L69,60 Q66,56 69,54 Q72,52 70,56",
            fill=mark,
            opacity=0.3,
        )
    if marking == MarkingType.SCAR:
        return tag(
            "line", x1=66, y1=36, x2=74, y2=44, stroke=mark, stroke_width=1.5,
            opacity=0.4, stroke_linecap="round",
        ) + tag(
            "line", x1=68, y1=44, x2=72, y2=36, stroke=mark, stroke_width=1,
            opacity=0.3, stroke_linecap="round",
        )
    if marking == MarkingType.PATCH:
        return tag("ellipse", cx=70, cy=60, rx=8, ry=7, fill=lighten(colors.body, 18), opacity=0.35)
    if marking == MarkingType.DIAMOND_MARK:
        return tag("polygon", points="72,54 76,60 72,66 68,60", fill=mark, opacity=0.3)
    if marking == MarkingType.CROSS:
        return _cross(68, 56, 76, 64, mark, 1.8, 0.3)
    return ""


def icon_marking_svg(marking: MarkingType, colors: SlimeColors) -> str:
    """Marking in the 50-unit icon space."""
    mark = darken(colors.body, 15)
    if marking == MarkingType.STAR_MARK:
        return tag(
            "polygon",
            points="36,29 36.7,31 39,31.5 37,32.5 37.5,35 36,33.5 34.5,35 35,32.5 33,31.5 35.3,31",
            fill=mark,
            opacity=0.3,
        )
    if marking == MarkingType.HEART:
        return tag(
            "path",
            d="M35,28 Q36,26 37.5,27 Q39,28 37.5,30 L36,32 L34.5,30 Q33,28 34.5,27 Q36,26 35,28",
            fill=mark,
            opacity=0.25,
        )
    if marking == MarkingType.SCAR:
        return tag(
            "line", x1=33, y1=18, x2=37, y2=22, stroke=mark, stroke_width=0.8,
            opacity=0.35, stroke_linecap="round",
        )
    if marking == MarkingType.PATCH:
        return tag("ellipse", cx=35, cy=30, rx=4, ry=3.5, fill=lighten(colors.body, 18), opacity=0.3)
    if marking == MarkingType.DIAMOND_MARK:
        return tag("polygon", points="36,27 38,30 36,33 34,30", fill=mark, opacity=0.25)
    if marking == MarkingType.CROSS:
        return _cross(34, 28, 38, 32, mark, 0.8, 0.25)
    return ""
