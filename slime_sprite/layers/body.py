"""Body, jelly lighting and the base definitions both modes rely on.

The translucent look comes from stacking, in order: a white blurred outline,
the gradient-filled body, a faint white jelly gradient on the inner path, a
colored subsurface glow, a few internal bubbles, a blurred dome highlight,
specular dots and a rim light along the bottom edge.
"""

from typing import Optional

from slime_sprite.palette import SlimeColors
from slime_sprite.utils.color import darken
from slime_sprite.utils.svg import animate, animate_transform, ref, tag

WHITE_OUTLINE = "0 0 0 0 1  0 0 0 0 1  0 0 0 0 1  0 0 0 {alpha} 0"


def _body_gradient(grad_id: str, colors: SlimeColors, deeper: str, radius: str) -> str:
    return tag(
        "radialGradient",
        tag("stop", offset="0%", stop_color=colors.light),
        tag("stop", offset="35%", stop_color=colors.body),
        tag("stop", offset="75%", stop_color=colors.dark),
        tag("stop", offset="100%", stop_color=deeper),
        id=grad_id, cx="38%", cy="30%", r=radius, fx="35%", fy="28%",
    )


def _jelly_gradient(grad_id: str, mid_offset: str, top: float, mid: float) -> str:
    return tag(
        "radialGradient",
        tag("stop", offset="0%", stop_color="white", stop_opacity=top),
        tag("stop", offset=mid_offset, stop_color="white", stop_opacity=mid),
        tag("stop", offset="100%", stop_color="white", stop_opacity=0),
        id=grad_id, cx="40%", cy="25%", r="55%",
    )


def _outline_filter(filter_id: str, blur: float, alpha: float, bounds: str) -> str:
    return tag(
        "filter",
        tag("feGaussianBlur", stdDeviation=blur, result="blur"),
        tag("feColorMatrix", in_="blur", type="matrix", values=WHITE_OUTLINE.format(alpha=alpha)),
        id=filter_id, x=f"-{bounds}%", y=f"-{bounds}%",
        width=f"{100 + 2 * int(bounds)}%", height=f"{100 + 2 * int(bounds)}%",
    )


def base_defs(colors: SlimeColors, uid: str) -> str:
    """Gradients and filters every full sprite uses."""
    return (
        _body_gradient(f"bg_{uid}", colors, darken(colors.dark, 10), "62%")
        + tag(
            "radialGradient",
            tag("stop", offset="0%", stop_color=colors.glow, stop_opacity=0.18),
            tag("stop", offset="100%", stop_color=colors.body, stop_opacity=0),
            id=f"glow_{uid}", cx="50%", cy="40%", r="50%",
        )
        + tag("filter", tag("feGaussianBlur", stdDeviation=3), id=f"dome_{uid}")
        + _outline_filter(f"outline_{uid}", 2.5, 0.5, "15")
        + _jelly_gradient(f"jelly_{uid}", "40%", 0.12, 0.04)
        + tag(
            "filter",
            tag("feDropShadow", dx=0, dy=2, stdDeviation=2.5, flood_opacity=0.18),
            id=f"shadow_{uid}",
        )
    )


def ground_shadow_svg() -> str:
    return tag(
        "ellipse",
        animate("rx", "28;30;28", "3s"),
        animate("cy", "91;92;91", "2.5s"),
        cx=50, cy=91, rx=28, ry=5, fill="rgba(0,0,0,0.13)",
    )


def outline_glow_svg(body_path: str, uid: str) -> str:
    return tag("path", d=body_path, fill="white", filter=ref(f"outline_{uid}"))


def body_svg(body_path: str, uid: str, grade_filter: Optional[str] = None) -> str:
    """Gradient body with drop shadow and a slow breathing scale.

    A grade filter, when present, wraps the shadowed body in an extra group so
    both filters apply.
    """
    body = tag("path", d=body_path, fill=ref(f"bg_{uid}"), filter=ref(f"shadow_{uid}"))
    if grade_filter:
        body = tag("g", body, filter=ref(grade_filter))
    return tag(
        "g",
        body,
        animate_transform("scale", "1;1.01;1;0.99;1", "3s"),
        transform_origin="50 55",
    )


def jelly_svg(inner_path: str, uid: str) -> str:
    return tag("path", d=inner_path, fill=ref(f"jelly_{uid}"))


def subsurface_glow_svg(inner_path: str, uid: str) -> str:
    return tag("path", d=inner_path, fill=ref(f"glow_{uid}"))


def bubbles_svg() -> str:
    return "".join(
        tag("circle", cx=x, cy=y, r=r, fill="white", opacity=o)
        for x, y, r, o in (
            (34, 40, 3, 0.12),
            (62, 44, 2.5, 0.1),
            (42, 68, 2, 0.08),
            (58, 36, 1.8, 0.14),
            (50, 72, 1.5, 0.06),
            (38, 56, 1.2, 0.09),
        )
    )


def dome_highlight_svg(uid: str) -> str:
    return tag(
        "ellipse", cx=36, cy=30, rx=20, ry=16, fill="white", opacity=0.25, filter=ref(f"dome_{uid}")
    )


def specular_svg() -> str:
    return "".join(
        tag("circle", cx=x, cy=y, r=r, fill="white", opacity=o)
        for x, y, r, o in (
            (32, 26, 10, 0.55),
            (44, 34, 4.5, 0.38),
            (27, 36, 2, 0.5),
            (56, 28, 1.5, 0.35),
            (66, 38, 1, 0.25),
        )
    )


def rim_light_svg() -> str:
    return tag("path", d="M26,78 Q50,88 74,78", fill="none", stroke="white", stroke_width=2.5, opacity=0.2)


# Icon, 50-unit space. The body gradient id is the bare uid.


def icon_base_defs(colors: SlimeColors, uid: str) -> str:
    return (
        _body_gradient(uid, colors, darken(colors.dark, 8), "60%")
        + _jelly_gradient(f"ijelly_{uid}", "50%", 0.1, 0.03)
        + tag("filter", tag("feGaussianBlur", stdDeviation=1.5), id=f"idome_{uid}")
        + _outline_filter(f"ioutline_{uid}", 1.8, 0.45, "20")
    )


def icon_outline_svg(body_path: str, uid: str) -> str:
    return tag("path", d=body_path, fill="white", filter=ref(f"ioutline_{uid}"))


def icon_body_svg(body_path: str, uid: str, grade_filter: Optional[str] = None) -> str:
    return tag(
        "path", d=body_path, fill=ref(uid), filter=ref(grade_filter) if grade_filter else None
    )


def icon_jelly_svg(inner_path: str, uid: str) -> str:
    return tag("path", d=inner_path, fill=ref(f"ijelly_{uid}"))


def icon_bubbles_svg() -> str:
    return "".join(
        tag("circle", cx=x, cy=y, r=r, fill="white", opacity=o)
        for x, y, r, o in ((18, 24, 1.5, 0.1), (32, 26, 1, 0.12), (22, 36, 0.8, 0.08))
    )


def icon_dome_svg(uid: str) -> str:
    return tag("ellipse", cx=19, cy=19, rx=8, ry=6, fill="white", opacity=0.22, filter=ref(f"idome_{uid}"))


def icon_specular_svg() -> str:
    return "".join(
        tag("circle", cx=x, cy=y, r=r, fill="white", opacity=o)
        for x, y, r, o in ((17, 17, 4, 0.52), (22, 21, 2, 0.32), (14, 22, 1, 0.4))
    )
