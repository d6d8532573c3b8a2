"""Small SVG text helpers shared by every layer generator."""

from typing import Optional, Union
from urllib.parse import quote

Number = Union[int, float]

DATA_URI_PREFIX = "data:image/svg+xml;charset=utf-8,"

# Characters left unescaped by JavaScript's encodeURIComponent.
_URI_COMPONENT_SAFE = "-_.!~*'()"

_UID_ALLOWED = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_-"
)


def fmt(value: Number) -> str:
    """Format a coordinate compactly: ``1.0 -> '1'``, ``0.50 -> '0.5'``."""
    text = f"{round(float(value), 3):.3f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def _attr_name(key: str) -> str:
    # ``stroke_width`` -> ``stroke-width``; ``in_`` -> ``in``
    return key.rstrip("_").replace("_", "-")


def _attr_value(value: Union[Number, str]) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return fmt(value)
    return str(value)


def tag(name: str, *children: str, **attrs: Optional[Union[Number, str]]) -> str:
    """Render one SVG element.

    Keyword attributes keep their order; ``None`` values are omitted. Without
    children the element is self-closing.

    Example:
        >>> tag("circle", cx=10, cy=2.50, r=1, fill="white")
        '<circle cx="10" cy="2.5" r="1" fill="white"/>'
    """
    rendered = "".join(
        f' {_attr_name(key)}="{_attr_value(value)}"'
        for key, value in attrs.items()
        if value is not None
    )
    if not children:
        return f"<{name}{rendered}/>"
    return f"<{name}{rendered}>{''.join(children)}</{name}>"


def sanitize_uid(raw: str) -> str:
    """Restrict a namespace key to characters valid in an XML id."""
    return "".join(c if c in _UID_ALLOWED else "_" for c in raw)


def ref(def_id: str) -> str:
    """``url(#id)`` reference to a definition."""
    return f"url(#{def_id})"


def animate(attribute: str, values: str, dur: str) -> str:
    """Looping ``<animate>`` element."""
    return tag(
        "animate", attributeName=attribute, values=values, dur=dur, repeatCount="indefinite"
    )


def animate_transform(kind: str, values: str, dur: str) -> str:
    """Looping ``<animateTransform>`` over a ``values`` list."""
    return tag(
        "animateTransform",
        attributeName="transform",
        type=kind,
        values=values,
        dur=dur,
        repeatCount="indefinite",
    )


def rotate_forever(cx: Number, cy: Number, dur: str) -> str:
    """Looping full rotation about ``(cx, cy)``."""
    return tag(
        "animateTransform",
        attributeName="transform",
        type="rotate",
        from_=f"0 {fmt(cx)} {fmt(cy)}",
        to=f"360 {fmt(cx)} {fmt(cy)}",
        dur=dur,
        repeatCount="indefinite",
    )


def sparkle_points(cx: Number, cy: Number, r: Number, waist: float = 0.3) -> str:
    """``points`` of a four-pointed star of radius ``r`` centered on ``(cx, cy)``."""
    k = r * waist
    offsets = ((0, -r), (k, -k), (r, 0), (k, k), (0, r), (-k, k), (-r, 0), (-k, -k))
    return " ".join(f"{fmt(cx + dx)},{fmt(cy + dy)}" for dx, dy in offsets)


def to_data_uri(svg: str) -> str:
    """Percent-encode ``svg`` exactly like ``encodeURIComponent`` and wrap it."""
    return DATA_URI_PREFIX + quote(svg, safe=_URI_COMPONENT_SAFE)
