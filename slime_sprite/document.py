"""Typed layer descriptors and the single SVG serializer.

Layer generators return :class:`Fragment` values (definitions plus drawable
markup). The composer arranges them into a :class:`SpriteDocument` whose
``layers`` tuple is already in paint order; serialization happens exactly once,
in :meth:`SpriteDocument.to_svg`.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from slime_sprite.types import LayerName
from slime_sprite.utils.svg import fmt, to_data_uri

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


@dataclass(frozen=True)
class Fragment:
    """Output of one layer generator: ``defs`` go into ``<defs>``."""

    defs: str = ""
    markup: str = ""


EMPTY = Fragment()


@dataclass(frozen=True)
class Layer:
    name: LayerName
    markup: str = ""


@dataclass(frozen=True)
class SpriteDocument:
    """A composed, not yet serialized sprite.

    Attributes:
        view_box: SVG ``viewBox`` attribute value.
        width: Rendered width in pixels.
        height: Rendered height in pixels.
        defs: Definition fragments, in insertion order.
        layers: Drawable layers in z-order (bottom first).
    """

    view_box: str
    width: float
    height: float
    defs: Tuple[str, ...] = field(default_factory=tuple)
    layers: Tuple[Layer, ...] = field(default_factory=tuple)

    @property
    def layer_names(self) -> Tuple[LayerName, ...]:
        return tuple(layer.name for layer in self.layers)

    def layer(self, name: LayerName) -> Optional[Layer]:
        for layer in self.layers:
            if layer.name == name:
                return layer
        return None

    def to_svg(self) -> str:
        """Serialize to a standalone SVG string."""
        defs = "".join(self.defs)
        body = "".join(layer.markup for layer in self.layers)
        return (
            f'<svg xmlns="{SVG_NAMESPACE}" viewBox="{self.view_box}" '
            f'width="{fmt(self.width)}" height="{fmt(self.height)}" overflow="visible">'
            f"<defs>{defs}</defs>{body}</svg>"
        )

    def to_data_uri(self) -> str:
        return to_data_uri(self.to_svg())
