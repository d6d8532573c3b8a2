"""slime_sprite
=================================

Deterministic procedural slime sprites rendered as layered SVG.

A sprite is a pure function of four caller tags (element, personality, grade,
species id) plus an optional list of accessory overlay ids. The same inputs
always produce byte-identical output, so results can be cached forever::

    from slime_sprite import render_full, render_icon

    uri = render_full("fire", "energetic", "legendary", 42)
    icon = render_icon("fire", 40, "legendary", species_id=42)

Both functions return ``data:image/svg+xml`` URIs. Use
:func:`build_full_document` / :func:`build_icon_document` to inspect the
composed layers before serialization, or :class:`SpriteRenderer` to apply a
:class:`RenderConfig`.

"""

from .accessories import Accessory, StaticAccessory, register_accessory, unregister_accessory
from .config import RenderConfig
from .document import SpriteDocument
from .palette import SlimeColors, get_species_colors
from .renderer import (
    SpriteRenderer,
    build_full_document,
    build_icon_document,
    render_full,
    render_icon,
)
from .state import SpriteState, derive_sprite
from .traits import TraitSelection, select_traits
from .types import Element, Grade, LayerName, Personality

__all__ = [
    "Accessory",
    "StaticAccessory",
    "register_accessory",
    "unregister_accessory",
    "RenderConfig",
    "SpriteDocument",
    "SlimeColors",
    "get_species_colors",
    "SpriteRenderer",
    "build_full_document",
    "build_icon_document",
    "render_full",
    "render_icon",
    "SpriteState",
    "derive_sprite",
    "TraitSelection",
    "select_traits",
    "Element",
    "Grade",
    "LayerName",
    "Personality",
]
