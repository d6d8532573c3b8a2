"""Rendering subpackage.

Composes the fragment generators of :mod:`slime_sprite.layers` into a
:class:`~slime_sprite.document.SpriteDocument` for either output mode:

* Fixed z-order driven by :class:`~slime_sprite.types.LayerName`.
* Definitions collected once per document, namespaced by the sprite uid.
* Serialization to raw SVG or a percent-encoded data URI.

See :mod:`slime_sprite.renderer.sprite` for the composer itself.
"""

from slime_sprite.renderer.sprite import (
    SpriteRenderer,
    build_full_document,
    build_icon_document,
    render_full,
    render_icon,
)

__all__ = [
    "SpriteRenderer",
    "build_full_document",
    "build_icon_document",
    "render_full",
    "render_icon",
]
