"""Layer composer: turns a :class:`~slime_sprite.state.SpriteState` into a document.

Two output modes share one derived state:

* **full**: detailed 100-unit geometry, ``viewBox="-10 -15 120 120"``,
  every layer of :class:`~slime_sprite.types.LayerName` in declaration order.
* **icon**: reduced 50-unit geometry, ``viewBox="-5 -8 60 62"``, a subset of
  the layers, accessories scaled by one half.

All definition ids are suffixed with the state's uid so any number of sprites
can be inlined into one page without id collisions.
"""

import logging
from typing import Iterable, Optional

from slime_sprite.accessories import accessory_parts
from slime_sprite.config import DEFAULT_FULL_SIZE, DEFAULT_ICON_SIZE, RenderConfig
from slime_sprite.document import Layer, SpriteDocument
from slime_sprite.layers.appendage import appendage_svg, icon_appendage_svg
from slime_sprite.layers.body import (
    base_defs,
    body_svg,
    bubbles_svg,
    dome_highlight_svg,
    ground_shadow_svg,
    icon_base_defs,
    icon_body_svg,
    icon_bubbles_svg,
    icon_dome_svg,
    icon_jelly_svg,
    icon_outline_svg,
    icon_specular_svg,
    jelly_svg,
    outline_glow_svg,
    rim_light_svg,
    specular_svg,
    subsurface_glow_svg,
)
from slime_sprite.layers.element import decor_svg, particles_fragment
from slime_sprite.layers.expression import (
    ICON_MOUTH,
    blink_svg,
    blush_fragment,
    eyes_svg,
    face_group,
    icon_blush_svg,
    icon_eyes_svg,
    mouth_svg,
)
from slime_sprite.layers.grade import get_grade_effect
from slime_sprite.layers.marking import icon_marking_svg, marking_svg
from slime_sprite.layers.pattern import pattern_fragment
from slime_sprite.layers.species import species_features_svg
from slime_sprite.state import SpriteState, derive_sprite
from slime_sprite.types import DEFAULT_PERSONALITY, LayerName, RenderMode, SpeciesID
from slime_sprite.utils.svg import tag

logger = logging.getLogger(__name__)

FULL_VIEW_BOX = "-10 -15 120 120"
ICON_VIEW_BOX = "-5 -8 60 62"
ICON_ACCESSORY_SCALE = 0.5


def compose_full(
    state: SpriteState,
    accessory_overlays: Optional[Iterable[str]] = None,
    size: float = DEFAULT_FULL_SIZE,
) -> SpriteDocument:
    """Arrange every full-mode layer for ``state``."""
    colors, uid, shape = state.colors, state.uid, state.shape
    layout = shape.layout

    grade_fx = get_grade_effect(state.grade).bundle(colors, uid, shape.body_path)
    pattern = pattern_fragment(state.traits.pattern, colors, uid, shape.body_path)
    particles = particles_fragment(state.element, colors, uid)
    blush = blush_fragment(state.personality, colors.blush, uid)
    acc_defs, acc_markup = accessory_parts(accessory_overlays)
    override_defs = state.override.extra_defs(uid) if state.override else ""
    override_overlay = state.override.extra_overlay(uid) if state.override else ""

    defs = (
        base_defs(colors, uid),
        grade_fx.defs,
        pattern.defs,
        particles.defs,
        blush.defs,
        override_defs,
        acc_defs,
    )
    layers = (
        Layer(LayerName.GROUND_SHADOW, ground_shadow_svg()),
        Layer(LayerName.APPENDAGE, appendage_svg(state.traits.appendage, colors)),
        Layer(LayerName.OUTLINE_GLOW, outline_glow_svg(shape.body_path, uid)),
        Layer(LayerName.BODY, body_svg(shape.body_path, uid, grade_fx.body_filter)),
        Layer(LayerName.PATTERN, pattern.markup),
        Layer(LayerName.JELLY, jelly_svg(shape.inner_path, uid)),
        Layer(LayerName.SUBSURFACE_GLOW, subsurface_glow_svg(shape.inner_path, uid)),
        Layer(LayerName.GRADE_BODY, grade_fx.body_overlay),
        Layer(LayerName.BUBBLES, bubbles_svg()),
        Layer(LayerName.DOME_HIGHLIGHT, dome_highlight_svg(uid)),
        Layer(LayerName.SPECULAR, specular_svg()),
        Layer(LayerName.RIM_LIGHT, rim_light_svg()),
        Layer(LayerName.MARKING, marking_svg(state.traits.marking, colors)),
        Layer(LayerName.OVERRIDE_OVERLAY, override_overlay),
        Layer(LayerName.ELEMENT_DECOR, decor_svg(state.element, colors)),
        Layer(LayerName.ELEMENT_PARTICLES, particles.markup),
        Layer(
            LayerName.EYES,
            face_group(
                layout,
                layout.eye_offset_y,
                eyes_svg(state.personality, colors.iris, layout.eye_spread),
            ),
        ),
        Layer(
            LayerName.BLINK,
            face_group(layout, layout.eye_offset_y, blink_svg(colors.body, layout.eye_spread)),
        ),
        Layer(
            LayerName.MOUTH,
            face_group(layout, layout.mouth_offset_y, mouth_svg(state.personality)),
        ),
        Layer(LayerName.BLUSH, blush.markup),
        Layer(LayerName.SPECIES_FEATURES, species_features_svg(state.species_id, colors)),
        Layer(LayerName.GRADE_OVERLAY, grade_fx.overlay),
        Layer(LayerName.ACCESSORIES, acc_markup),
    )
    return SpriteDocument(
        view_box=FULL_VIEW_BOX,
        width=size,
        height=size,
        defs=tuple(d for d in defs if d),
        layers=layers,
    )


def compose_icon(
    state: SpriteState,
    accessory_overlays: Optional[Iterable[str]] = None,
    size: float = DEFAULT_ICON_SIZE,
) -> SpriteDocument:
    """Arrange the reduced icon layers for ``state``; renders at ``2 * size``."""
    colors, uid, shape = state.colors, state.uid, state.shape

    grade_fx = get_grade_effect(state.grade).icon_bundle(uid)
    acc_defs, acc_markup = accessory_parts(accessory_overlays)
    if acc_markup:
        acc_markup = tag("g", acc_markup, transform=f"scale({ICON_ACCESSORY_SCALE})")

    defs = (icon_base_defs(colors, uid), grade_fx.defs, acc_defs)
    layers = (
        Layer(LayerName.APPENDAGE, icon_appendage_svg(state.traits.appendage, colors)),
        Layer(LayerName.OUTLINE_GLOW, icon_outline_svg(shape.icon_body_path, uid)),
        Layer(LayerName.BODY, icon_body_svg(shape.icon_body_path, uid, grade_fx.body_filter)),
        Layer(LayerName.JELLY, icon_jelly_svg(shape.icon_inner_path, uid)),
        Layer(LayerName.BUBBLES, icon_bubbles_svg()),
        Layer(LayerName.DOME_HIGHLIGHT, icon_dome_svg(uid)),
        Layer(LayerName.SPECULAR, icon_specular_svg()),
        Layer(LayerName.MARKING, icon_marking_svg(state.traits.marking, colors)),
        Layer(LayerName.EYES, icon_eyes_svg(colors.iris)),
        Layer(LayerName.MOUTH, ICON_MOUTH),
        Layer(LayerName.BLUSH, icon_blush_svg(colors.blush)),
        Layer(LayerName.GRADE_OVERLAY, grade_fx.overlay),
        Layer(LayerName.ACCESSORIES, acc_markup),
    )
    return SpriteDocument(
        view_box=ICON_VIEW_BOX,
        width=size * 2,
        height=size * 2,
        defs=tuple(d for d in defs if d),
        layers=layers,
    )


def build_full_document(
    element: Optional[str],
    personality: Optional[str],
    grade: Optional[str] = "common",
    species_id: SpeciesID = 0,
    accessory_overlays: Optional[Iterable[str]] = None,
    size: float = DEFAULT_FULL_SIZE,
) -> SpriteDocument:
    state = derive_sprite(element, personality, grade, species_id, RenderMode.FULL)
    logger.debug("Composing full sprite %s (variant=%s)", state.uid, state.traits.variant)
    return compose_full(state, accessory_overlays, size)


def build_icon_document(
    element: Optional[str],
    size: float = DEFAULT_ICON_SIZE,
    grade: Optional[str] = "common",
    accessory_overlays: Optional[Iterable[str]] = None,
    species_id: SpeciesID = 0,
) -> SpriteDocument:
    # Icons share the full sprite's palette and traits but have a fixed face.
    state = derive_sprite(element, DEFAULT_PERSONALITY, grade, species_id, RenderMode.ICON)
    logger.debug("Composing icon %s (variant=%s)", state.uid, state.traits.variant)
    return compose_icon(state, accessory_overlays, size)


def render_full(
    element: Optional[str],
    personality: Optional[str],
    grade: Optional[str] = "common",
    species_id: SpeciesID = 0,
    accessory_overlays: Optional[Iterable[str]] = None,
) -> str:
    """Render the detailed sprite as an SVG data URI.

    Args:
        element: Element tag (``fire``, ``water``...). Unknown tags render as water.
        personality: Personality tag. Unknown tags render as gentle.
        grade: Grade tag. Unknown tags render as common.
        species_id: Species identity driving palette shift and traits.
        accessory_overlays: Accessory overlay ids, painted last in order.

    Returns:
        str: ``data:image/svg+xml;charset=utf-8,`` followed by the encoded SVG.
    """
    return build_full_document(
        element, personality, grade, species_id, accessory_overlays
    ).to_data_uri()


def render_icon(
    element: Optional[str],
    size: float = DEFAULT_ICON_SIZE,
    grade: Optional[str] = "common",
    accessory_overlays: Optional[Iterable[str]] = None,
    species_id: SpeciesID = 0,
) -> str:
    """Render the reduced icon as an SVG data URI, ``2 * size`` pixels square."""
    return build_icon_document(
        element, size, grade, accessory_overlays, species_id
    ).to_data_uri()


class SpriteRenderer:
    """Renders sprites with sizes and output format taken from a :class:`RenderConfig`."""

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config if config is not None else RenderConfig()

    def _serialize(self, document: SpriteDocument) -> str:
        return document.to_data_uri() if self.config.data_uri else document.to_svg()

    def full(
        self,
        element: Optional[str],
        personality: Optional[str],
        grade: Optional[str] = "common",
        species_id: SpeciesID = 0,
        accessory_overlays: Optional[Iterable[str]] = None,
    ) -> str:
        return self._serialize(
            build_full_document(
                element,
                personality,
                grade,
                species_id,
                accessory_overlays,
                size=self.config.full_size,
            )
        )

    def icon(
        self,
        element: Optional[str],
        grade: Optional[str] = "common",
        accessory_overlays: Optional[Iterable[str]] = None,
        species_id: SpeciesID = 0,
        size: Optional[float] = None,
    ) -> str:
        return self._serialize(
            build_icon_document(
                element,
                self.config.icon_size if size is None else size,
                grade,
                accessory_overlays,
                species_id,
            )
        )
