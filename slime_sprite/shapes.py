"""Silhouette catalog.

Every :class:`~slime_sprite.types.BodyVariant` has:

* an outer body path and an inset "inner" path in the 100-unit full-sprite
  space (the inner path carries the translucent jelly and glow fills),
* the same pair redrawn at 50-unit icon scale,
* a :class:`ShapeLayout` telling the composer where the shared face glyphs
  go on this silhouette.

The outer path must visually contain the inner path at render scale. Nothing
checks this automatically; new variants need a visual pass.
"""

from dataclasses import dataclass
from typing import Optional

from pyrsistent import pmap
from pyrsistent.typing import PMap

from slime_sprite.types import DEFAULT_VARIANT, BodyVariant, resolve_variant

# Reference face anchors the expression glyphs are authored against.
FACE_EYE_Y = 48.0
FACE_MOUTH_Y = 61.0
FACE_EYE_SPACING = 13.0
FACE_CENTER_X = 50.0


@dataclass(frozen=True)
class ShapeLayout:
    """Face anchors for one silhouette.

    Attributes:
        eye_center_y: Vertical center of the eyes.
        mouth_center_y: Vertical center of the mouth.
        eye_spacing: Half distance between the eyes.
        face_scale: Uniform scale applied to the face glyphs.
    """

    eye_center_y: float
    mouth_center_y: float
    eye_spacing: float
    face_scale: float

    @property
    def eye_offset_y(self) -> float:
        return self.eye_center_y - FACE_EYE_Y

    @property
    def mouth_offset_y(self) -> float:
        return self.mouth_center_y - FACE_MOUTH_Y

    @property
    def eye_spread(self) -> float:
        """Outward shift of each eye glyph, in unscaled face units.

        After :attr:`face_scale` is applied the eye centers sit exactly
        :attr:`eye_spacing` either side of the face center.
        """
        return self.eye_spacing / self.face_scale - FACE_EYE_SPACING


@dataclass(frozen=True)
class Shape:
    body_path: str
    inner_path: str
    icon_body_path: str
    icon_inner_path: str
    layout: ShapeLayout


SHAPES: PMap[BodyVariant, Shape] = pmap(
    {
        BodyVariant.ROUND: Shape(
            body_path="M20,58 C20,38 28,20 50,18 C72,20 80,38 80,58 C80,72 70,86 50,87 C30,86 20,72 20,58 Z",
            inner_path="M24,56 C24,40 32,24 50,22 C68,24 76,40 76,56 C76,68 68,80 50,81 C32,80 24,68 24,56 Z",
            icon_body_path="M10,30 C10,18 16,10 25,9 C34,10 40,18 40,30 C40,40 34,44 25,44 C16,44 10,40 10,30 Z",
            icon_inner_path="M12,30 C12,20 17,12 25,11 C33,12 38,20 38,30 C38,38 33,42 25,42 C17,42 12,38 12,30 Z",
            layout=ShapeLayout(48, 61, 13, 1.0),
        ),
        BodyVariant.ELONGATED: Shape(
            body_path="M27,56 C27,32 35,16 50,14 C65,16 73,32 73,56 C73,74 65,87 50,88 C35,87 27,74 27,56 Z",
            inner_path="M31,54 C31,36 38,20 50,18 C62,20 69,36 69,54 C69,70 63,82 50,83 C37,82 31,70 31,54 Z",
            icon_body_path="M14,28 C14,16 18,8 25,7 C32,8 36,16 36,28 C36,38 32,44 25,44 C18,44 14,38 14,28 Z",
            icon_inner_path="M16,28 C16,18 19,10 25,9 C31,10 34,18 34,28 C34,36 31,42 25,42 C19,42 16,36 16,28 Z",
            layout=ShapeLayout(44, 58, 12, 0.95),
        ),
        BodyVariant.SPIKY: Shape(
            body_path="M22,58 C22,34 32,20 50,18 C68,20 78,34 78,58 C78,70 72,80 62,84 C56,86 44,86 38,84 C28,80 22,70 22,58 Z",
            inner_path="M26,56 C26,38 34,24 50,22 C66,24 74,38 74,56 C74,66 68,76 50,78 C32,76 26,66 26,56 Z",
            icon_body_path="M11,29 C11,17 17,10 25,9 C33,10 39,17 39,29 C39,35 36,40 31,42 C28,43 22,43 19,42 C14,40 11,35 11,29 Z",
            icon_inner_path="M13,29 C13,19 18,12 25,11 C32,12 37,19 37,29 C37,34 34,38 25,40 C16,38 13,34 13,29 Z",
            layout=ShapeLayout(48, 61, 13, 1.0),
        ),
        BodyVariant.FLAT: Shape(
            body_path="M16,60 C16,44 28,28 50,26 C72,28 84,44 84,60 C84,72 72,84 50,85 C28,84 16,72 16,60 Z",
            inner_path="M20,58 C20,46 30,32 50,30 C70,32 80,46 80,58 C80,68 72,80 50,81 C28,80 20,68 20,58 Z",
            icon_body_path="M8,30 C8,22 14,14 25,13 C36,14 42,22 42,30 C42,38 36,42 25,43 C14,42 8,38 8,30 Z",
            icon_inner_path="M10,30 C10,24 15,16 25,15 C35,16 40,24 40,30 C40,36 35,40 25,41 C15,40 10,36 10,30 Z",
            layout=ShapeLayout(50, 63, 14, 1.05),
        ),
        BodyVariant.TEARDROP: Shape(
            body_path="M28,54 C28,32 36,14 50,12 C64,14 72,32 72,54 C72,72 64,88 50,89 C36,88 28,72 28,54 Z",
            inner_path="M32,52 C32,34 38,18 50,16 C62,18 68,34 68,52 C68,68 62,84 50,85 C38,84 32,68 32,52 Z",
            icon_body_path="M14,27 C14,16 18,7 25,6 C32,7 36,16 36,27 C36,36 32,44 25,45 C18,44 14,36 14,27 Z",
            icon_inner_path="M16,27 C16,18 19,9 25,8 C31,9 34,18 34,27 C34,34 31,42 25,43 C19,42 16,34 16,27 Z",
            layout=ShapeLayout(44, 57, 12, 0.95),
        ),
        BodyVariant.BLOB: Shape(
            body_path="M18,60 C16,42 24,26 42,22 C54,20 72,28 80,44 C86,56 82,74 66,84 C52,90 30,88 20,76 C16,70 18,64 18,60 Z",
            inner_path="M22,58 C20,44 28,30 44,26 C54,24 70,32 76,46 C82,56 78,72 64,80 C52,86 34,84 24,74 C20,68 22,62 22,58 Z",
            icon_body_path="M9,30 C8,20 12,13 21,11 C27,10 36,14 40,22 C43,28 41,38 33,42 C26,45 15,44 10,38 Z",
            icon_inner_path="M11,30 C10,22 14,15 22,13 C27,12 34,16 38,24 C40,28 39,36 32,40 C26,43 17,42 12,36 Z",
            layout=ShapeLayout(50, 64, 14, 1.05),
        ),
        BodyVariant.MUSHROOM: Shape(
            body_path="M14,48 C14,28 28,14 50,12 C72,14 86,28 86,48 C86,58 78,64 68,66 L68,84 C68,88 60,90 50,90 C40,90 32,88 32,84 L32,66 C22,64 14,58 14,48 Z",
            inner_path="M18,48 C18,30 30,18 50,16 C70,18 82,30 82,48 C82,56 76,62 66,64 L66,82 C66,84 60,86 50,86 C40,86 34,84 34,82 L34,64 C24,62 18,56 18,48 Z",
            icon_body_path="M7,24 C7,14 14,7 25,6 C36,7 43,14 43,24 C43,28 39,32 34,33 L34,42 C34,44 30,45 25,45 C20,45 16,44 16,42 L16,33 C11,32 7,28 7,24 Z",
            icon_inner_path="M9,24 C9,16 15,9 25,8 C35,9 41,16 41,24 C41,27 38,30 33,31 L33,40 C33,42 30,43 25,43 C20,43 17,42 17,40 L17,31 C12,30 9,27 9,24 Z",
            layout=ShapeLayout(54, 66, 12, 0.9),
        ),
        BodyVariant.STAR: Shape(
            body_path="M50,10 L58,32 L82,32 L64,48 L72,72 L50,58 L28,72 L36,48 L18,32 L42,32 Z",
            inner_path="M50,16 L56,34 L76,34 L62,48 L68,68 L50,56 L32,68 L38,48 L24,34 L44,34 Z",
            icon_body_path="M25,5 L29,16 L41,16 L32,24 L36,36 L25,29 L14,36 L18,24 L9,16 L21,16 Z",
            icon_inner_path="M25,8 L28,17 L38,17 L31,24 L34,33 L25,27 L16,33 L19,24 L12,17 L22,17 Z",
            layout=ShapeLayout(50, 63, 12, 0.9),
        ),
        BodyVariant.CUBE: Shape(
            body_path="M20,28 L80,28 C82,28 84,30 84,32 L84,78 C84,80 82,82 80,82 L20,82 C18,82 16,80 16,78 L16,32 C16,30 18,28 20,28 Z",
            inner_path="M24,32 L76,32 C78,32 80,34 80,36 L80,74 C80,76 78,78 76,78 L24,78 C22,78 20,76 20,74 L20,36 C20,34 22,32 24,32 Z",
            icon_body_path="M10,14 L40,14 C41,14 42,15 42,16 L42,39 C42,40 41,41 40,41 L10,41 C9,41 8,40 8,39 L8,16 C8,15 9,14 10,14 Z",
            icon_inner_path="M12,16 L38,16 C39,16 40,17 40,18 L40,37 C40,38 39,39 38,39 L12,39 C11,39 10,38 10,37 L10,18 C10,17 11,16 12,16 Z",
            layout=ShapeLayout(50, 63, 14, 1.0),
        ),
        BodyVariant.TALL: Shape(
            body_path="M30,56 C30,26 36,10 50,8 C64,10 70,26 70,56 C70,76 64,92 50,93 C36,92 30,76 30,56 Z",
            inner_path="M34,54 C34,28 38,14 50,12 C62,14 66,28 66,54 C66,74 62,88 50,89 C38,88 34,74 34,54 Z",
            icon_body_path="M15,28 C15,13 18,5 25,4 C32,5 35,13 35,28 C35,38 32,46 25,47 C18,46 15,38 15,28 Z",
            icon_inner_path="M17,28 C17,14 19,7 25,6 C31,7 33,14 33,28 C33,37 31,44 25,45 C19,44 17,37 17,28 Z",
            layout=ShapeLayout(42, 56, 11, 0.9),
        ),
        BodyVariant.WIDE: Shape(
            body_path="M12,58 C12,42 22,30 50,28 C78,30 88,42 88,58 C88,72 78,82 50,84 C22,82 12,72 12,58 Z",
            inner_path="M16,56 C16,44 24,34 50,32 C76,34 84,44 84,56 C84,68 76,78 50,80 C24,78 16,68 16,56 Z",
            icon_body_path="M6,29 C6,21 11,15 25,14 C39,15 44,21 44,29 C44,36 39,41 25,42 C11,41 6,36 6,29 Z",
            icon_inner_path="M8,29 C8,23 12,17 25,16 C38,17 42,23 42,29 C42,34 38,39 25,40 C12,39 8,34 8,29 Z",
            layout=ShapeLayout(52, 65, 16, 1.1),
        ),
        BodyVariant.DIAMOND: Shape(
            body_path="M50,10 C62,24 78,44 78,56 C78,72 66,88 50,90 C34,88 22,72 22,56 C22,44 38,24 50,10 Z",
            inner_path="M50,16 C60,28 74,46 74,56 C74,70 64,84 50,86 C36,84 26,70 26,56 C26,46 40,28 50,16 Z",
            icon_body_path="M25,5 C31,12 39,22 39,28 C39,36 33,44 25,45 C17,44 11,36 11,28 C11,22 19,12 25,5 Z",
            icon_inner_path="M25,8 C30,14 37,23 37,28 C37,34 32,42 25,43 C18,42 13,34 13,28 C13,23 20,14 25,8 Z",
            layout=ShapeLayout(48, 60, 11, 0.9),
        ),
        BodyVariant.BEAN: Shape(
            body_path="M24,50 C20,30 30,14 46,12 C58,14 64,24 62,38 C66,32 76,30 80,42 C84,56 76,76 60,84 C44,88 28,82 22,68 C18,60 22,54 24,50 Z",
            inner_path="M28,50 C24,32 32,18 46,16 C56,18 62,26 60,40 C64,34 74,34 78,44 C80,54 74,72 58,80 C46,84 32,80 26,66 C22,58 26,54 28,50 Z",
            icon_body_path="M12,25 C10,15 15,7 23,6 C29,7 32,12 31,19 C33,16 38,15 40,21 C42,28 38,38 30,42 C22,44 14,41 11,34 Z",
            icon_inner_path="M14,25 C12,17 16,9 23,8 C28,9 31,13 30,20 C32,17 37,17 39,22 C40,27 37,36 29,40 C23,42 16,39 13,33 Z",
            layout=ShapeLayout(46, 60, 12, 0.95),
        ),
        BodyVariant.GHOST: Shape(
            body_path="M24,50 C24,26 34,10 50,8 C66,10 76,26 76,50 L76,76 L68,70 L60,78 L50,70 L40,78 L32,70 L24,76 Z",
            inner_path="M28,50 C28,28 36,14 50,12 C64,14 72,28 72,50 L72,72 L66,68 L60,74 L50,68 L40,74 L34,68 L28,72 Z",
            icon_body_path="M12,25 C12,13 17,5 25,4 C33,5 38,13 38,25 L38,38 L34,35 L30,39 L25,35 L20,39 L16,35 L12,38 Z",
            icon_inner_path="M14,25 C14,14 18,7 25,6 C32,7 36,14 36,25 L36,36 L33,34 L30,37 L25,34 L20,37 L17,34 L14,36 Z",
            layout=ShapeLayout(44, 57, 13, 1.0),
        ),
        BodyVariant.CRESCENT: Shape(
            body_path="M26,54 C26,30 36,14 52,12 C68,14 78,30 78,54 C78,72 70,86 54,88 C44,88 36,82 34,72 C40,78 50,78 56,72 C64,64 64,44 56,34 C48,26 38,30 34,42 C30,50 28,54 26,54 Z",
            inner_path="M30,54 C30,32 38,18 52,16 C66,18 74,32 74,54 C74,70 68,82 54,84 C46,84 40,80 38,72 C44,76 52,74 56,68 C62,62 62,46 56,38 C50,30 42,34 38,44 C34,50 32,54 30,54 Z",
            icon_body_path="M13,27 C13,15 18,7 26,6 C34,7 39,15 39,27 C39,36 35,43 27,44 C22,44 18,41 17,36 C20,39 25,39 28,36 C32,32 32,22 28,17 C24,13 19,15 17,21 Z",
            icon_inner_path="M15,27 C15,17 19,9 26,8 C33,9 37,17 37,27 C37,34 34,41 27,42 C23,42 20,40 19,36 C22,38 26,37 28,34 C31,30 31,23 28,19 C25,15 21,17 19,23 Z",
            layout=ShapeLayout(48, 62, 12, 0.95),
        ),
    }
)


def get_shape(variant: Optional[str]) -> Shape:
    """Shape for ``variant``; unknown variants fall back to ``round``."""
    return SHAPES.get(resolve_variant(variant), SHAPES[DEFAULT_VARIANT])
