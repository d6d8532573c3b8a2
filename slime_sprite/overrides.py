"""Hand-authored appearances for a few hidden species.

An override entry bypasses palette derivation and trait selection entirely:
its colors and traits are fixed, and it contributes one bespoke definition and
one overlay fragment to the full sprite. Override definitions are namespaced
with the render uid so several override sprites can share one HTML page.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from pyrsistent import pmap
from pyrsistent.typing import PMap

from slime_sprite.palette import SlimeColors
from slime_sprite.types import (
    AppendageType,
    BodyVariant,
    MarkingType,
    PatternType,
    SpeciesID,
)
from slime_sprite.utils.svg import ref, tag

FragmentFn = Callable[[str], str]


@dataclass(frozen=True)
class OverrideEntry:
    """Fixed appearance of one hidden species.

    Attributes:
        name: Display name, only used for logging and debugging.
        colors: Palette used instead of the derived element palette.
        variant: Forced silhouette.
        appendage: Forced appendage.
        pattern: Forced pattern.
        marking: Forced marking.
        defs_fn: Builds the bespoke ``<defs>`` content for a uid.
        overlay_fn: Builds the bespoke overlay drawn above the marking.
    """

    name: str
    colors: SlimeColors
    variant: BodyVariant
    appendage: AppendageType
    pattern: PatternType
    marking: MarkingType
    defs_fn: FragmentFn
    overlay_fn: FragmentFn

    def extra_defs(self, uid: str) -> str:
        return self.defs_fn(uid)

    def extra_overlay(self, uid: str) -> str:
        return self.overlay_fn(uid)


def _joy_defs(uid: str) -> str:
    stops = (
        tag("stop", offset=f"{offset}%", stop_color=color)
        for offset, color in (
            (0, "#FF6B6B"),
            (20, "#FECA57"),
            (40, "#55EFC4"),
            (60, "#48DBFB"),
            (80, "#A29BFE"),
            (100, "#FF6B6B"),
        )
    )
    return tag(
        "linearGradient", *stops, id=f"rainbow_joy_{uid}", x1="0%", y1="0%", x2="100%", y2="100%"
    )


def _joy_overlay(uid: str) -> str:
    return tag(
        "path",
        d="M50,10 L58,32 L82,32 L64,48 L72,72 L50,58 L28,72 L36,48 L18,32 L42,32 Z",
        fill=ref(f"rainbow_joy_{uid}"),
        opacity=0.25,
    )


def _im_defs(uid: str) -> str:
    return tag(
        "filter",
        tag("feGaussianBlur", in_="SourceGraphic", stdDeviation=4, result="blur"),
        tag(
            "feColorMatrix",
            in_="blur",
            type="matrix",
            values="0.3 0 0 0 0.1  0 0 0.3 0 0  0 0 0.5 0 0.2  0 0 0 0.6 0",
        ),
        id=f"shadow_im_{uid}", x="-30%", y="-30%", width="160%", height="160%",
    )


def _im_overlay(uid: str) -> str:
    return tag(
        "path",
        d="M24,50 C24,26 34,10 50,8 C66,10 76,26 76,50 L76,76 L68,70 L60,78 "
        "L50,70 L40,78 L32,70 L24,76 Z",
        stroke="#9B59B6", stroke_width=1.5, fill="none", opacity=0.3,
        filter=ref(f"shadow_im_{uid}"),
    )


def _one_piece_defs(uid: str) -> str:
    return tag(
        "linearGradient",
        tag("stop", offset="0%", stop_color="#FFD700", stop_opacity=0.3),
        tag("stop", offset="50%", stop_color="#FFF8DC", stop_opacity=0.15),
        tag("stop", offset="100%", stop_color="#DAA520", stop_opacity=0.3),
        id=f"prism_999_{uid}", x1="0%", y1="0%", x2="100%", y2="100%",
    )


def _one_piece_overlay(uid: str) -> str:
    crown = tag(
        "polygon", points="40,14 42,4 46,12 50,2 54,12 58,4 60,14", fill="#FFD700", opacity=0.7
    ) + tag("circle", cx=50, cy=6, r=2.5, fill="#FF4500", opacity=0.8)
    return (
        tag(
            "path",
            d="M50,10 C62,24 78,44 78,56 C78,72 66,88 50,90 C34,88 22,72 22,56 "
            "C22,44 38,24 50,10 Z",
            fill=ref(f"prism_999_{uid}"),
            opacity=0.3,
        )
        + crown
    )


HIDDEN_SPECIES: PMap[SpeciesID, OverrideEntry] = pmap(
    {
        777: OverrideEntry(
            name="Joy Boy",
            colors=SlimeColors(
                body="#FFD700", light="#FFFACD", dark="#FF8C00", accent="#FFFDE0",
                iris="#FF6347", glow="#FFEC8B", blush="#FFB6C1",
            ),
            variant=BodyVariant.STAR,
            appendage=AppendageType.TINY_WINGS,
            pattern=PatternType.NONE,
            marking=MarkingType.STAR_MARK,
            defs_fn=_joy_defs,
            overlay_fn=_joy_overlay,
        ),
        888: OverrideEntry(
            name="Im",
            colors=SlimeColors(
                body="#2D1B4E", light="#4A2D7A", dark="#1A0E30", accent="#7B48C8",
                iris="#9B59B6", glow="#6B3FA0", blush="#4A2D6E",
            ),
            variant=BodyVariant.GHOST,
            appendage=AppendageType.TENTACLES,
            pattern=PatternType.SWIRL,
            marking=MarkingType.SCAR,
            defs_fn=_im_defs,
            overlay_fn=_im_overlay,
        ),
        999: OverrideEntry(
            name="One Piece",
            colors=SlimeColors(
                body="#FFD700", light="#FFFDE0", dark="#DAA520", accent="#FFF8DC",
                iris="#FF4500", glow="#FFE878", blush="#FFD0A0",
            ),
            variant=BodyVariant.DIAMOND,
            appendage=AppendageType.SINGLE_HORN,
            pattern=PatternType.DIAMOND_TILES,
            marking=MarkingType.DIAMOND_MARK,
            defs_fn=_one_piece_defs,
            overlay_fn=_one_piece_overlay,
        ),
    }
)


def get_override(species_id: SpeciesID) -> Optional[OverrideEntry]:
    return HIDDEN_SPECIES.get(species_id)
