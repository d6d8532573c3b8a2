"""Renderer configuration utilities."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_FULL_SIZE = 240
DEFAULT_ICON_SIZE = 40

_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _positive_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    value = int(raw)
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def _flag(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in _FALSE_VALUES


@dataclass(frozen=True)
class RenderConfig:
    """Output defaults for :class:`~slime_sprite.renderer.sprite.SpriteRenderer`.

    Attributes:
        full_size: Pixel width/height of a full sprite.
        icon_size: Nominal icon size; icons render at twice this.
        data_uri: Return percent-encoded data URIs (``True``) or raw SVG.
    """

    full_size: int = DEFAULT_FULL_SIZE
    icon_size: int = DEFAULT_ICON_SIZE
    data_uri: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RenderConfig":
        env = os.environ if environ is None else environ
        return cls(
            full_size=_positive_int(env, "SLIME_SPRITE_FULL_SIZE", DEFAULT_FULL_SIZE),
            icon_size=_positive_int(env, "SLIME_SPRITE_ICON_SIZE", DEFAULT_ICON_SIZE),
            data_uri=_flag(env, "SLIME_SPRITE_DATA_URI", True),
        )


__all__ = ["RenderConfig"]
