"""Accessory overlay boundary.

Accessories (hats, glasses, ...) are owned by an external catalog. The engine
only knows the :class:`Accessory` contract: an overlay id, optional
definitions, and a drawable fragment in the 100-unit full sprite space.
Fragments are appended verbatim and always painted last; the icon renderer
scales them down by half.

Overlay markup is trusted as-is. Anything registered here ends up inside the
rendered document without sanitization.

The registry is open: the host application registers its catalog at startup
and may replace entries later. Rendered output for a given list of overlay
ids therefore depends on what is registered at render time. The registry is
an immutable map swapped on every change, and :func:`accessory_parts` reads
one snapshot, so a single render never mixes two registry states.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, List, Optional

from pyrsistent import pmap
from pyrsistent.typing import PMap

logger = logging.getLogger(__name__)


class Accessory(ABC):
    """Contract every accessory plugin implements."""

    @property
    @abstractmethod
    def overlay_id(self) -> str:
        ...

    def defs(self) -> str:
        """Definitions required by :meth:`overlay` (may be empty)."""
        return ""

    @abstractmethod
    def overlay(self) -> str:
        ...


@dataclass(frozen=True)
class StaticAccessory(Accessory):
    """Accessory backed by pre-rendered fragments.

    Attributes:
        id: Overlay id callers refer to.
        markup: Drawable fragment.
        definitions: Fragment placed into ``<defs>``.
    """

    id: str
    markup: str
    definitions: str = ""

    @property
    def overlay_id(self) -> str:
        return self.id

    def defs(self) -> str:
        return self.definitions

    def overlay(self) -> str:
        return self.markup


_ACCESSORY_REGISTRY: PMap[str, Accessory] = pmap()


def register_accessory(accessory: Accessory) -> None:
    """Add ``accessory`` to the registry, replacing any entry with the same id."""
    if not isinstance(accessory, Accessory):
        raise TypeError(f"Expected an Accessory, got {type(accessory).__name__}")
    global _ACCESSORY_REGISTRY
    _ACCESSORY_REGISTRY = _ACCESSORY_REGISTRY.set(accessory.overlay_id, accessory)


def unregister_accessory(overlay_id: str) -> None:
    global _ACCESSORY_REGISTRY
    _ACCESSORY_REGISTRY = _ACCESSORY_REGISTRY.discard(overlay_id)


def registered_accessories() -> List[str]:
    return sorted(_ACCESSORY_REGISTRY)


def get_accessory(
    overlay_id: str, registry: Optional[PMap[str, Accessory]] = None
) -> Optional[Accessory]:
    accessory = (_ACCESSORY_REGISTRY if registry is None else registry).get(overlay_id)
    if accessory is None:
        logger.debug("Unknown accessory overlay %r", overlay_id)
    return accessory


def get_accessory_defs(overlay_id: str) -> str:
    accessory = get_accessory(overlay_id)
    return accessory.defs() if accessory else ""


def get_accessory_svg(overlay_id: str) -> str:
    accessory = get_accessory(overlay_id)
    return accessory.overlay() if accessory else ""


def accessory_parts(overlay_ids: Optional[Iterable[str]]) -> tuple[str, str]:
    """Concatenated ``(defs, overlays)`` for ``overlay_ids`` in order."""
    defs: List[str] = []
    overlays: List[str] = []
    registry = _ACCESSORY_REGISTRY
    for overlay_id in overlay_ids or ():
        accessory = get_accessory(overlay_id, registry)
        if accessory is None:
            continue
        defs.append(accessory.defs())
        overlays.append(accessory.overlay())
    return "".join(defs), "".join(overlays)
