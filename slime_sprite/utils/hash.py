"""Deterministic per-species hashing and catalog selection.

Sprites are never cached: they are recomputed from the species id on every
render, so the mixer below must give identical results on every platform and
interpreter run. It works on unsigned 32-bit integers only and touches no
global state (``random`` and ``hash()`` are both unsuitable here).
"""

from typing import Sequence, TypeVar

from slime_sprite.types import SpeciesID

T = TypeVar("T")

MASK_32 = 0xFFFFFFFF
GOLDEN_MULTIPLIER = 2654435761
SALT_MULTIPLIER = 340573
MIX_MULTIPLIER = 0x45D9F3B


def species_hash(species_id: SpeciesID, salt: int) -> int:
    """Mix ``species_id`` with ``salt`` into an unsigned 32-bit value.

    Negative ids wrap modulo 2**32 before mixing.

    Raises:
        TypeError: If ``species_id`` is not an integer.
    """
    if not isinstance(species_id, int):
        raise TypeError(f"species_id must be an int, got {type(species_id).__name__}")
    h = (species_id * GOLDEN_MULTIPLIER + salt * SALT_MULTIPLIER) & MASK_32
    h = (((h >> 16) ^ h) * MIX_MULTIPLIER) & MASK_32
    return ((h >> 16) ^ h) & MASK_32


def pick(catalog: Sequence[T], species_id: SpeciesID, salt: int) -> T:
    """Select ``catalog[species_hash(species_id, salt) % len(catalog)]``.

    Catalogs must only grow at the end; reordering existing entries changes
    the appearance of every species already shipped.

    Raises:
        ValueError: If ``catalog`` is empty.
    """
    if len(catalog) == 0:
        raise ValueError("Cannot pick from an empty catalog")
    return catalog[species_hash(species_id, salt) % len(catalog)]
