# tests/utils/test_hash.py

from typing import List

import pytest

from slime_sprite.utils.hash import MASK_32, pick, species_hash


@pytest.mark.parametrize(
    "species_id, salt, expected",
    [
        (0, 1, 3849299751),
        (1, 1, 3744874672),
        (1, 100, 236190541),
        (2, 3, 3771575376),
        (42, 1, 1071540342),
        (42, 101, 2891108733),
        (123, 200, 538952760),
        (1000, 4, 2898671706),
    ],
)
def test_species_hash_golden(species_id: int, salt: int, expected: int) -> None:
    assert species_hash(species_id, salt) == expected


def test_species_hash_is_unsigned_32_bit() -> None:
    for species_id in (-1, 0, 7, 2**40, 10**12):
        value = species_hash(species_id, 3)
        assert 0 <= value <= MASK_32


def test_salts_are_independent() -> None:
    values = {species_hash(42, salt) for salt in (1, 2, 3, 4, 100, 101, 200)}
    assert len(values) == 7


def test_pick_uses_modulo() -> None:
    catalog: List[str] = ["a", "b", "c", "d", "e", "f", "g"]
    assert pick(catalog, 42, 4) == catalog[species_hash(42, 4) % 7]


def test_pick_empty_catalog_raises() -> None:
    with pytest.raises(ValueError):
        pick([], 1, 1)


@pytest.mark.parametrize("species_id", [42.0, "42", None])
def test_non_integer_ids_are_rejected(species_id) -> None:
    with pytest.raises(TypeError, match="species_id must be an int"):
        species_hash(species_id, 1)
