from typing import Iterator

import pytest

from slime_sprite import accessories as accessories_module
from slime_sprite.accessories import (
    Accessory,
    StaticAccessory,
    accessory_parts,
    get_accessory,
    get_accessory_defs,
    get_accessory_svg,
    register_accessory,
    registered_accessories,
    unregister_accessory,
)


class Halo(Accessory):
    @property
    def overlay_id(self) -> str:
        return "test-halo"

    def overlay(self) -> str:
        return '<ellipse cx="50" cy="10" rx="12" ry="3"/>'


@pytest.fixture
def accessories() -> Iterator[None]:
    register_accessory(
        StaticAccessory(
            id="test-hat",
            markup='<path d="M30,20 L70,20 L50,0 Z" fill="url(#hatgrad)"/>',
            definitions='<linearGradient id="hatgrad"/>',
        )
    )
    register_accessory(Halo())
    yield
    unregister_accessory("test-hat")
    unregister_accessory("test-halo")


def test_lookup(accessories: None) -> None:
    assert "test-hat" in registered_accessories()
    assert get_accessory_defs("test-hat") == '<linearGradient id="hatgrad"/>'
    assert get_accessory_svg("test-hat").startswith("<path")
    assert get_accessory_defs("test-halo") == ""
    assert get_accessory_svg("test-halo").startswith("<ellipse")


def test_unknown_ids_are_empty(accessories: None) -> None:
    assert get_accessory("missing") is None
    assert get_accessory_defs("missing") == ""
    assert get_accessory_svg("missing") == ""


def test_parts_keep_order(accessories: None) -> None:
    defs, overlays = accessory_parts(["test-halo", "missing", "test-hat"])
    assert defs == '<linearGradient id="hatgrad"/>'
    assert overlays.index("<ellipse") < overlays.index("<path")
    assert accessory_parts(None) == ("", "")
    assert accessory_parts([]) == ("", "")


def test_register_rejects_non_accessory() -> None:
    with pytest.raises(TypeError):
        register_accessory("<g/>")  # type: ignore[arg-type]


def test_register_replaces_same_id(accessories: None) -> None:
    register_accessory(StaticAccessory(id="test-hat", markup="<g/>"))
    assert get_accessory_svg("test-hat") == "<g/>"
    assert get_accessory_defs("test-hat") == ""


def test_registry_changes_are_visible_to_later_renders() -> None:
    assert accessory_parts(["test-cape"]) == ("", "")
    register_accessory(StaticAccessory(id="test-cape", markup="<rect/>"))
    try:
        assert accessory_parts(["test-cape"]) == ("", "<rect/>")
    finally:
        unregister_accessory("test-cape")
    assert accessory_parts(["test-cape"]) == ("", "")
    unregister_accessory("test-cape")


def test_lookup_against_a_snapshot(accessories: None) -> None:
    snapshot = accessories_module._ACCESSORY_REGISTRY
    unregister_accessory("test-hat")
    assert get_accessory("test-hat") is None
    assert get_accessory("test-hat", snapshot) is not None
    assert "test-hat" in snapshot
