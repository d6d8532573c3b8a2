import pytest

from slime_sprite.config import RenderConfig


def test_defaults() -> None:
    config = RenderConfig.from_env({})
    assert config == RenderConfig(full_size=240, icon_size=40, data_uri=True)


def test_from_env_overrides() -> None:
    config = RenderConfig.from_env(
        {
            "SLIME_SPRITE_FULL_SIZE": "480",
            "SLIME_SPRITE_ICON_SIZE": " 24 ",
            "SLIME_SPRITE_DATA_URI": "off",
        }
    )
    assert config == RenderConfig(full_size=480, icon_size=24, data_uri=False)


@pytest.mark.parametrize("raw", ["1", "yes", "TRUE", "anything"])
def test_data_uri_truthy(raw: str) -> None:
    assert RenderConfig.from_env({"SLIME_SPRITE_DATA_URI": raw}).data_uri is True


@pytest.mark.parametrize("raw", ["0", "-5", "big"])
def test_invalid_size_raises(raw: str) -> None:
    with pytest.raises(ValueError):
        RenderConfig.from_env({"SLIME_SPRITE_FULL_SIZE": raw})


def test_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SLIME_SPRITE_ICON_SIZE", "32")
    assert RenderConfig.from_env().icon_size == 32
