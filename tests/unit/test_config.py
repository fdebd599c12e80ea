# tests/unit/test_config.py

import pytest

from stack_inventory import InventoryConfig
from stack_inventory.config import DEFAULT_SIZE, SIZE_ENV


def test_default_config() -> None:
    config = InventoryConfig()
    assert config.size == DEFAULT_SIZE
    assert config.name == "inventory"


@pytest.mark.parametrize("size", [0, -3])
def test_config_rejects_non_positive_size(size: int) -> None:
    with pytest.raises(ValueError):
        InventoryConfig(size=size)


def test_from_env_reads_size(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(SIZE_ENV, "27")
    config = InventoryConfig.from_env(name="chest")
    assert config.size == 27
    assert config.name == "chest"


def test_from_env_without_variable_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(SIZE_ENV, raising=False)
    assert InventoryConfig.from_env().size == DEFAULT_SIZE


def test_from_env_rejects_garbage(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(SIZE_ENV, "lots")
    with pytest.raises(ValueError):
        InventoryConfig.from_env()
