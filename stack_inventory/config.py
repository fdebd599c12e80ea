"""Inventory configuration.

``InventoryConfig`` bundles the construction parameters a host usually keeps
in settings (slot count, a name used to tag log events) so inventories can be
built with :meth:`stack_inventory.inventory.Inventory.from_config`.
"""

import os
from dataclasses import dataclass

SIZE_ENV = "STACK_INVENTORY_SIZE"
DEFAULT_SIZE = 36


@dataclass(frozen=True)
class InventoryConfig:
    """Construction parameters for an :class:`Inventory`.

    Attributes:
        size: Initial slot count (positive).
        name: Label bound into the inventory's log events.
    """

    size: int = DEFAULT_SIZE
    name: str = "inventory"

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"Inventory size must be positive, got {self.size}")

    @classmethod
    def from_env(cls, name: str = "inventory") -> "InventoryConfig":
        """Build a config from ``STACK_INVENTORY_SIZE`` (falls back to the default size)."""
        raw = os.getenv(SIZE_ENV)
        if raw is None:
            return cls(name=name)
        try:
            size = int(raw)
        except ValueError:
            raise ValueError(f"{SIZE_ENV} must be an integer, got {raw!r}") from None
        return cls(size=size, name=name)
