"""Common type aliases and the item capability contract.

``Item`` is the only thing the inventory needs to know about the host's item
catalogue: a stable identity and a per-kind stack size. Any object exposing
those two methods can be stored; the concrete :class:`stack_inventory.item.ItemKind`
is provided for convenience.

Two items are the *same kind* iff their ids compare equal. Object identity is
never consulted.
"""

from dataclasses import dataclass
from typing import Hashable, Protocol, runtime_checkable

ItemId = Hashable


@runtime_checkable
class Item(Protocol):
    """Capability interface required of anything stored in a slot."""

    def get_id(self) -> ItemId: ...

    def get_stack_size(self) -> int: ...


@dataclass(frozen=True)
class ItemQuantity:
    """An item kind paired with a unit count.

    Returned both for "this much was moved" and "this much is left over"; the
    call site decides which reading applies.

    Attributes:
        item: Item kind.
        quantity: Number of units.
    """

    item: Item
    quantity: int


def same_kind(a: Item, b: Item) -> bool:
    """Return True if ``a`` and ``b`` share an item id."""
    return a.get_id() == b.get_id()


def check_quantity(quantity: int) -> None:
    """Reject negative quantities passed to quantity-moving operations."""
    if quantity < 0:
        raise ValueError(f"Quantity must be non-negative, got {quantity}")
