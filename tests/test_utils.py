from typing import Iterable, Tuple

from stack_inventory import Inventory, ItemKind, Slot
from stack_inventory.types import Item


def make_item(item_id: str = "stone", stack_size: int = 64) -> ItemKind:
    return ItemKind(item_id=item_id, stack_size=stack_size)


def make_slot(item: Item | None = None, quantity: int = 0, index: int = 0) -> Slot:
    """Slot at ``index`` holding ``quantity`` units of ``item`` (empty if None)."""
    return Slot.create(index, item, quantity)


def make_inventory(size: int, contents: Iterable[Tuple[int, Item, int]] = ()) -> Inventory:
    """Inventory of ``size`` slots with ``(index, item, quantity)`` entries placed directly."""
    inventory = Inventory(size)
    for index, item, quantity in contents:
        slot = inventory.get_item(index)
        assert slot is not None
        assert slot.set_item(item, quantity) == 0
    return inventory


def assert_empty_invariant(inventory: Inventory) -> None:
    for slot in inventory:
        if not slot.has_item():
            assert slot.quantity == 0
            assert slot.item is None
