"""stack_inventory
=================

Slot-based, item-stacking inventory for crafting/survival style games.

The public surface is re-exported here so hosts can import from one place::

    from stack_inventory import Inventory, ItemKind

    inventory = Inventory(9)
    surplus = inventory.add_item(ItemKind("cobblestone"), 100)

:class:`Slot` holds the per-slot stacking arithmetic (merge, extract, swap);
:class:`Inventory` owns an ordered list of slots and the placement policy
built on top of them. Items are anything satisfying the :class:`Item`
protocol (an id and a stack size).
"""

from .config import InventoryConfig
from .inventory import Inventory
from .item import ItemKind
from .slot import Slot
from .types import Item, ItemId, ItemQuantity

__all__ = [
    "Inventory",
    "InventoryConfig",
    "Item",
    "ItemId",
    "ItemKind",
    "ItemQuantity",
    "Slot",
]
