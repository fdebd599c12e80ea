"""Slot-based stacking inventory.

An :class:`Inventory` owns an ordered list of :class:`Slot` objects addressed
by index ``0..size()-1``. Slot-level arithmetic lives in
:mod:`stack_inventory.slot`; this module adds the cross-slot policies:

* Placement (:meth:`Inventory.add_item`) is *merge first*: units go onto
  existing stacks of the same kind in index order, then into empty slots in
  index order. Whatever still does not fit is returned as an
  ``ItemQuantity`` surplus. Placement is not atomic; every unit stored before
  the inventory ran out of room stays stored.
* Shrinking (:meth:`Inventory.resize`) evicts the trailing slots and hands
  them to the caller, contents included. Nothing is dropped silently.
* Index lookups outside ``0..size()-1`` (negative indices included) return
  None instead of raising.

Query helpers return ``PVector`` snapshots so callers cannot reorder or
truncate the inventory's own slot list through them.
"""

from typing import Callable, Iterator, List, Optional, TypeVar

from pyrsistent import pvector
from pyrsistent.typing import PVector
from structlog.stdlib import BoundLogger

from stack_inventory.config import InventoryConfig
from stack_inventory.slot import Slot
from stack_inventory.types import Item, ItemQuantity, check_quantity
from stack_inventory.utils.logging import get_logger

logger = get_logger(__name__)

V = TypeVar("V")


class Inventory:
    """Fixed-length sequence of item slots.

    Attributes:
        slots: Slots in index order. Owned by the inventory; do not keep
            references to slots across a shrinking :meth:`resize`.
        name: Label bound into log events.
    """

    def __init__(self, inventory_size: int, name: str = "inventory"):
        if inventory_size < 0:
            raise ValueError(f"Inventory size must be non-negative, got {inventory_size}")
        self.name = name
        self.slots: List[Slot] = []
        for _ in range(inventory_size):
            self.add_slot()

    @classmethod
    def from_config(cls, config: InventoryConfig) -> "Inventory":
        return cls(config.size, name=config.name)

    def __len__(self) -> int:
        return len(self.slots)

    def __iter__(self) -> Iterator[Slot]:
        return iter(self.slots)

    def __repr__(self) -> str:
        return f"Inventory(name={self.name!r}, size={self.size()}, used={len(self.get_items())})"

    def size(self) -> int:
        return len(self.slots)

    @property
    def _log(self) -> BoundLogger:
        return logger.bind(inventory=self.name)

    # -------- Structure --------

    def add_slot(self, item: Optional[Item] = None, quantity: int = 1) -> Optional[ItemQuantity]:
        """Append a slot at index ``size()``.

        With ``item`` given, the new slot is filled as by :meth:`Slot.set_item`
        and any units beyond the stack size are returned.
        """
        slot = Slot(len(self.slots))
        self.slots.append(slot)
        if item is None:
            return None

        remaining = slot.set_item(item, quantity)
        if remaining > 0:
            return ItemQuantity(item, remaining)
        return None

    def resize(self, new_size: int) -> PVector[Slot]:
        """Grow or shrink to ``new_size`` slots.

        Returns the evicted slots (in their original order) when shrinking,
        otherwise an empty vector. Surviving slots keep their indices.
        """
        if new_size < 0:
            raise ValueError(f"Inventory size must be non-negative, got {new_size}")

        current = self.size()
        if new_size < current:
            evicted = pvector(self.slots[new_size:])
            del self.slots[new_size:]
            occupied = sum(1 for slot in evicted if slot.has_item())
            if occupied:
                self._log.info(
                    "Evicted occupied slots on shrink",
                    old_size=current,
                    new_size=new_size,
                    occupied=occupied,
                )
            else:
                self._log.debug("Inventory shrunk", old_size=current, new_size=new_size)
            return evicted

        if new_size > current:
            for _ in range(new_size - current):
                self.add_slot()
            self._log.debug("Inventory grown", old_size=current, new_size=new_size)

        return pvector()

    # -------- Lookup --------

    def get_item(self, index: int) -> Optional[Slot]:
        """Return the slot at ``index`` or None when out of range."""
        if 0 <= index < len(self.slots):
            return self.slots[index]
        return None

    def get_items(self) -> PVector[Slot]:
        """Occupied slots in index order."""
        return self.filter(lambda slot, _: slot.has_item())

    def get_empty_slots(self) -> PVector[Slot]:
        return self.filter(lambda slot, _: not slot.has_item())

    def get_slots_with_item(self, item: Item) -> PVector[Slot]:
        """Slots holding the same kind as ``item``, in index order."""
        return self.filter(lambda slot, _: slot.holds(item))

    def count_item(self, item: Item) -> int:
        """Total units of ``item``'s kind across all slots."""
        return sum(slot.quantity for slot in self.get_slots_with_item(item))

    def map(self, fn: Callable[[Slot, int], V]) -> PVector[V]:
        return pvector(fn(slot, index) for index, slot in enumerate(self.slots))

    def filter(self, fn: Callable[[Slot, int], bool]) -> PVector[Slot]:
        return pvector(slot for index, slot in enumerate(self.slots) if fn(slot, index))

    # -------- Item movement --------

    def take_item(self, index: int, quantity: int) -> Optional[ItemQuantity]:
        """Extract up to ``quantity`` units from the slot at ``index``.

        Returns None when the index is out of range or the slot is empty.
        """
        check_quantity(quantity)
        slot = self.get_item(index)
        if slot is None:
            return None
        return slot.extract(quantity)

    def add_item(self, item: Item, quantity: int) -> Optional[ItemQuantity]:
        """Place ``quantity`` units of ``item``.

        1. Top up slots already holding the kind, in index order.
        2. Fill empty slots, in index order.
        3. Return whatever is left as ``ItemQuantity``; None means everything
           was placed.
        """
        check_quantity(quantity)
        remaining = quantity

        for slot in self.get_slots_with_item(item):
            remaining = slot.add(remaining)
            if remaining == 0:
                self._log.debug("Item merged", item_id=item.get_id(), quantity=quantity)
                return None

        # Then empty slots, in index order
        for slot in self.get_empty_slots():
            remaining = slot.set_item(item, remaining)
            if remaining == 0:
                self._log.debug("Item placed", item_id=item.get_id(), quantity=quantity)
                return None

        self._log.info(
            "Inventory full, returning surplus",
            item_id=item.get_id(),
            requested=quantity,
            surplus=remaining,
        )
        return ItemQuantity(item, remaining)

    def remove_item(self, item: Item, quantity: int) -> Optional[ItemQuantity]:
        """Remove up to ``quantity`` units of ``item``'s kind.

        Stacks are drained from the highest index down, so the slots
        :meth:`add_item` fills first are the last to empty. Returns the units
        removed, or None when the kind is not held at all.
        """
        check_quantity(quantity)
        slots = self.get_slots_with_item(item)
        if not slots:
            return None

        removed = 0
        for slot in reversed(slots):
            if removed >= quantity:
                break
            taken = slot.extract(quantity - removed)
            if taken is not None:
                removed += taken.quantity
        return ItemQuantity(item, removed)

    def swap_slots(self, i: int, j: int) -> bool:
        """Exchange the contents of slots ``i`` and ``j``; indices stay put."""
        first, second = self.get_item(i), self.get_item(j)
        if first is None or second is None:
            return False
        if first is second:
            return True

        first_stack, second_stack = first.clear(), second.clear()
        if second_stack is not None:
            first.swap_or_store(second_stack.item, second_stack.quantity)
        if first_stack is not None:
            second.swap_or_store(first_stack.item, first_stack.quantity)
        return True

    def move_item(self, src: int, dst: int, quantity: int) -> bool:
        """Drag up to ``quantity`` units from slot ``src`` onto slot ``dst``.

        The dragged units are dropped with :meth:`Slot.swap_or_store`; any
        leftover, or the stack displaced from ``dst``, goes back onto ``src``.
        A partial stack is never swapped with a different kind. Returns False,
        with nothing moved, when the move is not possible.
        """
        check_quantity(quantity)
        source, target = self.get_item(src), self.get_item(dst)
        if source is None or target is None or source is target:
            return False
        if source.item is None or quantity == 0:
            return False
        if (
            target.item is not None
            and not target.holds(source.item)
            and quantity < source.quantity
        ):
            return False

        held = source.extract(quantity)
        if held is None:
            return False
        back = target.swap_or_store(held.item, held.quantity)
        if back is not None and back.quantity > 0:
            source.swap_or_store(back.item, back.quantity)
        return True
