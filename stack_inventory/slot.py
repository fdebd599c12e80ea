"""Single inventory slot.

A slot is either *Empty* or *Occupied* by one stack. The stack is kept in a
single ``ItemQuantity`` field (``None`` when empty), so the item and its count
always change together; ``item`` and ``quantity`` are read-only views of it.
A stack drained to zero units is dropped, which means an empty slot always
reports ``item is None`` and ``quantity == 0``.

Merge operations (``add``, ``set_item``, ``swap_or_store``) never grow a stack
past the item's stack size and report the units that did not fit. ``swap_item``
is the one unguarded write: it installs whatever it is given.
"""

from typing import Optional

from stack_inventory.types import Item, ItemQuantity, check_quantity, same_kind
from stack_inventory.utils.stacking import free_space, get_stored_items


class Slot:
    """One position of an inventory.

    Attributes:
        index: Position within the owning inventory.
    """

    def __init__(self, index: int, item: Optional[Item] = None, quantity: int = 0):
        self.index = index
        self._stack: Optional[ItemQuantity] = None
        if item is not None:
            self.set_item(item, quantity)

    @classmethod
    def create(cls, index: int, item: Optional[Item] = None, quantity: int = 0) -> "Slot":
        return cls(index, item, quantity)

    def __repr__(self) -> str:
        if self._stack is None:
            return f"Slot(index={self.index}, empty)"
        return (
            f"Slot(index={self.index}, item={self._stack.item!r}, "
            f"quantity={self._stack.quantity})"
        )

    # -------- Views --------

    @property
    def item(self) -> Optional[Item]:
        return None if self._stack is None else self._stack.item

    @property
    def quantity(self) -> int:
        return 0 if self._stack is None else self._stack.quantity

    @property
    def stack(self) -> Optional[ItemQuantity]:
        """Current contents, or None when empty."""
        return self._stack

    def get_index(self) -> int:
        return self.index

    def has_item(self) -> bool:
        return self._stack is not None

    def is_filled(self) -> bool:
        """True if the stack is at its item's stack size. Empty slots are never filled."""
        if self._stack is None:
            return False
        return self._stack.quantity == self._stack.item.get_stack_size()

    def holds(self, item: Item) -> bool:
        """True if the slot is occupied by the same kind as ``item``."""
        return self._stack is not None and same_kind(self._stack.item, item)

    def free_space(self) -> int:
        if self._stack is None:
            return 0
        return free_space(self._stack.item, self._stack.quantity)

    # -------- Mutation --------

    def _store(self, item: Item, quantity: int) -> None:
        self._stack = ItemQuantity(item, quantity) if quantity > 0 else None

    def add(self, q: int) -> int:
        """Merge ``q`` more units into the existing stack.

        Returns the units that did not fit. An empty or filled slot takes
        nothing and returns ``q`` unchanged; use :meth:`set_item` to place a
        first item.
        """
        check_quantity(q)
        if self._stack is None or self.is_filled():
            return q

        stored, remaining = get_stored_items(self._stack.item, self._stack.quantity, q)
        self._store(self._stack.item, stored)
        return remaining

    def extract(self, q: int) -> Optional[ItemQuantity]:
        """Remove up to ``q`` units.

        Returns the units actually removed, which is less than ``q`` when the
        stack is smaller; taking the whole stack empties the slot. Returns
        None for an empty slot.
        """
        check_quantity(q)
        if self._stack is None:
            return None

        if q >= self._stack.quantity:
            removed = self._stack
            self._stack = None
            return removed

        self._store(self._stack.item, self._stack.quantity - q)
        return ItemQuantity(self._stack.item, q)

    def clear(self) -> Optional[ItemQuantity]:
        """Empty the slot and return what it held."""
        removed = self._stack
        self._stack = None
        return removed

    def set_item(self, item: Item, quantity: int) -> int:
        """Place ``quantity`` units of ``item``, merging with same-kind contents.

        An empty slot adopts ``item``. A slot holding a different kind is left
        untouched and the full ``quantity`` is returned. Otherwise returns the
        units that did not fit.
        """
        check_quantity(quantity)
        if self._stack is None:
            stored, remaining = get_stored_items(item, 0, quantity)
            self._store(item, stored)
            return remaining

        if not same_kind(self._stack.item, item):
            return quantity

        stored, remaining = get_stored_items(item, self._stack.quantity, quantity)
        self._store(self._stack.item, stored)
        return remaining

    def swap_item(self, item: Item, quantity: int) -> Optional[ItemQuantity]:
        """Replace the contents with ``(item, quantity)`` and return the old ones.

        An empty slot rejects the swap: it stays empty and the input is handed
        back. No capacity check is made against ``item``'s stack size.
        """
        check_quantity(quantity)
        if self._stack is None:
            return ItemQuantity(item, quantity)

        previous = self._stack
        self._store(item, quantity)
        return previous

    def swap_or_store(self, item: Item, quantity: int) -> Optional[ItemQuantity]:
        """Drop a held stack onto this slot.

        - Empty slot: stores the stack, returns None.
        - Same kind: merges up to the stack size, returns ``(item, leftover)``
          with whatever is still held (possibly 0 units).
        - Different kind: swaps, returns the stack that was in the slot.
        """
        check_quantity(quantity)
        if self._stack is None:
            self._store(item, quantity)
            return None

        if same_kind(self._stack.item, item):
            stored, remaining = get_stored_items(item, self._stack.quantity, quantity)
            self._store(self._stack.item, stored)
            return ItemQuantity(item, remaining)

        previous = self._stack
        self._store(item, quantity)
        return previous
