"""Stack capacity arithmetic shared by the slot merge operations."""

from typing import NamedTuple

from stack_inventory.types import Item


class StoredItems(NamedTuple):
    """Outcome of merging units into a stack.

    Attributes:
        stored: New stack quantity after the merge.
        remaining: Units that did not fit.
    """

    stored: int
    remaining: int


def free_space(item: Item, current_quantity: int) -> int:
    """Return how many more units of ``item`` fit on a stack of ``current_quantity``."""
    return max(0, item.get_stack_size() - current_quantity)


def get_stored_items(item: Item, current_quantity: int, add_quantity: int) -> StoredItems:
    """Return how a merge of ``add_quantity`` onto ``current_quantity`` splits.

    The stack never grows past ``item.get_stack_size()``; whatever does not
    fit is reported as ``remaining``. ``stored + remaining`` always equals
    ``current_quantity + add_quantity`` when the stack starts within capacity.
    """
    taken = min(add_quantity, free_space(item, current_quantity))
    return StoredItems(stored=current_quantity + taken, remaining=add_quantity - taken)
