"""Ready-made item kind.

Hosts with their own item classes only need to satisfy
:class:`stack_inventory.types.Item`; this frozen value object covers the
common case of a static catalogue keyed by id.
"""

from dataclasses import dataclass
from typing import Optional

from stack_inventory.types import ItemId

DEFAULT_STACK_SIZE = 64


@dataclass(frozen=True)
class ItemKind:
    """Immutable item definition.

    Attributes:
        item_id: Stable identity shared by every unit of this kind.
        stack_size: Maximum units one slot can hold (positive).
        name: Optional display name; not part of the kind's identity.
    """

    item_id: ItemId
    stack_size: int = DEFAULT_STACK_SIZE
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if self.stack_size <= 0:
            raise ValueError(
                f"Item {self.item_id!r} has non-positive stack size: {self.stack_size}"
            )

    def get_id(self) -> ItemId:
        return self.item_id

    def get_stack_size(self) -> int:
        return self.stack_size
