# tests/utils/test_stacking.py

import pytest

from stack_inventory.utils.stacking import StoredItems, free_space, get_stored_items
from tests.test_utils import make_item


@pytest.mark.parametrize(
    "current, add, expected",
    [
        (0, 10, StoredItems(stored=10, remaining=0)),  # fits
        (60, 4, StoredItems(stored=64, remaining=0)),  # exactly fills
        (60, 10, StoredItems(stored=64, remaining=6)),  # overflows
        (64, 5, StoredItems(stored=64, remaining=5)),  # already full
        (10, 0, StoredItems(stored=10, remaining=0)),  # nothing to add
    ],
)
def test_get_stored_items(current: int, add: int, expected: StoredItems) -> None:
    assert get_stored_items(make_item("stone", 64), current, add) == expected


def test_get_stored_items_over_capacity_stack_takes_nothing() -> None:
    stored, remaining = get_stored_items(make_item("pearl", 16), 20, 3)
    assert stored == 20
    assert remaining == 3


def test_free_space() -> None:
    pearl = make_item("pearl", 16)
    assert free_space(pearl, 0) == 16
    assert free_space(pearl, 10) == 6
    assert free_space(pearl, 16) == 0
    assert free_space(pearl, 40) == 0
