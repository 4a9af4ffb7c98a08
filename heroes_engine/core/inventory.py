"""
Inventory - ordered, type-constrained item container.
"""

from __future__ import annotations

import logging
from typing import Generic, Iterator, Optional, TypeVar

from heroes_engine.core.capabilities import Character, Item
from heroes_engine.core.narrator import narrate

logger = logging.getLogger(__name__)

TItem = TypeVar('TItem', bound=Item)
C = TypeVar('C')


class InventoryTypeError(TypeError):
    """Raised when an item type does not satisfy the inventory constraint."""


class Inventory(Generic[TItem]):
    """
    Ordered item container declared over a single item type.

    The declared type must be an Item capability (checked when the
    inventory is built), and every added item must be an instance of it.
    Items are only ever appended.

    Usage:
        inventory: Inventory[Item] = Inventory(Item)
        inventory.add_item(Sword())
        inventory.use_all_items(warrior)
    """

    def __init__(self, item_type: type[TItem] = Item):
        if not (isinstance(item_type, type) and issubclass(item_type, Item)):
            raise InventoryTypeError(
                f"Inventory item type must be an Item, got {item_type!r}"
            )
        self.item_type = item_type
        self._items: list[TItem] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[TItem]:
        return iter(self.get_all())

    def add_item(self, item: TItem) -> None:
        """
        Append an item.

        Raises:
            InventoryTypeError: If item is not an instance of item_type
        """
        if not isinstance(item, self.item_type):
            raise InventoryTypeError(
                f"{type(item).__name__} is not a {self.item_type.__name__}"
            )
        self._items.append(item)
        logger.debug("Added %s, inventory holds %d item(s)", item.item_name, len(self._items))
        narrate(f"Added {item.item_name} to inventory.")

    def use_all_items(self, character: Character) -> None:
        """Use every held item, in insertion order."""
        for item in self._items:
            item.use(character)

    def get_all(self) -> tuple[TItem, ...]:
        """
        Get a read-only snapshot of the held items.

        Returns:
            Items in insertion order
        """
        return tuple(self._items)

    def first_of_type(self, capability: type[C]) -> Optional[C]:
        """
        Find the first held item supporting a capability.

        Args:
            capability: Capability class to test against

        Returns:
            First matching item in insertion order, or None
        """
        for item in self._items:
            if isinstance(item, capability):
                return item
        return None
