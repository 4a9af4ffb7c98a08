"""
Inventory services - the abstraction managers depend on.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic

from heroes_engine.core.capabilities import Character
from heroes_engine.core.inventory import Inventory, TItem


class InventoryServiceBase(ABC, Generic[TItem]):
    """Abstract item-management service."""

    @abstractmethod
    def add_item(self, item: TItem) -> None:
        """Add an item."""
        pass

    @abstractmethod
    def use_all_items(self, character: Character) -> None:
        """Use every item on behalf of a character."""
        pass


class InventoryService(InventoryServiceBase[TItem]):
    """Forwards every call to a wrapped Inventory."""

    def __init__(self, inventory: Inventory[TItem]):
        self._inventory = inventory

    @property
    def inventory(self) -> Inventory[TItem]:
        """Get the wrapped inventory."""
        return self._inventory

    def add_item(self, item: TItem) -> None:
        self._inventory.add_item(item)

    def use_all_items(self, character: Character) -> None:
        self._inventory.use_all_items(character)
