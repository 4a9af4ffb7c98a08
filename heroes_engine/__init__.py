"""
Heroes Engine

Genre-neutral building blocks for the heroes demonstration:
capability contracts, a type-constrained inventory and console narration.

Quick Start:
    from heroes_engine.core import Inventory, Item

    inventory: Inventory[Item] = Inventory(Item)
    inventory.add_item(my_item)
    inventory.use_all_items(my_character)
"""

__version__ = "0.1.0"
__author__ = "Developer"

from heroes_engine.core import (
    Component,
    Character,
    Item,
    Equipable,
    Inventory,
    InventoryTypeError,
    Narrator,
    narrate,
    DemoConfig,
)

__all__ = [
    # Components
    "Component",
    # Capabilities
    "Character",
    "Item",
    "Equipable",
    # Inventory
    "Inventory",
    "InventoryTypeError",
    # Narration
    "Narrator",
    "narrate",
    # Config
    "DemoConfig",
]
