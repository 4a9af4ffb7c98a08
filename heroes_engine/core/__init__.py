"""
Core module.

Exports:
- Component: Frozen data base
- Character, Item, Equipable: Capability contracts
- Inventory, InventoryTypeError: Type-constrained item container
- Narrator, narrate: Console narration
- DemoConfig: Run configuration
"""

from heroes_engine.core.component import Component
from heroes_engine.core.capabilities import Character, Item, Equipable
from heroes_engine.core.inventory import Inventory, InventoryTypeError
from heroes_engine.core.narrator import Narrator, narrate, get_narrator, set_narrator
from heroes_engine.core.config import DemoConfig

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
    "get_narrator",
    "set_narrator",
    # Config
    "DemoConfig",
]
