"""
Heroes module.

A small characters-and-items demonstration built on heroes_engine:
- Characters (warriors, mages)
- Items (swords, spellbooks, armor, enhancements)
- Inventory services and the character manager
- Scripted scenarios
"""

from heroes.characters import Hero, Warrior, Mage
from heroes.items import Sword, Spellbook, Armor, Enhanced
from heroes.services import InventoryServiceBase, InventoryService
from heroes.manager import CharacterManager

__all__ = [
    # Characters
    "Hero",
    "Warrior",
    "Mage",
    # Items
    "Sword",
    "Spellbook",
    "Armor",
    "Enhanced",
    # Services
    "InventoryServiceBase",
    "InventoryService",
    "CharacterManager",
]
