"""
Scenario driver - the two scripted demonstration runs.

Each scenario wires concrete characters, inventories and services
together, then hands control to a CharacterManager.
"""

from __future__ import annotations

import logging
from typing import Optional

from heroes_engine.core.capabilities import Character, Equipable, Item
from heroes_engine.core.config import DemoConfig
from heroes_engine.core.inventory import Inventory
from heroes_engine.core.narrator import narrate
from heroes.characters import Mage, Warrior
from heroes.items import Armor, Enhanced, Sword
from heroes.manager import CharacterManager
from heroes.services import InventoryService

logger = logging.getLogger(__name__)


def equip_first_equipable(inventory: Inventory[Item], character: Character) -> Optional[Equipable]:
    """
    Equip the first equipable item in an inventory.

    Args:
        inventory: Inventory to search, in insertion order
        character: Character equipping the item

    Returns:
        The equipped item, or None if nothing was equipable
    """
    equipable = inventory.first_of_type(Equipable)
    if equipable is None:
        logger.debug("No equipable item for %s", character.name)
        return None
    equipable.equip(character)
    return equipable


def run_warrior_scenario(config: DemoConfig) -> Inventory[Item]:
    """Warrior with a plain, initially empty inventory."""
    logger.debug("Starting warrior scenario")
    warrior = Warrior(name=config.warrior_name)
    warrior_inventory: Inventory[Item] = Inventory(Item)
    warrior_service = InventoryService(warrior_inventory)
    warrior_manager = CharacterManager(warrior, warrior_service)

    narrate("Warrior Actions:")
    warrior_manager.perform_actions()
    return warrior_inventory


def run_mage_scenario(config: DemoConfig) -> Inventory[Item]:
    """Mage with a pre-loaded enhanced sword and armor, then equips armor."""
    logger.debug("Starting mage scenario")
    mage = Mage(name=config.mage_name)
    mage_inventory: Inventory[Item] = Inventory(Item)
    mage_service = InventoryService(mage_inventory)
    mage_service.add_item(Enhanced(base_item=Sword()))
    mage_service.add_item(Armor())
    mage_manager = CharacterManager(mage, mage_service)

    narrate()
    narrate("Mage Actions:")
    mage_manager.perform_actions()

    equip_first_equipable(mage_inventory, mage)
    return mage_inventory


def run_all(config: DemoConfig | None = None) -> None:
    """Run both scenarios in order."""
    config = config or DemoConfig()
    run_warrior_scenario(config)
    run_mage_scenario(config)
