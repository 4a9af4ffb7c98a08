"""
Character manager - drives one character and its inventory service.
"""

from __future__ import annotations

import logging

from heroes_engine.core.capabilities import Character, Item
from heroes.items import Sword, Spellbook
from heroes.services import InventoryServiceBase

logger = logging.getLogger(__name__)


class CharacterManager:
    """
    Orchestrates a character and an inventory service.

    Depends only on the Character and InventoryServiceBase contracts,
    never on concrete classes.
    """

    def __init__(self, character: Character, inventory_service: InventoryServiceBase[Item]):
        self.character = character
        self.inventory_service = inventory_service

    def perform_actions(self) -> None:
        """
        Use the character's ability, stock two items, then use everything.

        Ability use and item setup share one method on purpose; this is
        the demonstration's single-responsibility counterexample.
        """
        logger.debug("Performing actions for %s", self.character.name)
        self.character.use_ability()
        self.inventory_service.add_item(Sword())
        self.inventory_service.add_item(Spellbook())
        self.inventory_service.use_all_items(self.character)
