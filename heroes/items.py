"""
Item variants - weapons, books, armor and enhancements.

Adding a new item means adding a new class here; the inventory and
services never change.
"""

from __future__ import annotations

from typing import Generic

from heroes_engine.core.component import Component
from heroes_engine.core.capabilities import Character, Equipable, Item, require_character
from heroes_engine.core.inventory import TItem
from heroes_engine.core.narrator import narrate


class Sword(Component, Item):
    """Basic blade."""

    @property
    def item_name(self) -> str:
        return "Sword"

    def use(self, character: Character) -> None:
        character = require_character(character)
        narrate(f"{character.name} slashes with {self.item_name}!")


class Spellbook(Component, Item):
    """Tome of spells."""

    @property
    def item_name(self) -> str:
        return "Spellbook"

    def use(self, character: Character) -> None:
        character = require_character(character)
        narrate(f"{character.name} casts a spell from {self.item_name}!")


class Armor(Component, Item, Equipable):
    """Body armor. The only item that is both usable and equipable."""

    @property
    def item_name(self) -> str:
        return "Armor"

    def use(self, character: Character) -> None:
        character = require_character(character)
        narrate(f"{character.name} wears {self.item_name} for protection.")

    def equip(self, character: Character) -> None:
        character = require_character(character)
        narrate(f"{character.name} equips {self.item_name}.")


class Enhanced(Component, Item, Generic[TItem]):
    """
    Decorator that powers up another item.

    Wraps any Item by composition and can stand in wherever a plain
    item is expected. Using it announces the extra power, then uses
    the wrapped item.

    Attributes:
        base_item: The wrapped item

    Example:
        inventory.add_item(Enhanced(base_item=Sword()))
    """
    base_item: TItem

    @property
    def item_name(self) -> str:
        return f"Enhanced {self.base_item.item_name}"

    def use(self, character: Character) -> None:
        character = require_character(character)
        narrate(f"{character.name} uses {self.item_name} with extra power!")
        self.base_item.use(character)
