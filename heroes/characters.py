"""
Character variants - warriors and mages.
"""

from __future__ import annotations

from heroes_engine.core.component import Component
from heroes_engine.core.capabilities import Character
from heroes_engine.core.narrator import narrate


class Hero(Component, Character):
    """
    Shared data for playable characters.

    Attributes:
        name: Display name
    """
    name: str


class Warrior(Hero):
    """Melee fighter."""

    def use_ability(self) -> None:
        narrate(f"{self.name} swings a mighty sword!")


class Mage(Hero):
    """Spellcaster."""

    def use_ability(self) -> None:
        narrate(f"{self.name} casts a fireball spell!")
