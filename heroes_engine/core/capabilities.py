"""
Capability contracts.

Each capability is a small abstract base class. Concrete variants mix in
only the capabilities they actually support, so an item that cannot be
equipped never has to pretend it can.

- Character: has a name, can use an ability
- Item: has a display name, can be used by a character
- Equipable: can be equipped by a character
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Character(ABC):
    """
    A playable entity.

    Implementations provide a ``name`` attribute.
    """

    name: str

    @abstractmethod
    def use_ability(self) -> None:
        """Perform the character's signature ability."""
        pass


class Item(ABC):
    """A possession that a character can use."""

    @property
    @abstractmethod
    def item_name(self) -> str:
        """Display name of the item."""
        pass

    @abstractmethod
    def use(self, character: Character) -> None:
        """
        Use the item.

        Args:
            character: The acting character
        """
        pass


class Equipable(ABC):
    """Capability for items that can be worn or wielded."""

    @abstractmethod
    def equip(self, character: Character) -> None:
        """
        Equip the item on a character.

        Args:
            character: The character equipping the item
        """
        pass


def require_character(character: Character | None) -> Character:
    """Reject a missing acting character."""
    if character is None:
        raise TypeError("An acting character is required")
    return character
