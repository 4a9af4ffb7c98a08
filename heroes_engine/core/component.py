"""
Component base class for immutable, data-like game objects.

Characters and items are plain data with a little behaviour attached.
Building them on Pydantic gives:
- Validation of constructor arguments
- Immutability after construction (frozen models)
- Readable reprs and value equality

Usage:
    class Warrior(Component, Character):
        name: str

        def use_ability(self) -> None:
            ...
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Component(BaseModel):
    """
    Base class for all characters and items.

    Components are frozen: assigning to a field after construction
    raises a ValidationError. Capability contracts (Character, Item,
    Equipable) are mixed in next to this base.
    """

    model_config = ConfigDict(
        # Allow arbitrary types (capability-typed fields)
        arbitrary_types_allowed=True,
        # Immutable after construction
        frozen=True,
        # Reject unknown fields
        extra='forbid',
    )
