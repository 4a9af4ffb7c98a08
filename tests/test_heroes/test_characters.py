from heroes_engine.core.capabilities import Character
from heroes_engine.core.narrator import narrate
from heroes.characters import Hero, Mage, Warrior


def test_warrior_ability(warrior, lines):
    warrior.use_ability()
    assert lines() == ["Aragorn swings a mighty sword!"]

def test_mage_ability(mage, lines):
    mage.use_ability()
    assert lines() == ["Gandalf casts a fireball spell!"]

def test_characters_share_contract(warrior, mage):
    for character in (warrior, mage):
        assert isinstance(character, Character)
        assert isinstance(character, Hero)

def test_new_variant_without_touching_existing(lines):
    class Rogue(Hero):
        def use_ability(self) -> None:
            narrate(f"{self.name} vanishes into the shadows!")

    Rogue(name="Bilbo").use_ability()
    assert lines() == ["Bilbo vanishes into the shadows!"]

def test_characters_compare_by_value():
    assert Warrior(name="Aragorn") == Warrior(name="Aragorn")
    assert Warrior(name="Aragorn") != Mage(name="Aragorn")
