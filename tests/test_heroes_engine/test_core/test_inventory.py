import logging
import pytest
from heroes_engine.core.capabilities import Equipable, Item
from heroes_engine.core.inventory import Inventory, InventoryTypeError
from heroes.items import Armor, Enhanced, Spellbook, Sword


def test_add_item_announces(inventory, lines):
    inventory.add_item(Sword())
    assert lines() == ["Added Sword to inventory."]
    assert len(inventory) == 1

def test_get_all_preserves_insertion_order(inventory, lines):
    items = [Spellbook(), Armor(), Sword()]
    for item in items:
        inventory.add_item(item)

    snapshot = inventory.get_all()
    assert list(snapshot) == items
    assert [i.item_name for i in snapshot] == ["Spellbook", "Armor", "Sword"]

def test_get_all_does_not_mutate(inventory, lines):
    inventory.add_item(Sword())
    first = inventory.get_all()
    second = inventory.get_all()
    assert first == second
    assert isinstance(first, tuple)
    assert len(inventory) == 1
    lines()

    # Nothing is narrated by inspection
    list(inventory)
    assert lines() == []

@pytest.mark.parametrize("count", [0, 1, 5, 12])
def test_use_all_items_once_each_in_order(inventory, warrior, lines, count):
    kinds = [Sword, Spellbook, Armor]
    for i in range(count):
        inventory.add_item(kinds[i % 3]())
    lines()

    inventory.use_all_items(warrior)
    output = lines()

    expected = {
        "Sword": "Aragorn slashes with Sword!",
        "Spellbook": "Aragorn casts a spell from Spellbook!",
        "Armor": "Aragorn wears Armor for protection.",
    }
    assert len(output) == count
    assert output == [expected[i.item_name] for i in inventory.get_all()]

def test_use_all_items_empty_is_silent(inventory, warrior, lines):
    inventory.use_all_items(warrior)
    assert lines() == []

def test_first_of_type(inventory, lines):
    armor = Armor()
    inventory.add_item(Sword())
    inventory.add_item(armor)
    inventory.add_item(Armor())

    assert inventory.first_of_type(Equipable) is armor
    assert inventory.first_of_type(Enhanced) is None

def test_constructor_rejects_non_item_type():
    with pytest.raises(InventoryTypeError):
        Inventory(str)

    with pytest.raises(InventoryTypeError):
        Inventory("Sword")

def test_add_rejects_non_conforming_item(lines):
    swords: Inventory[Sword] = Inventory(Sword)
    swords.add_item(Sword())
    lines()

    with pytest.raises(InventoryTypeError):
        swords.add_item(Spellbook())

    # Rejected items are neither stored nor announced
    assert len(swords) == 1
    assert lines() == []

def test_add_rejects_plain_object(inventory):
    with pytest.raises(TypeError):
        inventory.add_item(object())
    assert len(inventory) == 0

def test_default_item_type_is_item():
    assert Inventory().item_type is Item

def test_add_item_logs_item_name(inventory, caplog):
    with caplog.at_level(logging.DEBUG, logger="heroes_engine.core.inventory"):
        inventory.add_item(Spellbook())

    assert "Added Spellbook, inventory holds 1 item(s)" in caplog.text
