import os
import sys
import pytest

# Ensure packages can be imported without installation
sys.path.append(os.getcwd())


@pytest.fixture
def lines(capsys):
    """Return a callable yielding the stdout lines written so far."""
    def read():
        return capsys.readouterr().out.splitlines()
    return read

@pytest.fixture
def warrior():
    from heroes.characters import Warrior
    return Warrior(name="Aragorn")

@pytest.fixture
def mage():
    from heroes.characters import Mage
    return Mage(name="Gandalf")

@pytest.fixture
def inventory():
    """Fresh inventory of plain items."""
    from heroes_engine.core.capabilities import Item
    from heroes_engine.core.inventory import Inventory
    return Inventory(Item)
