import pytest
from gwint.game import Game
from gwint.engine.state import Row, RowCategory


@pytest.fixture
def game():
    return Game(("P1 name", "P2 name"))


@pytest.fixture
def p1(game):
    return "P1"


@pytest.fixture
def p2(game):
    return "P2"


@pytest.fixture
def make_row():
    """Build a Row from cards: make_row(Card(5), Card(3), horn=True)."""
    def _make(*cards, horn=False, category=RowCategory.MELEE):
        return Row(category, tuple(cards), horn)
    return _make


def pytest_configure(config):
    config.addinivalue_line("markers", "scenario: end-to-end scoring scenarios through Game")
