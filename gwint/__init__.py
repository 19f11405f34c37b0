# gwint/__init__.py

"""
Gwint - score calculator
This package contains the scoring engine and a thin console front end
for tallying a two-player, three-row Gwint match.
"""

__version__ = "0.1.0"

from .model.card import Card
from .engine.state import RowCategory, Row, WeatherState, PlayerState, MatchState
from .engine.scoring import Standing, compare, row_total, player_total
from .game import Game

__all__ = [
    "Card",
    "RowCategory",
    "Row",
    "WeatherState",
    "PlayerState",
    "MatchState",
    "Standing",
    "compare",
    "row_total",
    "player_total",
    "Game",
]
