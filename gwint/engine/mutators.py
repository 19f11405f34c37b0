"""
The only write paths into the data model.

Each function takes a snapshot and returns a new one; nothing is modified
in place, so a caller holding the old value keeps seeing the old state.
"""

from dataclasses import replace
from typing import Optional, Sequence

from gwint import config
from gwint.model.card import Card
from gwint.engine.state import (
    MatchState,
    PlayerState,
    Row,
    RowCategory,
    WeatherState,
)

PLAYER_IDS = ("P1", "P2")


def add_card(row: Row, card: Card) -> Row:
    if row.find(card.id) is not None:
        raise ValueError(f"card id {card.id} already in {row.category.value} row")
    return replace(row, cards=row.cards + (card,))


def remove_card(row: Row, card_id: str) -> Row:
    """Drop the card with `card_id`; an unknown id returns `row` unchanged."""
    if row.find(card_id) is None:
        return row
    return replace(row, cards=tuple(c for c in row.cards if c.id != card_id))


def toggle_horn(row: Row) -> Row:
    return replace(row, horn_active=not row.horn_active)


def toggle_weather(weather: WeatherState, category: RowCategory) -> WeatherState:
    return weather.set(category, not weather.is_active(category))


def clear_weather(weather: WeatherState) -> WeatherState:
    return WeatherState()


def rename_player(player: PlayerState, name: str) -> PlayerState:
    return replace(player, name=name)


def new_match(names: Optional[Sequence[str]] = None) -> MatchState:
    """Fresh match: empty rows, horns off, weather clear, default names."""
    names = config.default_player_names() if names is None else tuple(names)
    if len(names) != len(PLAYER_IDS):
        raise ValueError(f"a match needs exactly {len(PLAYER_IDS)} players, got {len(names)}")
    return MatchState(
        players={pid: PlayerState(name) for pid, name in zip(PLAYER_IDS, names)},
        weather=WeatherState(),
    )
