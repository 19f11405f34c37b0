# gwint/game.py
"""
Match holder for the Gwint calculator.
Keeps the current snapshot, routes edits through the mutators and keeps
a readable log of what happened.
"""

import logging
from dataclasses import replace
from typing import Dict, Optional, Sequence

from gwint.model.card import Card
from gwint.engine import mutators
from gwint.engine.resolver import resolve_strength, explain_strength
from gwint.engine.scoring import Standing, compare, player_total, row_total, match_totals
from gwint.engine.state import MatchState, PlayerState, Row, RowCategory

_logger = logging.getLogger("gwint.game")


class Game:
    def __init__(self, player_names: Optional[Sequence[str]] = None):
        self.log = []
        self.state: MatchState = mutators.new_match(player_names)

    # --- helpers ---
    @property
    def player_ids(self):
        return tuple(self.state.players)

    def player(self, pid: str) -> PlayerState:
        return self.state.player(pid)

    def row(self, pid: str, category) -> Row:
        return self.state.player(pid).row(RowCategory.parse(category))

    def _replace_row(self, pid: str, row: Row) -> None:
        player = self.state.player(pid)
        self.state = self.state.with_player(pid, player.with_row(row))

    def _record(self, msg: str) -> None:
        self.log.append(msg)
        _logger.info(msg)

    # --- edits ---
    def add_card(
        self,
        pid: str,
        category,
        base_strength: int,
        is_hero: bool = False,
        has_morale: bool = False,
        has_bond: bool = False,
    ) -> Card:
        card = Card(
            base_strength=base_strength,
            is_hero=is_hero,
            has_morale=has_morale,
            has_bond=has_bond,
        )
        self.place_card(pid, category, card)
        return card

    def place_card(self, pid: str, category, card: Card) -> None:
        row = self.row(pid, category)
        self._replace_row(pid, mutators.add_card(row, card))
        flags = f" ({', '.join(card.flags())})" if card.flags() else ""
        self._record(
            f"{self.player(pid).name} adds {card.base_strength} to {row.category.value}{flags}"
        )

    def remove_card(self, pid: str, category, card_id: str) -> bool:
        """Remove a card by id. Returns False (and logs nothing) if it isn't there."""
        row = self.row(pid, category)
        card = row.find(card_id)
        if card is None:
            return False
        self._replace_row(pid, mutators.remove_card(row, card_id))
        self._record(
            f"{self.player(pid).name} removes {card.base_strength} from {row.category.value}"
        )
        return True

    def toggle_horn(self, pid: str, category) -> bool:
        row = mutators.toggle_horn(self.row(pid, category))
        self._replace_row(pid, row)
        self._record(
            f"{self.player(pid).name} horn on {row.category.value}: "
            f"{'on' if row.horn_active else 'off'}"
        )
        return row.horn_active

    def toggle_weather(self, category) -> bool:
        cat = RowCategory.parse(category)
        weather = mutators.toggle_weather(self.state.weather, cat)
        self.state = replace(self.state, weather=weather)
        active = weather.is_active(cat)
        self._record(f"Weather on {cat.value}: {'on' if active else 'off'}")
        return active

    def clear_weather(self) -> None:
        weather = mutators.clear_weather(self.state.weather)
        self.state = replace(self.state, weather=weather)
        self._record("Weather cleared")

    def rename_player(self, pid: str, name: str) -> None:
        old = self.player(pid).name
        self.state = self.state.with_player(pid, mutators.rename_player(self.player(pid), name))
        self._record(f"{old} is now {name}")

    def reset_match(self, player_names: Optional[Sequence[str]] = None) -> None:
        self.state = mutators.new_match(player_names)
        self._record("New game")

    # --- scoring ---
    def card_strength(self, pid: str, category, card_id: str) -> Optional[int]:
        row = self.row(pid, category)
        card = row.find(card_id)
        if card is None:
            return None
        return resolve_strength(card, row, self.state.weather.is_active(row.category))

    def card_breakdown(self, pid: str, category, card_id: str):
        row = self.row(pid, category)
        card = row.find(card_id)
        if card is None:
            return []
        return explain_strength(card, row, self.state.weather.is_active(row.category))

    def row_total(self, pid: str, category) -> int:
        row = self.row(pid, category)
        return row_total(row, self.state.weather.is_active(row.category))

    def player_total(self, pid: str) -> int:
        return player_total(self.player(pid), self.state.weather)

    def totals(self) -> Dict[str, int]:
        return match_totals(self.state)

    def standing(self, pid: str) -> Standing:
        """Where `pid` stands against the other player."""
        other = self.state.opponent_of(pid)
        return compare(self.player_total(pid), self.player_total(other))
