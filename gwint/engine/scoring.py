"""
Row, player and match aggregation on top of the strength resolver.
Everything here is a pure read of the snapshot passed in.
"""

from enum import Enum
from typing import Dict

from gwint.engine.resolver import resolve_strength
from gwint.engine.state import MatchState, PlayerState, Row, WeatherState


class Standing(str, Enum):
    LEADING = "leading"
    TRAILING = "trailing"
    TIED = "tied"

    def inverse(self) -> "Standing":
        if self is Standing.LEADING:
            return Standing.TRAILING
        if self is Standing.TRAILING:
            return Standing.LEADING
        return Standing.TIED


def row_total(row: Row, weather_active: bool) -> int:
    return sum(resolve_strength(card, row, weather_active) for card in row.cards)


def player_total(player: PlayerState, weather: WeatherState) -> int:
    return sum(row_total(row, weather.is_active(row.category)) for row in player.rows.values())


def compare(total_a: int, total_b: int) -> Standing:
    """Standing of A against B."""
    if total_a > total_b:
        return Standing.LEADING
    if total_a < total_b:
        return Standing.TRAILING
    return Standing.TIED


def match_totals(match: MatchState) -> Dict[str, int]:
    return {pid: player_total(p, match.weather) for pid, p in match.players.items()}


def standings(match: MatchState) -> Dict[str, Standing]:
    totals = match_totals(match)
    return {pid: compare(totals[pid], totals[match.opponent_of(pid)]) for pid in totals}
