from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from gwint.model.card import Card


class RowCategory(str, Enum):
    MELEE = "melee"
    RANGED = "ranged"
    SIEGE = "siege"

    @classmethod
    def parse(cls, text: str) -> "RowCategory":
        """Accept 'melee', 'MELEE', 'm', 'r', 's' etc."""
        if isinstance(text, cls):
            return text
        s = str(text).strip().lower()
        for cat in cls:
            if s in (cat.value, cat.value[0]):
                return cat
        raise ValueError(f"unknown row category: {text!r}")


@dataclass(frozen=True)
class Row:
    category: RowCategory
    cards: Tuple[Card, ...] = ()
    horn_active: bool = False

    def find(self, card_id: str) -> Optional[Card]:
        return next((c for c in self.cards if c.id == card_id), None)


@dataclass(frozen=True)
class WeatherState:
    melee: bool = False
    ranged: bool = False
    siege: bool = False

    def is_active(self, category: RowCategory) -> bool:
        return getattr(self, RowCategory(category).value)

    def set(self, category: RowCategory, active: bool) -> "WeatherState":
        return replace(self, **{RowCategory(category).value: bool(active)})

    def active_categories(self) -> Tuple[RowCategory, ...]:
        return tuple(cat for cat in RowCategory if self.is_active(cat))


def empty_rows() -> Mapping[RowCategory, Row]:
    return {cat: Row(cat) for cat in RowCategory}


@dataclass(frozen=True)
class PlayerState:
    name: str
    rows: Mapping[RowCategory, Row] = field(default_factory=empty_rows)

    def __post_init__(self):
        # read-only view over a private copy
        object.__setattr__(self, "rows", MappingProxyType(dict(self.rows)))

    def __hash__(self):
        return hash((self.name, tuple(self.rows.items())))

    def row(self, category: RowCategory) -> Row:
        return self.rows[RowCategory(category)]

    def with_row(self, row: Row) -> "PlayerState":
        rows = dict(self.rows)
        rows[row.category] = row
        return replace(self, rows=rows)


@dataclass(frozen=True)
class MatchState:
    players: Mapping[str, PlayerState]
    weather: WeatherState = field(default_factory=WeatherState)

    def __post_init__(self):
        object.__setattr__(self, "players", MappingProxyType(dict(self.players)))

    def __hash__(self):
        return hash((tuple(self.players.items()), self.weather))

    def player(self, pid: str) -> PlayerState:
        return self.players[pid]

    def opponent_of(self, pid: str) -> str:
        return next(k for k in self.players if k != pid)

    def with_player(self, pid: str, player: PlayerState) -> "MatchState":
        if pid not in self.players:
            raise KeyError(pid)
        players = dict(self.players)
        players[pid] = player
        return replace(self, players=players)
