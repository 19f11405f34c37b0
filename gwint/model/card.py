"""
model/card.py

A card placed on the board. Cards are values: a new card is created
on every add, and removing it is the only other thing that happens to it.
"""

from dataclasses import dataclass, field
from uuid import uuid4


def new_card_id() -> str:
    return uuid4().hex


@dataclass(frozen=True)
class Card:
    base_strength: int
    is_hero: bool = False
    has_morale: bool = False
    has_bond: bool = False
    id: str = field(default_factory=new_card_id)

    def __post_init__(self):
        if self.base_strength < 0:
            raise ValueError(f"base_strength must be >= 0, got {self.base_strength}")

    def flags(self) -> tuple:
        """Names of the modifier flags set on this card, in display order."""
        out = []
        if self.is_hero:
            out.append("hero")
        if self.has_morale:
            out.append("morale")
        if self.has_bond:
            out.append("bond")
        return tuple(out)
