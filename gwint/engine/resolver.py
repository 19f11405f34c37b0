"""
Card strength resolver.

A non-hero card's effective strength is computed by running its base
strength through an ordered pipeline of steps:

    bond -> morale -> horn -> weather

Each step is a pure function ``(strength, card, row, weather_active) -> int``.
Later steps see the output of earlier ones; weather replaces whatever came
before it with 1. Heroes skip the pipeline and keep their base strength.
"""

__all__ = [
    "PIPELINE",
    "apply_step",
    "can_handle",
    "explain_strength",
    "resolve_strength",
]

import logging
from typing import Callable, Dict, List, Tuple

from gwint.model.card import Card
from gwint.engine.state import Row

StepFn = Callable[[int, Card, Row, bool], int]

_REG: Dict[str, StepFn] = {}
_logger = logging.getLogger("gwint.resolver")


def register(kind: str):
    def deco(fn: StepFn):
        _REG[kind] = fn
        return fn

    return deco


def can_handle(kind: str) -> bool:
    return kind in _REG


def apply_step(kind: str, strength: int, card: Card, row: Row, weather_active: bool) -> int:
    fn = _REG.get(kind)
    if not fn:
        raise KeyError(f"resolver has no step named {kind!r}")
    return fn(strength, card, row, weather_active)


# ---------------- counting helpers ----------------


def bond_peers(card: Card, row: Row) -> int:
    """Bonded non-hero cards in `row` sharing `card`'s base strength (self included)."""
    return sum(
        1
        for c in row.cards
        if c.has_bond and not c.is_hero and c.base_strength == card.base_strength
    )


def morale_bonus(card: Card, row: Row) -> int:
    """Non-hero morale cards in `row` other than `card` itself (compared by id)."""
    return sum(1 for c in row.cards if c.has_morale and not c.is_hero and c.id != card.id)


# ---------------- pipeline steps ----------------


@register("bond")
def _bond(strength, card, row, weather_active):
    if not card.has_bond:
        return strength
    # replaces the running value; a lone bonded card multiplies by 1
    return card.base_strength * bond_peers(card, row)


@register("morale")
def _morale(strength, card, row, weather_active):
    return strength + morale_bonus(card, row)


@register("horn")
def _horn(strength, card, row, weather_active):
    return strength * 2 if row.horn_active else strength


@register("weather")
def _weather(strength, card, row, weather_active):
    return 1 if weather_active else strength


PIPELINE: Tuple[str, ...] = ("bond", "morale", "horn", "weather")


# ---------------- public API ----------------


def explain_strength(card: Card, row: Row, weather_active: bool) -> List[Tuple[str, int]]:
    """
    Return the running value after each stage, starting with ("base", n).
    Heroes yield a single ("hero", base_strength) entry.
    """
    if card.is_hero:
        return [("hero", card.base_strength)]
    strength = card.base_strength
    trace = [("base", strength)]
    for kind in PIPELINE:
        strength = apply_step(kind, strength, card, row, weather_active)
        trace.append((kind, strength))
    return trace


def resolve_strength(card: Card, row: Row, weather_active: bool) -> int:
    if card.is_hero:
        return card.base_strength
    strength = card.base_strength
    for kind in PIPELINE:
        strength = _REG[kind](strength, card, row, weather_active)
    _logger.debug(
        "card %s in %s: base=%d -> %d", card.id, row.category.value, card.base_strength, strength
    )
    return strength
