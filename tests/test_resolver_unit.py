# tests/test_resolver_unit.py
import importlib
import pytest
from gwint.model.card import Card

resolver = importlib.import_module("gwint.engine.resolver")


def test_pipeline_order_and_registered_steps():
    assert resolver.PIPELINE == ("bond", "morale", "horn", "weather")
    for kind in resolver.PIPELINE:
        assert resolver.can_handle(kind), f"resolver cannot handle {kind}"
    assert not resolver.can_handle("frost")


def test_unknown_step_raises_keyerror(make_row):
    c = Card(3)
    with pytest.raises(KeyError):
        resolver.apply_step("frost", 3, c, make_row(c), False)


def test_plain_card_keeps_base(make_row):
    c = Card(7)
    assert resolver.resolve_strength(c, make_row(c), False) == 7


@pytest.mark.parametrize("horn", [False, True])
@pytest.mark.parametrize("weather", [False, True])
def test_hero_is_immune_to_everything(make_row, horn, weather):
    hero = Card(10, is_hero=True, has_bond=True, has_morale=True)
    row = make_row(
        hero,
        Card(10, has_bond=True),
        Card(2, has_morale=True),
        horn=horn,
    )
    assert resolver.resolve_strength(hero, row, weather) == 10


def test_bond_three_of_a_kind(make_row):
    cards = [Card(5, has_bond=True) for _ in range(3)]
    row = make_row(*cards)
    assert [resolver.resolve_strength(c, row, False) for c in cards] == [15, 15, 15]


def test_lone_bond_is_unchanged(make_row):
    c = Card(6, has_bond=True)
    assert resolver.resolve_strength(c, make_row(c), False) == 6


def test_bond_ignores_other_strengths_unbonded_and_heroes(make_row):
    c = Card(4, has_bond=True)
    row = make_row(
        c,
        Card(4, has_bond=True),
        Card(4),  # same strength, no bond
        Card(5, has_bond=True),  # bonded, other strength
        Card(4, has_bond=True, is_hero=True),
    )
    assert resolver.bond_peers(c, row) == 2
    assert resolver.resolve_strength(c, row, False) == 8


def test_morale_counts_others_only(make_row):
    target = Card(4)
    m1, m2 = Card(1, has_morale=True), Card(2, has_morale=True)
    row = make_row(target, m1, m2)
    assert resolver.resolve_strength(target, row, False) == 6
    # each morale card only sees the other one
    assert resolver.resolve_strength(m1, row, False) == 2
    assert resolver.resolve_strength(m2, row, False) == 3


def test_hero_morale_grants_nothing(make_row):
    target = Card(4)
    row = make_row(target, Card(3, is_hero=True, has_morale=True))
    assert resolver.morale_bonus(target, row) == 0
    assert resolver.resolve_strength(target, row, False) == 4


def test_morale_self_exclusion_is_by_id(make_row):
    m = Card(3, has_morale=True, id="same")
    twin = Card(3, has_morale=True, id="same")
    other = Card(3, has_morale=True, id="other")
    row = make_row(m, other)
    assert resolver.morale_bonus(twin, row) == 1


def test_bond_then_morale_then_horn(make_row):
    a, b = Card(2, has_bond=True), Card(2, has_bond=True)
    booster = Card(1, has_morale=True)
    row = make_row(a, b, booster, horn=True)
    # (2*2 + 1) * 2
    assert resolver.resolve_strength(a, row, False) == 10


def test_horn_after_morale(make_row):
    c = Card(3)
    row = make_row(c, Card(1, has_morale=True), horn=True)
    assert resolver.resolve_strength(c, row, False) == 8


def test_weather_is_final(make_row):
    c = Card(3)
    row = make_row(c, Card(1, has_morale=True), horn=True)
    assert resolver.resolve_strength(c, row, True) == 1


def test_weather_lifts_zero_strength_to_one(make_row):
    c = Card(0)
    assert resolver.resolve_strength(c, make_row(c), True) == 1


def test_steps_in_isolation(make_row):
    c = Card(3)
    horn_row = make_row(c, horn=True)
    assert resolver.apply_step("horn", 5, c, horn_row, False) == 10
    assert resolver.apply_step("horn", 5, c, make_row(c), False) == 5
    assert resolver.apply_step("weather", 99, c, horn_row, True) == 1
    assert resolver.apply_step("weather", 99, c, horn_row, False) == 99
    assert resolver.apply_step("bond", 42, c, horn_row, False) == 42  # not bonded


def test_explain_strength_trace(make_row):
    c = Card(3)
    row = make_row(c, Card(1, has_morale=True), horn=True)
    trace = resolver.explain_strength(c, row, True)
    assert trace == [("base", 3), ("bond", 3), ("morale", 4), ("horn", 8), ("weather", 1)]
    assert trace[-1][1] == resolver.resolve_strength(c, row, True)


def test_explain_strength_hero(make_row):
    hero = Card(8, is_hero=True)
    assert resolver.explain_strength(hero, make_row(hero, horn=True), True) == [("hero", 8)]
