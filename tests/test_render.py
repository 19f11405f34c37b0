# tests/test_render.py
from gwint.view.render import format_row, print_state, print_new_log


def test_format_row_shows_total_and_modified_strength(game):
    game.add_card("P1", "melee", 3)
    game.add_card("P1", "melee", 1, has_morale=True)
    game.toggle_horn("P1", "melee")
    line = format_row(game, "P1", "melee")
    assert game.row_total("P1", "melee") == 10  # (3+1)*2 + 1*2
    assert " 10" in line
    assert "1:8/3" in line
    assert "🎺" in line


def test_format_empty_row(game):
    assert "∅" in format_row(game, "P2", "siege")


def test_print_state_lists_both_players(game, capsys):
    game.add_card("P2", "ranged", 4)
    game.toggle_weather("ranged")
    print_state(game)
    out = capsys.readouterr().out
    assert "P1 name" in out and "P2 name" in out
    assert "Fog" in out


def test_print_new_log_only_prints_new_lines(game, capsys):
    game.add_card("P1", "melee", 2)
    n = print_new_log(game, 0)
    assert n == 1
    game.clear_weather()
    n = print_new_log(game, n)
    out = capsys.readouterr().out
    assert n == 2
    assert out.count("adds 2 to melee") == 1
