# gwint/runner/console.py
from __future__ import annotations

"""
Console runner for the Gwint calculator.

- Renders the board each time it changes
- Parses one command per line and applies it to the Game
- Input validation lives here; the engine trusts what it is given
"""

import logging
import re
from typing import List, Tuple

from gwint import config
from gwint.game import Game
from gwint.engine.state import RowCategory
from gwint.view import ui_common
from gwint.view.render import print_state, print_new_log

_logger = logging.getLogger("gwint.console")

HELP = (
    "🎮 Commands:\n"
    "  a <p> <row> <str> [h] [m] [b]  add card (hero / morale / bond)\n"
    "  r <p> <row> <n>                remove n-th card\n"
    "  i <p> <row> <n>                explain n-th card's strength\n"
    "  horn <p> <row>                 toggle commander's horn\n"
    "  w <row>                        toggle weather\n"
    "  sun                            clear all weather\n"
    "  name <p> <text>                rename player\n"
    "  new                            new game\n"
    "  q                              quit\n"
    "  <p> = 1|2, <row> = m|r|s"
)

_FLAG_WORDS = {
    "h": "is_hero",
    "hero": "is_hero",
    "m": "has_morale",
    "morale": "has_morale",
    "b": "has_bond",
    "bond": "has_bond",
}


def parse_strength(text: str) -> int:
    """Parse a non-negative base strength, e.g. '5' or ' 10 '."""
    if text is None or not str(text).strip():
        raise ValueError("strength is required")
    s = str(text).strip()
    if not re.fullmatch(r"\d+", s):
        raise ValueError(f"strength must be a non-negative whole number, got {s!r}")
    return int(s)


def parse_player(text: str) -> str:
    s = str(text).strip().upper()
    if s in ("1", "P1"):
        return "P1"
    if s in ("2", "P2"):
        return "P2"
    raise ValueError(f"unknown player: {text!r}")


def _parse_index(text: str, n: int) -> int:
    """1-based index from the user -> 0-based, bounded by `n`."""
    m = re.match(r"\s*(\d+)", text or "")
    if not m:
        raise ValueError(f"expected a card number, got {text!r}")
    idx = int(m.group(1)) - 1
    if not 0 <= idx < n:
        raise ValueError(f"no card number {idx + 1} in that row")
    return idx


def parse_command(line: str) -> Tuple[str, List[str]]:
    parts = (line or "").strip().split()
    if not parts:
        return "", []
    return parts[0].lower(), parts[1:]


def _need(args: List[str], n: int, usage: str) -> None:
    if len(args) < n:
        raise ValueError(f"usage: {usage}")


def apply_command(game: Game, cmd: str, args: List[str]) -> bool:
    """
    Execute one parsed command. Returns True if the board changed.
    Raises ValueError for anything malformed; nothing is applied in that case.
    """
    if cmd in ("a", "add"):
        _need(args, 3, "a <p> <row> <str> [h] [m] [b]")
        pid, cat = parse_player(args[0]), RowCategory.parse(args[1])
        strength = parse_strength(args[2])
        flags = {}
        for word in args[3:]:
            key = _FLAG_WORDS.get(word.lower())
            if key is None:
                raise ValueError(f"unknown card flag: {word!r}")
            flags[key] = True
        game.add_card(pid, cat, strength, **flags)
        return True

    if cmd in ("r", "rm", "remove"):
        _need(args, 3, "r <p> <row> <n>")
        pid, cat = parse_player(args[0]), RowCategory.parse(args[1])
        row = game.row(pid, cat)
        card = row.cards[_parse_index(args[2], len(row.cards))]
        return game.remove_card(pid, cat, card.id)

    if cmd in ("i", "info"):
        _need(args, 3, "i <p> <row> <n>")
        pid, cat = parse_player(args[0]), RowCategory.parse(args[1])
        row = game.row(pid, cat)
        card = row.cards[_parse_index(args[2], len(row.cards))]
        steps = game.card_breakdown(pid, cat, card.id)
        ui_common.ui_print(" → ".join(f"{name} {value}" for name, value in steps))
        return False

    if cmd == "horn":
        _need(args, 2, "horn <p> <row>")
        game.toggle_horn(parse_player(args[0]), RowCategory.parse(args[1]))
        return True

    if cmd in ("w", "weather"):
        _need(args, 1, "w <row>")
        game.toggle_weather(RowCategory.parse(args[0]))
        return True

    if cmd == "sun":
        game.clear_weather()
        return True

    if cmd == "name":
        _need(args, 2, "name <p> <text>")
        game.rename_player(parse_player(args[0]), " ".join(args[1:]))
        return True

    if cmd == "new":
        game.reset_match()
        return True

    if cmd in ("?", "h", "help"):
        ui_common.ui_print(HELP)
        return False

    raise ValueError(f"unknown command: {cmd!r} (type ? for help)")


def run(game: Game | None = None) -> Game:
    """Read-eval-print loop until 'q'. Returns the game for inspection."""
    game = game or Game()
    last_log_len = len(game.log)
    needs_redraw = True
    ui_common.ui_print(HELP)

    while True:
        if needs_redraw:
            print_state(game)
            last_log_len = print_new_log(game, last_log_len)
            needs_redraw = False

        cmd, args = parse_command(ui_common.ui_input("> "))
        if cmd in ("q", "quit", "exit"):
            break
        if not cmd:
            continue
        try:
            needs_redraw = apply_command(game, cmd, args)
        except ValueError as exc:
            _logger.debug("rejected %r %r: %s", cmd, args, exc)
            ui_common.ui_print(f"❌ {exc}")

    return game


def main(argv: List[str] | None = None) -> None:
    logging.basicConfig(level=config.log_level(), format="%(name)s: %(message)s")
    names = list(argv or [])
    game = Game(names[:2]) if len(names) >= 2 else Game()
    run(game)
