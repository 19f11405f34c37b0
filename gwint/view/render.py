from gwint.view.labels import BADGES, CLEAR_WEATHER_NAME, ROW_NAMES, ROW_ORDER, WEATHER_NAMES
from gwint.view.ui_common import ui_print

_STANDING_MARK = {"leading": "▲", "trailing": "▼", "tied": "="}


def _card_entry(i: int, card, strength: int) -> str:
    badges = "".join(BADGES[f] for f in card.flags())
    base = f"/{card.base_strength}" if strength != card.base_strength else ""
    return f"{i}:{strength}{base}{badges}"


def format_row(game, pid: str, category) -> str:
    row = game.row(pid, category)
    items = [
        _card_entry(i, c, game.card_strength(pid, category, c.id))
        for i, c in enumerate(row.cards, start=1)
    ]
    horn = " 🎺" if row.horn_active else ""
    weather = f" {WEATHER_NAMES[row.category]}" if game.state.weather.is_active(row.category) else ""
    cards = ", ".join(items) if items else "∅"
    return (
        f"  {ROW_NAMES[row.category]:<12} {game.row_total(pid, category):>4}"
        f"{horn}{weather}  [{cards}]"
    )


def print_state(game) -> None:
    ui_print("\n==============================")
    for pid in game.player_ids:
        p = game.player(pid)
        mark = _STANDING_MARK[game.standing(pid).value]
        ui_print(f"👤 {pid} {p.name}: {game.player_total(pid)} {mark}")
        for category in ROW_ORDER.get(pid, tuple(p.rows)):
            ui_print(format_row(game, pid, category))
        ui_print("")
    active = game.state.weather.active_categories()
    weather = ", ".join(WEATHER_NAMES[c] for c in active) if active else CLEAR_WEATHER_NAME
    ui_print(f"🌦️ Weather: {weather}")
    ui_print("==============================")


def print_new_log(game, last_len: int) -> int:
    """Print only new log entries and return the new length."""
    new_entries = game.log[last_len:]
    for line in new_entries:
        ui_print(f"• {line}")
    return len(game.log)
