# gwint/config.py
"""
Runtime configuration.

Configuration:
- GWINT_PLAYER1_NAME / GWINT_PLAYER2_NAME override the default player names
  used for a new match (defaults: "Gracz 1", "Gracz 2").
- GWINT_LOG_LEVEL sets the logging level for the console (default WARNING).
"""

import logging
import os
from typing import Tuple

DEFAULT_PLAYER_NAMES: Tuple[str, str] = ("Gracz 1", "Gracz 2")


def default_player_names() -> Tuple[str, str]:
    return (
        os.environ.get("GWINT_PLAYER1_NAME") or DEFAULT_PLAYER_NAMES[0],
        os.environ.get("GWINT_PLAYER2_NAME") or DEFAULT_PLAYER_NAMES[1],
    )


def log_level() -> int:
    name = os.environ.get("GWINT_LOG_LEVEL", "WARNING").strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.WARNING
