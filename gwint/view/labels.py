"""
Display labels for rows, weather and card badges.
Presentation only: the scoring engine never looks at these.
"""

from gwint.engine.state import RowCategory

ROW_NAMES = {
    RowCategory.MELEE: "⚔️ Melee",
    RowCategory.RANGED: "🏹 Ranged",
    RowCategory.SIEGE: "🏰 Siege",
}

WEATHER_NAMES = {
    RowCategory.MELEE: "❄️ Frost",
    RowCategory.RANGED: "🌫️ Fog",
    RowCategory.SIEGE: "🌧️ Rain",
}

CLEAR_WEATHER_NAME = "☀️ Clear skies"

BADGES = {
    "hero": "★",
    "morale": "+",
    "bond": "🤝",
}

# Player 1 sits on top with siege furthest from the weather bar; player 2 is mirrored.
ROW_ORDER = {
    "P1": (RowCategory.SIEGE, RowCategory.RANGED, RowCategory.MELEE),
    "P2": (RowCategory.MELEE, RowCategory.RANGED, RowCategory.SIEGE),
}
