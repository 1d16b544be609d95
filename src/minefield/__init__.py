"""
Minefield game module.

Provides board generation, reveal/flag actions and game state.
"""
from .cell import Cell
from .board import (
    Board,
    BoardConfig,
    GameState,
    InvalidConfiguration,
    generate,
    EASY,
    MEDIUM,
    HARD,
    PRESETS,
)
from .render import render_board

__all__ = [
    "Cell",
    "Board",
    "BoardConfig",
    "GameState",
    "InvalidConfiguration",
    "generate",
    "EASY",
    "MEDIUM",
    "HARD",
    "PRESETS",
    "render_board",
]
