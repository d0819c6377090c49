"""Gobang_AI package exports."""

from .Board import Board, AI, HUMAN, BLACK, WHITE, BOARD_SIZE
from .GobangEngine import GobangEngine, ONGOING, AI_WON, HUMAN_WON, DRAW
from .Gobanggame import Gobanggame
from .Player import Player, HumanPlayer
from .utils.config import EngineConfig

# Subpackages for rules, AI search, GUI, and helpers
from . import ai, engine, gui, utils

__all__ = [
    "Board",
    "AI",
    "HUMAN",
    "BLACK",
    "WHITE",
    "BOARD_SIZE",
    "GobangEngine",
    "ONGOING",
    "AI_WON",
    "HUMAN_WON",
    "DRAW",
    "Gobanggame",
    "Player",
    "HumanPlayer",
    "EngineConfig",
    "ai",
    "engine",
    "gui",
    "utils",
]
