"""Jeopardy trivia board backed by a remote trivia API."""

from .config import GameConfig
from .errors import (
    BuildInProgressError,
    ConfigError,
    DataServiceError,
    IndexOutOfRangeError,
    InsufficientCategoriesError,
    InsufficientCluesError,
    InsufficientPoolError,
    JeopardyError,
    NoBoardError,
)
from .game import Board, BoardBuilder, Category, Clue, NoOp, RevealController, RevealState, ShowText
from .session import GameSession, SessionStatus

__version__ = "0.1.0"

__all__ = [
    "GameConfig",
    "BuildInProgressError",
    "ConfigError",
    "DataServiceError",
    "IndexOutOfRangeError",
    "InsufficientCategoriesError",
    "InsufficientCluesError",
    "InsufficientPoolError",
    "JeopardyError",
    "NoBoardError",
    "Board",
    "BoardBuilder",
    "Category",
    "Clue",
    "NoOp",
    "RevealController",
    "RevealState",
    "ShowText",
    "GameSession",
    "SessionStatus",
]
