# Game logic module
from .state import RevealState, Clue, Category, ShowText, NoOp, RevealResult
from .board import Board
from .rules import RevealRules, RevealController
from .generator import BoardBuilder, sample_without_replacement

__all__ = [
    "RevealState",
    "Clue",
    "Category",
    "ShowText",
    "NoOp",
    "RevealResult",
    "Board",
    "RevealRules",
    "RevealController",
    "BoardBuilder",
    "sample_without_replacement",
]
