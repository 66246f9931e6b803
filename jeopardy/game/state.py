"""Clue, category and reveal state types for the Jeopardy board."""

from enum import Enum
from dataclasses import dataclass, field
from typing import Optional, Union


class RevealState(Enum):
    """How much of a clue is visible on its tile."""
    HIDDEN = "hidden"
    QUESTION_SHOWN = "question"
    ANSWER_SHOWN = "answer"

    @property
    def is_terminal(self) -> bool:
        """ANSWER_SHOWN accepts no further clicks."""
        return self == RevealState.ANSWER_SHOWN


@dataclass
class Clue:
    """A question/answer pair with its own reveal state."""
    question: str
    answer: str
    value: Optional[int] = None  # Dollar value reported by the service, if any
    reveal_state: RevealState = RevealState.HIDDEN

    @property
    def visible_text(self) -> Optional[str]:
        """Text currently shown on the tile, or None while hidden."""
        if self.reveal_state == RevealState.QUESTION_SHOWN:
            return self.question
        if self.reveal_state == RevealState.ANSWER_SHOWN:
            return self.answer
        return None

    def to_dict(self, include_hidden: bool = False) -> dict:
        data = {
            "value": self.value,
            "state": self.reveal_state.value,
            "text": self.visible_text,
            "disabled": self.reveal_state.is_terminal,
        }
        if include_hidden:
            data["question"] = self.question
            data["answer"] = self.answer
        return data


@dataclass
class Category:
    """A titled column of clues."""
    id: int
    title: str
    clues: list[Clue] = field(default_factory=list)

    def to_dict(self, include_hidden: bool = False) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "clues": [c.to_dict(include_hidden) for c in self.clues],
        }


@dataclass(frozen=True)
class ShowText:
    """Display this text on the tile; the clue advanced one step."""
    text: str


@dataclass(frozen=True)
class NoOp:
    """Nothing to display; the clue was already fully revealed."""


RevealResult = Union[ShowText, NoOp]
