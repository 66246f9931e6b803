"""Reveal rules for Jeopardy tiles."""

from .board import Board
from .state import Clue, NoOp, RevealResult, RevealState, ShowText


class RevealRules:
    """
    Per-clue reveal state machine.

    HIDDEN -> QUESTION_SHOWN -> ANSWER_SHOWN, one step per click.
    ANSWER_SHOWN is terminal; further clicks are no-ops.
    """

    NEXT_STATE = {
        RevealState.HIDDEN: RevealState.QUESTION_SHOWN,
        RevealState.QUESTION_SHOWN: RevealState.ANSWER_SHOWN,
    }

    @staticmethod
    def advance(clue: Clue) -> RevealResult:
        """
        Advance a clue by one step.

        Args:
            clue: The clue to advance (mutated in place)

        Returns:
            ShowText with the newly visible text, or NoOp if already answered
        """
        next_state = RevealRules.NEXT_STATE.get(clue.reveal_state)
        if next_state is None:
            return NoOp()

        clue.reveal_state = next_state
        if next_state == RevealState.QUESTION_SHOWN:
            return ShowText(clue.question)
        return ShowText(clue.answer)


class RevealController:
    """Routes tile clicks on a board to the reveal rules."""

    def __init__(self, board: Board):
        self.board = board

    def advance(self, category_index: int, clue_index: int) -> RevealResult:
        """
        Advance the tile at (category_index, clue_index).

        Raises:
            IndexOutOfRangeError: if the address is not on the board.
                No clue is modified in that case.
        """
        clue = self.board.get_clue(category_index, clue_index)
        return RevealRules.advance(clue)
