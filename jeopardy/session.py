"""Game session: owns the current board and serializes builds."""

import logging
import threading
from enum import Enum
from typing import Optional

from .errors import BuildInProgressError, NoBoardError
from .game import Board, BoardBuilder, RevealController, RevealResult, RevealState


logger = logging.getLogger(__name__)


class SessionStatus(Enum):
    IDLE = "idle"        # No board has been requested yet
    LOADING = "loading"  # A build is in flight
    READY = "ready"      # The last build succeeded
    FAILED = "failed"    # The last build failed; start may be retried


START_LABELS = {
    SessionStatus.IDLE: "Start",
    SessionStatus.LOADING: "Loading...",
    SessionStatus.READY: "Restart",
    SessionStatus.FAILED: "Retry",
}


class GameSession:
    """
    One player's game.

    Only one build may run at a time: start() while a build is in flight
    raises BuildInProgressError instead of queueing or cancelling. A new
    board replaces the old one only after it is fully built, so a failed
    restart leaves the previous board playable.
    """

    def __init__(self, builder: BoardBuilder):
        self.builder = builder
        self._board: Optional[Board] = None
        self._status = SessionStatus.IDLE
        self._last_error: Optional[str] = None
        self._build_lock = threading.Lock()
        self._state_lock = threading.RLock()

    @property
    def board(self) -> Optional[Board]:
        with self._state_lock:
            return self._board

    @property
    def status(self) -> SessionStatus:
        with self._state_lock:
            return self._status

    @property
    def last_error(self) -> Optional[str]:
        with self._state_lock:
            return self._last_error

    @property
    def start_label(self) -> str:
        """Label for the start/restart control."""
        return START_LABELS[self.status]

    @property
    def is_loading(self) -> bool:
        return self.status == SessionStatus.LOADING

    def start(self) -> Board:
        """
        Build a new board and install it.

        Raises:
            BuildInProgressError: another build is still running
            DataServiceError, InsufficientPoolError: the build failed;
                the previous board (if any) stays in place
        """
        if not self._build_lock.acquire(blocking=False):
            logger.warning("Rejected start: a build is already in progress")
            raise BuildInProgressError("A board is already being built")

        try:
            with self._state_lock:
                self._status = SessionStatus.LOADING
                self._last_error = None
            logger.info("Building a new board")

            try:
                board = self.builder.build_board()
            except Exception as e:
                with self._state_lock:
                    self._status = SessionStatus.FAILED
                    self._last_error = str(e)
                logger.error("Board build failed: %s", e)
                raise

            with self._state_lock:
                self._board = board
                self._status = SessionStatus.READY
            return board
        finally:
            self._build_lock.release()

    def advance(self, category_index: int, clue_index: int) -> RevealResult:
        """
        Advance one tile of the current board.

        Raises:
            NoBoardError: no board has been built yet
            IndexOutOfRangeError: the address is not on the board
        """
        result, _ = self.advance_tile(category_index, clue_index)
        return result

    def advance_tile(self, category_index: int, clue_index: int) -> tuple[RevealResult, RevealState]:
        """Like advance(), but also returns the tile's state after the click."""
        with self._state_lock:
            if self._board is None:
                raise NoBoardError("Start a game before choosing a clue")
            result = RevealController(self._board).advance(category_index, clue_index)
            state = self._board.get_clue(category_index, clue_index).reveal_state
            return result, state

    def snapshot(self) -> dict:
        """Status and board as plain data for the renderer."""
        with self._state_lock:
            return {
                "status": self._status.value,
                "start_label": START_LABELS[self._status],
                "error": self._last_error,
                "board": self._board.to_dict() if self._board is not None else None,
            }
