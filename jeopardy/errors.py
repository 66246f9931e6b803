"""Exception types raised by the Jeopardy board."""


class JeopardyError(Exception):
    """Base class for all errors raised by this package."""


class ConfigError(JeopardyError, ValueError):
    """Configuration value is missing or invalid."""


class DataServiceError(JeopardyError):
    """The trivia data service failed or returned malformed data."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class InsufficientPoolError(JeopardyError):
    """A pool is smaller than the number of items requested from it."""

    def __init__(self, requested: int, available: int, what: str = "items"):
        super().__init__(
            f"Need {requested} {what} but only {available} available"
        )
        self.requested = requested
        self.available = available


class InsufficientCategoriesError(InsufficientPoolError):
    """The service returned fewer distinct categories than the board needs."""


class InsufficientCluesError(InsufficientPoolError):
    """A category has fewer distinct clues than the board needs."""


class IndexOutOfRangeError(JeopardyError, IndexError):
    """A tile address does not exist on the current board."""

    def __init__(self, category_index: int, clue_index: int):
        super().__init__(f"No tile at ({category_index}, {clue_index})")
        self.category_index = category_index
        self.clue_index = clue_index


class NoBoardError(JeopardyError):
    """A tile was clicked before any board was built."""


class BuildInProgressError(JeopardyError):
    """A board build is already running for this session."""
