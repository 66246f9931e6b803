"""Board builder: samples categories and clues from the trivia service."""

import logging
import random
from typing import Optional, Sequence, TypeVar

from ..errors import InsufficientCategoriesError, InsufficientCluesError, InsufficientPoolError
from ..service import CategoryDetail, TriviaSource
from .board import Board
from .state import Category, Clue

T = TypeVar("T")

logger = logging.getLogger(__name__)


def sample_without_replacement(
    rng: random.Random,
    pool: Sequence[T],
    k: int,
    error_cls: type[InsufficientPoolError] = InsufficientPoolError,
    what: str = "items",
) -> list[T]:
    """
    Draw k items uniformly at random without replacement.

    Args:
        rng: Random source
        pool: Items to draw from
        k: Number of items to draw
        error_cls: Raised when the pool has fewer than k items

    Returns:
        k items from pool, in draw order
    """
    if k < 0:
        raise ValueError(f"Sample size must be non-negative, got {k}")
    if k > len(pool):
        raise error_cls(k, len(pool), what)
    return rng.sample(list(pool), k)


class BoardBuilder:
    """
    Builds a fresh board from the trivia service.

    The build process:
    1. Fetch up to category_pool_size category summaries
    2. Sample num_categories distinct ids
    3. Fetch each category in turn (sequential, not concurrent)
    4. Sample clues_per_category distinct clues per category

    Nothing is cached; every build fetches everything again.
    """

    def __init__(
        self,
        source: TriviaSource,
        num_categories: int = 6,
        clues_per_category: int = 5,
        category_pool_size: int = 100,
        rng: Optional[random.Random] = None,
    ):
        self.source = source
        self.num_categories = num_categories
        self.clues_per_category = clues_per_category
        self.category_pool_size = category_pool_size
        self.rng = rng or random.Random()

    @classmethod
    def from_config(cls, source: TriviaSource, config, rng: Optional[random.Random] = None) -> "BoardBuilder":
        if rng is None and config.seed is not None:
            rng = random.Random(config.seed)
        return cls(
            source,
            num_categories=config.num_categories,
            clues_per_category=config.clues_per_category,
            category_pool_size=config.category_pool_size,
            rng=rng,
        )

    def pick_category_ids(self) -> list[int]:
        """Fetch the category pool and sample distinct ids from it."""
        summaries = self.source.get_categories(self.category_pool_size)
        # de-dup preserving order
        ids = list(dict.fromkeys(s.id for s in summaries))
        picked = sample_without_replacement(
            self.rng, ids, self.num_categories, InsufficientCategoriesError, "categories"
        )
        logger.debug("Picked category ids %s from a pool of %d", picked, len(ids))
        return picked

    def sample_category(self, detail: CategoryDetail) -> Category:
        """Sample clues from a fetched category; every clue starts hidden."""
        # Two entries with the same question and answer count as one clue
        seen: set[tuple[str, str]] = set()
        pool = []
        for c in detail.clues:
            if (c.question, c.answer) in seen:
                continue
            seen.add((c.question, c.answer))
            pool.append(Clue(question=c.question, answer=c.answer, value=c.value))

        try:
            clues = sample_without_replacement(
                self.rng, pool, self.clues_per_category, InsufficientCluesError, "clues"
            )
        except InsufficientCluesError as e:
            raise InsufficientCluesError(
                e.requested, e.available, f"clues in category {detail.id} ({detail.title!r})"
            ) from None
        return Category(id=detail.id, title=detail.title, clues=clues)

    def build_board(self) -> Board:
        """
        Build a complete board.

        Returns:
            A new Board with every clue HIDDEN

        Raises:
            DataServiceError: the service failed or returned malformed data
            InsufficientCategoriesError: too few categories in the pool
            InsufficientCluesError: a sampled category has too few clues
        """
        categories = []
        for category_id in self.pick_category_ids():
            detail = self.source.get_category(category_id)
            categories.append(self.sample_category(detail))

        board = Board(categories=categories)
        logger.info("Built board: %s", ", ".join(board.titles))
        return board
