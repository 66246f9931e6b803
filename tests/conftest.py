"""Shared fixtures: an in-memory trivia source standing in for the API."""

import random
import threading

import pytest

from jeopardy.errors import DataServiceError
from jeopardy.game import BoardBuilder
from jeopardy.service import CategoryDetail, CategorySummary, ClueData, TriviaSource


def make_category(category_id: int, num_clues: int = 6, title=None) -> CategoryDetail:
    return CategoryDetail(
        id=category_id,
        title=title or f"Category {category_id}",
        clues=[
            ClueData(question=f"Q{category_id}-{i}", answer=f"A{category_id}-{i}", value=200 * (i + 1))
            for i in range(num_clues)
        ],
    )


class FakeSource(TriviaSource):
    """Serves canned categories and records every call."""

    def __init__(self, categories, fail_on_category=None):
        self.categories = {c.id: c for c in categories}
        self.fail_on_category = fail_on_category
        self.calls: list[tuple[str, int]] = []

    def get_categories(self, count):
        self.calls.append(("categories", count))
        return [CategorySummary(id=c.id, title=c.title) for c in list(self.categories.values())[:count]]

    def get_category(self, category_id):
        self.calls.append(("category", category_id))
        if category_id == self.fail_on_category:
            raise DataServiceError(f"category {category_id} unavailable")
        return self.categories[category_id]


@pytest.fixture
def source():
    return FakeSource([make_category(i) for i in range(1, 11)])


@pytest.fixture
def builder(source):
    return BoardBuilder(source, num_categories=6, clues_per_category=5, rng=random.Random(42))


class BlockingBuilder:
    """Builder whose build_board waits until released."""

    def __init__(self, inner):
        self.inner = inner
        self.started = threading.Event()
        self.release = threading.Event()

    def build_board(self):
        self.started.set()
        self.release.wait(timeout=5)
        return self.inner.build_board()
