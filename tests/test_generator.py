"""Tests for board building and sampling."""

import random

import pytest

from conftest import FakeSource, make_category
from jeopardy.config import GameConfig
from jeopardy.errors import (
    DataServiceError,
    InsufficientCategoriesError,
    InsufficientCluesError,
    InsufficientPoolError,
)
from jeopardy.game import BoardBuilder, RevealState, sample_without_replacement
from jeopardy.service import CategoryDetail, ClueData


class TestSampleWithoutReplacement:
    def test_never_repeats(self):
        rng = random.Random(0)
        pool = list(range(10))
        for k in range(11):
            picked = sample_without_replacement(rng, pool, k)
            assert len(picked) == k
            assert len(set(picked)) == k
            assert set(picked) <= set(pool)

    def test_too_few_raises(self):
        with pytest.raises(InsufficientPoolError) as exc_info:
            sample_without_replacement(random.Random(0), [1, 2, 3], 5)
        assert exc_info.value.requested == 5
        assert exc_info.value.available == 3

    def test_custom_error_class(self):
        with pytest.raises(InsufficientCluesError):
            sample_without_replacement(random.Random(0), [], 1, InsufficientCluesError)

    def test_negative_k(self):
        with pytest.raises(ValueError):
            sample_without_replacement(random.Random(0), [1], -1)

    def test_does_not_modify_pool(self):
        pool = [1, 2, 3, 4]
        sample_without_replacement(random.Random(0), pool, 4)
        assert pool == [1, 2, 3, 4]


class TestBoardBuilder:
    def test_board_shape(self, builder):
        board = builder.build_board()
        assert board.num_categories == 6
        assert all(len(c.clues) == 5 for c in board.categories)

    def test_ten_category_pool_gives_six_distinct(self, builder):
        board = builder.build_board()
        ids = [c.id for c in board.categories]
        assert len(set(ids)) == 6
        assert set(ids) <= set(range(1, 11))

    def test_clues_distinct_and_hidden(self, builder):
        board = builder.build_board()
        for category in board.categories:
            pairs = [(c.question, c.answer) for c in category.clues]
            assert len(set(pairs)) == 5
            assert all(c.reveal_state == RevealState.HIDDEN for c in category.clues)

    def test_clues_come_from_their_category(self, builder, source):
        board = builder.build_board()
        for category in board.categories:
            pool = {(c.question, c.answer) for c in source.categories[category.id].clues}
            assert {(c.question, c.answer) for c in category.clues} <= pool

    def test_six_clue_pool_scenario(self):
        detail = CategoryDetail(
            id=1,
            title="Numbers",
            clues=[ClueData(f"Q{i}", f"A{i}") for i in range(1, 7)],
        )
        builder = BoardBuilder(FakeSource([detail]), num_categories=1, clues_per_category=5, rng=random.Random(3))
        category = builder.sample_category(detail)
        pairs = [(c.question, c.answer) for c in category.clues]
        assert len(pairs) == 5
        assert len(set(pairs)) == 5
        assert all(q[1:] == a[1:] for q, a in pairs)

    def test_fetches_sequentially_in_sampling_order(self, builder, source):
        board = builder.build_board()
        assert source.calls[0] == ("categories", 100)
        fetched = [cid for kind, cid in source.calls[1:] if kind == "category"]
        assert fetched == [c.id for c in board.categories]

    def test_each_build_fetches_fresh(self, builder, source):
        builder.build_board()
        first_calls = len(source.calls)
        builder.build_board()
        assert len(source.calls) == 2 * first_calls

    def test_insufficient_categories(self):
        source = FakeSource([make_category(i) for i in range(3)])
        builder = BoardBuilder(source, num_categories=6, clues_per_category=5)
        with pytest.raises(InsufficientCategoriesError):
            builder.build_board()

    def test_duplicate_category_ids_counted_once(self):
        source = FakeSource([make_category(i) for i in range(5)])
        original = source.get_categories
        source.get_categories = lambda count: original(count) * 2
        builder = BoardBuilder(source, num_categories=6, clues_per_category=5)
        with pytest.raises(InsufficientCategoriesError):
            builder.build_board()

    def test_insufficient_clues(self):
        source = FakeSource([make_category(i, num_clues=3) for i in range(10)])
        builder = BoardBuilder(source, num_categories=6, clues_per_category=5)
        with pytest.raises(InsufficientCluesError) as exc_info:
            builder.build_board()
        assert exc_info.value.available == 3

    def test_duplicate_clues_counted_once(self):
        detail = CategoryDetail(
            id=1,
            title="Echo",
            clues=[ClueData("same", "same")] * 4 + [ClueData("other", "other")],
        )
        builder = BoardBuilder(FakeSource([detail]), num_categories=1, clues_per_category=3)
        with pytest.raises(InsufficientCluesError):
            builder.sample_category(detail)

    def test_service_error_propagates(self, source):
        source.fail_on_category = 3
        builder = BoardBuilder(source, num_categories=10, clues_per_category=5)
        with pytest.raises(DataServiceError):
            builder.build_board()

    def test_seeded_builds_are_reproducible(self, source):
        config = GameConfig(seed=7)
        first = BoardBuilder.from_config(source, config).build_board()
        second = BoardBuilder.from_config(source, config).build_board()
        assert first.titles == second.titles
        assert [c.question for _, _, c in first.tiles()] == [c.question for _, _, c in second.tiles()]

    def test_from_config_dimensions(self, source):
        config = GameConfig(num_categories=4, clues_per_category=2, category_pool_size=8)
        board = BoardBuilder.from_config(source, config).build_board()
        assert board.num_categories == 4
        assert board.clues_per_category == 2
        assert source.calls[0] == ("categories", 8)
