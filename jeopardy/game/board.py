"""Board representation for the Jeopardy game."""

from dataclasses import dataclass

from ..errors import IndexOutOfRangeError
from .state import Category, Clue, RevealState


@dataclass
class Board:
    """
    A grid of categories and clues.

    Columns are categories in sampling order; rows are clue positions.
    Tile (category_index, clue_index) maps to categories[category_index].clues[clue_index].
    """
    categories: list[Category]

    def __post_init__(self):
        if not self.categories:
            raise ValueError("Board must have at least one category")
        sizes = {len(c.clues) for c in self.categories}
        if len(sizes) != 1:
            raise ValueError(f"All categories must have the same number of clues, got {sorted(sizes)}")

    @property
    def num_categories(self) -> int:
        return len(self.categories)

    @property
    def clues_per_category(self) -> int:
        return len(self.categories[0].clues)

    @property
    def titles(self) -> list[str]:
        """Category titles in column order."""
        return [c.title for c in self.categories]

    def get_clue(self, category_index: int, clue_index: int) -> Clue:
        """Get the clue at a tile address; negative indices are rejected."""
        if not (0 <= category_index < self.num_categories):
            raise IndexOutOfRangeError(category_index, clue_index)
        clues = self.categories[category_index].clues
        if not (0 <= clue_index < len(clues)):
            raise IndexOutOfRangeError(category_index, clue_index)
        return clues[clue_index]

    def tiles(self):
        """Yield (category_index, clue_index, clue) in row-major order."""
        for clue_index in range(self.clues_per_category):
            for category_index, category in enumerate(self.categories):
                yield category_index, clue_index, category.clues[clue_index]

    @property
    def is_finished(self) -> bool:
        """True once every answer has been shown."""
        return all(clue.reveal_state.is_terminal for _, _, clue in self.tiles())

    def count_in_state(self, state: RevealState) -> int:
        return sum(1 for _, _, clue in self.tiles() if clue.reveal_state == state)

    def to_dict(self, include_hidden: bool = False) -> dict:
        return {
            "titles": self.titles,
            "categories": [c.to_dict(include_hidden) for c in self.categories],
            "finished": self.is_finished,
        }

    def render_text(self, tile_label: str = "100", width: int = 14) -> str:
        """Render the board as a text grid (player view - unrevealed tiles show their label)."""
        lines = [" ".join(f"{title[:width]:^{width}}" for title in self.titles)]
        lines.append(" ".join("-" * width for _ in self.categories))
        for clue_index in range(self.clues_per_category):
            row = []
            for category in self.categories:
                clue = category.clues[clue_index]
                text = clue.visible_text
                if text is None:
                    text = str(clue.value) if clue.value is not None else tile_label
                elif clue.reveal_state == RevealState.ANSWER_SHOWN:
                    text = f"[{text}]"
                row.append(f"{text[:width]:^{width}}")
            lines.append(" ".join(row))
        return "\n".join(lines)
