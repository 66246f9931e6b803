# Trivia data service
from .client import (
    DEFAULT_BASE_URL,
    CategoryDetail,
    CategorySummary,
    ClueData,
    TriviaApiClient,
    TriviaSource,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "CategoryDetail",
    "CategorySummary",
    "ClueData",
    "TriviaApiClient",
    "TriviaSource",
]
