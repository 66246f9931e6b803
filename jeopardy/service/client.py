from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from urllib.parse import urljoin

import requests

from ..errors import DataServiceError


DEFAULT_BASE_URL = "https://rithm-jeopardy.herokuapp.com/api/"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategorySummary:
    id: int
    title: str


@dataclass(frozen=True)
class ClueData:
    question: str
    answer: str
    value: Optional[int] = None


@dataclass(frozen=True)
class CategoryDetail:
    id: int
    title: str
    clues: List[ClueData] = field(default_factory=list)


class TriviaSource(ABC):
    """Anything that can list categories and return a category's clues."""

    @abstractmethod
    def get_categories(self, count: int) -> List[CategorySummary]:
        ...

    @abstractmethod
    def get_category(self, category_id: int) -> CategoryDetail:
        ...


class TriviaApiClient(TriviaSource):
    """
    HTTP client for the Jeopardy trivia API.

    Every failure (network, non-2xx status, non-JSON body, missing fields)
    surfaces as DataServiceError. There is no retry.
    """
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout_s: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not base_url.endswith("/"):
            base_url += "/"
        self.base_url = base_url
        self.timeout_s = timeout_s
        self.session = session or requests.Session()

    def _get_json(self, path: str, params: Dict[str, Any]) -> Any:
        url = urljoin(self.base_url, path)
        logger.debug("GET %s params=%s", url, params)
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout_s)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise DataServiceError(f"Request to {url} failed: {e}", url=url) from e

        try:
            return resp.json()
        except ValueError as e:
            raise DataServiceError(f"Response from {url} is not JSON: {e}", url=url) from e

    def get_categories(self, count: int) -> List[CategorySummary]:
        url = urljoin(self.base_url, "categories")
        data = self._get_json("categories", {"count": count})
        if not isinstance(data, list):
            raise DataServiceError(f"Expected a list of categories, got {type(data).__name__}", url=url)
        return [_parse_summary(item, url) for item in data]

    def get_category(self, category_id: int) -> CategoryDetail:
        url = urljoin(self.base_url, "category")
        data = self._get_json("category", {"id": category_id})
        if not isinstance(data, dict):
            raise DataServiceError(f"Expected a category object, got {type(data).__name__}", url=url)

        summary = _parse_summary(data, url)
        raw_clues = data.get("clues")
        if not isinstance(raw_clues, list):
            raise DataServiceError(f"Category {category_id} has no 'clues' list", url=url)

        return CategoryDetail(
            id=summary.id,
            title=summary.title,
            clues=[_parse_clue(c, url) for c in raw_clues],
        )

    def close(self) -> None:
        self.session.close()


def _require_str(item: Dict[str, Any], key: str, what: str, url: str) -> str:
    value = item.get(key)
    if not isinstance(value, str):
        raise DataServiceError(f"Malformed {what} entry {item!r}: '{key}' must be a string", url=url)
    return value


def _parse_summary(item: Any, url: str) -> CategorySummary:
    if not isinstance(item, dict):
        raise DataServiceError(f"Malformed category entry: {item!r}", url=url)

    category_id = item.get("id")
    # bool is an int subclass; True is not a category id
    if not isinstance(category_id, int) or isinstance(category_id, bool):
        raise DataServiceError(f"Malformed category entry {item!r}: 'id' must be an integer", url=url)
    return CategorySummary(id=category_id, title=_require_str(item, "title", "category", url))


def _parse_clue(item: Any, url: str) -> ClueData:
    if not isinstance(item, dict):
        raise DataServiceError(f"Malformed clue entry: {item!r}", url=url)
    question = _require_str(item, "question", "clue", url)
    answer = _require_str(item, "answer", "clue", url)

    value = item.get("value")
    if isinstance(value, bool):
        value = None
    try:
        value = int(value) if value is not None else None
    except (TypeError, ValueError):
        value = None  # Some clues carry junk values; the tile falls back to its label

    return ClueData(question=question, answer=answer, value=value)
