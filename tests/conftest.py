"""Shared fixtures for the Maple search tests."""

from typing import List

import pytest

from smart_search.config import SearchConfig
from smart_search.results import ResultItem
from smart_search.search_manager import SmartSearchManager


class ActionRecorder:
    """Collects action tags emitted by activated results."""

    def __init__(self):
        self.tags: List[str] = []

    def __call__(self, tag: str) -> None:
        self.tags.append(tag)


@pytest.fixture
def config() -> SearchConfig:
    return SearchConfig()


@pytest.fixture
def manager(config) -> SmartSearchManager:
    return SmartSearchManager(config=config)


@pytest.fixture
def recorder() -> ActionRecorder:
    return ActionRecorder()


@pytest.fixture
def make_results():
    """Build n result rows whose actions record their own index."""
    def _make(n: int, activated: List[int]) -> List[ResultItem]:
        return [
            ResultItem(
                icon="doc",
                title=f"Result {i}",
                shortcut="⏎",
                action=lambda i=i: activated.append(i),
            )
            for i in range(n)
        ]
    return _make
