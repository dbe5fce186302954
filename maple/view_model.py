#!/usr/bin/env python3
"""
Maple Search View Model
=======================
State behind the launcher search panel.

Flow:
    text input -> dedupe -> debounce -> SmartSearchManager.search
        -> results + selection reset -> activation -> ActionDispatcher
"""

import logging
import threading
from typing import Callable, List, Optional

from smart_search.config import SEARCH_CONFIG, SearchConfig
from smart_search.results import ResultItem
from smart_search.search_manager import SmartSearchManager
from smart_search.selection import ResultSelectionModel

from .action_dispatcher import ActionDispatcher
from .debounce import Debouncer

logger = logging.getLogger(__name__)


class SearchViewModel:
    """
    Launcher search state: query text, current results, selection, errors.

    Searches triggered by typing are debounced. Each query gets a generation
    number and only the newest generation may publish results, so a slow
    stale search can never overwrite a newer one.
    """

    def __init__(
        self,
        search_manager: SmartSearchManager,
        dispatcher: ActionDispatcher,
        config: Optional[SearchConfig] = None,
        on_results: Optional[Callable[[List[ResultItem]], None]] = None,
    ):
        self.search_manager = search_manager
        self.dispatcher = dispatcher
        self.config = config or search_manager.config
        self.selection = ResultSelectionModel(max_visible=self.config.max_visible_results)
        self.on_results = on_results

        self.error: Optional[Exception] = None
        self._search_text = ""
        self._results: List[ResultItem] = []
        self._generation = 0
        self._lock = threading.RLock()
        self._debouncer = Debouncer(self.config.debounce_seconds, self._debounced_search)

    # ========================================
    # INPUT
    # ========================================

    @property
    def search_text(self) -> str:
        return self._search_text

    @search_text.setter
    def search_text(self, text: str) -> None:
        if text == self._search_text:
            return
        self._search_text = text
        self._debouncer.submit((self._next_generation(), text))

    def flush(self) -> None:
        """Run the pending debounced search immediately."""
        self._debouncer.flush()

    def cancel_pending(self) -> None:
        self._debouncer.cancel()

    @property
    def search_pending(self) -> bool:
        return self._debouncer.pending

    # ========================================
    # SEARCH
    # ========================================

    def perform_search(self, query: str) -> List[ResultItem]:
        """Search synchronously and publish the results."""
        self._search_text = query
        generation = self._next_generation()
        self._run_search(generation, query)
        return self.results

    def _next_generation(self) -> int:
        with self._lock:
            self._generation += 1
            return self._generation

    def _debounced_search(self, submission) -> None:
        generation, query = submission
        self._run_search(generation, query)

    def _run_search(self, generation: int, query: str) -> None:
        results = self.search_manager.search(query, self.handle_action)

        # Publish and notify under one lock so a newer search cannot slip in between
        with self._lock:
            if generation != self._generation:
                logger.debug("Dropping stale results for %r", query)
                return
            self.error = None
            self._results = results
            self.selection.set_results(results)
            if self.on_results:
                self.on_results(results)

    @property
    def results(self) -> List[ResultItem]:
        return list(self._results)

    @property
    def visible_results(self) -> List[ResultItem]:
        return self.selection.visible_results

    @property
    def selected_index(self) -> int:
        return self.selection.selected_index

    # ========================================
    # KEYBOARD
    # ========================================

    def move_up(self) -> None:
        self.selection.move_up()

    def move_down(self) -> None:
        self.selection.move_down()

    def activate(self) -> Optional[ResultItem]:
        return self.selection.activate()

    def click(self, index: int) -> Optional[ResultItem]:
        self.selection.select(index)
        return self.selection.activate()

    # ========================================
    # ACTIONS
    # ========================================

    def handle_action(self, tag: str) -> None:
        """Dispatch an action tag; handler failures land in self.error."""
        try:
            self.dispatcher.dispatch(tag)
        except Exception as e:
            logger.exception("Action %r failed", tag)
            self.error = e


def create_view_model(
    config: Optional[SearchConfig] = None,
    dispatcher: Optional[ActionDispatcher] = None,
) -> SearchViewModel:
    """Wire up the launcher's search service, dispatcher and view model."""
    config = config or SEARCH_CONFIG
    manager = SmartSearchManager(config=config)
    return SearchViewModel(manager, dispatcher or ActionDispatcher(), config=config)
