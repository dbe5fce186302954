"""
Maple Search - Result Selection
===============================
Keyboard selection over the visible result rows.

Rows are drawn bottom-up (index 0 sits right above the input field), so
the up arrow moves to a higher index and the down arrow to a lower one.
"""

from typing import List, Optional, Sequence

from .results import ResultItem


class ResultSelectionModel:
    """Selected-row state for the launcher result list."""

    def __init__(self, max_visible: int = 5):
        self.max_visible = max_visible
        self._results: List[ResultItem] = []
        self.selected_index = 0

    def set_results(self, results: Sequence[ResultItem]) -> None:
        """Show a new result list; only the first max_visible rows are reachable."""
        self._results = list(results[:self.max_visible])
        self.selected_index = 0

    def clear(self) -> None:
        self.set_results([])

    @property
    def visible_results(self) -> List[ResultItem]:
        return list(self._results)

    @property
    def count(self) -> int:
        return len(self._results)

    @property
    def selected_item(self) -> Optional[ResultItem]:
        if not self._results:
            return None
        return self._results[self.selected_index]

    def display_order(self) -> List[ResultItem]:
        """Visible rows top to bottom as drawn on screen."""
        return list(reversed(self._results))

    def move_up(self) -> None:
        if not self._results:
            return
        if self.selected_index >= self.count - 1:
            self.selected_index = 0
        else:
            self.selected_index += 1

    def move_down(self) -> None:
        if not self._results:
            return
        if self.selected_index <= 0:
            self.selected_index = self.count - 1
        else:
            self.selected_index -= 1

    def select(self, index: int) -> None:
        if not 0 <= index < self.count:
            raise IndexError(f"Selection {index} out of range (0..{self.count - 1})")
        self.selected_index = index

    def activate(self) -> Optional[ResultItem]:
        """Run the selected row's action. No-op on an empty list."""
        item = self.selected_item
        if item is not None:
            item.activate()
        return item
