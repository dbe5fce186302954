#!/usr/bin/env python3
"""
Maple Smart Search
==================
Turns launcher input into a ranked list of actionable results:
- Intent detection ("create a ticket about login")
- Knowledge base relevance ranking
- Contextual "create" suggestions

Result order:
    [intent or Ask-AI] + [up to 5 knowledge items] + [optional suggestion]
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from .action_patterns import (
    ACTION_PATTERNS,
    AI_ICON,
    CONFIRM_GLYPH,
    CONTEXTUAL_SUGGESTIONS,
    CREATE_ICON,
    NEW_ITEM_GLYPH,
    ActionPattern,
)
from .actions import Action
from .config import SEARCH_CONFIG, SearchConfig
from .intent_detector import DetectedAction, detect_action
from .knowledge_base import KNOWLEDGE_BASE, KnowledgeItem
from .relevance import extract_search_terms, relevance_points, MAX_POINTS
from .results import ResultItem

logger = logging.getLogger(__name__)

ActionHandler = Callable[[str], None]


@dataclass(frozen=True)
class ScoredItem:
    """Knowledge item with its relevance score."""
    item: KnowledgeItem
    score: float


class SmartSearchManager:
    """
    Launcher search service.

    Construct one per application and pass it to whoever needs it.
    Catalog and pattern table are read-only, so one instance can serve
    any number of callers.
    """

    def __init__(
        self,
        knowledge_base: Sequence[KnowledgeItem] = KNOWLEDGE_BASE,
        patterns: Sequence[ActionPattern] = ACTION_PATTERNS,
        config: Optional[SearchConfig] = None,
    ):
        self.knowledge_base = tuple(knowledge_base)
        self.patterns = tuple(patterns)
        self.config = config or SEARCH_CONFIG

    # ========================================
    # SEARCH
    # ========================================

    def search(self, query: str, on_action: ActionHandler) -> List[ResultItem]:
        """
        Build the result list for a query.

        Args:
            query: Raw launcher input
            on_action: Receives the action tag when a result is activated

        Returns:
            Ordered result rows (empty for an empty query)
        """
        if not query.strip():
            return []

        results: List[ResultItem] = []

        detected = detect_action(query, self.patterns)
        if detected:
            results.append(self._intent_result(detected, on_action))
        else:
            results.append(self._make_result(
                AI_ICON,
                f"Ask AI about '{query}'",
                CONFIRM_GLYPH,
                Action.ai_query(query),
                on_action,
            ))

        for scored in self.rank_knowledge(query):
            results.append(self._make_result(
                scored.item.icon,
                scored.item.title,
                CONFIRM_GLYPH,
                Action.open_article(scored.item.title),
                on_action,
            ))

        if detected is None and len(query) > self.config.min_fallback_query_length:
            suggestion = self.suggest_action_type(query)
            if suggestion:
                results.append(self._make_result(
                    CREATE_ICON,
                    f"Create new {suggestion} about '{query}'",
                    NEW_ITEM_GLYPH,
                    Action.create(suggestion, query),
                    on_action,
                ))

        logger.debug("search %r -> %d results (intent=%s)",
                     query, len(results), detected.type if detected else None)
        return results

    def rank_knowledge(self, query: str) -> List[ScoredItem]:
        """Knowledge items above the relevance threshold, best first."""
        search_terms = extract_search_terms(query)
        threshold = self.config.relevance_threshold

        scored = []
        for item in self.knowledge_base:
            score = relevance_points(query, item, search_terms) / MAX_POINTS
            if score > threshold:
                scored.append(ScoredItem(item=item, score=score))

        # sort() is stable, so catalog order breaks ties
        scored.sort(key=lambda s: -s.score)
        return scored[:self.config.max_knowledge_results]

    @staticmethod
    def suggest_action_type(query: str) -> Optional[str]:
        """First contextual suggestion whose trigger words appear in the query."""
        query_lower = query.lower()
        for action_type, triggers in CONTEXTUAL_SUGGESTIONS:
            if any(trigger in query_lower for trigger in triggers):
                return action_type
        return None

    # ========================================
    # RESULT BUILDERS
    # ========================================

    def _intent_result(self, detected: DetectedAction, on_action: ActionHandler) -> ResultItem:
        pattern = detected.pattern
        if detected.title:
            title = f"Create {pattern.type}: {detected.title}"
        else:
            title = f"Create new {pattern.type}"
        return self._make_result(
            pattern.icon,
            title,
            pattern.shortcut,
            Action.create(pattern.type, detected.title),
            on_action,
        )

    @staticmethod
    def _make_result(
        icon: str,
        title: str,
        shortcut: Optional[str],
        action: Action,
        on_action: ActionHandler,
    ) -> ResultItem:
        tag = action.tag
        return ResultItem(
            icon=icon,
            title=title,
            shortcut=shortcut,
            action=lambda: on_action(tag),
        )


# ============================================================
# CLI for testing
# ============================================================

if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        print("Usage: python -m smart_search.search_manager <query>")
        sys.exit(1)

    query = " ".join(sys.argv[1:])
    manager = SmartSearchManager()

    print(f"Query: {query}")
    print("-" * 40)
    for i, result in enumerate(manager.search(query, on_action=print)):
        print(f"  {i}. [{result.icon}] {result.title}  {result.shortcut or ''}")
