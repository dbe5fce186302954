#!/usr/bin/env python3
"""
Maple Action Dispatcher
=======================
Routes action tags from activated results to handlers.

The default handlers are stubs that only log; the host application swaps
in real ones (open the article view, file the ticket, ask the assistant).
"""

import logging
from typing import Callable, List, Optional

from smart_search.actions import Action, ActionKind, UnknownActionError

logger = logging.getLogger(__name__)


def _log_ai_query(query: str) -> None:
    logger.info("Handling AI query: %s", query)


def _log_open_article(title: str) -> None:
    logger.info("Opening article: %s", title)


def _log_create(item_type: str, title: str) -> None:
    logger.info("Creating %s: %s", item_type, title)


class ActionDispatcher:
    """
    Parse action tags once and call the matching handler.

    Unknown tags are logged and ignored. Handler exceptions are not caught
    here; the caller decides how to surface them.
    """

    def __init__(
        self,
        on_ai_query: Optional[Callable[[str], None]] = None,
        on_open_article: Optional[Callable[[str], None]] = None,
        on_create: Optional[Callable[[str, str], None]] = None,
    ):
        self.on_ai_query = on_ai_query or _log_ai_query
        self.on_open_article = on_open_article or _log_open_article
        self.on_create = on_create or _log_create
        self.history: List[Action] = []

    def dispatch(self, tag: str) -> Optional[Action]:
        """
        Handle one action tag.

        Returns:
            The parsed Action, or None if the tag was not recognized
        """
        try:
            action = Action.parse(tag)
        except UnknownActionError:
            logger.warning("Unknown action: %s", tag)
            return None

        self.history.append(action)

        if action.kind is ActionKind.AI_QUERY:
            self.on_ai_query(action.payload)
        elif action.kind is ActionKind.OPEN_ARTICLE:
            self.on_open_article(action.payload)
        elif action.kind is ActionKind.CREATE:
            self.on_create(action.item_type, action.payload)

        return action

    __call__ = dispatch
