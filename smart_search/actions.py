"""
Maple Search - Actions
======================
Typed form of the action tags emitted when a result is activated.

Tag formats (the string contract with the host application):
    "ai_query: {query}"
    "open_article: {title}"
    "create_{type}: {title or query}"
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .action_patterns import ACTION_TYPES


class ActionKind(Enum):
    """What the host should do with an activated result."""
    AI_QUERY = "ai_query"
    OPEN_ARTICLE = "open_article"
    CREATE = "create"


class UnknownActionError(ValueError):
    """Raised when a tag does not match any known action prefix."""


@dataclass(frozen=True)
class Action:
    """A parsed action tag."""
    kind: ActionKind
    payload: str
    item_type: Optional[str] = None

    @classmethod
    def ai_query(cls, query: str) -> "Action":
        return cls(ActionKind.AI_QUERY, query)

    @classmethod
    def open_article(cls, title: str) -> "Action":
        return cls(ActionKind.OPEN_ARTICLE, title)

    @classmethod
    def create(cls, item_type: str, title: str) -> "Action":
        return cls(ActionKind.CREATE, title, item_type)

    @property
    def prefix(self) -> str:
        if self.kind is ActionKind.CREATE:
            return f"create_{self.item_type}"
        return self.kind.value

    @property
    def tag(self) -> str:
        return f"{self.prefix}: {self.payload}"

    def __str__(self) -> str:
        return self.tag

    @classmethod
    def parse(cls, tag: str) -> "Action":
        """
        Parse an action tag.

        Raises:
            UnknownActionError: unrecognized prefix or unknown create type
        """
        prefix, sep, payload = tag.partition(":")
        if not sep:
            raise UnknownActionError(f"Malformed action tag: {tag!r}")

        # Tags are rendered as "prefix: payload"; drop only that one space
        if payload.startswith(" "):
            payload = payload[1:]

        if prefix == ActionKind.AI_QUERY.value:
            return cls.ai_query(payload)
        if prefix == ActionKind.OPEN_ARTICLE.value:
            return cls.open_article(payload)
        if prefix.startswith("create_"):
            item_type = prefix[len("create_"):]
            if item_type in ACTION_TYPES:
                return cls.create(item_type, payload)

        raise UnknownActionError(f"Unknown action: {tag!r}")
