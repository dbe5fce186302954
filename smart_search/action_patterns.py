"""
Maple Search - Action Patterns
==============================
Verb/noun vocabularies for the imperative intents the launcher understands
("create a ticket", "schedule a meeting", ...).
"""

from dataclasses import dataclass
from typing import FrozenSet, Tuple


# Display glyphs and icons shared by result rows
CONFIRM_GLYPH = "⏎"
NEW_ITEM_GLYPH = "⌘+N"
AI_ICON = "sparkle"
CREATE_ICON = "plus.circle"


@dataclass(frozen=True)
class ActionPattern:
    """An intent: any one verb plus any one noun triggers it."""
    verbs: FrozenSet[str]
    nouns: FrozenSet[str]
    icon: str
    shortcut: str
    type: str


def _pattern(verbs: str, nouns: str, icon: str, shortcut: str, type: str) -> ActionPattern:
    return ActionPattern(
        verbs=frozenset(verbs.lower().split()),
        nouns=frozenset(nouns.lower().split()),
        icon=icon,
        shortcut=shortcut,
        type=type,
    )


# ============================================================
# PATTERN TABLE - first match wins, keep specific intents first
# ============================================================

ACTION_PATTERNS: Tuple[ActionPattern, ...] = (
    _pattern("create new add open start make raise submit file",
             "ticket issue bug problem request support",
             "ticket", "⌘+T", "ticket"),
    _pattern("create new add write publish draft compose",
             "article doc document guide tutorial post",
             "doc.text", "⌘+N", "article"),
    _pattern("create new add setup configure make",
             "profile account user contact person",
             "person.circle", "⌘+P", "profile"),
    _pattern("create new add start track register",
             "opportunity deal lead sale prospect",
             "chart.line.uptrend.xyaxis", "⌘+O", "opportunity"),
    _pattern("create new add upload share store",
             "resource file asset document attachment",
             "folder", "⌘+R", "resource"),
    _pattern("create new add assign schedule",
             "task todo assignment work activity",
             "checklist", "⌘+K", "task"),
    _pattern("create new schedule setup arrange book",
             "meeting call appointment session discussion",
             "video", "⌘+M", "meeting"),
    _pattern("create new start initialize begin",
             "project initiative program campaign",
             "folder.badge.gearshape", "⌘+J", "project"),
)

ACTION_TYPES: FrozenSet[str] = frozenset(p.type for p in ACTION_PATTERNS)


# Suggested "create" actions when no intent was detected, by priority
CONTEXTUAL_SUGGESTIONS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("ticket", ("issue", "problem")),
    ("article", ("guide", "help")),
    ("resource", ("file", "document")),
    ("opportunity", ("lead", "sale")),
)
