#!/usr/bin/env python3
"""
Maple Search - Intent Detector
==============================
Detect imperative "create X" intents in free text and pull out a title.

Examples:
    "create a new ticket about login"  -> ticket, "Login"
    "schedule call with design team"   -> meeting, "Design Team"
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from .action_patterns import ACTION_PATTERNS, ActionPattern


# Filler words dropped from the extracted title
TITLE_STOP_WORDS = frozenset({
    'a', 'an', 'the', 'about', 'for', 'on', 'regarding', 're', 'to', 'of',
    'with', 'called', 'named', 'titled', 'please',
})


@dataclass(frozen=True)
class DetectedAction:
    """A matched intent and the title left over once action words are removed."""
    pattern: ActionPattern
    title: str

    @property
    def type(self) -> str:
        return self.pattern.type


def extract_title(words: Iterable[str], pattern: ActionPattern) -> str:
    """Drop the pattern's verbs, nouns and filler words; title-case the rest."""
    title_words = [
        word for word in words
        if word not in pattern.verbs
        and word not in pattern.nouns
        and word not in TITLE_STOP_WORDS
    ]
    return " ".join(word.capitalize() for word in title_words).strip()


def detect_action(
    query: str,
    patterns: Iterable[ActionPattern] = ACTION_PATTERNS,
) -> Optional[DetectedAction]:
    """
    Match the query against the action pattern table.

    A pattern matches when the query contains at least one of its verbs and
    at least one of its nouns as whole words. Patterns are tried in order and
    the first match wins.

    Returns:
        DetectedAction, or None when no pattern matches
    """
    words = query.lower().split()
    if not words:
        return None

    word_set = set(words)
    for pattern in patterns:
        if word_set & pattern.verbs and word_set & pattern.nouns:
            return DetectedAction(pattern=pattern, title=extract_title(words, pattern))

    return None


# ============================================================
# CLI
# ============================================================

if __name__ == "__main__":
    tests = [
        "create a new ticket about login",
        "write a guide for onboarding",
        "schedule call with design team",
        "new project",
        "hello world",
    ]

    for query in tests:
        detected = detect_action(query)
        if detected:
            print(f"✓ '{query}' → {detected.type}: '{detected.title}'")
        else:
            print(f"✗ '{query}' → no intent")
