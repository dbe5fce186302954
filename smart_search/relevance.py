"""
Maple Search - Relevance Scoring
================================
Keyword relevance between a query and a knowledge item.

Scoring (hundredths of a point, clamped at 100):
  50  Query is a substring of the title
  30  Query is a substring of the category
  20  Per tag containing the query
  10  Per search term found in the title
   5  Per search term found in any tag
"""

import string
from typing import FrozenSet, Optional

from .knowledge_base import KnowledgeItem


TITLE_WEIGHT = 50
CATEGORY_WEIGHT = 30
TAG_WEIGHT = 20
TERM_TITLE_WEIGHT = 10
TERM_TAG_WEIGHT = 5
MAX_POINTS = 100


def extract_search_terms(query: str) -> FrozenSet[str]:
    """
    Pick out the entity-like words of a query.

    A word counts when it is longer than two characters or starts with a
    capital letter ("SSO", "Instagram", "deployment"). Returned lower-cased.
    """
    terms = set()
    for raw in query.split():
        word = raw.strip(string.punctuation)
        if not word:
            continue
        if len(word) > 2 or word[0].isupper():
            terms.add(word.lower())
    return frozenset(terms)


def relevance_points(
    query: str,
    item: KnowledgeItem,
    search_terms: Optional[FrozenSet[str]] = None,
) -> int:
    """Integer form of calculate_relevance, in hundredths."""
    if search_terms is None:
        search_terms = extract_search_terms(query)

    query_lower = query.lower()
    title = item.title.lower()
    tags = [tag.lower() for tag in item.tags]
    points = 0

    if query_lower in title:
        points += TITLE_WEIGHT
    if query_lower in item.category.lower():
        points += CATEGORY_WEIGHT

    for tag in tags:
        if query_lower in tag:
            points += TAG_WEIGHT

    for term in search_terms:
        if term in title:
            points += TERM_TITLE_WEIGHT
        if any(term in tag for tag in tags):
            points += TERM_TAG_WEIGHT

    return min(points, MAX_POINTS)


def calculate_relevance(
    query: str,
    item: KnowledgeItem,
    search_terms: Optional[FrozenSet[str]] = None,
) -> float:
    """
    Score how relevant a knowledge item is to a query.

    Args:
        query: Raw query text
        item: Catalog entry to score
        search_terms: Pre-extracted terms (extracted from query if omitted)

    Returns:
        Score in [0.0, 1.0]
    """
    return relevance_points(query, item, search_terms) / MAX_POINTS
