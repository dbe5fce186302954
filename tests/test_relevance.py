"""Tests for knowledge item relevance scoring."""

import pytest

from smart_search.knowledge_base import KNOWLEDGE_BASE, KnowledgeItem
from smart_search.relevance import calculate_relevance, extract_search_terms


def _by_title(title):
    return next(item for item in KNOWLEDGE_BASE if item.title == title)


class TestSearchTerms:

    def test_short_lowercase_words_skipped(self):
        assert extract_search_terms("How to set up SSO") == {"how", "set", "sso"}

    def test_capitalized_short_word_kept(self):
        assert extract_search_terms("ask an AI") == {"ask", "ai"}

    def test_punctuation_stripped(self):
        assert extract_search_terms("SSO? (setup)") == {"sso", "setup"}

    def test_empty(self):
        assert extract_search_terms("") == frozenset()
        assert extract_search_terms("?? !!") == frozenset()


class TestCalculateRelevance:

    def test_exact_title_match(self):
        item = _by_title("Deployment best practices")
        score = calculate_relevance("deployment best practices", item)
        assert score == pytest.approx(0.95)

    def test_shared_title_words_only(self):
        item = _by_title("Content Calendar Best Practices")
        assert calculate_relevance("deployment best practices", item) == 0.2

    def test_three_title_terms_land_exactly_on_threshold(self):
        # summed as floats, 0.1 + 0.1 + 0.1 would be 0.30000000000000004
        item = KnowledgeItem("Gamma beta alpha", "Misc", "doc", ())
        assert calculate_relevance("alpha beta gamma", item) == 0.3

    def test_category_only(self):
        item = KnowledgeItem("Zeta", "Reports", "doc", ())
        assert calculate_relevance("reports", item) == 0.3

    def test_tag_matches_are_additive(self):
        item = KnowledgeItem("Zeta", "Misc", "doc", ("ops", "devops", "mlops"))
        # three tags contain "ops"; "ops" is also a term found in those tags
        assert calculate_relevance("ops", item) == pytest.approx(0.65)

    def test_clamped_to_one(self):
        item = _by_title("Engagement Automation Workflows")
        assert calculate_relevance("automation", item) == 1.0

    def test_case_insensitive(self):
        item = _by_title("How to set up SSO")
        assert calculate_relevance("SSO", item) == calculate_relevance("sso", item)

    def test_no_match_scores_zero(self):
        for item in KNOWLEDGE_BASE:
            assert calculate_relevance("zzzz", item) == 0.0

    def test_precomputed_terms_are_used(self):
        item = _by_title("Webhook Configuration")
        assert calculate_relevance("xyz", item, frozenset({"webhook"})) == pytest.approx(0.15)

    def test_deterministic(self):
        item = _by_title("Competitor Analysis Reports")
        scores = {calculate_relevance("analysis reports", item) for _ in range(5)}
        assert len(scores) == 1
