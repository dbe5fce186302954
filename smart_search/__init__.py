"""
Maple Smart Search
==================
Intent detection and knowledge ranking for the Maple launcher.
"""

from .config import SearchConfig, ConfigError, SEARCH_CONFIG, load_config
from .knowledge_base import KnowledgeItem, KNOWLEDGE_BASE
from .action_patterns import ActionPattern, ACTION_PATTERNS, ACTION_TYPES, CONTEXTUAL_SUGGESTIONS
from .intent_detector import DetectedAction, detect_action, extract_title
from .relevance import calculate_relevance, extract_search_terms
from .actions import Action, ActionKind, UnknownActionError
from .results import ResultItem
from .search_manager import SmartSearchManager, ScoredItem
from .selection import ResultSelectionModel

__all__ = [
    # Config
    "SearchConfig", "ConfigError", "SEARCH_CONFIG", "load_config",
    # Catalogs
    "KnowledgeItem", "KNOWLEDGE_BASE",
    "ActionPattern", "ACTION_PATTERNS", "ACTION_TYPES", "CONTEXTUAL_SUGGESTIONS",
    # Detection and scoring
    "DetectedAction", "detect_action", "extract_title",
    "calculate_relevance", "extract_search_terms",
    # Actions and results
    "Action", "ActionKind", "UnknownActionError", "ResultItem",
    # Search
    "SmartSearchManager", "ScoredItem", "ResultSelectionModel",
]
