"""
Maple Launcher
==============
Application layer around the smart search core.
"""

from .action_dispatcher import ActionDispatcher
from .debounce import Debouncer
from .view_model import SearchViewModel, create_view_model

__all__ = ["ActionDispatcher", "Debouncer", "SearchViewModel", "create_view_model"]
