"""FastAPI dependencies shared by the routers.

The application runs on a single process-wide in-memory store. Tests swap
it out with ``app.dependency_overrides[get_store]``.
"""

from typing import Optional

from .matching.matcher import RuleBasedMatcher
from .matching.ports import MatcherPort
from .store import InventoryStore

_store: Optional[InventoryStore] = None


def get_store() -> InventoryStore:
    """Return the process-wide store, creating it on first use."""
    global _store
    if _store is None:
        _store = InventoryStore()
    return _store


def get_matcher() -> MatcherPort:
    return RuleBasedMatcher()
