"""In-memory store for MedShare collections."""

from .errors import (
    StoreError,
    NotFoundError,
    ConflictError,
    InsufficientStockError,
    InvalidQuantityError,
)
from .inventory_store import InventoryStore, StoreSnapshot, TransferSummary, ImpactStats
from .seed import seed_demo_data

__all__ = [
    "StoreError",
    "NotFoundError",
    "ConflictError",
    "InsufficientStockError",
    "InvalidQuantityError",
    "InventoryStore",
    "StoreSnapshot",
    "TransferSummary",
    "ImpactStats",
    "seed_demo_data",
]
