"""Clinic inventory: status derivation and endpoints."""

from .status import derive_inventory_status

__all__ = ["derive_inventory_status"]
