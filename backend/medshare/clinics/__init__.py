"""Clinic registry endpoints."""
