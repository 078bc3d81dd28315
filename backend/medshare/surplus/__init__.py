"""Surplus posting endpoints."""
