"""MedShare - inter-clinic medicine surplus sharing backend."""

__version__ = "0.1.0"
