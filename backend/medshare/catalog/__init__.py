"""Medicine catalog endpoints."""
