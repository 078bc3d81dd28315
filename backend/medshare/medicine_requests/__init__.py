"""Medicine request endpoints."""
