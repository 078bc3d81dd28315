"""Observability API endpoints.

Provides metrics and health checks for monitoring.
"""

from fastapi import APIRouter, Depends, Response
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from ..dependencies import get_store
from ..store import InventoryStore

router = APIRouter(tags=["Observability"])


@router.get("/metrics", include_in_schema=False)
def metrics():
    """Expose Prometheus metrics in the text exposition format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


@router.get("/health", summary="Health check endpoint")
def health_check(store: InventoryStore = Depends(get_store)):
    """Report liveness and the size of the in-memory collections."""
    return {
        "status": "healthy",
        "collections": store.counts(),
    }
