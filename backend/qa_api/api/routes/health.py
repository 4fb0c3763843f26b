"""Health & Readiness Checks — liveness and readiness endpoints.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the Store cannot serve requests (readiness)
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from qa_api.api.dependencies import get_store
from qa_api.config import Settings, get_settings
from qa_api.core.repository_protocols import Store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "qa-api"}


@router.get("/ready")
async def readiness_check(
    store: Store = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """Readiness check — includes Store connectivity."""
    if not await store.health_check():
        logger.warning("Readiness check failed: store unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "store_unavailable"},
        )
    return {"status": "ready", "checks": {settings.store_backend.value: "healthy"}}
