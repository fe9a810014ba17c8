"""
Health check and monitoring router.

Provides endpoints for health checks, readiness probes, and metrics.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from .. import __version__
from ..dependencies import get_optional_kb_service
from ..metrics import metrics_response
from ..services.knowledge_base_service import KnowledgeBaseService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["health"])


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    timestamp: str
    service: str = "kb-search-service"
    version: str = __version__


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    ready: bool
    checks: dict
    timestamp: str


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Basic health check endpoint - returns 200 if service is running",
)
async def health_check():
    """
    Basic health check.

    Always returns 200 OK if the service is running.
    """
    return HealthResponse(status="healthy", timestamp=datetime.now(timezone.utc).isoformat())


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    summary="Readiness check",
    description="Check that the article store is loaded and the search engine is configured",
)
async def readiness_check(
    response: Response,
    service: Optional[KnowledgeBaseService] = Depends(get_optional_kb_service),
):
    """
    Report article count and search engine configuration.

    Returns 200 if ready, 503 while the service is not initialized.
    """
    timestamp = datetime.now(timezone.utc).isoformat()

    if service is None:
        logger.warning("Readiness check failed: knowledge base service not initialized")
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return ReadinessResponse(
            ready=False, checks={"service": "not initialized"}, timestamp=timestamp
        )

    checks = {
        "articles": len(service.repository.list_all()),
        "synonym_concepts": len(service.engine.synonym_table),
        "scorer": service.engine.scorer.get_stats(),
        "fuzzy_matcher": service.engine.scorer.fuzzy_matcher.get_stats(),
    }
    return ReadinessResponse(ready=True, checks=checks, timestamp=timestamp)


@router.get("/metrics", summary="Prometheus metrics")
async def metrics():
    """Prometheus metrics endpoint."""
    return metrics_response()
