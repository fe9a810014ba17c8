"""
Main FastAPI application.

This file wires together all layers:
- Domain: Articles, filters and result wrappers
- Search: Normalization, synonyms, fuzzy matching, scoring
- Repositories: Article store
- Services: Business logic orchestration
- Routers: HTTP endpoints
"""

import time
from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from . import __version__
from .config import Settings, get_settings
from .dependencies import set_kb_service
from .domain.exceptions import (
    DataLoadException,
    DocumentNotFoundException,
    KnowledgeBaseException,
    ValidationException,
)
from .logging_config import setup_logging
from .metrics import http_request_duration_seconds, http_requests_total
from .repositories.document_repository import InMemoryDocumentRepository
from .routers import article_router, health_router
from .search import FuzzyMatcher, QueryEngine, RelevanceScorer, SimilarityFinder, SynonymTable
from .services.knowledge_base_service import KnowledgeBaseService

logger = structlog.get_logger(__name__)


def create_kb_service(settings: Settings) -> KnowledgeBaseService:
    """
    Create and configure the knowledge base service with all dependencies.

    Args:
        settings: Application settings

    Returns:
        Configured KnowledgeBaseService instance

    Raises:
        DataLoadException: If DATA_FILE is set but cannot be loaded
    """
    if settings.DATA_FILE:
        repository = InMemoryDocumentRepository.from_json_file(settings.DATA_FILE)
    else:
        logger.warning("DATA_FILE not configured, starting with an empty article store")
        repository = InMemoryDocumentRepository()

    # One immutable thesaurus and matcher shared by every component
    synonym_table = SynonymTable.default()
    fuzzy_matcher = FuzzyMatcher(threshold=settings.FUZZY_THRESHOLD)

    return KnowledgeBaseService(
        repository=repository,
        engine=QueryEngine(synonym_table, RelevanceScorer(fuzzy_matcher)),
        similarity_finder=SimilarityFinder(fuzzy_matcher, limit=settings.SIMILAR_LIMIT),
        suggestion_limit=settings.SUGGESTION_LIMIT,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL, use_json=settings.LOG_JSON)

    logger.info("Starting knowledge base service", version=__version__)

    try:
        service = create_kb_service(settings)
    except DataLoadException as e:
        logger.error("Failed to load articles", error=e.message, **e.details)
        raise

    set_kb_service(service)
    logger.info("Knowledge base service started", articles=len(service.repository.list_all()))

    yield

    set_kb_service(None)
    logger.info("Knowledge base service shut down")


# Create FastAPI app
app = FastAPI(
    title="Housing Knowledge Base Search",
    description="Intelligent search over housing-management support tickets",
    version=__version__,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)


# Request ID middleware
@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Add request ID for log correlation."""
    request_id = request.headers.get("X-Request-ID", f"req-{id(request)}")

    structlog.contextvars.bind_contextvars(request_id=request_id)
    try:
        response = await call_next(request)
    finally:
        structlog.contextvars.clear_contextvars()

    response.headers["X-Request-ID"] = request_id
    return response


# Metrics middleware
@app.middleware("http")
async def track_metrics(request: Request, call_next):
    """Track Prometheus metrics."""
    start_time = time.perf_counter()

    response = await call_next(request)

    route = request.scope.get("route")
    endpoint = getattr(route, "path", request.url.path)
    http_requests_total.labels(
        method=request.method, endpoint=endpoint, status=response.status_code
    ).inc()
    http_request_duration_seconds.labels(method=request.method, endpoint=endpoint).observe(
        time.perf_counter() - start_time
    )

    return response


# Include routers
app.include_router(article_router.router)
app.include_router(health_router.router)


ERROR_STATUS = {
    DocumentNotFoundException: (status.HTTP_404_NOT_FOUND, "not_found"),
    ValidationException: (status.HTTP_400_BAD_REQUEST, "validation_error"),
}


@app.exception_handler(KnowledgeBaseException)
async def kb_exception_handler(request: Request, exc: KnowledgeBaseException):
    """Translate domain exceptions into JSON error responses."""
    status_code, error = ERROR_STATUS.get(
        type(exc), (status.HTTP_500_INTERNAL_SERVER_ERROR, "internal_error")
    )
    logger.warning(
        "Request failed",
        path=request.url.path,
        error=error,
        message=exc.message,
    )
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "message": exc.message, "details": exc.details},
    )


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint with service information."""
    return {
        "service": "Housing Knowledge Base Search",
        "version": __version__,
        "status": "operational",
        "docs": "/api/docs",
        "health": "/api/v1/health",
        "ready": "/api/v1/ready",
    }


def run(settings: Optional[Settings] = None) -> None:
    """Run the service with uvicorn."""
    import uvicorn

    settings = settings or get_settings()
    uvicorn.run(
        "kb_search.app:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
