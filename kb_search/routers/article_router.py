"""
Article search router.

Endpoints:
GET /api/v1/articles?search=...&status=...&page=1&limit=20
GET /api/v1/articles/{article_id}
GET /api/v1/suggestions?q=...
GET /api/v1/categories
GET /api/v1/stats
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ..dependencies import get_kb_service
from ..domain.entities import SearchFilters
from ..services.knowledge_base_service import KnowledgeBaseService
from .models import (
    ArticleDetailResponse,
    ArticleListResponse,
    ArticleResponse,
    CategoryResponse,
    ErrorResponse,
    SimilarArticle,
    StatsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["articles"])

MAX_PAGE_SIZE = 100


@router.get(
    "/articles",
    response_model=ArticleListResponse,
    responses={400: {"description": "Invalid paging", "model": ErrorResponse}},
    summary="Search knowledge base articles",
    description="""
    Search articles by free text with synonym expansion and fuzzy topic
    matching, optionally narrowed by structured filters.

    **Ranking:** topic > topic code > number > tags > response > appeal >
    address = executor, plus a fuzzy topic bonus and a popularity boost.

    Without `search` and filters the whole collection is returned in
    storage order.
    """,
)
async def list_articles(
    search: Optional[str] = Query(None, max_length=200, description="Free-text query"),
    category: Optional[str] = Query(None, description="Exact tag"),
    address: Optional[str] = Query(None, description="Address fragment"),
    executor: Optional[str] = Query(None, description="Executor fragment"),
    date_from: Optional[str] = Query(None, alias="dateFrom", description="Earliest date (ISO 8601)"),
    date_to: Optional[str] = Query(None, alias="dateTo", description="Latest date (ISO 8601)"),
    status: Optional[str] = Query(None, description="Exact ticket status"),
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(20, ge=1, le=MAX_PAGE_SIZE, description="Articles per page"),
    service: KnowledgeBaseService = Depends(get_kb_service),
) -> ArticleListResponse:
    """
    Search articles.

    Returns:
        ArticleListResponse with the requested page
    """
    filters = SearchFilters(
        address=address,
        executor=executor,
        date_from=date_from,
        date_to=date_to,
        status=status,
        category=category,
    )
    result = service.search_articles(search, filters, page=page, limit=limit)

    return ArticleListResponse(
        articles=[ArticleResponse(**match.to_dict()) for match in result.items],
        total=result.total,
        page=result.page,
        total_pages=result.total_pages,
    )


@router.get(
    "/articles/{article_id}",
    response_model=ArticleDetailResponse,
    responses={404: {"description": "Article not found", "model": ErrorResponse}},
    summary="Get article with related articles",
)
async def get_article(
    article_id: str,
    service: KnowledgeBaseService = Depends(get_kb_service),
) -> ArticleDetailResponse:
    """
    Get an article and count the view.

    Related articles share tags with this one; topic similarity breaks ties.
    """
    document, similar = service.get_article(article_id)

    return ArticleDetailResponse(
        **document.to_dict(),
        similar=[SimilarArticle(**match.to_dict()) for match in similar],
    )


@router.get("/suggestions", response_model=List[str], summary="Topic suggestions")
async def get_suggestions(
    q: Optional[str] = Query(None, max_length=100, description="Partially typed query"),
    service: KnowledgeBaseService = Depends(get_kb_service),
) -> List[str]:
    """Suggest article topics; queries shorter than 2 characters get none."""
    return service.suggestions(q)


@router.get("/categories", response_model=List[CategoryResponse], summary="Tag statistics")
async def get_categories(
    service: KnowledgeBaseService = Depends(get_kb_service),
) -> List[CategoryResponse]:
    """List every tag with the number of articles carrying it."""
    return [
        CategoryResponse(id=category.id, name=category.name, count=category.count)
        for category in service.categories()
    ]


@router.get("/stats", response_model=StatsResponse, summary="Collection statistics")
async def get_stats(
    service: KnowledgeBaseService = Depends(get_kb_service),
) -> StatsResponse:
    """Totals, the five most viewed articles, executors and house numbers."""
    stats = service.stats()

    return StatsResponse(
        total_articles=stats.total_articles,
        total_categories=stats.total_categories,
        total_views=stats.total_views,
        top_viewed=[ArticleResponse(**document.to_dict()) for document in stats.top_viewed],
        executors=list(stats.executors),
        addresses=list(stats.addresses),
    )
