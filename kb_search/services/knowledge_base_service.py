"""
Business logic service layer.

Orchestrates article search, article detail with related articles, topic
suggestions and collection statistics on top of the document repository.
"""

import logging
import math
import re
import time
from typing import List, Optional, Tuple

from ..domain.entities import (
    Category,
    Document,
    KnowledgeBaseStats,
    SearchFilters,
    SearchPage,
    SimilarMatch,
)
from ..domain.exceptions import ValidationException
from ..metrics import (
    article_views_total,
    search_queries_total,
    search_query_duration_seconds,
    search_results_per_query,
)
from ..repositories.document_repository import IDocumentRepository
from ..search.query_engine import QueryEngine
from ..search.similarity import SimilarityFinder

logger = logging.getLogger(__name__)

# House number fragment of an address, e.g. "д. 5" in "ул. Ленина, д. 5"
HOUSE_NUMBER = re.compile(r"д\.\s*\d+")


class KnowledgeBaseService:
    """
    Knowledge base service.

    Every call works on a fresh repository snapshot; nothing is indexed or
    cached between calls.
    """

    def __init__(
        self,
        repository: IDocumentRepository,
        engine: QueryEngine,
        similarity_finder: SimilarityFinder,
        suggestion_limit: int = QueryEngine.DEFAULT_SUGGESTION_LIMIT,
    ):
        """
        Initialize knowledge base service.

        Args:
            repository: Article store
            engine: Query engine for search and suggestions
            similarity_finder: Related-article finder
            suggestion_limit: Maximum number of topic suggestions
        """
        self.repository = repository
        self.engine = engine
        self.similarity_finder = similarity_finder
        self.suggestion_limit = suggestion_limit

    def search_articles(
        self,
        query: Optional[str] = None,
        filters: Optional[SearchFilters] = None,
        page: int = 1,
        limit: int = 20,
    ) -> SearchPage:
        """
        Search articles and return one page of results.

        Args:
            query: Free-text query
            filters: Structured filters
            page: 1-based page number
            limit: Page size

        Returns:
            SearchPage with the requested slice and totals

        Raises:
            ValidationException: If page or limit is below 1
        """
        if page < 1:
            raise ValidationException("page", page, "Page must be at least 1")
        if limit < 1:
            raise ValidationException("limit", limit, "Limit must be at least 1")

        filters = filters or SearchFilters()
        query_type = "text" if query else ("filter" if not filters.is_empty() else "browse")

        start_time = time.perf_counter()
        matches = self.engine.search(self.repository.list_all(), query, filters)
        duration = time.perf_counter() - start_time

        search_queries_total.labels(query_type=query_type).inc()
        search_query_duration_seconds.labels(query_type=query_type).observe(duration)
        search_results_per_query.labels(query_type=query_type).observe(len(matches))

        logger.info(
            "Article search: query=%r filters=%s results=%d duration_ms=%.1f",
            query,
            filters.active(),
            len(matches),
            duration * 1000,
        )

        start = (page - 1) * limit
        return SearchPage(
            items=matches[start : start + limit],
            total=len(matches),
            page=page,
            total_pages=math.ceil(len(matches) / limit),
        )

    def get_article(self, document_id: str) -> Tuple[Document, List[SimilarMatch]]:
        """
        Open an article: count the view and find related articles.

        Args:
            document_id: Article identifier

        Returns:
            Tuple of (updated article, related articles)

        Raises:
            DocumentNotFoundException: If the id is unknown
        """
        document = self.repository.record_view(document_id)
        article_views_total.inc()

        similar = self.similarity_finder.find_similar(document, self.repository.list_all())
        return document, similar

    def suggestions(self, query: Optional[str]) -> List[str]:
        """Suggest article topics for a partially typed query."""
        return self.engine.suggest(self.repository.list_all(), query, limit=self.suggestion_limit)

    def categories(self) -> List[Category]:
        """Get tag statistics for the whole collection."""
        return self.repository.list_categories()

    def stats(self, top_limit: int = 5) -> KnowledgeBaseStats:
        """
        Compute collection-wide statistics from one repository snapshot.

        Args:
            top_limit: Number of most viewed articles to include

        Returns:
            KnowledgeBaseStats for the current collection
        """
        documents = self.repository.list_all()

        tags = {tag for document in documents for tag in document.tags}
        # sorted() is stable, equally viewed articles keep storage order
        top_viewed = sorted(documents, key=lambda document: document.views, reverse=True)
        executors = dict.fromkeys(document.executor for document in documents if document.executor)

        addresses: dict = {}
        for document in documents:
            match = HOUSE_NUMBER.search(document.address or "")
            if match:
                addresses[match.group(0)] = None

        return KnowledgeBaseStats(
            total_articles=len(documents),
            total_categories=len(tags),
            total_views=sum(document.views for document in documents),
            top_viewed=tuple(top_viewed[:top_limit]),
            executors=tuple(executors),
            addresses=tuple(addresses),
        )
