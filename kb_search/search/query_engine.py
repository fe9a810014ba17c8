"""
Query engine for the knowledge base.

Filters a document collection, expands the query with synonyms, scores
and ranks the surviving documents. The collection is scanned on every call;
no index is kept between queries.
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from ..domain.entities import Document, SearchFilters, SearchMatch
from .normalizer import normalize
from .relevance_scorer import RelevanceScorer
from .synonyms import SynonymTable

logger = logging.getLogger(__name__)

Predicate = Callable[[Document], bool]


def _contains_normalized(attribute: str) -> Callable[[str], Predicate]:
    def build(value: str) -> Predicate:
        needle = normalize(value)
        return lambda document: needle in normalize(getattr(document, attribute))

    return build


def _date_from(value: str) -> Predicate:
    return lambda document: document.date is not None and document.date >= value


def _date_to(value: str) -> Predicate:
    return lambda document: document.date is not None and document.date <= value


def _status(value: str) -> Predicate:
    return lambda document: document.status == value


def _category(value: str) -> Predicate:
    return lambda document: value in document.tags


# Applied in this order; each active filter narrows the previous result
FILTERS: Tuple[Tuple[str, Callable[[str], Predicate]], ...] = (
    ("address", _contains_normalized("address")),
    ("executor", _contains_normalized("executor")),
    ("date_from", _date_from),
    ("date_to", _date_to),
    ("status", _status),
    ("category", _category),
)


class QueryEngine:
    """
    Intelligent search over an in-memory article collection.

    Search pipeline:
    1. Structured filters (address, executor, date range, status, category)
    2. Synonym expansion of the free-text query
    3. Relevance scoring, dropping articles that score 0
    4. Stable ordering by descending relevance
    """

    DEFAULT_SUGGESTION_LIMIT = 10
    MIN_SUGGESTION_LENGTH = 2

    def __init__(self, synonym_table: SynonymTable, scorer: Optional[RelevanceScorer] = None):
        """
        Initialize query engine.

        Args:
            synonym_table: Thesaurus used for query expansion
            scorer: Relevance scorer for ranking
        """
        self.synonym_table = synonym_table
        self.scorer = scorer or RelevanceScorer()

    def search(
        self,
        documents: Sequence[Document],
        query: Optional[str] = None,
        filters: Optional[SearchFilters] = None,
    ) -> List[SearchMatch]:
        """
        Search articles by free text and structured filters.

        Args:
            documents: Article collection to search
            query: Free-text query, may be empty
            filters: Structured filters, may be None

        Returns:
            Matches ranked by relevance when a query was given, otherwise
            the (filtered) articles in their original order without relevance
        """
        active = (filters or SearchFilters()).active()

        if not query and not active:
            return [SearchMatch(document) for document in documents]

        results = self.apply_filters(documents, active)

        if not query:
            return [SearchMatch(document) for document in results]

        terms = self.synonym_table.expand(query)
        scored = []
        for document in results:
            relevance = self.scorer.score(document, terms)
            if relevance > 0:
                scored.append(SearchMatch(document, relevance))

        # list.sort is stable: equal scores keep collection order
        scored.sort(key=lambda match: match.relevance, reverse=True)

        logger.debug(
            "Query %r expanded to %d terms: %d of %d articles matched",
            query,
            len(terms),
            len(scored),
            len(results),
        )
        return scored

    def apply_filters(self, documents: Sequence[Document], active: dict) -> List[Document]:
        """
        Narrow documents by every active filter in a fixed order.

        Args:
            documents: Article collection
            active: Filter name to non-empty value

        Returns:
            Articles passing all filters, original order kept
        """
        results = list(documents)
        for name, build_predicate in FILTERS:
            value = active.get(name)
            if not value:
                continue
            predicate = build_predicate(value)
            results = [document for document in results if predicate(document)]
        return results

    def suggest(
        self,
        documents: Sequence[Document],
        query: Optional[str],
        limit: int = DEFAULT_SUGGESTION_LIMIT,
    ) -> List[str]:
        """
        Suggest article topics for a partially typed query.

        Args:
            documents: Article collection
            query: Raw user input
            limit: Maximum number of suggestions

        Returns:
            Distinct topics containing any expanded query term, first-seen order
        """
        if not query or len(query) < self.MIN_SUGGESTION_LENGTH:
            return []

        terms = self.synonym_table.expand(query)
        suggestions: List[str] = []
        seen = set()

        for document in documents:
            if not document.topic or document.topic in seen:
                continue
            topic_norm = normalize(document.topic)
            if any(term in topic_norm for term in terms):
                seen.add(document.topic)
                suggestions.append(document.topic)
                if len(suggestions) >= limit:
                    break

        return suggestions
