"""
Domain entities for knowledge base articles.

Core business objects representing support-ticket articles, search filters
and scored search results. These entities are framework-agnostic.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional, Tuple

# Short and long text fields of an article, in serialization order
TEXT_FIELDS = (
    "topic",
    "topic_code",
    "number",
    "address",
    "executor",
    "status",
    "appeal_text",
    "response_text",
    "date",
    "created_at",
    "updated_at",
)


def _as_text(value: Any) -> Optional[str]:
    """Coerce a raw JSON value to text, keeping None as None."""
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class Document:
    """
    Knowledge base article (a resolved support ticket).

    Immutable: the search engine only reads documents. View counts are
    changed by the repository, which stores a replaced copy.
    """

    id: str
    topic: Optional[str] = None
    topic_code: Optional[str] = None
    number: Optional[str] = None
    address: Optional[str] = None
    executor: Optional[str] = None
    status: Optional[str] = None
    appeal_text: Optional[str] = None
    response_text: Optional[str] = None
    tags: Tuple[str, ...] = ()
    date: Optional[str] = None
    views: int = 0
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def __post_init__(self):
        """Validate document on creation."""
        if not self.id:
            raise ValueError("Document id must not be empty")
        if self.views < 0:
            raise ValueError("Document views must be non-negative")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Document":
        """
        Build a document from its stored JSON shape.

        Unknown keys are ignored, scalar text values are coerced to str and
        a missing view counter defaults to 0.
        """
        if data.get("id") in (None, ""):
            raise ValueError("Document id must not be empty")

        values: Dict[str, Any] = {name: _as_text(data.get(name)) for name in TEXT_FIELDS}
        tags = data.get("tags") or ()
        if not isinstance(tags, (list, tuple)):
            raise ValueError(f"Document tags must be a list, got {type(tags).__name__}")
        return cls(
            id=str(data["id"]),
            tags=tuple(str(tag) for tag in tags),
            views=int(data.get("views") or 0),
            **values,
        )

    def with_views(self, views: int) -> "Document":
        """Return a copy of this document with a new view count."""
        return replace(self, views=views)

    @property
    def tag_set(self) -> frozenset:
        """Tags as a set (duplicates collapsed)."""
        return frozenset(self.tags)

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses and storage."""
        result: Dict[str, Any] = {"id": self.id}
        for name in TEXT_FIELDS:
            result[name] = getattr(self, name)
        result["tags"] = list(self.tags)
        result["views"] = self.views
        return result


@dataclass(frozen=True)
class SearchFilters:
    """
    Optional structured filters for an article search.

    Empty strings are treated the same as absent values.
    """

    address: Optional[str] = None
    executor: Optional[str] = None
    date_from: Optional[str] = None
    date_to: Optional[str] = None
    status: Optional[str] = None
    category: Optional[str] = None

    def active(self) -> Dict[str, str]:
        """Return only the filters that carry a non-empty value."""
        return {
            name: value
            for name, value in (
                ("address", self.address),
                ("executor", self.executor),
                ("date_from", self.date_from),
                ("date_to", self.date_to),
                ("status", self.status),
                ("category", self.category),
            )
            if value
        }

    def is_empty(self) -> bool:
        return not self.active()


@dataclass(frozen=True)
class SearchMatch:
    """
    Container for a search result.

    Attributes:
        document: The matched article
        relevance: Relevance score, None when the result was only filtered
    """

    document: Document
    relevance: Optional[float] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        result = self.document.to_dict()
        if self.relevance is not None:
            result["relevance"] = round(self.relevance, 3)
        return result


@dataclass(frozen=True)
class SimilarMatch:
    """
    Container for a related article.

    Attributes:
        document: The related article
        similarity: Tag overlap plus fuzzy topic closeness
    """

    document: Document
    similarity: float

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        result = self.document.to_dict()
        result["similarity"] = round(self.similarity, 3)
        return result


@dataclass(frozen=True)
class Category:
    """A distinct tag and the number of articles carrying it."""

    id: str
    name: str
    count: int


@dataclass(frozen=True)
class KnowledgeBaseStats:
    """
    Collection-wide statistics.

    Attributes:
        total_articles: Number of articles
        total_categories: Number of distinct tags
        total_views: Sum of article view counts
        top_viewed: Most viewed articles, most viewed first
        executors: Distinct non-empty executors in first-seen order
        addresses: Distinct house numbers ("д. 5") found in addresses
    """

    total_articles: int
    total_categories: int
    total_views: int
    top_viewed: Tuple[Document, ...] = ()
    executors: Tuple[str, ...] = ()
    addresses: Tuple[str, ...] = ()


@dataclass
class SearchPage:
    """One page of search results."""

    items: list = field(default_factory=list)
    total: int = 0
    page: int = 1
    total_pages: int = 0
