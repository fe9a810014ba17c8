"""
API response models for the knowledge base endpoints.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class ArticleResponse(BaseModel):
    """Knowledge base article as returned by the API."""

    id: str = Field(..., description="Article identifier")
    topic: Optional[str] = Field(None, description="Ticket topic", examples=["Протечка крыши"])
    topic_code: Optional[str] = Field(None, description="Topic classifier code")
    number: Optional[str] = Field(None, description="Ticket number")
    address: Optional[str] = Field(None, description="Building address")
    executor: Optional[str] = Field(None, description="Responsible organization")
    status: Optional[str] = Field(None, description="Ticket status", examples=["Исполнено"])
    appeal_text: Optional[str] = Field(None, description="Resident's appeal")
    response_text: Optional[str] = Field(None, description="Official response")
    tags: List[str] = Field(default_factory=list, description="Category labels")
    date: Optional[str] = Field(None, description="ISO 8601 date", examples=["2024-03-15"])
    views: int = Field(0, ge=0, description="Detail page views")
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    relevance: Optional[float] = Field(
        None, description="Search relevance, present only for text searches"
    )


class SimilarArticle(ArticleResponse):
    """Related article with its similarity score."""

    similarity: float = Field(..., description="Shared tags * 2 + fuzzy topic similarity")


class ArticleDetailResponse(ArticleResponse):
    """Article with its related articles."""

    similar: List[SimilarArticle] = Field(default_factory=list)


class ArticleListResponse(BaseModel):
    """One page of search results."""

    articles: List[ArticleResponse] = Field(..., description="Articles on this page")
    total: int = Field(..., description="Total number of matching articles")
    page: int = Field(..., description="Current page (1-based)")
    total_pages: int = Field(..., description="Number of pages")


class CategoryResponse(BaseModel):
    """Tag with its article count."""

    id: str
    name: str
    count: int


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Human-readable error message")
    details: dict = Field(default_factory=dict, description="Additional error details")


class StatsResponse(BaseModel):
    """Collection-wide statistics."""

    total_articles: int = Field(..., description="Number of articles")
    total_categories: int = Field(..., description="Number of distinct tags")
    total_views: int = Field(..., description="Sum of article views")
    top_viewed: List[ArticleResponse] = Field(..., description="Most viewed articles")
    executors: List[str] = Field(..., description="Distinct executors")
    addresses: List[str] = Field(
        ..., description="Distinct house numbers", examples=[["д. 5", "д. 101"]]
    )
