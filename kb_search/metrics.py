"""
Prometheus metrics for the knowledge base service.

Tracks HTTP traffic, search operations and article views.
"""

from fastapi import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

# Request metrics
http_requests_total = Counter(
    "kb_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "kb_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
)

# Search metrics
search_queries_total = Counter(
    "kb_search_queries_total",
    "Total search queries",
    ["query_type"],
)

search_query_duration_seconds = Histogram(
    "kb_search_query_duration_seconds",
    "Search query duration in seconds",
    ["query_type"],
    buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0),
)

search_results_per_query = Histogram(
    "kb_search_results_per_query",
    "Number of results returned per query",
    ["query_type"],
    buckets=(0, 1, 5, 10, 25, 50, 100, 500),
)

# Article metrics
article_views_total = Counter("kb_article_views_total", "Total article detail views")


def metrics_response() -> Response:
    """Render all metrics in Prometheus text format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
