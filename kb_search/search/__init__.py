"""
Search module for intelligent knowledge base search.

Provides text normalization, synonym expansion, fuzzy matching, relevance
scoring, filtering and related-article discovery.
"""
from .fuzzy_matcher import FuzzyMatcher
from .normalizer import normalize
from .query_engine import QueryEngine
from .relevance_scorer import FIELD_WEIGHTS, RelevanceScorer
from .similarity import SimilarityFinder
from .synonyms import HOUSING_SYNONYMS, SynonymTable

__all__ = [
    "FIELD_WEIGHTS",
    "FuzzyMatcher",
    "HOUSING_SYNONYMS",
    "QueryEngine",
    "RelevanceScorer",
    "SimilarityFinder",
    "SynonymTable",
    "normalize",
]
