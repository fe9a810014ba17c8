"""
Related-article discovery.
"""

import logging
from typing import List, Optional, Sequence

from ..domain.entities import Document, SimilarMatch
from .fuzzy_matcher import FuzzyMatcher

logger = logging.getLogger(__name__)


class SimilarityFinder:
    """
    Find articles related to a given one.

    similarity = TAG_WEIGHT * shared tags + fuzzy topic similarity

    Shared tags dominate; the fuzzy topic score (0-1) only separates
    articles with the same tag overlap. Untagged articles have no related list.
    """

    TAG_WEIGHT = 2
    DEFAULT_LIMIT = 5

    def __init__(self, fuzzy_matcher: Optional[FuzzyMatcher] = None, limit: int = DEFAULT_LIMIT):
        self.fuzzy_matcher = fuzzy_matcher or FuzzyMatcher()
        self.limit = limit

    def find_similar(
        self,
        document: Document,
        all_documents: Sequence[Document],
        limit: Optional[int] = None,
    ) -> List[SimilarMatch]:
        """
        Rank other articles by affinity to document.

        Args:
            document: Source article
            all_documents: Collection to pick related articles from
            limit: Maximum number of results (defaults to the finder limit)

        Returns:
            Up to limit related articles, most similar first
        """
        if limit is None:
            limit = self.limit

        source_tags = document.tag_set
        if not source_tags:
            return []

        candidates = []
        for other in all_documents:
            if other.id == document.id:
                continue
            shared = len(other.tag_set & source_tags)
            similarity = self.TAG_WEIGHT * shared + self.fuzzy_matcher.fuzzy_match(
                other.topic, document.topic
            )
            if similarity > 0:
                candidates.append(SimilarMatch(other, similarity))

        candidates.sort(key=lambda match: match.similarity, reverse=True)
        return candidates[:limit]
