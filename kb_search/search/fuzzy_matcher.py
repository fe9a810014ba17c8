"""
Fuzzy matching engine for article search.

Provides typo-tolerant matching of query terms against article text using
Levenshtein (edit) distance.
"""

import logging
from typing import Optional

from rapidfuzz.distance import Levenshtein

from .normalizer import normalize

logger = logging.getLogger(__name__)


class FuzzyMatcher:
    """
    Fuzzy string matching for article topics.

    Matching works word by word:
    - Containment of the whole query in the text is a full match
    - Otherwise the first word within the similarity threshold wins
    - Words and queries shorter than MIN_WORD_LENGTH are never fuzzy-matched
    """

    DEFAULT_THRESHOLD = 0.7  # 70% similarity
    MIN_WORD_LENGTH = 3

    def __init__(self, threshold: float = DEFAULT_THRESHOLD):
        """
        Initialize fuzzy matcher.

        Args:
            threshold: Minimum word similarity counted as a match (0-1)
        """
        if not 0 < threshold <= 1:
            raise ValueError(f"Threshold must be in (0, 1], got {threshold}")
        self.threshold = threshold

    @staticmethod
    def distance(a: str, b: str) -> int:
        """
        Edit distance between two strings.

        Insertion, deletion and substitution each cost 1.

        Examples:
            ("крыша", "крыша") -> 0
            ("", "лифт") -> 4
            ("кровля", "кравля") -> 1
        """
        return Levenshtein.distance(a, b)

    def fuzzy_match(
        self, text: Optional[str], query: Optional[str], threshold: Optional[float] = None
    ) -> float:
        """
        Score how well query matches somewhere in text.

        Args:
            text: Text to search in (e.g. an article topic)
            query: Single search term
            threshold: Override for the matcher threshold

        Returns:
            1.0 if the normalized text contains the normalized query,
            otherwise the similarity of the first word reaching the
            threshold, otherwise 0.0
        """
        if threshold is None:
            threshold = self.threshold

        text_norm = normalize(text)
        query_norm = normalize(query)

        if query_norm in text_norm:
            return 1.0

        if len(query_norm) < self.MIN_WORD_LENGTH:
            return 0.0

        for word in text_norm.split():
            if len(word) < self.MIN_WORD_LENGTH:
                continue
            # (word, query) order is fixed for all callers
            distance = self.distance(word, query_norm)
            similarity = 1 - distance / max(len(word), len(query_norm))
            if similarity >= threshold:
                return similarity

        return 0.0

    def get_stats(self) -> dict:
        """
        Get matcher configuration.

        Returns:
            Dictionary with matcher settings
        """
        return {
            "threshold": self.threshold,
            "min_word_length": self.MIN_WORD_LENGTH,
            "algorithm": "rapidfuzz-levenshtein",
        }
