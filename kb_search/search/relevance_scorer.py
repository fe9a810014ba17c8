"""
Relevance scoring system for article search.

Scores articles against an expanded set of query terms using weighted
field hits, a fuzzy topic bonus and a popularity boost.
"""

import logging
from operator import attrgetter
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from ..domain.entities import Document
from .fuzzy_matcher import FuzzyMatcher
from .normalizer import normalize

logger = logging.getLogger(__name__)

FieldAccessor = Callable[[Document], Iterable[Optional[str]]]
WeightedField = Tuple[str, FieldAccessor, float]


def single_value(name: str) -> FieldAccessor:
    """Accessor for a one-value text field."""
    getter = attrgetter(name)
    return lambda document: (getter(document),)


# A field scores its weight once per term if any of its values contains the term
FIELD_WEIGHTS: Tuple[WeightedField, ...] = (
    ("topic", single_value("topic"), 10),
    ("topic_code", single_value("topic_code"), 8),
    ("number", single_value("number"), 7),
    ("tags", attrgetter("tags"), 6),
    ("response_text", single_value("response_text"), 5),
    ("appeal_text", single_value("appeal_text"), 4),
    ("address", single_value("address"), 3),
    ("executor", single_value("executor"), 3),
)


class RelevanceScorer:
    """
    Calculate relevance scores for articles.

    Scoring factors, summed per expanded query term:
    1. Field hits - full field weight when the normalized field contains the term
    2. Fuzzy topic - topic weight * fuzzy similarity * FUZZY_TOPIC_FACTOR

    Then, once per article with a positive score:
    3. Popularity - +1 above 10 views, a further +2 above 50 views
    """

    TOPIC_WEIGHT = 10
    FUZZY_TOPIC_FACTOR = 0.5

    # (views threshold, bonus); every exceeded threshold adds its bonus
    POPULARITY_BOOSTS = ((10, 1.0), (50, 2.0))

    def __init__(
        self,
        fuzzy_matcher: Optional[FuzzyMatcher] = None,
        field_weights: Sequence[WeightedField] = FIELD_WEIGHTS,
    ):
        """
        Initialize relevance scorer.

        Args:
            fuzzy_matcher: Matcher used for the fuzzy topic bonus
            field_weights: Ordered (name, accessor, weight) triples
        """
        self.fuzzy_matcher = fuzzy_matcher or FuzzyMatcher()
        self.field_weights = tuple(field_weights)

    def score(self, document: Document, terms: Iterable[str]) -> float:
        """
        Calculate relevance score of a document for expanded query terms.

        Args:
            document: Article to score
            terms: Normalized expanded query terms

        Returns:
            Non-negative score, 0 when nothing matched
        """
        fields = [
            ([normalize(value) for value in accessor(document)], weight)
            for _, accessor, weight in self.field_weights
        ]

        total = 0.0
        for term in terms:
            total += self._score_fields(fields, term)

            fuzzy_score = self.fuzzy_matcher.fuzzy_match(document.topic, term)
            if fuzzy_score > 0:
                total += self.TOPIC_WEIGHT * fuzzy_score * self.FUZZY_TOPIC_FACTOR

        if total <= 0:
            return 0.0

        return total + self._popularity_boost(document.views)

    def _score_fields(self, fields: List[Tuple[List[str], float]], term: str) -> float:
        """Sum weights of fields where any normalized value contains term."""
        return sum(
            weight for values, weight in fields if any(term in value for value in values)
        )

    def _popularity_boost(self, views: int) -> float:
        """
        Score based on how often the article was viewed.

        Examples:
            5 views -> 0
            11 views -> 1
            60 views -> 3
        """
        return sum(bonus for threshold, bonus in self.POPULARITY_BOOSTS if views > threshold)

    def get_stats(self) -> dict:
        """
        Get scorer configuration.

        Returns:
            Dictionary with field weights and boosts
        """
        return {
            "weights": {name: weight for name, _, weight in self.field_weights},
            "fuzzy_topic_factor": self.FUZZY_TOPIC_FACTOR,
            "popularity_boosts": [list(boost) for boost in self.POPULARITY_BOOSTS],
        }
