"""
Fuzzy matching strategy for KB resolution using rapidfuzz.

Handles partial phrasings, word-order changes and near-misses by scoring
the query against several fields of each entry.
"""
import logging
from typing import List, Sequence, Tuple

from rapidfuzz import fuzz
from rapidfuzz.utils import default_process

from ..models import IndexedEntry
from ..utils.text import split_words
from .semantic_resolver import CandidateMatcher, MatchCandidate, MatchStrategy

logger = logging.getLogger(__name__)


class FuzzyIndexMatcher(CandidateMatcher):
    """
    Weighted multi-field fuzzy search.

    Each field is scored with rapidfuzz's token_set_ratio; the field scores
    are combined by weight into a similarity, and distance = 1 - similarity.
    Entries within ``index_threshold`` distance are ranked, the top
    ``limit`` are turned into candidates:

        confidence = max(0, 1 - distance) + keyword_boost   (capped at 0.95)
        keyword_boost = |query tokens & entry keywords| / |query tokens| * 0.4

    Only candidates with confidence >= ``min_confidence`` are returned.
    """

    FIELD_WEIGHTS: Tuple[Tuple[str, float], ...] = (
        ("keywords", 0.7),
        ("error", 0.6),
        ("search_text", 0.4),
    )
    KEYWORD_BOOST = 0.4
    MAX_CONFIDENCE = 0.95

    def __init__(
        self,
        min_confidence: float = 0.5,
        limit: int = 5,
        index_threshold: float = 0.4,
    ):
        """
        Initialize fuzzy matcher.

        :param min_confidence: Minimum candidate confidence (0.0-1.0)
        :param limit: Maximum number of ranked hits to consider
        :param index_threshold: Maximum distance for an entry to count as a hit
        """
        if not 0.0 <= min_confidence <= 1.0:
            raise ValueError(f"min_confidence must be between 0.0 and 1.0, got {min_confidence}")
        if not 0.0 <= index_threshold <= 1.0:
            raise ValueError(f"index_threshold must be between 0.0 and 1.0, got {index_threshold}")
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")

        self.min_confidence = min_confidence
        self.limit = limit
        self.index_threshold = index_threshold

    def search(
        self,
        query: str,
        entries: Sequence[IndexedEntry],
    ) -> List[Tuple[IndexedEntry, float]]:
        """
        Rank entries by weighted distance to the query.

        :return: Up to ``limit`` (entry, distance) pairs, best first
        """
        if not query:
            return []

        hits = []
        for entry in entries:
            distance = 1.0 - self.similarity(query, entry)
            if distance <= self.index_threshold:
                hits.append((entry, distance))

        # sorted() is stable, so KB order breaks ties
        hits = sorted(hits, key=lambda hit: hit[1])
        return hits[:self.limit]

    def similarity(self, query: str, entry: IndexedEntry) -> float:
        """Weighted field similarity in [0, 1]; empty fields are left out."""
        fields = {
            "keywords": entry.keywords_text,
            "error": entry.error,
            "search_text": entry.search_text,
        }

        total = 0.0
        total_weight = 0.0
        for name, weight in self.FIELD_WEIGHTS:
            value = fields[name]
            if not value:
                continue
            score = fuzz.token_set_ratio(query, value, processor=default_process)
            total += weight * (score / 100.0)
            total_weight += weight

        if total_weight == 0.0:
            return 0.0
        return total / total_weight

    def confidence(self, distance: float, query: str, entry: IndexedEntry) -> float:
        base_score = max(0.0, 1.0 - distance)

        query_tokens = set(split_words(query))
        keyword_boost = 0.0
        if query_tokens:
            keyword_matches = len(query_tokens & entry.keyword_set)
            keyword_boost = (keyword_matches / len(query_tokens)) * self.KEYWORD_BOOST

        return min(self.MAX_CONFIDENCE, base_score + keyword_boost)

    def match(
        self,
        query: str,
        entries: Sequence[IndexedEntry],
    ) -> List[MatchCandidate]:
        """
        Find fuzzy candidates for the query.

        :param query: Processed query
        :param entries: Indexed knowledge base
        :return: Candidates above ``min_confidence``, best distance first
        """
        candidates = []

        for entry, distance in self.search(query, entries):
            confidence = self.confidence(distance, query, entry)
            logger.debug(f"Fuzzy hit: {entry.error!r} distance={distance:.3f} confidence={confidence:.3f}")
            if confidence >= self.min_confidence:
                candidates.append(MatchCandidate(
                    entry=entry,
                    confidence=confidence,
                    strategy=MatchStrategy.SEMANTIC,
                ))

        return candidates
