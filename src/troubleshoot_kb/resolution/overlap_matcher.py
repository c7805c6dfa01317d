"""
Token overlap matching, the last-resort strategy.
"""
from typing import List, Sequence, Set

from ..models import IndexedEntry
from ..utils.text import split_words
from .semantic_resolver import CandidateMatcher, MatchCandidate, MatchStrategy


class TokenOverlapMatcher(CandidateMatcher):
    """
    Scores entries by the share of query words found in their title and keywords.

    Only words longer than two characters count. The entry with the highest
    overlap ratio wins (first in KB order on ties) if the ratio exceeds 0.3.
    """

    fallback_only = True
    MIN_TOKEN_LENGTH = 3
    MIN_OVERLAP_RATIO = 0.3
    BASE_CONFIDENCE = 0.6
    OVERLAP_WEIGHT = 0.3

    def match(
        self,
        query: str,
        entries: Sequence[IndexedEntry],
    ) -> List[MatchCandidate]:
        query_tokens = set(split_words(query.lower(), self.MIN_TOKEN_LENGTH))
        if not query_tokens:
            return []

        best_entry = None
        best_ratio = 0.0

        for entry in entries:
            overlap = len(query_tokens & self._entry_tokens(entry))
            ratio = overlap / len(query_tokens)

            if ratio > self.MIN_OVERLAP_RATIO and ratio > best_ratio:
                best_ratio = ratio
                best_entry = entry

        if best_entry is None:
            return []

        return [MatchCandidate(
            entry=best_entry,
            confidence=self.BASE_CONFIDENCE + best_ratio * self.OVERLAP_WEIGHT,
            strategy=MatchStrategy.TOKEN_OVERLAP,
        )]

    def _entry_tokens(self, entry: IndexedEntry) -> Set[str]:
        tokens = set(split_words(entry.error.lower(), self.MIN_TOKEN_LENGTH))
        for keyword in entry.keywords:
            tokens.update(split_words(keyword.lower(), self.MIN_TOKEN_LENGTH))
        return tokens
