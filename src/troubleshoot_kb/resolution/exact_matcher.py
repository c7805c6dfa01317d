"""
Exact error-code matching strategy.

Fast, deterministic, highest priority: a hit ends resolution.
"""
from typing import List, Sequence

from ..models import IndexedEntry
from ..utils.text import extract_error_codes
from .semantic_resolver import CandidateMatcher, MatchCandidate, MatchStrategy


class ErrorCodeMatcher(CandidateMatcher):
    """
    Matches error codes in the query against codes indexed on KB entries.

    Query codes are tried in order of appearance; for each code the first
    KB entry carrying it wins.
    """

    short_circuits = True
    CONFIDENCE = 0.98

    def match(
        self,
        query: str,
        entries: Sequence[IndexedEntry],
    ) -> List[MatchCandidate]:
        """
        Find the entry indexed under one of the query's error codes.

        :param query: Processed query
        :param entries: Indexed knowledge base
        :return: A single candidate, or an empty list
        """
        for code in extract_error_codes(query):
            for entry in entries:
                if code in entry.error_codes:
                    return [MatchCandidate(
                        entry=entry,
                        confidence=self.CONFIDENCE,
                        strategy=MatchStrategy.ERROR_CODE,
                    )]

        return []
