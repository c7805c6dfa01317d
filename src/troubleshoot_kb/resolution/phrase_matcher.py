"""
Direct phrase matching for common IT issue phrasings.
"""
from typing import List, Sequence, Tuple

from ..models import IndexedEntry
from ..normalization.tables import DEFAULT_PHRASE_MAP
from .semantic_resolver import CandidateMatcher, MatchCandidate, MatchStrategy


class PhraseMapMatcher(CandidateMatcher):
    """
    Maps literal phrases to canonical KB titles.

    The first phrase (in table order) contained in the query whose title
    exists in the KB yields the candidate.
    """

    CONFIDENCE = 0.9

    def __init__(self, phrase_map: Sequence[Tuple[str, str]] = DEFAULT_PHRASE_MAP):
        """
        :param phrase_map: Ordered (phrase, KB title) pairs
        """
        self._phrase_map = tuple(phrase_map)

    def match(
        self,
        query: str,
        entries: Sequence[IndexedEntry],
    ) -> List[MatchCandidate]:
        if not query:
            return []

        by_title = {}
        for entry in entries:
            by_title.setdefault(entry.error, entry)

        for phrase, title in self._phrase_map:
            if phrase in query and title in by_title:
                return [MatchCandidate(
                    entry=by_title[title],
                    confidence=self.CONFIDENCE,
                    strategy=MatchStrategy.PHRASE_MAP,
                )]

        return []
