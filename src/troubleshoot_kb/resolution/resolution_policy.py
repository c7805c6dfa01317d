"""
Resolution policy: matcher scheduling, best-candidate selection and acceptance.
"""
import logging
from typing import List, Optional, Sequence

from ..models import IndexedEntry
from .resolution_metadata import Decision
from .semantic_resolver import CandidateMatcher, MatchCandidate

logger = logging.getLogger(__name__)


class ResolutionPolicy:
    """
    Runs matchers in priority order and decides on one candidate.

    - a short-circuiting matcher with a hit ends matching at once
    - every other matcher adds to a shared candidate pool
    - fallback-only matchers run only while the pool is empty
    - the highest-confidence candidate wins (first seen on exact ties)
    - it is accepted if confidence >= threshold, or if its title equals the
      processed query (case-insensitive)
    """

    def __init__(
        self,
        matchers: Sequence[CandidateMatcher],
        acceptance_threshold: float = 0.55,
    ):
        """
        Initialize resolution policy.

        :param matchers: Matchers in priority order
        :param acceptance_threshold: Minimum confidence to accept a candidate
        """
        if not matchers:
            raise ValueError("At least one matcher must be provided")
        if not 0.0 <= acceptance_threshold <= 1.0:
            raise ValueError(
                f"acceptance_threshold must be between 0.0 and 1.0, got {acceptance_threshold}"
            )

        self._matchers = list(matchers)
        self.acceptance_threshold = acceptance_threshold

    def collect(
        self,
        query: str,
        entries: Sequence[IndexedEntry],
    ) -> List[MatchCandidate]:
        """
        Run the matchers and return the candidate pool.

        A short-circuit hit is returned alone.
        """
        pool: List[MatchCandidate] = []

        for matcher in self._matchers:
            if matcher.fallback_only and pool:
                continue

            candidates = matcher.match(query, entries)

            if matcher.short_circuits and candidates:
                logger.debug(f"{type(matcher).__name__} short-circuited resolution")
                return candidates[:1]

            pool.extend(candidates)

        return pool

    @staticmethod
    def select_best(candidates: Sequence[MatchCandidate]) -> Optional[MatchCandidate]:
        best: Optional[MatchCandidate] = None
        for candidate in candidates:
            if best is None or candidate.confidence > best.confidence:
                best = candidate
        return best

    def should_accept(self, candidate: Optional[MatchCandidate], processed_query: str) -> bool:
        if candidate is None:
            return False

        if candidate.is_confident(self.acceptance_threshold):
            return True

        return candidate.entry.error.lower() == processed_query.lower()

    def resolve(
        self,
        query: str,
        entries: Sequence[IndexedEntry],
    ) -> Decision:
        """
        Resolve a processed query to a decision.

        :param query: Processed query
        :param entries: Indexed knowledge base
        :return: Accepted or rejected Decision
        """
        best = self.select_best(self.collect(query, entries))

        if self.should_accept(best, query):
            logger.info(
                f"Best match: {best.entry.error!r} "
                f"({best.confidence:.2f}, {best.strategy.value})"
            )
            return Decision.accepted(best, query)

        if best is not None:
            logger.info(f"Rejected best match {best.entry.error!r} ({best.confidence:.2f})")
        else:
            logger.info("No match found")
        return Decision.rejected(query)
