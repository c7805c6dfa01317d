"""
Core abstractions for knowledge base resolution.

Defines the candidate type, the strategy names and the matcher protocol.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence

from ..models import IndexedEntry


class MatchStrategy(Enum):
    """Matcher that produced a candidate."""
    ERROR_CODE = "error_code"
    PHRASE_MAP = "phrase_map"
    SEMANTIC = "semantic"
    TOKEN_OVERLAP = "token_overlap"


@dataclass(frozen=True)
class MatchCandidate:
    """
    Immutable scored candidate for one resolution.

    Attributes:
        entry: The matched KB entry (shared, read-only)
        confidence: Confidence score between 0.0 and 1.0
        strategy: Matcher that produced the candidate
    """
    entry: IndexedEntry
    confidence: float
    strategy: MatchStrategy

    def is_confident(self, threshold: float = 0.55) -> bool:
        """Check if candidate confidence meets threshold."""
        return self.confidence >= threshold

    def __post_init__(self):
        """Validate confidence score."""
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Confidence must be between 0.0 and 1.0, got {self.confidence}")


class CandidateMatcher(ABC):
    """
    Protocol for candidate matching strategies.

    Class attributes tell the policy how to schedule a matcher:
    - short_circuits: a hit ends resolution immediately
    - fallback_only: only runs when earlier matchers produced nothing
    """

    short_circuits: bool = False
    fallback_only: bool = False

    @abstractmethod
    def match(
        self,
        query: str,
        entries: Sequence[IndexedEntry],
    ) -> List[MatchCandidate]:
        """
        Find candidates for a processed query.

        :param query: Processed query
        :param entries: Indexed knowledge base
        :return: Zero or more scored candidates
        """
        pass
