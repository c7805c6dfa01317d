"""
Resolution decision returned to callers.

Used to expose the match, its confidence and the strategy in responses.
"""
from dataclasses import dataclass
from typing import Optional

from .semantic_resolver import MatchCandidate

NOT_FOUND_TITLE = "Solution Not Available"
NOT_FOUND_SOLUTION = (
    "I don't have a solution for this issue in my knowledge base.",
    "Please contact IT support at support@company.com.",
    "You can also try rephrasing your query or checking for typos.",
)


@dataclass(frozen=True)
class Decision:
    """
    Outcome of one resolution: accepted (with a candidate) or rejected.

    A rejection is a normal result, not an error.
    """
    processed_query: str
    candidate: Optional[MatchCandidate] = None

    @classmethod
    def accepted(cls, candidate: MatchCandidate, processed_query: str) -> "Decision":
        return cls(processed_query=processed_query, candidate=candidate)

    @classmethod
    def rejected(cls, processed_query: str) -> "Decision":
        return cls(processed_query=processed_query)

    @property
    def found(self) -> bool:
        return self.candidate is not None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        if self.candidate is None:
            return {
                "found": False,
                "confidence": 0,
                "error": NOT_FOUND_TITLE,
                "solution": list(NOT_FOUND_SOLUTION),
                "matchStrategy": None,
                "processedQuery": self.processed_query,
            }

        entry = self.candidate.entry
        return {
            "found": True,
            "confidence": round(self.candidate.confidence, 2),
            "error": entry.error,
            "solution": list(entry.solution),
            "matchStrategy": self.candidate.strategy.value,
            "processedQuery": self.processed_query,
        }
