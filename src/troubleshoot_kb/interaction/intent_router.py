"""
Deterministic intent detection for troubleshooting queries.

Multi-label: a query can be about a network problem and an error at once.
"""
from typing import List, Tuple

from .intent_types import IssueIntent


class IntentRouter:
    """
    Deterministic intent router.

    Tags queries with issue intents using substring rules. No fuzzy logic,
    no scoring; the order of the returned list follows INTENT_KEYWORDS.
    """

    INTENT_KEYWORDS: Tuple[Tuple[IssueIntent, Tuple[str, ...]], ...] = (
        (IssueIntent.NETWORK_ISSUE, ("wifi", "wi fi", "network", "internet")),
        (IssueIntent.ERROR_RESOLUTION, ("error", "crash", "not working")),
        (IssueIntent.PERFORMANCE_ISSUE, ("slow", "lag", "performance")),
        (IssueIntent.EMAIL_ISSUE, ("email", "outlook", "mail")),
        (IssueIntent.PRINTING_ISSUE, ("print", "printer")),
        (IssueIntent.AUDIO_ISSUE, ("sound", "audio", "speaker")),
    )

    def detect(self, query: str) -> List[IssueIntent]:
        """
        Detect the issue intents of a query.

        :param query: Raw or processed query
        :return: Matching intents, or [GENERAL_TROUBLESHOOTING] when none match
        """
        q = (query or "").lower()

        intents = [
            intent
            for intent, keywords in self.INTENT_KEYWORDS
            if any(keyword in q for keyword in keywords)
        ]

        return intents or [IssueIntent.GENERAL_TROUBLESHOOTING]
