"""
Interaction layer for issue intent detection.

Sits between the HTTP layer and the resolution engine, tagging queries
with coarse issue categories without touching the match decision.
"""
from .intent_types import IssueIntent
from .intent_router import IntentRouter

__all__ = ["IssueIntent", "IntentRouter"]
