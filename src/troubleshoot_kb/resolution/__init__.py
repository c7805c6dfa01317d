"""
Resolution layer: processed query -> one KB entry (or no match).

Key components:
- MatchCandidate / MatchStrategy: scored candidate and its origin
- Matchers: ErrorCode, PhraseMap, FuzzyIndex, TokenOverlap
- ResolutionPolicy: scheduling, best-candidate selection, acceptance
- Decision: accepted or rejected outcome
- KnowledgeResolver: pipeline + policy over an indexed KB
"""
from .semantic_resolver import CandidateMatcher, MatchCandidate, MatchStrategy
from .exact_matcher import ErrorCodeMatcher
from .phrase_matcher import PhraseMapMatcher
from .fuzzy_matcher import FuzzyIndexMatcher
from .overlap_matcher import TokenOverlapMatcher
from .resolution_metadata import Decision
from .resolution_policy import ResolutionPolicy
from .knowledge_resolver import KnowledgeResolver
from .resolver_factory import create_knowledge_resolver, create_resolver_from_config

__all__ = [
    "CandidateMatcher",
    "MatchCandidate",
    "MatchStrategy",
    "ErrorCodeMatcher",
    "PhraseMapMatcher",
    "FuzzyIndexMatcher",
    "TokenOverlapMatcher",
    "Decision",
    "ResolutionPolicy",
    "KnowledgeResolver",
    "create_knowledge_resolver",
    "create_resolver_from_config",
]
