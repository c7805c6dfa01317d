"""
Knowledge base resolver.

Combines the query pipeline, the matchers and the policy into one
resolution step.
"""
from typing import List, Sequence

from ..models import IndexedEntry
from ..normalization import QueryPipeline, Vocabulary
from .resolution_metadata import Decision
from .resolution_policy import ResolutionPolicy


class KnowledgeResolver:
    """
    Resolves raw troubleshooting questions against an indexed KB.

    Holds only read-only state after construction, so one instance can
    serve concurrent requests.

    Usage:
        resolver = create_knowledge_resolver(entries)
        decision = resolver.resolve("wifi not working")
        if decision.found:
            steps = decision.candidate.entry.solution
    """

    def __init__(
        self,
        entries: Sequence[IndexedEntry],
        vocabulary: Vocabulary,
        pipeline: QueryPipeline,
        policy: ResolutionPolicy,
    ):
        """
        :param entries: Indexed knowledge base
        :param vocabulary: Vocabulary the pipeline corrects against
        :param pipeline: QueryPipeline producing processed queries
        :param policy: ResolutionPolicy running the matchers
        """
        self._entries = tuple(entries)
        self._vocabulary = vocabulary
        self._pipeline = pipeline
        self._policy = policy

    @property
    def entries(self) -> Sequence[IndexedEntry]:
        return self._entries

    @property
    def vocabulary(self) -> Vocabulary:
        return self._vocabulary

    def process_query(self, raw_query: str) -> str:
        return self._pipeline.process(raw_query)

    def resolve(self, raw_query: str) -> Decision:
        """
        Resolve a raw query.

        :param raw_query: User query as typed
        :return: Decision; empty input is rejected with an empty processed query
        """
        processed = self._pipeline.process(raw_query)
        if not processed:
            return Decision.rejected(processed)

        return self._policy.resolve(processed, self._entries)

    def resolve_multiple(self, raw_queries: List[str]) -> List[Decision]:
        """
        Resolve multiple queries in batch.

        :param raw_queries: List of queries to resolve
        :return: List of Decisions
        """
        return [self.resolve(query) for query in raw_queries]
