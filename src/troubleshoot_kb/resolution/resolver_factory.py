"""
Factory for creating knowledge resolvers.

Builds the index, vocabulary, pipeline and matchers from KB entries and
normalization tables.
"""
from typing import Optional, Sequence

from ..canonicalizer import build_index
from ..config import TroubleshootConfig
from ..data_loader import KnowledgeBaseLoader
from ..models import KnowledgeEntry
from ..normalization import (
    NormalizationTables,
    QueryNormalizer,
    QueryPipeline,
    SpellCorrector,
    VocabularyBuilder,
    load_tables,
)
from .exact_matcher import ErrorCodeMatcher
from .fuzzy_matcher import FuzzyIndexMatcher
from .knowledge_resolver import KnowledgeResolver
from .overlap_matcher import TokenOverlapMatcher
from .phrase_matcher import PhraseMapMatcher
from .resolution_policy import ResolutionPolicy


def create_knowledge_resolver(
    entries: Sequence[KnowledgeEntry],
    tables: Optional[NormalizationTables] = None,
    acceptance_threshold: float = 0.55,
    fuzzy_min_confidence: float = 0.5,
    fuzzy_result_limit: int = 5,
    enable_spell_correction: bool = True,
) -> KnowledgeResolver:
    """
    Factory function to create a KnowledgeResolver.

    Matcher priority: error code -> phrase map -> fuzzy index -> token overlap.

    :param entries: Knowledge base entries
    :param tables: Normalization tables (defaults when None)
    :param acceptance_threshold: Minimum confidence to accept a match
    :param fuzzy_min_confidence: Minimum confidence for fuzzy candidates
    :param fuzzy_result_limit: Number of ranked fuzzy hits considered
    :param enable_spell_correction: Whether the pipeline corrects spelling
    :return: Ready-to-use KnowledgeResolver
    """
    if tables is None:
        tables = NormalizationTables()

    index = build_index(entries)
    vocabulary = VocabularyBuilder(entries, tables).build()

    spell_corrector = SpellCorrector(vocabulary) if enable_spell_correction else None
    pipeline = QueryPipeline(QueryNormalizer(tables), spell_corrector)

    policy = ResolutionPolicy(
        matchers=[
            ErrorCodeMatcher(),
            PhraseMapMatcher(tables.phrase_map),
            FuzzyIndexMatcher(
                min_confidence=fuzzy_min_confidence,
                limit=fuzzy_result_limit,
            ),
            TokenOverlapMatcher(),
        ],
        acceptance_threshold=acceptance_threshold,
    )

    return KnowledgeResolver(
        entries=index,
        vocabulary=vocabulary,
        pipeline=pipeline,
        policy=policy,
    )


def create_resolver_from_config(config: TroubleshootConfig) -> KnowledgeResolver:
    """
    Load the KB (and optional tables file) named in config and build a resolver.

    :raises: KnowledgeBaseError / ConfigurationError on invalid input files
    """
    entries = KnowledgeBaseLoader(config.kb_path).load_entries()
    tables = load_tables(config.tables_path) if config.tables_path else None

    return create_knowledge_resolver(
        entries,
        tables=tables,
        acceptance_threshold=config.acceptance_threshold,
        fuzzy_min_confidence=config.fuzzy_min_confidence,
        fuzzy_result_limit=config.fuzzy_result_limit,
        enable_spell_correction=config.enable_spell_correction,
    )
