"""
Query normalization layer.

Turns a raw troubleshooting question into the processed query the
matchers work on.

Key components:
- NormalizationTables: ordered rule tables (configuration data)
- VocabularyBuilder / Vocabulary: known-good words for spell correction
- QueryNormalizer: lexical, contextual and semantic rewriting
- SpellCorrector: per-token nearest-word correction
- QueryPipeline: runs the phases in their fixed order
"""
from .tables import NormalizationTables, load_tables
from .vocabulary_builder import Vocabulary, VocabularyBuilder
from .normalizer import QueryNormalizer
from .spell_corrector import SpellCorrector
from .pipeline import QueryPipeline

__all__ = [
    "NormalizationTables",
    "load_tables",
    "Vocabulary",
    "VocabularyBuilder",
    "QueryNormalizer",
    "SpellCorrector",
    "QueryPipeline",
]
