"""
Query pipeline: raw query -> processed query.

Fixed order: lexical normalization -> contextual expansion -> spell
correction -> semantic enhancement. Error-code hints are added last so
spell correction never sees them.
"""
import logging
from typing import Optional

from .normalizer import QueryNormalizer
from .spell_corrector import SpellCorrector

logger = logging.getLogger(__name__)


class QueryPipeline:
    """
    Produces the canonical processed query used by the matchers.

    Usage:
        pipeline = QueryPipeline(QueryNormalizer(tables), SpellCorrector(vocabulary))
        processed = pipeline.process("WiFi not working")
    """

    def __init__(
        self,
        normalizer: QueryNormalizer,
        spell_corrector: Optional[SpellCorrector] = None,
    ):
        """
        :param normalizer: QueryNormalizer holding the normalization tables
        :param spell_corrector: Optional SpellCorrector; None skips correction
        """
        self._normalizer = normalizer
        self._spell_corrector = spell_corrector

    def process(self, raw_query) -> str:
        """
        Run the four phases on a raw query.

        :param raw_query: User query; non-strings and blank strings yield ""
        :return: Processed query string
        """
        if not isinstance(raw_query, str) or not raw_query.strip():
            return ""

        processed = raw_query.lower().strip()
        logger.debug(f"Original: {processed!r}")

        processed = self._normalizer.normalize_lexical(processed)
        logger.debug(f"Normalized: {processed!r}")

        processed = self._normalizer.expand_context(processed)
        logger.debug(f"Expanded: {processed!r}")

        if self._spell_corrector is not None:
            processed = self._spell_corrector.correct_query(processed)
            logger.debug(f"Corrected: {processed!r}")

        processed = self._normalizer.enhance_semantics(processed)
        logger.debug(f"Enhanced: {processed!r}")

        return processed
