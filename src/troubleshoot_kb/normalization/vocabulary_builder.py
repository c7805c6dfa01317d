"""
Vocabulary builder for spell correction.

Builds the set of known-good words from the normalization tables and the
knowledge base content.
"""
import logging
from typing import Iterable, Iterator, List, Sequence, Tuple

from ..models import KnowledgeEntry
from ..utils.text import split_words
from .tables import NormalizationTables

logger = logging.getLogger(__name__)

MIN_WORD_LENGTH = 2
MAX_WORD_LENGTH = 19


class Vocabulary:
    """
    Immutable, ordered set of lowercase words.

    Iteration follows insertion order, which the spell corrector relies on
    for tie-breaking.
    """

    def __init__(self, words: Iterable[str] = ()):
        ordered = dict.fromkeys(
            word for word in (w.lower() for w in words)
            if MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH
        )
        self._words: Tuple[str, ...] = tuple(ordered)
        self._lookup = frozenset(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._lookup

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words


class VocabularyBuilder:
    """
    Builds the spell-correction vocabulary.

    Word sources, in order:
    - every word of every lexical normalization replacement
    - every word of every context expansion term
    - every word in each KB entry's title, keywords and solution steps
    """

    def __init__(
        self,
        entries: Sequence[KnowledgeEntry],
        tables: NormalizationTables = NormalizationTables(),
    ):
        """
        Initialize vocabulary builder.

        :param entries: Knowledge base entries
        :param tables: Normalization tables contributing replacement words
        """
        self._entries = entries
        self._tables = tables
        self._words: List[str] = []

        self._build_vocabulary()

    def _build_vocabulary(self):
        """Collect words from tables and KB content."""
        for _, replacement in self._tables.normalization_rules:
            self._words.extend(replacement.lower().split())

        for _, terms in self._tables.context_expansions:
            for term in terms:
                self._words.extend(term.lower().split())

        for entry in self._entries:
            self._add_text(entry.error)
            for keyword in entry.keywords:
                self._add_text(keyword)
            for step in entry.solution:
                self._add_text(step)

    def _add_text(self, text: str):
        self._words.extend(split_words(text.lower(), min_length=MIN_WORD_LENGTH))

    def build(self) -> Vocabulary:
        """Freeze the collected words into a Vocabulary."""
        vocabulary = Vocabulary(self._words)
        logger.info(f"Vocabulary built: {len(vocabulary)} words")
        return vocabulary
