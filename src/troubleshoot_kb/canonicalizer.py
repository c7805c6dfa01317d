from typing import Iterable, List

from .models import IndexedEntry, KnowledgeEntry
from .utils.text import extract_error_codes


class KnowledgeCanonicalizer:
    @staticmethod
    def to_search_text(entry: KnowledgeEntry) -> str:
        parts = [entry.error]
        parts.extend(entry.keywords)
        parts.extend(entry.solution)
        return " ".join(parts).lower()

    @staticmethod
    def to_keywords_text(entry: KnowledgeEntry) -> str:
        return " ".join(entry.keywords).lower()

    @staticmethod
    def to_error_codes(entry: KnowledgeEntry) -> List[str]:
        return extract_error_codes(entry.error + " " + " ".join(entry.keywords))


def build_index(entries: Iterable[KnowledgeEntry]) -> List[IndexedEntry]:
    """
    Build IndexedEntry objects with every derived field the matchers read.

    Runs once at startup; the result is shared read-only between requests.
    """
    indexed: List[IndexedEntry] = []

    for entry in entries:
        keyword_set = {keyword.lower() for keyword in entry.keywords}
        keyword_set.add(entry.error.lower())

        indexed.append(IndexedEntry(
            entry=entry,
            search_text=KnowledgeCanonicalizer.to_search_text(entry),
            keywords_text=KnowledgeCanonicalizer.to_keywords_text(entry),
            error_codes=tuple(KnowledgeCanonicalizer.to_error_codes(entry)),
            keyword_set=frozenset(keyword_set),
        ))

    return indexed
