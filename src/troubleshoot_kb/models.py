from dataclasses import dataclass, field
from typing import FrozenSet, Tuple


@dataclass(frozen=True)
class KnowledgeEntry:
    error: str
    keywords: Tuple[str, ...] = ()
    solution: Tuple[str, ...] = ()


@dataclass(frozen=True)
class IndexedEntry:
    """A KnowledgeEntry plus the derived fields used by the matchers."""
    entry: KnowledgeEntry
    search_text: str = ""
    keywords_text: str = ""
    error_codes: Tuple[str, ...] = ()
    keyword_set: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def error(self) -> str:
        return self.entry.error

    @property
    def keywords(self) -> Tuple[str, ...]:
        return self.entry.keywords

    @property
    def solution(self) -> Tuple[str, ...]:
        return self.entry.solution
