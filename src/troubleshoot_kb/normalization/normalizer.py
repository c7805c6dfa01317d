"""
Rule-based query normalization.

Three phases, each a pure string -> string function:
1. lexical normalization (abbreviations, typos, contractions)
2. contextual expansion (related terms appended for known triggers)
3. semantic enhancement (error-code and negative-phrasing hints)

The pipeline runs spell correction between phases 2 and 3.
"""
import re
from typing import List, Pattern, Tuple

from .tables import NormalizationTables

_PUNCTUATION = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")
_THREE_DIGIT_CODE = re.compile(r"\b\d{3}\b")


class QueryNormalizer:
    """
    Applies the normalization tables to a query.

    Lexical rules are compiled once, in declaration order, when the
    normalizer is created.
    """

    CODE_PHRASES = {
        "404": "not found",
        "500": "server",
    }
    NEGATION_CUES = ("not", "no")
    ACTION_CUES = ("work", "open", "connect")

    def __init__(self, tables: NormalizationTables = NormalizationTables()):
        self._tables = tables
        self._rules: List[Tuple[Pattern[str], str]] = [
            (re.compile(rf"\b{re.escape(pattern)}\b", re.IGNORECASE), replacement)
            for pattern, replacement in tables.normalization_rules
        ]

    @property
    def tables(self) -> NormalizationTables:
        return self._tables

    def normalize_lexical(self, query: str) -> str:
        """
        Phase 1: apply every lexical rule in order, then strip punctuation.

        Each rule sees the text produced by all earlier rules.
        """
        normalized = query
        for regex, replacement in self._rules:
            normalized = regex.sub(lambda _match: replacement, normalized)

        normalized = _PUNCTUATION.sub(" ", normalized)
        return _WHITESPACE.sub(" ", normalized).strip()

    def expand_context(self, query: str) -> str:
        """
        Phase 2: append related terms for every trigger found in the query.

        Triggers and "already present" checks are substring tests against
        the input, never against terms appended during this phase.
        """
        added: List[str] = []

        for trigger, terms in self._tables.context_expansions:
            if trigger not in query:
                continue
            for term in terms:
                if term not in query and term not in added:
                    added.append(term)

        if not added:
            return query
        return f"{query} {' '.join(added)}".strip()

    def enhance_semantics(self, query: str) -> str:
        """
        Phase 3: add hints for error codes and informal negative phrasing.

        Negation and action cues are substring tests, so "cannot connect"
        and "nothing opens" both count as negative phrasing.

        Idempotent: a second pass finds every hint already present.
        """
        enhanced = query

        for code in _THREE_DIGIT_CODE.findall(query):
            if "error" not in enhanced:
                enhanced += " error"
            phrase = self.CODE_PHRASES.get(code)
            if phrase and phrase not in enhanced:
                enhanced += f" {phrase}"

        has_negation = any(cue in enhanced for cue in self.NEGATION_CUES)
        has_action = any(cue in enhanced for cue in self.ACTION_CUES)
        if has_negation and has_action and "working" not in enhanced:
            enhanced += " working"

        return _WHITESPACE.sub(" ", enhanced).strip()
