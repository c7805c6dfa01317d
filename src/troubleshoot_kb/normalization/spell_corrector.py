"""
Vocabulary-based spell correction using rapidfuzz edit distance.
"""
import math
from typing import Optional

from rapidfuzz.distance import Levenshtein

from .vocabulary_builder import Vocabulary


class SpellCorrector:
    """
    Corrects each token to the nearest vocabulary word, or leaves it alone.

    Two tiers:
    - prefix tier: words sharing the token's first three characters, scored
      by normalized edit distance discounted by length similarity
    - fallback tier: any word within +/-2 length at edit distance <= 1

    Correction is local to each token.
    """

    PREFIX_LENGTH = 3
    PREFIX_SCORE_THRESHOLD = 0.15
    LENGTH_WEIGHT = 0.3
    FALLBACK_MAX_LENGTH_DIFF = 2
    FALLBACK_MAX_DISTANCE = 1

    def __init__(self, vocabulary: Vocabulary):
        self._vocabulary = vocabulary

    def correct_query(self, query: str) -> str:
        """Correct every whitespace-separated token and re-join with single spaces."""
        return " ".join(self.correct_token(token) for token in query.split())

    def correct_token(self, token: str) -> str:
        if token.isdigit() or len(token) <= 1 or token in self._vocabulary:
            return token

        match = self._prefix_match(token)
        if match is None:
            match = self._fallback_match(token)

        return match if match is not None else token

    def _prefix_match(self, token: str) -> Optional[str]:
        prefix = token[:self.PREFIX_LENGTH]
        best_match: Optional[str] = None
        best_score = math.inf

        for word in self._vocabulary:
            if not word.startswith(prefix):
                continue

            longest = max(len(token), len(word))
            distance = Levenshtein.distance(token, word)
            length_ratio = min(len(token), len(word)) / longest
            score = (distance / longest) * (1 - length_ratio * self.LENGTH_WEIGHT)

            if score < self.PREFIX_SCORE_THRESHOLD and score < best_score:
                best_score = score
                best_match = word

        return best_match

    def _fallback_match(self, token: str) -> Optional[str]:
        for word in self._vocabulary:
            if abs(len(word) - len(token)) > self.FALLBACK_MAX_LENGTH_DIFF:
                continue

            distance = Levenshtein.distance(
                token, word, score_cutoff=self.FALLBACK_MAX_DISTANCE
            )
            if distance <= self.FALLBACK_MAX_DISTANCE:
                return word

        return None
