"""
Small text helpers shared by the index builder and the matchers.
"""
import re
from typing import List

_ERROR_CODE_PATTERN = re.compile(r"\b([0-9]{3,4}|[A-Z]+_[0-9]+)\b", re.IGNORECASE)
_NON_WORD = re.compile(r"\W+")


def extract_error_codes(text: str) -> List[str]:
    """
    Extract error codes from text, upper-cased, in order of appearance.

    Codes are 3-4 digit numbers ("404", "1603") or LETTERS_DIGITS
    identifiers ("ERR_101", "dns_404").
    """
    if not text:
        return []
    return [code.upper() for code in _ERROR_CODE_PATTERN.findall(text)]


def split_words(text: str, min_length: int = 1) -> List[str]:
    """Split on runs of non-word characters, keeping tokens of at least min_length."""
    if not text:
        return []
    return [word for word in _NON_WORD.split(text) if len(word) >= min_length]
