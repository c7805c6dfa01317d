import json
import logging
from typing import Any, List, Optional, Tuple

from .exceptions import KnowledgeBaseError
from .models import KnowledgeEntry

logger = logging.getLogger(__name__)


class KnowledgeBaseLoader:
    """
    Loads and normalizes knowledge base entries from JSON.

    Expected file layout: a list of
    ``{"error": str, "keywords": [str], "solution": [str]}`` objects.
    """
    def __init__(self, json_path: str):
        self.json_path = json_path

    def load_entries(self) -> List[KnowledgeEntry]:
        try:
            with open(self.json_path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            raise KnowledgeBaseError(f"KB file not found at {self.json_path}")
        except json.JSONDecodeError as e:
            raise KnowledgeBaseError(f"KB file {self.json_path} is not valid JSON: {e}")
        except OSError as e:
            raise KnowledgeBaseError(f"Cannot read KB file {self.json_path}: {e}")

        entries = self.parse_entries(data)
        logger.info(f"KB loaded from {self.json_path}: {len(entries)} entries")
        return entries

    def parse_entries(self, data: Any) -> List[KnowledgeEntry]:
        if not isinstance(data, list):
            raise KnowledgeBaseError("KB must be a JSON list of entries")

        entries: List[KnowledgeEntry] = []
        seen_titles = set()

        for index, row in enumerate(data):
            entry = self._parse_row(row, index)
            if entry.error in seen_titles:
                raise KnowledgeBaseError(f"Duplicate KB title at index {index}: {entry.error!r}")
            seen_titles.add(entry.error)
            entries.append(entry)

        return entries

    def _parse_row(self, row: Any, index: int) -> KnowledgeEntry:
        if not isinstance(row, dict):
            raise KnowledgeBaseError(f"KB entry at index {index} must be an object")

        error = self._clean_text(row.get("error"))
        if not error:
            raise KnowledgeBaseError(f"KB entry at index {index} has no 'error' title")

        return KnowledgeEntry(
            error=error,
            keywords=self._parse_list(row.get("keywords")),
            solution=self._parse_list(row.get("solution")),
        )

    def _clean_text(self, value: Any) -> Optional[str]:
        if not isinstance(value, str):
            return None
        value = value.strip()
        return value if value else None

    def _parse_list(self, value: Any) -> Tuple[str, ...]:
        if not value:
            return ()
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, list):
            return ()
        cleaned = (self._clean_text(v) for v in value)
        return tuple(v for v in cleaned if v)
