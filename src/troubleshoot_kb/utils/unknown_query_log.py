"""
Append-only log of queries the engine could not answer.

One JSON object per line: {"timestamp", "query", "processed"}. The file is
meant for KB maintainers reviewing coverage gaps.
"""
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)


class UnknownQueryLog:
    def __init__(self, path: str):
        self.path = Path(path)

    def record(self, query: str, processed: str) -> bool:
        """
        Append one unmatched query.

        :return: True if written; write failures are logged, never raised
        """
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "query": query.strip(),
            "processed": processed,
        }

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(json.dumps(entry) + "\n")
        except OSError as e:
            logger.warning(f"Failed to log unknown query: {e}")
            return False

        return True

    def read(self) -> Iterator[dict]:
        """Yield logged entries, skipping lines that are not valid JSON."""
        if not self.path.exists():
            return

        with self.path.open(encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                try:
                    yield json.loads(line)
                except json.JSONDecodeError:
                    logger.debug(f"Skipping malformed line in {self.path}")
