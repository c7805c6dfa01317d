import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

# Repository root; relative paths in the config are resolved against it
SERVICE_DIR = Path(__file__).parent.parent.parent

DEFAULT_CORS_ORIGINS = ("http://localhost:3000", "http://127.0.0.1:3000")


def resolve_service_path(path: str) -> str:
    if os.path.isabs(path):
        return path
    return str(SERVICE_DIR / path)


@dataclass
class TroubleshootConfig:
    # Core Paths
    kb_path: str = "data/kb.json"
    tables_path: Optional[str] = None

    # Unknown query log
    unknown_queries_log_path: str = "logs/unknowns.log"
    log_unknown_queries: bool = True

    # Resolution
    acceptance_threshold: float = 0.55
    fuzzy_min_confidence: float = 0.5
    fuzzy_result_limit: int = 5
    enable_spell_correction: bool = True

    # Input
    max_query_length: int = 500

    # HTTP
    cors_origins: Tuple[str, ...] = DEFAULT_CORS_ORIGINS
