"""
Public application facade for the Troubleshoot KB Service.

This is the single stable entry point for the library.
All internal structure can change freely, but this API remains stable.
"""
import logging
from collections import OrderedDict
from datetime import datetime, timezone
from typing import List, Optional

from .config import TroubleshootConfig, resolve_service_path
from .exceptions import EngineNotInitializedError
from .interaction import IntentRouter, IssueIntent
from .resolution import Decision, KnowledgeResolver, create_resolver_from_config
from .security import InputValidator
from .utils.unknown_query_log import UnknownQueryLog

logger = logging.getLogger(__name__)


class TroubleshootApp:
    """
    Public application facade for the Troubleshoot KB Service.

    All dependency wiring and factory usage is encapsulated here.

    Usage:
        config = TroubleshootConfig(kb_path="data/kb.json")
        app = TroubleshootApp(config)
        app.initialize()
        decision = app.ask("wifi not working")
    """

    def __init__(self, config: TroubleshootConfig):
        """
        Initialize the application facade.

        :param config: TroubleshootConfig instance
        """
        self._config = config
        self._resolver: Optional[KnowledgeResolver] = None
        self._intent_router = IntentRouter()
        self._unknown_log: Optional[UnknownQueryLog] = None

    @property
    def config(self) -> TroubleshootConfig:
        return self._config

    @property
    def is_initialized(self) -> bool:
        return self._resolver is not None

    def initialize(self) -> None:
        """
        Load the KB and build the resolver.

        Relative paths are resolved against the service directory, not the
        caller's CWD. Call this once at startup; a failure here is fatal.

        :raises: KnowledgeBaseError / ConfigurationError on invalid input files
        """
        if self._resolver:
            return

        self._config.kb_path = resolve_service_path(self._config.kb_path)
        if self._config.tables_path:
            self._config.tables_path = resolve_service_path(self._config.tables_path)

        self._resolver = create_resolver_from_config(self._config)

        if self._config.log_unknown_queries:
            self._unknown_log = UnknownQueryLog(
                resolve_service_path(self._config.unknown_queries_log_path)
            )

        logger.info(
            f"Engine ready: {len(self._resolver.entries)} KB entries, "
            f"{len(self._resolver.vocabulary)} vocabulary words"
        )

    def ask(self, query: str) -> Decision:
        """
        Resolve a troubleshooting question.

        :param query: User query string
        :return: Accepted or rejected Decision
        :raises: ValidationError for empty, non-string or over-long queries
        :raises: EngineNotInitializedError if initialize() has not been called
        """
        resolver = self._require_resolver()
        query = InputValidator.sanitize_query(query, self._config.max_query_length)

        decision = resolver.resolve(query)

        if not decision.found:
            logger.info(f"No confident match for: {query!r}")
            if self._unknown_log is not None:
                self._unknown_log.record(query, decision.processed_query)

        return decision

    def detect_intents(self, processed_query: str) -> List[IssueIntent]:
        return self._intent_router.detect(processed_query)

    def health(self) -> dict:
        resolver = self._require_resolver()
        return {
            "status": "healthy",
            "kbEntries": len(resolver.entries),
            "vocabularySize": len(resolver.vocabulary),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    def kb_summary(self) -> dict:
        """KB size and categories (distinct first words of titles)."""
        resolver = self._require_resolver()
        categories = OrderedDict.fromkeys(
            entry.error.split(" ")[0] for entry in resolver.entries
        )
        return {
            "entries": len(resolver.entries),
            "categories": list(categories),
            "lastUpdated": datetime.now(timezone.utc).isoformat(),
        }

    def _require_resolver(self) -> KnowledgeResolver:
        if not self._resolver:
            raise EngineNotInitializedError("App not initialized. Call initialize() first.")
        return self._resolver
