class TroubleshootError(Exception):
    """Base exception for troubleshoot KB service."""


class ConfigurationError(TroubleshootError):
    """Raised when configuration values are missing or invalid."""


class KnowledgeBaseError(ConfigurationError):
    """Raised when the knowledge base file is missing or malformed."""


class EngineNotInitializedError(TroubleshootError):
    """Raised when the engine is used before initialization."""
