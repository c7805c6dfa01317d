"""
Configuration loader with validation.

Builds TroubleshootConfig from environment variables (and a local .env file).
"""
from dotenv import load_dotenv

from .config import DEFAULT_CORS_ORIGINS, TroubleshootConfig, resolve_service_path
from .config_validator import (
    get_bool_env,
    get_float_env,
    get_int_env,
    get_list_env,
    get_optional_env,
    validate_path,
    validate_threshold,
)
from .exceptions import ConfigurationError


def load_config_from_env() -> TroubleshootConfig:
    """
    Load configuration from environment variables with validation.

    Usage:
        config = load_config_from_env()
        app = TroubleshootApp(config)
        app.initialize()

    :return: Validated TroubleshootConfig instance
    :raises: ConfigurationError if values are missing or invalid
    """
    # Load .env file if it exists (for local development)
    load_dotenv()

    config = TroubleshootConfig(
        kb_path=get_optional_env("TROUBLESHOOT_KB_PATH", default="data/kb.json"),
        tables_path=get_optional_env("TROUBLESHOOT_TABLES_PATH"),
        unknown_queries_log_path=get_optional_env(
            "UNKNOWN_QUERIES_LOG_PATH",
            default="logs/unknowns.log"
        ),
        log_unknown_queries=get_bool_env("LOG_UNKNOWN_QUERIES", True),
        acceptance_threshold=get_float_env("ACCEPTANCE_THRESHOLD", 0.55),
        fuzzy_min_confidence=get_float_env("FUZZY_MIN_CONFIDENCE", 0.5),
        fuzzy_result_limit=get_int_env("FUZZY_RESULT_LIMIT", 5),
        enable_spell_correction=get_bool_env("ENABLE_SPELL_CORRECTION", True),
        max_query_length=get_int_env("MAX_QUERY_LENGTH", 500),
        cors_origins=get_list_env("CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
    )

    validate_config(config)
    return config


def validate_config(config: TroubleshootConfig) -> TroubleshootConfig:
    """
    Validate a config built by hand or from the environment.

    :raises: ConfigurationError on the first invalid value
    """
    validate_path(config.kb_path, "TROUBLESHOOT_KB_PATH")
    validate_path(resolve_service_path(config.kb_path), "TROUBLESHOOT_KB_PATH", must_exist=True)

    if config.tables_path:
        validate_path(
            resolve_service_path(config.tables_path),
            "TROUBLESHOOT_TABLES_PATH",
            must_exist=True,
        )

    validate_threshold(config.acceptance_threshold, "ACCEPTANCE_THRESHOLD")
    validate_threshold(config.fuzzy_min_confidence, "FUZZY_MIN_CONFIDENCE")

    if config.fuzzy_result_limit < 1:
        raise ConfigurationError(
            f"FUZZY_RESULT_LIMIT must be at least 1, got {config.fuzzy_result_limit}"
        )

    if config.max_query_length < 1:
        raise ConfigurationError(
            f"MAX_QUERY_LENGTH must be at least 1, got {config.max_query_length}"
        )

    return config
