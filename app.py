#!/usr/bin/env python3
"""
Flask REST API entry point for the Troubleshoot KB Service.

Uses environment variables (and an optional .env file) for configuration.
The knowledge base is loaded before the server starts; if that fails the
process exits without serving any request.
"""
import os
import sys
import logging
from pathlib import Path

from dotenv import load_dotenv

# Add service to path (src/ is in the same directory)
sys.path.insert(0, str(Path(__file__).parent / "src"))

# Public API imports
from troubleshoot_kb.app import TroubleshootApp
from troubleshoot_kb.config_loader import load_config_from_env
from troubleshoot_kb.exceptions import TroubleshootError
from troubleshoot_kb.web import create_app

# Load environment variables
load_dotenv()

# Setup logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)


def _initialize_engine_from_env() -> TroubleshootApp:
    """Load config and KB; exit the process if either is invalid."""
    try:
        config = load_config_from_env()
        engine = TroubleshootApp(config)
        engine.initialize()
    except TroubleshootError as e:
        logger.critical(f"Failed to initialize engine: {str(e)}")
        sys.exit(1)

    logger.info("Engine initialized successfully from environment variables")
    return engine


engine = _initialize_engine_from_env()
app = create_app(engine)


if __name__ == "__main__":
    port = int(os.getenv("PORT", 4000))
    # Disable debug mode for production
    app.run(host="0.0.0.0", port=port, debug=False)
