"""
Flask REST API for the Troubleshoot KB Service.

Thin HTTP layer over TroubleshootApp: request validation, status codes
and JSON payloads. All matching logic lives in the engine.
"""
import logging

from flask import Flask, jsonify, request
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from .app import TroubleshootApp
from .security import ValidationError

logger = logging.getLogger(__name__)

SERVICE_VERSION = "1.0.0"


def create_app(engine: TroubleshootApp, enable_rate_limit: bool = True) -> Flask:
    """
    Build the Flask application around an initialized engine.

    Browser origins listed in the engine's ``cors_origins`` config get CORS
    headers on every response.

    :param engine: TroubleshootApp whose initialize() has succeeded
    :param enable_rate_limit: Turn flask-limiter on or off (tests turn it off)
    :return: Flask app
    """
    app = Flask(__name__)
    allowed_origins = frozenset(engine.config.cors_origins)

    limiter = Limiter(
        app=app,
        key_func=get_remote_address,
        default_limits=["200 per hour", "60 per minute"],
        storage_uri="memory://",
        enabled=enable_rate_limit,
    )
    # Route decorators only hold a weak reference; a disabled limiter is
    # not registered on the app, so keep it alive for the app's lifetime.
    app.extensions["troubleshoot_kb.limiter"] = limiter

    @app.before_request
    def log_request():
        logger.info(f"{request.method} {request.path}")

    @app.after_request
    def add_cors_headers(response):
        origin = request.headers.get("Origin")
        if origin and origin in allowed_origins:
            response.headers["Access-Control-Allow-Origin"] = origin
            response.headers["Access-Control-Allow-Credentials"] = "true"
            response.headers["Access-Control-Allow-Methods"] = "GET, POST"
            response.headers["Access-Control-Allow-Headers"] = "Content-Type"
            response.vary.add("Origin")
        return response

    @app.route("/")
    def index():
        """Service banner."""
        return jsonify({
            "message": "Troubleshoot KB Server is running",
            "endpoints": {
                "health": "GET /api/health",
                "kbInfo": "GET /api/kb",
                "ask": "POST /api/ask",
            },
            "version": SERVICE_VERSION,
        })

    @app.route("/api/health")
    def health():
        return jsonify(engine.health())

    @app.route("/api/kb")
    def kb_info():
        return jsonify(engine.kb_summary())

    @app.route("/api/ask", methods=["POST"])
    @limiter.limit("30 per minute")
    def ask():
        """Resolve a troubleshooting question."""
        try:
            data = request.get_json(silent=True)
            if not isinstance(data, dict):
                return jsonify({"error": "Invalid JSON in request body", "found": False}), 400

            query = data.get("query")
            if not isinstance(query, str) or not query.strip():
                return jsonify({"error": "Query is required", "found": False}), 400

            try:
                decision = engine.ask(query)
            except ValidationError as e:
                logger.warning(f"Input validation failed: {str(e)}")
                return jsonify({"error": str(e), "found": False}), 400

            result = decision.to_dict()
            result["intents"] = [
                intent.value for intent in engine.detect_intents(decision.processed_query)
            ]

            logger.info(
                f"Query: {query.strip()!r} -> Processed: {decision.processed_query!r}, "
                f"found={decision.found}"
            )
            return jsonify(result)

        except Exception as e:
            logger.error(f"Server error in /api/ask: {str(e)}", exc_info=True)
            return jsonify({"error": f"Internal server error: {str(e)}", "found": False}), 500

    return app
