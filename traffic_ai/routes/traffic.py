# traffic_ai/routes/traffic.py
"""Traffic routes and blueprint configuration."""

import logging
import os

from flask import Blueprint, jsonify, request, send_from_directory

from traffic_ai.api.services.traffic_service import TrafficService

logger = logging.getLogger(__name__)

MISSING_QUERY = "Please ask a question about traffic"
GENERIC_FAILURE = "I couldn't understand that. Please try asking in a different way."


def create_traffic_blueprint(base_dir, config, service=None):
    """Create and configure the traffic blueprint.

    Args:
        base_dir: Absolute path to the package directory (holds ``static/``)
        config: TrafficConfig loaded at startup
        service: Optional TrafficService; built from ``config`` when omitted

    Returns:
        Configured Flask Blueprint
    """
    static_dir = os.path.join(base_dir, "static")
    traffic_bp = Blueprint(
        "traffic",
        __name__,
        static_folder=static_dir,
        static_url_path="/static",
    )
    service = service or TrafficService(config)

    @traffic_bp.route("/")
    def index():
        """Single-page client."""
        return send_from_directory(static_dir, "index.html")

    @traffic_bp.route("/traffic", methods=["POST"])
    def traffic():
        """Answer a free-text traffic question."""
        data = request.get_json(silent=True) or {}
        query = data.get("query") if isinstance(data, dict) else None
        if not query or not isinstance(query, str):
            return jsonify({"error": MISSING_QUERY}), 400

        try:
            outcome = service.answer(query)
        except Exception as e:
            logger.exception("Unexpected error while answering traffic query")
            return jsonify({"error": GENERIC_FAILURE, "details": str(e)}), 500

        if not outcome.ok:
            return jsonify({"error": GENERIC_FAILURE, "details": outcome.error.message}), 500
        return jsonify({"reply": outcome.reply})

    @traffic_bp.route("/health")
    def health():
        """Health check endpoint."""
        return jsonify({"status": "ok", "service": "traffic"})

    return traffic_bp


__all__ = ['create_traffic_blueprint']
