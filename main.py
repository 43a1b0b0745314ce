"""
TrafficAI – main application entry point

* Flask app serving the single-page client and the `POST /traffic` endpoint.
* Configuration is read once from the environment (and `.env`) into an
  immutable `TrafficConfig` that the blueprint receives explicitly.
"""

import logging

from flask import Flask
from flask_cors import CORS
from dotenv import load_dotenv

from traffic_ai import PACKAGE_DIR
from traffic_ai.api.config import TrafficConfig, get_log_level
from traffic_ai.routes.traffic import create_traffic_blueprint

# --------------------------------------------------------------------------- #
# Environment & logging
# --------------------------------------------------------------------------- #
load_dotenv()

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(config=None, service=None):
    """Build the Flask application.

    Args:
        config: Optional TrafficConfig; read from the environment when omitted
        service: Optional TrafficService, mainly for tests

    Returns:
        Configured Flask app
    """
    config = config or TrafficConfig.from_env()
    if not config.api_key:
        logger.warning("No GOOGLE_MAPS_API_KEY found. Traffic queries will fail.")

    # The blueprint owns /static; the app keeps none of its own.
    app = Flask(__name__, static_folder=None)
    app.config["TRAFFIC_CONFIG"] = config

    # CORS for local dev / cross‑origin front‑end requests
    CORS(app, origins="*")

    app.register_blueprint(create_traffic_blueprint(PACKAGE_DIR, config, service))

    return app


# --------------------------------------------------------------------------- #
# Local development runner ( `python main.py` )
# --------------------------------------------------------------------------- #
if __name__ == "__main__":
    config = TrafficConfig.from_env()
    app = create_app(config)
    logger.info("🚦 TrafficAI running on http://localhost:%d", config.port)
    app.run(host="0.0.0.0", port=config.port, debug=False)
