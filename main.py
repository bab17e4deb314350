"""
VendNav – main application entry point

* Flask app serving the vending machine catalog, nearest-machine lookups
  and greedy multi-stop routes under `/vending`.
* Navigation itself happens in the user's maps app; the API only returns
  deep links.
"""

import os
import logging

from flask import Flask
from flask_cors import CORS
from dotenv import load_dotenv

# --------------------------------------------------------------------------- #
# Environment & logging
# --------------------------------------------------------------------------- #
load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

from vendnav.api.config import get_port, validate_config  # noqa: E402
from vendnav.routes import create_vending_blueprint  # noqa: E402

validate_config()

# --------------------------------------------------------------------------- #
# Flask initialisation
# --------------------------------------------------------------------------- #
app = Flask(__name__)

flask_secret_key = os.getenv("FLASK_SECRET_KEY") or os.urandom(32).hex()
if "FLASK_SECRET_KEY" not in os.environ:
    logger.warning("No FLASK_SECRET_KEY found. Generated a temporary key.")
app.secret_key = flask_secret_key

app.config.update(
    SESSION_COOKIE_SECURE=False,
    SESSION_COOKIE_HTTPONLY=True,
    SESSION_COOKIE_SAMESITE="Lax",
)

# CORS for the mobile client and local dev
CORS(app, origins="*")

# --------------------------------------------------------------------------- #
# Blueprints
# --------------------------------------------------------------------------- #
app.register_blueprint(create_vending_blueprint())


@app.route("/debug")
def debug():
    """Simple JSON health endpoint."""
    return {
        "status": "ok",
        "endpoints": {
            "machines": "/vending/api/machines",
            "nearest": "/vending/api/nearest?lat=<lat>&lng=<lng>",
            "route": "/vending/api/route?lat=<lat>&lng=<lng>&max_stops=<n>",
        },
    }


# --------------------------------------------------------------------------- #
# Local development runner ( `python main.py` )
# --------------------------------------------------------------------------- #
if __name__ == "__main__":
    port = get_port()
    logger.info("Starting vendnav on http://localhost:%d", port)
    app.run(host="0.0.0.0", port=port, debug=False)

__all__ = ["app"]
