"""
Main module for the tdrequest URL service.
"""

import sys
import signal
import dotenv

from tdrequest._utils.get_path import get_path
from tdrequest._utils.logging_config import setup_logging
from tdrequest.url_service import create_app


def handle_sigterm(*args):
    """Handle SIGTERM signal."""
    print("Received SIGTERM, shutting down gracefully...")
    sys.exit(0)


if __name__ == "__main__":
    dotenv.load_dotenv(get_path("env"))
    signal.signal(signal.SIGTERM, handle_sigterm)
    setup_logging()

    app = create_app()
    app.run(debug=True, host="0.0.0.0", port=8712)
