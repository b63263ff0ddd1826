#!/usr/bin/env python3
"""CityScale - true-size city boundary comparison.

Starts the Flask API server.
"""

import logging
import os

from cityscale.server import app

PORT = int(os.environ.get("PORT", 5050))
HOST = os.environ.get("HOST", "127.0.0.1")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


if __name__ == "__main__":
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.run(host=HOST, port=PORT, debug=False)
