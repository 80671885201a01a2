"""Centralized configuration for the MathPanel backend.

Every setting can be overridden with an environment variable prefixed with
``MATHPANEL_`` (e.g. ``MATHPANEL_PORT=9000``).
"""

import importlib.metadata
import os

try:
    VERSION = importlib.metadata.version("mathpanel")
except importlib.metadata.PackageNotFoundError:
    # Running from a source checkout
    VERSION = "0.1.0"

# Server
HOST = os.getenv("MATHPANEL_HOST", "127.0.0.1")
PORT = int(os.getenv("MATHPANEL_PORT", "8000"))
LOG_LEVEL = os.getenv("MATHPANEL_LOG_LEVEL", "INFO")
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("MATHPANEL_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# Session history (in memory, newest first)
HISTORY_LIMIT = int(os.getenv("MATHPANEL_HISTORY_LIMIT", "100"))

# CSV uploads
MAX_UPLOAD_BYTES = int(os.getenv("MATHPANEL_MAX_UPLOAD_BYTES", str(5 * 1024 * 1024)))
CSV_DELIMITER = os.getenv("MATHPANEL_CSV_DELIMITER", ",")
