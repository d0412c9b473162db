"""Server configuration values."""
import logging
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent

HOST = "0.0.0.0"
PORT = int(os.environ.get("PORT", "3000"))

LOG_FILE = BASE_DIR / "server.log"
LOG_LEVEL = logging.INFO
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3

# Seconds to wait for a single outbound frame before giving up on that client.
SEND_TIMEOUT = 5.0
CORS_ORIGINS = ["*"]
