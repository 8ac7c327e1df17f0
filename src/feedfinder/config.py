"""Runtime settings read from the environment (and an optional ``.env`` file)."""

import os

from dotenv import load_dotenv

load_dotenv()

USER_AGENT = os.getenv("FEEDFINDER_USER_AGENT", "FeedFinder/1.0")
TIMEOUT = float(os.getenv("FEEDFINDER_TIMEOUT", "10"))
HOST = os.getenv("FEEDFINDER_HOST", "127.0.0.1")
PORT = int(os.getenv("FEEDFINDER_PORT", "8090"))
LOG_LEVEL = os.getenv("FEEDFINDER_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
