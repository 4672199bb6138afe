"""Configuration settings for the API server."""

import os


SERVER_HOST = os.environ.get("HOST", "0.0.0.0")

SERVER_PORT = int(os.environ.get("PORT", "5001"))
