"""Connection settings shared by the API server and the thumbnail worker."""

import os


DB_HOST = os.environ.get("DB_HOST", "localhost")

DB_PORT = int(os.environ.get("DB_PORT", "27017"))

DB_DATABASE = os.environ.get("DB_DATABASE", "files_manager")

REDIS_HOST = os.environ.get("REDIS_HOST", "127.0.0.1")

REDIS_PORT = int(os.environ.get("REDIS_PORT", "6379"))

FOLDER_PATH = os.environ.get("FOLDER_PATH", "/tmp/files_manager")

THUMBNAIL_JOB_TIMEOUT = int(os.environ.get("THUMBNAIL_JOB_TIMEOUT", "180"))
