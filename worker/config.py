"""Configuration settings for the thumbnail worker."""

import os


# None lets rq pick a unique name per process
WORKER_NAME = os.environ.get("WORKER_NAME") or None
