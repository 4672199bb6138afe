"""Project-wide constants (session lifetime, paging, thumbnail widths)."""

SESSION_TTL_SECONDS: int = 24 * 3600
SESSION_KEY_PREFIX: str = "auth_"

ROOT_PARENT_ID: str = "0"
PAGE_SIZE: int = 20

FILE_TYPES: tuple = ("folder", "file", "image")
FOLDER_TYPE: str = "folder"
IMAGE_TYPE: str = "image"

THUMBNAIL_WIDTHS: tuple = (500, 250, 100)

QUEUE_NAME: str = "fileQueue"
THUMBNAIL_TASK: str = "worker.tasks.generate_thumbnails"

DEFAULT_MIME_TYPE: str = "text/plain"
