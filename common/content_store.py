"""Manages uploaded file content and derived thumbnails on local disk."""

from pathlib import Path
from typing import Optional, Union

from common.config import FOLDER_PATH
from common.logging_config import get_logger
from common.utils import generate_uuid

logger = get_logger(__name__)


class ContentStore:
    """
    Flat directory of files named by generated UUIDs.

    Thumbnails are siblings of the original, suffixed with ``_<width>``.
    """

    def __init__(self, root: Union[str, Path] = FOLDER_PATH):
        self.root = Path(root)

    def ensure_root(self) -> None:
        """Ensure storage directory exists."""
        self.root.mkdir(parents=True, exist_ok=True)

    def new_path(self) -> Path:
        return self.root / generate_uuid()

    def write_new(self, data: bytes) -> str:
        """
        Write content under a freshly generated name.

        Args:
            data: Raw decoded file content

        Returns:
            String path to written file

        Raises:
            OSError: If write operation fails
        """
        self.ensure_root()
        filepath = self.new_path()
        filepath.write_bytes(data)
        logger.debug(f"Wrote {len(data)} bytes to {filepath}")
        return str(filepath)

    @staticmethod
    def variant_path(local_path: str, width: Optional[int] = None) -> Path:
        """
        Path of the original content, or of its thumbnail for ``width``.
        """
        if width is None:
            return Path(local_path)
        return Path(f"{local_path}_{width}")

    def write_variant(self, local_path: str, width: int, data: bytes) -> str:
        filepath = self.variant_path(local_path, width)
        filepath.write_bytes(data)
        return str(filepath)

    def exists(self, local_path: str, width: Optional[int] = None) -> bool:
        return self.variant_path(local_path, width).is_file()

    def read(self, local_path: str, width: Optional[int] = None) -> bytes:
        """
        Read content from disk.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        return self.variant_path(local_path, width).read_bytes()
