import logging
import os
from pathlib import Path
from typing import Iterator, List

from ..domain.interfaces import IFileWalker

logger = logging.getLogger(__name__)

class LocalFileWalker(IFileWalker):
    """
    Concrete implementation using standard os.walk for efficiency.
    Directories that cannot be read are collected in `errors`.
    """

    def __init__(self):
        self.errors: List[str] = []

    def walk(self, root: Path) -> Iterator[Path]:
        for dirpath, dirnames, filenames in os.walk(root, onerror=self._on_error):
            # Stable order within a directory keeps the log readable
            dirnames.sort()
            for filename in sorted(filenames):
                yield Path(dirpath) / filename

    def _on_error(self, error: OSError) -> None:
        message = f"Cannot read directory {error.filename}: {error.strerror}"
        logger.error(message)
        self.errors.append(message)
