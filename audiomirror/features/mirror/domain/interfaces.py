from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator

class IFileWalker(ABC):
    """
    Contract for traversing a filesystem.
    """
    @abstractmethod
    def walk(self, root: Path) -> Iterator[Path]:
        """
        Yields every file under root, recursively, one by one.
        Order is not guaranteed.
        """
        pass
