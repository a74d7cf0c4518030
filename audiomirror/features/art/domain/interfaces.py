from abc import ABC, abstractmethod
from pathlib import Path
from threading import Event
from typing import Optional

class IArtCopier(ABC):
    """
    Contract for replicating a cover image byte-for-byte.
    """
    @abstractmethod
    def copy(self, source: Path, destination: Path, cancel_event: Optional[Event] = None) -> int:
        """
        Copies source over destination, replacing any existing contents.

        Returns:
            Number of bytes written.
        """
        pass
