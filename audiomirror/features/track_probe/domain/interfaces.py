from abc import ABC, abstractmethod
from pathlib import Path
from .models import TrackDescriptor

class ITrackProbe(ABC):
    """
    Contract for reading audio parameters from a track.
    """
    @abstractmethod
    def probe(self, track_path: Path) -> TrackDescriptor:
        """
        Inspects the first audio stream of the given file.

        Raises:
            ProbeError: the file could not be described.
        """
        pass
