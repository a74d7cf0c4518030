import os
from pathlib import Path
from threading import Event
from typing import Optional

from audiomirror.core.errors import SyncCancelled
from audiomirror.core.shared_types import MediaFile
from ..domain.interfaces import IArtCopier

CHUNK_SIZE = 65536

class StreamCopier(IArtCopier):
    def copy(self, source: Path, destination: Path, cancel_event: Optional[Event] = None) -> int:
        """
        Streams the file in 64kb chunks into a hidden partial file, then
        renames it over the destination so readers never see half an image.
        """
        partial = MediaFile(destination).new_partial_path()
        written = 0
        try:
            with open(source, "rb") as src, open(partial, "wb") as dst:
                for byte_block in iter(lambda: src.read(CHUNK_SIZE), b""):
                    if cancel_event is not None and cancel_event.is_set():
                        raise SyncCancelled(f"Cancelled while copying {source}")
                    dst.write(byte_block)
                    written += len(byte_block)
            os.replace(partial, destination)
        except BaseException:
            partial.unlink(missing_ok=True)
            raise
        return written
