import logging
from pathlib import Path

from audiomirror.core.shared_types import MediaFile

logger = logging.getLogger(__name__)

def needs_processing(source_mtime: float, destination_path: Path) -> bool:
    """
    True if the destination is missing or older than the source.
    Equal timestamps count as already synced.
    """
    if not destination_path.exists():
        return True
    return destination_path.stat().st_mtime < source_mtime

def prepare_destination(source: MediaFile, destination: MediaFile) -> bool:
    """
    Runs the staleness check and, when the destination does not exist yet,
    creates its missing parent directories so the caller can write to it.
    """
    if not destination.exists():
        destination.ensure_parent_dir()
        return True

    stale = needs_processing(source.modified_time(), destination.path)
    if not stale:
        logger.debug(f"Destination is up to date: {destination.path}")
    return stale
