import logging
from threading import Event
from typing import Optional

from audiomirror.core.shared_types import MediaFile
from audiomirror.features.sync_gate.service.gate import prepare_destination
from ..data.stream_copier import StreamCopier
from ..domain.interfaces import IArtCopier

logger = logging.getLogger(__name__)

def replicate_art(
    source: MediaFile,
    destination: MediaFile,
    cancel_event: Optional[Event] = None,
    copier: Optional[IArtCopier] = None,
) -> bool:
    """
    Copies a cover image into the mirror if the mirror's copy is stale.

    Returns:
        True if the file was copied, False if it was already up to date.
    """
    if not prepare_destination(source, destination):
        return False

    copier = copier or StreamCopier()
    written = copier.copy(source.path, destination.path, cancel_event)
    logger.debug(f"Copied {written} bytes: {source.path} -> {destination.path}")
    return True
