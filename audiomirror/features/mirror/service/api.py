from pathlib import Path
from typing import Optional

from ..domain.models import MirrorRequest, MirrorSummary
from .scheduler import MirrorScheduler

def run_mirror(source_root: str, destination_root: str, max_workers: Optional[int] = None) -> MirrorSummary:
    """
    Standalone API: mirrors source_root into destination_root.
    Raises before any work if either root is unusable.
    """
    request = MirrorRequest(Path(source_root), Path(destination_root))
    return MirrorScheduler(max_workers=max_workers).run(request)
