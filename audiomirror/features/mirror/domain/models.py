from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from audiomirror.core.common.enums import FileKind, FileStatus

@dataclass(frozen=True)
class MirrorRequest:
    """
    User intent to mirror one library tree into another.
    """
    source_root: Path
    destination_root: Path

    def __post_init__(self):
        if not self.source_root.exists():
            raise FileNotFoundError(f"Source root not found: {self.source_root}")
        if not self.source_root.is_dir():
            raise NotADirectoryError(f"Source root is not a directory: {self.source_root}")
        if not self.destination_root.exists():
            raise FileNotFoundError(f"Destination root not found: {self.destination_root}")
        if not self.destination_root.is_dir():
            raise NotADirectoryError(f"Destination root is not a directory: {self.destination_root}")

        # The walk would pick up its own output
        source = self.source_root.resolve()
        destination = self.destination_root.resolve()
        if destination == source or source in destination.parents:
            raise ValueError(f"Destination root must not be inside the source root: {self.destination_root}")

@dataclass(frozen=True)
class FileOutcome:
    """
    How the processing of a single file ended.
    """
    path: Path
    kind: FileKind
    status: FileStatus
    error: Optional[str] = None

@dataclass
class MirrorSummary:
    """
    Report returned after a run completes.
    """
    files_found: int = 0
    counts: Dict[FileStatus, int] = field(default_factory=lambda: {status: 0 for status in FileStatus})
    errors: List[str] = field(default_factory=list)
    cancelled: bool = False

    def record(self, outcome: FileOutcome) -> None:
        self.files_found += 1
        self.counts[outcome.status] += 1
        if outcome.status == FileStatus.FAILED:
            self.errors.append(f"{outcome.path}: {outcome.error}")

    @property
    def failed(self) -> int:
        return self.counts[FileStatus.FAILED]

    @property
    def succeeded(self) -> bool:
        return not self.errors and not self.cancelled
