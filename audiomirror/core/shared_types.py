import uuid
from dataclasses import dataclass
from pathlib import Path

@dataclass(frozen=True)
class MediaFile:
    """
    Entity representing a media file on the filesystem.
    Encapsulates path validation, timestamps and directory creation.
    """
    path: Path

    def __post_init__(self):
        if str(self.path).strip() == "." or str(self.path).strip() == "":
             raise ValueError("File path cannot be empty.")

    def exists(self) -> bool:
        return self.path.exists()

    def modified_time(self) -> float:
        """Last modification time, read from disk on every call."""
        return self.path.stat().st_mtime

    def ensure_parent_dir(self) -> None:
        """Creates the directory structure for this file if it doesn't exist."""
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def new_partial_path(self) -> Path:
        """
        Fresh hidden sibling to write into before renaming over this file.
        Unique per call, so two writers aiming at the same file never share it.
        Keeps the real suffix so tools can infer the container from it.
        """
        return self.path.with_name(f".{self.path.stem}.{uuid.uuid4().hex}.partial{self.path.suffix}")
