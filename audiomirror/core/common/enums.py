# File: audiomirror/core/common/enums.py

from enum import Enum, unique

@unique
class FileKind(str, Enum):
    ART = "art"
    TRACK = "track"
    SKIP = "skip"

@unique
class FileStatus(str, Enum):
    PROCESSED = "processed"
    UNCHANGED = "unchanged"
    SKIPPED = "skipped"
    FAILED = "failed"
    CANCELLED = "cancelled"
