import re
from pathlib import PurePath
from typing import Union

from audiomirror.core.common.enums import FileKind

class NamingRules:
    """
    Central logic for deciding how a library file is handled.
    Only the base name is inspected; nothing touches the disk.
    """

    # Cover art: front.jpg / Front.JPEG / ...
    ART_PATTERN = re.compile(r"front\.jpe?g", re.IGNORECASE)

    # Compared as-is, so "Song.FLAC" is not a track
    TRACK_EXTENSIONS = frozenset({".m4a", ".flac"})

    @classmethod
    def classify(cls, name: Union[str, PurePath]) -> FileKind:
        base_name = PurePath(name).name

        if cls.ART_PATTERN.fullmatch(base_name):
            return FileKind.ART

        if PurePath(base_name).suffix in cls.TRACK_EXTENSIONS:
            return FileKind.TRACK

        return FileKind.SKIP


def classify(name: Union[str, PurePath]) -> FileKind:
    return NamingRules.classify(name)
