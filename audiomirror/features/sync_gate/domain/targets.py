from pathlib import Path

from audiomirror.core.config.settings import settings
from audiomirror.core.common.enums import FileKind
from audiomirror.core.shared_types import MediaFile

def destination_for(source: MediaFile, source_root: Path, destination_root: Path, kind: FileKind) -> MediaFile:
    """
    Maps a source file to its place in the destination tree.

    The containing directory is re-rooted under destination_root.
    Art is always renamed to the fixed art file name; tracks keep their
    stem and take the target container's extension.

    e.g. Root=/music, File=/music/Artist/Album/01 Track.flac
         -> /mirror/Artist/Album/01 Track.ogg
    """
    if kind == FileKind.ART:
        file_name = settings.ART_FILENAME
    elif kind == FileKind.TRACK:
        file_name = f"{source.path.stem}{settings.TRACK_EXTENSION}"
    else:
        raise ValueError(f"No destination for skipped file: {source.path}")

    containing_dir = source.path.absolute().parent
    # Raises ValueError if the file is not under source_root
    relative_dir = containing_dir.relative_to(source_root.absolute())

    return MediaFile(destination_root / relative_dir / file_name)
