# File: audiomirror/core/errors.py


class MirrorError(Exception):
    """Base class for failures raised while mirroring a single file."""


class ProbeError(MirrorError):
    """The metadata probe could not describe a track."""


class UnsupportedLayoutError(MirrorError, ValueError):
    """The track has a channel layout we cannot downmix."""

    def __init__(self, channels: int):
        self.channels = channels
        super().__init__(f"Don't know how to handle track with {channels} channels")


class PipelineError(MirrorError, RuntimeError):
    """An external process stage failed to launch or exited non-zero."""


class SyncCancelled(MirrorError):
    """Work on a file was abandoned because the run is being cancelled."""
