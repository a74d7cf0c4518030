import json
import logging
import subprocess
from pathlib import Path
from typing import Any, Dict, Optional

from audiomirror.core.config.settings import settings
from audiomirror.core.errors import ProbeError
from audiomirror.core.process.runner import ProcessRunner
from ..domain.interfaces import ITrackProbe
from ..domain.models import TrackDescriptor

logger = logging.getLogger(__name__)

class MediaInfoAdapter(ITrackProbe):
    """
    Concrete implementation of ITrackProbe using the mediainfo CLI.
    Expects: {"media": {"track": [{"@type": "Audio", "SamplingRate": "44100", "Channels": "2"}, ...]}}
    """

    def __init__(self, runner: Optional[ProcessRunner] = None, binary: Optional[str] = None):
        self.runner = runner or ProcessRunner()
        self.binary = binary or settings.MEDIAINFO_BINARY

    def probe(self, track_path: Path) -> TrackDescriptor:
        cmd = [self.binary, "--Output=JSON", str(track_path)]

        try:
            output = self.runner.capture(cmd)
        except OSError as e:
            raise ProbeError(f"Failed to start mediainfo: {e}") from e
        except subprocess.CalledProcessError as e:
            error_msg = e.stderr.strip() if e.stderr else f"exit code {e.returncode}"
            raise ProbeError(f"mediainfo failed: {error_msg}") from e

        try:
            report = json.loads(output)
        except json.JSONDecodeError as e:
            raise ProbeError(f"mediainfo returned invalid JSON: {e}") from e

        audio = self._find_audio_track(report)
        try:
            descriptor = TrackDescriptor(
                sample_rate=self._read_int(audio, "SamplingRate"),
                channels=self._read_int(audio, "Channels"),
            )
        except ValueError as e:
            raise ProbeError(f"Invalid audio parameters: {e}") from e
        logger.debug(f"Probed {track_path}: {descriptor}")
        return descriptor

    @staticmethod
    def _find_audio_track(report: Any) -> Dict[str, Any]:
        try:
            tracks = report["media"]["track"]
        except (KeyError, TypeError) as e:
            raise ProbeError("mediainfo report has no media tracks") from e

        for track in tracks:
            if isinstance(track, dict) and track.get("@type") == "Audio":
                return track
        raise ProbeError("mediainfo report has no Audio track")

    @staticmethod
    def _read_int(track: Dict[str, Any], field_name: str) -> int:
        if field_name not in track:
            raise ProbeError(f"Audio track is missing {field_name}")
        raw = track[field_name]
        try:
            return int(str(raw).strip())
        except ValueError as e:
            raise ProbeError(f"Audio track has non-integer {field_name}: {raw!r}") from e
