import logging
from pathlib import Path
from threading import Event
from typing import Optional

from audiomirror.core.common.enums import FileKind, FileStatus
from audiomirror.core.process.runner import ProcessRunner
from audiomirror.core.shared_types import MediaFile
from audiomirror.features.art.service.api import replicate_art
from audiomirror.features.audio_plan.domain.resolver import resolve_audio_plan
from audiomirror.features.classifier.domain.rules import classify
from audiomirror.features.sync_gate.domain.targets import destination_for
from audiomirror.features.sync_gate.service.gate import prepare_destination
from audiomirror.features.track_probe.data.mediainfo_adapter import MediaInfoAdapter
from audiomirror.features.track_probe.domain.interfaces import ITrackProbe
from audiomirror.features.transcode.data.pipeline_builder import PipelineBuilder
from audiomirror.features.transcode.service.api import transcode_track
from ..domain.models import FileOutcome, MirrorRequest

logger = logging.getLogger(__name__)

class FileProcessor:
    """
    Handles one library file from classification to finished output.
    Errors propagate to the caller; the scheduler owns isolation.
    """

    def __init__(
        self,
        request: MirrorRequest,
        cancel_event: Optional[Event] = None,
        probe: Optional[ITrackProbe] = None,
        builder: Optional[PipelineBuilder] = None,
    ):
        self.request = request
        self.cancel_event = cancel_event
        self.runner = ProcessRunner(cancel_event)
        self.probe = probe or MediaInfoAdapter(self.runner)
        self.builder = builder or PipelineBuilder()

    def process(self, path: Path, kind: Optional[FileKind] = None) -> FileOutcome:
        if kind is None:
            kind = classify(path.name)

        if kind == FileKind.SKIP:
            logger.info(f'Skipping "{path}"')
            return FileOutcome(path, kind, FileStatus.SKIPPED)

        source = MediaFile(path)
        destination = destination_for(source, self.request.source_root, self.request.destination_root, kind)

        if kind == FileKind.ART:
            changed = self._process_art(source, destination)
        else:
            changed = self._process_track(source, destination)

        if not changed:
            logger.info(f'Unchanged: "{path}"')
            return FileOutcome(path, kind, FileStatus.UNCHANGED)

        logger.info(f'Processed {kind.value} "{path}"')
        return FileOutcome(path, kind, FileStatus.PROCESSED)

    def _process_art(self, source: MediaFile, destination: MediaFile) -> bool:
        return replicate_art(source, destination, self.cancel_event)

    def _process_track(self, source: MediaFile, destination: MediaFile) -> bool:
        # 1. Bail if the mirror copy is up to date
        if not prepare_destination(source, destination):
            return False

        # 2. Decide downmix and sample rate from the probed stream
        descriptor = self.probe.probe(source.path)
        plan = resolve_audio_plan(descriptor)

        if plan.needs_resample:
            logger.info(f'Resampling from {descriptor.sample_rate} to {plan.target_sample_rate}: "{source.path}"')
        else:
            logger.info(f'No resampling required (already {descriptor.sample_rate}): "{source.path}"')

        # 3. Encode
        transcode_track(source, destination, plan, self.cancel_event, self.builder, self.runner)
        return True
