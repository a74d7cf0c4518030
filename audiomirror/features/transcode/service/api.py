import logging
import os
from threading import Event
from typing import Optional

from audiomirror.core.process.runner import ProcessRunner
from audiomirror.core.shared_types import MediaFile
from audiomirror.features.audio_plan.domain.models import AudioPlan
from ..data.pipeline_builder import PipelineBuilder

logger = logging.getLogger(__name__)

def transcode_track(
    source: MediaFile,
    destination: MediaFile,
    plan: AudioPlan,
    cancel_event: Optional[Event] = None,
    builder: Optional[PipelineBuilder] = None,
    runner: Optional[ProcessRunner] = None,
) -> None:
    """
    Encodes source into destination according to plan.

    The pipeline writes to a hidden partial file which only replaces the
    destination once every stage has exited cleanly.
    """
    builder = builder or PipelineBuilder()
    runner = runner or ProcessRunner(cancel_event)

    spec = builder.build(source.path, destination.new_partial_path(), plan)

    logger.debug(f"Transcoding ({spec.description}): {source.path} -> {destination.path}")

    try:
        runner.run_pipeline(spec)
        os.replace(spec.output_path, destination.path)
    except BaseException:
        spec.output_path.unlink(missing_ok=True)
        raise
