import logging
from pathlib import Path
from typing import List, Optional

from audiomirror.core.config.settings import settings
from audiomirror.core.process.types import PipelineSpec, PipelineStage, StageOutput
from audiomirror.features.audio_plan.domain.models import AudioPlan

logger = logging.getLogger(__name__)

class PipelineBuilder:
    """
    Turns an AudioPlan into the external process chain that produces
    an Ogg Vorbis file.

    Without resampling, ffmpeg does everything in one go.
    With resampling, ffmpeg decodes to WAV on stdout, sox resamples it,
    and a second ffmpeg encodes the result while pulling the tags from
    the original file (the WAV stream carries none).
    """

    def __init__(
        self,
        ffmpeg_binary: Optional[str] = None,
        sox_binary: Optional[str] = None,
        quality: Optional[int] = None,
        codec: Optional[str] = None,
    ):
        self.ffmpeg = ffmpeg_binary or settings.FFMPEG_BINARY
        self.sox = sox_binary or settings.SOX_BINARY
        self.quality = quality if quality is not None else settings.VORBIS_QUALITY
        self.codec = codec or settings.AUDIO_CODEC

    def build(self, source: Path, destination: Path, plan: AudioPlan) -> PipelineSpec:
        if plan.needs_resample:
            return self._resample_pipeline(source, destination, plan)
        return self._direct_pipeline(source, destination, plan)

    def _direct_pipeline(self, source: Path, destination: Path, plan: AudioPlan) -> PipelineSpec:
        # -nostdin: several ffmpegs run at once and must not fight over the terminal
        # -vn: embedded cover images are dropped, art is mirrored separately
        # -y: overwrite
        args = [
            "-nostdin",
            "-i", str(source),
            "-vn",
            *self._filter_args(plan),
            *self._encoder_args(),
            "-y", str(destination),
        ]
        return PipelineSpec(
            stages=(PipelineStage(self.ffmpeg, tuple(args), StageOutput.DISCARD),),
            output_path=destination,
            description="encode",
        )

    def _resample_pipeline(self, source: Path, destination: Path, plan: AudioPlan) -> PipelineSpec:
        decode = [
            "-nostdin",
            "-i", str(source),
            *self._filter_args(plan),
            "-f", "wav", "-",
        ]
        resample = [
            "-t", "wav", "-",
            "-t", "wav", "-",
            "rate", "-v", str(plan.target_sample_rate),
        ]
        # Input 0 is the resampled audio, input 1 the original for its tags
        encode = [
            "-i", "-",
            "-i", str(source),
            "-map", "0:0",
            "-map_metadata", "1",
            *self._encoder_args(),
            "-y", str(destination),
        ]
        return PipelineSpec(
            stages=(
                PipelineStage(self.ffmpeg, tuple(decode), StageOutput.PIPE),
                PipelineStage(self.sox, tuple(resample), StageOutput.PIPE),
                PipelineStage(self.ffmpeg, tuple(encode), StageOutput.DISCARD),
            ),
            output_path=destination,
            description=f"decode | resample to {plan.target_sample_rate} | encode",
        )

    @staticmethod
    def _filter_args(plan: AudioPlan) -> List[str]:
        if plan.downmix_filter is None:
            return []
        return ["-af", plan.downmix_filter]

    def _encoder_args(self) -> List[str]:
        return ["-q:a", str(self.quality), "-c:a", self.codec]
