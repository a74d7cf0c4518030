# File: audiomirror/features/audio_plan/domain/resolver.py

from typing import Optional

from audiomirror.core.errors import UnsupportedLayoutError
from audiomirror.features.track_probe.domain.models import TrackDescriptor
from .models import AudioPlan

# 5.1 -> stereo, keeping the center and LFE audible on both sides
DOWNMIX_5_1_TO_STEREO = (
    "pan=stereo"
    "|FL=0.5*FC+0.707*FL+0.707*BL+0.5*LFE"
    "|FR=0.5*FC+0.707*FR+0.707*BR+0.5*LFE"
)

MAX_NATIVE_SAMPLE_RATE = 48000
CD_SAMPLE_RATE = 44100
DVD_SAMPLE_RATE = 48000


def resolve_downmix(channels: int) -> Optional[str]:
    if channels in (1, 2):
        return None
    if channels == 6:
        return DOWNMIX_5_1_TO_STEREO
    raise UnsupportedLayoutError(channels)


def resolve_sample_rate(sample_rate: int) -> Optional[int]:
    """
    Anything above 48kHz comes down to 44.1kHz if it belongs to that
    family (88.2k, 176.4k, ...), otherwise to 48kHz.
    """
    if sample_rate <= MAX_NATIVE_SAMPLE_RATE:
        return None
    if sample_rate % CD_SAMPLE_RATE == 0:
        return CD_SAMPLE_RATE
    return DVD_SAMPLE_RATE


def resolve_audio_plan(descriptor: TrackDescriptor) -> AudioPlan:
    return AudioPlan(
        downmix_filter=resolve_downmix(descriptor.channels),
        target_sample_rate=resolve_sample_rate(descriptor.sample_rate),
    )
