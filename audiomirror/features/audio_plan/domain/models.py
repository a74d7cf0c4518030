from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class AudioPlan:
    """
    What has to happen to a track's audio on the way to the mirror.
    None means "leave as is".
    """
    downmix_filter: Optional[str] = None
    target_sample_rate: Optional[int] = None

    @property
    def needs_resample(self) -> bool:
        return self.target_sample_rate is not None
