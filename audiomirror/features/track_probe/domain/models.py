from dataclasses import dataclass

@dataclass(frozen=True)
class TrackDescriptor:
    """
    The facts about a track that drive transcoding decisions.
    """
    sample_rate: int
    channels: int

    def __post_init__(self):
        if self.sample_rate <= 0:
            raise ValueError(f"Sample rate must be positive, got {self.sample_rate}.")
        if self.channels <= 0:
            raise ValueError(f"Channel count must be positive, got {self.channels}.")
