from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Tuple

class StageOutput(str, Enum):
    PIPE = "pipe"        # stdout feeds the next stage's stdin
    DISCARD = "discard"  # end of the chain

@dataclass(frozen=True)
class PipelineStage:
    """
    One external process invocation in a pipeline.
    """
    program: str
    args: Tuple[str, ...] = ()
    output: StageOutput = StageOutput.DISCARD

    @property
    def command(self) -> List[str]:
        return [self.program, *self.args]

    @property
    def name(self) -> str:
        return Path(self.program).name

@dataclass(frozen=True)
class PipelineSpec:
    """
    An ordered chain of stages. Each stage's stdout is wired into the
    next stage's stdin; the last stage writes to output_path itself.
    """
    stages: Tuple[PipelineStage, ...]
    output_path: Path
    description: str = field(default="", compare=False)

    def __post_init__(self):
        if not self.stages:
            raise ValueError("A pipeline needs at least one stage.")
        for stage in self.stages[:-1]:
            if stage.output is not StageOutput.PIPE:
                raise ValueError(f"Stage '{stage.name}' must pipe into the next stage.")
        if self.stages[-1].output is not StageOutput.DISCARD:
            raise ValueError("The last stage has nowhere to pipe its output.")

    def __len__(self) -> int:
        return len(self.stages)
