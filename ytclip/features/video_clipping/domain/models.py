import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from ytclip.core.common.enums import ExitCode, FailureStage
from ytclip.core.errors import ClipError
from ytclip.core.shared_types import MediaFile

@dataclass(frozen=True)
class ExternalCommand:
    """
    One subprocess invocation: executable plus ordered arguments.
    """
    executable: str
    args: Tuple[str, ...]
    stage: FailureStage

    @property
    def argv(self) -> List[str]:
        return [self.executable, *self.args]

    def __str__(self) -> str:
        return shlex.join(self.argv)

@dataclass(frozen=True)
class CommandPlan:
    """
    Both commands of a run and the files they refer to.
    """
    retrieval: ExternalCommand
    transcode: ExternalCommand
    intermediate: MediaFile
    output: MediaFile

@dataclass(frozen=True)
class ProcessOutcome:
    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0

@dataclass(frozen=True)
class ClipResult:
    """
    Final outcome of a run: the produced clip, or the failure that stopped it.
    """
    output_path: Optional[Path] = None
    failure: Optional[ClipError] = None

    @classmethod
    def succeeded(cls, output_path: Path) -> "ClipResult":
        return cls(output_path=output_path)

    @classmethod
    def failed(cls, failure: ClipError) -> "ClipResult":
        return cls(failure=failure)

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def stage(self) -> Optional[FailureStage]:
        return self.failure.stage if self.failure else None

    @property
    def exit_code(self) -> ExitCode:
        return self.failure.exit_code if self.failure else ExitCode.SUCCESS
