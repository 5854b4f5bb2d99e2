import sys
from typing import Optional, TextIO

from ..domain.errors import StageFailure
from ..domain.models import ClipResult

# Tool stderr can be long (ffmpeg prints its whole banner); keep the tail
STDERR_TAIL_LINES = 15


def report(result: ClipResult, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    """
    Prints the outcome of a run and returns the process exit code.

    Success goes to out, failures to err with the stage label and,
    for tool failures, the last lines of the tool's stderr.
    """
    out = out or sys.stdout
    err = err or sys.stderr

    if result.ok:
        print(f"[SUCCESS] Clip saved as: {result.output_path}", file=out)
        return int(result.exit_code)

    failure = result.failure
    print(f"[ERROR] {failure.stage.value} failed: {failure}", file=err)

    if isinstance(failure, StageFailure) and failure.stderr.strip():
        for line in failure.stderr.strip().splitlines()[-STDERR_TAIL_LINES:]:
            print(f"    {line}", file=err)

    return int(result.exit_code)
