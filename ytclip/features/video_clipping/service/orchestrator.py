import logging
from typing import Optional

from ..data.subprocess_runner import SubprocessRunner
from ..domain.errors import RetrievalFailure, TranscodeFailure
from ..domain.interfaces import IProcessRunner
from ..domain.models import ClipResult, CommandPlan

logger = logging.getLogger(__name__)

class ClipOrchestrator:
    """
    Runs retrieval, then transcoding, strictly in sequence.
    Owns the intermediate file for the duration of the run.
    """

    def __init__(self, runner: Optional[IProcessRunner] = None):
        self.runner = runner or SubprocessRunner()

    def run(self, plan: CommandPlan) -> ClipResult:
        """
        Executes the plan.

        Returns:
            ClipResult with the output path, or with a RetrievalFailure /
            TranscodeFailure. The intermediate file is removed on every path,
            including exceptions and KeyboardInterrupt.
        """
        try:
            # 1. Retrieval
            outcome = self.runner.run(plan.retrieval)
            if not outcome.ok:
                # Transcoding needs the intermediate file; stop here
                return ClipResult.failed(RetrievalFailure(outcome.exit_code, outcome.stderr))

            # 2. Transcode
            plan.output.ensure_parent_dir()
            outcome = self.runner.run(plan.transcode)
            if not outcome.ok:
                return ClipResult.failed(TranscodeFailure(outcome.exit_code, outcome.stderr))

            logger.info(f"Clip written to {plan.output.path}")
            return ClipResult.succeeded(plan.output.path)
        finally:
            # 3. Cleanup (yt-dlp may also leave .part / .ytdl files beside it)
            plan.intermediate.discard()
