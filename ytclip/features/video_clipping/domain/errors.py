from ytclip.core.common.enums import ExitCode, FailureStage
from ytclip.core.errors import ClipError


class StageFailure(ClipError, RuntimeError):
    """
    An external tool exited non-zero.
    Carries the tool's exit code and whatever it wrote to stderr.
    """
    label = "External tool"

    def __init__(self, process_exit_code: int, stderr: str = ""):
        self.process_exit_code = process_exit_code
        self.stderr = stderr or ""
        super().__init__(f"{self.label} exited with code {process_exit_code}")


class RetrievalFailure(StageFailure):
    stage = FailureStage.RETRIEVAL
    exit_code = ExitCode.RETRIEVAL
    label = "Retrieval (yt-dlp)"


class TranscodeFailure(StageFailure):
    stage = FailureStage.TRANSCODE
    exit_code = ExitCode.TRANSCODE
    label = "Transcode (ffmpeg)"
