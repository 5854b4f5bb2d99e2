from ytclip.core.config.settings import retrieval_mode, settings
from ytclip.core.common.enums import FailureStage, RetrievalMode
from ytclip.core.shared_types import MediaFile
from ytclip.features.request_validation.domain.models import ClipRequest
from ..domain.models import ExternalCommand


class YtDlpRetrievalAdapter:
    """
    Builds the yt-dlp invocation that fetches the source segment
    into the intermediate file.
    """

    def __init__(self, mode: RetrievalMode = None):
        self.mode = mode or retrieval_mode()

    def build_command(self, request: ClipRequest, intermediate: MediaFile) -> ExternalCommand:
        # --no-playlist: watch?v=..&list=.. URLs fetch the single video
        # --force-overwrites: a stale intermediate must never be reused
        # -f: single-file format, prefer mp4 so ffmpeg sees a familiar container
        args = [
            "--no-playlist",
            "--no-progress",
            "--force-overwrites",
            "-f", settings.YTDLP_FORMAT,
        ]

        if self.mode == RetrievalMode.SECTIONS:
            # Only the requested time range is downloaded
            section = f"*{request.start.to_seconds_text()}-{request.end.to_seconds_text()}"
            args += ["--download-sections", section]

        # --: a URL starting with "-" must not be read as an option
        args += ["-o", str(intermediate.path), "--", request.url]

        return ExternalCommand(
            executable=settings.YTDLP_BINARY,
            args=tuple(args),
            stage=FailureStage.RETRIEVAL
        )
