from typing import List
from ytclip.core.config.settings import retrieval_mode, settings
from ytclip.core.common.enums import FailureStage, RetrievalMode
from ytclip.core.shared_types import MediaFile
from ytclip.features.request_validation.domain.models import ClipRequest
from ytclip.features.time_parsing.domain.models import format_seconds
from ..domain.models import ExternalCommand


# atempo only accepts factors within this window per filter instance
ATEMPO_MIN = 0.5
ATEMPO_MAX = 2.0


def atempo_chain(speed: float) -> str:
    """
    Splits a tempo change into chained atempo filters, each within [0.5, 2.0].
    3.0 -> "atempo=2,atempo=1.5"
    """
    factors: List[float] = []
    remaining = speed
    while remaining > ATEMPO_MAX:
        factors.append(ATEMPO_MAX)
        remaining /= ATEMPO_MAX
    while remaining < ATEMPO_MIN:
        factors.append(ATEMPO_MIN)
        remaining /= ATEMPO_MIN
    if abs(remaining - 1.0) > 1e-9 or not factors:
        factors.append(remaining)
    return ",".join(f"atempo={f:g}" for f in factors)


def path_argument(path) -> str:
    """ffmpeg has no "--"; a relative path starting with "-" gets a "./" prefix instead."""
    text = str(path)
    return f"./{text}" if text.startswith("-") else text


def setpts_filter(speed: float) -> str:
    """Video timestamps scaled so the picture keeps pace with the audio."""
    return f"setpts=PTS/{speed:g}"


class FFmpegTranscodeAdapter:
    """
    Builds the FFmpeg invocation that trims, re-times and re-encodes
    the intermediate file into an H.264/AAC MP4.
    """

    def __init__(self, mode: RetrievalMode = None):
        self.mode = mode or retrieval_mode()

    def build_command(self, request: ClipRequest, intermediate: MediaFile, output: MediaFile) -> ExternalCommand:
        # -y: Overwrite output files without asking
        # -ss: Seek to the clip start (full downloads only, sections start at 0)
        # -t before -i: limits how much input is read, so the speed filters
        #     cannot shorten or stretch the selected range
        args = ["-y"]

        if self.mode == RetrievalMode.FULL:
            args += ["-ss", request.start.to_seconds_text()]

        args += [
            "-t", format_seconds(request.duration),
            "-i", path_argument(intermediate.path),
        ]

        if request.changes_speed:
            args += [
                "-filter:v", setpts_filter(request.speed),
                "-filter:a", atempo_chain(request.speed),
            ]

        # QuickTime compatible encoding
        # -pix_fmt yuv420p: players reject 4:4:4 H.264
        # -movflags +faststart: moov atom first, playback starts before full download
        args += [
            "-c:v", "libx264",
            "-c:a", "aac",
            "-pix_fmt", "yuv420p",
            "-movflags", "+faststart",
            "-preset", settings.VIDEO_PRESET,
            "-crf", str(settings.VIDEO_CRF),
            path_argument(output.path)
        ]

        return ExternalCommand(
            executable=settings.FFMPEG_BINARY,
            args=tuple(args),
            stage=FailureStage.TRANSCODE
        )
