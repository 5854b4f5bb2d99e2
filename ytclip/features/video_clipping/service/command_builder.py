from pathlib import Path
from typing import Optional

from ytclip.core.config.settings import retrieval_mode, settings
from ytclip.core.common.enums import RetrievalMode
from ytclip.core.shared_types import MediaFile
from ytclip.features.request_validation.domain.models import ClipRequest, SPEED_TOLERANCE
from ytclip.features.time_parsing.domain.models import TimeSpec

from ..data.ffmpeg_adapter import FFmpegTranscodeAdapter
from ..data.ytdlp_adapter import YtDlpRetrievalAdapter
from ..domain.models import CommandPlan


def _filename_time(spec: TimeSpec) -> str:
    return spec.to_clock().replace(":", "-")


def default_output_name(video_id: str, start: TimeSpec, end: TimeSpec, speed: float = 1.0) -> str:
    """
    Deterministic clip name from the video id and the time range.
    abc_clip_1-30_2-45.mp4, or abc_clip_1-30_2-45_2x.mp4 with a speed change.
    """
    name = f"{video_id}_clip_{_filename_time(start)}_{_filename_time(end)}"
    if abs(speed - 1.0) > SPEED_TOLERANCE:
        name += f"_{speed:g}x"
    return f"{name}.mp4"


def resolve_output(request: ClipRequest, output_dir: Optional[Path] = None) -> MediaFile:
    """
    User-supplied names are kept verbatim apart from a missing MP4 suffix.
    Otherwise the default name lands in output_dir.
    """
    if request.output is not None:
        return MediaFile(request.output).with_mp4_container()

    directory = output_dir if output_dir is not None else settings.OUTPUT_DIR
    name = default_output_name(request.video_id, request.start, request.end, request.speed)
    return MediaFile(Path(directory) / name)


def build_commands(request: ClipRequest,
                   workdir: Path,
                   mode: Optional[RetrievalMode] = None,
                   output_dir: Optional[Path] = None) -> CommandPlan:
    """
    Public Service API: Compose the yt-dlp and FFmpeg invocations for a request.
    Pure; nothing is executed or written.

    Args:
        request: A validated ClipRequest.
        workdir: Directory that will hold the intermediate download.
        mode: Retrieval mode override (defaults to settings.RETRIEVAL_MODE).
        output_dir: Directory for the derived output name (defaults to settings.OUTPUT_DIR).
    """
    mode = mode or retrieval_mode()

    intermediate = MediaFile(Path(workdir) / f"{request.video_id}.source.mp4")
    output = resolve_output(request, output_dir)

    retrieval = YtDlpRetrievalAdapter(mode).build_command(request, intermediate)
    transcode = FFmpegTranscodeAdapter(mode).build_command(request, intermediate, output)

    return CommandPlan(
        retrieval=retrieval,
        transcode=transcode,
        intermediate=intermediate,
        output=output
    )
