import logging
import tempfile
from pathlib import Path
from typing import Optional, Union

from ytclip.core.config.settings import retrieval_mode, settings
from ytclip.core.errors import ValidationError
from ytclip.features.request_validation.domain.models import HostPolicy
from ytclip.features.request_validation.service.api import validate

from ..domain.interfaces import IProcessRunner
from ..domain.models import ClipResult
from .command_builder import build_commands
from .orchestrator import ClipOrchestrator

logger = logging.getLogger(__name__)


def clip_video(url: str,
               start: str,
               end: str,
               output: Optional[Union[str, Path]] = None,
               speed: Optional[float] = None,
               runner: Optional[IProcessRunner] = None,
               policy: Optional[HostPolicy] = None) -> ClipResult:
    """
    Public Service API: Download and encode one clip.

    Args:
        url: Source video URL.
        start: Start timestamp (SS, MM:SS or HH:MM:SS).
        end: End timestamp.
        output: Optional output filename.
        speed: Optional playback speed (0.5 - 4.0).
        runner: Process runner; the real subprocess runner when omitted.
        policy: URL strictness; the configured policy when omitted.

    Returns:
        ClipResult. Validation and configuration problems come back as a failed
        result, not raised.
    """
    # 1. Validate (request and configuration)
    try:
        request = validate(url, start, end, speed=speed, output=output, policy=policy)
        mode = retrieval_mode()
    except ValidationError as e:
        logger.error(f"Invalid request: {e}")
        return ClipResult.failed(e)

    logger.info(
        f"Clipping {request.video_id} from {request.start} to {request.end} "
        f"(duration: {request.duration}s, speed: {request.speed:g}x)"
    )

    # 2. Build & Run inside a scoped temp dir
    temp_root = settings.TEMP_DIR
    if temp_root is not None:
        Path(temp_root).mkdir(parents=True, exist_ok=True)

    with tempfile.TemporaryDirectory(prefix="ytclip-", dir=temp_root) as tmp_dir:
        plan = build_commands(request, Path(tmp_dir), mode=mode)
        return ClipOrchestrator(runner).run(plan)
