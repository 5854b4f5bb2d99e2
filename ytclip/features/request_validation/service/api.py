import logging
import math
from pathlib import Path
from typing import Optional, Union

from ytclip.core.config.settings import settings
from ytclip.features.time_parsing.service.api import parse_time

from ..data.url_rules import UrlRules
from ..domain.errors import EmptyUrl, InvalidOutputPath, NonPositiveDuration, SpeedOutOfRange, UnsupportedHost
from ..domain.models import ClipRequest, HostPolicy, DEFAULT_SPEED, MAX_SPEED, MIN_SPEED

logger = logging.getLogger(__name__)


def default_host_policy() -> HostPolicy:
    """Host policy taken from the environment configuration."""
    return HostPolicy(
        check_host=settings.CHECK_URL_HOST,
        extra_hosts=frozenset(settings.EXTRA_ALLOWED_HOSTS)
    )


def validate(url: str,
             start_text: str,
             end_text: str,
             speed: Optional[float] = None,
             output: Optional[Union[str, Path]] = None,
             policy: Optional[HostPolicy] = None) -> ClipRequest:
    """
    Public Service API: Turn raw CLI input into an immutable ClipRequest.

    Args:
        url: Source video URL.
        start_text: Start timestamp (SS, MM:SS or HH:MM:SS).
        end_text: End timestamp, same forms.
        speed: Optional playback speed factor.
        output: Optional output filename, passed through untouched.
        policy: URL strictness. Defaults to the configured policy.

    Raises:
        ParseError: If either timestamp is malformed.
        EmptyUrl, UnsupportedHost: If the URL is blank or not a video host.
        NonPositiveDuration: If end <= start.
        SpeedOutOfRange: If speed is outside [0.5, 4.0].
        InvalidOutputPath: If output names a directory rather than a file.
    """
    policy = policy or default_host_policy()

    # 1. URL
    if url is None or not url.strip():
        raise EmptyUrl()
    url = url.strip()

    if policy.check_host and not UrlRules.is_supported(url, policy.extra_hosts):
        raise UnsupportedHost(url, UrlRules.host_of(url))

    # 2. Time range
    start = parse_time(start_text)
    end = parse_time(end_text)
    if end <= start:
        raise NonPositiveDuration(start, end)

    # 3. Speed
    if speed is None:
        speed = DEFAULT_SPEED
    elif math.isnan(speed) or not MIN_SPEED <= speed <= MAX_SPEED:
        raise SpeedOutOfRange(speed, MIN_SPEED, MAX_SPEED)

    # 4. Output
    if output is not None and str(output).strip() and Path(output).name in ("", ".", ".."):
        raise InvalidOutputPath(str(output))

    video_id = UrlRules.extract_video_id(url)
    if video_id is None:
        video_id = UrlRules.fallback_id(url)
        logger.debug(f"No video id in URL, using derived id {video_id}")

    return ClipRequest(
        url=url,
        video_id=video_id,
        start=start,
        end=end,
        output=Path(output) if output and str(output).strip() else None,
        speed=float(speed)
    )
