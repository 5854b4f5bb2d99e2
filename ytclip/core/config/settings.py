# File: ytclip/core/config/settings.py

import os
import shutil
from pathlib import Path
from typing import Optional, Tuple

from ytclip.core.common.enums import RetrievalMode
from ytclip.core.errors import ConfigurationError


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class Settings:
    VERSION: str = "1.0.0"

    # --- Paths ---
    OUTPUT_DIR: Path = Path(os.getenv("YTCLIP_OUTPUT_DIR", "."))
    # None -> tempfile picks the platform default
    TEMP_DIR: Optional[Path] = Path(os.environ["YTCLIP_TEMP_DIR"]) if os.getenv("YTCLIP_TEMP_DIR") else None

    # --- External Tools ---
    # Auto-detect binaries or use env vars
    YTDLP_BINARY: str = os.getenv("YTDLP_BINARY_PATH", shutil.which("yt-dlp") or "yt-dlp")
    FFMPEG_BINARY: str = os.getenv("FFMPEG_BINARY_PATH", shutil.which("ffmpeg") or "ffmpeg")

    # --- Retrieval ---
    YTDLP_FORMAT: str = os.getenv("YTCLIP_FORMAT", "best[ext=mp4]/best")
    # "sections": only the requested range is downloaded
    # "full": whole asset is downloaded, ffmpeg seeks to the start
    RETRIEVAL_MODE: str = os.getenv("YTCLIP_RETRIEVAL_MODE", "sections").lower()

    # --- Encoding ---
    VIDEO_PRESET: str = os.getenv("YTCLIP_PRESET", "fast")
    VIDEO_CRF: int = int(os.getenv("YTCLIP_CRF", "23"))

    # --- URL Validation ---
    CHECK_URL_HOST: bool = _env_flag("YTCLIP_CHECK_HOST", "true")
    EXTRA_ALLOWED_HOSTS: Tuple[str, ...] = tuple(
        h.strip().lower() for h in os.getenv("YTCLIP_ALLOWED_HOSTS", "").split(",") if h.strip()
    )

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("YTCLIP_LOG_LEVEL", "INFO").upper()


settings = Settings()


def retrieval_mode() -> RetrievalMode:
    """The configured RETRIEVAL_MODE as an enum; unknown values are a ConfigurationError."""
    try:
        return RetrievalMode(settings.RETRIEVAL_MODE)
    except ValueError:
        choices = ", ".join(m.value for m in RetrievalMode)
        raise ConfigurationError(
            f"YTCLIP_RETRIEVAL_MODE must be one of {choices}, got '{settings.RETRIEVAL_MODE}'"
        ) from None
