# File: tests/conftest.py

import pytest
import os
import sys
from pathlib import Path

# 1. Add project root to path
sys.path.append(os.getcwd())

# 2. Import Settings
from ytclip.core.config.settings import settings
from ytclip.core.common.enums import FailureStage
from ytclip.features.video_clipping.domain.interfaces import IProcessRunner
from ytclip.features.video_clipping.domain.models import ProcessOutcome


class FakeProcessRunner(IProcessRunner):
    """
    Stands in for yt-dlp / ffmpeg.
    Returns a canned outcome per stage and records every command it was given.
    With touch_files=True it also creates the files the real tools would write,
    including a yt-dlp style '.part' leftover.
    """

    def __init__(self, outcomes=None, touch_files=False):
        self.outcomes = outcomes or {}
        self.touch_files = touch_files
        self.calls = []

    @property
    def stages(self):
        return [c.stage for c in self.calls]

    def run(self, command):
        self.calls.append(command)
        outcome = self.outcomes.get(command.stage, ProcessOutcome(exit_code=0))

        if self.touch_files:
            if command.stage == FailureStage.RETRIEVAL:
                target = Path(command.args[command.args.index("-o") + 1])
                target.write_bytes(b"FAKE_VIDEO")
                Path(f"{target}.part").write_bytes(b"FAKE_PARTIAL")
            elif outcome.ok:
                Path(command.args[-1]).write_bytes(b"FAKE_CLIP")

        return outcome


@pytest.fixture
def make_runner():
    """
    Factory for FakeProcessRunner.
    Usage: make_runner(retrieval_exit=1, touch_files=True)
    """
    def _make(retrieval_exit=0, transcode_exit=0, stderr="", touch_files=False):
        outcomes = {
            FailureStage.RETRIEVAL: ProcessOutcome(exit_code=retrieval_exit, stderr=stderr if retrieval_exit else ""),
            FailureStage.TRANSCODE: ProcessOutcome(exit_code=transcode_exit, stderr=stderr if transcode_exit else ""),
        }
        return FakeProcessRunner(outcomes, touch_files=touch_files)
    return _make


@pytest.fixture(scope="function", autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """
    Runs before EVERY test.
    Pins settings to known values so the developer's environment cannot leak in.
    """
    monkeypatch.setattr(settings, "OUTPUT_DIR", tmp_path / "out")
    monkeypatch.setattr(settings, "TEMP_DIR", tmp_path / "tmp")
    monkeypatch.setattr(settings, "YTDLP_BINARY", "yt-dlp")
    monkeypatch.setattr(settings, "FFMPEG_BINARY", "ffmpeg")
    monkeypatch.setattr(settings, "YTDLP_FORMAT", "best[ext=mp4]/best")
    monkeypatch.setattr(settings, "RETRIEVAL_MODE", "sections")
    monkeypatch.setattr(settings, "VIDEO_PRESET", "fast")
    monkeypatch.setattr(settings, "VIDEO_CRF", 23)
    monkeypatch.setattr(settings, "CHECK_URL_HOST", True)
    monkeypatch.setattr(settings, "EXTRA_ALLOWED_HOSTS", ())
    yield settings
