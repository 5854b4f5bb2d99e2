import logging
import sys

import pytest

from ytclip.core.common.enums import ExitCode, FailureStage
from ytclip.features.request_validation.service.api import validate
from ytclip.features.video_clipping.data.subprocess_runner import EXIT_NOT_EXECUTABLE, EXIT_NOT_FOUND, SubprocessRunner
from ytclip.features.video_clipping.domain.errors import RetrievalFailure, TranscodeFailure
from ytclip.features.video_clipping.domain.models import ExternalCommand, ProcessOutcome
from ytclip.features.video_clipping.service.command_builder import build_commands
from ytclip.features.video_clipping.service.orchestrator import ClipOrchestrator

URL = "https://youtube.com/watch?v=abc"


@pytest.fixture
def plan(tmp_path):
    workdir = tmp_path / "work"
    workdir.mkdir()
    return build_commands(validate(URL, "1:30", "2:45"), workdir)


def test_success_runs_both_stages_in_order(plan, make_runner):
    runner = make_runner(touch_files=True)

    result = ClipOrchestrator(runner).run(plan)

    assert result.ok
    assert result.exit_code == ExitCode.SUCCESS
    assert result.output_path == plan.output.path
    assert runner.stages == [FailureStage.RETRIEVAL, FailureStage.TRANSCODE]
    assert plan.output.exists()


def test_retrieval_failure_skips_transcode(plan, make_runner):
    """
    A failed download must never reach ffmpeg.
    """
    # 1. Arrange
    runner = make_runner(retrieval_exit=1, stderr="ERROR: Video unavailable")

    # 2. Act
    result = ClipOrchestrator(runner).run(plan)

    # 3. Assert
    assert not result.ok
    assert isinstance(result.failure, RetrievalFailure)
    assert result.stage == FailureStage.RETRIEVAL
    assert result.exit_code == ExitCode.RETRIEVAL
    assert result.failure.process_exit_code == 1
    assert result.failure.stderr == "ERROR: Video unavailable"

    # Transcode command was never executed
    assert runner.stages == [FailureStage.RETRIEVAL]


def test_transcode_failure(plan, make_runner):
    runner = make_runner(transcode_exit=187, stderr="Unknown encoder 'libx264'")

    result = ClipOrchestrator(runner).run(plan)

    assert isinstance(result.failure, TranscodeFailure)
    assert result.exit_code == ExitCode.TRANSCODE
    assert result.failure.process_exit_code == 187
    assert "libx264" in result.failure.stderr


@pytest.mark.parametrize("retrieval_exit,transcode_exit", [(0, 0), (1, 0), (0, 1)])
def test_intermediate_is_removed_on_every_path(plan, make_runner, retrieval_exit, transcode_exit):
    runner = make_runner(retrieval_exit=retrieval_exit, transcode_exit=transcode_exit, touch_files=True)

    ClipOrchestrator(runner).run(plan)

    workdir = plan.intermediate.path.parent
    assert not plan.intermediate.exists()
    # yt-dlp leftovers go too
    assert list(workdir.iterdir()) == []


def test_intermediate_is_removed_on_interrupt(plan, make_runner):
    runner = make_runner(touch_files=True)
    original_run = runner.run

    def interrupted_run(command):
        original_run(command)
        if command.stage == FailureStage.TRANSCODE:
            raise KeyboardInterrupt
        return runner.outcomes[command.stage]

    runner.run = interrupted_run

    with pytest.raises(KeyboardInterrupt):
        ClipOrchestrator(runner).run(plan)

    assert not plan.intermediate.exists()


def test_output_directory_is_created(tmp_path, make_runner):
    request = validate(URL, "0", "10", output=str(tmp_path / "deep" / "nested" / "clip.mp4"))
    plan = build_commands(request, tmp_path)

    ClipOrchestrator(make_runner()).run(plan)

    assert (tmp_path / "deep" / "nested").is_dir()


# --- Real subprocess runner ---

def test_subprocess_runner_reports_missing_executable():
    command = ExternalCommand("ytclip-no-such-binary", ("--version",), FailureStage.RETRIEVAL)

    outcome = SubprocessRunner().run(command)

    assert outcome.exit_code == EXIT_NOT_FOUND
    assert "Is it installed?" in outcome.stderr


def test_missing_retrieval_tool_is_a_retrieval_failure(plan, isolated_settings):
    isolated_settings.YTDLP_BINARY = "ytclip-no-such-binary"
    plan = build_commands(validate(URL, "1:30", "2:45"), plan.intermediate.path.parent)

    result = ClipOrchestrator(SubprocessRunner()).run(plan)

    assert isinstance(result.failure, RetrievalFailure)
    assert result.exit_code == ExitCode.RETRIEVAL


def _script_without_exec_bit(path):
    path.write_text("#!/bin/sh\nexit 0\n")
    path.chmod(0o644)


@pytest.mark.parametrize("make_binary", [_script_without_exec_bit, lambda path: path.mkdir()],
                         ids=["no-exec-bit", "directory"])
def test_subprocess_runner_reports_unexecutable_binary(tmp_path, make_binary):
    # 1. Arrange
    binary = tmp_path / "yt-dlp"
    make_binary(binary)
    command = ExternalCommand(str(binary), ("--version",), FailureStage.RETRIEVAL)

    # 2. Act
    outcome = SubprocessRunner().run(command)

    # 3. Assert
    assert outcome.exit_code == EXIT_NOT_EXECUTABLE
    assert f"Failed to execute {binary}" in outcome.stderr


def test_unexecutable_transcode_tool_is_a_transcode_failure(plan, tmp_path, isolated_settings):
    binary = tmp_path / "ffmpeg"
    _script_without_exec_bit(binary)
    isolated_settings.FFMPEG_BINARY = str(binary)
    plan = build_commands(validate(URL, "1:30", "2:45"), plan.intermediate.path.parent)

    class RealTranscodeRunner(SubprocessRunner):
        def run(self, command):
            if command.stage == FailureStage.RETRIEVAL:
                return ProcessOutcome(exit_code=0)
            return super().run(command)

    result = ClipOrchestrator(RealTranscodeRunner()).run(plan)

    assert isinstance(result.failure, TranscodeFailure)
    assert result.exit_code == ExitCode.TRANSCODE


def test_subprocess_runner_logs_the_tool_name(caplog):
    caplog.set_level(logging.INFO)
    command = ExternalCommand("ytclip-no-such-binary", ("--version",), FailureStage.TRANSCODE)

    SubprocessRunner().run(command)

    assert "Executing FFmpeg: ytclip-no-such-binary --version" in caplog.text


def test_failed_tool_stderr_is_only_logged_at_debug(caplog):
    """
    The reporter prints the stderr tail; the ERROR log must not repeat it.
    """
    # 1. Arrange
    caplog.set_level(logging.DEBUG)
    script = "import sys; sys.stderr.write('ffmpeg version banner'); sys.exit(4)"
    command = ExternalCommand(sys.executable, ("-c", script), FailureStage.TRANSCODE)

    # 2. Act
    outcome = SubprocessRunner().run(command)

    # 3. Assert
    assert outcome.exit_code == 4
    assert outcome.stderr == "ffmpeg version banner"
    errors = [r.getMessage() for r in caplog.records if r.levelno >= logging.ERROR]
    assert errors == ["FFmpeg failed with code 4"]
    debug = [r.getMessage() for r in caplog.records if r.levelno == logging.DEBUG]
    assert any("ffmpeg version banner" in m for m in debug)
