import subprocess
import logging
from ytclip.core.common.enums import FailureStage
from ..domain.interfaces import IProcessRunner
from ..domain.models import ExternalCommand, ProcessOutcome

logger = logging.getLogger(__name__)

# Shell conventions for "command not found" / "found but not executable"
EXIT_NOT_FOUND = 127
EXIT_NOT_EXECUTABLE = 126

TOOL_NAMES = {
    FailureStage.RETRIEVAL: "yt-dlp",
    FailureStage.TRANSCODE: "FFmpeg",
}

class SubprocessRunner(IProcessRunner):
    """
    Concrete implementation of IProcessRunner using subprocess.
    Blocks until the child exits; output is captured, not streamed.
    """

    def run(self, command: ExternalCommand) -> ProcessOutcome:
        tool = TOOL_NAMES.get(command.stage, command.executable)
        logger.info(f"Executing {tool}: {command}")

        try:
            # capture_output=True allows us to report stderr if it fails.
            # On KeyboardInterrupt subprocess.run kills the child before re-raising.
            completed = subprocess.run(
                command.argv,
                check=True,
                capture_output=True,
                text=True
            )
        except subprocess.CalledProcessError as e:
            # The reporter shows the stderr tail to the user
            logger.error(f"{tool} failed with code {e.returncode}")
            logger.debug(f"{command.executable} STDERR: {e.stderr or 'Unknown error'}")
            return ProcessOutcome(exit_code=e.returncode, stdout=e.stdout or "", stderr=e.stderr or "")
        except FileNotFoundError:
            message = f"Failed to execute {command.executable}. Is it installed?"
            logger.error(message)
            return ProcessOutcome(exit_code=EXIT_NOT_FOUND, stderr=message)
        except OSError as e:
            # Directory, missing exec bit, wrong binary format
            message = f"Failed to execute {command.executable}: {e}"
            logger.error(message)
            return ProcessOutcome(exit_code=EXIT_NOT_EXECUTABLE, stderr=message)

        if completed.stderr:
            logger.debug(f"{command.executable} STDERR: {completed.stderr}")
        return ProcessOutcome(exit_code=completed.returncode, stdout=completed.stdout, stderr=completed.stderr)
