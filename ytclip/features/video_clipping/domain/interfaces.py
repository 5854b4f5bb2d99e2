from abc import ABC, abstractmethod
from .models import ExternalCommand, ProcessOutcome

class IProcessRunner(ABC):
    """
    Contract for executing an external tool.
    Abstracts subprocess away from the orchestration logic so tests can
    substitute canned outcomes.
    """

    @abstractmethod
    def run(self, command: ExternalCommand) -> ProcessOutcome:
        """
        Runs the command to completion, blocking the caller.

        Args:
            command: The executable and arguments to run.

        Returns:
            ProcessOutcome with the exit code and captured output.
            A non-zero exit is reported here, not raised.
        """
        pass
