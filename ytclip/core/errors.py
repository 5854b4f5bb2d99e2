from ytclip.core.common.enums import ExitCode, FailureStage


class ClipError(Exception):
    """
    Base class for every failure ytclip reports to the user.
    Subclasses pin the stage and the process exit code.
    """
    stage: FailureStage = FailureStage.VALIDATION
    exit_code: ExitCode = ExitCode.VALIDATION


class ValidationError(ClipError, ValueError):
    """The request is semantically invalid. Nothing has been executed."""
    stage = FailureStage.VALIDATION
    exit_code = ExitCode.VALIDATION


class ConfigurationError(ValidationError):
    """An environment setting holds an unusable value. Nothing has been executed."""
