"""
Exception hierarchy for srcedit.

Locate-time errors abort before any stage runs. Stage launch failures halt
the pipeline at the stage that could not be started. A stage that starts and
exits non-zero is an ordinary result; ``StageFailure`` exists only for
callers that prefer exception flow via ``PipelineResult.raise_for_status``.
"""

from typing import List, Optional


class SrceditError(Exception):
    """Base class for all srcedit errors."""
    pass


class ConfigurationError(SrceditError):
    """Raised when configuration validation fails."""
    pass


class LocatorError(SrceditError):
    """Base class for errors raised while locating files."""
    pass


class NoSuchDirectory(LocatorError):
    """Raised when the source root is missing or is not a directory."""

    def __init__(self, root: str):
        self.root = root
        super().__init__(f"Source root does not exist or is not a directory: {root}")


class InvalidPattern(LocatorError):
    """Raised when the search pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid pattern '{pattern}': {reason}")


class StageLaunchFailure(SrceditError):
    """
    Raised when an external tool could not be started.

    Attributes:
        stage: Name of the stage whose tool failed to launch
        command: The argv that was attempted
        exit_status: 127 when the executable was not found, 126 otherwise
    """

    EXIT_NOT_FOUND = 127
    EXIT_CANNOT_EXECUTE = 126

    def __init__(self, stage: str, command: List[str], cause: Optional[OSError] = None):
        self.stage = stage
        self.command = list(command)
        self.cause = cause
        reason = cause.strerror if cause is not None and cause.strerror else str(cause)
        super().__init__(f"Cannot launch {stage} command '{self.command[0]}': {reason}")

    @property
    def exit_status(self) -> int:
        if isinstance(self.cause, FileNotFoundError):
            return self.EXIT_NOT_FOUND
        return self.EXIT_CANNOT_EXECUTE


class StageFailure(SrceditError):
    """Raised on request when a stage ran but exited with a non-zero status."""

    def __init__(self, stage: str, returncode: int):
        self.stage = stage
        self.returncode = returncode
        super().__init__(f"{stage} stage failed with exit status {returncode}")
