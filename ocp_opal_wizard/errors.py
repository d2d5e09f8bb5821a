"""Exception types used by the wizard.

Every error that is expected to end the run carries the process exit code it
should produce.  The pipeline driver is the only place that turns these into
an actual exit status.
"""

from __future__ import annotations


class WizardError(Exception):
    """Base exception for wizard failures."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        self.message = message
        self.exit_code = exit_code
        super().__init__(message)


class WizardExit(WizardError):
    """Raised by ``Context.exit`` to stop the pipeline with a given code."""

    def __init__(self, exit_code: int = 0) -> None:
        super().__init__(f"wizard exited with code {exit_code}", exit_code=exit_code)


class UsageError(WizardError):
    """Raised when the command line cannot be parsed."""


class ScaffoldError(WizardError):
    """Raised when the template cannot be copied into the target directory."""


class GitError(WizardError):
    """Raised when a git command exits with a non-zero status."""

    def __init__(self, command: list[str], returncode: int, stderr: str) -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        detail = f": {stderr}" if stderr else ""
        super().__init__(f"`{' '.join(command)}` exited with {returncode}{detail}")


class PromptCancelled(Exception):
    """Raised when the user aborts an interactive prompt (Ctrl-C / EOF)."""
