"""Exceptions raised by git queries."""


class HookError(Exception):
    """Base class for console-log-check errors."""


class GitError(HookError):
    """A git command ran but did not succeed."""

    def __init__(self, command: list[str], returncode: int | None = None, stderr: str = ""):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr.strip()
        message = f"{' '.join(command)} failed"
        if returncode is not None:
            message += f" (exit {returncode})"
        if self.stderr:
            message += f": {self.stderr}"
        super().__init__(message)


class GitUnavailableError(GitError):
    """The git executable could not be started."""


class NotARepositoryError(GitError):
    """The working directory is not inside a git repository."""
