"""Thin wrappers around the git queries the hook needs."""

import logging
import subprocess
from pathlib import Path

from console_log_check.errors import GitError, GitUnavailableError, NotARepositoryError

logger = logging.getLogger(__name__)


def _run_git(args: list[str], cwd: Path | None = None) -> str:
    command = ["git", *args]
    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            cwd=str(cwd) if cwd is not None else None,
        )
    except (FileNotFoundError, PermissionError) as exc:
        raise GitUnavailableError(command, stderr=str(exc)) from exc

    if result.returncode != 0:
        raise GitError(command, result.returncode, result.stderr)
    return result.stdout


def ensure_repository(cwd: Path | None = None) -> None:
    """Raise NotARepositoryError unless cwd is inside a git work tree."""
    try:
        _run_git(["rev-parse", "--git-dir"], cwd)
    except GitUnavailableError:
        raise
    except GitError as exc:
        raise NotARepositoryError(exc.command, exc.returncode, exc.stderr) from exc


def get_toplevel(cwd: Path | None = None) -> Path:
    """Absolute path of the repository's working tree root."""
    return Path(_run_git(["rev-parse", "--show-toplevel"], cwd).strip())


def list_changed_files(cwd: Path | None = None) -> list[str]:
    """Paths differing between the working tree and HEAD, as git prints them.

    Covers staged and unstaged changes; untracked files are not included.
    """
    output = _run_git(["diff", "--name-only", "HEAD"], cwd)
    files = [line for line in output.splitlines() if line.strip()]
    logger.debug("git reports %d changed path(s)", len(files))
    return files
