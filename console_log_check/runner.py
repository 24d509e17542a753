"""Stop hook runner.

Drains stdin, lists files changed since HEAD, and warns on stderr about
any that still contain console.log. Never writes to stdout: for a stop
hook stdout is the decision channel, and empty stdout means "allow".
"""

import logging
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import BinaryIO, TextIO

from console_log_check import git
from console_log_check.config import HookConfig
from console_log_check.errors import GitError, GitUnavailableError, NotARepositoryError
from console_log_check.scanner import ScanResult, filter_source_files, scan_files

logger = logging.getLogger(__name__)

WARNING_TEMPLATE = "[Hook] WARNING: console.log found in {path}"
SUMMARY_LINE = "[Hook] Remove console.log statements before committing"


class Outcome(Enum):
    SKIPPED = "skipped"
    NO_REPOSITORY = "no_repository"
    TOOL_UNAVAILABLE = "tool_unavailable"
    GIT_ERROR = "git_error"
    CLEAN = "clean"
    FOUND = "found"


@dataclass
class HookResult:
    """What a run did. Only FOUND produces output."""

    outcome: Outcome
    scan: ScanResult = field(default_factory=ScanResult)
    detail: str | None = None


def drain(stream: BinaryIO | None) -> None:
    """Read stream to EOF and discard it."""
    if stream is None:
        return
    try:
        while stream.read(65536):
            pass
    except (OSError, ValueError) as exc:
        # ValueError: stream already closed
        logger.debug("Could not drain stdin: %s", exc)


def _write(stream: TextIO, line: str) -> None:
    stream.write(line + "\n")
    stream.flush()


def run_hook(
    config: HookConfig,
    stdin: BinaryIO | None = None,
    stderr: TextIO | None = None,
    cwd: Path | None = None,
) -> HookResult:
    """Run the stop hook once and describe the outcome."""
    if config.skip_reason:
        logger.debug("Skipping: %s is set", config.skip_reason)
        return HookResult(Outcome.SKIPPED, detail=config.skip_reason)

    if stdin is None:
        stdin = getattr(sys.stdin, "buffer", None)
    if stderr is None:
        stderr = sys.stderr
    drain(stdin)

    try:
        git.ensure_repository(cwd)
        root = git.get_toplevel(cwd)
        changed = git.list_changed_files(cwd)
    except NotARepositoryError as exc:
        logger.debug("Not a git repository: %s", exc)
        return HookResult(Outcome.NO_REPOSITORY, detail=str(exc))
    except GitUnavailableError as exc:
        logger.debug("git unavailable: %s", exc)
        return HookResult(Outcome.TOOL_UNAVAILABLE, detail=str(exc))
    except GitError as exc:
        logger.debug("git query failed: %s", exc)
        return HookResult(Outcome.GIT_ERROR, detail=str(exc))

    files = filter_source_files(changed, config.extensions, root)
    scan = scan_files(
        files,
        root,
        on_finding=lambda path: _write(stderr, WARNING_TEMPLATE.format(path=path)),
    )

    if not scan.found:
        logger.debug("Scanned %d file(s), nothing found", len(files))
        return HookResult(Outcome.CLEAN, scan=scan)

    _write(stderr, SUMMARY_LINE)
    logger.debug("Scanned %d file(s), %d with console.log", len(files), len(scan.findings))
    return HookResult(Outcome.FOUND, scan=scan)
