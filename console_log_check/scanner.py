"""Filter changed files and search them for the banned marker."""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

MARKER = "console.log"


@dataclass
class ReadError:
    """A changed file that could not be read."""

    path: str
    error: str


@dataclass
class ScanResult:
    findings: list[str] = field(default_factory=list)
    read_errors: list[ReadError] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return bool(self.findings)


def filter_source_files(
    paths: Iterable[str], extensions: Iterable[str], root: Path | None = None
) -> list[str]:
    """Keep paths with a matching extension that still exist as files.

    Deleted or renamed entries drop out here, so they are never read.
    """
    suffixes = tuple(extensions)
    base = root or Path.cwd()
    return [p for p in paths if p.endswith(suffixes) and (base / p).is_file()]


def file_contains(path: Path) -> bool:
    """True if the file contains MARKER.

    Undecodable bytes are replaced, so a stray Latin-1 comment does not hide a match.
    """
    return MARKER in path.read_text(encoding="utf-8", errors="replace")


def scan_files(
    paths: Iterable[str],
    root: Path | None = None,
    on_finding: Callable[[str], None] | None = None,
) -> ScanResult:
    """Scan each path in order, reporting matches through on_finding."""
    base = root or Path.cwd()
    result = ScanResult()

    for path in paths:
        try:
            hit = file_contains(base / path)
        except OSError as exc:
            logger.debug("Could not read %s: %s", path, exc)
            result.read_errors.append(ReadError(path=path, error=str(exc)))
            continue

        if hit:
            result.findings.append(path)
            if on_finding is not None:
                on_finding(path)

    return result
