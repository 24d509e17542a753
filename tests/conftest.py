"""Shared fixtures: throwaway git repositories."""

import shutil
import subprocess
import tempfile
from pathlib import Path

import pytest


def git(repo: Path, *args: str) -> None:
    subprocess.run(
        [
            "git",
            "-c",
            "user.name=Test",
            "-c",
            "user.email=test@example.com",
            "-c",
            "commit.gpgsign=false",
            *args,
        ],
        cwd=repo,
        check=True,
        capture_output=True,
    )


@pytest.fixture
def temp_dir():
    """Create a temporary directory that is not a git repository."""
    tmpdir = Path(tempfile.mkdtemp())
    yield tmpdir
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def git_repo(temp_dir):
    """A git repository with one commit containing a placeholder file."""
    git(temp_dir, "init", "-q")
    (temp_dir / "README.md").write_text("# test\n")
    git(temp_dir, "add", ".")
    git(temp_dir, "commit", "-q", "-m", "initial")
    return temp_dir


@pytest.fixture
def commit_files():
    """Commit files into a repo, then let the test modify them."""

    def _commit(repo: Path, files: dict[str, str]) -> None:
        for name, content in files.items():
            path = repo / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        git(repo, "add", ".")
        git(repo, "commit", "-q", "-m", "add files")

    return _commit
