"""Thin subprocess wrapper around the git CLI."""

import logging
import subprocess
from pathlib import Path

from semgov.config.models import GitConfig
from semgov.errors import SemgovError

logger = logging.getLogger(__name__)


class GitCommandError(SemgovError):
    """Raised when a git invocation fails."""


def run_git(repo_root: Path, *args: str) -> str:
    """Run a git command in ``repo_root`` and return its stdout verbatim.

    Output is decoded as UTF-8; undecodable bytes become U+FFFD so a diff of a
    non-UTF-8 file can still be classified.

    Raises:
        GitCommandError: If git is missing, cannot start, or exits non-zero.
    """
    cmd = ["git", *args]
    logger.debug("Running: %s", " ".join(cmd))
    try:
        result = subprocess.run(
            cmd,
            cwd=repo_root,
            check=True,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError as e:
        raise GitCommandError("git executable not found") from e
    except OSError as e:
        raise GitCommandError(f"Could not run git: {e}") from e
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitCommandError(
            f"{' '.join(cmd)} failed (exit {e.returncode}): {stderr}"
        ) from e
    return result.stdout


def fetch_base(repo_root: Path, git_config: GitConfig) -> None:
    """Refresh the remote tracking ref used as the comparison base."""
    run_git(repo_root, "fetch", git_config.remote, git_config.base_branch, "--quiet")


def split_paths(output: str) -> list[str]:
    """Split NUL-terminated ``-z`` path output into paths."""
    return [path for path in output.split("\0") if path]
