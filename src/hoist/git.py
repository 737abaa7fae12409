"""Git repository operations for the chart cache."""

from __future__ import annotations

import logging
import subprocess
from subprocess import CompletedProcess
from typing import TYPE_CHECKING, Protocol

from hoist.errors import SyncError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class VCSClient(Protocol):
    """The version control operations the repository sync needs."""

    def check_local(self, path: Path) -> bool: ...

    def clone(self, remote: str, path: Path) -> None: ...

    def update(self, path: Path) -> None: ...


class GitClient:
    """Runs the ``git`` binary against a working copy."""

    def __init__(self, binary: str = "git"):
        self.binary: str = binary

    def _run(self, args: list[str], cwd: Path | None = None) -> CompletedProcess[str]:
        cmd: list[str] = [self.binary, *args]
        logger.debug("Running %s", " ".join(cmd))
        try:
            return subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                check=True,
                cwd=str(cwd) if cwd else None,
            )
        except subprocess.CalledProcessError as e:
            raise SyncError(
                f"'{' '.join(cmd)}' failed: {(e.stderr or '').strip()}"
            ) from e
        except OSError as e:
            raise SyncError(f"Could not run {self.binary}: {e}") from e

    def check_local(self, path: Path) -> bool:
        """Return True if ``path`` is the top of a git working copy."""
        if not (path / ".git").exists():
            return False
        try:
            result = self._run(["rev-parse", "--show-toplevel"], cwd=path)
        except SyncError:
            return False
        return result.stdout.strip() == str(path.resolve())

    def clone(self, remote: str, path: Path) -> None:
        self._run(["clone", remote, str(path)])

    def update(self, path: Path) -> None:
        self._run(["fetch", "--tags", "origin"], cwd=path)
        self._run(["pull"], cwd=path)
