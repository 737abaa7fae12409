"""kubectl invocation."""

from __future__ import annotations

import logging
import subprocess
from typing import Protocol

from hoist.errors import ApplyError

logger = logging.getLogger(__name__)


class ClusterClient(Protocol):
    """Something that can create a resource from a serialized document."""

    def create(self, data: bytes) -> None: ...


class KubectlClient:
    """Creates resources by piping documents to ``kubectl create -f -``.

    The child inherits this process's stdout and stderr, so kubectl's own
    output reaches the terminal unchanged.
    """

    def __init__(self, binary: str = "kubectl"):
        self.binary: str = binary

    def command(self) -> list[str]:
        return [self.binary, "create", "-f", "-"]

    def create(self, data: bytes) -> None:
        cmd: list[str] = self.command()
        logger.debug("Running %s", " ".join(cmd))

        try:
            proc = subprocess.Popen(cmd, stdin=subprocess.PIPE)
        except OSError as e:
            raise ApplyError(f"Could not start {self.binary}: {e}") from e

        # No timeout: a hung kubectl blocks the deployment.
        proc.communicate(input=data)

        if proc.returncode != 0:
            raise ApplyError(
                f"{self.binary} create exited with status {proc.returncode}",
                returncode=proc.returncode,
            )
