from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from hoist.errors import ApplyError


class FakeCluster:
    """Records created documents; optionally fails on the Nth call (1-based)."""

    def __init__(self, fail_on: int | None = None):
        self.fail_on: int | None = fail_on
        self.calls: int = 0
        self.created: list[bytes] = []

    def create(self, data: bytes) -> None:
        self.calls += 1
        if self.fail_on is not None and self.calls == self.fail_on:
            raise ApplyError("kubectl create exited with status 1", returncode=1)
        self.created.append(data)


def resource(kind: str, name: str, **extra: Any) -> dict[str, Any]:
    return {"kind": kind, "metadata": {"name": name}, **extra}


def write_chart(
    root: Path,
    name: str,
    manifests: dict[str, list[dict[str, Any]]] | None = None,
    version: str = "0.1.0",
) -> Path:
    chart_dir: Path = root / name
    (chart_dir / "manifests").mkdir(parents=True, exist_ok=True)
    (chart_dir / "Chart.yaml").write_text(
        yaml.safe_dump({"name": name, "version": version, "description": "test"})
    )
    for file_name, docs in (manifests or {}).items():
        (chart_dir / "manifests" / file_name).write_text(yaml.safe_dump_all(docs))
    return chart_dir


@pytest.fixture
def cluster() -> FakeCluster:
    return FakeCluster()


@pytest.fixture
def home(tmp_path: Path) -> Path:
    home_dir: Path = tmp_path / "home"
    (home_dir / "cache" / "charts").mkdir(parents=True)
    (home_dir / "workspace").mkdir()
    return home_dir
