"""Loading charts from the workspace."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from hoist.errors import LoadError
from hoist.models import Chart, ChartMetadata, ResourceKind
from hoist.workspace import CHART_FILE_NAME

logger = logging.getLogger(__name__)

MANIFESTS_DIR = "manifests"
MANIFEST_PATTERNS: tuple[str, ...] = ("*.yaml", "*.yml")

TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class ManifestLoader(yaml.SafeLoader):
    """SafeLoader that leaves unquoted timestamps as strings."""


ManifestLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def load_metadata(chart_path: Path) -> ChartMetadata:
    chart_yaml: Path = chart_path / CHART_FILE_NAME
    try:
        with chart_yaml.open(encoding="utf-8") as f:
            data: Any = yaml.load(f, Loader=ManifestLoader)
    except OSError as e:
        raise LoadError(f"Could not read {chart_yaml}: {e}") from e
    except yaml.YAMLError as e:
        raise LoadError(f"Invalid YAML in {chart_yaml}: {e}") from e

    if not isinstance(data, dict):
        raise LoadError(f"{chart_yaml} must contain a mapping")

    try:
        return ChartMetadata.model_validate(data)
    except ValidationError as e:
        raise LoadError(f"Invalid {chart_yaml}: {e}") from e


def list_manifest_files(chart_path: Path) -> list[Path]:
    """Manifest files of a chart, sorted by file name."""
    manifests_dir: Path = chart_path / MANIFESTS_DIR
    if not manifests_dir.is_dir():
        return []

    files: set[Path] = set()
    for pattern in MANIFEST_PATTERNS:
        files.update(p for p in manifests_dir.glob(pattern) if p.is_file())
    return sorted(files, key=lambda p: p.name)


def _resource_kind(doc: dict[str, Any], source: Path) -> ResourceKind:
    kind = doc.get("kind")
    if not kind:
        raise LoadError(f"Resource in {source} has no kind")
    try:
        return ResourceKind(kind)
    except ValueError:
        supported = ", ".join(k.value for k in ResourceKind)
        raise LoadError(
            f"Unsupported kind {kind!r} in {source} (supported: {supported})"
        ) from None


def load_manifest_file(path: Path) -> list[dict[str, Any]]:
    try:
        with path.open(encoding="utf-8") as f:
            docs: list[Any] = list(yaml.load_all(f, Loader=ManifestLoader))
    except OSError as e:
        raise LoadError(f"Could not read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise LoadError(f"Invalid YAML in {path}: {e}") from e

    resources = []
    for doc in docs:
        if doc is None:
            continue
        if not isinstance(doc, dict):
            raise LoadError(f"Every document in {path} must be a mapping")
        resources.append(doc)
    return resources


def load_chart(chart_path: Path) -> Chart:
    """Load a chart directory into a Chart.

    Resources keep the order they appear in on disk: files by name, then
    documents within a file.
    """
    if not chart_path.is_dir():
        raise LoadError(f"Chart directory not found: {chart_path}")

    metadata: ChartMetadata = load_metadata(chart_path)
    chart = Chart(name=chart_path.name, path=chart_path, metadata=metadata)

    for manifest in list_manifest_files(chart_path):
        for doc in load_manifest_file(manifest):
            chart.add(_resource_kind(doc, manifest), doc)

    logger.debug("Loaded %r from %s", chart, chart_path)
    return chart
