"""Encoding of chart resources for kubectl."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from hoist.errors import SerializationError

if TYPE_CHECKING:
    from hoist.models import Resource

# TODO: allow per-resource versions once charts carry extensions/v1beta1 kinds.
DEFAULT_API_VERSION = "v1"


def marshal_json(resource: Resource, api_version: str = DEFAULT_API_VERSION) -> bytes:
    """Encode ``resource`` as JSON stamped with ``api_version``.

    ``apiVersion`` is always the first key and replaces whatever the
    resource declared; the remaining keys keep their original order, so
    the same input always yields the same bytes.
    """
    document = {"apiVersion": api_version}
    document.update((k, v) for k, v in resource.items() if k != "apiVersion")

    try:
        encoded: str = json.dumps(document, indent=2, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Cannot encode resource as JSON: {e}") from e

    return encoded.encode("utf-8")
