"""Load a service description from disk.

Reads an API model (``<service>-<date>.normal.json``) and, when present,
the companion ``.examples.json`` file, and merges the examples in.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def examples_path_for(path: Path) -> Path:
    """Companion examples file, e.g. s3.normal.json -> s3.examples.json."""
    name = path.name
    for suffix in (".normal.json", ".min.json", ".json"):
        if name.endswith(suffix):
            return path.with_name(name[: -len(suffix)] + ".examples.json")
    return path.with_name(name + ".examples.json")


def load_json(path: Path) -> dict[str, Any]:
    """Load a JSON document from disk."""
    with open(path) as f:
        return json.load(f)


def load_service(
    path: Path, examples_path: Path | None = None,
) -> dict[str, Any]:
    """Load a service definition, merging examples when available."""
    service = load_json(path)
    service.setdefault("metadata", {}).setdefault("sourceFile", path.name)

    examples_file = examples_path or examples_path_for(path)
    if examples_file.exists():
        service["examples"] = load_json(examples_file).get("examples", {})
    return service


def service_name(service: dict[str, Any], path: Path) -> str:
    """Display name used for the generated module.

    Falls back from ``serviceId`` to ``serviceAbbreviation`` to the file
    name.
    """
    meta = service.get("metadata", {})
    for key in ("serviceId", "serviceAbbreviation"):
        if meta.get(key):
            return meta[key]
    return path.name.split(".")[0]
