"""Pretty-print example values as Python literals."""

from __future__ import annotations

from typing import Any

from .naming import quote

INDENT = "    "


def pretty(value: Any, pad: str = "") -> str:
    """Render a decoded JSON value one key or element per line."""
    padmore = pad + INDENT

    if isinstance(value, dict):
        if not value:
            return "{}"
        entries = [
            f"{padmore}{quote(str(k))}: {pretty(v, padmore)}" for k, v in value.items()
        ]
        return "{\n" + ",\n".join(entries) + f"\n{pad}}}"

    if isinstance(value, list):
        if not value:
            return "[]"
        items = [f"{padmore}{pretty(v, padmore)}" for v in value]
        return "[\n" + ",\n".join(items) + f"\n{pad}]"

    if isinstance(value, str):
        return quote(value)

    return str(value)
