"""Render shapes as Python-flavoured signature fragments and documentation.

Top level (pad == ""), an operation's input structure becomes one Markdown
section per member:

    ## `Bucket = str` -- *Required*
    The bucket name.

Nested shapes render as literal expressions indented one level per depth:

    {
        "Key": <required> str,
        "Tags": [{"Name": str}, ...]
    }

Shapes reference each other by name, so the walk keeps the chain of names
being expanded and stops at a back edge, emitting the type tag instead.
"""

from __future__ import annotations

import logging
from typing import Any

from .doctext import DocFormatter, html_to_markdown
from .errors import RenderAssertionError
from .naming import member_name, or_join, quote
from .shapes import Shape, ShapeKind, get_shape

logger = logging.getLogger(__name__)

INDENT = "    "
REQUIRED_MARKER = " -- *Required*"

_TYPE_ANNOTATIONS: dict[ShapeKind, str] = {
    ShapeKind.MAP: "dict[str, str]",
    ShapeKind.STRING: "str",
    ShapeKind.INTEGER: "int",
    ShapeKind.LONG: "int",
    ShapeKind.BOOLEAN: "bool",
}


def brief(fragment: str) -> str:
    """First and last non-blank lines of a fragment, joined by an ellipsis."""
    lines = [line.strip() for line in fragment.split("\n") if line.strip()]
    if not lines:
        return ""
    return " ... ".join([lines[0], lines[-1]])


def _render_members(
    service: dict[str, Any],
    shape: Shape,
    pad: str,
    stack: list[str],
    doc_text: DocFormatter,
) -> str:
    """Top-level structure: one Markdown section per member."""
    sections = []
    for raw_name, info in shape.members.items():
        name = member_name(service, raw_name, info)
        fragment = render(service, info["shape"], pad + INDENT, stack, doc_text)
        doc = doc_text(info.get("documentation", ""))

        if "\n" not in fragment:
            heading = f"{name} = {fragment}"
            block = ""
        else:
            heading = f"{name} = {brief(fragment)}"
            block = f"```\n {name} = {fragment}\n```"

        marker = REQUIRED_MARKER if shape.is_required(raw_name) else ""
        sections.append(f"## `{heading}`{marker}\n{doc}\n{block}\n\n")
    return "".join(sections)


def _render_literal(
    service: dict[str, Any],
    shape: Shape,
    pad: str,
    stack: list[str],
    doc_text: DocFormatter,
) -> str:
    """Nested structure: a dict literal with one entry per member."""
    padmore = pad + INDENT
    entries = []
    for raw_name, info in shape.members.items():
        name = member_name(service, raw_name, info)
        fragment = render(service, info["shape"], padmore, stack, doc_text)
        required = "<required> " if shape.is_required(raw_name) else ""
        entries.append(f"{quote(name)}: {required}{fragment}")

    if not entries:
        return "{}"
    if len(entries) == 1:
        return "{" + entries[0] + "}"
    return "{\n" + padmore + (",\n" + padmore).join(entries) + "\n" + pad + "}"


def render(
    service: dict[str, Any],
    name: str,
    pad: str = "",
    stack: list[str] | None = None,
    doc_text: DocFormatter = html_to_markdown,
) -> str:
    """Render shape ``name`` for documentation.

    ``stack`` holds the shape names currently being expanded in this call
    tree. It is created here when omitted and must not be shared between
    independent renderings.
    """
    if stack is None:
        stack = []

    shape = get_shape(service, name)

    if name in stack:
        logger.info(
            "Interrupting recursion to %s from: %s", name, " -> ".join(stack),
        )
        return shape.type_name

    if pad == "" and shape.kind is not ShapeKind.STRUCTURE:
        raise RenderAssertionError(name, shape.type_name)

    stack.append(name)
    try:
        if shape.kind is ShapeKind.STRUCTURE:
            if pad == "":
                return _render_members(service, shape, pad, stack, doc_text)
            return _render_literal(service, shape, pad, stack, doc_text)

        if shape.kind is ShapeKind.LIST:
            element = render(service, shape.member["shape"], pad, stack, doc_text)
            return f"[{element}, ...]"

        if shape.kind is ShapeKind.STRING_ENUM:
            return or_join([quote(v) for v in shape.enum])

        if shape.kind in _TYPE_ANNOTATIONS:
            return _TYPE_ANNOTATIONS[shape.kind]

        return shape.type_name
    finally:
        stack.pop()
