"""Build Jinja2 template contexts from a service description.

One context per operation (signatures, call arguments, docstring) and one
per service (module header, dispatcher parameters, reference page).
"""

from __future__ import annotations

import re
from typing import Any

from .doctext import DocFormatter, html_to_markdown
from .errors import RenderAssertionError, SchemaInconsistencyError
from .naming import (
    api_reference_url,
    function_name,
    member_name,
    module_name,
    or_join,
    quote,
)
from .pretty import pretty
from .protocol import (
    SIMPLE_POST_METHOD,
    SIMPLE_POST_RESOURCE,
    Dispatch,
    ProtocolFamily,
    resolve_dispatch,
)
from .shape_doc import render
from .shapes import ShapeKind, get_shape

# Package the generated service modules are installed under
PACKAGE = "aws"

KEYWORD_ARGUMENTS = "<keyword arguments>"

_PATH_PARAM = re.compile(r"\{[^{}]+\}")


def service_args(service: dict[str, Any], name: str) -> str:
    """Required arguments as ``Name=`` followed by a keyword marker.

    The marker is only added when the structure has optional members.
    """
    shape = get_shape(service, name)
    if shape.kind is not ShapeKind.STRUCTURE:
        raise RenderAssertionError(name, shape.type_name)

    required = [
        member_name(service, raw_name, info)
        for raw_name, info in shape.members.items()
        if shape.is_required(raw_name)
    ]
    args = [f"{n}=" for n in required]
    if len(required) < len(shape.members):
        args.append(KEYWORD_ARGUMENTS)
    return ", ".join(args)


def _check_http_binding(
    operation: str, http: dict[str, Any], family: ProtocolFamily,
) -> None:
    """Reject bindings the service's protocol family cannot express."""
    method = http.get("method", SIMPLE_POST_METHOD)
    resource = http.get("requestUri", SIMPLE_POST_RESOURCE)

    if family is ProtocolFamily.SIMPLE_POST and (
        method != SIMPLE_POST_METHOD or resource != SIMPLE_POST_RESOURCE
    ):
        raise SchemaInconsistencyError(
            operation,
            f"simple POST service declares {method} {resource}, "
            f"expected {SIMPLE_POST_METHOD} {SIMPLE_POST_RESOURCE}",
        )

    if family is not ProtocolFamily.REST and _PATH_PARAM.search(resource):
        raise SchemaInconsistencyError(
            operation,
            f"path parameters in {resource} need a REST protocol",
        )


def call_arguments(
    dispatch: Dispatch, operation: str, http: dict[str, Any],
) -> list[str]:
    """Literal per-call arguments for the dispatcher, in its parameter order."""
    values = {
        "verb": http.get("method", SIMPLE_POST_METHOD),
        "resource": http.get("requestUri", SIMPLE_POST_RESOURCE),
        "operation": operation,
    }
    return [quote(values[p]) for p in dispatch.positional]


def _signatures(
    name: str, request: str, call_args: list[str], input_args: str | None,
) -> list[str]:
    """The four documented ways to call an operation.

    Bindings take config by keyword only, dispatchers take it first.
    Without an input shape only the dict-less forms remain.
    """
    prefix = ["[config]"] + call_args
    if input_args is None:
        return [
            f"{name}([config=])",
            f"{request}({', '.join(prefix)})",
        ]
    keyword = [input_args, "[config=]"] if input_args else ["[config=]"]
    return [
        f"{name}(args: dict, [config=])",
        f"{name}({', '.join(keyword)})",
        f"{request}({', '.join(prefix + ['args: dict'])})",
        f"{request}({', '.join(prefix + ([input_args] if input_args else []))})",
    ]


def _examples_doc(examples: list[dict[str, Any]]) -> str:
    parts = []
    for example in examples:
        text = f"\n# Example: {example.get('title', '')}\n\n{example.get('description', '')}\n"
        if "input" in example:
            text += f"\nInput:\n```\n{pretty(example['input'])}\n```\n"
        if "output" in example:
            text += f"\nOutput:\n```\n{pretty(example['output'])}\n```\n"
        parts.append(text)
    return "".join(parts)


def build_operation(
    service: dict[str, Any],
    operation: str,
    info: dict[str, Any],
    doc_text: DocFormatter = html_to_markdown,
    package: str = PACKAGE,
) -> dict[str, Any]:
    """Build the template context for one operation binding."""
    dispatch = resolve_dispatch(service)
    http = info.get("http", {})
    _check_http_binding(operation, http, dispatch.family)

    name = function_name(operation)
    call_args = call_arguments(dispatch, operation, http)

    input_args = None
    input_doc = ""
    if "input" in info:
        input_shape = info["input"]["shape"]
        input_args = service_args(service, input_shape)
        input_doc = "\n\n# Arguments\n\n" + render(
            service, input_shape, doc_text=doc_text,
        )

    output_doc = ""
    if "output" in info:
        output_doc = f"\n\n# Returns\n\n`{info['output']['shape']}`"

    errors = [e["shape"] for e in info.get("errors", [])]
    errors_doc = ""
    if errors:
        errors_doc = "\n\n# Exceptions\n\n" + or_join([f"`{e}`" for e in errors]) + "."

    examples_doc = _examples_doc(service.get("examples", {}).get(operation, []))

    signatures = _signatures(name, dispatch.function, call_args, input_args)
    docstring = (
        "\n".join(signatures[: len(signatures) // 2])
        + f"\n\nfrom {package}.services import {dispatch.function}\n"
        + "\n".join(signatures[len(signatures) // 2:])
        + f"\n\n# {operation} Operation\n\n"
        + doc_text(info.get("documentation", ""))
        + input_doc
        + output_doc
        + errors_doc
        + "\n"
        + examples_doc
        + f"\nSee also: [AWS API Documentation]({api_reference_url(service, operation)})"
    )

    return {
        "name": name,
        "operation": operation,
        "signatures": signatures,
        "dispatcher": dispatch.function,
        "call_args": call_args,
        "errors": errors,
        "has_input": input_args is not None,
        "docstring": docstring,
    }


def build_dispatcher_context(service: dict[str, Any]) -> dict[str, Any]:
    """Template context for the service's dispatch function."""
    dispatch = resolve_dispatch(service)
    return {
        "function": dispatch.function,
        "protocol": dispatch.protocol,
        "family": dispatch.family.value,
        "positional": list(dispatch.positional),
        "params": list(dispatch.params),
    }


def build_service_context(
    service: dict[str, Any],
    service_name: str,
    doc_text: DocFormatter = html_to_markdown,
    package: str = PACKAGE,
) -> dict[str, Any]:
    """Template context for a service's binding module and reference page."""
    meta = service["metadata"]
    return {
        "service_name": service_name,
        "module": module_name(service_name),
        "package": package,
        "full_name": meta.get("serviceFullName", service_name),
        "source_url": meta.get("sourceURL", ""),
        "source_file": meta.get("sourceFile", ""),
        "uid": meta["uid"],
        "dispatcher": resolve_dispatch(service).function,
        "documentation": doc_text(service.get("documentation", "")),
        "operation_names": [function_name(o) for o in service.get("operations", {})],
    }
