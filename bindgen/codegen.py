"""Render templates and write generated output.

Takes contexts from context_builder and produces, per service, a binding
module and a reference page, plus one services.py holding every
dispatcher.
"""

from __future__ import annotations

import functools
import logging
from pathlib import Path
from typing import Any

import jinja2

from .context_builder import (
    PACKAGE,
    build_dispatcher_context,
    build_operation,
    build_service_context,
)
from .doctext import DocFormatter, html_to_markdown

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
# Created under the working directory when no output directory is given
OUTPUT_DIR_NAME = "generated"

# Module providing default_config() and the service_<protocol> transports
RUNTIME_MODULE = "awscore"


def docstring_escape(text: str) -> str:
    """Make text safe inside a triple-quoted docstring."""
    return text.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')


@functools.lru_cache(maxsize=None)
def _environment() -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )
    env.filters["docstring"] = docstring_escape
    return env


def _render(template: str, **context: Any) -> str:
    return _environment().get_template(template).render(**context)


def generate_operation(
    service: dict[str, Any],
    operation: str,
    info: dict[str, Any],
    doc_text: DocFormatter = html_to_markdown,
    package: str = PACKAGE,
) -> str:
    """Render the documented binding function for one operation."""
    context = build_operation(service, operation, info, doc_text, package)
    return _render("operation.py.j2", **context)


def render_service_module(
    service: dict[str, Any],
    service_name: str,
    doc_text: DocFormatter = html_to_markdown,
    package: str = PACKAGE,
) -> str:
    """Render the binding module holding every operation of a service."""
    context = build_service_context(service, service_name, doc_text, package)
    operations = [
        generate_operation(service, name, info, doc_text, package)
        for name, info in service.get("operations", {}).items()
    ]
    return _render("service.py.j2", operations=operations, **context)


def render_dispatcher(
    service: dict[str, Any], runtime: str = RUNTIME_MODULE,
) -> str:
    """Render the dispatch function a service's bindings call through."""
    return _render(
        "dispatcher.py.j2", runtime=runtime, **build_dispatcher_context(service),
    )


def render_services_module(
    services: list[dict[str, Any]], runtime: str = RUNTIME_MODULE,
) -> str:
    dispatchers = [render_dispatcher(s, runtime) for s in services]
    return _render("services.py.j2", runtime=runtime, dispatchers=dispatchers)


def render_service_doc(
    service: dict[str, Any],
    service_name: str,
    doc_text: DocFormatter = html_to_markdown,
    package: str = PACKAGE,
) -> str:
    """Render the Markdown reference page for a service."""
    context = build_service_context(service, service_name, doc_text, package)
    operations = [
        build_operation(service, name, info, doc_text, package)
        for name, info in service.get("operations", {}).items()
    ]
    return _render("service.md.j2", operations=operations, **context)


def generate(
    services: dict[str, dict[str, Any]],
    output_dir: Path | None = None,
    runtime: str = RUNTIME_MODULE,
    package: str = PACKAGE,
    doc_text: DocFormatter = html_to_markdown,
) -> list[Path]:
    """Write binding modules, reference pages and services.py.

    ``services`` maps a service name (e.g. 'S3') to its definition. Any
    error aborts before services.py is written.
    """
    if output_dir is None:
        output_dir = Path.cwd() / OUTPUT_DIR_NAME
    package_dir = output_dir / package
    docs_dir = output_dir / "docs"
    package_dir.mkdir(parents=True, exist_ok=True)
    docs_dir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for name, service in services.items():
        context = build_service_context(service, name, doc_text, package)
        module_path = package_dir / f"{context['module']}.py"
        module_path.write_text(
            render_service_module(service, name, doc_text, package)
        )
        doc_path = docs_dir / f"{context['module']}.md"
        doc_path.write_text(render_service_doc(service, name, doc_text, package))
        written.extend([module_path, doc_path])

        count = len(service.get("operations", {}))
        print(f"Generated {module_path} ({count} operations)")
        logger.debug("Wrote reference page %s", doc_path)

    services_path = package_dir / "services.py"
    services_path.write_text(
        render_services_module(list(services.values()), runtime)
    )
    written.append(services_path)
    logger.info("Wrote %d dispatchers to %s", len(services), services_path)

    return written
