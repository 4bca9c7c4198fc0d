"""Entry point: python -m bindgen s3-2006-03-01.normal.json [...]

Reads one or more API models, generates binding modules, reference pages
and services.py under the output directory.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .codegen import OUTPUT_DIR_NAME, RUNTIME_MODULE, generate
from .context_builder import PACKAGE
from .errors import BindgenError
from .loader import load_service, service_name

logger = logging.getLogger("bindgen")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bindgen",
        description="Generate Python bindings from AWS API models",
    )
    parser.add_argument("models", nargs="+", type=Path, help="API model JSON files")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path(os.getenv("BINDGEN_OUTPUT_DIR") or Path.cwd() / OUTPUT_DIR_NAME),
        help=f"Directory to write into (env BINDGEN_OUTPUT_DIR), default: ./{OUTPUT_DIR_NAME}",
    )
    parser.add_argument(
        "--runtime",
        default=os.getenv("BINDGEN_RUNTIME", RUNTIME_MODULE),
        help=f"Transport runtime module, default: {RUNTIME_MODULE}",
    )
    parser.add_argument(
        "--package",
        default=PACKAGE,
        help=f"Package for the generated modules, default: {PACKAGE}",
    )
    parser.add_argument(
        "--examples",
        type=Path,
        help="Examples file (only with a single model)",
    )
    parser.add_argument("--name", help="Service name (only with a single model)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if len(args.models) > 1 and (args.examples or args.name):
        parser.error("--examples and --name need exactly one model")

    services = {}
    for path in args.models:
        service = load_service(path, args.examples)
        services[args.name or service_name(service, path)] = service

    try:
        generate(services, args.output_dir, args.runtime, args.package)
    except BindgenError as exc:
        logger.error("Generation failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
