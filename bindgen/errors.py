"""Errors raised while compiling a service description."""

from __future__ import annotations


class BindgenError(Exception):
    """Base class for generator failures."""


class SchemaInconsistencyError(BindgenError, ValueError):
    """An operation's HTTP binding contradicts its service's protocol family."""

    def __init__(self, operation: str, message: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}: {message}")


class RenderAssertionError(BindgenError, AssertionError):
    """Top-level rendering was requested for a shape that is not a structure."""

    def __init__(self, shape: str, kind: str) -> None:
        self.shape = shape
        self.kind = kind
        super().__init__(
            f"top-level rendering requires a structure, {shape!r} is a {kind}"
        )
