"""Decide how a service's dispatcher talks to the transport runtime.

Protocol families:
  SIMPLE_POST  json/query/ec2 services; every request is POST / and only
               the operation name varies
  REST         rest-json/rest-xml services; verb and resource are
               per-operation, the operation name is not sent
  HTTP_RPC     anything else; verb, resource and operation name are all
               passed (query-protocol importexport is the known case)
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

from .naming import quote, request_function_name, signing_name

_SIMPLE_POST_PROTOCOLS = {"json", "query", "ec2"}

# Query-protocol service that nevertheless binds each operation to its own
# verb and resource.
LEGACY_ENDPOINT_PREFIX = "importexport"

SIMPLE_POST_METHOD = "POST"
SIMPLE_POST_RESOURCE = "/"


class ProtocolFamily(enum.Enum):
    SIMPLE_POST = "simple-post"
    REST = "rest"
    HTTP_RPC = "http-rpc"

    @property
    def passes_http_binding(self) -> bool:
        """Whether verb and resource are passed on every call."""
        return self is not ProtocolFamily.SIMPLE_POST

    @property
    def passes_operation(self) -> bool:
        return self is not ProtocolFamily.REST


@dataclass(frozen=True)
class Dispatch:
    """Everything the bindings and the dispatcher must agree on."""

    family: ProtocolFamily
    function: str
    protocol: str
    positional: tuple[str, ...]
    params: tuple[tuple[str, str], ...]


def classify_protocol(service: dict[str, Any]) -> ProtocolFamily:
    meta = service["metadata"]
    protocol = meta["protocol"]
    if protocol.startswith("rest"):
        return ProtocolFamily.REST
    if (
        protocol in _SIMPLE_POST_PROTOCOLS
        and meta["endpointPrefix"] != LEGACY_ENDPOINT_PREFIX
    ):
        return ProtocolFamily.SIMPLE_POST
    return ProtocolFamily.HTTP_RPC


def serialization_protocol(service: dict[str, Any]) -> str:
    """Transport function suffix, e.g. 'rest-json' -> 'rest_json'.

    ec2 serialises like query.
    """
    protocol = service["metadata"]["protocol"].replace("-", "_")
    if protocol == "ec2":
        return "query"
    return protocol


def json_version(service: dict[str, Any]) -> str:
    version = service["metadata"].get("jsonVersion", "1.0")
    if version == "1":
        return "1.0"
    return version


def positional_params(family: ProtocolFamily) -> tuple[str, ...]:
    """Per-call parameters, in the order the dispatcher accepts them."""
    names: list[str] = []
    if family.passes_http_binding:
        names.extend(["verb", "resource"])
    if family.passes_operation:
        names.append("operation")
    return tuple(names)


def dispatch_params(
    service: dict[str, Any], family: ProtocolFamily | None = None,
) -> list[tuple[str, str]]:
    """Keyword arguments the dispatcher passes to the transport.

    Values are Python expressions: quoted literals for fixed metadata, bare
    names for the per-call parameters.
    """
    meta = service["metadata"]
    family = family or classify_protocol(service)
    signing = signing_name(service)

    params = [
        ("service", quote(signing)),
        ("version", quote(meta["apiVersion"])),
    ]
    if meta["endpointPrefix"] != signing:
        params.append(("endpoint", quote(meta["endpointPrefix"])))

    if family.passes_http_binding:
        params.extend([("verb", "verb"), ("resource", "resource")])

    if meta["protocol"] == "json":
        params.extend([
            ("json_version", quote(json_version(service))),
            ("target", quote(meta.get("targetPrefix", ""))),
        ])

    if family.passes_operation:
        params.append(("operation", "operation"))

    return params


def resolve_dispatch(service: dict[str, Any]) -> Dispatch:
    family = classify_protocol(service)
    return Dispatch(
        family=family,
        function=request_function_name(service),
        protocol=serialization_protocol(service),
        positional=positional_params(family),
        params=tuple(dispatch_params(service, family)),
    )
