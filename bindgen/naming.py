"""Identifier and text helpers shared by the renderers.

Examples:
  ListBuckets               -> list_buckets
  DescribeDBInstances       -> describe_dbinstances
  ["a", "b", "c"]           -> "a, b or c"
  uid s3-2006-03-01         -> request function s3
  uid cognito-idp-2016-04-18 -> request function cognito_idp
  uid lambda-2015-03-31     -> request function lambda_
"""

from __future__ import annotations

import keyword
import re
from typing import Any

API_REFERENCE_URL = "https://docs.aws.amazon.com/goto/WebAPI/{uid}/{operation}"

# Signing name of the API family that capitalises member names on the wire
_CAPITALISED_SIGNING_NAME = "ec2"


def to_snake_case(name: str) -> str:
    """Convert CamelCase to lowercase_with_underscores."""
    return re.sub(r"([a-z])([A-Z])", r"\1_\2", name).lower()


def python_identifier(name: str) -> str:
    """Append an underscore to names Python reserves, e.g. lambda -> lambda_."""
    if keyword.iskeyword(name):
        return name + "_"
    return name


def function_name(operation: str) -> str:
    """Python function name for an operation, e.g. ListBuckets -> list_buckets."""
    return python_identifier(to_snake_case(operation))


def or_join(words: list[str]) -> str:
    """Join words with commas and "or", e.g. "one, two or three"."""
    if not words:
        return ""
    if len(words) == 1:
        return words[0]
    return f"{', '.join(words[:-1])} or {words[-1]}"


def quote(text: str) -> str:
    """Return text as a double-quoted Python string literal."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def signing_name(service: dict[str, Any]) -> str:
    meta = service["metadata"]
    return meta.get("signingName") or meta["endpointPrefix"]


def member_name(service: dict[str, Any], name: str, info: dict[str, Any]) -> str:
    """Return the display name of a structure member.

    ``locationName`` overrides the member key. EC2 names its query
    parameters with a leading capital, so that one family is capitalised.
    """
    name = info.get("locationName", name)
    if signing_name(service) == _CAPITALISED_SIGNING_NAME and name:
        name = name[0].upper() + name[1:]
    return name


def module_name(service_name: str) -> str:
    """Python module name for a service, e.g. 'DynamoDB' -> 'aws_dynamo_db'."""
    return python_identifier(
        "aws_" + to_snake_case(re.sub(r"[^A-Za-z0-9]+", "_", service_name))
    )


def request_function_name(service: dict[str, Any]) -> str:
    """Name of the service's dispatcher, derived from the metadata uid.

    The uid ends in an ISO date (``s3-2006-03-01``); the date parts are
    dropped and the remainder joined with underscores.
    """
    parts = re.split(r"[.\-]", service["metadata"]["uid"])
    return python_identifier("_".join(parts[:-3]))


def api_reference_url(service: dict[str, Any], operation: str) -> str:
    return API_REFERENCE_URL.format(
        uid=service["metadata"]["uid"], operation=operation,
    )
