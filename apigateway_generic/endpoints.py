# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import re
from collections.abc import Iterable, Mapping
from dataclasses import replace
from urllib.parse import quote, urlencode, urlsplit

from ._http import URI
from .exceptions import ConfigurationError

_REGION_PATTERN = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)+$")


def parse_endpoint(endpoint: str) -> URI:
    """Parse an API Gateway endpoint such as
    ``https://abc123.execute-api.us-east-1.amazonaws.com/prod``.

    :raises ConfigurationError: If the endpoint isn't an absolute http(s) URI.
    """
    if not endpoint:
        raise ConfigurationError("An endpoint is required.")
    try:
        parts = urlsplit(endpoint)
        port = parts.port
    except ValueError as e:
        raise ConfigurationError(f"Invalid endpoint {endpoint!r}: {e}") from e

    if parts.scheme not in ("http", "https"):
        raise ConfigurationError(
            f"Endpoint {endpoint!r} must use the http or https scheme."
        )
    if not parts.hostname:
        raise ConfigurationError(f"Endpoint {endpoint!r} has no host.")
    if parts.query or parts.fragment:
        raise ConfigurationError(
            f"Endpoint {endpoint!r} must not have a query or a fragment."
        )

    return URI(
        scheme=parts.scheme,
        host=parts.hostname,
        port=port,
        path=parts.path.rstrip("/") or None,
    )


def validate_region(region: str) -> str:
    """Check that ``region`` looks like an AWS region name, such as ``us-east-1``.

    :raises ConfigurationError: If it doesn't.
    """
    if not region or not _REGION_PATTERN.match(region):
        raise ConfigurationError(f"Invalid region name: {region!r}")
    return region


def resolve_destination(
    endpoint: URI,
    resource_path: str,
    parameters: Mapping[str, Iterable[str]] | None = None,
) -> URI:
    """Build the destination of a call from the endpoint and the resource.

    The resource path is appended to the endpoint's path and percent-encoded. Each
    value of a query parameter is sent as its own ``key=value`` pair, so
    ``{"MyParam": ["A", "B"]}`` becomes ``MyParam=A&MyParam=B``. A resource path
    without a leading ``/`` is joined to the endpoint path with one.
    """
    if resource_path and not resource_path.startswith("/"):
        resource_path = "/" + resource_path
    path = (endpoint.path or "") + quote(resource_path, safe="/")
    query = None
    if parameters:
        query = urlencode(
            [(name, value) for name, values in parameters.items() for value in values],
            quote_via=quote,
        )
    return replace(endpoint, path=path or "/", query=query or None)
