# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Self

from .utils import StreamingBlob

_EMPTY_HEADERS: Mapping[str, str] = MappingProxyType({})
_EMPTY_PARAMETERS: Mapping[str, tuple[str, ...]] = MappingProxyType({})


class HttpMethod(StrEnum):
    """The HTTP methods an API Gateway resource can be invoked with."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


@dataclass(kw_only=True, frozen=True)
class GenericApiGatewayRequest:
    """A single call to an API Gateway resource.

    Instances are created with :py:class:`GenericApiGatewayRequestBuilder`. A body
    stream is consumed when the request is executed, so a request with a stream body
    should only be executed once.
    """

    http_method: HttpMethod
    """The HTTP method of the call."""

    resource_path: str
    """The path of the resource relative to the endpoint, for example
    ``/test/orders``."""

    headers: Mapping[str, str] = field(default=_EMPTY_HEADERS)
    """Header name to value. Names are matched case-insensitively."""

    parameters: Mapping[str, tuple[str, ...]] = field(default=_EMPTY_PARAMETERS)
    """Query parameter name to its values, in order."""

    body: StreamingBlob | None = field(default=None, repr=False)
    """The request payload."""


class GenericApiGatewayRequestBuilder:
    """Builds a :py:class:`GenericApiGatewayRequest`.

    Every ``with_`` method returns the builder so calls can be chained::

        request = (
            GenericApiGatewayRequestBuilder()
            .with_http_method("POST")
            .with_resource_path("/test/orders")
            .with_headers({"Content-Type": "application/json"})
            .with_body(b'{"item": 1}')
            .build()
        )
    """

    def __init__(self) -> None:
        self._http_method: HttpMethod | None = None
        self._resource_path: str | None = None
        self._headers: Mapping[str, str] | None = None
        self._parameters: Mapping[str, Iterable[str]] | None = None
        self._body: StreamingBlob | None = None

    def with_http_method(self, http_method: HttpMethod | str) -> Self:
        self._http_method = HttpMethod(http_method.upper())
        return self

    def with_resource_path(self, resource_path: str) -> Self:
        self._resource_path = resource_path
        return self

    def with_headers(self, headers: Mapping[str, str] | None) -> Self:
        self._headers = headers
        return self

    def with_parameters(self, parameters: Mapping[str, Iterable[str]] | None) -> Self:
        self._parameters = parameters
        return self

    def with_body(self, body: StreamingBlob | None) -> Self:
        self._body = body
        return self

    def build(self) -> GenericApiGatewayRequest:
        """Create the request.

        The headers and parameters are copied, so the builder's inputs may be reused.

        :raises ValueError: If the HTTP method or the resource path was not set.
        """
        if self._http_method is None:
            raise ValueError("An HTTP method is required to build a request.")
        if self._resource_path is None:
            raise ValueError("A resource path is required to build a request.")

        headers = _EMPTY_HEADERS
        if self._headers:
            headers = MappingProxyType(dict(self._headers))

        parameters = _EMPTY_PARAMETERS
        if self._parameters:
            parameters = MappingProxyType(
                {
                    name: (values,) if isinstance(values, str) else tuple(values)
                    for name, values in self._parameters.items()
                }
            )

        return GenericApiGatewayRequest(
            http_method=self._http_method,
            resource_path=self._resource_path,
            headers=headers,
            parameters=parameters,
            body=self._body,
        )
