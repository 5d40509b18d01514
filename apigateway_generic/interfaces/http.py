# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from collections.abc import AsyncIterable, Iterable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .._http import Fields, HTTPRequest, HTTPRequestConfiguration


class HTTPResponse(Protocol):
    """HTTP primitives returned from a transport."""

    @property
    def status(self) -> int:
        """The 3 digit response status code (1xx, 2xx, 3xx, 4xx, 5xx)."""
        ...

    @property
    def fields(self) -> Fields:
        """``Fields`` object containing HTTP headers."""
        ...

    @property
    def body(self) -> AsyncIterable[bytes] | Iterable[bytes] | bytes:
        """The response payload."""
        ...

    @property
    def reason(self) -> str | None:
        """Optional string provided by the server explaining the status."""
        ...

    async def consume_body_async(self) -> bytes:
        """Iterate over the response body and return it as bytes."""
        ...


class HTTPClient(Protocol):
    """An asynchronous HTTP transport.

    Implementations MUST send the destination URI, fields and body exactly as given
    since they may be covered by a signature. Connection and timeout failures are
    raised as-is.
    """

    async def send(
        self,
        *,
        request: HTTPRequest,
        request_config: HTTPRequestConfiguration | None = None,
    ) -> HTTPResponse:
        """Send HTTP request over the wire and return the response.

        :param request: The request including destination URI, fields, payload.
        :param request_config: Configuration specific to this request.
        """
        ...
