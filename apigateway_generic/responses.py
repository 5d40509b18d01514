# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import json
from dataclasses import dataclass, field

from .exceptions import GenericApiGatewayError
from .interfaces.http import HTTPResponse


@dataclass(kw_only=True, frozen=True)
class GenericApiGatewayResponse:
    """The successful result of a call to an API Gateway resource."""

    status_code: int
    """The 2xx HTTP status code returned by the service."""

    body: str = field(repr=False)
    """The response body decoded as UTF-8. No schema is imposed on it."""

    http_response: HTTPResponse = field(repr=False)
    """The response returned by the transport. Its body has already been read."""


def normalize_error_body(body: str) -> str:
    """Render an error body as a single line.

    JSON documents are re-serialized with sorted keys and no insignificant
    whitespace, so ``{"message" : "error payload"}`` becomes
    ``{"message":"error payload"}``. Anything else is returned verbatim.
    """
    try:
        document = json.loads(body)
    except ValueError:
        return body
    return json.dumps(
        document, sort_keys=True, separators=(",", ":"), ensure_ascii=False
    )


def is_success(status: int) -> bool:
    return 200 <= status < 300


async def parse_response(response: HTTPResponse) -> GenericApiGatewayResponse:
    """Map a transport response to a result.

    :raises GenericApiGatewayError: If the status is outside of the 2xx range.
    """
    text = (await response.consume_body_async()).decode("utf-8", errors="replace")
    if not is_success(response.status):
        raise GenericApiGatewayError(
            status_code=response.status, error_message=normalize_error_body(text)
        )
    return GenericApiGatewayResponse(
        status_code=response.status, body=text, http_response=response
    )
