# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from collections.abc import Mapping

API_KEY_HEADER = "x-api-key"


def build_request_headers(
    headers: Mapping[str, str] | None, api_key: str | None
) -> dict[str, str]:
    """Merge the caller's headers with the API key header.

    The API key always wins: any caller header named ``x-api-key``, in any case, is
    replaced. Without an API key the caller's headers are returned as they are. The
    given mapping is never modified.

    :param headers: The caller's headers, or None for no headers.
    :param api_key: The API key to send, or None to send no API key.
    :returns: A new dict of header name to value.
    """
    if api_key is None:
        return dict(headers or {})

    composed = {
        name: value
        for name, value in (headers or {}).items()
        if name.lower() != API_KEY_HEADER
    }
    composed[API_KEY_HEADER] = api_key
    return composed
