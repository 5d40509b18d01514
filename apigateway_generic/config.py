# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass, field

from ._http import URI, HTTPRequestConfiguration
from .endpoints import parse_endpoint, validate_region
from .exceptions import ConfigurationError
from .interfaces.http import HTTPClient
from .interfaces.identity import CredentialsResolver


@dataclass(kw_only=True, frozen=True)
class ClientConfiguration:
    """Configuration for a :py:class:`.client.GenericApiGatewayClient`.

    The configuration is validated when it is created and can't be changed
    afterwards.

    :raises ConfigurationError: If the endpoint or region is missing or malformed,
        or the API key is empty.
    """

    endpoint: str
    """The invoke URL of the API, for example
    ``https://abc123.execute-api.us-east-1.amazonaws.com/prod``."""

    region: str
    """The region the API is deployed in, used to scope the signature."""

    credentials_resolver: CredentialsResolver | None = None
    """Resolves the credentials requests are signed with.

    If not set, requests are sent unsigned.
    """

    api_key: str | None = field(default=None, repr=False)
    """The API key sent in the ``x-api-key`` header, if any."""

    http_client: HTTPClient | None = None
    """The transport to send requests with. Defaults to an aiohttp client."""

    http_request_config: HTTPRequestConfiguration | None = None
    """Configuration applied to every request sent by the transport."""

    endpoint_uri: URI = field(init=False, repr=False)
    """The parsed form of ``endpoint``."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "endpoint_uri", parse_endpoint(self.endpoint))
        validate_region(self.region)
        if self.api_key is not None and not self.api_key:
            raise ConfigurationError("The API key must not be empty.")
