# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import logging
from dataclasses import dataclass
from types import TracebackType
from typing import Self

from ._http import Fields, HTTPRequest, HTTPRequestConfiguration
from .aiohttp import AIOHTTPClient
from .config import ClientConfiguration
from .endpoints import resolve_destination
from .exceptions import ConfigurationError
from .headers import build_request_headers
from .identity import StaticCredentialsResolver
from .interfaces.auth import Signer
from .interfaces.http import HTTPClient
from .interfaces.identity import AWSCredentialsIdentity, CredentialsResolver
from .request import GenericApiGatewayRequest
from .responses import GenericApiGatewayResponse, parse_response
from .signers import SigV4Signer, SigV4SigningProperties
from .utils import read_streaming_blob_async

API_GATEWAY_SERVICE_NAME = "execute-api"

_LOGGER = logging.getLogger(__name__)


@dataclass(kw_only=True, frozen=True)
class ExecutionContext:
    """What is needed to authenticate exactly one call."""

    signer: Signer
    credentials_resolver: CredentialsResolver
    signing_properties: SigV4SigningProperties


class GenericApiGatewayClient:
    """Calls any resource of a deployed API Gateway API.

    Requests are signed with SigV4 when a credentials resolver is configured and
    carry the ``x-api-key`` header when an API key is configured. The client holds no
    state that changes between calls, so one instance may be shared by concurrent
    tasks.
    """

    def __init__(
        self, config: ClientConfiguration, *, signer: Signer | None = None
    ) -> None:
        """
        :param config: The client configuration.
        :param signer: The signer to sign requests with. Defaults to
            :py:class:`.signers.SigV4Signer`.
        """
        self._config = config
        self._signer = signer or SigV4Signer()
        # Only a transport created here is closed by the client.
        self._default_http_client: AIOHTTPClient | None = None
        if config.http_client is None:
            self._default_http_client = AIOHTTPClient()
            self._http_client: HTTPClient = self._default_http_client
        else:
            self._http_client = config.http_client

    @property
    def config(self) -> ClientConfiguration:
        return self._config

    async def execute(
        self, request: GenericApiGatewayRequest
    ) -> GenericApiGatewayResponse:
        """Send a request and return the response.

        Nothing is retried. Errors raised by the transport, such as connection
        errors and timeouts, are raised unchanged.

        :param request: The request to send.
        :raises GenericApiGatewayError: If the service responds with a non-2xx status.
        :raises SigningError: If the request could not be signed, in which case it
            was not sent.
        """
        http_request = HTTPRequest(
            method=request.http_method.value,
            destination=resolve_destination(
                self._config.endpoint_uri, request.resource_path, request.parameters
            ),
            fields=Fields.from_mapping(
                build_request_headers(request.headers, self._config.api_key)
            ),
            body=await read_streaming_blob_async(request.body),
        )

        context = self._build_execution_context()
        if context is not None:
            http_request = await self._sign(http_request, context)

        _LOGGER.debug(
            "Sending %s request to %s",
            http_request.method,
            http_request.destination.build(),
        )
        response = await self._http_client.send(
            request=http_request, request_config=self._config.http_request_config
        )
        _LOGGER.debug("Received response with status %s", response.status)
        return await parse_response(response)

    def _build_execution_context(self) -> ExecutionContext | None:
        if self._config.credentials_resolver is None:
            return None
        return ExecutionContext(
            signer=self._signer,
            credentials_resolver=self._config.credentials_resolver,
            signing_properties=SigV4SigningProperties(
                region=self._config.region, service=API_GATEWAY_SERVICE_NAME
            ),
        )

    async def _sign(
        self, request: HTTPRequest, context: ExecutionContext
    ) -> HTTPRequest:
        identity = await context.credentials_resolver.get_identity(properties={})
        _LOGGER.debug("Signing request for %s", context.signing_properties["region"])
        return context.signer.sign(
            request=request,
            identity=identity,
            properties=context.signing_properties,
        )

    async def close(self) -> None:
        """Close the transport if the client created it."""
        if self._default_http_client is not None:
            await self._default_http_client.close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.close()


class GenericApiGatewayClientBuilder:
    """Builds a :py:class:`GenericApiGatewayClient`.

    Every ``with_`` method returns the builder so calls can be chained::

        client = (
            GenericApiGatewayClientBuilder()
            .with_endpoint("https://abc123.execute-api.us-east-1.amazonaws.com")
            .with_region("us-east-1")
            .with_credentials(EnvironmentCredentialsResolver())
            .with_api_key("my-key")
            .build()
        )
    """

    def __init__(self) -> None:
        self._endpoint: str | None = None
        self._region: str | None = None
        self._credentials: CredentialsResolver | None = None
        self._api_key: str | None = None
        self._http_client: HTTPClient | None = None
        self._http_request_config: HTTPRequestConfiguration | None = None

    def with_endpoint(self, endpoint: str) -> Self:
        self._endpoint = endpoint
        return self

    def with_region(self, region: str) -> Self:
        self._region = region
        return self

    def with_credentials(
        self, credentials: CredentialsResolver | AWSCredentialsIdentity | None
    ) -> Self:
        """Set the credentials to sign with.

        Fixed credentials are wrapped in a
        :py:class:`.identity.StaticCredentialsResolver`.
        """
        if isinstance(credentials, AWSCredentialsIdentity):
            credentials = StaticCredentialsResolver(credentials)
        self._credentials = credentials
        return self

    def with_api_key(self, api_key: str | None) -> Self:
        self._api_key = api_key
        return self

    def with_http_client(self, http_client: HTTPClient | None) -> Self:
        self._http_client = http_client
        return self

    def with_client_configuration(
        self, http_request_config: HTTPRequestConfiguration | None
    ) -> Self:
        self._http_request_config = http_request_config
        return self

    def build(self) -> GenericApiGatewayClient:
        """Create the client.

        :raises ConfigurationError: If the configuration is missing or invalid.
        """
        if self._endpoint is None:
            raise ConfigurationError("An endpoint is required to build a client.")
        if self._region is None:
            raise ConfigurationError("A region is required to build a client.")
        return GenericApiGatewayClient(
            ClientConfiguration(
                endpoint=self._endpoint,
                region=self._region,
                credentials_resolver=self._credentials,
                api_key=self._api_key,
                http_client=self._http_client,
                http_request_config=self._http_request_config,
            )
        )
