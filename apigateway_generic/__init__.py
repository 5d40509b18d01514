# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""A generic client for calling APIs deployed on Amazon API Gateway, with SigV4
request signing and API key support."""

from ._http import (
    URI,
    Field,
    Fields,
    HTTPRequest,
    HTTPRequestConfiguration,
    HTTPResponse,
)
from .client import (
    API_GATEWAY_SERVICE_NAME,
    GenericApiGatewayClient,
    GenericApiGatewayClientBuilder,
)
from .config import ClientConfiguration
from .exceptions import (
    ApiGatewayClientError,
    ConfigurationError,
    CredentialsError,
    GenericApiGatewayError,
    SigningError,
)
from .identity import (
    AWSCredentialIdentity,
    ChainedCredentialsResolver,
    EnvironmentCredentialsResolver,
    StaticCredentialsResolver,
)
from .request import (
    GenericApiGatewayRequest,
    GenericApiGatewayRequestBuilder,
    HttpMethod,
)
from .responses import GenericApiGatewayResponse
from .signers import SigV4Signer, SigV4SigningProperties

__license__ = "Apache-2.0"
__version__ = "0.1.0"

__all__ = (
    "API_GATEWAY_SERVICE_NAME",
    "URI",
    "AWSCredentialIdentity",
    "ApiGatewayClientError",
    "ChainedCredentialsResolver",
    "ClientConfiguration",
    "ConfigurationError",
    "CredentialsError",
    "EnvironmentCredentialsResolver",
    "Field",
    "Fields",
    "GenericApiGatewayClient",
    "GenericApiGatewayClientBuilder",
    "GenericApiGatewayError",
    "GenericApiGatewayRequest",
    "GenericApiGatewayRequestBuilder",
    "GenericApiGatewayResponse",
    "HTTPRequest",
    "HTTPRequestConfiguration",
    "HTTPResponse",
    "HttpMethod",
    "SigV4Signer",
    "SigV4SigningProperties",
    "SigningError",
    "StaticCredentialsResolver",
)
