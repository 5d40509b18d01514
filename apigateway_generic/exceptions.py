# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass, field


class ApiGatewayClientError(Exception):
    """Base exception type for all exceptions raised by apigateway-generic."""


class ConfigurationError(ApiGatewayClientError, ValueError):
    """Raised when a client is constructed with invalid or missing configuration."""


class SigningError(ApiGatewayClientError, ValueError):
    """Raised when a request could not be signed.

    No request has been sent to the service when this is raised.
    """


class CredentialsError(SigningError):
    """Raised when credentials could not be resolved for signing."""


@dataclass(kw_only=True)
class GenericApiGatewayError(ApiGatewayClientError):
    """The service responded with a status code outside of the 2xx range."""

    status_code: int
    """The HTTP status code returned by the service."""

    error_message: str = field(default="")
    """The error body, re-serialized with sorted keys if it was a JSON document."""

    def __post_init__(self) -> None:
        super().__init__(f"[{self.status_code}] {self.error_message}")
