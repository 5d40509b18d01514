# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import logging
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Final

from .exceptions import CredentialsError
from .interfaces.identity import AWSCredentialsIdentity, CredentialsResolver

logger: Final = logging.getLogger(__name__)


@dataclass(kw_only=True)
class AWSCredentialIdentity(AWSCredentialsIdentity):
    access_key_id: str
    secret_access_key: str
    session_token: str | None = None
    expiration: datetime | None = None

    def __repr__(self) -> str:
        # Never expose the secret or the token.
        return (
            f"AWSCredentialIdentity(access_key_id={self.access_key_id!r}, "
            f"expiration={self.expiration!r})"
        )


class StaticCredentialsResolver:
    """Resolves a fixed set of credentials."""

    def __init__(self, credentials: AWSCredentialsIdentity) -> None:
        self._credentials = credentials

    async def get_identity(
        self, *, properties: Mapping[str, Any]
    ) -> AWSCredentialsIdentity:
        return self._credentials


class EnvironmentCredentialsResolver:
    """Resolves AWS Credentials from system environment variables."""

    async def get_identity(
        self, *, properties: Mapping[str, Any]
    ) -> AWSCredentialsIdentity:
        access_key_id = os.getenv("AWS_ACCESS_KEY_ID")
        secret_access_key = os.getenv("AWS_SECRET_ACCESS_KEY")
        if not access_key_id or not secret_access_key:
            raise CredentialsError(
                "AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY are required"
            )
        return AWSCredentialIdentity(
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            session_token=os.getenv("AWS_SESSION_TOKEN") or None,
        )


class ChainedCredentialsResolver:
    """Attempts to resolve credentials by checking a sequence of sub-resolvers.

    If a nested resolver raises a :py:class:`CredentialsError`, the next resolver in
    the chain will be attempted. The first credentials found are reused until they
    expire.
    """

    def __init__(self, resolvers: Sequence[CredentialsResolver]) -> None:
        """
        :param resolvers: The sequence of resolvers to resolve credentials from.
        """
        self._resolvers = resolvers
        self._cached: AWSCredentialsIdentity | None = None

    async def get_identity(
        self, *, properties: Mapping[str, Any]
    ) -> AWSCredentialsIdentity:
        if self._cached is None or self._cached.is_expired:
            self._cached = await self._resolve(properties=properties)
        return self._cached

    async def _resolve(
        self, *, properties: Mapping[str, Any]
    ) -> AWSCredentialsIdentity:
        logger.debug("Attempting to resolve credentials from resolver chain.")
        for resolver in self._resolvers:
            try:
                logger.debug("Resolving credentials from %s.", type(resolver))
                return await resolver.get_identity(properties=properties)
            except CredentialsError as e:
                logger.debug(
                    "Failed to resolve credentials from %s: %s", type(resolver), e
                )

        raise CredentialsError("Failed to resolve credentials from resolver chain.")

