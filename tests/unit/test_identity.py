# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from collections.abc import Mapping
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest
from apigateway_generic import (
    AWSCredentialIdentity,
    ChainedCredentialsResolver,
    CredentialsError,
    EnvironmentCredentialsResolver,
    SigningError,
    StaticCredentialsResolver,
)
from apigateway_generic.interfaces.identity import AWSCredentialsIdentity
from freezegun import freeze_time


@pytest.mark.parametrize(
    "expiration,expected",
    [
        (None, False),
        (datetime(year=2023, month=1, day=1, tzinfo=UTC), False),
        (datetime(year=2022, month=12, day=31, tzinfo=UTC), True),
    ],
)
@freeze_time("2022-12-31 12:00:00")
def test_is_expired(expiration: datetime | None, expected: bool) -> None:
    identity = AWSCredentialIdentity(
        access_key_id="AKID", secret_access_key="SECRET", expiration=expiration
    )
    assert identity.is_expired is expected


def test_repr_hides_secrets() -> None:
    identity = AWSCredentialIdentity(
        access_key_id="AKID",
        secret_access_key="very-secret-value",
        session_token="very-secret-token",
    )
    assert "AKID" in repr(identity)
    assert "very-secret-value" not in repr(identity)
    assert "very-secret-token" not in repr(identity)


def test_identity_is_aws_credentials_identity() -> None:
    identity = AWSCredentialIdentity(access_key_id="AKID", secret_access_key="SECRET")
    assert isinstance(identity, AWSCredentialsIdentity)


async def test_static_resolver() -> None:
    credentials = AWSCredentialIdentity(
        access_key_id="AKID", secret_access_key="SECRET"
    )
    resolver = StaticCredentialsResolver(credentials)
    assert await resolver.get_identity(properties={}) is credentials


async def test_environment_resolver(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "env-akid")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "env-secret")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "env-token")

    identity = await EnvironmentCredentialsResolver().get_identity(properties={})

    assert identity.access_key_id == "env-akid"
    assert identity.secret_access_key == "env-secret"
    assert identity.session_token == "env-token"


async def test_environment_resolver_without_session_token(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "env-akid")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "env-secret")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "")

    identity = await EnvironmentCredentialsResolver().get_identity(properties={})

    assert identity.session_token is None


@pytest.mark.parametrize(
    "env",
    [
        {},
        {"AWS_ACCESS_KEY_ID": "env-akid"},
        {"AWS_SECRET_ACCESS_KEY": "env-secret"},
    ],
)
async def test_environment_resolver_missing_values(
    monkeypatch: pytest.MonkeyPatch, env: dict[str, str]
) -> None:
    for name in ("AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY", "AWS_SESSION_TOKEN"):
        monkeypatch.delenv(name, raising=False)
    for name, value in env.items():
        monkeypatch.setenv(name, value)

    with pytest.raises(CredentialsError):
        await EnvironmentCredentialsResolver().get_identity(properties={})


class CountingResolver:
    def __init__(self, identity: AWSCredentialIdentity | None) -> None:
        self.identity = identity
        self.calls = 0

    async def get_identity(
        self, *, properties: Mapping[str, Any]
    ) -> AWSCredentialIdentity:
        self.calls += 1
        if self.identity is None:
            raise CredentialsError("nothing here")
        return self.identity


async def test_chained_resolver_falls_through() -> None:
    expected = AWSCredentialIdentity(access_key_id="AKID", secret_access_key="SECRET")
    empty = CountingResolver(None)
    found = CountingResolver(expected)
    never = CountingResolver(
        AWSCredentialIdentity(access_key_id="OTHER", secret_access_key="OTHER")
    )

    resolver = ChainedCredentialsResolver([empty, found, never])

    assert await resolver.get_identity(properties={}) is expected
    assert (empty.calls, found.calls, never.calls) == (1, 1, 0)


async def test_chained_resolver_caches_until_expired() -> None:
    with freeze_time("2024-01-01 00:00:00", real_asyncio=True) as frozen:
        inner = CountingResolver(
            AWSCredentialIdentity(
                access_key_id="AKID",
                secret_access_key="SECRET",
                expiration=datetime(2024, 1, 1, tzinfo=UTC) + timedelta(minutes=5),
            )
        )
        resolver = ChainedCredentialsResolver([inner])

        await resolver.get_identity(properties={})
        await resolver.get_identity(properties={})
        assert inner.calls == 1

        frozen.tick(timedelta(minutes=10))
        await resolver.get_identity(properties={})
        assert inner.calls == 2


async def test_chained_resolver_all_fail() -> None:
    resolver = ChainedCredentialsResolver([CountingResolver(None)] * 2)
    with pytest.raises(CredentialsError):
        await resolver.get_identity(properties={})


async def test_chained_resolver_propagates_other_errors() -> None:
    class BrokenResolver:
        async def get_identity(
            self, *, properties: Mapping[str, Any]
        ) -> AWSCredentialIdentity:
            raise RuntimeError("broken")

    static = StaticCredentialsResolver(
        AWSCredentialIdentity(access_key_id="AKID", secret_access_key="SECRET")
    )
    resolver = ChainedCredentialsResolver([BrokenResolver(), static])
    with pytest.raises(RuntimeError):
        await resolver.get_identity(properties={})


def test_credentials_error_is_signing_error() -> None:
    assert issubclass(CredentialsError, SigningError)
