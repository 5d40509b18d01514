# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from collections import OrderedDict
from collections.abc import AsyncIterable, Iterable, Iterator, Mapping
from copy import deepcopy
from dataclasses import dataclass, field, replace
from urllib.parse import urlunparse

from .utils import read_streaming_blob_async


class Field:
    """A single HTTP header and its values.

    Field names are case insensitive. The name is preserved as given for
    transmission.
    """

    def __init__(self, *, name: str, values: Iterable[str] | None = None):
        self.name = name
        self.values: list[str] = list(values) if values is not None else []

    def add(self, value: str) -> None:
        """Append a value to a field."""
        self.values.append(value)

    def as_string(self, delimiter: str = ",") -> str:
        """Get delimited string of all values.

        A single value is returned unmodified, zero values give the empty string.
        """
        return delimiter.join(self.values)

    def as_tuples(self) -> list[tuple[str, str]]:
        """Get list of ``name``, ``value`` tuples where each tuple represents one
        value."""
        return [(self.name, val) for val in self.values]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Field):
            return False
        return self.name == other.name and self.values == other.values

    def __repr__(self) -> str:
        return f"Field(name={self.name!r}, values={self.values!r})"


class Fields:
    def __init__(self, initial: Iterable[Field] | None = None):
        """Collection of header entries keyed by lower-cased name.

        :param initial: Initial ``Field`` objects. Later entries replace earlier
        entries whose names differ only in case.
        """
        self.entries: OrderedDict[str, Field] = OrderedDict()
        for fld in initial or ():
            self.set_field(fld)

    @classmethod
    def from_mapping(cls, headers: Mapping[str, str]) -> Fields:
        """Build fields from a mapping of header name to a single value."""
        return cls(Field(name=name, values=[value]) for name, value in headers.items())

    def set_field(self, field: Field) -> None:
        """Set or replace the entry for ``field.name``."""
        self.entries[field.name.lower()] = field

    def get(self, key: str, default: Field | None = None) -> Field | None:
        return self.entries.get(key.lower(), default)

    def __getitem__(self, name: str) -> Field:
        return self.entries[name.lower()]

    def __delitem__(self, name: str) -> None:
        del self.entries[name.lower()]

    def __contains__(self, key: str) -> bool:
        return key.lower() in self.entries

    def __iter__(self) -> Iterator[Field]:
        yield from self.entries.values()

    def __len__(self) -> int:
        return len(self.entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fields):
            return False
        return self.entries == other.entries

    def __repr__(self) -> str:
        # Values are left out since they carry keys and signatures.
        return f"Fields({[fld.name for fld in self]})"


@dataclass(kw_only=True, frozen=True)
class URI:
    """Target location for an :py:class:`HTTPRequest`.

    ``path`` and ``query`` hold their percent-encoded wire form.
    """

    scheme: str = "https"
    """For example ``http`` or ``https``."""

    host: str
    """The hostname, for example ``abc123.execute-api.us-east-1.amazonaws.com``."""

    port: int | None = None
    """An explicit port number."""

    path: str | None = None
    """Path component of the URI."""

    query: str | None = None
    """Query component of the URI as string."""

    @property
    def netloc(self) -> str:
        """Construct netloc string in format ``{host}:{port}``."""
        if self.port is None:
            return self.host
        return f"{self.host}:{self.port}"

    def build(self) -> str:
        """Construct the string form ``{scheme}://{host}:{port}{path}?{query}``."""
        return urlunparse(
            (self.scheme, self.netloc, self.path or "", "", self.query or "", "")
        )

    def without_default_port(self) -> URI:
        if self.port is not None and DEFAULT_PORTS.get(self.scheme) == self.port:
            return replace(self, port=None)
        return self


DEFAULT_PORTS: dict[str, int] = {"http": 80, "https": 443}


@dataclass(kw_only=True, frozen=True)
class HTTPRequestConfiguration:
    """Request-level HTTP configuration.

    :param read_timeout: How long, in seconds, the client will wait for the
        response before timing out.
    """

    read_timeout: float | None = None


class HTTPRequest:
    """An outbound HTTP request.

    The body is held as bytes so that it can be both hashed for signing and sent.
    """

    def __init__(self, *, destination: URI, method: str, fields: Fields, body: bytes):
        self.destination = destination
        self.method = method
        self.fields = fields
        self.body = body

    def __deepcopy__(self, memo: dict[int, object] | None = None) -> HTTPRequest:
        # destination and body are immutable
        return HTTPRequest(
            destination=self.destination,
            method=self.method,
            fields=deepcopy(self.fields, memo),
            body=self.body,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HTTPRequest):
            return False
        return (
            self.destination == other.destination
            and self.method == other.method
            and self.fields == other.fields
            and self.body == other.body
        )

    def __repr__(self) -> str:
        return (
            f"HTTPRequest(method={self.method!r}, "
            f"destination={self.destination.build()!r}, fields={self.fields!r})"
        )


@dataclass(kw_only=True)
class HTTPResponse:
    """Basic implementation of :py:class:`.interfaces.http.HTTPResponse`."""

    status: int
    """The 3 digit response status code (1xx, 2xx, 3xx, 4xx, 5xx)."""

    fields: Fields
    """HTTP header fields."""

    body: AsyncIterable[bytes] | Iterable[bytes] | bytes = field(
        repr=False, default=b""
    )
    """The response payload."""

    reason: str | None = None
    """Optional string provided by the server explaining the status."""

    async def consume_body_async(self) -> bytes:
        """Iterate over response body and return as bytes."""
        return await read_streaming_blob_async(self.body)
