# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from asyncio import sleep
from collections.abc import AsyncIterable, Iterable
from inspect import iscoroutinefunction
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class BytesReader(Protocol):
    """A file-like object with a read method that returns bytes."""

    def read(self, size: int = -1, /) -> bytes: ...


type StreamingBlob = (
    bytes | bytearray | BytesReader | Iterable[bytes] | AsyncIterable[bytes]
)
"""Any of the body types accepted on a request or returned by a transport."""


async def async_list[E](lst: Iterable[E]) -> AsyncIterable[E]:
    """Turn an Iterable into an AsyncIterable."""
    for x in lst:
        await sleep(0)
        yield x


async def read_streaming_blob_async(body: Any) -> bytes:
    """Asynchronously reads a streaming blob into bytes.

    :param body: The streaming blob to read from. ``None`` reads as empty.
    """
    match body:
        case AsyncIterable():
            full = b""
            async for chunk in body:
                full += chunk
            return full
        case _ if _has_async_read(body):
            return await body.read()
        case _:
            return read_streaming_blob(body)


def read_streaming_blob(body: Any) -> bytes:
    """Synchronously reads a streaming blob into bytes.

    :param body: The streaming blob to read from. ``None`` reads as empty.
    :raises TypeError: If the body is of an unsupported type.
    """
    match body:
        case None:
            return b""
        case bytes():
            return body
        case bytearray():
            return bytes(body)
        case BytesReader():
            return body.read()
        case Iterable() if not isinstance(body, str):
            return b"".join(body)
        case _:
            raise TypeError(f"Expected a bytes body or byte stream, got {type(body)}")


def _has_async_read(body: Any) -> bool:
    return iscoroutinefunction(getattr(body, "read", None))
