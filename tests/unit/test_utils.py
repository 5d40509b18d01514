# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from io import BytesIO
from typing import Any

import pytest
from apigateway_generic.utils import (
    async_list,
    read_streaming_blob,
    read_streaming_blob_async,
)


class AsyncReader:
    def __init__(self, data: bytes) -> None:
        self._data = data

    async def read(self, size: int = -1) -> bytes:
        return self._data


@pytest.mark.parametrize(
    "body,expected",
    [
        (None, b""),
        (b"foo", b"foo"),
        (bytearray(b"foo"), b"foo"),
        (BytesIO(b"foo"), b"foo"),
        ([b"fo", b"o"], b"foo"),
        (iter([b"f", b"oo"]), b"foo"),
    ],
)
def test_read_streaming_blob(body: Any, expected: bytes) -> None:
    assert read_streaming_blob(body) == expected


@pytest.mark.parametrize("body", ["foo", 42])
def test_read_streaming_blob_rejects_other_types(body: Any) -> None:
    with pytest.raises(TypeError):
        read_streaming_blob(body)


@pytest.mark.parametrize(
    "body,expected",
    [
        (None, b""),
        (b"foo", b"foo"),
        (BytesIO(b"foo"), b"foo"),
        ([b"fo", b"o"], b"foo"),
        (AsyncReader(b"foo"), b"foo"),
    ],
)
async def test_read_streaming_blob_async(body: Any, expected: bytes) -> None:
    assert await read_streaming_blob_async(body) == expected


async def test_read_async_iterable() -> None:
    assert await read_streaming_blob_async(async_list([b"f", b"o", b"o"])) == b"foo"
