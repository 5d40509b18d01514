# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import pytest
from apigateway_generic.headers import API_KEY_HEADER, build_request_headers


@pytest.mark.parametrize(
    "headers",
    [
        {},
        {"Account-Id": "fubar"},
        {"Account-Id": "fubar", "Content-Type": "application/json"},
    ],
)
def test_api_key_is_added(headers: dict[str, str]) -> None:
    composed = build_request_headers(headers, "12345")
    assert composed == {**headers, API_KEY_HEADER: "12345"}


@pytest.mark.parametrize("name", ["x-api-key", "X-API-Key", "X-Api-Key"])
def test_api_key_overwrites_caller_value(name: str) -> None:
    composed = build_request_headers({name: "caller", "Account-Id": "fubar"}, "12345")
    assert composed == {"Account-Id": "fubar", "x-api-key": "12345"}


def test_no_api_key_returns_headers_unchanged() -> None:
    headers = {"Account-Id": "fubar", "x-api-key": "caller"}
    composed = build_request_headers(headers, None)
    assert composed == headers
    assert composed is not headers


def test_none_headers_are_empty() -> None:
    assert build_request_headers(None, None) == {}
    assert build_request_headers(None, "12345") == {"x-api-key": "12345"}


@pytest.mark.parametrize("api_key", [None, "12345"])
def test_caller_headers_are_not_mutated(api_key: str | None) -> None:
    headers = {"Account-Id": "fubar", "X-Api-Key": "caller"}
    original = dict(headers)

    build_request_headers(headers, api_key)
    build_request_headers(headers, api_key)

    assert headers == original
