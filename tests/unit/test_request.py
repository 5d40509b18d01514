# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from dataclasses import FrozenInstanceError
from io import BytesIO

import pytest
from apigateway_generic import (
    GenericApiGatewayRequest,
    GenericApiGatewayRequestBuilder,
    HttpMethod,
)


def test_builder_chains_and_builds() -> None:
    body = BytesIO(b"test request")
    request = (
        GenericApiGatewayRequestBuilder()
        .with_http_method(HttpMethod.POST)
        .with_resource_path("/test/orders")
        .with_headers({"Account-Id": "fubar"})
        .with_parameters({"MyParam": ["A", "B"]})
        .with_body(body)
        .build()
    )

    assert isinstance(request, GenericApiGatewayRequest)
    assert request.http_method is HttpMethod.POST
    assert request.resource_path == "/test/orders"
    assert dict(request.headers) == {"Account-Id": "fubar"}
    assert dict(request.parameters) == {"MyParam": ("A", "B")}
    assert request.body is body


def test_optional_parts_default_to_empty() -> None:
    request = (
        GenericApiGatewayRequestBuilder()
        .with_http_method(HttpMethod.GET)
        .with_resource_path("/")
        .build()
    )
    assert dict(request.headers) == {}
    assert dict(request.parameters) == {}
    assert request.body is None


@pytest.mark.parametrize("method", ["post", "POST", "Post", HttpMethod.POST])
def test_method_names_are_accepted(method: str) -> None:
    request = (
        GenericApiGatewayRequestBuilder()
        .with_http_method(method)
        .with_resource_path("/")
        .build()
    )
    assert request.http_method is HttpMethod.POST


def test_unknown_method_is_rejected() -> None:
    with pytest.raises(ValueError):
        GenericApiGatewayRequestBuilder().with_http_method("TRACE")


def test_missing_method_is_rejected() -> None:
    with pytest.raises(ValueError, match="HTTP method"):
        GenericApiGatewayRequestBuilder().with_resource_path("/").build()


def test_missing_path_is_rejected() -> None:
    with pytest.raises(ValueError, match="resource path"):
        GenericApiGatewayRequestBuilder().with_http_method("GET").build()


def test_request_is_immutable() -> None:
    headers = {"Account-Id": "fubar"}
    parameters = {"MyParam": ["A"]}
    request = (
        GenericApiGatewayRequestBuilder()
        .with_http_method("GET")
        .with_resource_path("/test")
        .with_headers(headers)
        .with_parameters(parameters)
        .build()
    )

    headers["Account-Id"] = "changed"
    parameters["MyParam"].append("B")

    assert request.headers["Account-Id"] == "fubar"
    assert request.parameters["MyParam"] == ("A",)
    with pytest.raises(FrozenInstanceError):
        request.resource_path = "/other"  # type: ignore
    with pytest.raises(TypeError):
        request.headers["Account-Id"] = "changed"  # type: ignore


def test_single_string_parameter_is_one_value() -> None:
    request = (
        GenericApiGatewayRequestBuilder()
        .with_http_method("GET")
        .with_resource_path("/")
        .with_parameters({"MyParam": "MyParamValue"})
        .build()
    )
    assert request.parameters["MyParam"] == ("MyParamValue",)
