# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .._http import HTTPRequest
    from .identity import AWSCredentialsIdentity


class Signer(Protocol):
    """A class that signs requests before they are sent."""

    def sign(
        self,
        *,
        request: HTTPRequest,
        identity: AWSCredentialsIdentity,
        properties: Mapping[str, Any],
    ) -> HTTPRequest:
        """Generate a signature and apply it to a copy of the request.

        :param request: The request to sign.
        :param identity: The identity to use to sign the request.
        :param properties: Additional properties used to sign the request.
        :returns: A signed copy of the request. The original is not modified.
        """
        ...
