# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import logging
from dataclasses import replace
from itertools import chain

import aiohttp
from yarl import URL

from ._http import Field, Fields, HTTPRequest, HTTPRequestConfiguration, HTTPResponse

logger = logging.getLogger(__name__)


class AIOHTTPClient:
    """Implementation of :py:class:`.interfaces.http.HTTPClient` using aiohttp.

    Connection errors and timeouts are raised as the aiohttp exceptions (or
    :py:class:`TimeoutError`) they were raised as.
    """

    def __init__(self, *, session: aiohttp.ClientSession | None = None) -> None:
        """
        :param session: A session to send requests with. A session passed in is owned
            by the caller and is never closed by this client. If omitted, a session is
            created on first use and closed by :py:meth:`close`.
        """
        self._session = session
        self._owns_session = session is None

    async def send(
        self,
        *,
        request: HTTPRequest,
        request_config: HTTPRequestConfiguration | None = None,
    ) -> HTTPResponse:
        """Send HTTP request using aiohttp.

        :param request: The request including destination URI, fields, payload.
        :param request_config: Configuration specific to this request.
        """
        request_config = request_config or HTTPRequestConfiguration()
        headers = list(chain.from_iterable(fld.as_tuples() for fld in request.fields))
        session = self._get_session()
        # Only the read timeout of the session is overridden.
        timeout = session.timeout
        if request_config.read_timeout is not None:
            timeout = replace(timeout, sock_read=request_config.read_timeout)

        url = URL(request.destination.build(), encoded=True)
        logger.debug("Sending %s request to %s", request.method, url.host)
        async with session.request(
            method=request.method,
            # The URL is already encoded and must not be changed since the path and
            # query are covered by the signature.
            url=url,
            headers=headers,
            data=request.body or None,
            timeout=timeout,
            # Redirects are returned to the caller, never followed.
            allow_redirects=False,
        ) as resp:
            return await self._marshal_response(resp)

    async def close(self) -> None:
        """Close the session if it was created by this client."""
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession()
        return self._session

    async def _marshal_response(self, resp: aiohttp.ClientResponse) -> HTTPResponse:
        fields = Fields()
        for name, value in resp.headers.items():
            if (existing := fields.get(name)) is not None:
                existing.add(value)
            else:
                fields.set_field(Field(name=name, values=[value]))

        return HTTPResponse(
            status=resp.status,
            fields=fields,
            body=await resp.read(),
            reason=resp.reason,
        )
