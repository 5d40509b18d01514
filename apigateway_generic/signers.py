# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
# ruff: noqa: S101
import datetime
import hmac
from copy import deepcopy
from hashlib import sha256
from typing import Required, TypedDict
from urllib.parse import parse_qsl, quote

from ._http import Field, HTTPRequest, URI
from .exceptions import SigningError
from .interfaces.identity import AWSCredentialsIdentity

SIGNING_ALGORITHM = "AWS4-HMAC-SHA256"
SIGV4_TIMESTAMP_FORMAT = "%Y%m%dT%H%M%SZ"
UNSIGNED_PAYLOAD = "UNSIGNED-PAYLOAD"
EMPTY_SHA256_HASH = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"

HEADERS_EXCLUDED_FROM_SIGNING: tuple[str, ...] = (
    "accept-encoding",
    "authorization",
    "connection",
    "expect",
    "user-agent",
    "x-amzn-trace-id",
)


class SigV4SigningProperties(TypedDict, total=False):
    region: Required[str]
    service: Required[str]
    date: str
    payload_signing_enabled: bool
    content_checksum_enabled: bool
    uri_encode_path: bool


class SigV4Signer:
    """Request signer for applying the AWS Signature Version 4 algorithm.

    The signer is stateless and may be shared between concurrent calls.
    """

    def sign(
        self,
        *,
        request: HTTPRequest,
        identity: AWSCredentialsIdentity,
        properties: SigV4SigningProperties,
    ) -> HTTPRequest:
        """Generate and apply a SigV4 signature to a copy of the supplied request.

        :param request: The request to sign. It is not modified.
        :param identity: The credentials to sign with.
        :param properties: The service and region to sign for. ``date`` pins the
            signing time, otherwise the current time is used.
        :raises SigningError: If the identity is invalid or expired.
        """
        self._validate_identity(identity=identity)
        properties = self._normalize_signing_properties(properties=properties)
        assert "date" in properties
        timestamp = properties["date"]

        signed_request = deepcopy(request)
        fields = signed_request.fields
        if "Date" not in fields and "X-Amz-Date" not in fields:
            fields.set_field(Field(name="X-Amz-Date", values=[timestamp]))
        if identity.session_token is not None:
            fields.set_field(
                Field(name="X-Amz-Security-Token", values=[identity.session_token])
            )

        payload_hash = self._payload_hash(request=signed_request, properties=properties)
        if properties.get("content_checksum_enabled", False):
            fields.set_field(Field(name="X-Amz-Content-SHA256", values=[payload_hash]))

        signing_fields = self._signing_fields(request=signed_request)
        canonical_request = self.canonical_request(
            request=signed_request,
            signing_fields=signing_fields,
            payload_hash=payload_hash,
            properties=properties,
        )
        scope = self._scope(properties=properties)
        string_to_sign = self.string_to_sign(
            canonical_request=canonical_request, timestamp=timestamp, scope=scope
        )
        signature = self._signature(
            string_to_sign=string_to_sign,
            secret_key=identity.secret_access_key,
            properties=properties,
        )

        authorization = (
            f"{SIGNING_ALGORITHM} Credential={identity.access_key_id}/{scope}, "
            f"SignedHeaders={';'.join(signing_fields)}, Signature={signature}"
        )
        fields.set_field(Field(name="Authorization", values=[authorization]))
        return signed_request

    def canonical_request(
        self,
        *,
        request: HTTPRequest,
        signing_fields: dict[str, str],
        payload_hash: str,
        properties: SigV4SigningProperties,
    ) -> str:
        """The canonical request lays out the components used in the signature::

            <HTTPMethod>\\n
            <CanonicalURI>\\n
            <CanonicalQueryString>\\n
            <CanonicalHeaders>\\n
            <SignedHeaders>\\n
            <HashedPayload>

        Comparing it with the one the service reports is the quickest way to find
        the cause of a signature mismatch.
        """
        canonical_fields = "".join(
            f"{name}:{value}\n" for name, value in signing_fields.items()
        )
        return (
            f"{request.method.upper()}\n"
            f"{self._canonical_path(uri=request.destination, properties=properties)}\n"
            f"{self._canonical_query(query=request.destination.query)}\n"
            f"{canonical_fields}\n"
            f"{';'.join(signing_fields)}\n"
            f"{payload_hash}"
        )

    def string_to_sign(
        self, *, canonical_request: str, timestamp: str, scope: str
    ) -> str:
        """Algorithm, request timestamp, credential scope and the hashed canonical
        request, separated by newlines."""
        return (
            f"{SIGNING_ALGORITHM}\n"
            f"{timestamp}\n"
            f"{scope}\n"
            f"{sha256(canonical_request.encode()).hexdigest()}"
        )

    def _signature(
        self,
        *,
        string_to_sign: str,
        secret_key: str,
        properties: SigV4SigningProperties,
    ) -> str:
        # SigningKey = HMAC(HMAC(HMAC(HMAC("AWS4" + secret, date), region), service),
        #                   "aws4_request")
        assert "date" in properties
        k_date = self._hash(
            key=f"AWS4{secret_key}".encode(), value=properties["date"][0:8]
        )
        k_region = self._hash(key=k_date, value=properties["region"])
        k_service = self._hash(key=k_region, value=properties["service"])
        k_signing = self._hash(key=k_service, value="aws4_request")
        return self._hash(key=k_signing, value=string_to_sign).hex()

    def _hash(self, *, key: bytes, value: str) -> bytes:
        return hmac.new(key=key, msg=value.encode(), digestmod=sha256).digest()

    def _scope(self, *, properties: SigV4SigningProperties) -> str:
        assert "date" in properties
        date = properties["date"][0:8]
        return f"{date}/{properties['region']}/{properties['service']}/aws4_request"

    def _validate_identity(self, *, identity: AWSCredentialsIdentity) -> None:
        if not isinstance(identity, AWSCredentialsIdentity):  # pyright: ignore
            raise SigningError(
                "Received unexpected value for identity parameter. Expected "
                f"AWSCredentialsIdentity but received {type(identity)}."
            )
        if not identity.access_key_id or not identity.secret_access_key:
            raise SigningError(
                "Credentials must have both an access key id and a secret access key."
            )
        if identity.is_expired:
            raise SigningError(
                f"Provided identity expired at {identity.expiration}. Please "
                "refresh the credentials or update the expiration parameter."
            )

    def _normalize_signing_properties(
        self, *, properties: SigV4SigningProperties
    ) -> SigV4SigningProperties:
        if not properties.get("region") or not properties.get("service"):
            raise SigningError("Both a region and a service are required to sign.")
        normalized = SigV4SigningProperties(**properties)
        if "date" not in normalized:
            now = datetime.datetime.now(datetime.UTC)
            normalized["date"] = now.strftime(SIGV4_TIMESTAMP_FORMAT)
        return normalized

    def _canonical_path(self, *, uri: URI, properties: SigV4SigningProperties) -> str:
        path = _remove_dot_segments(uri.path or "/")
        if properties.get("uri_encode_path", True):
            return quote(path, safe="/")
        return path

    def _canonical_query(self, *, query: str | None) -> str:
        if not query:
            return ""
        pairs = sorted(
            (quote(key, safe=""), quote(value, safe=""))
            for key, value in parse_qsl(query, keep_blank_values=True)
        )
        return "&".join(f"{key}={value}" for key, value in pairs)

    def _signing_fields(self, *, request: HTTPRequest) -> dict[str, str]:
        fields = {
            fld.name.lower(): " ".join(fld.as_string().split())
            for fld in request.fields
            if fld.name.lower() not in HEADERS_EXCLUDED_FROM_SIGNING
        }
        if "host" not in fields:
            fields["host"] = request.destination.without_default_port().netloc
        return dict(sorted(fields.items()))

    def _payload_hash(
        self, *, request: HTTPRequest, properties: SigV4SigningProperties
    ) -> str:
        # Payloads sent over plain http are always signed.
        if request.destination.scheme == "https" and not properties.get(
            "payload_signing_enabled", True
        ):
            return UNSIGNED_PAYLOAD
        return sha256(request.body).hexdigest()


def _remove_dot_segments(path: str) -> str:
    """Removes dot segments and consecutive slashes from a path per
    :rfc:`3986#section-5.2.4`."""
    output: list[str] = []
    for segment in path.split("/"):
        if segment == ".":
            continue
        elif segment != "..":
            output.append(segment)
        elif output:
            output.pop()
    if path.startswith("/") and (not output or output[0]):
        output.insert(0, "")
    if output and path.endswith(("/.", "/..")):
        output.append("")
    return "/".join(output).replace("//", "/")
