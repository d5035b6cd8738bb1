"""
s3v4.request
~~~~~~~~~~~~

Signed requests for path-style S3 operations.

A :class:`SignedRequest` holds everything a transport needs to send one
call: the target URL and the complete header set, ``Authorization``
included. It performs no I/O.
"""

import logging
from collections import OrderedDict

from .config import Credentials, Endpoint
from .content import S3Content, payload_hash
from .datetime_utils import AmzDate, get_utc_datetime
from .exceptions import ConfigurationError
from .path import S3Path
from .signatures.v4 import SignatureV4, canonical_header_items

logger = logging.getLogger(__name__)

AUTHORIZATION = "Authorization"
CONTENT_LENGTH = "Content-Length"
CONTENT_TYPE = "Content-Type"
HOST = "Host"
X_AMZ_CONTENT_SHA256 = "X-Amz-Content-Sha256"
X_AMZ_DATE = "X-Amz-Date"


class SignedRequest(object):
    """
    One signed call against an S3-compatible service.

    All required inputs are validated together before anything is hashed.

    Args:
        endpoint (Endpoint or str): Service endpoint
        region (str): Signing region
        credentials (Credentials): Access key pair
        method (str): HTTP method
        path (S3Path): Bucket and key, ``S3Path()`` for the service root
        query_string (str, optional): Canonical query string. It is signed
            and sent verbatim, so the caller must sort it by name and
            percent-encode it per SigV4.
        content (S3Content, optional): Request body
        clock (callable): Zero-argument callable returning a datetime

    Raises:
        ConfigurationError: Naming every missing or invalid field

    Examples:
        >>> request = SignedRequest(
        ...     "http://localhost:4566", "us-east-1",
        ...     Credentials("AKID", "SECRET"), "GET", S3Path("bucket"))
        >>> request.url
        'http://localhost:4566/bucket'
    """

    def __init__(
        self,
        endpoint,
        region,
        credentials,
        method,
        path,
        query_string="",
        content=None,
        clock=get_utc_datetime,
    ):
        missing = [
            name
            for name, value in (
                ("endpoint", endpoint),
                ("region", region),
                ("credentials", credentials),
                ("method", method),
                ("path", path),
                ("clock", clock),
            )
            if not value
        ]
        if isinstance(path, S3Path) and path.key and not path.bucket:
            missing.append("path.bucket")

        invalid = []
        if endpoint and not isinstance(endpoint, Endpoint):
            if isinstance(endpoint, str):
                try:
                    endpoint = Endpoint.parse(endpoint)
                except ConfigurationError as e:
                    invalid.append(e)
            else:
                invalid.append(
                    ConfigurationError(
                        "endpoint must be an Endpoint or a URL string", ["endpoint"]
                    )
                )
        if region and not isinstance(region, str):
            invalid.append(ConfigurationError("region must be a string", ["region"]))
        if method and not isinstance(method, str):
            invalid.append(ConfigurationError("method must be a string", ["method"]))
        if credentials and not isinstance(credentials, Credentials):
            invalid.append(
                ConfigurationError(
                    "credentials must be a Credentials instance", ["credentials"]
                )
            )
        if path and not isinstance(path, S3Path):
            invalid.append(
                ConfigurationError("path must be an S3Path instance", ["path"])
            )
        if content is not None and not isinstance(content, S3Content):
            invalid.append(
                ConfigurationError("content must be an S3Content instance", ["content"])
            )
        if clock and not callable(clock):
            invalid.append(ConfigurationError("clock must be callable", ["clock"]))
        if missing or invalid:
            raise ConfigurationError.combine(missing, invalid)

        self.endpoint = endpoint
        self.region = region
        self.access_key = credentials.access_key
        self.method = method.upper()
        self.path = path
        self.query_string = query_string or ""
        self.content = content
        self.canonical_uri = path.to_canonical_uri()

        signer = SignatureV4(credentials.access_key, credentials.secret_key, region)
        self.headers = self._sign(signer, AmzDate.now(clock))

        self.url = self.endpoint.base_url + self.canonical_uri
        if self.query_string:
            self.url += "?" + self.query_string

    @property
    def body(self):
        """Bytes to send, or None when the request has no content."""
        if self.content is None:
            return None
        return self.content.body

    def _build_headers(self, amz_date, content_sha256):
        headers = {
            HOST: self.endpoint.netloc,
            X_AMZ_CONTENT_SHA256: content_sha256,
            X_AMZ_DATE: amz_date.full_date,
        }
        if self.content is not None:
            headers[CONTENT_LENGTH] = str(len(self.content.body))
            if self.content.media_type:
                headers[CONTENT_TYPE] = self.content.media_type
        return headers

    def _sign(self, signer, amz_date):
        content_sha256 = payload_hash(self.body)
        headers = self._build_headers(amz_date, content_sha256)
        signed_headers = ";".join(name for name, _ in canonical_header_items(headers))

        canonical_request = signer.canonical_request(
            self.method,
            self.canonical_uri,
            self.query_string,
            headers,
            signed_headers,
            content_sha256,
        )
        logger.debug("Make signature: canonical_request = {0!r}".format(canonical_request))

        authorization = signer.authorization_header(
            canonical_request,
            amz_date.full_date,
            amz_date.date_stamp,
            signed_headers,
            signer.signing_key(amz_date.date_stamp),
        )

        result = OrderedDict([(AUTHORIZATION, authorization)])
        for name in sorted(headers, key=str.lower):
            result[name] = headers[name]
        return result

    def __repr__(self):
        return (
            "SignedRequest(endpoint={0!r}, region={1!r}, access_key={2!r}, "
            "method={3!r}, canonical_uri={4!r}, query_string={5!r})".format(
                self.endpoint.base_url,
                self.region,
                self.access_key,
                self.method,
                self.canonical_uri,
                self.query_string,
            )
        )
