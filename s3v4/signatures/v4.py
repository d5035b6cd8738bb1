"""
s3v4.signatures.v4
~~~~~~~~~~~~~~~~~~

AWS Signature Version 4 for the S3 service.

Each step of the signing process is a separate method so that the
intermediate strings can be checked against published examples:

1. :meth:`SignatureV4.canonical_request`
2. :meth:`SignatureV4.string_to_sign`
3. :meth:`SignatureV4.signing_key`
4. :meth:`SignatureV4.authorization_header`
"""

import hashlib
import hmac
import logging

from ..exceptions import ConfigurationError, SigningError

logger = logging.getLogger(__name__)

ALGORITHM = "AWS4-HMAC-SHA256"
SERVICE = "s3"
TERMINATOR = "aws4_request"


def hmac_sha256(key, msg):
    """Return the raw HMAC-SHA256 digest of ``msg`` under ``key``."""
    return hmac.new(key, msg.encode("utf-8"), hashlib.sha256).digest()


def sha256_hex(text):
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def canonical_header_items(headers):
    """
    Normalize headers for the canonical request.

    Names are lower-cased, values trimmed with inner whitespace runs
    collapsed, and the result sorted by name.

    Args:
        headers (dict): Header name to value

    Returns:
        list: ``(name, value)`` tuples

    Raises:
        SigningError: If two names are equal once lower-cased
    """
    normalized = {}
    for name, value in headers.items():
        name_lower = name.lower().strip()
        if name_lower in normalized:
            raise SigningError("Duplicate header name: {0}".format(name_lower))
        normalized[name_lower] = " ".join(str(value).split())
    return sorted(normalized.items())


def signed_header_names(headers):
    """Return the ';'-joined, sorted, lower-cased header names."""
    return ";".join(name for name, _ in canonical_header_items(headers))


class SignatureV4(object):
    """
    Signature Version 4 signer bound to one set of credentials and a region.

    Args:
        access_key (str): Access key id, public
        secret_key (str): Secret access key
        region (str): Region used in the credential scope
    """

    def __init__(self, access_key, secret_key, region):
        missing = [
            name
            for name, value in (
                ("access_key", access_key),
                ("secret_key", secret_key),
                ("region", region),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError.missing(missing)

        self.access_key = access_key
        self._secret_key = secret_key
        self.region = region
        self.service = SERVICE
        logger.debug(
            "Init SignatureV4: access_key_id: {0}, secret_access_key: ******, "
            "region: {1}".format(access_key, region)
        )

    def canonical_request(
        self,
        method,
        canonical_uri,
        canonical_query_string,
        headers,
        signed_headers=None,
        payload_hash=None,
    ):
        """
        Create the canonical request.

        The query string is used exactly as given. It must already be
        sorted by parameter name and percent-encoded; nothing here checks
        or repairs it.

        Args:
            method (str): HTTP method
            canonical_uri (str): Output of :meth:`S3Path.to_canonical_uri`
            canonical_query_string (str): Pre-built query string
            headers (dict): Headers to sign
            signed_headers (str or list, optional): Names of the signed headers,
                derived from ``headers`` when omitted
            payload_hash (str): Value of ``X-Amz-Content-Sha256``

        Returns:
            str: Canonical request

        Raises:
            SigningError: If ``signed_headers`` does not name exactly the
                headers in ``headers``
        """
        if payload_hash is None:
            raise SigningError("payload_hash is required")

        items = canonical_header_items(headers)
        expected = ";".join(name for name, _ in items)
        if signed_headers is None:
            signed_headers = expected
        elif not isinstance(signed_headers, str):
            signed_headers = ";".join(signed_headers)
        if signed_headers != expected:
            raise SigningError(
                "Signed headers {0!r} do not match canonical headers {1!r}".format(
                    signed_headers, expected
                )
            )

        canonical_headers = "".join(
            "{0}:{1}\n".format(name, value) for name, value in items
        )

        return "\n".join(
            [
                method.upper(),
                canonical_uri,
                canonical_query_string or "",
                canonical_headers,
                signed_headers,
                payload_hash,
            ]
        )

    def credential_scope(self, date_stamp):
        """Return ``date_stamp/region/s3/aws4_request``."""
        return "/".join([date_stamp, self.region, self.service, TERMINATOR])

    def string_to_sign(self, canonical_request, full_date, date_stamp):
        """
        Create the string to sign.

        Args:
            canonical_request (str): Output of :meth:`canonical_request`
            full_date (str): ``X-Amz-Date`` value
            date_stamp (str): First 8 characters of ``full_date``

        Returns:
            str: String to sign
        """
        return "\n".join(
            [
                ALGORITHM,
                full_date,
                self.credential_scope(date_stamp),
                sha256_hex(canonical_request),
            ]
        )

    def signing_key(self, date_stamp):
        """
        Derive the signing key for one day in this region.

        Args:
            date_stamp (str): Date in ``YYYYMMDD`` form

        Returns:
            bytes: 32 byte signing key
        """
        k_date = hmac_sha256(("AWS4" + self._secret_key).encode("utf-8"), date_stamp)
        k_region = hmac_sha256(k_date, self.region)
        k_service = hmac_sha256(k_region, self.service)
        return hmac_sha256(k_service, TERMINATOR)

    def signature(self, signing_key, string_to_sign):
        """Return the hex signature of ``string_to_sign``."""
        return hmac.new(
            signing_key, string_to_sign.encode("utf-8"), hashlib.sha256
        ).hexdigest()

    def authorization_header(
        self, canonical_request, full_date, date_stamp, signed_headers, signing_key
    ):
        """
        Render the ``Authorization`` header value.

        Args:
            canonical_request (str): Output of :meth:`canonical_request`
            full_date (str): ``X-Amz-Date`` value
            date_stamp (str): First 8 characters of ``full_date``
            signed_headers (str): Same value used in the canonical request
            signing_key (bytes): Output of :meth:`signing_key`

        Returns:
            str: Authorization header value
        """
        string_to_sign = self.string_to_sign(canonical_request, full_date, date_stamp)
        logger.debug("Make signature: string to be signed = {0!r}".format(string_to_sign))
        signature = self.signature(signing_key, string_to_sign)

        return "{0} Credential={1}/{2},SignedHeaders={3},Signature={4}".format(
            ALGORITHM,
            self.access_key,
            self.credential_scope(date_stamp),
            signed_headers,
            signature,
        )

    def __repr__(self):
        return "SignatureV4(access_key={0!r}, secret_key='******', region={1!r})".format(
            self.access_key, self.region
        )
