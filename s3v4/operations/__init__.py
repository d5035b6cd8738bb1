"""
s3v4.operations
~~~~~~~~~~~~~~~

Base class for S3 request implementations.
"""

from urllib.parse import quote

import requests

from ..path import S3Path
from ..request import SignedRequest


def build_query_string(params):
    """
    Build a canonical query string from a dict of parameters.

    Names and values are percent-encoded with only unreserved characters
    left alone, and sorted by encoded name. ``None`` values render as
    ``name=``.

    Args:
        params (dict): Query parameters

    Returns:
        str: Query string without the leading '?'
    """
    if not params:
        return ""

    query_parts = []
    for param, value in params.items():
        value = "" if value is None else str(value)
        query_parts.append((quote(str(param), safe="-_.~"), quote(value, safe="-_.~")))

    return "&".join("{0}={1}".format(name, value) for name, value in sorted(query_parts))


class S3Request(object):
    """
    Base class for all S3 requests.

    Signs the call with :class:`SignedRequest` and sends it through the
    connection's ``requests`` session.

    Args:
        conn: The S3 connection object
        params (dict, optional): Query parameters to add to the request URL
    """

    def __init__(self, conn, params=None):
        self.conn = conn
        self.endpoint = conn.endpoint
        self.region = conn.region
        self.credentials = conn.credentials
        self.clock = conn.clock
        self.verify = conn.verify
        self.params = params or {}

    def signed_request(self, method, bucket=None, key=None, content=None):
        """
        Sign a request for ``/bucket/key``.

        Args:
            method (str): HTTP method
            bucket (str, optional): Bucket name
            key (str, optional): Object key
            content (S3Content, optional): Request body

        Returns:
            SignedRequest: Headers and URL ready to send
        """
        return SignedRequest(
            self.endpoint,
            self.region,
            self.credentials,
            method,
            S3Path(bucket, key),
            query_string=build_query_string(self.params),
            content=content,
            clock=self.clock,
        )

    def adapter(self):
        """
        Get the HTTP adapter for making requests.

        Returns the connection's ``requests.Session``; tests replace it
        with a stub.
        """
        return self.conn.session

    def run(self):
        """
        Execute the S3 request.

        Raises:
            NotImplementedError: If not implemented by subclass
        """
        raise NotImplementedError("Subclasses must implement the run() method")

    def _make_request(self, method, bucket=None, key=None, content=None, **kwargs):
        """
        Sign and send one request.

        The signed headers and URL are passed to the transport unmodified.

        Args:
            method (str): HTTP method
            bucket (str, optional): Bucket name
            key (str, optional): Object key
            content (S3Content, optional): Request body
            **kwargs: Additional arguments to pass to requests

        Returns:
            Response: The HTTP response object

        Raises:
            HTTPError: If the service answers with an error status
        """
        signed = self.signed_request(method, bucket, key, content)

        session = self.adapter()
        prepared = session.prepare_request(
            requests.Request(
                signed.method,
                signed.url,
                headers=dict(signed.headers),
                data=signed.body,
            )
        )
        # requests normalizes the URL while preparing it; send what was signed.
        prepared.url = signed.url

        send_kwargs = session.merge_environment_settings(
            prepared.url, {}, None, kwargs.pop("verify", self.verify), None
        )
        send_kwargs.update(kwargs)
        response = session.send(prepared, **send_kwargs)

        response.raise_for_status()

        return response
