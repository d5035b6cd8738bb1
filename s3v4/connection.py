"""
s3v4.connection
~~~~~~~~~~~~~~~

Storage operations and the backend that sends SigV4-signed requests over
``requests``.

:class:`Base` is the storage-operations interface. :class:`Connection`
implements it with :class:`~s3v4.request.SignedRequest`. Other clients,
such as a vendor SDK wrapper, are plugged in with :func:`register_backend`
and chosen by :attr:`Config.backend`.
"""

import logging
import re

import requests

from .config import DEFAULT_BACKEND, Config, Credentials, Endpoint
from .datetime_utils import get_utc_datetime
from .exceptions import ConfigurationError
from .operations.bucket_requests import (
    CreateBucketRequest,
    DeleteBucketRequest,
    ListBucketRequest,
    ListBucketsRequest,
)
from .operations.object_requests import DeleteRequest, GetRequest, UploadRequest

logger = logging.getLogger(__name__)

SIGNATURE_RE = re.compile(r"Signature=[0-9a-fA-F]+")


def redact_headers(headers):
    """Return a copy of ``headers`` with the Authorization signature masked."""
    redacted = {}
    for name, value in headers.items():
        if name.lower() == "authorization":
            value = SIGNATURE_RE.sub("Signature=******", value)
        redacted[name] = value
    return redacted


class Base(object):
    """
    The storage operations, independent of how requests are sent.

    Args:
        endpoint (Endpoint or str): Service endpoint
        region (str): Signing region
        access_key (str): Access key id
        secret_key (str): Secret access key
        default_bucket (str, optional): Bucket used when none is given
        clock (callable): Time source for request signing
        verify (bool): Verify TLS certificates
    """

    def __init__(
        self,
        endpoint,
        region,
        access_key,
        secret_key,
        default_bucket=None,
        clock=get_utc_datetime,
        verify=True,
    ):
        missing = [
            name
            for name, value in (
                ("endpoint", endpoint),
                ("region", region),
                ("access_key", access_key),
                ("secret_key", secret_key),
                ("clock", clock),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError.missing(missing)

        self.endpoint = (
            endpoint if isinstance(endpoint, Endpoint) else Endpoint.parse(endpoint)
        )
        self.region = region
        self.credentials = Credentials(access_key, secret_key)
        self.default_bucket = default_bucket
        self.clock = clock
        self.verify = verify

    def bucket(self, bucket):
        """
        Resolve the bucket for an operation.

        Raises:
            ConfigurationError: If neither ``bucket`` nor a default is set
        """
        bucket = bucket or self.default_bucket
        if not bucket:
            raise ConfigurationError.missing(["bucket"])
        return bucket

    def list_buckets(self):
        return self.run(ListBucketsRequest(self))

    def create_bucket(self, bucket=None):
        return self.run(CreateBucketRequest(self, self.bucket(bucket)))

    def delete_bucket(self, bucket=None):
        return self.run(DeleteBucketRequest(self, self.bucket(bucket)))

    def list_bucket(self, bucket=None, params=None):
        """Return the raw listing response for ``bucket``."""
        return self.run(ListBucketRequest(self, self.bucket(bucket), params))

    def put_object(self, key, data, bucket=None, content_type=None, close=False, rewind=True):
        """
        Upload ``data`` to ``bucket/key``.

        Args:
            key (str): Object key
            data: Bytes, text or a file-like object
            bucket (str, optional): Bucket, defaults to ``default_bucket``
            content_type (str, optional): MIME type
            close (bool): Close ``data`` after the upload
            rewind (bool): Seek ``data`` to the start before reading
        """
        return self.run(
            UploadRequest(
                self,
                key,
                data,
                self.bucket(bucket),
                content_type=content_type,
                close=close,
                rewind=rewind,
            )
        )

    def get_object(self, key, bucket=None):
        return self.run(GetRequest(self, key, self.bucket(bucket)))

    def delete_object(self, key, bucket=None):
        return self.run(DeleteRequest(self, key, self.bucket(bucket)))

    def run(self, request):
        return self._handle_request(request)

    def _handle_request(self, request):
        raise NotImplementedError


class Connection(Base):
    """
    Sends signed requests synchronously through a ``requests.Session``.

    Args:
        trace (bool): Log every request and response at INFO level
        session (requests.Session, optional): Session to send requests with
        **kwargs: See :class:`Base`
    """

    def __init__(self, *args, **kwargs):
        self.trace = kwargs.pop("trace", False)
        session = kwargs.pop("session", None)
        super(Connection, self).__init__(*args, **kwargs)

        self.session = session if session is not None else requests.Session()
        if self.trace:
            self.session.hooks["response"].append(self._trace)

    @classmethod
    def from_config(cls, config, **kwargs):
        """Build a connection from a :class:`~s3v4.config.Config`."""
        kwargs.setdefault("trace", config.trace)
        kwargs.setdefault("verify", config.verify)
        return cls(
            config.endpoint,
            config.region,
            config.credentials.access_key,
            config.credentials.secret_key,
            **kwargs
        )

    def _handle_request(self, request):
        return request.run()

    def _trace(self, response, *args, **kwargs):
        request = response.request
        body = request.body or b""
        logger.info(
            "request: method=%s url=%s headers=%s body=<%d bytes>",
            request.method,
            request.url,
            redact_headers(request.headers),
            len(body),
        )
        logger.info(
            "response: status=%s reason=%s headers=%s body=<%d bytes>",
            response.status_code,
            response.reason,
            dict(response.headers),
            len(response.content),
        )
        return response

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def __repr__(self):
        return "Connection(endpoint={0!r}, region={1!r}, credentials={2!r})".format(
            self.endpoint.base_url, self.region, self.credentials
        )


BACKENDS = {DEFAULT_BACKEND: Connection.from_config}


def register_backend(name, factory):
    """
    Register a storage backend.

    Args:
        name (str): Value of ``Config.backend`` that selects it
        factory (callable): Called as ``factory(config, **kwargs)``, must
            return an object implementing the :class:`Base` operations
    """
    if not name:
        raise ConfigurationError.missing(["backend"])
    BACKENDS[name] = factory


def connect(config=None, **kwargs):
    """
    Open a storage backend for ``config``.

    Args:
        config (Config, optional): Loaded from the environment when omitted
        **kwargs: Passed to the backend factory

    Raises:
        ConfigurationError: If the configured backend is not registered
    """
    if config is None:
        config = Config.from_env()
    try:
        factory = BACKENDS[config.backend]
    except KeyError:
        raise ConfigurationError(
            "Unknown storage backend: {0!r}".format(config.backend), ["backend"]
        )
    return factory(config, **kwargs)
