"""
s3v4.config
~~~~~~~~~~~

Endpoint, credentials and client configuration.

All of these are immutable once built and validate their inputs in the
constructor.
"""

import os
from urllib.parse import urlsplit

from .exceptions import ConfigurationError

DEFAULT_BACKEND = "sigv4"

ENV_VARS = {
    "endpoint": "S3_ENDPOINT",
    "region": "S3_REGION",
    "access_key": "S3_ACCESS_KEY",
    "secret_key": "S3_SECRET_KEY",
    "trace": "S3_TRACE",
    "backend": "S3_BACKEND",
    "verify": "S3_VERIFY",
}

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


def parse_bool(name, value):
    """Parse a boolean flag, raising ConfigurationError on anything unexpected."""
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ConfigurationError(
        "Invalid boolean for {0}: {1!r}".format(name, value), [name]
    )


class _Frozen(object):
    __slots__ = ()

    def __setattr__(self, name, value):
        raise AttributeError("{0} is immutable".format(type(self).__name__))

    def _set(self, name, value):
        object.__setattr__(self, name, value)


class Endpoint(_Frozen):
    """
    Scheme, host and optional port of the storage service.

    Args:
        scheme (str): ``http`` or ``https``
        host (str): Host name or address
        port (int, optional): Explicit port
    """

    __slots__ = ("scheme", "host", "port")

    def __init__(self, scheme, host, port=None):
        if not host:
            raise ConfigurationError.missing(["endpoint"])
        scheme = (scheme or "").lower()
        if scheme not in ("http", "https"):
            raise ConfigurationError(
                "Unsupported endpoint scheme: {0!r}".format(scheme), ["endpoint"]
            )
        self._set("scheme", scheme)
        self._set("host", host)
        self._set("port", int(port) if port is not None else None)

    @classmethod
    def parse(cls, url):
        """
        Parse an endpoint URL such as ``http://localhost:4566``.

        Raises:
            ConfigurationError: If the URL is empty, has no host, or
                carries a path, query or fragment
        """
        if not url:
            raise ConfigurationError.missing(["endpoint"])
        parts = urlsplit(url)
        if parts.path not in ("", "/") or parts.query or parts.fragment:
            raise ConfigurationError(
                "Endpoint must not contain a path, query or fragment: {0!r}".format(
                    url
                ),
                ["endpoint"],
            )
        try:
            port = parts.port
        except ValueError:
            raise ConfigurationError(
                "Invalid endpoint port: {0!r}".format(url), ["endpoint"]
            )
        return cls(parts.scheme, parts.hostname, port)

    @property
    def netloc(self):
        """``host`` or ``host:port``, used as the Host header."""
        host = self.host
        if ":" in host:
            host = "[{0}]".format(host)
        if self.port is None:
            return host
        return "{0}:{1}".format(host, self.port)

    @property
    def base_url(self):
        return "{0}://{1}".format(self.scheme, self.netloc)

    def __eq__(self, other):
        if not isinstance(other, Endpoint):
            return NotImplemented
        return (self.scheme, self.host, self.port) == (
            other.scheme,
            other.host,
            other.port,
        )

    def __hash__(self):
        return hash((self.scheme, self.host, self.port))

    def __str__(self):
        return self.base_url

    def __repr__(self):
        return "Endpoint({0!r})".format(self.base_url)


class Credentials(_Frozen):
    """
    Access key pair. The secret never shows up in repr() or errors.

    Args:
        access_key (str): Access key id
        secret_key (str): Secret access key
    """

    __slots__ = ("access_key", "secret_key")

    def __init__(self, access_key, secret_key):
        missing = [
            name
            for name, value in (("access_key", access_key), ("secret_key", secret_key))
            if not value
        ]
        if missing:
            raise ConfigurationError.missing(missing)
        self._set("access_key", access_key)
        self._set("secret_key", secret_key)

    def __eq__(self, other):
        if not isinstance(other, Credentials):
            return NotImplemented
        return (self.access_key, self.secret_key) == (
            other.access_key,
            other.secret_key,
        )

    def __hash__(self):
        return hash((self.access_key, self.secret_key))

    def __repr__(self):
        return "Credentials(access_key={0!r}, secret_key='******')".format(
            self.access_key
        )


class Config(_Frozen):
    """
    Everything needed to talk to one S3-compatible service.

    Every required value is checked at once so that a single error lists
    all of the missing ones.

    Args:
        endpoint (str or Endpoint): Service URL
        region (str): Signing region
        access_key (str): Access key id
        secret_key (str): Secret access key
        trace (bool): Log every HTTP exchange (default: False)
        backend (str): Name of the storage backend (default: ``sigv4``)
        verify (bool): Verify TLS certificates (default: True)
    """

    __slots__ = (
        "endpoint",
        "region",
        "credentials",
        "trace",
        "backend",
        "verify",
    )

    def __init__(
        self,
        endpoint,
        region,
        access_key,
        secret_key,
        trace=False,
        backend=DEFAULT_BACKEND,
        verify=True,
    ):
        missing = [
            name
            for name, value in (
                ("endpoint", endpoint),
                ("region", region),
                ("access_key", access_key),
                ("secret_key", secret_key),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError.missing(missing)

        if not isinstance(endpoint, Endpoint):
            endpoint = Endpoint.parse(endpoint)

        self._set("endpoint", endpoint)
        self._set("region", region)
        self._set("credentials", Credentials(access_key, secret_key))
        self._set("trace", parse_bool("trace", trace))
        self._set("backend", backend or DEFAULT_BACKEND)
        self._set("verify", parse_bool("verify", verify))

    @classmethod
    def from_env(cls, environ=None):
        """
        Load configuration from environment variables.

        Reads ``S3_ENDPOINT``, ``S3_REGION``, ``S3_ACCESS_KEY``,
        ``S3_SECRET_KEY`` and optionally ``S3_TRACE``, ``S3_BACKEND``,
        ``S3_VERIFY``.

        Args:
            environ (dict, optional): Defaults to ``os.environ``

        Returns:
            Config: Validated configuration

        Raises:
            ConfigurationError: Naming every missing variable
        """
        if environ is None:
            environ = os.environ

        required = ("endpoint", "region", "access_key", "secret_key")
        missing = [ENV_VARS[name] for name in required if not environ.get(ENV_VARS[name])]
        if missing:
            raise ConfigurationError.missing(missing)

        return cls(
            endpoint=environ[ENV_VARS["endpoint"]],
            region=environ[ENV_VARS["region"]],
            access_key=environ[ENV_VARS["access_key"]],
            secret_key=environ[ENV_VARS["secret_key"]],
            trace=environ.get(ENV_VARS["trace"], False),
            backend=environ.get(ENV_VARS["backend"]) or DEFAULT_BACKEND,
            verify=environ.get(ENV_VARS["verify"], True),
        )

    def __repr__(self):
        return (
            "Config(endpoint={0!r}, region={1!r}, credentials={2!r}, "
            "trace={3!r}, backend={4!r}, verify={5!r})".format(
                self.endpoint.base_url,
                self.region,
                self.credentials,
                self.trace,
                self.backend,
                self.verify,
            )
        )
