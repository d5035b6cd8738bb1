from .config import Config, Credentials, Endpoint
from .connection import Base, Connection, connect, register_backend
from .content import UNSIGNED_PAYLOAD, S3Content, payload_hash
from .datetime_utils import AmzDate, fixed_clock, get_utc_datetime
from .exceptions import ConfigurationError, S3v4Error, SigningError
from .path import S3Path
from .request import SignedRequest
from .signatures import SignatureV4

__title__ = 's3v4'
__version__ = '1.0.0'
__license__ = 'MIT'
__all__ = [
    "AmzDate",
    "Base",
    "Config",
    "ConfigurationError",
    "Connection",
    "Credentials",
    "Endpoint",
    "S3Content",
    "S3Path",
    "S3v4Error",
    "SignatureV4",
    "SignedRequest",
    "SigningError",
    "UNSIGNED_PAYLOAD",
    "connect",
    "fixed_clock",
    "get_utc_datetime",
    "payload_hash",
    "register_backend",
]
