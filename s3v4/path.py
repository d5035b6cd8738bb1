"""
s3v4.path
~~~~~~~~~

Canonical URIs for path-style addressing (``/bucket/key``).
"""

from urllib.parse import quote

# RFC 3986 ``pchar`` sub-delims plus ':' and '@'. A generic path encoder
# leaves these alone, S3 does not.
PATH_SAFE_CHARS = "/!$&'()*+,;=:@"

# Characters S3 requires escaped in the canonical URI that generic URI
# encoders leave as they are.
STRICT_ESCAPES = dict(
    (ord(char), "%{0:02X}".format(ord(char))) for char in "!#$&'()*+,:;=@[]{}"
)


def encode_path(value):
    """Percent-encode ``value`` the way a general purpose URI path encoder does."""
    return quote(value, safe=PATH_SAFE_CHARS)


def encode_key(key):
    """
    Encode an object key for the canonical URI.

    Args:
        key (str): Object key, '/' separators are kept

    Returns:
        str: Percent-encoded key

    Examples:
        >>> encode_key("a b.txt")
        'a%20b.txt'
        >>> encode_key("report#1.csv")
        'report%231.csv'
    """
    return encode_path(key).translate(STRICT_ESCAPES)


class S3Path(object):
    """
    The bucket/key part of a request.

    Args:
        bucket (str, optional): Bucket name, inserted verbatim
        key (str, optional): Object key
        encode (bool): Percent-encode the key (default: True)
    """

    __slots__ = ("bucket", "key", "encode")

    def __init__(self, bucket=None, key=None, encode=True):
        self.bucket = bucket or None
        self.key = key or None
        self.encode = encode

    def to_canonical_uri(self):
        """
        Build the canonical URI.

        Returns:
            str: '/' for the service root, otherwise '/bucket' or '/bucket/key'
        """
        uri = "/"
        if self.bucket:
            uri = self.bucket if self.bucket.startswith("/") else "/" + self.bucket

        if self.key:
            key = encode_key(self.key) if self.encode else self.key
            if uri.endswith("/") and key.startswith("/"):
                key = key[1:]
            elif not uri.endswith("/") and not key.startswith("/"):
                uri += "/"
            uri += key

        return uri

    def __eq__(self, other):
        if not isinstance(other, S3Path):
            return NotImplemented
        return (self.bucket, self.key, self.encode) == (
            other.bucket,
            other.key,
            other.encode,
        )

    def __hash__(self):
        return hash((self.bucket, self.key, self.encode))

    def __repr__(self):
        return "S3Path(bucket={0!r}, key={1!r}, encode={2!r})".format(
            self.bucket, self.key, self.encode
        )
