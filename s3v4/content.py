"""
s3v4.content
~~~~~~~~~~~~

Request bodies and the payload hash that covers them.
"""

import hashlib

UNSIGNED_PAYLOAD = "UNSIGNED-PAYLOAD"


def payload_hash(body):
    """
    Compute the ``X-Amz-Content-Sha256`` value for a body.

    Args:
        body (bytes): Exact bytes that will be sent, or None for no body

    Returns:
        str: Lower-case hex SHA-256 digest, or ``UNSIGNED-PAYLOAD``
    """
    if body is None:
        return UNSIGNED_PAYLOAD
    if not isinstance(body, (bytes, bytearray, memoryview)):
        raise TypeError(
            "Request body must be bytes, got {0}".format(type(body).__name__)
        )
    return hashlib.sha256(body).hexdigest()


class S3Content(object):
    """
    A request body together with its media type.

    Args:
        body (bytes): Raw payload
        media_type (str, optional): Sent as ``Content-Type`` when given
    """

    __slots__ = ("body", "media_type")

    def __init__(self, body, media_type=None):
        if not isinstance(body, (bytes, bytearray, memoryview)):
            raise TypeError(
                "Content body must be bytes, got {0}".format(type(body).__name__)
            )
        self.body = bytes(body)
        self.media_type = media_type or None

    @classmethod
    def from_text(cls, text, media_type="text/plain; charset=utf-8"):
        """Encode ``text`` as UTF-8 content."""
        return cls(text.encode("utf-8"), media_type)

    @property
    def sha256(self):
        return payload_hash(self.body)

    def __len__(self):
        return len(self.body)

    def __repr__(self):
        return "S3Content(<{0} bytes>, media_type={1!r})".format(
            len(self.body), self.media_type
        )
