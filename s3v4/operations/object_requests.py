"""
s3v4.operations.object_requests
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

S3 object-level operations (upload, download, delete).
"""

import mimetypes
import os

from ..content import S3Content
from . import S3Request


class GetRequest(S3Request):
    """
    Download an object from S3.

    Args:
        conn: S3 connection object
        key (str): S3 object key to download
        bucket (str): S3 bucket name
    """

    def __init__(self, conn, key, bucket):
        super(GetRequest, self).__init__(conn)
        self.key = key
        self.bucket = bucket

    def run(self):
        """
        Execute the download request.

        Returns:
            Response: HTTP response containing the object data
        """
        return self._make_request("GET", self.bucket, self.key)


class UploadRequest(S3Request):
    """
    Upload an object to S3.

    The whole body is read into memory because its SHA-256 digest is part
    of the signature.

    Args:
        conn: S3 connection object
        key (str): S3 object key for the upload
        data: Bytes, text or a file-like object to upload
        bucket (str): S3 bucket name
        content_type (str, optional): MIME type, guessed from the key if omitted
        close (bool): Whether to close the file after upload
        rewind (bool): Whether to seek to beginning before upload
    """

    def __init__(
        self, conn, key, data, bucket, content_type=None, close=False, rewind=True
    ):
        super(UploadRequest, self).__init__(conn)
        self.key = key
        self.fp = data
        self.bucket = bucket
        self.content_type = content_type
        self.close = close
        self.rewind = rewind

    def run(self):
        """
        Execute the upload request.

        Returns:
            Response: HTTP response from the upload operation
        """
        try:
            content = S3Content(self._read_body(), self._determine_content_type())
            return self._make_request("PUT", self.bucket, self.key, content)
        finally:
            if self.close and hasattr(self.fp, "close"):
                self.fp.close()

    def _read_body(self):
        if isinstance(self.fp, str):
            return self.fp.encode("utf-8")
        if isinstance(self.fp, (bytes, bytearray, memoryview)):
            return bytes(self.fp)

        if self.rewind and hasattr(self.fp, "seek"):
            self.fp.seek(0, os.SEEK_SET)
        data = self.fp.read()
        if isinstance(data, str):
            data = data.encode("utf-8")
        return data

    def _determine_content_type(self):
        """
        Determine the content type for the upload.

        Returns:
            str: MIME content type
        """
        if self.content_type:
            return self.content_type
        guessed_type, _ = mimetypes.guess_type(self.key)
        return guessed_type or "application/octet-stream"


class DeleteRequest(S3Request):
    """
    Delete an object from S3.

    Args:
        conn: S3 connection object
        key (str): S3 object key to delete
        bucket (str): S3 bucket name
    """

    def __init__(self, conn, key, bucket):
        super(DeleteRequest, self).__init__(conn)
        self.key = key
        self.bucket = bucket

    def run(self):
        """
        Execute the delete request.

        Returns:
            Response: HTTP response from the delete operation
        """
        return self._make_request("DELETE", self.bucket, self.key)
