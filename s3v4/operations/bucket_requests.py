"""
Bucket management operations for s3v4.
"""

from . import S3Request


class ListBucketsRequest(S3Request):
    """List all buckets owned by the caller (``GET /``)."""

    def run(self):
        """
        Execute the request.

        Returns:
            Response: Raw ``ListAllMyBucketsResult`` response
        """
        return self._make_request("GET")


class CreateBucketRequest(S3Request):
    """
    S3 request to create a bucket.

    This request creates a new bucket in the S3-compatible service.
    """

    def __init__(self, conn, bucket_name):
        """
        Initialize bucket creation request.

        Args:
            conn: S3 Connection object
            bucket_name (str): Name of the bucket to create
        """
        super(CreateBucketRequest, self).__init__(conn)
        self.bucket_name = bucket_name

    def run(self):
        """Execute the bucket creation request."""
        return self._make_request("PUT", self.bucket_name)


class DeleteBucketRequest(S3Request):
    """
    S3 request to delete a bucket.

    This request deletes an empty bucket from the S3-compatible service.
    """

    def __init__(self, conn, bucket_name):
        """
        Initialize bucket deletion request.

        Args:
            conn: S3 Connection object
            bucket_name (str): Name of the bucket to delete
        """
        super(DeleteBucketRequest, self).__init__(conn)
        self.bucket_name = bucket_name

    def run(self):
        """Execute the bucket deletion request."""
        return self._make_request("DELETE", self.bucket_name)


class ListBucketRequest(S3Request):
    """
    List the contents of one bucket (``GET /bucket``).

    The response body is returned as is; parsing and pagination are left
    to the caller.

    Args:
        conn: S3 Connection object
        bucket_name (str): Bucket to list
        params (dict, optional): Query parameters such as ``prefix``
    """

    def __init__(self, conn, bucket_name, params=None):
        super(ListBucketRequest, self).__init__(conn, params)
        self.bucket_name = bucket_name

    def run(self):
        return self._make_request("GET", self.bucket_name)
