"""
s3v4.signatures
~~~~~~~~~~~~~~~

AWS Signature Version 4 for S3.
"""

from .v4 import SignatureV4, canonical_header_items, signed_header_names

__all__ = ["SignatureV4", "canonical_header_items", "signed_header_names"]
