import unittest

from s3v4.path import S3Path, encode_key


class TestCanonicalPath(unittest.TestCase):
    def test_service_root(self):
        self.assertEqual(S3Path().to_canonical_uri(), "/")
        self.assertEqual(S3Path("", "").to_canonical_uri(), "/")

    def test_bucket_only(self):
        self.assertEqual(S3Path("bucket").to_canonical_uri(), "/bucket")
        self.assertEqual(S3Path("/bucket").to_canonical_uri(), "/bucket")

    def test_bucket_and_key(self):
        self.assertEqual(S3Path("b", "a b.txt").to_canonical_uri(), "/b/a%20b.txt")
        self.assertEqual(
            S3Path("b", "dir/file.txt").to_canonical_uri(), "/b/dir/file.txt"
        )

    def test_single_separator(self):
        self.assertEqual(S3Path("b", "/k").to_canonical_uri(), "/b/k")
        self.assertEqual(S3Path(key="k").to_canonical_uri(), "/k")
        self.assertEqual(S3Path(key="/k").to_canonical_uri(), "/k")

    def test_hash_is_escaped(self):
        self.assertEqual(S3Path("b", "#").to_canonical_uri(), "/b/%23")

    def test_strict_escapes(self):
        self.assertEqual(
            encode_key("!#$&'()*+,:;=@[]{}"),
            "%21%23%24%26%27%28%29%2A%2B%2C%3A%3B%3D%40%5B%5D%7B%7D",
        )
        self.assertEqual(encode_key("test$file.text"), "test%24file.text")

    def test_unreserved_and_percent(self):
        self.assertEqual(encode_key("a-b_c.d~e"), "a-b_c.d~e")
        self.assertEqual(encode_key("100%"), "100%25")

    def test_non_ascii_key(self):
        self.assertEqual(S3Path("b", "ü.txt").to_canonical_uri(), "/b/%C3%BC.txt")

    def test_encode_disabled(self):
        self.assertEqual(
            S3Path("b", "a b#1", encode=False).to_canonical_uri(), "/b/a b#1"
        )

    def test_equality_and_repr(self):
        self.assertEqual(S3Path("b", "k"), S3Path("b", "k"))
        self.assertNotEqual(S3Path("b", "k"), S3Path("b", "k", encode=False))
        self.assertIn("S3Path", repr(S3Path("b")))
