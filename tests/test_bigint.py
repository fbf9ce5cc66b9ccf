"""Tests for the Base58 codec."""

import unittest

from ce_codec import CodecError, CodecErrorKind, CodecId, lookup


class TestBase58(unittest.TestCase):

    def setUp(self) -> None:
        self.codec = lookup(CodecId.BASE58)

    def test_encode_literal(self) -> None:
        self.assertEqual(self.codec.encode("Hello"), "9Ajdvzr")

    def test_decode_literal(self) -> None:
        self.assertEqual(self.codec.decode("9Ajdvzr"), "Hello")

    def test_leading_zero_bytes_become_ones(self) -> None:
        self.assertEqual(self.codec.encode("\0\0A"), "1128")
        self.assertEqual(self.codec.decode("1128"), "\0\0A")

    def test_all_zero_and_empty_buffers(self) -> None:
        self.assertEqual(self.codec.encode("\0"), "1")
        self.assertEqual(self.codec.encode(""), "1")
        self.assertEqual(self.codec.decode("1"), "\0")

    def test_leading_zero_count_preserved(self) -> None:
        for zeros in range(4):
            text = "\0" * zeros + "payload"
            decoded = self.codec.decode(self.codec.encode(text))
            self.assertEqual(decoded, text)
            self.assertEqual(len(decoded) - len(decoded.lstrip("\0")), zeros)

    def test_long_input_exceeds_native_width(self) -> None:
        text = "The quick brown fox jumps over the lazy dog. " * 20
        self.assertEqual(self.codec.decode(self.codec.encode(text)), text)

    def test_decode_ignores_surrounding_whitespace(self) -> None:
        self.assertEqual(self.codec.decode("  9Ajdvzr\n"), "Hello")

    def test_decode_rejects_excluded_symbols(self) -> None:
        for bad in ["0", "O", "I", "l", "9Ajd vzr"]:
            with self.assertRaises(CodecError) as ctx:
                self.codec.decode(bad)
            self.assertEqual(ctx.exception.kind, CodecErrorKind.INVALID_CHARACTER, bad)


if __name__ == "__main__":
    unittest.main()
