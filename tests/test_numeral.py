"""Tests for hex, utf8, binary, octal, ascii and base codecs."""

import unittest

from ce_codec import CodecError, CodecErrorKind, CodecId, lookup


class TestHex(unittest.TestCase):

    def setUp(self) -> None:
        self.codec = lookup(CodecId.HEX)

    def test_encode_literal(self) -> None:
        self.assertEqual(self.codec.encode("Hello"), "48656c6c6f")

    def test_decode_mixed_case_and_spaces(self) -> None:
        self.assertEqual(self.codec.decode("48 65 6C 6c\n6f"), "Hello")

    def test_decode_drops_odd_nibble(self) -> None:
        self.assertEqual(self.codec.decode("486"), "H")

    def test_decode_invalid_character(self) -> None:
        with self.assertRaises(CodecError) as ctx:
            self.codec.decode("48zz")
        self.assertEqual(ctx.exception.kind, CodecErrorKind.INVALID_CHARACTER)

    def test_decode_invalid_utf8(self) -> None:
        with self.assertRaises(CodecError) as ctx:
            self.codec.decode("ff")
        self.assertEqual(ctx.exception.kind, CodecErrorKind.INVALID_UTF8_SEQUENCE)


class TestUtf8(unittest.TestCase):

    def setUp(self) -> None:
        self.codec = lookup(CodecId.UTF8)

    def test_encode(self) -> None:
        self.assertEqual(self.codec.encode("Hello"), "48 65 6c 6c 6f")
        self.assertEqual(self.codec.encode("é"), "c3 a9")

    def test_decode(self) -> None:
        self.assertEqual(self.codec.decode("c3  a9"), "é")

    def test_decode_rejects_non_hex_and_large_tokens(self) -> None:
        for bad in ["zz", "100", "0x41"]:
            with self.assertRaises(CodecError) as ctx:
                self.codec.decode(bad)
            self.assertEqual(ctx.exception.kind, CodecErrorKind.INVALID_NUMBER, bad)


class TestBinary(unittest.TestCase):

    def setUp(self) -> None:
        self.codec = lookup(CodecId.BINARY)

    def test_encode(self) -> None:
        self.assertEqual(self.codec.encode("Hi"), "01001000 01101001")

    def test_decode(self) -> None:
        self.assertEqual(self.codec.decode(" 01001000\t1101001 "), "Hi")

    def test_decode_invalid_number(self) -> None:
        with self.assertRaises(CodecError) as ctx:
            self.codec.decode("01001000 2")
        self.assertEqual(ctx.exception.kind, CodecErrorKind.INVALID_NUMBER)


class TestOctal(unittest.TestCase):

    def setUp(self) -> None:
        self.codec = lookup(CodecId.OCTAL)

    def test_encode(self) -> None:
        self.assertEqual(self.codec.encode("Hi"), "\\110\\151")

    def test_decode_ignores_other_text(self) -> None:
        self.assertEqual(self.codec.decode("x\\110 y\\151!"), "Hi")

    def test_decode_short_escapes(self) -> None:
        self.assertEqual(self.codec.decode("\\101\\60\\7"), "A0\x07")

    def test_backslash_without_digits_is_skipped(self) -> None:
        self.assertEqual(self.codec.decode("\\9\\110"), "H")

    def test_decode_out_of_range(self) -> None:
        with self.assertRaises(CodecError) as ctx:
            self.codec.decode("\\777")
        self.assertEqual(ctx.exception.kind, CodecErrorKind.INVALID_NUMBER)


class TestAscii(unittest.TestCase):

    def setUp(self) -> None:
        self.codec = lookup(CodecId.ASCII)

    def test_encode(self) -> None:
        self.assertEqual(self.codec.encode("Hello"), "72 101 108 108 111")

    def test_encode_astral_code_point(self) -> None:
        self.assertEqual(self.codec.encode("😀"), "128512")

    def test_decode(self) -> None:
        self.assertEqual(self.codec.decode("72  105"), "Hi")

    def test_non_numeric_token_is_an_error_not_nul(self) -> None:
        with self.assertRaises(CodecError) as ctx:
            self.codec.decode("72 abc")
        self.assertEqual(ctx.exception.kind, CodecErrorKind.INVALID_NUMBER)

    def test_decode_joins_surrogate_pair(self) -> None:
        self.assertEqual(self.codec.decode("55357 56832"), "\U0001f600")
        self.assertEqual(self.codec.decode("72 55357 56832 33"), "H\U0001f600!")

    def test_unpaired_surrogate(self) -> None:
        for text in ["55357", "56832 72", "72 55357 73"]:
            with self.subTest(text=text), self.assertRaises(CodecError) as ctx:
                self.codec.decode(text)
            self.assertEqual(ctx.exception.kind, CodecErrorKind.INVALID_ENCODING)

    def test_code_point_out_of_range(self) -> None:
        with self.assertRaises(CodecError) as ctx:
            self.codec.decode("1114112")
        self.assertEqual(ctx.exception.kind, CodecErrorKind.INVALID_NUMBER)


class TestRadix(unittest.TestCase):

    def setUp(self) -> None:
        self.codec = lookup(CodecId.BASE)

    def test_encode_decimal_to_hex(self) -> None:
        self.assertEqual(self.codec.encode("255"), "FF")
        self.assertEqual(self.codec.encode(" 4096 "), "1000")
        self.assertEqual(self.codec.encode("-255"), "-FF")

    def test_encode_large_number(self) -> None:
        self.assertEqual(self.codec.encode(str(2 ** 80)), "1" + "0" * 20)

    def test_encode_rejects_non_decimal(self) -> None:
        with self.assertRaises(CodecError) as ctx:
            self.codec.encode("12abc")
        self.assertEqual(ctx.exception.kind, CodecErrorKind.INVALID_NUMBER)

    def test_decode_hex_to_decimal(self) -> None:
        self.assertEqual(self.codec.decode("0xff"), "255")
        self.assertEqual(self.codec.decode("0XFF"), "255")
        self.assertEqual(self.codec.decode("1 000"), "4096")

    def test_decode_rejects_bad_digits(self) -> None:
        for bad in ["0xZZ", "", "0x"]:
            with self.assertRaises(CodecError) as ctx:
                self.codec.decode(bad)
            self.assertEqual(ctx.exception.kind, CodecErrorKind.INVALID_CHARACTER, bad)

    def test_roundtrip(self) -> None:
        self.assertEqual(self.codec.decode(self.codec.encode("123456789")), "123456789")


if __name__ == "__main__":
    unittest.main()
