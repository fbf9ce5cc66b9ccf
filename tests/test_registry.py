"""Tests for the codec registry and the run_codec seam."""

import unittest

from ce_codec import (
    CODEC_REGISTRY,
    CodecError,
    CodecErrorKind,
    CodecId,
    CodecStrategy,
    Direction,
    lookup,
    register_codec,
    resolve_codec,
    run_codec,
)


class TestRegistry(unittest.TestCase):

    def test_every_codec_id_resolves(self) -> None:
        for codec_id in CodecId:
            codec = lookup(codec_id)
            self.assertEqual(codec.name, codec_id.value)
            self.assertTrue(codec.description)

    def test_registry_is_closed(self) -> None:
        self.assertEqual(set(CODEC_REGISTRY), set(CodecId))
        self.assertEqual(len(CodecId), 17)

    def test_resolve_by_id_and_title(self) -> None:
        self.assertEqual(resolve_codec("quoted"), CodecId.QUOTED)
        self.assertEqual(resolve_codec("Quoted-Printable"), CodecId.QUOTED)
        self.assertEqual(resolve_codec("HEX"), CodecId.HEX)
        self.assertEqual(resolve_codec(" utf-8 "), CodecId.UTF8)
        self.assertIsNone(resolve_codec("rot47"))

    def test_unknown_name_cannot_register(self) -> None:
        with self.assertRaises(ValueError):
            @register_codec
            class Bogus(CodecStrategy):
                name = "bogus"
                title = "Bogus"
                description = "not a codec"

                def encode(self, text: str) -> str:
                    return text

                def decode(self, text: str) -> str:
                    return text

    def test_duplicate_registration_rejected(self) -> None:
        original = CODEC_REGISTRY[CodecId.HEX]
        with self.assertRaises(ValueError):
            @register_codec
            class AnotherHex(CodecStrategy):
                name = "hex"
                title = "Hex2"
                description = "duplicate"

                def encode(self, text: str) -> str:
                    return text

                def decode(self, text: str) -> str:
                    return text
        self.assertIs(CODEC_REGISTRY[CodecId.HEX], original)

    def test_examples_are_accurate(self) -> None:
        for codec_id, codec in CODEC_REGISTRY.items():
            plain, encoded = codec.example
            self.assertEqual(codec.encode(plain), encoded, codec_id.value)


class TestRunCodec(unittest.TestCase):

    def test_success(self) -> None:
        outcome = run_codec(CodecId.HEX, Direction.ENCODE, "Hello")
        self.assertTrue(outcome.ok)
        self.assertEqual(outcome.text, "48656c6c6f")
        self.assertIsNone(outcome.kind)

    def test_failure_carries_kind_not_text(self) -> None:
        outcome = run_codec(CodecId.BASE32, Direction.DECODE, "!!!!")
        self.assertFalse(outcome.ok)
        self.assertIsNone(outcome.text)
        self.assertEqual(outcome.kind, CodecErrorKind.INVALID_CHARACTER)
        self.assertIn("Base32", outcome.detail)

    def test_unwrap(self) -> None:
        self.assertEqual(run_codec(CodecId.ROT13, Direction.DECODE, "Uryyb").unwrap(), "Hello")
        with self.assertRaises(CodecError):
            run_codec(CodecId.ASCII, Direction.DECODE, "x").unwrap()


class TestRoundTrip(unittest.TestCase):
    """decode(encode(s)) == s for every reversible codec."""

    SAMPLES = ["Hello, World!", "你好世界", "emoji 😀 ok", "x = y & z < 3", "tab\tand~tilde"]
    REVERSIBLE = [c for c in CodecId if c not in (CodecId.PUNYCODE, CodecId.MORSE, CodecId.BASE)]

    def test_roundtrip(self) -> None:
        for codec_id in self.REVERSIBLE:
            for text in self.SAMPLES:
                with self.subTest(codec=codec_id.value, text=text):
                    encoded = run_codec(codec_id, Direction.ENCODE, text).unwrap()
                    self.assertEqual(run_codec(codec_id, Direction.DECODE, encoded).unwrap(), text)

    def test_morse_roundtrip_upper_case(self) -> None:
        for text in ["HELLO, WORLD!", "SOS 911"]:
            encoded = run_codec(CodecId.MORSE, Direction.ENCODE, text).unwrap()
            self.assertEqual(run_codec(CodecId.MORSE, Direction.DECODE, encoded).unwrap(), text)

    def test_punycode_roundtrip_isolated_characters(self) -> None:
        text = "测.试.com"
        encoded = run_codec(CodecId.PUNYCODE, Direction.ENCODE, text).unwrap()
        self.assertEqual(run_codec(CodecId.PUNYCODE, Direction.DECODE, encoded).unwrap(), text)


if __name__ == "__main__":
    unittest.main()
