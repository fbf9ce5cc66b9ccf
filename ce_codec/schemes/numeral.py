"""
Numeral codecs: each byte (or character) is written out as a number.

hex, utf8, binary and octal work on UTF-8 bytes; ascii works on code points;
base is a plain decimal <-> hexadecimal number converter.
"""

from typing import List

from ..engine import CodecStrategy, register_codec
from ..errors import CodecError, CodecErrorKind, invalid_character, join_utf16, utf8_bytes, utf8_text

HEX_DIGITS = "0123456789abcdefABCDEF"
OCTAL_DIGITS = "01234567"
RADIX_DIGITS = {2: "01", 8: OCTAL_DIGITS, 16: HEX_DIGITS}


def _parse_byte(token: str, radix: int, codec: str) -> int:
    # int() alone would also take "0x1f", "+1" and "1_0"
    if not token or any(c not in RADIX_DIGITS[radix] for c in token):
        raise CodecError(CodecErrorKind.INVALID_NUMBER, f"{codec} token {token!r} is not a number")
    value = int(token, radix)
    if not 0 <= value <= 255:
        raise CodecError(CodecErrorKind.INVALID_NUMBER, f"{codec} token {token!r} is out of byte range")
    return value


@register_codec
class HexCodec(CodecStrategy):
    name = "hex"
    title = "HEX"
    description = "Two lowercase hex digits per UTF-8 byte."
    example = ("Hello", "48656c6c6f")

    def encode(self, text: str) -> str:
        return "".join(f"{b:02x}" for b in utf8_bytes(text))

    def decode(self, text: str) -> str:
        clean = "".join(text.split())
        for char in clean:
            if char not in HEX_DIGITS:
                raise invalid_character(char, "hex")
        # Odd trailing nibble is dropped
        pairs = range(0, len(clean) - 1, 2)
        return utf8_text(bytes(int(clean[i:i + 2], 16) for i in pairs))


@register_codec
class Utf8Codec(CodecStrategy):
    name = "utf8"
    title = "UTF-8"
    description = "Space separated hex listing of the UTF-8 bytes."
    example = ("Hello", "48 65 6c 6c 6f")

    def encode(self, text: str) -> str:
        return " ".join(f"{b:02x}" for b in utf8_bytes(text))

    def decode(self, text: str) -> str:
        return utf8_text(bytes(_parse_byte(token, 16, "UTF-8") for token in text.split()))


@register_codec
class BinaryCodec(CodecStrategy):
    name = "binary"
    title = "Binary"
    description = "Eight 0/1 digits per UTF-8 byte, space separated."
    example = ("Hi", "01001000 01101001")

    def encode(self, text: str) -> str:
        return " ".join(f"{b:08b}" for b in utf8_bytes(text))

    def decode(self, text: str) -> str:
        return utf8_text(bytes(_parse_byte(token, 2, "binary") for token in text.split()))


@register_codec
class OctalCodec(CodecStrategy):
    name = "octal"
    title = "Octal"
    description = "C-style \\NNN octal escape per UTF-8 byte."
    example = ("Hi", "\\110\\151")

    def encode(self, text: str) -> str:
        return "".join(f"\\{b:03o}" for b in utf8_bytes(text))

    def _scan(self, text: str, start: int):
        """Return (consumed, digits) for an escape at start, or (1, None)."""
        end = start + 1
        while end < len(text) and end - start <= 3 and text[end] in OCTAL_DIGITS:
            end += 1
        if end == start + 1:
            return 1, None
        return end - start, text[start + 1:end]

    def decode(self, text: str) -> str:
        decoded = bytearray()
        i = 0
        while i < len(text):
            if text[i] != "\\":
                i += 1
                continue
            consumed, digits = self._scan(text, i)
            if digits is not None:
                decoded.append(_parse_byte(digits, 8, "octal"))
            i += consumed
        return utf8_text(decoded)


@register_codec
class AsciiCodec(CodecStrategy):
    name = "ascii"
    title = "ASCII"
    description = "Decimal code point per character, space separated."
    example = ("Hello", "72 101 108 108 111")

    def encode(self, text: str) -> str:
        return " ".join(str(ord(c)) for c in text)

    def decode(self, text: str) -> str:
        chars: List[str] = []
        for token in text.split():
            if not token.isdigit() or not token.isascii():
                raise CodecError(CodecErrorKind.INVALID_NUMBER, f"ASCII token {token!r} is not a number")
            code = int(token)
            if code > 0x10FFFF:
                raise CodecError(CodecErrorKind.INVALID_NUMBER, f"Code point {code} is out of range")
            chars.append(chr(code))
        # surrogate halves written as two numbers pair back up here
        return join_utf16(chars)


@register_codec
class RadixCodec(CodecStrategy):
    """Converts a decimal number to hexadecimal and back. Radix pair is fixed."""

    name = "base"
    title = "Base"
    description = "Number converter: decimal -> uppercase hex, hex (0x optional) -> decimal."
    example = ("255", "FF")

    FROM_BASE = 10
    TO_BASE = 16

    def encode(self, text: str) -> str:
        clean = text.strip()
        digits = clean[1:] if clean[:1] in "+-" else clean
        if not digits or not (digits.isdigit() and digits.isascii()):
            raise CodecError(CodecErrorKind.INVALID_NUMBER, f"{clean!r} is not a decimal number")
        return format(int(clean, self.FROM_BASE), "X")

    def decode(self, text: str) -> str:
        clean = text.strip()
        if clean[:2].lower() == "0x":
            clean = clean[2:]
        clean = "".join(clean.split())
        if not clean:
            raise CodecError(CodecErrorKind.INVALID_CHARACTER, "No hex digits to convert")
        for char in clean:
            if char not in HEX_DIGITS:
                raise invalid_character(char, "hex")
        return str(int(clean, self.TO_BASE))
