"""
Bit-packing codecs: Base64, Base32 and Base85 (ASCII85 without delimiters).

Each one slices the UTF-8 bytes of the input into fixed bit windows and maps
every window through a fixed alphabet.
"""

import base64
import binascii

from ..engine import CodecStrategy, register_codec
from ..errors import CodecError, CodecErrorKind, invalid_character, utf8_bytes, utf8_text


@register_codec
class Base64Codec(CodecStrategy):
    name = "base64"
    title = "Base64"
    description = "RFC 4648 Base64 over UTF-8 bytes, '=' padded."
    example = ("Hello World!", "SGVsbG8gV29ybGQh")

    def encode(self, text: str) -> str:
        return base64.b64encode(utf8_bytes(text)).decode("ascii")

    def decode(self, text: str) -> str:
        clean = "".join(text.split())
        if len(clean) % 4 == 1:
            raise CodecError(CodecErrorKind.INVALID_ENCODING, f"Base64 length {len(clean)} is not valid")
        try:
            raw = base64.b64decode(clean + "=" * (-len(clean) % 4), validate=True)
        except (binascii.Error, ValueError) as e:
            raise CodecError(CodecErrorKind.INVALID_ENCODING, f"Malformed Base64: {e}") from e
        return utf8_text(raw)


@register_codec
class Base32Codec(CodecStrategy):
    name = "base32"
    title = "Base32"
    description = "RFC 4648 Base32 (A-Z 2-7), padded to a multiple of 8 chars."
    example = ("Hello", "JBSWY3DP")

    ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

    def __init__(self):
        self.char_map = {char: i for i, char in enumerate(self.ALPHABET)}

    def encode(self, text: str) -> str:
        result = []
        bits = 0
        value = 0
        for byte in utf8_bytes(text):
            value = ((value << 8) | byte) & 0xFFFF
            bits += 8
            while bits >= 5:
                bits -= 5
                result.append(self.ALPHABET[(value >> bits) & 31])
        if bits > 0:
            result.append(self.ALPHABET[(value << (5 - bits)) & 31])
        result.extend("=" * (-len(result) % 8))
        return "".join(result)

    def decode(self, text: str) -> str:
        clean = "".join(text.split()).rstrip("=")
        decoded = bytearray()
        bits = 0
        value = 0
        for char in clean:
            index = self.char_map.get(char.upper())
            if index is None:
                raise invalid_character(char, "Base32")
            value = ((value << 5) | index) & 0xFFFF
            bits += 5
            if bits >= 8:
                bits -= 8
                decoded.append((value >> bits) & 255)
        return utf8_text(decoded)


@register_codec
class Base85Codec(CodecStrategy):
    """
    ASCII85 body encoding.

    Every 4-byte big-endian group becomes five characters chr(33 + digit).
    A full all-zero group collapses to 'z'. A short final group is padded
    with zero bytes and its output trimmed to len(group) + 1 characters, so
    the padding never reaches the wire and 'z' never stands for it.
    """

    name = "base85"
    title = "Base85"
    description = "ASCII85: 4 bytes -> 5 chars in '!'..'u', 'z' for a zero group."
    example = ("Man ", "9jqo^")

    OFFSET = 33
    ZERO_GROUP = "z"

    def _encode_group(self, value: int) -> str:
        chars = []
        for _ in range(5):
            value, digit = divmod(value, 85)
            chars.append(chr(self.OFFSET + digit))
        return "".join(reversed(chars))

    def encode(self, text: str) -> str:
        data = utf8_bytes(text)
        result = []
        for i in range(0, len(data), 4):
            group = data[i:i + 4]
            size = len(group)
            value = int.from_bytes(group + b"\0" * (4 - size), byteorder="big")
            if size == 4 and value == 0:
                result.append(self.ZERO_GROUP)
            else:
                result.append(self._encode_group(value)[:size + 1])
        return "".join(result)

    def decode(self, text: str) -> str:
        clean = text.strip()
        decoded = bytearray()
        i = 0
        while i < len(clean):
            if clean[i] == self.ZERO_GROUP:
                decoded.extend(b"\0\0\0\0")
                i += 1
                continue
            chunk = clean[i:i + 5]
            digits = []
            for char in chunk:
                digit = ord(char) - self.OFFSET
                if not 0 <= digit < 85:
                    raise invalid_character(char, "Base85")
                digits.append(digit)
            if len(digits) == 1:
                raise CodecError(CodecErrorKind.INVALID_LENGTH, "Base85 final group needs at least 2 chars")
            missing = 5 - len(digits)
            value = 0
            for digit in digits + [84] * missing:
                value = value * 85 + digit
            if value > 0xFFFFFFFF:
                raise CodecError(CodecErrorKind.INVALID_ENCODING, f"Base85 group {chunk!r} overflows 32 bits")
            decoded.extend(value.to_bytes(4, byteorder="big")[:4 - missing])
            i += len(chunk)
        return utf8_text(decoded)
