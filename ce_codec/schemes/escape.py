"""
Structured-escape codecs: Unicode \\uXXXX, Quoted-Printable, URL percent
encoding and a simplified Punycode.

Decoders are explicit left-to-right scanners. Each `_scan_*` helper looks at
one position and returns (consumed, token), token being None when the text at
that position is not an escape.
"""

from typing import List, Optional, Tuple

from ..engine import CodecStrategy, register_codec
from ..errors import CodecError, CodecErrorKind, join_utf16, utf8_bytes, utf8_text

HEX_DIGITS = "0123456789abcdefABCDEF"
BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _utf16_units(text: str) -> List[int]:
    raw = text.encode("utf-16-be", "surrogatepass")
    return [int.from_bytes(raw[i:i + 2], "big") for i in range(0, len(raw), 2)]


def _scan_hex(text: str, start: int, width: int) -> Optional[int]:
    digits = text[start:start + width]
    if len(digits) == width and all(c in HEX_DIGITS for c in digits):
        return int(digits, 16)
    return None


# ==========================================
#  Unicode escapes
# ==========================================

@register_codec
class UnicodeEscapeCodec(CodecStrategy):
    name = "unicode"
    title = "Unicode"
    description = "\\uXXXX escape per UTF-16 code unit (surrogate pairs for astral chars)."
    example = ("Hello", "\\u0048\\u0065\\u006c\\u006c\\u006f")

    def encode(self, text: str) -> str:
        return "".join(f"\\u{unit:04x}" for unit in _utf16_units(text))

    def _scan_escape(self, text: str, start: int) -> Tuple[int, Optional[str]]:
        if text.startswith("\\u", start):
            unit = _scan_hex(text, start + 2, 4)
            if unit is not None:
                return 6, chr(unit)
        return 1, None

    def decode(self, text: str) -> str:
        pieces = []
        i = 0
        while i < len(text):
            consumed, token = self._scan_escape(text, i)
            pieces.append(text[i] if token is None else token)
            i += consumed
        return join_utf16(pieces)


# ==========================================
#  Quoted-Printable
# ==========================================

@register_codec
class QuotedPrintableCodec(CodecStrategy):
    """
    Quoted-Printable over UTF-8 bytes.

    Printable ASCII except '=' goes out literally, every other byte as =XX.
    A space at the very end becomes =20. The decoder collects raw bytes and
    UTF-8 decodes once at the end, so a character split between an escape
    and literal text still reassembles.
    """

    name = "quoted"
    title = "Quoted-Printable"
    description = "MIME Quoted-Printable: =XX for non-printable bytes."
    example = ("你好世界", "=E4=BD=A0=E5=A5=BD=E4=B8=96=E7=95=8C")

    def encode(self, text: str) -> str:
        result = []
        for byte in utf8_bytes(text):
            if 0x20 <= byte <= 0x7E and byte != 0x3D:
                result.append(chr(byte))
            else:
                result.append(f"={byte:02X}")
        if result and result[-1] == " ":
            result[-1] = "=20"
        return "".join(result)

    def _scan_escape(self, text: str, start: int) -> Tuple[int, Optional[int]]:
        if text[start] == "=":
            byte = _scan_hex(text, start + 1, 2)
            if byte is not None:
                return 3, byte
        return 1, None

    def decode(self, text: str) -> str:
        decoded = bytearray()
        i = 0
        while i < len(text):
            consumed, byte = self._scan_escape(text, i)
            if byte is None:
                decoded.extend(utf8_bytes(text[i]))
            else:
                decoded.append(byte)
            i += consumed
        return utf8_text(decoded)


# ==========================================
#  URL percent encoding
# ==========================================

URL_UNRESERVED = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_.!~*'()"
)


@register_codec
class UrlCodec(CodecStrategy):
    name = "url"
    title = "URL"
    description = "Percent-encoding of everything outside A-Z a-z 0-9 - _ . ! ~ * ' ( )"
    example = ("Hello World!", "Hello%20World!")

    def encode(self, text: str) -> str:
        result = []
        for byte in utf8_bytes(text):
            char = chr(byte)
            result.append(char if char in URL_UNRESERVED else f"%{byte:02X}")
        return "".join(result)

    def decode(self, text: str) -> str:
        decoded = bytearray()
        i = 0
        while i < len(text):
            if text[i] == "%":
                byte = _scan_hex(text, i + 1, 2)
                if byte is None:
                    raise CodecError(
                        CodecErrorKind.INVALID_ENCODING,
                        f"Malformed escape {text[i:i + 3]!r} at offset {i}",
                    )
                decoded.append(byte)
                i += 3
            else:
                decoded.extend(utf8_bytes(text[i]))
                i += 1
        return utf8_text(decoded)


# ==========================================
#  Punycode (simplified, NOT RFC 3492)
# ==========================================

def _to_base36(value: int) -> str:
    digits = []
    while True:
        value, digit = divmod(value, 36)
        digits.append(BASE36_DIGITS[digit])
        if value == 0:
            return "".join(reversed(digits))


@register_codec
class SimplePunycodeCodec(CodecStrategy):
    """
    Each UTF-16 code unit above 127 becomes its own 'xn--' + base-36 token.

    Decoding greedily takes the longest [a-z0-9] run after 'xn--', so two
    adjacent tokens ('xn--ll7xn--rmd') do not split where they were joined.
    This is deliberately not real Punycode and is not always reversible.
    """

    name = "punycode"
    title = "Punycode"
    description = "Simplified: xn--<base36 code unit> per non-ASCII char (not RFC 3492)."
    example = ("测试", "xn--ll7xn--rmd")

    PREFIX = "xn--"
    TOKEN_CHARS = frozenset(BASE36_DIGITS)

    def encode(self, text: str) -> str:
        return "".join(
            f"{self.PREFIX}{_to_base36(unit)}" if unit > 127 else chr(unit)
            for unit in _utf16_units(text)
        )

    def _scan_token(self, text: str, start: int) -> Tuple[int, Optional[str]]:
        if not text.startswith(self.PREFIX, start):
            return 1, None
        end = start + len(self.PREFIX)
        while end < len(text) and text[end] in self.TOKEN_CHARS:
            end += 1
        run = text[start + len(self.PREFIX):end]
        if not run:
            return 1, None
        # Code point is truncated to 16 bits, like a UTF-16 code unit
        return end - start, chr(int(run, 36) & 0xFFFF)

    def decode(self, text: str) -> str:
        pieces = []
        i = 0
        while i < len(text):
            consumed, token = self._scan_token(text, i)
            pieces.append(text[i] if token is None else token)
            i += consumed
        return join_utf16(pieces)
