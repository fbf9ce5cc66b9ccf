"""
Base58: the whole UTF-8 buffer is read as one big-endian unsigned integer
and rewritten in base 58. Leading zero bytes carry no numeric weight, so
each one is kept as a leading alphabet[0] ('1') character instead.
"""

from ..engine import CodecStrategy, register_codec
from ..errors import invalid_character, utf8_bytes, utf8_text


def _count_leading(seq, item) -> int:
    count = 0
    for x in seq:
        if x != item:
            break
        count += 1
    return count


@register_codec
class Base58Codec(CodecStrategy):
    name = "base58"
    title = "Base58"
    description = "Bitcoin Base58 (no 0 O I l); leading zero bytes -> leading '1'."
    example = ("Hello", "9Ajdvzr")

    ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

    def __init__(self):
        self.char_map = {char: i for i, char in enumerate(self.ALPHABET)}

    def encode(self, text: str) -> str:
        data = utf8_bytes(text)
        num = int.from_bytes(data, byteorder="big")
        base = len(self.ALPHABET)
        result = []
        while num > 0:
            num, digit = divmod(num, base)
            result.append(self.ALPHABET[digit])
        result.extend(self.ALPHABET[0] * _count_leading(data, 0))
        return "".join(reversed(result)) or self.ALPHABET[0]

    def decode(self, text: str) -> str:
        clean = text.strip()
        num = 0
        base = len(self.ALPHABET)
        for c in clean:
            if c not in self.char_map:
                raise invalid_character(c, "Base58")
            num = num * base + self.char_map[c]
        length = (num.bit_length() + 7) // 8
        body = num.to_bytes(length, byteorder="big")
        return utf8_text(b"\0" * _count_leading(clean, self.ALPHABET[0]) + body)
