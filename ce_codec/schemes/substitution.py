"""
Substitution codecs: ROT13, Morse and HTML entities.

Pure table lookups. None of these are secure; ROT13 and Morse only hide
text from a casual glance.
"""

import re

from ..engine import CodecStrategy, register_codec


@register_codec
class Rot13Codec(CodecStrategy):
    """
    ROT13 letter substitution.

    Each ASCII letter moves 13 places within its own case; anything else
    passes through. ROT13 is its own inverse: encode and decode are the
    same operation.
    """

    name = "rot13"
    title = "ROT13"
    description = "Rotate ASCII letters by 13 places (self-inverse)."
    example = ("Hello", "Uryyb")

    def _rot13(self, text: str) -> str:
        result = []
        for char in text:
            if 'a' <= char <= 'z':
                result.append(chr((ord(char) - ord('a') + 13) % 26 + ord('a')))
            elif 'A' <= char <= 'Z':
                result.append(chr((ord(char) - ord('A') + 13) % 26 + ord('A')))
            else:
                result.append(char)
        return ''.join(result)

    def encode(self, text: str) -> str:
        return self._rot13(text)

    def decode(self, text: str) -> str:
        return self._rot13(text)


MORSE_CODE = {
    'A': '.-', 'B': '-...', 'C': '-.-.', 'D': '-..', 'E': '.', 'F': '..-.',
    'G': '--.', 'H': '....', 'I': '..', 'J': '.---', 'K': '-.-', 'L': '.-..',
    'M': '--', 'N': '-.', 'O': '---', 'P': '.--.', 'Q': '--.-', 'R': '.-.',
    'S': '...', 'T': '-', 'U': '..-', 'V': '...-', 'W': '.--', 'X': '-..-',
    'Y': '-.--', 'Z': '--..',
    '0': '-----', '1': '.----', '2': '..---', '3': '...--', '4': '....-',
    '5': '.....', '6': '-....', '7': '--...', '8': '---..', '9': '----.',
    ' ': '/',
    '.': '.-.-.-', ',': '--..--', '?': '..--..', "'": '.----.', '!': '-.-.--',
    '/': '-..-.', '(': '-.--.', ')': '-.--.-', '&': '.-...', ':': '---...',
    ';': '-.-.-.', '=': '-...-', '+': '.-.-.', '-': '-....-', '_': '..--.-',
    '"': '.-..-.', '$': '...-..-', '@': '.--.-.',
}


@register_codec
class MorseCodec(CodecStrategy):
    name = "morse"
    title = "Morse"
    description = "International Morse; letters split by ' ', words by '/'."
    example = ("SOS", "... --- ...")

    def __init__(self):
        self.reverse = {code: char for char, code in MORSE_CODE.items()}

    def encode(self, text: str) -> str:
        # Characters without a code pass through untouched
        return ' '.join(MORSE_CODE.get(char, char) for char in text.upper())

    def decode(self, text: str) -> str:
        return ''.join(self.reverse.get(token, token) for token in text.split(' '))


HTML_ENTITIES = {
    '&': '&amp;',
    '<': '&lt;',
    '>': '&gt;',
    '"': '&quot;',
    "'": '&#39;',
    ' ': '&nbsp;',
}

ENTITY_PATTERN = re.compile(r'&[a-zA-Z0-9#]+;')


@register_codec
class HtmlCodec(CodecStrategy):
    """
    Escapes only & < > " ' and space. Decoding reverses exactly those six
    entities; any other entity-looking run such as &copy; is left as is.
    """

    name = "html"
    title = "HTML"
    description = "Six HTML entities: &amp; &lt; &gt; &quot; &#39; &nbsp;"
    example = ("<script>", "&lt;script&gt;")

    def __init__(self):
        self.reverse = {entity: char for char, entity in HTML_ENTITIES.items()}

    def encode(self, text: str) -> str:
        return ''.join(HTML_ENTITIES.get(char, char) for char in text)

    def decode(self, text: str) -> str:
        return ENTITY_PATTERN.sub(lambda m: self.reverse.get(m.group(0), m.group(0)), text)
