"""Codec failure taxonomy."""

from enum import Enum
from typing import List


class CodecErrorKind(Enum):
    INVALID_CHARACTER = "invalid_character"
    INVALID_LENGTH = "invalid_length"
    INVALID_ENCODING = "invalid_encoding"
    INVALID_NUMBER = "invalid_number"
    INVALID_UTF8_SEQUENCE = "invalid_utf8_sequence"


class CodecError(ValueError):
    """
    Raised by a codec when its input cannot be transformed.

    Subclasses ValueError so callers that only care about "bad input"
    can keep catching the builtin.
    """

    def __init__(self, kind: CodecErrorKind, detail: str):
        super().__init__(detail)
        self.kind = kind
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.detail}"


def invalid_character(char: str, codec: str) -> CodecError:
    return CodecError(CodecErrorKind.INVALID_CHARACTER, f"Bad {codec} char {char!r}")


def utf8_bytes(text: str) -> bytes:
    """UTF-8 encode text, rejecting unpaired surrogates."""
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise CodecError(CodecErrorKind.INVALID_UTF8_SEQUENCE, f"Cannot encode: {e.reason}") from e


def utf8_text(data: bytes) -> str:
    """Strict UTF-8 decode of codec output bytes."""
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as e:
        raise CodecError(
            CodecErrorKind.INVALID_UTF8_SEQUENCE,
            f"Decoded bytes are not UTF-8 (byte {e.start}: {e.reason})",
        ) from e


def join_utf16(pieces: List[str]) -> str:
    """Join decoded pieces, pairing up surrogate halves into real characters."""
    raw = "".join(pieces).encode("utf-16-be", "surrogatepass")
    try:
        return raw.decode("utf-16-be")
    except UnicodeDecodeError as e:
        raise CodecError(CodecErrorKind.INVALID_ENCODING, f"Unpaired surrogate in decoded text: {e.reason}") from e
