from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from .errors import CodecError, CodecErrorKind

# ==========================================
#  IDENTIFIERS
# ==========================================

class CodecId(Enum):
    """Closed set of codecs. The value is the wire id used by the CLI."""

    BASE64 = "base64"
    URL = "url"
    HEX = "hex"
    UNICODE = "unicode"
    UTF8 = "utf8"
    ASCII = "ascii"
    BASE32 = "base32"
    BASE58 = "base58"
    BASE85 = "base85"
    BINARY = "binary"
    OCTAL = "octal"
    HTML = "html"
    MORSE = "morse"
    ROT13 = "rot13"
    PUNYCODE = "punycode"
    QUOTED = "quoted"
    BASE = "base"


class Direction(Enum):
    ENCODE = "encode"
    DECODE = "decode"


@dataclass(frozen=True)
class CodecOutcome:
    """Result of one codec call: either text or an error kind with detail, never both."""

    text: Optional[str] = None
    kind: Optional[CodecErrorKind] = None
    detail: str = ""

    @classmethod
    def success(cls, text: str) -> "CodecOutcome":
        return cls(text=text)

    @classmethod
    def failure(cls, error: CodecError) -> "CodecOutcome":
        return cls(kind=error.kind, detail=error.detail)

    @property
    def ok(self) -> bool:
        return self.kind is None

    def unwrap(self) -> str:
        if not self.ok:
            raise CodecError(self.kind, self.detail)
        return self.text

# ==========================================
#  FRAMEWORK: Abstract Base Class & Registry
# ==========================================

class CodecStrategy(ABC):
    """Abstract base class that all codecs must implement."""

    # (plain, encoded) pair shown by --list
    example: Tuple[str, str] = ("", "")

    @property
    @abstractmethod
    def name(self) -> str:
        """The CodecId value this codec answers to."""
        pass

    @property
    @abstractmethod
    def title(self) -> str:
        """Display name, e.g. 'Quoted-Printable'."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Short description for help text."""
        pass

    @abstractmethod
    def encode(self, text: str) -> str:
        pass

    @abstractmethod
    def decode(self, text: str) -> str:
        pass

    def run(self, direction: Direction, text: str) -> str:
        if direction is Direction.ENCODE:
            return self.encode(text)
        return self.decode(text)


CODEC_REGISTRY: Dict[CodecId, CodecStrategy] = {}


def register_codec(cls):
    """Decorator to auto-register codecs."""
    codec = cls()
    codec_id = CodecId(codec.name)  # ValueError for names outside the closed set
    if codec_id in CODEC_REGISTRY:
        raise ValueError(f"Codec '{codec.name}' registered twice")
    CODEC_REGISTRY[codec_id] = codec
    return cls


def check_registry():
    """Fail loudly if any CodecId has no implementation."""
    missing = [c.value for c in CodecId if c not in CODEC_REGISTRY]
    if missing:
        raise RuntimeError(f"No codec registered for: {', '.join(missing)}")


def lookup(codec_id: CodecId) -> CodecStrategy:
    return CODEC_REGISTRY[codec_id]


def resolve_codec(name: str) -> Optional[CodecId]:
    """
    Match a user-supplied name against codec ids and display names.

    Case-insensitive, so "HEX", "hex" and "Quoted-Printable" all resolve.
    Returns None when nothing matches.
    """
    wanted = name.strip().lower()
    for codec_id in CodecId:
        codec = CODEC_REGISTRY.get(codec_id)
        if wanted == codec_id.value or (codec is not None and wanted == codec.title.lower()):
            return codec_id
    return None


def run_codec(codec_id: CodecId, direction: Direction, text: str) -> CodecOutcome:
    """Run one codec call, turning a raised CodecError into a failed outcome."""
    try:
        return CodecOutcome.success(lookup(codec_id).run(direction, text))
    except CodecError as e:
        return CodecOutcome.failure(e)
