"""ce-codec - text/binary codec engine with a two-panel live transform."""

__version__ = "1.0.0"

from .errors import CodecError, CodecErrorKind
from .engine import (
    CODEC_REGISTRY,
    CodecId,
    CodecOutcome,
    CodecStrategy,
    Direction,
    check_registry,
    lookup,
    register_codec,
    resolve_codec,
    run_codec,
)
from . import schemes
from .batch import INVALID_INPUT_MARKER, LineOutcome, TransformOptions, transform, transform_lines
from .panel import PanelState, Role, TransformPanel, decode_all, encode_all

check_registry()

__all__ = [
    "CodecError",
    "CodecErrorKind",
    "CODEC_REGISTRY",
    "CodecId",
    "CodecOutcome",
    "CodecStrategy",
    "Direction",
    "lookup",
    "register_codec",
    "resolve_codec",
    "run_codec",
    "INVALID_INPUT_MARKER",
    "LineOutcome",
    "TransformOptions",
    "transform",
    "transform_lines",
    "PanelState",
    "Role",
    "TransformPanel",
    "encode_all",
    "decode_all",
]
