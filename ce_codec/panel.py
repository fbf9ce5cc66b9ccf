"""
Two-panel live transform.

One panel holds plain text, the other its encoded form. Editing either side
recomputes the opposite side through the selected codec. A failed transform
only flags the panel that was edited; the other panel keeps its last good
content.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .batch import TransformOptions, transform
from .engine import CodecId, CodecOutcome, Direction, lookup
from .log import log_info


class Role(Enum):
    PLAIN = "plain"
    ENCODED = "encoded"

    def flipped(self) -> "Role":
        return Role.ENCODED if self is Role.PLAIN else Role.PLAIN


class Side(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass
class PanelState:
    left_text: str = ""
    right_text: str = ""
    left_role: Role = Role.PLAIN
    left_error: Optional[str] = None
    right_error: Optional[str] = None

    @property
    def right_role(self) -> Role:
        return self.left_role.flipped()


def describe_failure(codec_id: CodecId, outcome: CodecOutcome) -> str:
    return f"{lookup(codec_id).title}: {outcome.detail}"


class TransformPanel:
    """
    Keeps a plain-text side and an encoded side in sync.

    auto_mode: recompute the other side on every edit. When off, call
        convert_left_to_right() / convert_right_to_left() explicitly.
    auto_switch: recompute when the codec or multiline setting changes.
    """

    def __init__(self, codec: CodecId = CodecId.BASE64, multiline: bool = False,
                 auto_mode: bool = True, auto_switch: bool = True):
        self.codec = codec
        self.options = TransformOptions(multiline=multiline)
        self.auto_mode = auto_mode
        self.auto_switch = auto_switch
        self.state = PanelState()

    def _role(self, side: Side) -> Role:
        return self.state.left_role if side is Side.LEFT else self.state.right_role

    def _text(self, side: Side) -> str:
        return self.state.left_text if side is Side.LEFT else self.state.right_text

    def _set_text(self, side: Side, text: str):
        if side is Side.LEFT:
            self.state.left_text = text
        else:
            self.state.right_text = text

    def _set_error(self, side: Side, error: Optional[str]):
        if side is Side.LEFT:
            self.state.left_error = error
        else:
            self.state.right_error = error

    def _propagate(self, source: Side) -> CodecOutcome:
        """Transform the source panel into the opposite one."""
        target = Side.RIGHT if source is Side.LEFT else Side.LEFT
        direction = Direction.ENCODE if self._role(source) is Role.PLAIN else Direction.DECODE
        outcome = transform(self.codec, direction, self._text(source), self.options)
        if outcome.ok:
            self._set_text(target, outcome.text)
            self._set_error(source, None)
            self._set_error(target, None)
        else:
            log_info(f"{self.codec.value} {direction.value} from {source.value} panel failed: {outcome.detail}")
            self._set_error(source, describe_failure(self.codec, outcome))
        return outcome

    def _edit(self, side: Side, text: str) -> Optional[CodecOutcome]:
        self._set_text(side, text)
        if not text.strip():
            target = Side.RIGHT if side is Side.LEFT else Side.LEFT
            self._set_text(target, "")
            self.state.left_error = None
            self.state.right_error = None
            return None
        if self.auto_mode:
            return self._propagate(side)
        return None

    def edit_left(self, text: str) -> Optional[CodecOutcome]:
        return self._edit(Side.LEFT, text)

    def edit_right(self, text: str) -> Optional[CodecOutcome]:
        return self._edit(Side.RIGHT, text)

    def convert_left_to_right(self) -> Optional[CodecOutcome]:
        if not self.state.left_text.strip():
            return None
        return self._propagate(Side.LEFT)

    def convert_right_to_left(self) -> Optional[CodecOutcome]:
        if not self.state.right_text.strip():
            return None
        return self._propagate(Side.RIGHT)

    def _refresh(self) -> Optional[CodecOutcome]:
        if not self.auto_switch:
            return None
        if self.state.left_text.strip():
            return self._propagate(Side.LEFT)
        if self.state.right_text.strip():
            return self._propagate(Side.RIGHT)
        return None

    def select_codec(self, codec: CodecId) -> Optional[CodecOutcome]:
        self.codec = codec
        return self._refresh()

    def set_multiline(self, enabled: bool) -> Optional[CodecOutcome]:
        self.options = TransformOptions(multiline=enabled)
        return self._refresh()

    def swap(self):
        s = self.state
        self.state = PanelState(
            left_text=s.right_text,
            right_text=s.left_text,
            left_role=s.left_role.flipped(),
            left_error=s.right_error,
            right_error=s.left_error,
        )

    def clear(self):
        self.state = PanelState(left_role=self.state.left_role)


def _run_all(direction: Direction, text: str, options: TransformOptions) -> List[Tuple[CodecId, CodecOutcome]]:
    if not text:
        return []
    return [(codec_id, transform(codec_id, direction, text, options)) for codec_id in CodecId]


def encode_all(text: str, options: TransformOptions = TransformOptions()) -> List[Tuple[CodecId, CodecOutcome]]:
    """Encode text with every codec; one codec failing does not stop the rest."""
    return _run_all(Direction.ENCODE, text, options)


def decode_all(text: str, options: TransformOptions = TransformOptions()) -> List[Tuple[CodecId, CodecOutcome]]:
    """Decode text with every codec; one codec failing does not stop the rest."""
    return _run_all(Direction.DECODE, text, options)
