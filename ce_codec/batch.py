"""
Multiline batch mode.

Every '\\n'-separated line goes through the codec on its own. Blank lines
come out empty without touching the codec, and a line the codec rejects is
replaced by an "[invalid input: <line>]" marker instead of failing the
whole batch. The output always has as many lines as the input.
"""

from dataclasses import dataclass
from typing import List

from .engine import CodecId, CodecOutcome, Direction, run_codec
from .log import log_warn

INVALID_INPUT_MARKER = "[invalid input: {line}]"


@dataclass(frozen=True)
class TransformOptions:
    multiline: bool = False


@dataclass(frozen=True)
class LineOutcome:
    line: str
    outcome: CodecOutcome

    def render(self) -> str:
        if self.outcome.ok:
            return self.outcome.text
        return INVALID_INPUT_MARKER.format(line=self.line)


def transform_lines(codec_id: CodecId, direction: Direction, text: str) -> List[LineOutcome]:
    results = []
    for lineno, line in enumerate(text.split("\n"), start=1):
        if not line.strip():
            results.append(LineOutcome(line, CodecOutcome.success("")))
            continue
        outcome = run_codec(codec_id, direction, line)
        if not outcome.ok:
            log_warn(f"{codec_id.value} {direction.value} failed on line {lineno}: {outcome.detail}")
        results.append(LineOutcome(line, outcome))
    return results


def transform(codec_id: CodecId, direction: Direction, text: str,
              options: TransformOptions = TransformOptions()) -> CodecOutcome:
    """
    Run one codec over text, per line when options.multiline is set.

    In single-line mode the codec outcome is returned as is, error included.
    In multiline mode the result is always a success; failed lines carry
    their marker in place.
    """
    if not options.multiline:
        return run_codec(codec_id, direction, text)
    lines = transform_lines(codec_id, direction, text)
    return CodecOutcome.success("\n".join(line.render() for line in lines))
