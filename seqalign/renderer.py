from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence, TextIO, Tuple

from .operations import GAP, GLYPHS, MalformedOperations, OperationsLike, parse_operations


@dataclass(frozen=True)
class AlignmentView:
    top: str
    glyphs: str
    bottom: str

    def lines(self) -> Tuple[str, str, str]:
        return self.top, self.glyphs, self.bottom

    def blocks(self, width: int) -> List[Tuple[str, str, str]]:
        if width <= 0 or len(self.top) <= width:
            return [self.lines()]
        return [
            (self.top[start : start + width], self.glyphs[start : start + width], self.bottom[start : start + width])
            for start in range(0, len(self.top), width)
        ]

    def __len__(self) -> int:
        return len(self.top)

    def __str__(self) -> str:
        return "\n".join(self.lines())


def _column_symbol(symbol, side: str, position: int) -> str:
    text = str(symbol)
    if len(text) != 1:
        raise ValueError(
            f"Symbol {text!r} at position {position} of the {side} sequence does not fit a single display column"
        )
    return text


def render(seq_a: Sequence, seq_b: Sequence, operations: OperationsLike) -> AlignmentView:
    """Lay out both sequences column by column following ``operations``.

    Deletes put a gap on the bottom row, inserts a gap on the top row. The
    glyph row marks matches with ``|`` and conversions with ``*``.
    Every symbol must print as a single character so the three rows stay
    column-aligned; longer symbols raise ``ValueError``.
    """

    ops = parse_operations(operations)
    top: List[str] = []
    glyphs: List[str] = []
    bottom: List[str] = []
    a_idx = 0
    b_idx = 0

    for column, op in enumerate(ops):
        if op.consumes_a:
            if a_idx >= len(seq_a):
                raise MalformedOperations(
                    f"Operation {op.value!r} at column {column} reads past the end of the first sequence "
                    f"(length {len(seq_a)})"
                )
            top.append(_column_symbol(seq_a[a_idx], "first", a_idx))
            a_idx += 1
        else:
            top.append(GAP)
        if op.consumes_b:
            if b_idx >= len(seq_b):
                raise MalformedOperations(
                    f"Operation {op.value!r} at column {column} reads past the end of the second sequence "
                    f"(length {len(seq_b)})"
                )
            bottom.append(_column_symbol(seq_b[b_idx], "second", b_idx))
            b_idx += 1
        else:
            bottom.append(GAP)
        glyphs.append(GLYPHS[op])

    if a_idx != len(seq_a) or b_idx != len(seq_b):
        raise MalformedOperations(
            f"Operations consume {a_idx}/{len(seq_a)} symbols of the first sequence and "
            f"{b_idx}/{len(seq_b)} of the second"
        )

    return AlignmentView(top="".join(top), glyphs="".join(glyphs), bottom="".join(bottom))


def format_view(view: AlignmentView, line_width: int = 0) -> str:
    return "\n\n".join("\n".join(block) for block in view.blocks(line_width))


def print_alignment(
    seq_a: Sequence,
    seq_b: Sequence,
    operations: OperationsLike,
    *,
    line_width: int = 0,
    file: Optional[TextIO] = None,
) -> AlignmentView:
    view = render(seq_a, seq_b, operations)
    print(format_view(view, line_width), file=file if file is not None else sys.stdout)
    return view
