"""Edit-distance alignment of symbol sequences with a three-line text view."""

from .aligner import AlignmentResult, align, build_distance_table, edit_distance, traceback
from .operations import (
    GAP,
    GLYPHS,
    TRACEBACK_PRECEDENCE,
    MalformedOperations,
    Operation,
    format_operations,
    parse_operations,
)
from .params import AlignParams
from .renderer import AlignmentView, print_alignment, render

__all__ = [
    "AlignParams",
    "AlignmentResult",
    "AlignmentView",
    "GAP",
    "GLYPHS",
    "MalformedOperations",
    "Operation",
    "TRACEBACK_PRECEDENCE",
    "align",
    "build_distance_table",
    "edit_distance",
    "format_operations",
    "parse_operations",
    "print_alignment",
    "render",
    "traceback",
]
