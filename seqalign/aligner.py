"""Unit-cost edit distance with a deterministic traceback.

The distance table is a numpy integer grid of shape ``(n + 1, m + 1)`` where
cell ``(i, j)`` holds the number of edits needed to turn the first ``i``
symbols of ``seq_a`` into the first ``j`` symbols of ``seq_b``. When several
optimal steps explain a cell, traceback follows ``TRACEBACK_PRECEDENCE``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence, Tuple

import numpy as np

from .operations import Operation, TRACEBACK_PRECEDENCE, format_operations

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlignmentResult:
    distance: int
    operations: Tuple[Operation, ...]

    @property
    def operation_string(self) -> str:
        return format_operations(self.operations)

    @property
    def counts(self) -> Dict[str, int]:
        counts = {op.value: 0 for op in Operation}
        for op in self.operations:
            counts[op.value] += 1
        return counts

    @property
    def identity(self) -> float:
        if not self.operations:
            return 1.0
        return self.counts[Operation.MATCH.value] / len(self.operations)


def build_distance_table(seq_a: Sequence, seq_b: Sequence) -> np.ndarray:
    n = len(seq_a)
    m = len(seq_b)
    table = np.zeros((n + 1, m + 1), dtype=np.int64)
    table[0, :] = np.arange(m + 1)
    table[:, 0] = np.arange(n + 1)

    previous = table[0].tolist()
    for i in range(1, n + 1):
        a_symbol = seq_a[i - 1]
        current = [i] + [0] * m
        for j in range(1, m + 1):
            if a_symbol == seq_b[j - 1]:
                current[j] = previous[j - 1]
            else:
                current[j] = 1 + min(previous[j - 1], current[j - 1], previous[j])
        table[i, :] = current
        previous = current
    return table


def _step_rules(table: np.ndarray, seq_a: Sequence, seq_b: Sequence) -> Dict[Operation, Callable[[int, int], bool]]:
    return {
        Operation.DELETE: lambda i, j: i > 0 and table[i, j] == table[i - 1, j] + 1,
        Operation.INSERT: lambda i, j: j > 0 and table[i, j] == table[i, j - 1] + 1,
        Operation.MATCH: lambda i, j: i > 0 and j > 0 and seq_a[i - 1] == seq_b[j - 1],
        Operation.CONVERT: lambda i, j: i > 0 and j > 0 and table[i, j] == table[i - 1, j - 1] + 1,
    }


def traceback(table: np.ndarray, seq_a: Sequence, seq_b: Sequence) -> Tuple[Operation, ...]:
    rules = _step_rules(table, seq_a, seq_b)
    i = len(seq_a)
    j = len(seq_b)
    steps: List[Operation] = []

    while i > 0 or j > 0:
        for op in TRACEBACK_PRECEDENCE:
            if rules[op](i, j):
                break
        else:
            raise RuntimeError(f"Traceback failed at cell ({i}, {j})")
        steps.append(op)
        if op.consumes_a:
            i -= 1
        if op.consumes_b:
            j -= 1

    steps.reverse()
    return tuple(steps)


def align(seq_a: Sequence, seq_b: Sequence) -> AlignmentResult:
    table = build_distance_table(seq_a, seq_b)
    distance = int(table[len(seq_a), len(seq_b)])
    operations = traceback(table, seq_a, seq_b)
    logger.debug(
        "Aligned %d x %d symbols: distance=%d operations=%d",
        len(seq_a),
        len(seq_b),
        distance,
        len(operations),
    )
    return AlignmentResult(distance=distance, operations=operations)


def edit_distance(seq_a: Sequence, seq_b: Sequence) -> int:
    """Distance only, keeping two rows of the table instead of the full grid."""

    if len(seq_b) > len(seq_a):
        seq_a, seq_b = seq_b, seq_a
    m = len(seq_b)
    previous = list(range(m + 1))
    for i in range(1, len(seq_a) + 1):
        a_symbol = seq_a[i - 1]
        current = [i] + [0] * m
        for j in range(1, m + 1):
            if a_symbol == seq_b[j - 1]:
                current[j] = previous[j - 1]
            else:
                current[j] = 1 + min(previous[j - 1], current[j - 1], previous[j])
        previous = current
    return previous[m]
