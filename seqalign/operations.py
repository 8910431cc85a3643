from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, Tuple, Union


class MalformedOperations(ValueError):
    """Raised when an operation sequence cannot be replayed against its inputs."""


class Operation(str, Enum):
    MATCH = "M"
    CONVERT = "C"
    INSERT = "I"
    DELETE = "D"

    @property
    def consumes_a(self) -> bool:
        return self is not Operation.INSERT

    @property
    def consumes_b(self) -> bool:
        return self is not Operation.DELETE


GAP = "-"

GLYPHS: Dict[Operation, str] = {
    Operation.MATCH: "|",
    Operation.CONVERT: "*",
    Operation.INSERT: " ",
    Operation.DELETE: " ",
}

COSTS: Dict[Operation, int] = {
    Operation.MATCH: 0,
    Operation.CONVERT: 1,
    Operation.INSERT: 1,
    Operation.DELETE: 1,
}

# Order in which tied optimal steps are taken during traceback.
TRACEBACK_PRECEDENCE: Tuple[Operation, ...] = (
    Operation.DELETE,
    Operation.INSERT,
    Operation.MATCH,
    Operation.CONVERT,
)

OperationsLike = Union[str, Iterable[Union[str, Operation]]]


def parse_operations(value: OperationsLike) -> Tuple[Operation, ...]:
    parsed = []
    for position, tag in enumerate(value):
        try:
            parsed.append(Operation(tag))
        except ValueError as exc:
            raise MalformedOperations(
                f"Unknown operation {tag!r} at position {position}; expected one of M, C, I, D"
            ) from exc
    return tuple(parsed)


def format_operations(operations: OperationsLike) -> str:
    return "".join(op.value for op in parse_operations(operations))


def consumed_lengths(operations: OperationsLike) -> Tuple[int, int]:
    """Number of symbols the operations take from the first and second sequence."""

    len_a = 0
    len_b = 0
    for op in parse_operations(operations):
        if op.consumes_a:
            len_a += 1
        if op.consumes_b:
            len_b += 1
    return len_a, len_b


def operations_cost(operations: OperationsLike) -> int:
    return sum(COSTS[op] for op in parse_operations(operations))
