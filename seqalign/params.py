from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

AUTO_WIDTH_TOKEN = "auto"
DEFAULT_HEIGHT = 2.0
DEFAULT_DPI = 150


WidthArg = Union[float, str]


@dataclass(frozen=True)
class AlignParams:
    line_width: int = 0
    normalize_case: bool = False
    width: WidthArg = AUTO_WIDTH_TOKEN
    height: float = DEFAULT_HEIGHT
    dpi: int = DEFAULT_DPI

    @classmethod
    def from_cli_args(cls, args: Any) -> "AlignParams":
        return cls(
            line_width=to_int(args.line_width, min_value=0, name="line_width"),
            normalize_case=bool(args.upper),
            width=parse_width(args.width),
            height=to_float(args.height, positive=True, name="height"),
            dpi=to_int(args.dpi, positive=True, name="dpi"),
        )

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "AlignParams":
        def require(name: str, default: Any) -> Any:
            return payload.get(name, default)

        return cls(
            line_width=to_int(require("line_width", 0), min_value=0, name="line_width"),
            normalize_case=to_bool(require("normalize_case", False), name="normalize_case"),
            width=parse_width(require("width", AUTO_WIDTH_TOKEN)),
            height=to_float(require("height", DEFAULT_HEIGHT), positive=True, name="height"),
            dpi=to_int(require("dpi", DEFAULT_DPI), positive=True, name="dpi"),
        )


def parse_width(value: Any) -> WidthArg:
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized == AUTO_WIDTH_TOKEN:
            return AUTO_WIDTH_TOKEN
    return to_float(value, positive=True, name="width")


def to_float(
    value: Any,
    *,
    name: str,
    positive: bool = False,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
) -> float:
    try:
        parsed = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be a floating-point number") from exc
    if positive and parsed <= 0:
        raise ValueError(f"{name} must be positive")
    if min_value is not None and parsed < min_value:
        raise ValueError(f"{name} must be >= {min_value}")
    if max_value is not None and parsed > max_value:
        raise ValueError(f"{name} must be <= {max_value}")
    return parsed


def to_int(
    value: Any,
    *,
    name: str,
    positive: bool = False,
    min_value: Optional[int] = None,
) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer")
    try:
        parsed = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be an integer") from exc
    if positive and parsed <= 0:
        raise ValueError(f"{name} must be positive")
    if min_value is not None and parsed < min_value:
        raise ValueError(f"{name} must be >= {min_value}")
    return parsed


def to_bool(value: Any, *, default: bool = False, name: str = "value") -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in {0, 1}:
            return bool(value)
        raise ValueError(f"{name} must be a boolean")
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"true", "1", "yes", "y", "on"}:
            return True
        if normalized in {"false", "0", "no", "n", "off", ""}:
            return False
    raise ValueError(f"{name} must be a boolean")
