from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Dict, Sequence

from .aligner import AlignmentResult, align
from .params import AlignParams
from .plot import render_bytes, resolve_figure_width
from .renderer import AlignmentView, format_view, render

logger = logging.getLogger(__name__)


@dataclass
class AlignmentReport:
    token: str
    params: AlignParams
    seq_a: Sequence
    seq_b: Sequence
    result: AlignmentResult
    view: AlignmentView

    @property
    def text(self) -> str:
        return format_view(self.view, self.params.line_width)

    def to_payload(self) -> Dict[str, object]:
        return {
            "token": self.token,
            "distance": self.result.distance,
            "operations": self.result.operation_string,
            "top": self.view.top,
            "glyphs": self.view.glyphs,
            "bottom": self.view.bottom,
            "counts": self.result.counts,
            "identity": self.result.identity,
        }


SESSION_CACHE: Dict[str, AlignmentReport] = {}
MAX_SESSIONS = 12


def _trim_cache() -> None:
    while len(SESSION_CACHE) > MAX_SESSIONS:
        first_key = next(iter(SESSION_CACHE))
        del SESSION_CACHE[first_key]
        logger.debug("Evicted alignment session %s", first_key)


def align_pair(seq_a: Sequence, seq_b: Sequence, params: AlignParams) -> AlignmentReport:
    if params.normalize_case:
        seq_a = seq_a.upper() if isinstance(seq_a, str) else seq_a
        seq_b = seq_b.upper() if isinstance(seq_b, str) else seq_b

    result = align(seq_a, seq_b)
    view = render(seq_a, seq_b, result.operations)
    report = AlignmentReport(
        token=uuid.uuid4().hex,
        params=params,
        seq_a=seq_a,
        seq_b=seq_b,
        result=result,
        view=view,
    )
    SESSION_CACHE[report.token] = report
    _trim_cache()
    logger.debug("Stored alignment session %s (distance=%d)", report.token, result.distance)
    return report


def get_session(token: str) -> AlignmentReport:
    try:
        return SESSION_CACHE[token]
    except KeyError as exc:
        raise ValueError("Unknown or expired alignment token") from exc


def export_alignment(report: AlignmentReport, fmt: str) -> bytes:
    return render_bytes(
        report.view,
        fmt=fmt,
        width=resolve_figure_width(report.params.width, len(report.view)),
        height=report.params.height,
        dpi=report.params.dpi,
    )
