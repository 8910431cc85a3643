from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Dict

from .params import AUTO_WIDTH_TOKEN, WidthArg
from .renderer import AlignmentView

NUCLEOTIDE_COLORS: Dict[str, str] = {
    "A": "#4daf4a",  # green
    "C": "#377eb8",  # blue
    "G": "#000000",  # black
    "T": "#e41a1c",  # red
    "U": "#e41a1c",  # treat U like T
}
OTHER_COLOR = "#777777"
GLYPH_COLOR = "#999999"

INCHES_PER_COLUMN = 0.2
MIN_AUTO_WIDTH = 4.0
MAX_AUTO_WIDTH = 40.0


def configure_headless_matplotlib() -> None:
    """Pin matplotlib to Agg so figures can be drawn from request threads."""

    if not os.environ.get("MPLBACKEND", "").strip():
        os.environ["MPLBACKEND"] = "Agg"
    if not os.environ.get("MPLCONFIGDIR"):
        os.environ["MPLCONFIGDIR"] = os.path.join(tempfile.gettempdir(), "seqalign_mplconfig")

    import matplotlib

    if "agg" not in str(matplotlib.get_backend()).lower():
        matplotlib.use("Agg", force=True)


def nucleotide_color(symbol: str) -> str:
    return NUCLEOTIDE_COLORS.get(symbol.upper(), OTHER_COLOR)


def resolve_figure_width(width_arg: WidthArg, columns: int) -> float:
    if isinstance(width_arg, str) and width_arg == AUTO_WIDTH_TOKEN:
        return min(MAX_AUTO_WIDTH, max(MIN_AUTO_WIDTH, columns * INCHES_PER_COLUMN))
    return float(width_arg)


def plot_alignment(view: AlignmentView, output: Path, width: float, height: float, dpi: int) -> None:
    configure_headless_matplotlib()
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(figsize=(width, height), dpi=dpi)
    try:
        rows = ((view.top, 2.0, False), (view.glyphs, 1.0, True), (view.bottom, 0.0, False))
        for text, y_pos, is_glyph_row in rows:
            for x_pos, symbol in enumerate(text):
                if symbol == " ":
                    continue
                color = GLYPH_COLOR if is_glyph_row or symbol == "-" else nucleotide_color(symbol)
                ax.text(
                    x_pos + 0.5,
                    y_pos,
                    symbol,
                    ha="center",
                    va="center",
                    family="monospace",
                    color=color,
                )

        ax.set_xlim(0, max(len(view), 1))
        ax.set_ylim(-0.5, 2.5)
        ax.axis("off")

        fig.savefig(output, bbox_inches="tight")
    finally:
        plt.close(fig)


def render_bytes(view: AlignmentView, *, fmt: str, width: float, height: float, dpi: int) -> bytes:
    if fmt not in {"svg", "png"}:
        raise ValueError("Export format must be 'svg' or 'png'")
    with tempfile.NamedTemporaryFile(suffix=f".{fmt}", delete=True) as handle:
        plot_alignment(view, Path(handle.name), width, height, dpi)
        handle.seek(0)
        return handle.read()
