#!/usr/bin/env python3
"""Command line front end for edit-distance alignment of two sequences.

Prints the minimum number of edits, the operation string (M match,
C convert, I insert, D delete) and a three-line alignment view. Optionally
writes the view as a figure.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from seqalign.params import AUTO_WIDTH_TOKEN, DEFAULT_DPI, DEFAULT_HEIGHT, AlignParams
from seqalign.plot import plot_alignment, resolve_figure_width
from seqalign.service import align_pair


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compute the edit distance between two sequences and show one optimal alignment."
    )
    parser.add_argument("seq_a", help="First sequence (shown on the top line)")
    parser.add_argument("seq_b", help="Second sequence (shown on the bottom line)")
    parser.add_argument(
        "--line-width",
        type=int,
        default=0,
        help="Wrap the alignment view into blocks of this many columns (0 disables wrapping)",
    )
    parser.add_argument(
        "--upper",
        action="store_true",
        help="Upper-case both sequences before aligning",
    )
    parser.add_argument(
        "--operations-only",
        action="store_true",
        help="Print only the operation string",
    )
    parser.add_argument(
        "--plot",
        type=Path,
        default=None,
        help="Also write the alignment view to this file (.svg, .png, .pdf, ...)",
    )
    parser.add_argument(
        "--width",
        default=AUTO_WIDTH_TOKEN,
        help="Figure width in inches, or 'auto' to scale with the alignment length",
    )
    parser.add_argument("--height", type=float, default=DEFAULT_HEIGHT, help="Figure height (inches)")
    parser.add_argument("--dpi", type=int, default=DEFAULT_DPI, help="Figure resolution in dots per inch")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Sequence[str]) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        params = AlignParams.from_cli_args(args)
        report = align_pair(args.seq_a, args.seq_b, params)
    except Exception as exc:
        print(f"Error while aligning sequences: {exc}", file=sys.stderr)
        return 1

    if args.operations_only:
        print(report.result.operation_string)
    else:
        print(f"distance: {report.result.distance}")
        print(f"operations: {report.result.operation_string}")
        print()
        print(report.text)

    if args.plot is not None:
        try:
            args.plot.parent.mkdir(parents=True, exist_ok=True)
            plot_alignment(
                report.view,
                args.plot,
                resolve_figure_width(params.width, len(report.view)),
                params.height,
                params.dpi,
            )
        except Exception as exc:  # pragma: no cover - runtime safety
            print(f"Error while creating visualization: {exc}", file=sys.stderr)
            return 1

    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main(sys.argv[1:]))
