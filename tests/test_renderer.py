from __future__ import annotations

import io
import unittest

from seqalign.aligner import align
from seqalign.operations import MalformedOperations, Operation
from seqalign.renderer import AlignmentView, format_view, print_alignment, render


class RenderTests(unittest.TestCase):
    def test_documented_example(self):
        view = render("ACAACC", "CAAAAC", "DMMMICM")
        self.assertEqual(view.top, "ACAA-CC")
        self.assertEqual(view.glyphs, " ||| *|")
        self.assertEqual(view.bottom, "-CAAAAC")

    def test_render_aligner_output(self):
        result = align("ACAACC", "CAAAAC")
        view = render("ACAACC", "CAAAAC", result.operations)
        self.assertEqual(view.lines(), ("-ACAACC", " |*||| ", "CAAAAC-"))

    def test_accepts_operation_members(self):
        view = render("A", "G", [Operation.CONVERT])
        self.assertEqual(str(view), "A\n*\nG")

    def test_empty_inputs(self):
        view = render("", "", "")
        self.assertEqual(view.lines(), ("", "", ""))
        self.assertEqual(len(view), 0)

    def test_lines_have_equal_length_and_strip_to_inputs(self):
        pairs = [("GATTACA", "GCATGCT"), ("", "ACGT"), ("ACGT", ""), ("AAAA", "TTTTTT")]
        for seq_a, seq_b in pairs:
            with self.subTest(seq_a=seq_a, seq_b=seq_b):
                result = align(seq_a, seq_b)
                view = render(seq_a, seq_b, result.operation_string)
                self.assertEqual(len(view.top), len(result.operations))
                self.assertEqual(len(view.glyphs), len(result.operations))
                self.assertEqual(len(view.bottom), len(result.operations))
                self.assertEqual(view.top.replace("-", ""), seq_a)
                self.assertEqual(view.bottom.replace("-", ""), seq_b)

    def test_overrun_first_sequence(self):
        with self.assertRaises(MalformedOperations):
            render("A", "AC", "MM")

    def test_overrun_second_sequence(self):
        with self.assertRaises(MalformedOperations):
            render("AC", "A", "MI")

    def test_unconsumed_symbols(self):
        with self.assertRaises(MalformedOperations) as ctx:
            render("ACG", "ACG", "MM")
        self.assertIn("2/3", str(ctx.exception))

    def test_single_character_token_lists(self):
        seq_a = ["G", "A", "T"]
        seq_b = ["G", "T"]
        view = render(seq_a, seq_b, align(seq_a, seq_b).operations)
        self.assertEqual(view.lines(), ("GAT", "| |", "G-T"))

    def test_multi_character_tokens_rejected(self):
        seq_a = ["GAT", "TAC", "A"]
        seq_b = ["GAT", "A"]
        result = align(seq_a, seq_b)
        self.assertEqual(result.operation_string, "MDM")
        with self.assertRaises(ValueError) as ctx:
            render(seq_a, seq_b, result.operations)
        self.assertNotIsInstance(ctx.exception, MalformedOperations)
        self.assertIn("'GAT'", str(ctx.exception))

    def test_unknown_tag(self):
        with self.assertRaises(MalformedOperations):
            render("A", "A", "X")


class DisplayTests(unittest.TestCase):
    def test_blocks_wrap_columns(self):
        view = AlignmentView(top="-ACAACC", glyphs=" |*||| ", bottom="CAAAAC-")
        self.assertEqual(
            view.blocks(3),
            [("-AC", " |*", "CAA"), ("AAC", "|||", "AAC"), ("C", " ", "-")],
        )
        self.assertEqual(view.blocks(0), [view.lines()])
        self.assertEqual(format_view(view, 4), "-ACA\n |*|\nCAAA\n\nACC\n|| \nAC-")

    def test_print_alignment(self):
        sink = io.StringIO()
        view = print_alignment("ACAACC", "CAAAAC", "DMMMICM", file=sink)
        self.assertEqual(sink.getvalue(), "ACAA-CC\n ||| *|\n-CAAAAC\n")
        self.assertEqual(view.top, "ACAA-CC")

    def test_print_alignment_rejects_before_writing(self):
        sink = io.StringIO()
        with self.assertRaises(MalformedOperations):
            print_alignment("A", "A", "MM", file=sink)
        self.assertEqual(sink.getvalue(), "")


if __name__ == "__main__":
    unittest.main()
