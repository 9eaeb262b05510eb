"""Tests for document line storage and tab expansion.

Covers absolute tab-stop expansion, line splitting, and index guards.
"""

from __future__ import annotations

import unittest

from twinview.line_store import Line, LineStore, expand_tabs, split_document_lines


class ExpandTabsTests(unittest.TestCase):
    def test_lines_without_tabs_render_unchanged(self) -> None:
        for raw in ("", "abc", "  spaced  ", "ünïcode"):
            with self.subTest(raw=raw):
                self.assertEqual(expand_tabs(raw), raw)

    def test_leading_tab_expands_to_full_stop(self) -> None:
        self.assertEqual(expand_tabs("\tX"), " " * 8 + "X")

    def test_tab_at_column_six_reaches_column_eight(self) -> None:
        self.assertEqual(expand_tabs("abcdef\tX"), "abcdef  X")

    def test_tab_at_column_seven_emits_single_space(self) -> None:
        self.assertEqual(expand_tabs("abcdefg\tX"), "abcdefg X")

    def test_tab_on_stop_boundary_emits_full_width(self) -> None:
        self.assertEqual(expand_tabs("abcdefgh\tX"), "abcdefgh" + " " * 8 + "X")

    def test_consecutive_tabs_use_absolute_columns(self) -> None:
        self.assertEqual(expand_tabs("ab\t\tc"), "ab" + " " * 6 + " " * 8 + "c")

    def test_render_is_never_shorter_than_raw(self) -> None:
        for raw in ("\t", "a\tb\tc", "\t\t\t", "x" * 20 + "\t"):
            with self.subTest(raw=raw):
                self.assertGreaterEqual(len(expand_tabs(raw)), len(raw))

    def test_expansion_is_repeatable(self) -> None:
        raw = "key\tvalue\t# note"
        self.assertEqual(expand_tabs(raw), expand_tabs(raw))
        self.assertEqual(Line.from_raw(raw).render, expand_tabs(raw))


class SplitDocumentLinesTests(unittest.TestCase):
    def test_empty_text_has_no_lines(self) -> None:
        self.assertEqual(split_document_lines(""), [])

    def test_trailing_newline_does_not_add_empty_line(self) -> None:
        self.assertEqual(split_document_lines("a\nb\n"), ["a", "b"])

    def test_missing_trailing_newline_keeps_last_line(self) -> None:
        self.assertEqual(split_document_lines("a\nb"), ["a", "b"])

    def test_single_newline_is_one_empty_line(self) -> None:
        self.assertEqual(split_document_lines("\n"), [""])

    def test_crlf_terminators_are_stripped(self) -> None:
        self.assertEqual(split_document_lines("a\r\nb\r\n"), ["a", "b"])

    def test_lone_cr_is_content(self) -> None:
        self.assertEqual(split_document_lines("a\rb\n"), ["a\rb"])


class LineStoreTests(unittest.TestCase):
    def test_load_preserves_order_and_derives_render(self) -> None:
        store = LineStore.load(["abc", "\tdef"])

        self.assertEqual(store.count(), 2)
        self.assertEqual(len(store), 2)
        self.assertEqual(store.raw(0), "abc")
        self.assertEqual(store.raw(1), "\tdef")
        self.assertEqual(store.render(1), " " * 8 + "def")
        self.assertEqual(store.raw_length(1), 4)

    def test_empty_store(self) -> None:
        store = LineStore.load([])
        self.assertEqual(store.count(), 0)
        with self.assertRaises(IndexError):
            store.raw(0)

    def test_out_of_range_indices_fail_fast(self) -> None:
        store = LineStore.load(["only"])
        for index in (1, 5, -1):
            with self.subTest(index=index):
                with self.assertRaises(IndexError):
                    store.raw(index)
                with self.assertRaises(IndexError):
                    store.render(index)


if __name__ == "__main__":
    unittest.main()
