"""Tests for text_summarizer/loaders.py."""

from __future__ import annotations

import unittest

from text_summarizer.loaders import extract_markdown_text, extract_rtf_text, load_text


class TestExtractMarkdownText(unittest.TestCase):

    def test_strips_markup_keeps_paragraphs(self):
        md = ("# Title\n\nSome **bold** and _italic_ text with a [link](http://x.y).\n\n\n"
              "- First item\n- Second item\n\n```\ncode()\n```\nUse `grep` here.")
        self.assertEqual(
            extract_markdown_text(md),
            "Title\n\nSome bold and italic text with a link.\n\n"
            "First item\nSecond item\n\nUse grep here.",
        )


class TestExtractRtfText(unittest.TestCase):

    def test_par_becomes_paragraph_break(self):
        rtf = r"{\rtf1\ansi Hello \b world\b0 .\par Second para.}"
        self.assertEqual(extract_rtf_text(rtf), "Hello world.\n\nSecond para.")


class TestLoadText(unittest.TestCase):

    def test_plain_text_passthrough(self):
        self.assertEqual(load_text("notes.TXT", "Hi there.\n\nBye.".encode("utf-8")), "Hi there.\n\nBye.")

    def test_dispatches_on_extension(self):
        self.assertEqual(load_text("readme.md", b"## Head\n\nBody."), "Head\n\nBody.")

    def test_unsupported_extension(self):
        with self.assertRaises(ValueError):
            load_text("report.pdf", b"%PDF")


if __name__ == "__main__":
    unittest.main()
