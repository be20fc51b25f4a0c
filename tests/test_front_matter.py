"""Tests for front matter splitting."""

import unittest

from yamltable.document.front_matter import split_front_matter, strip_front_matter


class TestSplitFrontMatter(unittest.TestCase):
    def test_splits_front_matter_and_body(self) -> None:
        data = b"---\ntitle: Genesis\n---\n# Body\n"
        self.assertEqual(split_front_matter(data), (b"title: Genesis\n", b"# Body\n"))

    def test_crlf_line_endings(self) -> None:
        data = b"---\r\ntitle: Genesis\r\n---\r\nbody\r\n"
        self.assertEqual(split_front_matter(data), (b"title: Genesis\r\n", b"body\r\n"))

    def test_no_opening_delimiter(self) -> None:
        data = b"title: Genesis\n---\nbody\n"
        self.assertEqual(split_front_matter(data), (b"", data))

    def test_unclosed_front_matter(self) -> None:
        data = b"---\ntitle: Genesis\nbody\n"
        self.assertEqual(split_front_matter(data), (b"", data))

    def test_empty_body(self) -> None:
        self.assertEqual(split_front_matter(b"---\na: 1\n---"), (b"a: 1\n", b""))


class TestStripFrontMatter(unittest.TestCase):
    def test_returns_body(self) -> None:
        self.assertEqual(strip_front_matter(b"---\ntitle: x\n---\nline 1\nline 2\n"), b"line 1\nline 2\n")

    def test_without_front_matter_returns_input(self) -> None:
        data = b"# Just markdown\n"
        self.assertEqual(strip_front_matter(data), data)

    def test_non_mapping_front_matter_returns_input(self) -> None:
        data = b"---\n- a\n- b\n---\nbody\n"
        self.assertEqual(strip_front_matter(data), data)

    def test_invalid_front_matter_returns_input(self) -> None:
        data = b"---\na: [1\n---\nbody\n"
        self.assertEqual(strip_front_matter(data), data)

    def test_empty_front_matter_is_stripped(self) -> None:
        self.assertEqual(strip_front_matter(b"---\n---\nbody\n"), b"body\n")


if __name__ == "__main__":
    unittest.main()
