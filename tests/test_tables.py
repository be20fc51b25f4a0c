"""Tests for horizontal and vertical table rendering."""

import unittest

from yamltable.document.decode import decode_document
from yamltable.document.nodes import Record, RecordList, Scalar
from yamltable.errors import ShapeError
from yamltable.render.tables import render_document, render_horizontal, render_vertical

T = '<table data="yaml-metadata">'


def _render(text: str) -> str:
    return render_document(decode_document(text.encode("utf-8")))


class TestHorizontal(unittest.TestCase):
    def test_flat_record_is_one_table(self) -> None:
        self.assertEqual(
            _render("a: 1\nb: 2\n"),
            f"{T}<thead><tr><th>a</th><th>b</th></tr></thead>"
            "<tbody><tr><td>1</td><td>2</td></tr></tbody></table>",
        )

    def test_empty_record_renders_nothing(self) -> None:
        self.assertEqual(render_horizontal(Record()), "")

    def test_nested_record_value_is_horizontal(self) -> None:
        html = _render("a:\n  b: 1\n")
        inner = f"{T}<thead><tr><th>b</th></tr></thead><tbody><tr><td>1</td></tr></tbody></table>"
        self.assertEqual(
            html,
            f"{T}<thead><tr><th>a</th></tr></thead><tbody><tr><td>{inner}</td></tr></tbody></table>",
        )

    def test_record_list_value_is_vertical(self) -> None:
        html = _render("books:\n  - id: gen\n  - id: exo\n")
        self.assertIn(
            f"<td>{T}<tr><td>id</td><td>gen</td></tr></table>"
            f"{T}<tr><td>id</td><td>exo</td></tr></table></td>",
            html,
        )

    def test_record_key_renders_horizontal_header(self) -> None:
        html = _render("? {k: v}\n: 1\n")
        self.assertIn(
            f"<th>{T}<thead><tr><th>k</th></tr></thead><tbody><tr><td>v</td></tr></tbody></table></th>",
            html,
        )

    def test_record_list_key_concatenates_horizontal_tables(self) -> None:
        html = _render("? [{k: v}, {k: w}]\n: 1\n")
        first = f"{T}<thead><tr><th>k</th></tr></thead><tbody><tr><td>v</td></tr></tbody></table>"
        second = f"{T}<thead><tr><th>k</th></tr></thead><tbody><tr><td>w</td></tr></tbody></table>"
        self.assertIn(f"<th>{first}{second}</th>", html)

    def test_scalar_text_forms(self) -> None:
        html = _render("n: null\nb: true\nf: 1.0\n")
        self.assertIn("<td></td><td>true</td><td>1</td>", html)

    def test_escapes_text(self) -> None:
        html = _render("a: <b>x</b> & y\n")
        self.assertIn("<td>&lt;b&gt;x&lt;/b&gt; &amp; y</td>", html)
        self.assertNotIn("<b>", html)


class TestVertical(unittest.TestCase):
    def test_list_of_records_is_one_table_per_record(self) -> None:
        self.assertEqual(
            _render("- a: 1\n- a: 2\n"),
            f"{T}<tr><td>a</td><td>1</td></tr></table>{T}<tr><td>a</td><td>2</td></tr></table>",
        )

    def test_rows_follow_key_order(self) -> None:
        html = _render("- z: 1\n  a: 2\n")
        self.assertEqual(html, f"{T}<tr><td>z</td><td>1</td></tr><tr><td>a</td><td>2</td></tr></table>")

    def test_nested_record_value_is_horizontal(self) -> None:
        html = _render("- meta:\n    x: 1\n")
        self.assertIn(
            f"<td>{T}<thead><tr><th>x</th></tr></thead><tbody><tr><td>1</td></tr></tbody></table></td>",
            html,
        )

    def test_empty_record_in_list_renders_empty_table(self) -> None:
        self.assertEqual(render_vertical(RecordList((Record(),))), f"{T}</table>")

    def test_empty_list_renders_nothing(self) -> None:
        self.assertEqual(render_vertical(RecordList()), "")


class TestLinkFields(unittest.TestCase):
    def test_slug_links_in_vertical_layout(self) -> None:
        self.assertEqual(
            _render("- slug: genesis\n"),
            f'{T}<tr><td>slug</td><td><a href="content/genesis.md">genesis</a></td></tr></table>',
        )

    def test_link_links_in_vertical_layout(self) -> None:
        html = _render("- link: en_ult\n")
        self.assertIn('<td><a href="en_ult/01.md">en_ult</a></td>', html)

    def test_slug_is_not_linked_in_horizontal_layout(self) -> None:
        html = _render("slug: genesis\n")
        self.assertIn("<td>genesis</td>", html)
        self.assertNotIn("<a ", html)

    def test_key_match_is_case_sensitive(self) -> None:
        self.assertNotIn("<a ", _render("- Slug: genesis\n  LINK: x\n"))

    def test_non_scalar_values_are_not_linked(self) -> None:
        self.assertNotIn("<a ", _render("- slug:\n    x: 1\n"))

    def test_nested_vertical_tables_are_linked(self) -> None:
        html = _render("projects:\n  - slug: exo\n")
        self.assertIn('<a href="content/exo.md">exo</a>', html)


class TestShapeErrors(unittest.TestCase):
    def test_scalar_in_nested_list_fails(self) -> None:
        with self.assertRaises(ShapeError) as ctx:
            _render("- books:\n    - id: gen\n    - exo\n")
        self.assertEqual(ctx.exception.shape, "scalar (str)")

    def test_scalar_list_value_fails_in_horizontal_layout(self) -> None:
        with self.assertRaises(ShapeError):
            _render("tags:\n  - a\n  - b\n")

    def test_nested_list_in_list_fails(self) -> None:
        with self.assertRaises(ShapeError) as ctx:
            render_vertical(RecordList((Record(), RecordList())))
        self.assertEqual(ctx.exception.shape, "list")
        self.assertIn("list element 1", str(ctx.exception))

    def test_bad_key_list_fails(self) -> None:
        record = Record(((RecordList((Scalar(1),)), Scalar("v")),))
        with self.assertRaises(ShapeError):
            render_horizontal(record)


class TestDeterminism(unittest.TestCase):
    def test_rendering_twice_is_identical(self) -> None:
        doc = decode_document(b"- slug: gen\n  meta:\n    a: [ {x: 1} ]\n- link: en\n")
        self.assertEqual(render_document(doc), render_document(doc))

    def test_rendering_does_not_mutate_document(self) -> None:
        doc = decode_document(b"a:\n  b: 1\n")
        before = repr(doc)
        render_document(doc)
        self.assertEqual(repr(doc), before)


if __name__ == "__main__":
    unittest.main()
