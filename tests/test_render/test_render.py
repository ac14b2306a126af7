"""Tests for the debug listing and the canonical serializer."""

import io
from pathlib import Path

from minicss.model import Attribute, AttributeKind, Block, Tree
from minicss.parser import parse_stylesheet
from minicss.render import format_debug, print_tree, serialize, write_tree

FIXTURES = Path(__file__).parent.parent / "fixtures"


def _attr_pairs(tree: Tree) -> list[list[tuple[AttributeKind, str]]]:
    return [[(a.kind, a.value) for a in block.attributes] for block in tree]


class TestSerialize:
    def test_minimal(self):
        tree = parse_stylesheet("a { color: red; }")
        assert serialize(tree) == "a {\n\tcolor: red;\n}\n"

    def test_empty_block(self):
        assert serialize(parse_stylesheet("div {}")) == "div {\n}\n"

    def test_empty_tree(self):
        assert serialize(Tree()) == ""

    def test_hyphenated_names_restored(self):
        tree = parse_stylesheet("main-nav{font-family:sans-serif;background-color:x;}")
        assert serialize(tree) == (
            "main-nav {\n"
            "\tfont-family: sans-serif;\n"
            "\tbackground-color: x;\n"
            "}\n"
        )

    def test_multiple_blocks(self):
        tree = Tree(
            blocks=(
                Block(selector="a", attributes=(Attribute(AttributeKind.COLOR, "red"),)),
                Block(selector="b"),
            )
        )
        assert serialize(tree) == "a {\n\tcolor: red;\n}\nb {\n}\n"


class TestRoundTrip:
    def test_fixture_round_trip(self):
        tree = parse_stylesheet((FIXTURES / "basic.css").read_text())
        again = parse_stylesheet(serialize(tree))
        assert len(again) == len(tree)
        assert again.selectors() == tree.selectors()
        assert _attr_pairs(again) == _attr_pairs(tree)
        assert again == tree

    def test_serialize_is_stable(self):
        tree = parse_stylesheet((FIXTURES / "compact.css").read_text())
        text = serialize(tree)
        assert serialize(parse_stylesheet(text)) == text


class TestWriteTree:
    def test_writes_file(self, tmp_path: Path):
        tree = parse_stylesheet("a { color: red; }")
        target = write_tree(tree, tmp_path / "out.css")
        assert target == tmp_path / "out.css"
        assert target.read_bytes() == b"a {\n\tcolor: red;\n}\n"

    def test_accepts_str_path(self, tmp_path: Path):
        write_tree(Tree(), str(tmp_path / "empty.css"))
        assert (tmp_path / "empty.css").read_text() == ""


class TestDebugListing:
    def test_format(self):
        tree = parse_stylesheet("h1 { font-size: 12px; color: red; } p {}")
        assert format_debug(tree) == (
            "selector 0: h1\n"
            "\tattribute 0: font-size  value: 12px\n"
            "\tattribute 1: color  value: red\n"
            "\n"
            "selector 1: p\n"
            "\n"
        )

    def test_print_tree_to_stream(self):
        stream = io.StringIO()
        print_tree(parse_stylesheet("a { color: red; }"), stream=stream)
        assert stream.getvalue().startswith("selector 0: a\n")

    def test_print_tree_defaults_to_stderr(self, capsys):
        print_tree(parse_stylesheet("a {}"))
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "selector 0: a\n\n"
