"""Tests for JSON markup documents and GoxExpr tree construction."""

from __future__ import annotations

import pytest

from goxgen.document import (
    ExprSpec,
    MarkupSpec,
    build_markup,
    is_go_identifier,
    load_document,
)
from goxgen.errors import MarkupDocumentError
from goxgen.nodes import BareWordsExpr, CallExpr, GoExpr, GoxExpr, Ident
from goxgen.parser import HostExpressionReader


@pytest.fixture(scope="module")
def reader() -> HostExpressionReader:
    return HostExpressionReader()


class TestLoadDocument:
    def test_minimal(self):
        spec = load_document('{"tag": "div"}')
        assert spec.tag == "div"
        assert spec.attrs == []
        assert spec.children == []

    def test_children_shapes(self):
        spec = load_document(
            '{"tag": "p", "children": ["hi", {"expr": "n"}, {"tag": "br"}]}'
        )
        assert spec.children[0] == "hi"
        assert isinstance(spec.children[1], ExprSpec)
        assert isinstance(spec.children[2], MarkupSpec)

    def test_invalid_json(self):
        with pytest.raises(MarkupDocumentError, match="Invalid markup document"):
            load_document("{not json")

    def test_missing_tag(self):
        with pytest.raises(MarkupDocumentError):
            load_document('{"attrs": []}')

    def test_unknown_key_rejected(self):
        with pytest.raises(MarkupDocumentError):
            load_document('{"tag": "div", "kids": []}')


class TestBuildMarkup:
    def test_element_tree(self, reader):
        spec = load_document(
            '{"tag": "div", "attrs": [{"name": "class", "value": "\\"x\\""},'
            ' {"name": "hidden"}], "children": ["hello", {"expr": "count"}]}'
        )
        gox = build_markup(spec, reader)
        assert isinstance(gox, GoxExpr)
        assert gox.tag_name.name == "div"
        assert [a.lhs.name for a in gox.attrs] == ["class", "hidden"]
        assert str(gox.attrs[0].rhs) == '"x"'
        assert gox.attrs[1].rhs is None
        assert gox.x[0] == BareWordsExpr(value="hello")
        assert isinstance(gox.x[1], GoExpr)
        assert gox.x[1].x.name == "count"

    def test_factory_tag(self, reader):
        gox = build_markup(load_document('{"tag": "NewList(items)"}'), reader)
        assert isinstance(gox.tag_name, CallExpr)

    def test_nested_markup(self, reader):
        gox = build_markup(
            load_document('{"tag": "ul", "children": [{"tag": "li", "children": ["a"]}]}'),
            reader,
        )
        [child] = gox.x
        assert isinstance(child, GoxExpr)
        assert child.tag_name == Ident(name="li", pos=child.tag_name.pos)

    def test_invalid_attribute_name(self, reader):
        with pytest.raises(MarkupDocumentError, match="attribute name"):
            build_markup(load_document('{"tag": "a", "attrs": [{"name": "x y"}]}'), reader)

    def test_invalid_attribute_value(self, reader):
        spec = load_document('{"tag": "a", "attrs": [{"name": "href", "value": ")("}]}')
        with pytest.raises(MarkupDocumentError):
            build_markup(spec, reader)

    @pytest.mark.parametrize("tag", ["select", "var", "map", "func"])
    def test_keyword_tag_is_plain_identifier(self, reader, tag):
        gox = build_markup(load_document(f'{{"tag": "{tag}"}}'), reader)
        assert isinstance(gox.tag_name, Ident)
        assert gox.tag_name.name == tag
        assert str(gox.tag_name.pos) == f"1:0-1:{len(tag)}"

    def test_unicode_attribute_name(self, reader):
        gox = build_markup(
            load_document('{"tag": "a", "attrs": [{"name": "ünicode"}]}'), reader
        )
        assert gox.attrs[0].lhs.name == "ünicode"

    def test_combining_mark_attribute_name_rejected(self, reader):
        with pytest.raises(MarkupDocumentError, match="attribute name"):
            build_markup(
                load_document('{"tag": "a", "attrs": [{"name": "a\\u0301"}]}'), reader
            )


class TestGoIdentifier:
    @pytest.mark.parametrize("name", ["x", "_", "onClick", "v2", "über", "x١"])
    def test_accepted(self, name):
        assert is_go_identifier(name)

    @pytest.mark.parametrize("name", ["", "2x", "a-b", "x y", "a\u0301", "x²", "pkg.Comp"])
    def test_rejected(self, name):
        assert not is_go_identifier(name)
