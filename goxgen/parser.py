"""Tree-Sitter host expression reader.

Markup documents carry tag names, attribute values and embedded
expressions as Go source snippets.  Each snippet is parsed with the
tree-sitter Go grammar and converted into host nodes; constructs the
lowering never needs to look inside are kept as ``RawExpr``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable

from .errors import MarkupDocumentError
from .nodes import (
    BasicLit,
    CallExpr,
    Expr,
    Ident,
    LitKind,
    RawExpr,
    SelectorExpr,
    SourceLocation,
    UnaryExpr,
)
from . import constants

logger = logging.getLogger(__name__)


class ParserFactory(ABC):
    """Abstract factory for obtaining a language parser."""

    @abstractmethod
    def get_parser(self, language: str): ...


class TreeSitterParserFactory(ParserFactory):
    """Concrete factory that delegates to tree-sitter-language-pack."""

    def get_parser(self, language: str):
        import tree_sitter_language_pack as tslp

        return tslp.get_parser(language)


class HostExpressionReader:
    """Reads single Go expressions into host nodes."""

    _LITERAL_KINDS: dict[str, LitKind] = {
        "interpreted_string_literal": LitKind.STRING,
        "raw_string_literal": LitKind.STRING,
        "int_literal": LitKind.INT,
        "float_literal": LitKind.FLOAT,
        "imaginary_literal": LitKind.IMAG,
        "rune_literal": LitKind.CHAR,
    }

    def __init__(self, parser_factory: ParserFactory | None = None):
        self._factory = parser_factory or TreeSitterParserFactory()
        self._parser = None
        self._source: bytes = b""
        self._EXPR_DISPATCH: dict[str, Callable] = {
            "identifier": self._read_identifier,
            "type_identifier": self._read_identifier,
            "field_identifier": self._read_identifier,
            "package_identifier": self._read_identifier,
            "true": self._read_identifier,
            "false": self._read_identifier,
            "nil": self._read_identifier,
            "iota": self._read_identifier,
            "selector_expression": self._read_selector,
            "call_expression": self._read_call,
            "unary_expression": self._read_unary,
        }
        for literal_type in self._LITERAL_KINDS:
            self._EXPR_DISPATCH[literal_type] = self._read_literal

    # ── entry point ──────────────────────────────────────────────

    def read(self, source: str) -> Expr:
        """Parse *source* as one Go expression.

        Raises ``MarkupDocumentError`` when the snippet is empty or not a
        valid expression.
        """
        if not source.strip():
            raise MarkupDocumentError("Empty host expression")
        if self._parser is None:
            self._parser = self._factory.get_parser(constants.HOST_LANGUAGE)

        self._source = (constants.SNIPPET_PREFIX + source).encode("utf-8")
        tree = self._parser.parse(self._source)
        if tree.root_node.has_error:
            raise MarkupDocumentError(f"Invalid host expression: {source!r}")

        expr_node = self._find_initializer(tree.root_node)
        if expr_node is None:
            raise MarkupDocumentError(f"Not a single expression: {source!r}")
        logger.debug("Read host expression %r as %s", source, expr_node.type)
        return self._read_expr(expr_node)

    def _find_initializer(self, root):
        # Anything declared after the expression makes the snippet more than
        # one expression
        decls = [
            c
            for c in root.children
            if c.is_named and c.type not in ("package_clause", "comment")
        ]
        if len(decls) != 1 or decls[0].type != "var_declaration":
            return None
        specs = [c for c in decls[0].children if c.type == "var_spec"]
        if len(specs) != 1:
            return None
        spec = specs[0]
        value = spec.child_by_field_name("value")
        if value is None:
            return None
        if value.type != "expression_list":
            return value
        exprs = [c for c in value.children if c.is_named]
        return exprs[0] if len(exprs) == 1 else None

    # ── helpers ──────────────────────────────────────────────────

    def _node_text(self, node) -> str:
        return self._source[node.start_byte : node.end_byte].decode("utf-8")

    def _source_loc(self, node) -> SourceLocation:
        """Snippet-relative span: line 1 is the snippet's first line."""
        prefix_cols = len(constants.SNIPPET_PREFIX.rsplit("\n", 1)[-1])
        s, e = node.start_point, node.end_point
        return SourceLocation(
            start_line=s[0],
            start_col=s[1] - prefix_cols if s[0] == 1 else s[1],
            end_line=e[0],
            end_col=e[1] - prefix_cols if e[0] == 1 else e[1],
        )

    # ── dispatchers ──────────────────────────────────────────────

    def _read_expr(self, node) -> Expr:
        handler = self._EXPR_DISPATCH.get(node.type)
        if handler is None:
            return RawExpr(text=self._node_text(node), pos=self._source_loc(node))
        return handler(node)

    def _read_identifier(self, node) -> Ident:
        return Ident(name=self._node_text(node), pos=self._source_loc(node))

    def _read_literal(self, node) -> BasicLit:
        return BasicLit(
            kind=self._LITERAL_KINDS[node.type],
            value=self._node_text(node),
            pos=self._source_loc(node),
        )

    def _read_selector(self, node) -> Expr:
        operand_node = node.child_by_field_name("operand")
        field_node = node.child_by_field_name("field")
        if operand_node is None or field_node is None:
            return RawExpr(text=self._node_text(node), pos=self._source_loc(node))
        return SelectorExpr(
            x=self._read_expr(operand_node),
            sel=self._read_identifier(field_node),
            pos=self._source_loc(node),
        )

    def _read_call(self, node) -> Expr:
        func_node = node.child_by_field_name("function")
        args_node = node.child_by_field_name("arguments")
        if func_node is None or args_node is None:
            return RawExpr(text=self._node_text(node), pos=self._source_loc(node))
        args = [self._read_expr(c) for c in args_node.children if c.is_named]
        ellipsis = any(c.type == "..." for c in args_node.children)
        return CallExpr(
            fun=self._read_expr(func_node),
            args=args,
            ellipsis=ellipsis,
            pos=self._source_loc(node),
        )

    def _read_unary(self, node) -> Expr:
        op_node = node.child_by_field_name("operator")
        operand_node = node.child_by_field_name("operand")
        if op_node is None or operand_node is None:
            return RawExpr(text=self._node_text(node), pos=self._source_loc(node))
        return UnaryExpr(
            op=self._node_text(op_node),
            x=self._read_expr(operand_node),
            pos=self._source_loc(node),
        )
