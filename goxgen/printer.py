"""Go expression printer for lowered trees."""

from __future__ import annotations

import json
import logging
from typing import Callable

from .nodes import (
    BareWordsExpr,
    BasicLit,
    CallExpr,
    CompositeLit,
    GoExpr,
    GoxAttrStmt,
    GoxExpr,
    Ident,
    KeyValueExpr,
    Node,
    RawExpr,
    SelectorExpr,
    UnaryExpr,
)
from . import constants

logger = logging.getLogger(__name__)


def go_quote(text: str) -> str:
    """Quote *text* as a Go interpreted string literal.

    JSON string escapes are a subset of Go's, so the result denotes the
    same string in both languages.
    """
    return json.dumps(text, ensure_ascii=False)


class GoPrinter:
    """Renders host nodes as single-line Go expression source.

    Markup met while printing is lowered on the fly with this printer's
    genname, so a tree that still contains ``GoxExpr`` nodes prints as the
    runtime calls it stands for.
    """

    def __init__(self, genname: str = constants.DEFAULT_GENNAME):
        self.genname = genname
        self._DISPATCH: dict[type, Callable[[Node], str]] = {
            Ident: self._render_ident,
            BasicLit: self._render_basic_lit,
            RawExpr: self._render_raw,
            CallExpr: self._render_call,
            SelectorExpr: self._render_selector,
            CompositeLit: self._render_composite,
            KeyValueExpr: self._render_key_value,
            UnaryExpr: self._render_unary,
            BareWordsExpr: self._render_bare_words,
            GoExpr: self._render_go_expr,
            GoxExpr: self._render_gox,
            GoxAttrStmt: self._render_attr,
        }

    def render(self, node: Node) -> str:
        handler = self._DISPATCH.get(type(node))
        if handler is None:
            raise TypeError(f"Cannot print node of type {type(node).__name__}")
        return handler(node)

    def _join(self, nodes: list[Node]) -> str:
        return ", ".join(self.render(n) for n in nodes)

    def _render_ident(self, node: Ident) -> str:
        return node.name

    def _render_basic_lit(self, node: BasicLit) -> str:
        return node.value

    def _render_raw(self, node: RawExpr) -> str:
        return node.text

    def _render_call(self, node: CallExpr) -> str:
        ellipsis = "..." if node.ellipsis else ""
        return f"{self.render(node.fun)}({self._join(node.args)}{ellipsis})"

    def _render_selector(self, node: SelectorExpr) -> str:
        return f"{self.render(node.x)}.{node.sel.name}"

    def _render_composite(self, node: CompositeLit) -> str:
        type_text = self.render(node.type) if node.type is not None else ""
        return f"{type_text}{{{self._join(node.elts)}}}"

    def _render_key_value(self, node: KeyValueExpr) -> str:
        return f"{self.render(node.key)}: {self.render(node.value)}"

    def _render_unary(self, node: UnaryExpr) -> str:
        return f"{node.op}{self.render(node.x)}"

    def _render_bare_words(self, node: BareWordsExpr) -> str:
        return go_quote(node.value)

    def _render_go_expr(self, node: GoExpr) -> str:
        return self.render(node.x)

    def _render_gox(self, node: GoxExpr) -> str:
        from .api import lower_markup

        logger.debug("Lowering markup while printing (genname=%s)", self.genname)
        return self.render(lower_markup(node, self.genname))

    def _render_attr(self, node: GoxAttrStmt) -> str:
        if node.rhs is None:
            return node.lhs.name
        return f"{node.lhs.name}={{{self.render(node.rhs)}}}"


def render(node: Node, genname: str = constants.DEFAULT_GENNAME) -> str:
    return GoPrinter(genname).render(node)
