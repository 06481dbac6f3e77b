"""Composable API functions for the markup lowering pipeline.

Each function corresponds to a CLI workflow but is callable
programmatically without argparse.
"""

from __future__ import annotations

import logging

from .document import build_markup, load_document
from .lowering import lower_gox
from .nodes import Expr, GoExpr, GoxAttrStmt, GoxExpr
from .parser import HostExpressionReader, ParserFactory
from .printer import GoPrinter
from .stats import count_runtime_calls
from . import constants

logger = logging.getLogger(__name__)


def _lower_nested(expr: Expr, genname: str) -> Expr:
    if isinstance(expr, GoxExpr):
        return lower_markup(expr, genname)
    if isinstance(expr, GoExpr) and isinstance(expr.x, GoxExpr):
        return expr.model_copy(update={"x": lower_markup(expr.x, genname)})
    return expr


def _lower_attr(attr: GoxAttrStmt, genname: str) -> GoxAttrStmt:
    if attr.rhs is None:
        return attr
    return attr.model_copy(update={"rhs": _lower_nested(attr.rhs, genname)})


def lower_markup(gox: GoxExpr, genname: str = constants.DEFAULT_GENNAME) -> Expr:
    """Lower a markup tree bottom-up.

    Nested markup among children and attribute values is lowered first, so
    ``lower_gox`` only ever sees already-lowered sub-results.

    Args:
        gox: The root markup node.
        genname: The binding the runtime package is imported under.

    Returns:
        The lowered expression tree.

    Raises:
        UnsupportedTagShapeError: If any tag in the tree has an unsupported shape.
    """
    prepared = gox.model_copy(
        update={
            "attrs": [_lower_attr(attr, genname) for attr in gox.attrs],
            "x": [_lower_nested(child, genname) for child in gox.x],
        }
    )
    return lower_gox(genname, prepared)


def lower_document(
    text: str,
    genname: str = constants.DEFAULT_GENNAME,
    parser_factory: ParserFactory | None = None,
) -> Expr:
    """Read a JSON markup document and lower it.

    Args:
        text: The JSON document text.
        genname: The binding the runtime package is imported under.
        parser_factory: Supplies the Go parser for host expression snippets.

    Returns:
        The lowered expression tree.
    """
    logger.info("Lowering markup document (genname=%s)", genname)
    spec = load_document(text)
    gox = build_markup(spec, HostExpressionReader(parser_factory))
    return lower_markup(gox, genname)


def dump_go(text: str, genname: str = constants.DEFAULT_GENNAME) -> str:
    """Lower a JSON markup document and return the Go expression source."""
    return GoPrinter(genname).render(lower_document(text, genname))


def lowering_stats(text: str, genname: str = constants.DEFAULT_GENNAME) -> dict[str, int]:
    """Lower a JSON markup document and count its runtime API references."""
    return count_runtime_calls(lower_document(text, genname), genname)
