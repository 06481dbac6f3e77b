"""Pure functions for computing statistics over lowered trees."""

from __future__ import annotations

from collections import Counter

from goxgen.nodes import CallExpr, CompositeLit, Ident, Node, SelectorExpr, walk


def _runtime_selector(node: Node, genname: str) -> str | None:
    if not isinstance(node, SelectorExpr):
        return None
    if isinstance(node.x, Ident) and node.x.name == genname:
        return node.sel.name
    return None


def count_runtime_calls(expr: Node, genname: str) -> dict[str, int]:
    """Return a frequency map of runtime API references in *expr*.

    Counts calls (``g.Tag(...)``) and composite literal types
    (``g.EventListener{...}``) qualified by *genname*.

    Args:
        expr: A lowered expression tree.
        genname: The binding the runtime package is reachable under.

    Returns:
        A dict mapping runtime API names to their occurrence counts.
        Empty dict when the tree references no runtime API.
    """
    names = (
        _runtime_selector(node.fun if isinstance(node, CallExpr) else node.type, genname)
        for node in walk(expr)
        if isinstance(node, (CallExpr, CompositeLit))
    )
    return dict(Counter(name for name in names if name is not None))
