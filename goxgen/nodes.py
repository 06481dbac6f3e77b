"""Host syntax tree — Go expression nodes plus the markup input nodes.

The lowering pass only ever builds call, selector, composite literal,
key-value, unary and literal nodes.  Markup nodes (``GoxExpr`` and its
children) are what the upstream parser hands in.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Union

from pydantic import BaseModel, ConfigDict


class LitKind(str, Enum):
    STRING = "STRING"
    INT = "INT"
    FLOAT = "FLOAT"
    IMAG = "IMAG"
    CHAR = "CHAR"


class SourceLocation(BaseModel):
    """Structured source span; all zeros marks a synthesized node."""

    model_config = ConfigDict(frozen=True)

    start_line: int
    start_col: int
    end_line: int
    end_col: int

    def is_unknown(self) -> bool:
        return (
            self.start_line == 0
            and self.start_col == 0
            and self.end_line == 0
            and self.end_col == 0
        )

    def __str__(self) -> str:
        if self.is_unknown():
            return "<unknown>"
        return f"{self.start_line}:{self.start_col}-{self.end_line}:{self.end_col}"


NO_SOURCE_LOCATION = SourceLocation(start_line=0, start_col=0, end_line=0, end_col=0)


Expr = Union[
    "Ident",
    "BasicLit",
    "RawExpr",
    "CallExpr",
    "SelectorExpr",
    "CompositeLit",
    "KeyValueExpr",
    "UnaryExpr",
    "BareWordsExpr",
    "GoExpr",
    "GoxExpr",
]


class Node(BaseModel):
    model_config = ConfigDict(frozen=True)

    pos: SourceLocation = NO_SOURCE_LOCATION

    def children(self) -> list[Node]:
        return []

    def __str__(self) -> str:
        from .printer import render

        return render(self)


# ── host expressions ─────────────────────────────────────────────


class Ident(Node):
    name: str


class BasicLit(Node):
    kind: LitKind
    value: str  # raw literal text, quotes included


class RawExpr(Node):
    """A host expression the reader does not model, carried through verbatim."""

    text: str


class CallExpr(Node):
    fun: Expr
    args: list[Expr] = []
    ellipsis: bool = False

    def children(self) -> list[Node]:
        return [self.fun, *self.args]


class SelectorExpr(Node):
    x: Expr
    sel: Ident

    def children(self) -> list[Node]:
        return [self.x, self.sel]


class CompositeLit(Node):
    type: Expr | None = None
    elts: list[Expr] = []

    def children(self) -> list[Node]:
        head = [self.type] if self.type is not None else []
        return [*head, *self.elts]


class KeyValueExpr(Node):
    key: Expr
    value: Expr

    def children(self) -> list[Node]:
        return [self.key, self.value]


class UnaryExpr(Node):
    op: str
    x: Expr

    def children(self) -> list[Node]:
        return [self.x]


# ── markup ───────────────────────────────────────────────────────


class BareWordsExpr(Node):
    """A run of raw text between tags."""

    value: str


class GoExpr(Node):
    """A host expression embedded in markup with ``{...}``."""

    x: Expr

    def children(self) -> list[Node]:
        return [self.x]


class GoxAttrStmt(Node):
    lhs: Ident
    rhs: Expr | None = None

    def children(self) -> list[Node]:
        return [self.lhs] if self.rhs is None else [self.lhs, self.rhs]


class GoxExpr(Node):
    """One markup tag: its name, ordered attributes and ordered children."""

    tag_name: Expr
    attrs: list[GoxAttrStmt] = []
    x: list[Expr] = []

    def children(self) -> list[Node]:
        return [self.tag_name, *self.attrs, *self.x]


for _model in (
    Ident,
    BasicLit,
    RawExpr,
    CallExpr,
    SelectorExpr,
    CompositeLit,
    KeyValueExpr,
    UnaryExpr,
    BareWordsExpr,
    GoExpr,
    GoxAttrStmt,
    GoxExpr,
):
    _model.model_rebuild()


def walk(node: Node) -> Iterator[Node]:
    """Yield *node* and every descendant in pre-order."""
    yield node
    for child in node.children():
        yield from walk(child)
