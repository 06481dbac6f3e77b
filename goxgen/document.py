"""JSON markup documents — the driver's input format.

A document is one markup object::

    {"tag": "div",
     "attrs": [{"name": "class", "value": "\"x\""}, {"name": "disabled"}],
     "children": ["hello", {"expr": "count"}, {"tag": "br"}]}

Tag names and attribute values are Go expression snippets.  String
children are raw text, ``{"expr": ...}`` children are embedded host
expressions and nested objects are markup.
"""

from __future__ import annotations

import logging
import unicodedata
from typing import Union

from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import MarkupDocumentError
from .nodes import (
    BareWordsExpr,
    Expr,
    GoExpr,
    GoxAttrStmt,
    GoxExpr,
    Ident,
    SourceLocation,
)
from .parser import HostExpressionReader

logger = logging.getLogger(__name__)


class AttrSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    value: str | None = None


class ExprSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    expr: str


class MarkupSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    tag: str
    attrs: list[AttrSpec] = []
    children: list[Union[str, ExprSpec, "MarkupSpec"]] = []


MarkupSpec.model_rebuild()


def load_document(text: str) -> MarkupSpec:
    """Validate a JSON markup document.

    Raises ``MarkupDocumentError`` on malformed JSON or schema violations.
    """
    try:
        return MarkupSpec.model_validate_json(text)
    except ValidationError as exc:
        raise MarkupDocumentError(f"Invalid markup document: {exc}") from exc


def build_markup(spec: MarkupSpec, reader: HostExpressionReader) -> GoxExpr:
    """Convert a validated document into a ``GoxExpr`` tree."""
    attrs = [_build_attr(attr, reader) for attr in spec.attrs]
    children = [_build_child(child, reader) for child in spec.children]
    logger.debug("Built <%s> with %d attrs, %d children", spec.tag, len(attrs), len(children))
    return GoxExpr(tag_name=_build_tag(spec.tag, reader), attrs=attrs, x=children)


def is_go_identifier(name: str) -> bool:
    """Go identifier rule: a letter or ``_``, then letters, ``_`` or Nd digits."""
    if not name or not (name[0] == "_" or name[0].isalpha()):
        return False
    return all(
        ch == "_" or ch.isalpha() or unicodedata.category(ch) == "Nd" for ch in name[1:]
    )


def _build_tag(tag: str, reader: HostExpressionReader) -> Expr:
    # Plain names never go through the reader: element names such as
    # "select" or "var" are Go keywords
    if is_go_identifier(tag):
        return Ident(
            name=tag,
            pos=SourceLocation(start_line=1, start_col=0, end_line=1, end_col=len(tag)),
        )
    return reader.read(tag)


def _build_attr(attr: AttrSpec, reader: HostExpressionReader) -> GoxAttrStmt:
    if not is_go_identifier(attr.name):
        raise MarkupDocumentError(f"Invalid attribute name: {attr.name!r}")
    rhs = reader.read(attr.value) if attr.value is not None else None
    return GoxAttrStmt(lhs=Ident(name=attr.name), rhs=rhs)


def _build_child(
    child: Union[str, ExprSpec, MarkupSpec], reader: HostExpressionReader
) -> Expr:
    if isinstance(child, str):
        return BareWordsExpr(value=child)
    if isinstance(child, ExprSpec):
        return GoExpr(x=reader.read(child.expr))
    return build_markup(child, reader)
