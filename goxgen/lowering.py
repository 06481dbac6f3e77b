"""Markup lowering — rewrites a GoxExpr into calls against the UI runtime.

Elements (lower-case identifier tags) become ``g.Tag("div", ...)`` calls;
components (upper-case identifier tags and factory calls) become
``g.NewComponent(&T{...})`` or a factory call with a trailing body
argument.  Every runtime reference is qualified by the caller's genname.
"""

from __future__ import annotations

import logging
from .errors import UnsupportedTagShapeError
from .nodes import (
    BareWordsExpr,
    BasicLit,
    CallExpr,
    CompositeLit,
    Expr,
    GoExpr,
    GoxAttrStmt,
    GoxExpr,
    Ident,
    KeyValueExpr,
    LitKind,
    SelectorExpr,
    UnaryExpr,
)
from .printer import go_quote
from .tables import EVENT_MAP, controlled_property, is_event
from . import constants

logger = logging.getLogger(__name__)


# ── construction helpers ─────────────────────────────────────────


def new_selector_expr(x: str, sel: str) -> SelectorExpr:
    return SelectorExpr(x=Ident(name=x), sel=Ident(name=sel))


def new_call_expr(fun: Expr, args: list[Expr]) -> CallExpr:
    return CallExpr(fun=fun, args=list(args))


def new_string_lit(value: str) -> BasicLit:
    return BasicLit(kind=LitKind.STRING, value=go_quote(value))


def _runtime_call(genname: str, sel: str, args: list[Expr]) -> CallExpr:
    return new_call_expr(new_selector_expr(genname, sel), args)


def _empty_string_lit() -> BasicLit:
    return BasicLit(kind=LitKind.STRING, value=constants.EMPTY_STRING_LITERAL)


def _address_of(lit: CompositeLit) -> UnaryExpr:
    return UnaryExpr(op=constants.ADDRESS_OF, x=lit)


# ── attributes ───────────────────────────────────────────────────


def with_default_values(attrs: list[GoxAttrStmt]) -> list[GoxAttrStmt]:
    """Return a copy of *attrs* where every missing value is ``true``.

    Presence of a bare attribute implies true, as in JSX.  The input list
    and its statements are left untouched.
    """
    return [
        attr
        if attr.rhs is not None
        else attr.model_copy(update={"rhs": Ident(name=constants.TRUE_LITERAL)})
        for attr in attrs
    ]


def new_event_listener(genname: str, attr: GoxAttrStmt) -> UnaryExpr:
    """Build ``&g.EventListener{Name: "<event>", Listener: <rhs>}``."""
    return _address_of(
        CompositeLit(
            type=new_selector_expr(genname, constants.RUNTIME_EVENT_LISTENER),
            elts=[
                KeyValueExpr(
                    key=Ident(name=constants.EVENT_NAME_FIELD),
                    value=new_string_lit(EVENT_MAP[attr.lhs.name]),
                ),
                KeyValueExpr(
                    key=Ident(name=constants.EVENT_LISTENER_FIELD),
                    value=attr.rhs,
                ),
            ],
        )
    )


def map_props(genname: str, attrs: list[GoxAttrStmt]) -> list[Expr]:
    """Lower each attribute, in order, to an argument for ``g.Markup``.

    Event handlers are checked first, then controlled properties; anything
    else is a plain attribute that keeps its original name.
    """
    mapped: list[Expr] = []
    for attr in with_default_values(attrs):
        name = attr.lhs.name
        if is_event(name):
            mapped.append(new_event_listener(genname, attr))
            continue
        prop = controlled_property(name)
        if prop is not None:
            mapped.append(
                _runtime_call(
                    genname, constants.RUNTIME_PROPERTY, [new_string_lit(prop), attr.rhs]
                )
            )
        else:
            mapped.append(
                _runtime_call(
                    genname, constants.RUNTIME_ATTRIBUTE, [new_string_lit(name), attr.rhs]
                )
            )
    return mapped


# ── builders ─────────────────────────────────────────────────────


def _body_text(genname: str, children: list[Expr]) -> CallExpr:
    # The leading "" pins Text's variadic signature
    return _runtime_call(
        genname, constants.RUNTIME_TEXT, [_empty_string_lit(), *children]
    )


def lower_element(genname: str, gox: GoxExpr) -> CallExpr:
    """Lower a primitive tag to ``g.Tag("name", [g.Markup(...)], child...)``."""
    tag = gox.tag_name
    args: list[Expr] = [new_string_lit(tag.name)]

    if gox.attrs:
        args.append(
            _runtime_call(genname, constants.RUNTIME_MARKUP, map_props(genname, gox.attrs))
        )

    for child in gox.x:
        if isinstance(child, BareWordsExpr):
            if not child.value.strip():
                continue
            args.append(_runtime_call(genname, constants.RUNTIME_TEXT, [child]))
        elif isinstance(child, GoExpr):
            args.append(_runtime_call(genname, constants.RUNTIME_VALUE, [child]))
        else:
            args.append(child)

    return _runtime_call(genname, constants.RUNTIME_TAG, args)


def _field_value(genname: str, attr: GoxAttrStmt) -> Expr:
    # Handlers still become listeners; the field keeps its original name
    if is_event(attr.lhs.name):
        return new_event_listener(genname, attr)
    return attr.rhs


def new_component(genname: str, gox: GoxExpr) -> Expr:
    """Lower a component tag.

    A factory-call tag gets ``g.Text("", child...)`` appended as a trailing
    argument.  An identifier tag becomes ``g.NewComponent(&T{attr: v, ...,
    Body: g.Text("", child...)})``.
    """
    tag = gox.tag_name

    if isinstance(tag, CallExpr):
        if not gox.x:
            return tag
        return tag.model_copy(update={"args": [*tag.args, _body_text(genname, gox.x)]})

    fields: list[Expr] = [
        KeyValueExpr(key=Ident(name=attr.lhs.name), value=_field_value(genname, attr))
        for attr in with_default_values(gox.attrs)
    ]
    if gox.x:
        fields.append(
            KeyValueExpr(
                key=Ident(name=constants.BODY_FIELD),
                value=_body_text(genname, gox.x),
            )
        )

    return _runtime_call(
        genname,
        constants.RUNTIME_NEW_COMPONENT,
        [_address_of(CompositeLit(type=Ident(name=tag.name), elts=fields))],
    )


# ── classification & dispatch ────────────────────────────────────


def is_component(tag_name: Expr) -> bool:
    """Factory calls and upper-case identifiers are components.

    Raises ``UnsupportedTagShapeError`` for any other tag shape.
    """
    if isinstance(tag_name, CallExpr):
        return True
    if isinstance(tag_name, Ident) and tag_name.name:
        return tag_name.name[0].isupper()
    raise UnsupportedTagShapeError(type(tag_name).__name__, tag_name.pos)


def lower_gox(genname: str, gox: GoxExpr) -> Expr:
    """Lower one markup node.  Nested markup must already be lowered."""
    component = is_component(gox.tag_name)
    logger.debug(
        "Lowering <%s> as %s (%d attrs, %d children)",
        gox.tag_name,
        "component" if component else "element",
        len(gox.attrs),
        len(gox.x),
    )
    if component:
        return new_component(genname, gox)
    return lower_element(genname, gox)
