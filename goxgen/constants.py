"""Named constants — eliminates magic strings across the codebase."""

from __future__ import annotations

DEFAULT_GENNAME = "vecty"

TRUE_LITERAL = "true"
EMPTY_STRING_LITERAL = '""'
ADDRESS_OF = "&"

BODY_FIELD = "Body"
EVENT_NAME_FIELD = "Name"
EVENT_LISTENER_FIELD = "Listener"

# Runtime API selectors, always qualified by the caller's genname
RUNTIME_TAG = "Tag"
RUNTIME_MARKUP = "Markup"
RUNTIME_TEXT = "Text"
RUNTIME_VALUE = "Value"
RUNTIME_PROPERTY = "Property"
RUNTIME_ATTRIBUTE = "Attribute"
RUNTIME_EVENT_LISTENER = "EventListener"
RUNTIME_NEW_COMPONENT = "NewComponent"

RUNTIME_API: tuple[str, ...] = (
    RUNTIME_TAG,
    RUNTIME_MARKUP,
    RUNTIME_TEXT,
    RUNTIME_VALUE,
    RUNTIME_PROPERTY,
    RUNTIME_ATTRIBUTE,
    RUNTIME_EVENT_LISTENER,
    RUNTIME_NEW_COMPONENT,
)

HOST_LANGUAGE = "go"
SNIPPET_PREFIX = "package p\nvar _ = "
