"""Markup lowering for Go UI runtimes."""

from .lowering import lower_gox  # noqa: F401
from .api import (  # noqa: F401
    lower_markup,
    lower_document,
    dump_go,
    lowering_stats,
)
