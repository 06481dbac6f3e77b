"""Generator configuration (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass

from . import constants


@dataclass(frozen=True)
class GenConfig:
    """Groups code generation options chosen by the driver."""

    genname: str = constants.DEFAULT_GENNAME
    show_stats: bool = False
    verbose: bool = False
