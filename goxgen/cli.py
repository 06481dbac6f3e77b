"""Command-line entry point for goxgen."""

from __future__ import annotations

import argparse
import logging
import sys

from .api import dump_go, lowering_stats
from .config import GenConfig
from .errors import GoxgenError
from . import constants

logger = logging.getLogger(__name__)

DEMO_DOCUMENT = """\
{
  "tag": "div",
  "attrs": [{"name": "class", "value": "\\"card\\""}],
  "children": [
    {"tag": "h1", "children": ["Hello, ", {"expr": "name"}]},
    {"tag": "Button", "attrs": [{"name": "onClick", "value": "c.onClick"}],
     "children": ["Press me"]}
  ]
}
"""


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="goxgen",
        description="Lower JSON markup documents into UI runtime calls")
    parser.add_argument("file", nargs="?",
                        help="Markup document (JSON) to lower")
    parser.add_argument("--genname", "-g", default=constants.DEFAULT_GENNAME,
                        help=f"Runtime package binding (default: {constants.DEFAULT_GENNAME})")
    parser.add_argument("--stats", action="store_true",
                        help="Print runtime call counts instead of Go source")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log each lowering step")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    config = GenConfig(genname=args.genname, show_stats=args.stats, verbose=args.verbose)

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    if not args.file:
        # Demo mode: use a built-in document
        text = DEMO_DOCUMENT
        print("No file provided. Using built-in demo:\n")
        print(text)
    else:
        with open(args.file) as f:
            text = f.read()

    try:
        if config.show_stats:
            for name, count in sorted(lowering_stats(text, config.genname).items()):
                print(f"{name}\t{count}")
        else:
            print(dump_go(text, config.genname))
    except GoxgenError as exc:
        logger.debug("Lowering failed", exc_info=True)
        print(f"goxgen: {exc}", file=sys.stderr)
        return 1
    return 0
