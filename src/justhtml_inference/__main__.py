"""Show how an HTML snippet is classified, parsed and plucked.

Usage:
    python -m justhtml_inference "<td>hello</td>"
    echo "<tr><td>a</td></tr>" | python -m justhtml_inference --no-pluck
"""

from __future__ import annotations

import argparse
import logging
import sys

from .parser import InferenceParser
from .policy import POLICIES, get_policy
from .serialize import to_html


def main(argv: list[str] | None = None) -> int:
    arg_parser = argparse.ArgumentParser(
        prog="justhtml_inference",
        description="Infer the parsing context of an HTML snippet",
    )
    arg_parser.add_argument("html", nargs="?", help="HTML to parse (default: read stdin)")
    arg_parser.add_argument("--policy", choices=sorted(POLICIES), default=None, help="context policy")
    arg_parser.add_argument("--no-pluck", action="store_true", help="keep implied wrapper elements")
    arg_parser.add_argument("--debug", action="store_true", help="log decisions to stderr")
    args = arg_parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s [%(name)s] %(message)s")

    html = args.html if args.html is not None else sys.stdin.read()
    parser = InferenceParser(get_policy(args.policy) if args.policy else None)

    path = parser.pluck_path(html)
    print(f"context: {parser.context(html)!r}")
    print(f"pluck:   {path if path is not None else '-'}")
    print(to_html(parser.parse(html, pluck=not args.no_pluck)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
