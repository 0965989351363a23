#!/usr/bin/env python3
"""
Route Matcher

Loads a list of route patterns into a radix trie and checks paths
against it. A route ending in "/*" matches everything below it.
"""

from __future__ import annotations

import argparse
import logging
import sys

from radixroute.cli import check_paths, print_tree, run_cli
from radixroute.routes import RouteTable

# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("radixroute")


# Entry point

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Route Matcher -- checks paths against a table of route patterns",
    )
    parser.add_argument("--routes", type=str, default=None,
                        help="Path to route file (one pattern per line)")
    parser.add_argument("--query", "-q", action="append", default=[],
                        help="Path to check; may be repeated. Skips interactive mode")
    parser.add_argument("--dump", action="store_true",
                        help="Print the trie structure")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    table = RouteTable(args.routes)

    if args.dump:
        print_tree(table)

    if args.query:
        return 0 if check_paths(table, args.query) else 1
    if not args.dump:
        run_cli(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())
