"""CLI / terminal mode for the route matcher."""

from __future__ import annotations

import time

from radixroute.routes import RouteTable


def print_tree(table: RouteTable) -> None:
    print("=" * 60)
    print(f"  {len(table)} routes, {table.trie.node_count()} nodes")
    print("-" * 60)
    print(table.trie)
    print("=" * 60)


def check_paths(table: RouteTable, paths: list[str]) -> bool:
    """Print one line per path; True if every path matched."""
    all_matched = True
    for path in paths:
        matched = table.matches(path)
        all_matched = all_matched and matched
        label = "MATCH" if matched else "miss"
        print(f"  {label:<5}  {path}")
    return all_matched


def run_cli(table: RouteTable) -> None:
    """Interactive query loop."""
    print("\n" + "=" * 60)
    print("  ROUTE MATCHER -- Interactive Lookup")
    print("=" * 60)
    print()
    print("Commands:")
    print("  PATH             -- test a path         (e.g. /static/app.js)")
    print("  add ROUTE        -- add a route         (e.g. add /api/*)")
    print("  ? TEXT           -- test TEXT as a path  (e.g. ? add me)")
    print("  show             -- print the tree")
    print("  done             -- quit")
    print()

    while True:
        try:
            inp = input("  path> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not inp:
            continue
        cmd = inp.lower()
        if cmd == "done":
            break
        if cmd == "show":
            print_tree(table)
            continue

        parts = inp.split(maxsplit=1)
        if inp.startswith("?"):
            inp = inp[1:].strip()
        elif parts[0].lower() == "add":
            if len(parts) == 2:
                table.add(parts[1])
                print(f"  Added '{parts[1]}'")
            else:
                print("  Format: add ROUTE")
            continue

        t0 = time.perf_counter()
        matched = table.matches(inp)
        elapsed = time.perf_counter() - t0
        print(f"  {'MATCH' if matched else 'miss'} ({elapsed * 1e6:.1f}us)")
