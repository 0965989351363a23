"""Route table backed by the radix trie."""

from __future__ import annotations

import logging
import os
from typing import Iterable

from radixroute.constants import COMMENT_PREFIX, DEFAULT_ROUTES, ROUTE_FILES
from radixroute.trie import PrefixNode

log = logging.getLogger("radixroute")


def parse_routes(lines: Iterable[str]) -> list[str]:
    """Route patterns from the lines of a route file."""
    routes: list[str] = []
    for line in lines:
        route = line.strip()
        if route and not route.startswith(COMMENT_PREFIX):
            routes.append(route)
    return routes


class RouteTable:
    """Set of route patterns; literal paths match exactly, ``/*`` routes
    match anything below them."""

    def __init__(self, routes_path: str | None = None, routes: Iterable[str] | None = None):
        self.routes: list[str] = []
        self._seen: set[str] = set()
        self.trie = PrefixNode()
        if routes is not None:
            self.add_all(routes)
        else:
            self._load(routes_path)

    def _load(self, routes_path: str | None) -> None:
        search_paths: list[str] = []
        if routes_path:
            search_paths.append(routes_path)
        search_paths.extend(ROUTE_FILES)

        for path in search_paths:
            if not os.path.exists(path):
                continue
            try:
                with open(path, "r", encoding="utf-8") as f:
                    routes = parse_routes(f)
            except (OSError, UnicodeDecodeError) as exc:
                log.warning("Could not read %s: %s", path, exc)
                continue
            if routes:
                self.add_all(routes)
                log.info("Loaded %s routes from %s", f"{len(self.routes):,}", path)
                return

        if routes_path:
            log.warning("No routes found in %s", routes_path)
        log.warning("No route file found -- using built-in default routes.")
        self.add_all(DEFAULT_ROUTES)

    def add(self, route: str) -> None:
        if not route:
            return
        if route not in self._seen:
            self._seen.add(route)
            self.routes.append(route)
        self.trie.insert(route)

    def add_all(self, routes: Iterable[str]) -> None:
        for route in routes:
            self.add(route)

    def matches(self, path: str) -> bool:
        return self.trie.find(path)

    def __contains__(self, path: str) -> bool:
        return self.matches(path)

    def __len__(self) -> int:
        return len(self.routes)
