"""Radix trie route matcher."""

from radixroute.constants import WILDCARD, WILDCARD_MARKER
from radixroute.trie import PrefixNode, is_wildcard_route
from radixroute.routes import RouteTable, parse_routes

__all__ = [
    "WILDCARD",
    "WILDCARD_MARKER",
    "PrefixNode",
    "RouteTable",
    "is_wildcard_route",
    "parse_routes",
]
