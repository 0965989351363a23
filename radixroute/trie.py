"""Compressed prefix tree (radix trie) for path-like keys.

Each node stores a text segment; the concatenated segments along a path
from the root spell out a stored key. Siblings never share the first
character of their segment, so descent only looks at one character per
level. A route ending in ``/*`` hangs a wildcard node (segment ``*``)
off the node for everything before the ``*``; that node matches any
non-empty rest of a query.
"""

from __future__ import annotations

import logging
from typing import Iterator

from radixroute.constants import WILDCARD, WILDCARD_MARKER

log = logging.getLogger("radixroute")


def is_wildcard_route(path: str) -> bool:
    """True if ``path`` ends with the wildcard marker."""
    return path.endswith(WILDCARD_MARKER)


class PrefixNode:
    """A node of the radix trie. The root is a node with an empty segment."""

    __slots__ = ("segment", "children", "wildcard", "terminal")

    def __init__(self, segment: str = ""):
        self.segment = segment
        # first character of the child's segment -> child, in insertion order
        self.children: dict[str, PrefixNode] = {}
        self.wildcard: PrefixNode | None = None
        self.terminal: bool = False

    # public API

    def insert(self, path: str) -> None:
        """Add a literal key, or a wildcard rule if ``path`` ends in ``/*``."""
        if not path:
            log.debug("Ignoring empty path")
            return

        if is_wildcard_route(path):
            node = self._insert_literal(path[:-len(WILDCARD)])
            if node.wildcard is None:
                node.wildcard = PrefixNode(WILDCARD)
                log.debug("Registered wildcard under %r", path[:-len(WILDCARD)])
        else:
            node = self._insert_literal(path)
            node.terminal = True

    def find(self, key: str) -> bool:
        """True if ``key`` was inserted, or falls under an inserted wildcard."""
        if not key:
            return False

        covered = False
        node = self
        rest = key
        while True:
            lcp = node.longest_common_prefix(rest)
            if lcp < len(node.segment):
                # key ends or diverges inside this segment
                return covered
            rest = rest[lcp:]
            if not rest:
                return node.terminal or covered
            if node.wildcard is not None:
                covered = True
            child = node.children.get(rest[0])
            if child is None:
                return covered
            node = child

    def longest_common_prefix(self, other: str) -> int:
        """Number of leading characters ``self.segment`` and ``other`` share."""
        pos = 0
        for a, b in zip(self.segment, other):
            if a != b:
                break
            pos += 1
        return pos

    # structure

    def __iter__(self) -> Iterator[PrefixNode]:
        """Direct children, literal ones first, then the wildcard."""
        yield from self.children.values()
        if self.wildcard is not None:
            yield self.wildcard

    def node_count(self) -> int:
        """Number of nodes in this subtree, this node included."""
        count = 0
        stack = [self]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
            if node.wildcard is not None:
                stack.append(node.wildcard)
        return count

    def dump(self) -> list[str]:
        """Indented lines describing the subtree; ``$`` marks stored keys."""
        lines: list[str] = []
        stack = [(self, 0)]
        while stack:
            node, depth = stack.pop()
            label = repr(node.segment) + (" $" if node.terminal else "")
            lines.append("  " * depth + label)
            stack.extend((child, depth + 1) for child in reversed(list(node)))
        return lines

    def __str__(self) -> str:
        return "\n".join(self.dump())

    def __repr__(self) -> str:
        return f"PrefixNode({self.segment!r}, children={len(self.children)})"

    # internals

    def _insert_literal(self, path: str) -> PrefixNode:
        """Walk/extend the tree so that ``path`` ends on a node boundary.

        Returns the node at which ``path`` ends.
        """
        node = self
        rest = path
        while True:
            lcp = node.longest_common_prefix(rest)
            if lcp < len(node.segment):
                node._split(lcp)
            rest = rest[lcp:]
            if not rest:
                return node
            child = node.children.get(rest[0])
            if child is None:
                leaf = PrefixNode(rest)
                node.children[rest[0]] = leaf
                return leaf
            node = child

    def _split(self, pos: int) -> None:
        """Cut the segment at ``pos``; the tail and all of this node's
        contents move to a new child."""
        tail = PrefixNode(self.segment[pos:])
        tail.children = self.children
        tail.wildcard = self.wildcard
        tail.terminal = self.terminal
        log.debug("Split %r into %r + %r", self.segment, self.segment[:pos], tail.segment)

        self.segment = self.segment[:pos]
        self.children = {tail.segment[0]: tail}
        self.wildcard = None
        self.terminal = False
