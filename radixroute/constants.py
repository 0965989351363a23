"""Shared constants for the route trie."""

# A route ending in this marker matches any non-empty suffix after the "/".
WILDCARD_MARKER = "/*"

# Segment of the node that stands for the wildcard.
WILDCARD = "*"

# Lines starting with this are skipped in route files.
COMMENT_PREFIX = "#"

# Tried in order when no route file is given.
ROUTE_FILES = (
    "routes.txt",
    "routes.conf",
)

# Used when no route file can be found.
DEFAULT_ROUTES = (
    "/",
    "/index.html",
    "/favicon.ico",
    "/robots.txt",
    "/static/*",
)
