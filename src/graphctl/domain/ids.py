"""Edge identifiers.

Edge identity is derived from the ordered pair it was inserted under:
``edge_key("a", "b") == "a-b"``. The two orientations of a pair are
distinct ids, even for undirected edges.

INVARIANT: An edge id never changes while the edge exists.
"""

from __future__ import annotations

EDGE_KEY_SEPARATOR = "-"


def edge_key(source: str, target: str) -> str:
    """Return the deterministic id of the edge inserted as ``source -> target``."""
    return f"{source}{EDGE_KEY_SEPARATOR}{target}"
