"""Parsing of the plain request bodies that describe nodes and edges."""

from __future__ import annotations


def str_to_int(text: str) -> int:
    """Convert a digit string to an integer, one positional digit at a time.

    Each character contributes its offset from ``'0'`` times its place
    value; an empty string yields 0.
    """
    length = len(text)
    return sum(
        (ord(char) - ord("0")) * 10 ** (length - position - 1)
        for position, char in enumerate(text)
    )


def int_to_str(n: int) -> str:
    """Render a non-negative integer in decimal; negatives give ''."""
    if n == 0:
        return "0"
    digits = []
    while n > 0:
        n, digit = divmod(n, 10)
        digits.append(chr(digit + ord("0")))
    return "".join(reversed(digits))


def _after_colon(data: str) -> str:
    head, colon, rest = data.partition(":")
    if not colon:
        raise ValueError("request body has no ':' separator")
    return rest


def parse_nodes(data: str) -> list[str]:
    """Extract the comma-separated node names from a body like ``{"nodes":"A, B"}``."""
    text = "".join(c for c in _after_colon(data) if c not in ' {}"')
    parts = text.split(",")
    if not parts[-1]:
        parts.pop()
    return parts


def _split_weights(text: str) -> tuple[str, list[int]]:
    """Strip ``{...}`` weight annotations out of ``text`` and collect them."""
    stripped = []
    weights = []
    pending = []
    inside = False
    for char in text:
        if char == "{":
            inside = True
        elif char == "}":
            weights.append(str_to_int("".join(pending)))
            pending = []
            inside = False
            continue
        elif inside:
            pending.append(char)
        if not inside:
            stripped.append(char)
    return "".join(stripped), weights


def parse_edges(data: str) -> tuple[list[tuple[str, str]], list[int]]:
    """Parse ``A -> B, ...`` or ``A -{w}-> B, ...`` into edges and weights.

    Unweighted edges get weight 0.
    """
    body = _after_colon(data)
    if len(body) < 3:
        raise ValueError("edge description is too short")
    text = body[1:-2].replace(" ", "")
    weighted = "{" in text or "}" in text
    if weighted:
        text, weights = _split_weights(text)
        arrow = 3
    else:
        weights = []
        arrow = 2

    edges = []
    position = 0
    while (gt := text.find(">", position)) != -1:
        source = text[position:gt + 1][:-arrow]
        comma = text.find(",", gt + 1)
        if comma == -1:
            comma = len(text)
        edges.append((source, text[gt + 1:comma]))
        position = comma + 1

    if not weighted:
        weights = [0] * len(edges)
    return edges, weights


def validate_edges(edges, weights) -> None:
    """Raise ValueError unless every edge has exactly one weight."""
    if len(edges) != len(weights):
        raise ValueError("Mismatch in edges and weights count")