"""Enumerate medication pairs for interaction checking."""

from collections.abc import Sequence


def generate_pairs(names: Sequence[str]) -> list[tuple[str, str]]:
    """Return every unordered pair, keeping the input order inside each pair."""
    pairs = []
    for i in range(len(names)):
        for j in range(i + 1, len(names)):
            pairs.append((names[i], names[j]))
    return pairs
