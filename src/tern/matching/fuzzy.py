"""Fuzzy matcher — Levenshtein similarity against whole aliases.

Only used when no route matched exactly, and only for routes that
neither return nor require data. Similarity is a percentage::

    similarity = (1 - distance / max(len(a), len(b))) * 100

Distances are measured in characters, so Cyrillic and Latin letters
weigh the same.
"""

from tern.normalize import normalize
from tern.routing.route import Route


def levenshtein(a: str, b: str) -> int:
    """Edit distance with unit cost insertions, deletions, and substitutions."""
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, 1):
        current = [i]
        for j, char_b in enumerate(b, 1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (char_a != char_b),
                )
            )
        previous = current
    return previous[-1]


def similarity(a: str, b: str) -> float:
    """Percentage similarity of two strings. Two empty strings are 100% alike."""
    longest = max(len(a), len(b))
    if longest == 0:
        return 100.0
    return 100 * (longest - levenshtein(a, b)) / longest


def try_fuzzy(route: Route, text: str) -> bool:
    """Return True if any alias of *route* is at least ``temperature`` percent similar."""
    if not route.fuzzy:
        return False
    normalized = normalize(text, keep_spaces=True)
    return any(
        similarity(normalize(alias, keep_spaces=True), normalized) >= route.temperature
        for alias in route.aliases
    )
