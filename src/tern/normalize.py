"""Text normalization shared by every matcher.

Keeps Cyrillic letters, ASCII letters, ASCII digits, and hyphens.
Everything else is dropped. Whitespace is either collapsed to single
spaces or removed entirely.
"""

import re

# Cyrillic, Cyrillic Supplement, Cyrillic Extended-C/A/B
_CYRILLIC = r"\u0400-\u052F\u1C80-\u1C8F\u2DE0-\u2DFF\uA640-\uA69F"

_STRIP_WITH_SPACES = re.compile(rf"[^{_CYRILLIC}a-zA-Z0-9\-\s]")
_STRIP_NO_SPACES = re.compile(rf"[^{_CYRILLIC}a-zA-Z0-9\-]")
_WHITESPACE_RUN = re.compile(r"\s+")


def normalize(text: str, keep_spaces: bool = False) -> str:
    """Lowercase, trim, and strip *text* down to matchable characters.

    Examples::

        normalize("  /Ban  User!! ")              -> "banuser"
        normalize("  /Ban  User!! ", True)        -> "ban user"
        normalize("Помощь, пожалуйста", True)     -> "помощь пожалуйста"
    """
    text = text.strip().lower()
    if keep_spaces:
        text = _STRIP_WITH_SPACES.sub("", text)
        return _WHITESPACE_RUN.sub(" ", text).strip()
    return _STRIP_NO_SPACES.sub("", text)


def split_normalized(text: str, separator: str) -> list[str]:
    """Split *text* by *separator*, normalize each piece, drop empty pieces.

    Order is preserved. Used for both incoming text and command aliases
    so the two sides are always tokenized identically.
    """
    pieces = (normalize(piece) for piece in text.split(separator))
    return [piece for piece in pieces if piece]
