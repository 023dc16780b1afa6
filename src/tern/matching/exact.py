"""Exact matcher — token-prefix equality after normalization.

Both the incoming text and every alias are split by the route's
separator and normalized piece by piece. An alias matches when its
tokens equal the leading tokens of the text; the remaining text tokens
become the route's parameters::

    alias "/ban", text "/ban user1 2d"   -> Match(("user1", "2d"))
    alias "/ban", sep "_", "/ban_user1"  -> Match(("user1",))
"""

from tern.normalize import split_normalized
from tern.routing.route import NO_MATCH, Abort, Match, MatchOutcome, Route


def strip_bot_name(text: str, bot_name: str) -> str | Abort | None:
    """Check a trailing ``@name`` suffix against the configured bot name.

    Returns ``None`` when the text has no ``@`` at all, the text without
    its suffix when the name matches (case-insensitively), and ``Abort``
    when the text addresses some other bot.
    """
    head, sep, claimed = text.rpartition("@")
    if not sep:
        return None
    if claimed.strip().lower() != bot_name.strip().lower():
        return Abort(claimed_bot_name=claimed.strip())
    return head.strip()


def match_tokens(route: Route, text_tokens: list[str]) -> Match | None:
    """Try each alias of *route*, in order, against *text_tokens*."""
    for alias in route.aliases:
        alias_tokens = split_normalized(alias, route.separator)
        if not alias_tokens or len(alias_tokens) > len(text_tokens):
            continue
        if alias_tokens != text_tokens[: len(alias_tokens)]:
            continue
        params = tuple(text_tokens[len(alias_tokens) :])
        if route.require_data and not params:
            continue
        return Match(params)
    return None


def try_exact(route: Route, text: str, bot_name: str = "") -> MatchOutcome:
    """Match *text* against *route* exactly.

    Bot-name checking only applies to routes with ``match_bot_name`` set
    and ``return_data`` unset. Returns ``NoMatch``, ``Match``, or ``Abort``.
    """
    if route.match_bot_name and not route.return_data:
        stripped = strip_bot_name(text, bot_name)
        if isinstance(stripped, Abort):
            return stripped
        if stripped is not None:
            text = stripped

    match = match_tokens(route, split_normalized(text, route.separator))
    return match if match is not None else NO_MATCH
