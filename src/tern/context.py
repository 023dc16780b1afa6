"""Messenger context — the capability set a chat platform exposes.

The dispatcher never talks to a chat platform directly. Hosts pass an
object per inbound message that answers a handful of questions about
the sender. Text and bot-name getters are optional: a collaborator
that does not provide one is treated as returning nothing.

Thread safety:
    A context belongs to exactly one message. Never share a context
    between concurrently dispatched messages.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MessengerContext(Protocol):
    """Sender capability queries every context must answer."""

    def is_sender_admin(self) -> bool: ...

    def is_sender_owner(self) -> bool: ...

    def is_sender_env_admin(self) -> bool: ...


def _possible_call(context: Any, *names: str) -> Any:
    """Call the first getter on *context* that exists and returns a non-empty value."""
    for name in names:
        getter = getattr(context, name, None)
        if getter is None:
            continue
        value = getter()
        if value:
            return value
    return None


def read_text(context: Any) -> str | None:
    """Return the inbound text, preferring the callback-query payload.

    Returns ``None`` when neither getter exists or both return empty values.
    """
    return _possible_call(context, "get_sender_callback_query_data", "get_sender_text")


def read_bot_name(context: Any) -> str:
    """Return the configured bot name, or ``""`` when the context has none."""
    return _possible_call(context, "get_bot_name") or ""
