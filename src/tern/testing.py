"""Test double for the messenger context.

Answers every optional getter from plain fields, so tests (and the
``tern try`` command) can dispatch without a chat platform.
"""

from dataclasses import dataclass


@dataclass(slots=True)
class FakeContext:
    """A messenger context built from literal values.

    Usage::

        ctx = FakeContext(text="/ban user1", admin=True)
        bot.run(ctx)
        assert ctx.calls["is_sender_admin"] == 1
    """

    text: str | None = None
    callback_data: str | None = None
    bot_name: str = ""
    admin: bool = False
    owner: bool = False
    env_admin: bool = False
    calls: dict[str, int] | None = None

    def _record(self, name: str) -> None:
        if self.calls is None:
            self.calls = {}
        self.calls[name] = self.calls.get(name, 0) + 1

    def get_bot_name(self) -> str:
        return self.bot_name

    def get_sender_text(self) -> str | None:
        return self.text

    def get_sender_callback_query_data(self) -> str | None:
        return self.callback_data

    def is_sender_admin(self) -> bool:
        self._record("is_sender_admin")
        return self.admin

    def is_sender_owner(self) -> bool:
        self._record("is_sender_owner")
        return self.owner

    def is_sender_env_admin(self) -> bool:
        self._record("is_sender_env_admin")
        return self.env_admin
