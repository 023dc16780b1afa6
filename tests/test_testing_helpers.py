"""Tests for tern.testing — FakeContext."""

from tern.testing import FakeContext


class TestFakeContext:
    def test_getters(self) -> None:
        ctx = FakeContext(text="/start", callback_data="cb", bot_name="Bot")
        assert ctx.get_sender_text() == "/start"
        assert ctx.get_sender_callback_query_data() == "cb"
        assert ctx.get_bot_name() == "Bot"

    def test_records_permission_queries(self) -> None:
        ctx = FakeContext(owner=True)
        assert ctx.calls is None

        assert ctx.is_sender_owner() is True
        assert ctx.is_sender_owner() is True
        assert ctx.is_sender_admin() is False

        assert ctx.calls == {"is_sender_owner": 2, "is_sender_admin": 1}
