"""Tests for the help desk example."""

import pytest

from tern.dispatcher import Phase
from tern.testing import FakeContext


class TestHelpdeskBot:
    @pytest.mark.anyio
    async def test_exact_help(self, example_bot) -> None:
        result = await example_bot.run_async(FakeContext(text="Help"))
        assert result.phase is Phase.EXACT
        assert result.value == "Ask me about: hours, price"

    @pytest.mark.anyio
    async def test_typo_in_russian(self, example_bot) -> None:
        result = await example_bot.run_async(FakeContext(text="помощ"))
        assert result.phase is Phase.FUZZY
        assert result.value.startswith("Ask me about")

    @pytest.mark.anyio
    async def test_faq_topic(self, example_bot) -> None:
        result = await example_bot.run_async(FakeContext(text="faq hours"))
        assert result.value == "We are open 9:00-18:00."

    @pytest.mark.anyio
    async def test_faq_without_topic_falls_back(self, example_bot) -> None:
        result = await example_bot.run_async(FakeContext(text="faq"))
        assert result.handled is False
        assert result.value == "Sorry, I did not understand. Try 'help'."

    @pytest.mark.anyio
    async def test_callback_button(self, example_bot) -> None:
        ctx = FakeContext(text="/start", callback_data="menu:contacts")
        result = await example_bot.run_async(ctx)
        assert result.value == "support@example.com"

    @pytest.mark.anyio
    async def test_cyrillic_typo(self, example_bot) -> None:
        result = await example_bot.run_async(FakeContext(text="кантакты"))
        assert result.phase is Phase.FUZZY
        assert result.value == "support@example.com"
