"""Tests for Dispatcher.run_async and tern._internal.invoke."""

import threading

import pytest

from tern._internal.invoke import invoke
from tern.config import DispatchConfig
from tern.dispatcher import Dispatcher, Phase
from tern.testing import FakeContext


@pytest.mark.anyio
async def test_async_handler_is_awaited() -> None:
    bot = Dispatcher()

    @bot.command("/ban", return_data=True)
    async def ban(data: list[str]) -> str:
        return f"banned {data[1]}"

    result = await bot.run_async(FakeContext(text="/ban alice"))

    assert result.handled is True
    assert result.phase is Phase.EXACT
    assert result.value == "banned alice"


@pytest.mark.anyio
async def test_sync_handler_runs_inline_by_default() -> None:
    bot = Dispatcher()
    caller = threading.get_ident()

    @bot.command("/whoami")
    def whoami() -> int:
        return threading.get_ident()

    result = await bot.run_async(FakeContext(text="/whoami"))

    assert result.value == caller


@pytest.mark.anyio
async def test_sync_handler_offloaded_to_worker_thread() -> None:
    bot = Dispatcher(config=DispatchConfig(offload_sync_handlers=True))
    caller = threading.get_ident()

    @bot.command("/whoami")
    def whoami() -> int:
        return threading.get_ident()

    result = await bot.run_async(FakeContext(text="/whoami"))

    assert result.value != caller


@pytest.mark.anyio
async def test_async_no_match_callback() -> None:
    bot = Dispatcher()

    @bot.command("/start")
    def start() -> None: ...

    @bot.no_match
    async def fallback() -> str:
        return "unknown command"

    result = await bot.run_async(FakeContext(text="hello"))

    assert result.handled is False
    assert result.value == "unknown command"


@pytest.mark.anyio
async def test_fuzzy_phase_async() -> None:
    bot = Dispatcher()

    @bot.command("помощь", temperature=80)
    async def help_() -> str:
        return "help"

    result = await bot.run_async(FakeContext(text="Помощ"))

    assert result.phase is Phase.FUZZY
    assert result.value == "help"


class TestInvoke:
    @pytest.mark.anyio
    async def test_sync(self) -> None:
        assert await invoke(lambda x: x * 2, 21) == 42

    @pytest.mark.anyio
    async def test_async(self) -> None:
        async def double(x: int) -> int:
            return x * 2

        assert await invoke(double, 21) == 42

    @pytest.mark.anyio
    async def test_async_not_offloaded(self) -> None:
        caller = threading.get_ident()

        async def where() -> int:
            return threading.get_ident()

        assert await invoke(where, offload=True) == caller
