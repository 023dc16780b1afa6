"""Invoke helpers — call sync or async handlers uniformly.

Tern handlers can be ``def`` or ``async def``. Any code that calls
a user-provided handler from ``run_async()`` must handle both cases.
This module keeps the sync/async check in exactly one place.

Usage::

    from tern._internal.invoke import invoke

    result = await invoke(handler, *args)
    result = await invoke(handler, *args, offload=True)
"""

import functools
import inspect
from typing import Any

import anyio.to_thread


async def invoke(handler: Any, *args: Any, offload: bool = False) -> Any:
    """Call a handler and await the result if it's a coroutine.

    With ``offload=True``, plain ``def`` handlers run in an anyio worker
    thread so a blocking handler does not stall the event loop::

        # sync — runs inline, or in a worker thread when offloaded
        def stats():
            return db.count_users()

        # async — awaited directly, never offloaded
        async def stats():
            return await db.count_users()
    """
    if offload and not inspect.iscoroutinefunction(handler):
        result = await anyio.to_thread.run_sync(functools.partial(handler, *args))
    else:
        result = handler(*args)
    if inspect.isawaitable(result):
        result = await result
    return result
