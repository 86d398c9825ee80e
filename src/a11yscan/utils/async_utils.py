"""Bridge from synchronous callers (the CLI) to tool coroutines."""

import asyncio
from collections.abc import Coroutine
from concurrent.futures import ThreadPoolExecutor
from typing import Any, TypeVar

T = TypeVar("T")


def _loop_is_running() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


def safe_async_run(coro: Coroutine[Any, Any, T]) -> T:
    """Run ``coro`` to completion and return its result.

    Uses ``asyncio.run`` directly when no loop is active in this thread.
    Inside a running loop (pytest-asyncio, notebooks) the coroutine gets a
    private loop on a worker thread; exceptions re-raise in the caller.
    """
    if not _loop_is_running():
        return asyncio.run(coro)
    with ThreadPoolExecutor(max_workers=1, thread_name_prefix="a11yscan-run") as pool:
        return pool.submit(asyncio.run, coro).result()
