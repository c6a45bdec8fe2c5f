import asyncio
import logging
from collections.abc import Iterable
from concurrent.futures import Future
from concurrent.futures import ThreadPoolExecutor
from typing import Any
from typing import Protocol

__all__ = ["Call", "cancel_calls", "sync_cancel_calls"]


logger = logging.getLogger(__name__)


class Call(Protocol):
    """An in-flight call, e.g. an asyncio.Task or a concurrent.futures.Future"""

    def cancel(self) -> Any:
        ...


def _cancel_all(calls: list[Call | None]) -> int:
    count = 0
    for call in calls:
        if call is None:
            continue
        try:
            call.cancel()
        except Exception:
            logger.exception("could not cancel %r", call)
        else:
            count += 1
    return count


async def _cancel_all_async(calls: list[Call | None]) -> int:
    return _cancel_all(calls)


def cancel_calls(calls: Iterable[Call | None]) -> "asyncio.Task[int]":
    """Request cancellation of the calls in a background task.

    The calls are copied first, so that the caller may modify the iterable afterwards.
    The returned task resolves to the number of cancellation requests made; await it
    or ignore it. Cancellation itself is best-effort: a call may still complete.

    Must be called from a running event loop.
    """
    snapshot = list(calls)
    return asyncio.get_running_loop().create_task(_cancel_all_async(snapshot))


def sync_cancel_calls(calls: Iterable[Call | None]) -> "Future[int]":
    """Request cancellation of the calls in a background thread.

    See cancel_calls. The returned future resolves to the number of cancellation
    requests made.
    """
    snapshot = list(calls)
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="cancel-calls")
    try:
        return executor.submit(_cancel_all, snapshot)
    finally:
        # the submitted work still runs; the thread exits when it is done
        executor.shutdown(wait=False)
