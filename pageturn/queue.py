"""
Module to serialize asynchronous calls.

Calls submitted to a serial queue are executed one at a time, in the order they were
submitted, by a single worker task. A call does not start until the previous call has
completed, even if the previous call is suspended awaiting I/O. Results are delivered to
each caller through its own future.
"""

import asyncio
import collections
import logging
import wrapt

from collections.abc import Callable, Coroutine
from typing import Any


_logger = logging.getLogger(__name__)


class SerialQueue:
    """
    A first-in-first-out queue of coroutine function calls, executed by a single worker.

    The worker task is created when a call is submitted to an idle queue, and exits when the
    queue has been drained. If a caller cancels its future before its call starts, the call is
    skipped. If the call has already started, it runs to completion; a call can check the
    "cancelled" property to avoid consuming anything on behalf of a caller that has gone.
    """

    def __init__(self):
        self._pending = collections.deque()
        self._worker = None
        self._current = None

    def __len__(self) -> int:
        return len(self._pending)

    @property
    def running(self) -> bool:
        """True if the worker is executing calls."""
        return self._worker is not None and not self._worker.done()

    @property
    def cancelled(self) -> bool:
        """True if the caller of the call being executed has cancelled its future."""
        return self._current is not None and self._current.done()

    def submit(
        self, function: Callable[..., Coroutine[Any, Any, Any]], /, *args, **kwargs
    ) -> asyncio.Future:
        """
        Submit a call to the queue, and return a future that resolves to its result.

        Parameters:
        • function: coroutine function to call
        • args: positional arguments to pass to the function
        • kwargs: keyword arguments to pass to the function
        """
        future = asyncio.get_running_loop().create_future()
        self._pending.append((future, function, args, kwargs))
        if not self.running:
            self._worker = asyncio.create_task(self._work())
        return future

    async def _work(self):
        while self._pending:
            future, function, args, kwargs = self._pending.popleft()
            if future.done():
                _logger.debug("skipping cancelled call: %s", function)
                continue
            self._current = future
            try:
                result = await function(*args, **kwargs)
            except asyncio.CancelledError:
                self._cancel(future)
                raise
            except Exception as e:
                if not future.done():
                    future.set_exception(e)
            else:
                if not future.done():
                    future.set_result(result)
            finally:
                self._current = None

    def _cancel(self, future: asyncio.Future):
        future.cancel()
        while self._pending:
            self._pending.popleft()[0].cancel()


@wrapt.decorator
def serialized(wrapped, instance, args, kwargs):
    """
    Decorate a coroutine method to submit its calls to the "_queue" serial queue attribute of
    its instance. Calling the decorated method enqueues the call immediately, and returns a
    future that resolves to its result.
    """
    return instance._queue.submit(wrapped, *args, **kwargs)
