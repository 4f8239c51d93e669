from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

T = TypeVar("T")


class SerializedCallQueue:
    """Runs submitted calls one at a time, in submission order.

    Backed by a single worker thread: a call starts only after the previous
    one has returned or raised, and a failing call does not affect the ones
    queued behind it. Callers block until their own call resolves.
    """

    def __init__(self, name: str = "ai-call") -> None:
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix=name)

    def run(self, fn: Callable[[], T]) -> T:
        """Queue ``fn`` and return its result, re-raising its exception."""
        return self._executor.submit(fn).result()

    def shutdown(self) -> None:
        self._executor.shutdown(wait=True)


# The worker thread starts lazily, on the first submitted call.
_default_queue = SerializedCallQueue()


def default_call_queue() -> SerializedCallQueue:
    """The process-wide queue shared by every AI extraction client."""
    return _default_queue
