"""Thread pool running work items from a shared queue."""

from __future__ import annotations

import os
import re
import threading
from collections import deque
from collections.abc import Callable, Iterable
from typing import Any

DEFAULT_THREAD_COUNT = 2

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

WorkFunc = Callable[["WorkItem", int], Any]


def detect_thread_count() -> int:
    """Return the worker count from $NPROC, else the processor count, else 2."""
    nproc = os.environ.get("NPROC")
    if nproc is not None:
        match = _LEADING_INT.match(nproc)
        if match and int(match.group(1)) > 0:
            return int(match.group(1))
    cpus = os.cpu_count()
    if cpus and cpus > 0:
        return cpus
    return DEFAULT_THREAD_COUNT


class WorkItem:
    """Unit of work; `work_func(item, thread_id)` is called by a worker thread.

    If the function raises, the exception is kept in `error`.
    """

    def __init__(self, work_func: WorkFunc) -> None:
        self.work_func = work_func
        self.error: BaseException | None = None

    def run(self, thread_id: int) -> None:
        """Run the work function on the given worker thread."""
        self.work_func(self, thread_id)


class ThreadPool:
    """Fixed set of worker threads consuming submitted work items in order."""

    def __init__(self, thread_count: int = 0) -> None:
        if thread_count < 0:
            raise ValueError(f"thread count must not be negative, got {thread_count}")
        if thread_count == 0:
            thread_count = detect_thread_count()
        self._lock = threading.Lock()
        self._avail_cond = threading.Condition(self._lock)
        self._done_cond = threading.Condition(self._lock)
        self._pending: deque[WorkItem] = deque()
        self._done: list[WorkItem] = []
        self._done_count = 0
        self._done_target = 0
        self._worked_on = 0
        self._should_stop = False
        self._threads: list[threading.Thread] = []
        self._thread_count = thread_count
        try:
            for thread_id in range(thread_count):
                thread = threading.Thread(
                    target=self._worker,
                    args=(thread_id,),
                    name=f"overture-worker-{thread_id}",
                    daemon=True,
                )
                thread.start()
                self._threads.append(thread)
        except RuntimeError:
            self.close()
            raise

    def _waiting(self) -> bool:
        busy = self._worked_on > 0 or bool(self._pending)
        return busy and (self._done_target == 0 or self._done_count < self._done_target)

    def _worker(self, thread_id: int) -> None:
        while True:
            with self._lock:
                while not self._pending:
                    if self._should_stop:
                        return
                    self._avail_cond.wait()
                item = self._pending.popleft()
                self._worked_on += 1

            try:
                item.run(thread_id)
                item.error = None
            except Exception as exc:  # noqa: BLE001 - kept on the item for the caller
                item.error = exc

            with self._lock:
                self._done.append(item)
                self._worked_on -= 1
                self._done_count += 1
                if not self._waiting():
                    self._done_cond.notify()

    def submit(self, items: Iterable[WorkItem]) -> None:
        """Enqueue work items in order."""
        batch = list(items)
        if not batch:
            return
        with self._lock:
            if self._should_stop:
                raise RuntimeError("cannot submit work to a closed thread pool")
            self._pending.extend(batch)
            if len(batch) == 1:
                self._avail_cond.notify()
            else:
                self._avail_cond.notify_all()

    def wait(self, count: int = 0) -> list[WorkItem]:
        """Wait until `count` items have finished (all of them if 0).

        Returns the items finished since the last wait, in completion order.
        """
        with self._lock:
            self._done_target = count
            while self._waiting():
                self._done_cond.wait()
            done = self._done
            self._done = []
            self._done_count = 0
            self._done_target = 0
        return done

    def close(self) -> None:
        """Stop the workers once the queue is drained and join them."""
        with self._lock:
            self._should_stop = True
            self._avail_cond.notify_all()
        current = threading.current_thread()
        for thread in self._threads:
            if thread is not current:
                thread.join()

    def __len__(self) -> int:
        return self._thread_count

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()