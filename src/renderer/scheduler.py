# renderer/scheduler.py
import logging
import queue
import threading
from typing import Any, Callable, Iterable, Iterator, Tuple

logger = logging.getLogger(__name__)

# End-of-work marker; each worker consumes exactly one
_SENTINEL = object()


class RenderError(RuntimeError):
    """Raised by the driver when any worker fails. The render is abandoned."""


class _WorkerFailure:
    """Carries an exception from a worker thread back to the driver."""

    def __init__(self, item, exc: BaseException):
        self.item = item
        self.exc = exc


def parallel_map(items: Iterable, func: Callable[[Any], Any],
                 num_workers: int) -> Iterator[Tuple[Any, Any]]:
    """
    Apply func to every item on a fixed pool of worker threads.

    All items are queued up front, followed by one end sentinel per worker.
    Yields (item, func(item)) pairs in completion order, which is arbitrary;
    callers must use the item to place each result.

    Args:
        items: Inputs to map. Consumed immediately.
        func: Called once per item from a worker thread.
        num_workers: Number of threads in the pool (at least 1).

    Raises:
        RenderError: If func raises for any item. Remaining workers stop
            picking up new work and no further results are yielded.
    """
    if num_workers < 1:
        raise ValueError(f"num_workers must be at least 1, got {num_workers}")

    work = list(items)
    work_queue: "queue.Queue" = queue.Queue()
    result_queue: "queue.Queue" = queue.Queue()
    abort = threading.Event()

    def worker():
        while True:
            item = work_queue.get()
            if item is _SENTINEL:
                return
            if abort.is_set():
                continue
            try:
                result = func(item)
            except BaseException as e:
                # Any failure, even SystemExit, must reach the driver
                abort.set()
                result_queue.put(_WorkerFailure(item, e))
            else:
                result_queue.put((item, result))

    threads = [threading.Thread(target=worker, name=f"render-worker-{i}", daemon=True)
               for i in range(num_workers)]
    for thread in threads:
        thread.start()
    logger.debug("Started %d workers for %d work items", num_workers, len(work))

    for item in work:
        work_queue.put(item)
    for _ in threads:
        work_queue.put(_SENTINEL)

    try:
        for _ in range(len(work)):
            result = result_queue.get()
            if isinstance(result, _WorkerFailure):
                logger.error("Worker failed on %r: %s", result.item, result.exc)
                raise RenderError(f"render failed on work item {result.item!r}") from result.exc
            yield result
    finally:
        # Also reached when the consumer stops iterating early
        abort.set()
        for thread in threads:
            thread.join()
        logger.debug("All %d workers stopped", num_workers)
