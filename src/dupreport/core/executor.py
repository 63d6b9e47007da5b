"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/executor.py
Bounded-concurrency map over a list of items.

A fixed number of worker threads drain a shared claim counter: each worker takes
the next unclaimed index, runs the mapper to completion, stores the result in
that index's slot and claims again. Failures, including BaseException
subclasses, are recorded per item and never stop the other workers. Blocking
file I/O inside the mapper releases the GIL, so the pool gives real I/O
parallelism for hashing.
"""

import logging
import threading
from collections import deque
from typing import Callable, Deque, List, Optional, Sequence, Tuple, TypeVar

from dupreport.core.models import MappedError, MappedResult

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def map_with_concurrency(
        items: Sequence[T],
        limit: int,
        mapper: Callable[[T], Optional[R]],
        on_progress: Optional[Callable[[int, T], None]] = None
) -> MappedResult[R]:
    """
    Apply mapper to every item with at most `limit` calls in flight.

    Args:
        items: Items to process; results[i] always corresponds to items[i]
        limit: Maximum number of simultaneous mapper calls (>= 1)
        mapper: Callable returning a value, None (skip, no error) or raising
        on_progress: Called once per finished item with (completed_count, item),
                     in completion order. Calls never overlap; a slow callback
                     delays reporting but not the claiming of further items

    Returns:
        MappedResult with order-preserving results and errors sorted by index

    Raises:
        KeyboardInterrupt, SystemExit: Re-raised once every item has been
            processed, if the mapper raised one for any item
    """
    if limit < 1:
        raise ValueError(f"Concurrency limit must be at least 1, got {limit}")

    total = len(items)
    results: List[Optional[R]] = [None] * total
    errors: List[MappedError] = []

    if total == 0:
        return MappedResult(results=results, errors=errors)

    lock = threading.Lock()
    progress_lock = threading.Lock()
    pending: Deque[Tuple[int, T]] = deque()
    next_index = 0
    completed = 0

    def drain_progress() -> None:
        # Whoever holds progress_lock reports for everyone; the others move on
        while True:
            if not progress_lock.acquire(blocking=False):
                return
            try:
                while True:
                    with lock:
                        if not pending:
                            break
                        count, finished_item = pending.popleft()
                    try:
                        on_progress(count, finished_item)
                    except Exception:
                        logger.exception("Progress callback failed")
            finally:
                progress_lock.release()
            # Entries queued while the lock was being released would be stranded
            with lock:
                if not pending:
                    return

    def worker() -> None:
        nonlocal next_index, completed
        while True:
            with lock:
                current = next_index
                next_index += 1
            if current >= total:
                return

            item = items[current]
            try:
                value = mapper(item)
                failure = None
            except BaseException as e:
                # Every item ends with a value or an error, whatever the mapper raised
                value = None
                failure = e

            with lock:
                results[current] = value
                if failure is not None:
                    errors.append(MappedError(index=current, item=item, error=failure))
                completed += 1
                if on_progress:
                    pending.append((completed, item))

            if on_progress:
                drain_progress()

    worker_count = min(limit, total)
    threads = [
        threading.Thread(target=worker, name=f"dupreport-worker-{i}", daemon=True)
        for i in range(worker_count)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    errors.sort(key=lambda e: e.index)
    logger.debug(f"Mapped {total} items with {worker_count} workers ({len(errors)} failed)")

    # The batch is complete, but an interrupt or exit request still aborts the caller
    for error in errors:
        if isinstance(error.error, (KeyboardInterrupt, SystemExit)):
            raise error.error

    return MappedResult(results=results, errors=errors)
