"""Worker dispatch: explicit thread groups and a parallel for-each."""

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Iterable, List, Optional

MAX_WORKERS = 100


class WorkerGroup:
    """
    Explicitly created threads joined together as one barrier.

    Exceptions raised by a worker are kept and re-raised from join_all()
    once every worker has finished, so a failed self-check in a worker
    still takes the whole program down.
    """

    def __init__(self):
        self._threads: List[threading.Thread] = []
        self._results: List[Any] = []
        self._failures: List[BaseException] = []
        self._lock = threading.Lock()

    def spawn(self, name: str, target: Callable[..., Any], *args) -> threading.Thread:
        slot = len(self._threads)
        self._results.append(None)

        def run():
            try:
                self._results[slot] = target(*args)
            except BaseException as exc:
                with self._lock:
                    self._failures.append(exc)

        thread = threading.Thread(target=run, name=name)
        self._threads.append(thread)
        thread.start()
        return thread

    def join_all(self) -> List[Any]:
        """Wait for every worker; return results in spawn order."""
        for thread in self._threads:
            thread.join()
        if self._failures:
            raise self._failures[0]
        return list(self._results)

    def __len__(self):
        return len(self._threads)


def parallel_for_each(indices: Iterable[int], action: Callable[[int], Any],
                      max_workers: Optional[int] = None) -> List[Any]:
    """Run ``action`` for every index on a thread pool and wait for all of them.

    Results come back in index order. The first worker exception, in index
    order, is re-raised after the pool has drained.
    """
    with ThreadPoolExecutor(max_workers=max_workers or MAX_WORKERS,
                            thread_name_prefix="worker") as pool:
        futures = [pool.submit(action, index) for index in indices]
    return [future.result() for future in futures]
