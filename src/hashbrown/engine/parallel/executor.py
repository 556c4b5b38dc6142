"""Background digest execution.

DigestExecutor runs digests on a thread pool and hands results back as
futures, so interactive callers never block on file I/O or hashing.

Architecture:
- N worker threads (default: CPU cores, minimum 2)
- One task per digest; digest_many reads each source once for all
  requested algorithms
- Comparisons submit two digest tasks and join them with a completion
  barrier that runs in done-callbacks, so no worker thread ever waits
  on another task
- A shared cancel event stops in-flight digests at the next chunk
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Dict, Iterable, List, Optional, Tuple, Union

from hashbrown.common import auto_detect_io_workers
from ..algorithms import DEFAULT_ALGORITHM, HashAlgorithm
from ..checksums import (
    DIGEST_CHUNK_SIZE, Source, _check_chunk_size, _is_path_source, digest, digest_all
)
from ..comparison import ComparisonOutcome, outcome_from_digests
from ..errors import DigestCancelledError, DigestError

logger = logging.getLogger(__name__)

DigestOutcome = Tuple[Source, HashAlgorithm, Union[str, DigestError]]


class DigestExecutor:
    """Thread pool for digests and comparisons.

    Usage:
        with DigestExecutor() as executor:
            future = executor.submit_compare(path_a, path_b, HashAlgorithm.SHA256)
            outcome = future.result()
    """

    def __init__(
        self,
        worker_threads: Optional[int] = None,
        chunk_size: int = DIGEST_CHUNK_SIZE,
    ) -> None:
        """Initialize the executor.

        Args:
            worker_threads: Number of worker threads (default: auto-detected)
            chunk_size: Bytes per read for every digest run here
        """
        _check_chunk_size(chunk_size)
        if worker_threads is not None and worker_threads < 1:
            raise ValueError(f"worker_threads must be at least 1, got {worker_threads}")

        self.worker_threads = worker_threads or auto_detect_io_workers()
        self.chunk_size = chunk_size
        self.cancel_event = threading.Event()
        self._pending: List[Future] = []
        self._pending_lock = threading.Lock()
        self._pool = ThreadPoolExecutor(
            max_workers=self.worker_threads,
            thread_name_prefix="hashbrown-digest",
        )

        logger.debug(
            f"Initialized DigestExecutor: {{'threads': {self.worker_threads}, 'chunk_size': {chunk_size}}}"
        )

    def __enter__(self) -> "DigestExecutor":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.shutdown(wait=True)

    def submit_digest(
        self,
        source: Source,
        algorithm: Union[HashAlgorithm, str] = DEFAULT_ALGORITHM,
    ) -> "Future[str]":
        """Digest one source in the background.

        Returns:
            Future resolving to the hex digest, or raising a DigestError
        """
        algorithm = HashAlgorithm.from_name(algorithm)
        return self._submit(digest, source, algorithm, self.chunk_size, self.cancel_event)

    def submit_compare(
        self,
        source_a: Source,
        source_b: Source,
        algorithm: Union[HashAlgorithm, str] = DEFAULT_ALGORITHM,
    ) -> "Future[ComparisonOutcome]":
        """Compare two sources in the background.

        Both digests are submitted at once. The returned future resolves
        when both have completed, in whichever order they finish. A failure
        on either side resolves it to an ERROR outcome naming the first
        failure observed. The same stream object given twice is digested
        once.
        """
        algorithm = HashAlgorithm.from_name(algorithm)
        future_a = self.submit_digest(source_a, algorithm)
        if source_b is source_a and not _is_path_source(source_a):
            future_b = future_a
        else:
            future_b = self.submit_digest(source_b, algorithm)
        return _join_comparison(future_a, future_b)

    def digest_many(
        self,
        sources: Iterable[Source],
        algorithms: Iterable[Union[HashAlgorithm, str]] = (DEFAULT_ALGORITHM,),
    ) -> List[DigestOutcome]:
        """Digest every source with every algorithm, sources in parallel.

        Each distinct source is one task that reads it once and feeds all
        algorithms; a stream object listed twice is read once. Blocks until
        all tasks finish.

        Returns:
            (source, algorithm, digest or DigestError) tuples in input order,
            sources outermost
        """
        parsed = [HashAlgorithm.from_name(a) for a in algorithms]
        if not parsed:
            raise ValueError("at least one algorithm is required")

        tasks: Dict[int, Future] = {}
        submitted = []
        for source in sources:
            key = id(source)
            if key not in tasks:
                tasks[key] = self._submit(
                    digest_all, source, parsed, self.chunk_size, self.cancel_event
                )
            submitted.append((source, tasks[key]))

        results: List[DigestOutcome] = []
        for source, future in submitted:
            try:
                if future.cancelled():
                    raise DigestCancelledError(
                        f"Digest of {source} cancelled before it started", file_path=str(source)
                    )
                digests = future.result()
            except DigestError as e:
                logger.info(f"Digest failed: {{'source': {str(source)!r}, 'error': {e.message!r}}}")
                results.extend((source, algorithm, e) for algorithm in parsed)
                continue
            results.extend((source, algorithm, digests[algorithm]) for algorithm in parsed)
        return results

    def cancel_all(self) -> None:
        """Cancel queued digests and stop running ones at the next chunk.

        Running digests fail with DigestCancelledError. The executor stays
        usable afterwards.
        """
        with self._pending_lock:
            pending = list(self._pending)

        cancelled = sum(1 for future in pending if future.cancel())
        logger.info(f"Cancelling digests: {{'queued_cancelled': {cancelled}, 'tracked': {len(pending)}}}")

        self.cancel_event.set()
        for future in pending:
            if not future.cancelled():
                future.exception()
        self.cancel_event.clear()

    def shutdown(self, wait: bool = True) -> None:
        """Shut down the worker pool."""
        self._pool.shutdown(wait=wait)
        logger.debug("DigestExecutor shut down")

    def _submit(self, fn, *args) -> Future:
        future = self._pool.submit(fn, *args)
        self._track(future)
        return future

    def _track(self, future: Future) -> None:
        with self._pending_lock:
            self._pending.append(future)
        future.add_done_callback(self._untrack)

    def _untrack(self, future: Future) -> None:
        with self._pending_lock:
            if future in self._pending:
                self._pending.remove(future)


def _join_comparison(future_a: Future, future_b: Future) -> "Future[ComparisonOutcome]":
    """Barrier resolving once both digest futures are done."""
    joined: Future = Future()
    joined.set_running_or_notify_cancel()
    lock = threading.Lock()
    state = {"remaining": 2, "first_error": None}

    def on_done(future: Future) -> None:
        error = _future_error(future)
        with lock:
            if error is not None and state["first_error"] is None:
                state["first_error"] = error
            state["remaining"] -= 1
            if state["remaining"]:
                return
            first_error = state["first_error"]

        if first_error is not None:
            joined.set_result(ComparisonOutcome.error(_error_message(first_error)))
        else:
            joined.set_result(outcome_from_digests(future_a.result(), future_b.result()))

    future_a.add_done_callback(on_done)
    future_b.add_done_callback(on_done)
    return joined


def _future_error(future: Future) -> Optional[BaseException]:
    if future.cancelled():
        return DigestCancelledError("Digest was cancelled before it started")
    return future.exception()


def _error_message(error: BaseException) -> str:
    if isinstance(error, DigestError):
        return error.message
    return f"{type(error).__name__}: {error}"
