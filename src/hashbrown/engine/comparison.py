"""Compare two sources by digest.

Both sources are digested with the same algorithm and the hex strings are
compared. A failure on either side fails the whole comparison; no digest
values are reported in that case.
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .algorithms import DEFAULT_ALGORITHM, HashAlgorithm
from .checksums import DIGEST_CHUNK_SIZE, Source, _check_chunk_size, _is_path_source, digest
from .errors import DigestError

logger = logging.getLogger(__name__)


class ComparisonStatus(Enum):
    """Classification of a comparison."""

    IDENTICAL = "identical"
    DIFFERENT = "different"
    ERROR = "error"


@dataclass(frozen=True)
class ComparisonOutcome:
    """Result of comparing two sources.

    Attributes:
        status: IDENTICAL, DIFFERENT or ERROR
        message: Description of the first failure (ERROR only)
    """
    status: ComparisonStatus
    message: Optional[str] = None

    @classmethod
    def identical(cls) -> "ComparisonOutcome":
        return cls(ComparisonStatus.IDENTICAL)

    @classmethod
    def different(cls) -> "ComparisonOutcome":
        return cls(ComparisonStatus.DIFFERENT)

    @classmethod
    def error(cls, message: str) -> "ComparisonOutcome":
        return cls(ComparisonStatus.ERROR, message)

    @property
    def is_identical(self) -> bool:
        return self.status is ComparisonStatus.IDENTICAL

    @property
    def is_different(self) -> bool:
        return self.status is ComparisonStatus.DIFFERENT

    @property
    def is_error(self) -> bool:
        return self.status is ComparisonStatus.ERROR

    @property
    def summary(self) -> str:
        """One-line human-readable description."""
        if self.is_identical:
            return "Files are identical"
        if self.is_different:
            return "Files are different"
        return f"Error: {self.message}"


def outcome_from_digests(digest_a: str, digest_b: str) -> ComparisonOutcome:
    """Classify two digests computed with the same algorithm."""
    if digest_a == digest_b:
        return ComparisonOutcome.identical()
    return ComparisonOutcome.different()


def compare(
    source_a: Source,
    source_b: Source,
    algorithm: Union[HashAlgorithm, str] = DEFAULT_ALGORITHM,
    chunk_size: int = DIGEST_CHUNK_SIZE,
    concurrent: bool = True,
    cancel_event: Optional[threading.Event] = None,
) -> ComparisonOutcome:
    """
    Compare two sources for byte-content equality.

    Args:
        source_a: First path or binary stream
        source_b: Second path or binary stream. Passing the same stream
            object as source_a digests it once.
        algorithm: HashAlgorithm or algorithm name, shared by both sides
        chunk_size: Bytes per read
        concurrent: Digest both sources on two worker threads; otherwise
            digest A then B on the calling thread
        cancel_event: Optional event passed to both digests

    Returns:
        ComparisonOutcome. Engine failures are returned as an ERROR outcome
        carrying the first failure observed, never raised.

    Raises:
        UnsupportedAlgorithmError: If algorithm is an unknown name
        ValueError: If chunk_size is not positive
    """
    algorithm = HashAlgorithm.from_name(algorithm)
    _check_chunk_size(chunk_size)

    logger.debug(
        f"Comparison started: {{'a': {str(source_a)!r}, 'b': {str(source_b)!r}, "
        f"'algorithm': {algorithm.value!r}, 'concurrent': {concurrent}}}"
    )

    try:
        if source_a is source_b and not _is_path_source(source_a):
            # One stream object: a second read would start at EOF
            digest_a = digest_b = digest(source_a, algorithm, chunk_size, cancel_event)
        elif concurrent:
            digest_a, digest_b = _digest_pair_concurrently(
                source_a, source_b, algorithm, chunk_size, cancel_event
            )
        else:
            digest_a = digest(source_a, algorithm, chunk_size, cancel_event)
            digest_b = digest(source_b, algorithm, chunk_size, cancel_event)
    except DigestError as e:
        logger.info(f"Comparison failed: {{'error': {e.message!r}}}")
        return ComparisonOutcome.error(e.message)

    outcome = outcome_from_digests(digest_a, digest_b)
    logger.debug(f"Comparison finished: {{'status': {outcome.status.value!r}}}")
    return outcome


def _digest_pair_concurrently(
    source_a: Source,
    source_b: Source,
    algorithm: HashAlgorithm,
    chunk_size: int,
    cancel_event: Optional[threading.Event],
) -> tuple:
    """Digest both sources on a two-thread pool and join.

    Raises the first DigestError in completion order. The other digest is
    allowed to finish; its result is discarded.
    """
    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="hashbrown-compare") as pool:
        future_a = pool.submit(digest, source_a, algorithm, chunk_size, cancel_event)
        future_b = pool.submit(digest, source_b, algorithm, chunk_size, cancel_event)

        for future in as_completed((future_a, future_b)):
            error = future.exception()
            if error is not None:
                raise error

        return future_a.result(), future_b.result()
