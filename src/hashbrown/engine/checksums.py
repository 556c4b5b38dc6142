"""Streaming digest computation for files and byte streams."""

import logging
import os
import threading
from pathlib import Path
from typing import BinaryIO, Dict, Iterable, List, Optional, Union

from .algorithms import DEFAULT_ALGORITHM, HashAlgorithm
from .errors import DigestCancelledError, NotFoundError, ReadFailureError

logger = logging.getLogger(__name__)

# Constants for digest calculation
DIGEST_CHUNK_SIZE = 65536  # 64 KB chunks

Source = Union[str, os.PathLike, BinaryIO]


def digest(
    source: Source,
    algorithm: Union[HashAlgorithm, str] = DEFAULT_ALGORITHM,
    chunk_size: int = DIGEST_CHUNK_SIZE,
    cancel_event: Optional[threading.Event] = None,
) -> str:
    """
    Compute the digest of a file or binary stream.

    The source is read sequentially in chunks of ``chunk_size`` bytes.
    Each call owns its own hash object.

    Args:
        source: Path to the file, or a binary file-like object. Paths are
            opened and closed here; file objects are read from their current
            position and left open.
        algorithm: HashAlgorithm or algorithm name
        chunk_size: Bytes per read
        cancel_event: Optional event; when set, the digest stops at the next
            chunk boundary

    Returns:
        Lowercase hexadecimal digest string

    Raises:
        NotFoundError: If the path cannot be opened
        ReadFailureError: If an I/O error occurs while reading
        DigestCancelledError: If cancel_event is set before reading finishes
        UnsupportedAlgorithmError: If algorithm is an unknown name
        ValueError: If chunk_size is not positive
    """
    algorithm = HashAlgorithm.from_name(algorithm)
    return digest_all(source, [algorithm], chunk_size, cancel_event)[algorithm]


def digest_all(
    source: Source,
    algorithms: Iterable[Union[HashAlgorithm, str]],
    chunk_size: int = DIGEST_CHUNK_SIZE,
    cancel_event: Optional[threading.Event] = None,
) -> Dict[HashAlgorithm, str]:
    """
    Compute several digests of one source in a single read pass.

    Every chunk is fed to one hash object per algorithm, so a stream source
    is consumed exactly once whatever the number of algorithms.

    Returns:
        Mapping of algorithm to lowercase hexadecimal digest

    Raises:
        Same as digest(); ValueError also if no algorithm is given
    """
    parsed = [HashAlgorithm.from_name(a) for a in algorithms]
    if not parsed:
        raise ValueError("at least one algorithm is required")
    _check_chunk_size(chunk_size)

    if not _is_path_source(source):
        return _digest_stream(source, parsed, chunk_size, cancel_event, _describe(source))

    file_path = Path(source)
    try:
        f = open(file_path, 'rb')
    except (OSError, ValueError) as e:
        raise NotFoundError(
            f"Cannot open {file_path}: {_reason(e)}",
            file_path=str(file_path),
            reason=type(e).__name__,
        ) from e

    with f:
        return _digest_stream(f, parsed, chunk_size, cancel_event, str(file_path))


def digest_bytes(data: bytes, algorithm: Union[HashAlgorithm, str] = DEFAULT_ALGORITHM) -> str:
    """Compute the digest of an in-memory buffer in a single update."""
    hasher = HashAlgorithm.from_name(algorithm).new()
    hasher.update(data)
    return hasher.hexdigest()


def _digest_stream(
    stream: BinaryIO,
    algorithms: List[HashAlgorithm],
    chunk_size: int,
    cancel_event: Optional[threading.Event],
    name: str,
) -> Dict[HashAlgorithm, str]:
    """Feed a stream through fresh hash objects until EOF."""
    hashers = {algorithm: algorithm.new() for algorithm in algorithms}
    algorithm_names = [a.value for a in hashers]
    total_bytes = 0

    logger.debug(f"Digest started: {{'source': {name!r}, 'algorithms': {algorithm_names}}}")

    _raise_if_cancelled(cancel_event, name, total_bytes)
    try:
        while chunk := stream.read(chunk_size):
            _raise_if_cancelled(cancel_event, name, total_bytes)
            for hasher in hashers.values():
                hasher.update(chunk)
            total_bytes += len(chunk)
    except (OSError, ValueError) as e:
        raise ReadFailureError(
            f"Read failed for {name} after {total_bytes} bytes: {e}",
            file_path=name,
            bytes_read=total_bytes,
        ) from e

    results = {algorithm: hasher.hexdigest() for algorithm, hasher in hashers.items()}
    logger.debug(
        f"Digest finished: {{'source': {name!r}, 'algorithms': {algorithm_names}, "
        f"'bytes': {total_bytes}}}"
    )
    return results


def _raise_if_cancelled(cancel_event: Optional[threading.Event], name: str, total_bytes: int) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise DigestCancelledError(
            f"Digest of {name} cancelled",
            file_path=name,
            bytes_read=total_bytes,
        )


def _check_chunk_size(chunk_size: int) -> None:
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size <= 0:
        raise ValueError(f"chunk_size must be a positive integer, got {chunk_size!r}")


def _is_path_source(source: Source) -> bool:
    return isinstance(source, (str, os.PathLike))


def _reason(error: Exception) -> str:
    return getattr(error, "strerror", None) or str(error)


def _describe(stream: BinaryIO) -> str:
    name = getattr(stream, "name", None)
    return str(name) if name is not None else f"<{type(stream).__name__}>"
