"""Coroutine versions of digest and compare, reading files with aiofiles."""

import asyncio
import logging
import os
from pathlib import Path
from typing import Union

import aiofiles

from .algorithms import DEFAULT_ALGORITHM, HashAlgorithm
from .checksums import DIGEST_CHUNK_SIZE, _check_chunk_size, _reason
from .comparison import ComparisonOutcome, outcome_from_digests
from .errors import DigestError, NotFoundError, ReadFailureError

logger = logging.getLogger(__name__)

PathSource = Union[str, os.PathLike]


async def digest_async(
    source: PathSource,
    algorithm: Union[HashAlgorithm, str] = DEFAULT_ALGORITHM,
    chunk_size: int = DIGEST_CHUNK_SIZE,
) -> str:
    """
    Compute the digest of a file without blocking the event loop on reads.

    Produces the same hex string as ``checksums.digest`` for the same file.

    Raises:
        NotFoundError: If the file cannot be opened
        ReadFailureError: If an I/O error occurs while reading
    """
    algorithm = HashAlgorithm.from_name(algorithm)
    _check_chunk_size(chunk_size)
    file_path = Path(source)
    hasher = algorithm.new()
    total_bytes = 0

    try:
        f = await aiofiles.open(file_path, 'rb')
    except (OSError, ValueError) as e:
        raise NotFoundError(
            f"Cannot open {file_path}: {_reason(e)}",
            file_path=str(file_path),
            reason=type(e).__name__,
        ) from e

    try:
        while chunk := await f.read(chunk_size):
            hasher.update(chunk)
            total_bytes += len(chunk)
    except (OSError, ValueError) as e:
        raise ReadFailureError(
            f"Read failed for {file_path} after {total_bytes} bytes: {e}",
            file_path=str(file_path),
            bytes_read=total_bytes,
        ) from e
    finally:
        await f.close()

    logger.debug(
        f"Async digest finished: {{'source': {str(file_path)!r}, 'algorithm': {algorithm.value!r}, "
        f"'bytes': {total_bytes}}}"
    )
    return hasher.hexdigest()


async def compare_async(
    source_a: PathSource,
    source_b: PathSource,
    algorithm: Union[HashAlgorithm, str] = DEFAULT_ALGORITHM,
    chunk_size: int = DIGEST_CHUNK_SIZE,
) -> ComparisonOutcome:
    """Compare two files concurrently on the running event loop.

    Same semantics as ``comparison.compare``: any digest failure yields an
    ERROR outcome and no digest values.
    """
    algorithm = HashAlgorithm.from_name(algorithm)
    _check_chunk_size(chunk_size)

    results = await asyncio.gather(
        digest_async(source_a, algorithm, chunk_size),
        digest_async(source_b, algorithm, chunk_size),
        return_exceptions=True,
    )

    for result in results:
        if isinstance(result, DigestError):
            logger.info(f"Async comparison failed: {{'error': {result.message!r}}}")
            return ComparisonOutcome.error(result.message)
        if isinstance(result, BaseException):
            raise result

    return outcome_from_digests(*results)
