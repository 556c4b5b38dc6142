"""Digesting engine and comparison orchestrator."""

from .algorithms import DEFAULT_ALGORITHM, HashAlgorithm
from .checksums import DIGEST_CHUNK_SIZE, digest, digest_all, digest_bytes
from .comparison import ComparisonOutcome, ComparisonStatus, compare, outcome_from_digests
from .async_checksums import compare_async, digest_async
from .errors import (
    DigestError, NotFoundError, ReadFailureError, UnsupportedAlgorithmError,
    DigestCancelledError, classify_error
)
from .file_info import FileInfo, describe_file
from .parallel import DigestExecutor

__all__ = [
    'DEFAULT_ALGORITHM',
    'DIGEST_CHUNK_SIZE',
    'HashAlgorithm',
    'digest',
    'digest_all',
    'digest_bytes',
    'digest_async',
    'compare',
    'compare_async',
    'outcome_from_digests',
    'ComparisonOutcome',
    'ComparisonStatus',
    'DigestExecutor',
    'FileInfo',
    'describe_file',
    'DigestError',
    'NotFoundError',
    'ReadFailureError',
    'UnsupportedAlgorithmError',
    'DigestCancelledError',
    'classify_error',
]
