"""Error classes for the digesting engine."""

from hashbrown.common import FileProcessingError


class DigestError(FileProcessingError):
    """Base error for digest operations."""
    pass


class NotFoundError(DigestError):
    """Source could not be opened (missing, inaccessible, or not a file)."""
    pass


class ReadFailureError(DigestError):
    """I/O error while streaming the source."""
    pass


class UnsupportedAlgorithmError(DigestError):
    """Algorithm name does not match any supported algorithm."""
    pass


class DigestCancelledError(DigestError):
    """Digest was cancelled before the source was fully read."""
    pass


def classify_error(exception: Exception) -> str:
    """
    Classify an exception into an error category.

    Args:
        exception: The exception to classify

    Returns:
        Error category string: 'not_found', 'read_failure', 'unsupported',
        'cancelled', 'permission', 'io', or 'unknown'
    """
    if isinstance(exception, NotFoundError):
        return 'not_found'
    elif isinstance(exception, ReadFailureError):
        return 'read_failure'
    elif isinstance(exception, UnsupportedAlgorithmError):
        return 'unsupported'
    elif isinstance(exception, DigestCancelledError):
        return 'cancelled'
    elif isinstance(exception, FileNotFoundError):
        return 'not_found'
    elif isinstance(exception, PermissionError):
        return 'permission'
    elif isinstance(exception, OSError):
        return 'io'
    else:
        return 'unknown'
