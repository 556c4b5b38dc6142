"""File metadata shown next to a digest."""

import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Union

from .checksums import _reason
from .errors import NotFoundError


@dataclass(frozen=True)
class FileInfo:
    """Raw metadata about a file selected for digesting.

    Attributes:
        file_path: Path as given by the caller
        name: Final path component
        extension: Upper-case extension without the dot ("" if none)
        file_size: Size of the file in bytes
        modified_time: Last modification time (UTC)
    """
    file_path: Path
    name: str
    extension: str
    file_size: int
    modified_time: datetime


def describe_file(path: Union[str, os.PathLike]) -> FileInfo:
    """
    Collect metadata for a regular file.

    Args:
        path: Path to the file

    Returns:
        FileInfo for the file

    Raises:
        NotFoundError: If the path does not exist, cannot be inspected, or
            is not a regular file
    """
    file_path = Path(path)
    try:
        stat = file_path.stat()
    except (OSError, ValueError) as e:
        raise NotFoundError(
            f"Cannot inspect {file_path}: {_reason(e)}",
            file_path=str(file_path),
            reason=type(e).__name__,
        ) from e

    if not file_path.is_file():
        raise NotFoundError(f"Not a regular file: {file_path}", file_path=str(file_path))

    return FileInfo(
        file_path=file_path,
        name=file_path.name,
        extension=file_path.suffix.lstrip(".").upper(),
        file_size=stat.st_size,
        modified_time=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
    )
