"""Configuration utilities."""

import os
import tempfile
import platformdirs
from pathlib import Path

APP_NAME = "hashbrown"


def expand_path_variables(path: str) -> str:
    """Expand ${VAR} variables in paths.

    Supported variables:
        ${USER_HOME}: User's home directory
        ${USER_CONFIG}: hashbrown config directory
        ${USER_CACHE}: hashbrown cache directory
        ${USER_LOGS}: hashbrown log directory
        ${TEMP}: Temporary directory

    Args:
        path: Path string with variables

    Returns:
        Expanded path string
    """
    if not isinstance(path, str):
        return path

    replacements = {
        "${USER_HOME}": str(Path.home()),
        "${USER_CONFIG}": platformdirs.user_config_dir(APP_NAME, appauthor=False),
        "${USER_CACHE}": platformdirs.user_cache_dir(APP_NAME, appauthor=False),
        "${USER_LOGS}": platformdirs.user_log_dir(APP_NAME, appauthor=False),
        "${TEMP}": tempfile.gettempdir(),
    }

    for var, value in replacements.items():
        path = path.replace(var, value)

    return path


def get_cpu_count() -> int:
    """Get number of CPU cores, with fallback."""
    return os.cpu_count() or 4


def auto_detect_io_workers(multiplier: float = 1.0, min_workers: int = 2) -> int:
    """Auto-detect number of digest worker threads.

    Args:
        multiplier: Multiplier for CPU count
        min_workers: Minimum number of workers (a comparison needs two)

    Returns:
        Number of worker threads
    """
    cpu_count = get_cpu_count()
    return max(min_workers, int(cpu_count * multiplier))
