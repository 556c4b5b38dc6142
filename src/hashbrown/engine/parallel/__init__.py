"""Background execution for the digesting engine.

- DigestExecutor: thread pool delivering digests and comparisons as futures
"""

from .executor import DigestExecutor

__all__ = [
    "DigestExecutor",
]
