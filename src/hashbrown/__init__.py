"""hashbrown: file digests and digest-based file comparison."""

__version__ = "0.1.0"
