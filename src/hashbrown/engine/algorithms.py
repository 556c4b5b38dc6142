"""Supported hash algorithms."""

import hashlib
from enum import Enum

from .errors import UnsupportedAlgorithmError


class HashAlgorithm(Enum):
    """Closed set of digest algorithms.

    The value is the display name. Each member maps onto a hashlib
    constructor and knows its digest size.
    """

    MD5 = "MD5"
    SHA1 = "SHA-1"
    SHA256 = "SHA-256"
    SHA384 = "SHA-384"
    SHA512 = "SHA-512"

    @property
    def hashlib_name(self) -> str:
        """Name accepted by hashlib.new()."""
        return self.value.replace("-", "").lower()

    @property
    def digest_size(self) -> int:
        """Digest length in bytes."""
        return _DIGEST_SIZES[self]

    @property
    def hex_length(self) -> int:
        """Length of the hexadecimal digest string."""
        return self.digest_size * 2

    def new(self):
        """Create a fresh incremental hash object (non-security use)."""
        return hashlib.new(self.hashlib_name, usedforsecurity=False)

    @classmethod
    def from_name(cls, name: "str | HashAlgorithm") -> "HashAlgorithm":
        """Parse an algorithm name.

        Matching ignores case, dashes and underscores, so "sha256",
        "SHA-256" and "sha_256" all resolve to SHA256.

        Raises:
            UnsupportedAlgorithmError: If the name matches no algorithm
        """
        if isinstance(name, cls):
            return name

        key = str(name).replace("-", "").replace("_", "").strip().upper()
        for algorithm in cls:
            if algorithm.name == key:
                return algorithm

        supported = ", ".join(a.value for a in cls)
        raise UnsupportedAlgorithmError(
            f"Unsupported hash algorithm: {name!r} (supported: {supported})",
            algorithm=str(name),
        )

    def __str__(self) -> str:
        return self.value


DEFAULT_ALGORITHM = HashAlgorithm.SHA256

_DIGEST_SIZES = {
    HashAlgorithm.MD5: 16,
    HashAlgorithm.SHA1: 20,
    HashAlgorithm.SHA256: 32,
    HashAlgorithm.SHA384: 48,
    HashAlgorithm.SHA512: 64,
}
