"""Configuration models for the digesting engine and CLI."""

from pydantic import BaseModel, Field, ConfigDict, field_validator

from hashbrown.common import LoggingConfig, auto_detect_io_workers
from .algorithms import DEFAULT_ALGORITHM, HashAlgorithm
from .checksums import DIGEST_CHUNK_SIZE
from .errors import UnsupportedAlgorithmError


class EngineConfig(BaseModel):
    """Digest engine configuration."""

    model_config = ConfigDict(extra='forbid')

    default_algorithm: str = Field(
        default=DEFAULT_ALGORITHM.value,
        description="Algorithm used when none is given (MD5, SHA-1, SHA-256, SHA-384, SHA-512)"
    )
    chunk_size: int = Field(
        default=DIGEST_CHUNK_SIZE,
        gt=0,
        description="Bytes read per chunk while digesting"
    )
    worker_threads: int = Field(
        default_factory=auto_detect_io_workers,
        gt=0,
        description="Number of background digest threads (default: CPU cores, minimum 2)"
    )

    @field_validator('default_algorithm', mode='before')
    @classmethod
    def normalize_algorithm(cls, v: str) -> str:
        """Accept any spelling HashAlgorithm.from_name understands."""
        if isinstance(v, (str, HashAlgorithm)):
            try:
                return HashAlgorithm.from_name(v).value
            except UnsupportedAlgorithmError as e:
                raise ValueError(e.message) from e
        return v

    @property
    def algorithm(self) -> HashAlgorithm:
        return HashAlgorithm(self.default_algorithm)


class HashbrownConfig(BaseModel):
    """Root configuration for hashbrown."""

    model_config = ConfigDict(extra='forbid')

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    engine: EngineConfig = Field(default_factory=EngineConfig)
