"""Tests for engine configuration models."""

import pytest
from pydantic import ValidationError

from hashbrown.engine.algorithms import HashAlgorithm
from hashbrown.engine.config import EngineConfig, HashbrownConfig


class TestEngineConfig:
    """Tests for EngineConfig."""

    def test_default_values_are_reasonable(self):
        config = EngineConfig()

        assert config.default_algorithm == "SHA-256"
        assert config.algorithm is HashAlgorithm.SHA256
        assert config.chunk_size == 65536
        assert config.worker_threads >= 2

    @pytest.mark.parametrize("name,expected", [
        ("md5", "MD5"),
        ("sha_1", "SHA-1"),
        ("SHA384", "SHA-384"),
        (HashAlgorithm.SHA512, "SHA-512"),
    ])
    def test_algorithm_normalized(self, name, expected):
        assert EngineConfig(default_algorithm=name).default_algorithm == expected

    def test_rejects_unknown_algorithm(self):
        with pytest.raises(ValidationError):
            EngineConfig(default_algorithm="crc32")

    @pytest.mark.parametrize("field", ["chunk_size", "worker_threads"])
    def test_rejects_non_positive(self, field):
        with pytest.raises(ValidationError):
            EngineConfig(**{field: 0})

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            EngineConfig(buffer=10)


class TestHashbrownConfig:
    """Tests for the root configuration."""

    def test_defaults(self):
        config = HashbrownConfig()

        assert config.logging.level == "WARNING"
        assert config.engine.default_algorithm == "SHA-256"

    def test_from_nested_dict(self):
        config = HashbrownConfig(**{
            "logging": {"level": "debug", "format": "JSON"},
            "engine": {"default_algorithm": "sha1", "chunk_size": 1024, "worker_threads": 3},
        })

        assert config.logging.level == "DEBUG"
        assert config.logging.format == "json"
        assert config.engine.algorithm is HashAlgorithm.SHA1
        assert config.engine.chunk_size == 1024
        assert config.engine.worker_threads == 3
