"""Tests for the coroutine digest and compare functions."""

import hashlib

import pytest

from hashbrown.engine.algorithms import HashAlgorithm
from hashbrown.engine.async_checksums import compare_async, digest_async
from hashbrown.engine.checksums import digest
from hashbrown.engine.errors import NotFoundError, UnsupportedAlgorithmError


@pytest.fixture
def large_file(tmp_path):
    data = bytes(range(256)) * 1000
    path = tmp_path / "large.bin"
    path.write_bytes(data)
    return path, data


class TestDigestAsync:
    """Tests for digest_async."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("algorithm", list(HashAlgorithm))
    async def test_matches_sync_digest(self, large_file, algorithm):
        path, _ = large_file

        assert await digest_async(path, algorithm) == digest(path, algorithm)

    @pytest.mark.asyncio
    async def test_small_chunks_match_single_buffer(self, large_file):
        path, data = large_file

        result = await digest_async(path, "sha384", chunk_size=999)

        assert result == hashlib.sha384(data).hexdigest()

    @pytest.mark.asyncio
    async def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.bin"
        path.write_bytes(b"")

        assert await digest_async(path, HashAlgorithm.MD5) == "d41d8cd98f00b204e9800998ecf8427e"

    @pytest.mark.asyncio
    async def test_missing_file_raises_not_found(self, tmp_path):
        with pytest.raises(NotFoundError):
            await digest_async(tmp_path / "missing.bin")

    @pytest.mark.asyncio
    async def test_nul_byte_in_path_raises_not_found(self, tmp_path):
        with pytest.raises(NotFoundError):
            await digest_async(str(tmp_path / "bad\x00name.bin"))

    @pytest.mark.asyncio
    async def test_unknown_algorithm(self, large_file):
        path, _ = large_file

        with pytest.raises(UnsupportedAlgorithmError):
            await digest_async(path, "blake3")


class TestCompareAsync:
    """Tests for compare_async."""

    @pytest.mark.asyncio
    async def test_identical(self, large_file, tmp_path):
        path, data = large_file
        copy = tmp_path / "copy.bin"
        copy.write_bytes(data)

        assert (await compare_async(path, copy)).is_identical

    @pytest.mark.asyncio
    async def test_different(self, large_file, tmp_path):
        path, data = large_file
        other = tmp_path / "other.bin"
        other.write_bytes(data[:-1] + b"\x00")

        assert (await compare_async(path, other, HashAlgorithm.SHA1)).is_different

    @pytest.mark.asyncio
    async def test_missing_side_yields_error(self, large_file, tmp_path):
        path, _ = large_file

        outcome = await compare_async(path, tmp_path / "missing.bin")

        assert outcome.is_error
        assert "missing.bin" in outcome.message

    @pytest.mark.asyncio
    async def test_nul_byte_path_yields_error(self, large_file, tmp_path):
        path, _ = large_file

        outcome = await compare_async(path, str(tmp_path / "bad\x00name.bin"))

        assert outcome.is_error
