# Copyright 2026 The Multihashing Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import hashlib

import pytest

import multihashing
from multihashing import _registry
from multihashing import errors
from multihashing import hashing

from tests import test_support


class TestHash:
    def test_known_value(self):
        result = hashing.hash("sha1", test_support.HELLO)
        assert result == test_support.HELLO_SHA1_MULTIHASH
        assert list(result[:2]) == [17, 20]

    def test_truncated(self):
        result = hashing.hash("sha1", test_support.HELLO, 10)
        assert result == test_support.HELLO_SHA1_MULTIHASH_10

    def test_sha2_256(self):
        result = hashing.hash("sha2_256", test_support.HELLO)
        assert result == bytes([18, 32]) + test_support.HELLO_SHA2_256

    def test_sha3_truncated(self):
        result = hashing.hash("sha3", test_support.HELLO, 10)
        assert result == bytes([20, 10]) + test_support.HELLO_SHA3_PREFIX

    def test_sha2_512(self):
        result = hashing.hash("sha512", test_support.HELLO)
        assert result == bytes([19, 64]) + hashlib.sha512(b"Hello").digest()

    @pytest.mark.parametrize(
        "identifier",
        ["sha256", "sha2_256", multihashing.HashFunction.SHA2_256],
    )
    def test_naming_conventions_are_equivalent(self, identifier):
        assert hashing.hash(identifier, b"data") == hashing.hash(
            "sha2_256", b"data"
        )

    def test_unknown_hash_function(self):
        with pytest.raises(
            errors.InvalidHashFunctionError, match="Invalid hash function"
        ):
            hashing.hash("sha2_unknown", test_support.HELLO)

    def test_truncation_longer_than_digest(self):
        with pytest.raises(errors.InvalidTruncationLengthError):
            hashing.hash("sha1", test_support.HELLO, 30)

    @pytest.mark.parametrize("name", test_support.unimplemented_names)
    def test_unimplemented(self, name):
        with pytest.raises(
            errors.UnimplementedHashFunctionError,
            match="Unimplemented hash function",
        ):
            hashing.hash(name, test_support.HELLO)

    def test_name_checked_before_truncation(self):
        with pytest.raises(errors.InvalidHashFunctionError):
            hashing.hash("sha2_unknown", test_support.HELLO, 300)

    def test_unimplemented_checked_before_truncation(self):
        with pytest.raises(errors.UnimplementedHashFunctionError):
            hashing.hash("blake2b", test_support.HELLO, 300)

    def test_decode_round_trip(self, implemented_name):
        result = hashing.hash(implemented_name, b"data", 7)
        decoded = hashing.decode(result)
        assert decoded.name == implemented_name
        assert decoded.length == 7
        assert decoded.to_bytes() == result


class TestIncremental:
    def test_init_update_final(self):
        context = hashing.hash_init("sha1")
        context = hashing.hash_update(context, test_support.HELLO)
        result = hashing.hash_final(context)
        assert result == test_support.HELLO_SHA1_MULTIHASH

    def test_init_with_data_and_truncation(self):
        context = hashing.hash_init("sha1", b"Hell")
        context = hashing.hash_update(context, b"o")
        result = hashing.hash_final(context, 10)
        assert result == test_support.HELLO_SHA1_MULTIHASH_10

    @pytest.mark.parametrize("length", [None, 0, 1, 16])
    def test_every_split_matches_one_shot(self, implemented_name, length):
        data = b"The quick brown fox jumps over the lazy dog"
        expected = hashing.hash(implemented_name, data, length)
        for split in range(len(data) + 1):
            context = hashing.hash_init(implemented_name, data[:split])
            context = hashing.hash_update(context, data[split:])
            assert hashing.hash_final(context, length) == expected

    def test_many_small_updates(self, implemented_name):
        data = bytes(range(256)) * 4
        context = hashing.hash_init(implemented_name)
        for i in range(0, len(data), 3):
            context = hashing.hash_update(context, data[i : i + 3])
        assert hashing.hash_final(context) == hashing.hash(
            implemented_name, data
        )

    def test_empty_context(self, implemented_name):
        context = hashing.hash_init(implemented_name)
        assert hashing.hash_final(context) == hashing.hash(
            implemented_name, b""
        )

    def test_native_id_context_encodes_canonical_code(self):
        context = hashing.hash_init("sha256", test_support.HELLO)
        result = hashing.hash_final(context)
        assert result == bytes([18, 32]) + test_support.HELLO_SHA2_256

    def test_unknown_hash_function(self):
        with pytest.raises(errors.InvalidHashFunctionError):
            hashing.hash_init("sha2_unknown")

    @pytest.mark.parametrize("name", test_support.unimplemented_names)
    def test_unimplemented(self, name):
        with pytest.raises(errors.UnimplementedHashFunctionError):
            hashing.hash_init(name)

    def test_final_truncation_too_long(self):
        context = hashing.hash_init("sha1", test_support.HELLO)
        with pytest.raises(errors.InvalidTruncationLengthError):
            hashing.hash_final(context, 30)

    def test_failed_final_leaves_context_usable(self):
        context = hashing.hash_init("sha1", b"Hell")
        with pytest.raises(errors.InvalidTruncationLengthError):
            hashing.hash_final(context, 30)
        assert not context.finalized

        context = hashing.hash_update(context, b"o")
        result = hashing.hash_final(context, 10)
        assert result == test_support.HELLO_SHA1_MULTIHASH_10
        assert context.finalized

    def test_update_after_final(self):
        context = hashing.hash_init("sha1")
        hashing.hash_final(context)
        assert context.finalized
        with pytest.raises(
            errors.ContextFinalizedError, match="already finalized"
        ):
            hashing.hash_update(context, b"more")

    def test_final_twice(self):
        context = hashing.hash_init("sha1")
        hashing.hash_final(context)
        with pytest.raises(errors.ContextFinalizedError):
            hashing.hash_final(context)

    def test_context_algorithm(self):
        context = hashing.hash_init("keccak_512")
        assert context.algorithm.name == "sha3"
        assert repr(context) == "HashContext(sha3, open)"


class TestHashFile:
    def test_matches_hash_of_contents(self, sample_file):
        expected = hashing.hash("sha2_256", test_support.KNOWN_FILE_TEXT)
        assert hashing.hash_file(sample_file, "sha2_256") == expected

    @pytest.mark.parametrize("chunk_size", [1, 7, 4096, 1048576])
    def test_chunk_size_does_not_change_result(self, sample_file, chunk_size):
        expected = hashing.hash("blake3", test_support.KNOWN_FILE_TEXT, 12)
        result = hashing.hash_file(
            sample_file, "blake3", 12, chunk_size=chunk_size
        )
        assert result == expected

    def test_empty_file(self, empty_file):
        assert hashing.hash_file(empty_file, "sha1") == hashing.hash(
            "sha1", b""
        )

    def test_invalid_chunk_size(self, sample_file):
        with pytest.raises(ValueError, match="Chunk size must be positive"):
            hashing.hash_file(sample_file, "sha1", chunk_size=0)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            hashing.hash_file(tmp_path / "missing", "sha1")


class TestConfig:
    def test_defaults(self):
        config = hashing.Config()
        assert config.algorithm is _registry.resolve("sha2_256")
        assert config.truncation_length is None
        assert config.chunk_size == hashing.DEFAULT_CHUNK_SIZE
        assert config.hash(b"data") == hashing.hash("sha2_256", b"data")

    def test_builder(self):
        config = (
            hashing.Config()
            .use_hash_function("sha1")
            .set_truncation_length(10)
        )
        assert config.hash(test_support.HELLO) == (
            test_support.HELLO_SHA1_MULTIHASH_10
        )

    def test_hash_file(self, sample_file):
        config = hashing.Config().use_hash_function("sha3").set_chunk_size(5)
        assert config.hash_file(sample_file) == hashing.hash(
            "sha3", test_support.KNOWN_FILE_TEXT
        )

    def test_init(self):
        config = hashing.Config().use_hash_function("sha1")
        context = config.init(b"Hell").update(b"o")
        assert context.final() == test_support.HELLO_SHA1_MULTIHASH

    def test_unknown_hash_function(self):
        with pytest.raises(errors.InvalidHashFunctionError):
            hashing.Config().use_hash_function("sha2_unknown")

    def test_truncation_too_long(self):
        config = hashing.Config().use_hash_function("sha1")
        with pytest.raises(errors.InvalidTruncationLengthError):
            config.set_truncation_length(30)

    def test_truncation_checked_when_changing_function(self):
        config = hashing.Config().set_truncation_length(32)
        with pytest.raises(errors.InvalidTruncationLengthError):
            config.use_hash_function("sha1")
        assert config.algorithm.name == "sha2_256"

    def test_disable_truncation(self):
        config = hashing.Config().set_truncation_length(4)
        config.set_truncation_length(None)
        assert config.hash(b"data") == hashing.hash("sha2_256", b"data")

    def test_invalid_chunk_size(self):
        with pytest.raises(ValueError, match="Chunk size must be positive"):
            hashing.Config().set_chunk_size(0)

    def test_unimplemented_is_reported_when_hashing(self):
        config = hashing.Config().use_hash_function("blake2s")
        with pytest.raises(errors.UnimplementedHashFunctionError):
            config.hash(b"data")
