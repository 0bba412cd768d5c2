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

"""High level API for hashing data into multihash values.

Data can be hashed at once:

```python
>>> multihashing.hash("sha1", b"Hello").hex()
'1114f7ff9e8b7bb2e09b70935a5d785e0cc5d9d0abf0'
>>> multihashing.hash("sha1", b"Hello", 10).hex()
'110af7ff9e8b7bb2e09b7093'
```

Or incrementally, through a `HashContext`:

```python
>>> context = multihashing.hash_init("sha1", b"Hell")
>>> context = multihashing.hash_update(context, b"o")
>>> multihashing.hash_final(context, 10).hex()
'110af7ff9e8b7bb2e09b7093'
```

Both paths produce identical bytes for the same hash function, data and
truncation length.

Hash functions can be named by their `hashlib` name (`"sha256"`), by their
multihash name (`"sha2_256"`) or by a `HashFunction` member.

The hashing parameters can also be bundled in a `Config`, to share them
between hashing and verification:

```python
hashing_config = multihashing.hashing.Config().use_hash_function(
    "sha3"
).set_truncation_length(16)

multihash = hashing_config.hash_file("model.bin")
```
"""

import logging
import os
import pathlib

from typing_extensions import Self

from multihashing import _registry
from multihashing import errors
from multihashing import multihash as multihash_codec
from multihashing._hashing import backend
from multihashing._hashing import hashing


logger = logging.getLogger(__name__)


# Type alias for the hash function identifiers accepted by the API.
HashIdentifier = str | _registry.HashFunction

# Type alias to support `os.PathLike`, `str` and `bytes` objects in the API.
PathLike = str | bytes | os.PathLike

# Default amount of a file to read at once.
DEFAULT_CHUNK_SIZE = 1048576


class HashContext:
    """The state of an incremental multihash computation.

    A context is owned by a single caller. It is created by `hash_init`,
    advanced in place by `hash_update` and consumed by `hash_final`, after
    which it cannot be used any more. A `hash_final` that fails leaves the
    context untouched. Contexts are not thread safe.
    """

    def __init__(
        self,
        algorithm: _registry.Algorithm,
        state: hashing.StreamingHashEngine,
    ):
        self._algorithm = algorithm
        self._state: hashing.StreamingHashEngine | None = state

    @property
    def algorithm(self) -> _registry.Algorithm:
        """The registry entry of the hash function being computed."""
        return self._algorithm

    @property
    def finalized(self) -> bool:
        """Whether `hash_final` has already consumed this context."""
        return self._state is None

    def _take_state(self) -> hashing.StreamingHashEngine:
        if self._state is None:
            raise errors.ContextFinalizedError()
        return self._state

    def update(self, data: bytes) -> Self:
        """Appends `data` to the bytes being hashed."""
        self._state = backend.update(self._take_state(), data)
        return self

    def final(self, length: int | None = None) -> bytes:
        """Consumes the context and returns the encoded multihash.

        The context is only consumed once encoding succeeds.
        """
        digest = backend.finalize(self._take_state())
        encoded = multihash_codec.encode(self._algorithm.name, digest, length)
        self._state = None
        logger.debug("Finalized %s context", self._algorithm.name)
        return encoded

    def __repr__(self) -> str:
        status = "finalized" if self.finalized else "open"
        return f"HashContext({self._algorithm.name}, {status})"


def hash(
    identifier: HashIdentifier, data: bytes, length: int | None = None
) -> bytes:
    """Hashes `data` and encodes the digest as a multihash.

    Args:
        identifier: The hash function to use.
        data: The bytes to hash.
        length: Optional truncation length. If missing, the full digest is
          encoded.

    Returns:
        The multihash bytes.

    Raises:
        InvalidHashFunctionError: `identifier` is not a known hash function.
        UnimplementedHashFunctionError: The hash function has no engine.
        InvalidTruncationLengthError: `length` is longer than the digest.
    """
    algorithm = _registry.resolve(identifier)
    digest = backend.compute(algorithm, data)
    return multihash_codec.encode(algorithm.name, digest, length)


def hash_init(
    identifier: HashIdentifier, data: bytes | None = None
) -> HashContext:
    """Initializes a context for incremental hashing.

    Args:
        identifier: The hash function to use.
        data: Optional initial bytes to hash.

    Returns:
        A fresh context.

    Raises:
        InvalidHashFunctionError: `identifier` is not a known hash function.
        UnimplementedHashFunctionError: The hash function has no engine.
    """
    algorithm = _registry.resolve(identifier)
    logger.debug("Initializing %s context", algorithm.name)
    return HashContext(algorithm, backend.init_state(algorithm, data))


def hash_update(context: HashContext, data: bytes) -> HashContext:
    """Appends `data` to an incremental computation and returns the context."""
    return context.update(data)


def hash_final(context: HashContext, length: int | None = None) -> bytes:
    """Finishes an incremental computation.

    The result is the same as calling `hash` on the concatenation of all data
    passed to the context.

    Args:
        context: The context to consume.
        length: Optional truncation length.

    Returns:
        The multihash bytes.

    Raises:
        InvalidTruncationLengthError: `length` is longer than the digest.
        ContextFinalizedError: The context was already finalized.
    """
    return context.final(length)


def decode(data: bytes) -> multihash_codec.Multihash:
    """Decodes a multihash. See `multihashing.multihash.decode`."""
    return multihash_codec.decode(data)


def hash_file(
    path: PathLike,
    identifier: HashIdentifier,
    length: int | None = None,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> bytes:
    """Hashes the contents of a file, reading it in chunks.

    The file is read exactly once. The result does not depend on
    `chunk_size` and equals `hash` over the file contents.

    Args:
        path: The file to hash.
        identifier: The hash function to use.
        length: Optional truncation length.
        chunk_size: The amount of file to read at once.

    Returns:
        The multihash bytes.
    """
    if chunk_size <= 0:
        raise ValueError(f"Chunk size must be positive, got {chunk_size}")

    context = hash_init(identifier)
    with open(path, "rb") as f:
        while chunk := f.read(chunk_size):
            context.update(chunk)

    logger.debug("Hashed %s with %s", os.fsdecode(path), context.algorithm.name)
    return context.final(length)


class Config:
    """Configuration to use when hashing data.

    Bundles the hash function, the truncation length and the file chunk size
    so the same parameters can be used when creating multihash values and when
    recomputing them later. By default, data is hashed with SHA2-256, without
    truncation, and files are read 1MB at a time.
    """

    def __init__(self):
        """Initializes the default configuration for hashing."""
        self._algorithm = _registry.resolve(_registry.HashFunction.SHA2_256)
        self._length: int | None = None
        self._chunk_size = DEFAULT_CHUNK_SIZE

    @property
    def algorithm(self) -> _registry.Algorithm:
        """The registry entry of the configured hash function."""
        return self._algorithm

    @property
    def truncation_length(self) -> int | None:
        """The configured truncation length, or `None` for full digests."""
        return self._length

    @property
    def chunk_size(self) -> int:
        """The amount of a file read at once by `hash_file`."""
        return self._chunk_size

    def use_hash_function(self, identifier: HashIdentifier) -> Self:
        """Configures the hash function to use.

        The truncation length is checked against the new hash function.

        Args:
            identifier: The hash function, by native name, multihash name or
              `HashFunction` member.

        Returns:
            The new hashing configuration with the new hash function.

        Raises:
            InvalidHashFunctionError: `identifier` is not a known hash function.
            InvalidTruncationLengthError: The configured truncation length is
              longer than the digests of the new hash function.
        """
        algorithm = _registry.resolve(identifier)
        if self._length is not None and self._length > algorithm.default_length:
            raise errors.InvalidTruncationLengthError()
        self._algorithm = algorithm
        return self

    def set_truncation_length(self, length: int | None) -> Self:
        """Configures the truncation length, `None` disabling truncation.

        Raises:
            InvalidTruncationLengthError: `length` is negative or longer than
              the digests of the configured hash function.
        """
        if length is not None and not (
            0 <= length <= self._algorithm.default_length
        ):
            raise errors.InvalidTruncationLengthError()
        self._length = length
        return self

    def set_chunk_size(self, chunk_size: int) -> Self:
        """Configures the amount of a file to read at once."""
        if chunk_size <= 0:
            raise ValueError(f"Chunk size must be positive, got {chunk_size}")
        self._chunk_size = chunk_size
        return self

    def hash(self, data: bytes) -> bytes:
        """Hashes `data` using the current configuration."""
        return hash(self._algorithm.function, data, self._length)

    def hash_file(self, path: PathLike) -> bytes:
        """Hashes the contents of a file using the current configuration."""
        return hash_file(
            path,
            self._algorithm.function,
            self._length,
            chunk_size=self._chunk_size,
        )

    def init(self, data: bytes | None = None) -> HashContext:
        """Starts an incremental computation with the configured function.

        The truncation length is not stored in the context; pass
        `truncation_length` to `hash_final`.
        """
        return hash_init(self._algorithm.function, data)
