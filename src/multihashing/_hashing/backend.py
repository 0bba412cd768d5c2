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

"""Capability interface between the multihash layer and digest engines.

The rest of the library never names a concrete engine. It hands a registry
`Algorithm` to one of the four operations below and gets back either an opaque
streaming state or the full, untruncated digest:

```python
>>> algorithm = _registry.resolve("sha1")
>>> state = init_state(algorithm, b"Hel")
>>> state = update(state, b"lo")
>>> finalize(state) == compute(algorithm, b"Hello")
True
```

Algorithms present in the registry but without an engine raise
`UnimplementedHashFunctionError` from every operation.
"""

from multihashing import _registry
from multihashing import errors
from multihashing._hashing import hashing
from multihashing._hashing import memory


def _check_data(data: bytes) -> None:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"data must be bytes, got {type(data).__name__}")


def _new_engine(
    algorithm: _registry.Algorithm,
) -> hashing.StreamingHashEngine:
    match algorithm.native_id:
        case "sha1":
            return memory.SHA1()
        case "sha256":
            return memory.SHA256()
        case "sha512":
            return memory.SHA512()
        case "keccak_512":
            return memory.KECCAK_512()
        case "blake3":
            return memory.BLAKE3()
        case _:
            raise errors.InvalidHashFunctionError()


def _build_stream_hasher(
    algorithm: _registry.Algorithm,
) -> hashing.StreamingHashEngine:
    """Builds a streaming hasher for a registry entry.

    Args:
        algorithm: The algorithm to build an engine for.

    Returns:
        A fresh engine, with no data hashed yet.

    Raises:
        UnimplementedHashFunctionError: The algorithm has no engine.
        InvalidHashFunctionError: The native id is not one we know about.
        ValueError: The engine does not produce digests of the registered
          length.
    """
    if not algorithm.implemented:
        raise errors.UnimplementedHashFunctionError()

    hasher = _new_engine(algorithm)
    if hasher.digest_size != algorithm.default_length:
        raise ValueError(
            f"Engine {hasher.digest_name} produces {hasher.digest_size} byte "
            f"digests, expected {algorithm.default_length} for {algorithm.name}"
        )
    return hasher


def compute(algorithm: _registry.Algorithm, data: bytes) -> bytes:
    """Returns the untruncated digest of `data`."""
    _check_data(data)
    hasher = _build_stream_hasher(algorithm)
    hasher.update(data)
    return hasher.compute().digest_value


def init_state(
    algorithm: _registry.Algorithm, data: bytes | None = None
) -> hashing.StreamingHashEngine:
    """Starts an incremental computation, optionally feeding `data` to it."""
    hasher = _build_stream_hasher(algorithm)
    if data is not None:
        return update(hasher, data)
    return hasher


def update(
    state: hashing.StreamingHashEngine, data: bytes
) -> hashing.StreamingHashEngine:
    """Appends `data` to an incremental computation.

    The state is updated in place and returned, so callers can thread it
    through successive calls.
    """
    _check_data(data)
    state.update(data)
    return state


def finalize(state: hashing.StreamingHashEngine) -> bytes:
    """Returns the untruncated digest of everything fed to `state`."""
    return state.compute().digest_value
