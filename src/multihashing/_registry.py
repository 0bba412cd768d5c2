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

"""The table of hash functions known to `multihashing`.

Every hash function has two names. The native id names the digest in the
crypto library backing it (`hashlib`, `pycryptodome` or `blake3`), while the
canonical name is the one used by multihash tables. Both are accepted wherever
an identifier is expected, with native ids taking precedence:

```python
>>> resolve("sha256") == resolve("sha2_256") == resolve(HashFunction.SHA2_256)
True
>>> resolve("sha256").code
18
```

The registry only decides whether a name is valid. Whether a digest engine is
available for it is decided by `multihashing._hashing.backend`.
"""

from collections.abc import Mapping
import dataclasses
import enum
import types

from multihashing import errors


class HashFunction(enum.Enum):
    """The hash functions that can appear in a multihash."""

    SHA1 = "sha1"
    SHA2_256 = "sha2_256"
    SHA2_512 = "sha2_512"
    SHA3 = "sha3"
    BLAKE3 = "blake3"
    BLAKE2B = "blake2b"
    BLAKE2S = "blake2s"


@dataclasses.dataclass(frozen=True)
class Algorithm:
    """A registry entry.

    Attributes:
        function: The enum member for this algorithm.
        native_id: Name of the digest in the underlying crypto library.
        name: Canonical multihash name.
        code: Numeric code written as the first byte of a multihash.
        default_length: Size, in bytes, of an untruncated digest.
        implemented: Whether a digest engine is wired for this algorithm.
    """

    function: HashFunction
    native_id: str
    name: str
    code: int
    default_length: int
    implemented: bool = True


_ALGORITHMS: tuple[Algorithm, ...] = (
    Algorithm(HashFunction.SHA1, "sha1", "sha1", 0x11, 20),
    Algorithm(HashFunction.SHA2_256, "sha256", "sha2_256", 0x12, 32),
    Algorithm(HashFunction.SHA2_512, "sha512", "sha2_512", 0x13, 64),
    Algorithm(HashFunction.SHA3, "keccak_512", "sha3", 0x14, 64),
    Algorithm(HashFunction.BLAKE3, "blake3", "blake3", 0x1E, 32),
    Algorithm(HashFunction.BLAKE2B, "blake2b", "blake2b", 0x40, 64, False),
    Algorithm(HashFunction.BLAKE2S, "blake2s", "blake2s", 0x41, 32, False),
)


def _index(key: str) -> Mapping:
    table = {}
    for algorithm in _ALGORITHMS:
        value = getattr(algorithm, key)
        if value in table:
            raise ValueError(f"Duplicate {key} in registry: {value!r}")
        table[value] = algorithm
    return types.MappingProxyType(table)


_BY_NATIVE_ID: Mapping[str, Algorithm] = _index("native_id")
_BY_NAME: Mapping[str, Algorithm] = _index("name")
_BY_CODE: Mapping[int, Algorithm] = _index("code")
_BY_FUNCTION: Mapping[HashFunction, Algorithm] = _index("function")


def resolve(identifier: str | HashFunction) -> Algorithm:
    """Looks up an algorithm by enum member, native id or canonical name.

    Args:
        identifier: The hash function to look up.

    Returns:
        The matching registry entry.

    Raises:
        InvalidHashFunctionError: The identifier is not in either table.
    """
    if isinstance(identifier, HashFunction):
        return _BY_FUNCTION[identifier]
    if isinstance(identifier, str):
        if identifier in _BY_NATIVE_ID:
            return _BY_NATIVE_ID[identifier]
        if identifier in _BY_NAME:
            return _BY_NAME[identifier]
    raise errors.InvalidHashFunctionError()


def from_code(code: int) -> Algorithm:
    """Looks up an algorithm by its multihash code.

    Raises:
        InvalidHashCodeError: No algorithm uses this code.
    """
    try:
        return _BY_CODE[code]
    except KeyError:
        raise errors.InvalidHashCodeError() from None


def algorithms() -> list[Algorithm]:
    """Returns all registered algorithms, ordered by code."""
    return sorted(_ALGORITHMS, key=lambda a: a.code)
