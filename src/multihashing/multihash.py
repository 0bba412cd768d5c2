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

"""Encoding and decoding of multihash values.

A multihash is a digest prefixed by the code of the hash function that produced
it and by the digest length:

```
byte 0      : hash function code
byte 1      : digest length N
bytes 2..2+N: the first N bytes of the digest
```

Both header fields are single bytes, which covers every code and digest length
in `multihashing._registry`.

A digest may be truncated when encoding. Truncation always keeps the leading
bytes of the digest and can only shorten it:

```python
>>> digest = hashlib.sha1(b"Hello").digest()
>>> encode("sha1", digest, 10).hex()
'110af7ff9e8b7bb2e09b7093'
>>> decode(bytes.fromhex("110af7ff9e8b7bb2e09b7093")).length
10
```
"""

import dataclasses

from multihashing import _registry
from multihashing import errors


_HEADER_SIZE = 2


@dataclasses.dataclass(frozen=True)
class Multihash:
    """A decoded multihash value.

    Attributes:
        code: The hash function code.
        name: The canonical name of the hash function.
        length: The length of the (possibly truncated) digest.
        digest: The digest bytes.
    """

    code: int
    name: str
    length: int
    digest: bytes

    def __post_init__(self):
        if self.length != len(self.digest):
            raise errors.InvalidSizeError()
        if _registry.from_code(self.code).name != self.name:
            raise errors.InvalidHashFunctionError()

    @property
    def algorithm(self) -> _registry.Algorithm:
        """The registry entry for the hash function."""
        return _registry.from_code(self.code)

    @property
    def digest_hex(self) -> str:
        """Hexadecimal, human readable, equivalent of `digest`."""
        return self.digest.hex()

    def to_bytes(self) -> bytes:
        """Serializes this value back into the multihash wire format."""
        return bytes([self.code, self.length]) + self.digest

    def __bytes__(self) -> bytes:
        return self.to_bytes()


def encode(
    name: str | _registry.HashFunction,
    digest: bytes,
    length: int | None = None,
) -> bytes:
    """Encodes a digest into a multihash.

    Args:
        name: The hash function that computed `digest`.
        digest: The full digest, as produced by the hash function.
        length: Optional truncation length. If missing, the digest is not
          truncated.

    Returns:
        The multihash bytes.

    Raises:
        InvalidHashFunctionError: `name` is not a known hash function.
        InvalidDigestLengthError: `digest` is not a full digest of `name`.
        InvalidTruncationLengthError: `length` is longer than the digest.
    """
    algorithm = _registry.resolve(name)
    digest = bytes(digest)

    if len(digest) != algorithm.default_length:
        raise errors.InvalidDigestLengthError()

    if length is None:
        length = len(digest)
    elif length < 0 or length > len(digest):
        raise errors.InvalidTruncationLengthError()

    return bytes([algorithm.code, length]) + digest[:length]


def decode(data: bytes) -> Multihash:
    """Decodes and validates a multihash.

    The hash function code is checked first, so input which does not even
    start like a multihash is reported as an `InvalidHashCodeError`.

    Args:
        data: The multihash bytes.

    Returns:
        The decoded value.

    Raises:
        InvalidHashCodeError: The first byte is not a registered code.
        InvalidLengthError: The declared length exceeds the digest size of the
          hash function.
        InvalidSizeError: The number of digest bytes differs from the declared
          length, or the input is too short to hold a header.
    """
    data = bytes(data)
    if not data:
        raise errors.InvalidSizeError()

    algorithm = _registry.from_code(data[0])

    if len(data) < _HEADER_SIZE:
        raise errors.InvalidSizeError()

    length = data[1]
    if length > algorithm.default_length:
        raise errors.InvalidLengthError()

    digest = data[_HEADER_SIZE:]
    if len(digest) != length:
        raise errors.InvalidSizeError()

    return Multihash(algorithm.code, algorithm.name, length, digest)
