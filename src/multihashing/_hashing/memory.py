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

"""Digest engines for hashing bytes held in memory.

Example usage:
```python
>>> hasher = SHA1(b"Hel")
>>> hasher.update(b"lo")
>>> digest = hasher.compute()
>>> digest.digest_value.hex()
'f7ff9e8b7bb2e09b70935a5d785e0cc5d9d0abf0'
```

Engines over `hashlib` share `_HashlibEngine`. `KECCAK_512` wraps the Keccak
implementation of `pycryptodome` (the original Keccak padding, which differs
from the standardized SHA3-512 in `hashlib`) and `BLAKE3` wraps the `blake3`
package.
"""

import hashlib

import blake3
from Crypto.Hash import keccak
from typing_extensions import override

from multihashing._hashing import hashing


# Default output length of BLAKE3, in bytes.
_BLAKE3_DIGEST_SIZE = 32


class _HashlibEngine(hashing.StreamingHashEngine):
    """A streaming engine backed by a `hashlib` constructor.

    Subclasses only set `_NAME`, the argument to `hashlib.new`.
    """

    _NAME: str

    def __init__(self, initial_data: bytes = b""):
        """Initializes an instance of the engine.

        Args:
            initial_data: Optional initial data to hash.
        """
        self._hasher = hashlib.new(self._NAME, initial_data)

    @override
    def update(self, data: bytes) -> None:
        self._hasher.update(data)

    @override
    def compute(self) -> hashing.Digest:
        return hashing.Digest(self.digest_name, self._hasher.digest())

    @property
    @override
    def digest_name(self) -> str:
        return self._NAME

    @property
    @override
    def digest_size(self) -> int:
        return self._hasher.digest_size


class SHA1(_HashlibEngine):
    """A wrapper around `hashlib.sha1`."""

    _NAME = "sha1"


class SHA256(_HashlibEngine):
    """A wrapper around `hashlib.sha256`."""

    _NAME = "sha256"


class SHA512(_HashlibEngine):
    """A wrapper around `hashlib.sha512`."""

    _NAME = "sha512"


class KECCAK_512(hashing.StreamingHashEngine):
    """A wrapper around Keccak with 512 bit digests, from `pycryptodome`."""

    def __init__(self, initial_data: bytes = b""):
        """Initializes an instance of a Keccak-512 hash engine.

        Args:
            initial_data: Optional initial data to hash.
        """
        self._hasher = keccak.new(digest_bits=512, update_after_digest=True)
        self._hasher.update(initial_data)

    @override
    def update(self, data: bytes) -> None:
        self._hasher.update(data)

    @override
    def compute(self) -> hashing.Digest:
        return hashing.Digest(self.digest_name, self._hasher.digest())

    @property
    @override
    def digest_name(self) -> str:
        return "keccak_512"

    @property
    @override
    def digest_size(self) -> int:
        return self._hasher.digest_size


class BLAKE3(hashing.StreamingHashEngine):
    """A wrapper around `blake3.blake3`."""

    def __init__(self, initial_data: bytes = b""):
        """Initializes an instance of a BLAKE3 hash engine.

        Args:
            initial_data: Optional initial data to hash.
        """
        self._hasher = blake3.blake3(initial_data)

    @override
    def update(self, data: bytes) -> None:
        self._hasher.update(data)

    @override
    def compute(self) -> hashing.Digest:
        return hashing.Digest(self.digest_name, self._hasher.digest())

    @property
    @override
    def digest_name(self) -> str:
        return "blake3"

    @property
    @override
    def digest_size(self) -> int:
        return _BLAKE3_DIGEST_SIZE
