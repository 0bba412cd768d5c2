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

"""Verification of data against multihash values.

```python
>>> multihash = multihashing.hash("sha1", b"Hello", 10)
>>> multihashing.verify(multihash, b"Hello")
True
>>> multihashing.verify(multihash, b"Good Bye")
False
```

A mismatch is a normal negative result. Errors from decoding the multihash or
from recomputing the digest (for example, a hash function with no engine) are
raised unchanged.
"""

import hmac

from multihashing import hashing
from multihashing import multihash as multihash_codec


def _matches(expected: bytes, actual: bytes) -> bool:
    return hmac.compare_digest(expected, actual)


def verify(multihash: bytes, data: bytes) -> bool:
    """Checks that `multihash` was computed over `data`.

    The data is hashed again with the hash function and truncation length
    recorded in the multihash.

    Args:
        multihash: The multihash to check against.
        data: The bytes to verify.

    Returns:
        Whether the recomputed multihash equals `multihash`.

    Raises:
        InvalidHashCodeError: The multihash has an unknown code.
        InvalidLengthError: The multihash declares a length longer than its
          hash function's digest.
        InvalidSizeError: The multihash digest does not have the declared
          length.
        UnimplementedHashFunctionError: The hash function has no engine.
    """
    multihash = bytes(multihash)
    decoded = multihash_codec.decode(multihash)
    recomputed = hashing.hash(decoded.name, data, decoded.length)
    return _matches(multihash, recomputed)


def verify_file(
    multihash: bytes,
    path: hashing.PathLike,
    *,
    chunk_size: int = hashing.DEFAULT_CHUNK_SIZE,
) -> bool:
    """Checks that `multihash` was computed over the contents of a file.

    Same as `verify`, but the file is streamed through an incremental
    computation instead of being read into memory.
    """
    multihash = bytes(multihash)
    decoded = multihash_codec.decode(multihash)
    recomputed = hashing.hash_file(
        path, decoded.name, decoded.length, chunk_size=chunk_size
    )
    return _matches(multihash, recomputed)
