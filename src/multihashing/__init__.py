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

"""Self-describing digests (multihash) for content addressing.

A multihash is a digest tagged with the code of the hash function that
produced it and with its length, so that it can later be decoded and checked
against data without knowing in advance how it was computed.

The API is split into the following components:

- `multihashing.hashing`: hashing data, at once (`hash`) or incrementally
  (`hash_init`, `hash_update`, `hash_final`), into multihash values. A
  `hashing.Config` bundles the hashing parameters.
- `multihashing.multihash`: the wire format, encoding digests into multihash
  values and decoding them back into `Multihash` records.
- `multihashing.verifying`: checking data against a multihash value.
- `multihashing.errors`: the errors raised by all of the above.

The most common operations are available from the top level package:

```python
multihash = multihashing.hash("sha2_256", b"Hello")
assert multihashing.verify(multihash, b"Hello")
print(multihashing.decode(multihash).digest_hex)
```

Hash functions can be named either by their native name (`"sha1"`, `"sha256"`,
`"sha512"`, `"keccak_512"`, `"blake3"`) or by their multihash name
(`"sha1"`, `"sha2_256"`, `"sha2_512"`, `"sha3"`, `"blake3"`), or with a
`HashFunction` member. `blake2b` and `blake2s` are recognized but have no
digest engine, so hashing with them raises
`UnimplementedHashFunctionError`.

Digests can be truncated by passing a length when hashing. Truncation keeps
the leading bytes of the digest and verification uses the same length.
"""

from multihashing import errors
from multihashing import hashing
from multihashing import multihash
from multihashing import verifying
from multihashing._registry import Algorithm
from multihashing._registry import HashFunction
from multihashing.errors import ContextFinalizedError
from multihashing.errors import InvalidDigestLengthError
from multihashing.errors import InvalidHashCodeError
from multihashing.errors import InvalidHashFunctionError
from multihashing.errors import InvalidLengthError
from multihashing.errors import InvalidSizeError
from multihashing.errors import InvalidTruncationLengthError
from multihashing.errors import MultihashError
from multihashing.errors import UnimplementedHashFunctionError
from multihashing.hashing import Config
from multihashing.hashing import HashContext
from multihashing.hashing import decode
from multihashing.hashing import hash
from multihashing.hashing import hash_file
from multihashing.hashing import hash_final
from multihashing.hashing import hash_init
from multihashing.hashing import hash_update
from multihashing.multihash import Multihash
from multihashing.verifying import verify
from multihashing.verifying import verify_file


__version__ = "0.1.0"


__all__ = [
    "Algorithm",
    "Config",
    "ContextFinalizedError",
    "HashContext",
    "HashFunction",
    "InvalidDigestLengthError",
    "InvalidHashCodeError",
    "InvalidHashFunctionError",
    "InvalidLengthError",
    "InvalidSizeError",
    "InvalidTruncationLengthError",
    "Multihash",
    "MultihashError",
    "UnimplementedHashFunctionError",
    "decode",
    "errors",
    "hash",
    "hash_file",
    "hash_final",
    "hash_init",
    "hash_update",
    "hashing",
    "multihash",
    "verify",
    "verify_file",
    "verifying",
]
