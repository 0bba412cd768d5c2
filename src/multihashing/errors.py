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

"""Errors raised by the `multihashing` library.

Every error derives from `MultihashError`, which is itself a `ValueError`, so
callers can either catch the precise failure or handle all of them at once:

```python
>>> try:
...     multihashing.hash("sha2_unknown", b"Hello")
... except multihashing.MultihashError as e:
...     print(e)
Invalid hash function
```
"""


class MultihashError(ValueError):
    """Base class for all errors raised when hashing or decoding."""

    message: str = "Invalid multihash"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class InvalidHashFunctionError(MultihashError):
    """The identifier names no registered hash function."""

    message = "Invalid hash function"


class UnimplementedHashFunctionError(MultihashError, NotImplementedError):
    """The hash function is registered but has no digest engine wired."""

    message = "Unimplemented hash function"


class InvalidTruncationLengthError(MultihashError):
    """The requested truncation is longer than the digest."""

    message = "Invalid truncation length"


class InvalidDigestLengthError(MultihashError):
    """The digest to encode does not have the hash function's length."""

    message = "Invalid digest length"


class InvalidHashCodeError(MultihashError):
    """A decoded multihash starts with an unregistered code."""

    message = "Invalid hash code"


class InvalidSizeError(MultihashError):
    """The digest bytes of a multihash do not match its declared length."""

    message = "Invalid size"


class InvalidLengthError(MultihashError):
    """The declared length is longer than the hash function's digest."""

    message = "Invalid length"


class ContextFinalizedError(MultihashError):
    """A hash context was used after `hash_final` consumed it."""

    message = "Hash context already finalized"
