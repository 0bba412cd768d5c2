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

"""Digest engines consumed by the multihash layer.

We define an abstract `HashEngine` class which can be used in type annotations
and is at the root of the hashing classes hierarchy. Engines only compute the
full, untruncated digest; tagging and truncation happen in
`multihashing.multihash`.

Engines that can consume data in chunks are `StreamingHashEngine` instances.
These back the incremental API (`hash_init`, `hash_update`, `hash_final`),
so feeding the same bytes in any number of chunks must produce the same digest
as feeding them at once.
"""

import abc
import dataclasses
from typing import Protocol


@dataclasses.dataclass(frozen=True)
class Digest:
    """A digest computed by a `HashEngine`."""

    algorithm: str
    digest_value: bytes


class HashEngine(metaclass=abc.ABCMeta):
    """Generic hash engine."""

    @abc.abstractmethod
    def compute(self) -> Digest:
        """Computes the digest of data passed to the engine.

        This does not consume the engine: it can be called again, and more
        data can be passed in afterwards.
        """
        pass

    @property
    @abc.abstractmethod
    def digest_name(self) -> str:
        """The native name of the algorithm used to compute the hash.

        This is the key the registry uses as the native id of the algorithm.
        """
        pass

    @property
    @abc.abstractmethod
    def digest_size(self) -> int:
        """The size, in bytes, of the digests produced by the engine."""
        pass


class Streaming(Protocol):
    """A protocol to support streaming data to `HashEngine` objects."""

    @abc.abstractmethod
    def update(self, data: bytes) -> None:
        """Appends additional bytes to the data to be hashed."""
        pass


class StreamingHashEngine(Streaming, HashEngine):
    """A `HashEngine` that can stream data to be hashed."""

    pass
