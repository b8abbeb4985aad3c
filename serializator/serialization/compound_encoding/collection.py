# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

r"""
A collection is basically any value that has a known size and is iterable.

Layout: [N: u64 little-endian][value_0]...[value_N-1]

>>> from serializator.serialization.encoding.bytes import encode_bytes, decode_bytes
>>> se = Serializer.build_bytes_serializer()
>>> encode_collection(se, [b'ab', b'c'], encode_bytes)
>>> bytes(se.finalize()).hex()
'020000000000000002000000000000006162010000000000000063'

Broken down:

    0200000000000000: 2, the total count
    02000000000000006162: b'ab' with its length prefix
    010000000000000063: b'c' with its length prefix

When decoding, the builder can be any compatible collection, in the previous example a `list` was encoded, but when
decoding a `tuple` could be used, it only matters that the collection can be initialized with an `Iterable[T]`.

>>> data = bytes.fromhex('020000000000000002000000000000006162010000000000000063')
>>> de = Deserializer.build_bytes_deserializer(data)
>>> decode_collection(de, decode_bytes, tuple)
(b'ab', b'c')
>>> de.finalize()

The declared count is never used to preallocate anything, a huge count fails on the first missing item:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('ffffffffffffffff'))
>>> try:
...     decode_collection(de, decode_bytes, list)
... except UnderrunError as e:
...     print(*e.args)
not enough bytes to read: needed 8, got 0
"""

from collections.abc import Collection, Iterable
from typing import Callable, TypeVar

from serializator.serialization import Deserializer, Serializer, TooLongError, UnderrunError  # noqa: F401
from serializator.serialization.encoding.int import decode_uint64, encode_uint64

from . import Decoder, Encoder

T = TypeVar('T')
R = TypeVar('R', bound=Collection)


def encode_collection(serializer: Serializer, values: Collection[T], encoder: Encoder[T]) -> None:
    encode_uint64(serializer, len(values))
    for value in values:
        encoder(serializer, value)


def decode_count(deserializer: Deserializer, *, max_length: int | None = None) -> int:
    """Read the u64 count that prefixes a collection, refusing it when it is above `max_length`."""
    length = decode_uint64(deserializer)
    if max_length is not None and length > max_length:
        raise TooLongError(f'declared count {length} is above the maximum of {max_length}')
    return length


def decode_collection(
    deserializer: Deserializer,
    decoder: Decoder[T],
    builder: Callable[[Iterable[T]], R],
    *,
    max_length: int | None = None,
) -> R:
    length = decode_count(deserializer, max_length=max_length)
    items = []
    for _ in range(length):
        items.append(decoder(deserializer))
    return builder(items)
