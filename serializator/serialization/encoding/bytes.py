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
This modules implements encoding of byte sequence by prefixing it with the length of the sequence encoded as an
8-byte little-endian unsigned integer. There is no terminator and no padding.

>>> se = Serializer.build_bytes_serializer()
>>> encode_bytes(se, b'qwerty')  # will prepend b'\x06' and 7 zero bytes before writing b'qwerty'
>>> bytes(se.finalize()).hex()
'0600000000000000717765727479'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0600000000000000717765727479'))
>>> decode_bytes(de)
b'qwerty'
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0600000000000000717765727479666f6f'))
>>> _ = decode_bytes(de)
>>> bytes(de.read_bytes(3))
b'foo'

A declared length that goes past the end of the buffer is an underrun:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0700000000000000717765727479'))
>>> try:
...     decode_bytes(de)
... except UnderrunError as e:
...     print(*e.args)
not enough bytes to read: needed 7, got 6

And a declared length above `max_length` is refused before reading anything else:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0600000000000000717765727479'))
>>> try:
...     decode_bytes(de, max_length=4)
... except TooLongError as e:
...     print(*e.args)
declared length 6 is above the maximum of 4
"""

from serializator.serialization import Deserializer, Serializer, TooLongError, UnderrunError  # noqa: F401

from .int import decode_uint64, encode_uint64


def encode_bytes(serializer: Serializer, data: bytes) -> None:
    """ Encodes a byte-sequence adding a length prefix.

    This modules's docstring has more details and examples.
    """
    assert isinstance(data, bytes)
    encode_uint64(serializer, len(data))
    serializer.write_bytes(data)


def decode_bytes(deserializer: Deserializer, *, max_length: int | None = None) -> bytes:
    """ Decodes a byte-sequence with a length prefix.

    This modules's docstring has more details and examples.
    """
    size = decode_uint64(deserializer)
    if max_length is not None and size > max_length:
        raise TooLongError(f'declared length {size} is above the maximum of {max_length}')
    return bytes(deserializer.read_bytes(size))
