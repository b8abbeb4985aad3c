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

"""
This module implements encoding of integers with a fixed size, the size and signedness are parametrized.

The encoding format itself is a standard little-endian format, the least significant byte comes first.

>>> se = Serializer.build_bytes_serializer()
>>> encode_int(se, 0, length=1, signed=True)  # writes 00
>>> encode_int(se, 255, length=1, signed=False)  # writes ff
>>> encode_int(se, 1234, length=2, signed=True)  # writes d204
>>> encode_int(se, -1234, length=2, signed=True)  # writes 2efb
>>> bytes(se.finalize()).hex()
'00ffd2042efb'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00ffd2042efb'))
>>> decode_int(de, length=1, signed=True)  # reads 00
0
>>> decode_int(de, length=1, signed=False)  # reads ff
255
>>> decode_int(de, length=2, signed=True)  # reads d204
1234
>>> decode_int(de, length=2, signed=True)  # reads 2efb
-1234

The 8-byte unsigned shortcut is what the wire format uses for tags, lengths and counts:

>>> se = Serializer.build_bytes_serializer()
>>> encode_uint64(se, 100500)
>>> bytes(se.finalize()).hex()
'9488010000000000'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('9488010000000000'))
>>> decode_uint64(de)
100500
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('94880100'))
>>> try:
...     decode_uint64(de)
... except UnderrunError as e:
...     print(*e.args)
not enough bytes to read: needed 8, got 4
"""

from serializator.serialization import Deserializer, Serializer, UnderrunError  # noqa: F401
from serializator.serialization.consts import U64_SIZE


def encode_int(serializer: Serializer, number: int, *, length: int, signed: bool) -> None:
    """ Encode an int using the given byte-length and signedness.

    This modules's docstring has more details and examples.
    """
    try:
        data = int.to_bytes(number, length, byteorder='little', signed=signed)
    except OverflowError:
        raise ValueError('too big to encode')
    serializer.write_bytes(data)


def decode_int(deserializer: Deserializer, *, length: int, signed: bool) -> int:
    """ Decode an int using the given byte-length and signedness.

    This modules's docstring has more details and examples.
    """
    data = deserializer.read_bytes(length)
    return int.from_bytes(data, byteorder='little', signed=signed)


def encode_uint64(serializer: Serializer, number: int) -> None:
    encode_int(serializer, number, length=U64_SIZE, signed=False)


def decode_uint64(deserializer: Deserializer) -> int:
    return decode_int(deserializer, length=U64_SIZE, signed=False)
