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
This module implements encoding of a 64-bit IEEE-754 float, the 8 raw bytes of the bit pattern are written in
little-endian order.

No normalization happens, NaN and infinities pass through bit-for-bit.

>>> se = Serializer.build_bytes_serializer()
>>> encode_float(se, 1.5)
>>> bytes(se.finalize()).hex()
'000000000000f83f'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('000000000000f83f'))
>>> decode_float(de)
1.5
>>> de.finalize()

>>> se = Serializer.build_bytes_serializer()
>>> encode_float(se, float('-inf'))
>>> bytes(se.finalize()).hex()
'000000000000f0ff'
"""

from serializator.serialization import Deserializer, Serializer

_FORMAT = '<d'


def encode_float(serializer: Serializer, value: float) -> None:
    """ Encode a float as 8 little-endian bytes.
    """
    serializer.write_struct((value,), _FORMAT)


def decode_float(deserializer: Deserializer) -> float:
    """ Decode a float from 8 little-endian bytes.
    """
    value, = deserializer.read_struct(_FORMAT)
    return value
