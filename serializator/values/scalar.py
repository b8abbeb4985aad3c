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

from __future__ import annotations

import struct
from typing import Any

from typing_extensions import override

from serializator.conf import get_global_settings
from serializator.serialization import Deserializer, Serializer
from serializator.serialization.consts import U64_MAX_VALUE
from serializator.serialization.encoding.bytes import decode_bytes, encode_bytes
from serializator.serialization.encoding.float import decode_float, encode_float
from serializator.serialization.encoding.int import decode_uint64, encode_uint64
from serializator.values.base import BaseValue
from serializator.values.type_tag import TypeTag


class IntegerValue(BaseValue[int]):
    """ An unsigned 64-bit integer, written as 8 little-endian bytes.
    """

    __slots__ = ()
    _tag = TypeTag.INTEGER

    @override
    @classmethod
    def _check_payload(cls, payload: Any, /) -> int:
        # bool is a subclass of int, but it's not a valid payload
        if isinstance(payload, bool) or not isinstance(payload, int):
            raise TypeError(f'expected int, got {type(payload).__name__}')
        if payload < 0:
            raise ValueError('below lower bound')
        if payload > U64_MAX_VALUE:
            raise ValueError('above upper bound')
        return payload

    @override
    def _serialize_payload(self, serializer: Serializer, /) -> None:
        encode_uint64(serializer, self._payload)

    @override
    @classmethod
    def _deserialize_payload(cls, deserializer: Deserializer, /, *, depth: int) -> int:
        return decode_uint64(deserializer)


class FloatValue(BaseValue[float]):
    """ A 64-bit IEEE-754 float, written as the 8 raw bytes of its bit pattern in little-endian order.

    Equality and hashing compare the bit pattern, so NaN payloads compare equal to themselves and `0.0` differs from
    `-0.0`, this is what makes a decoded value always equal to the encoded one.
    """

    __slots__ = ()
    _tag = TypeTag.FLOAT

    @override
    @classmethod
    def _check_payload(cls, payload: Any, /) -> float:
        if isinstance(payload, bool) or not isinstance(payload, (int, float)):
            raise TypeError(f'expected float, got {type(payload).__name__}')
        return float(payload)

    @override
    def _payload_key(self) -> bytes:
        return struct.pack('<d', self._payload)

    @override
    def _serialize_payload(self, serializer: Serializer, /) -> None:
        encode_float(serializer, self._payload)

    @override
    @classmethod
    def _deserialize_payload(cls, deserializer: Deserializer, /, *, depth: int) -> float:
        return decode_float(deserializer)


class StringValue(BaseValue[bytes]):
    """ A byte string, written as an 8-byte little-endian length followed by the raw bytes.

    A `str` is accepted on construction and stored UTF-8 encoded, the payload itself is always `bytes`.
    """

    __slots__ = ()
    _tag = TypeTag.STRING

    @property
    def text(self) -> str:
        """The payload decoded as UTF-8, raises UnicodeDecodeError if it isn't valid UTF-8."""
        return self._payload.decode('utf-8')

    @override
    @classmethod
    def _check_payload(cls, payload: Any, /) -> bytes:
        if isinstance(payload, str):
            return payload.encode('utf-8')
        if isinstance(payload, (bytes, bytearray, memoryview)):
            return bytes(payload)
        raise TypeError(f'expected str or bytes, got {type(payload).__name__}')

    @override
    def _serialize_payload(self, serializer: Serializer, /) -> None:
        encode_bytes(serializer, self._payload)

    @override
    @classmethod
    def _deserialize_payload(cls, deserializer: Deserializer, /, *, depth: int) -> bytes:
        settings = get_global_settings()
        return decode_bytes(deserializer, max_length=settings.MAX_STRING_LENGTH)
