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

from enum import IntEnum, unique

from serializator.serialization import Deserializer, Serializer, UnknownTagError
from serializator.serialization.consts import U64_FORMAT
from serializator.serialization.encoding.int import decode_uint64, encode_uint64


@unique
class TypeTag(IntEnum):
    """Identifies which kind of value follows in the stream, stored as an 8-byte little-endian integer."""

    INTEGER = 0
    FLOAT = 1
    STRING = 2
    VECTOR = 3

    @classmethod
    def from_raw(cls, raw: int) -> 'TypeTag':
        """Map a raw wire value to a TypeTag, raising UnknownTagError for anything outside the closed set."""
        try:
            return cls(raw)
        except ValueError:
            raise UnknownTagError(f'unknown type tag: {raw}') from None


def encode_tag(serializer: Serializer, tag: TypeTag) -> None:
    encode_uint64(serializer, int(tag))


def decode_raw_tag(deserializer: Deserializer) -> int:
    """Read a tag without interpreting it, concrete decoders use this to report mismatches."""
    return decode_uint64(deserializer)


def decode_tag(deserializer: Deserializer) -> TypeTag:
    return TypeTag.from_raw(decode_uint64(deserializer))


def peek_tag(deserializer: Deserializer) -> TypeTag:
    """Read the next tag without consuming it."""
    raw, = deserializer.peek_struct(U64_FORMAT)
    return TypeTag.from_raw(raw)
