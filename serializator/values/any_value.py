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

from typing import Any, TypeAlias, TypeVar

from typing_extensions import assert_never

from serializator.serialization import Buffer, Deserializer, Serializer
from serializator.values.scalar import FloatValue, IntegerValue, StringValue
from serializator.values.type_tag import TypeTag, peek_tag
from serializator.values.vector import VectorValue

# The closed set of concrete kinds, every dispatch below matches over all of them
ValueKind: TypeAlias = IntegerValue | FloatValue | StringValue | VectorValue

# What can be given wherever a value is expected
ValueLike: TypeAlias = 'ValueKind | AnyValue'

# Native Python values that map to a kind, see `AnyValue.from_python`
PythonValue: TypeAlias = int | float | str | bytes | bytearray | memoryview | list | tuple

V = TypeVar('V', IntegerValue, FloatValue, StringValue, VectorValue)


class AnyValue:
    """ Holds exactly one value of any of the concrete kinds.

    This is what lets vectors and packets hold heterogeneous sequences. Decoding peeks the tag to decide which concrete
    decoder to use, the concrete decoder then reads the tag again and validates it.
    """

    __slots__ = ('_value',)

    _value: ValueKind

    def __init__(self, value: ValueLike) -> None:
        match value:
            case AnyValue():
                self._value = value._value
            case IntegerValue() | FloatValue() | StringValue() | VectorValue():
                self._value = value
            case _:
                raise TypeError(f'unsupported value type: {type(value).__name__}')

    @property
    def value(self) -> ValueKind:
        return self._value

    @property
    def tag(self) -> TypeTag:
        return self._value.tag

    def get(self, kind: type[V]) -> V:
        """Get the held value as the given kind, raises TypeError if another kind is held."""
        if not isinstance(self._value, kind):
            raise TypeError(f'holds {type(self._value).__name__}, not {kind.__name__}')
        return self._value

    def serialize(self, serializer: Serializer, /) -> None:
        self._value.serialize(serializer)

    @classmethod
    def deserialize(cls, deserializer: Deserializer, /, *, depth: int = 0) -> AnyValue:
        """ Decode one value of whatever kind the next tag says.

        Only the bytes of that value are consumed, which is what allows siblings to be decoded back-to-back. An
        unknown tag raises UnknownTagError and nothing is consumed.
        """
        tag = peek_tag(deserializer)
        value: ValueKind
        match tag:
            case TypeTag.INTEGER:
                value = IntegerValue.deserialize(deserializer, depth=depth)
            case TypeTag.FLOAT:
                value = FloatValue.deserialize(deserializer, depth=depth)
            case TypeTag.STRING:
                value = StringValue.deserialize(deserializer, depth=depth)
            case TypeTag.VECTOR:
                value = VectorValue.deserialize(deserializer, depth=depth)
            case _:
                assert_never(tag)
        return cls(value)

    def to_bytes(self) -> bytes:
        return self._value.to_bytes()

    @classmethod
    def from_bytes(cls, data: Buffer, /) -> AnyValue:
        deserializer = Deserializer.build_bytes_deserializer(data)
        value = cls.deserialize(deserializer)
        deserializer.finalize()
        return value

    @classmethod
    def from_python(cls, obj: PythonValue | ValueLike) -> AnyValue:
        """ Build a value from a native Python object.

        `int` maps to IntegerValue, `float` to FloatValue, `str` and bytes-like objects to StringValue, and a `list`
        or `tuple` to a VectorValue of its converted items. Values that are already built are wrapped as they are.
        """
        match obj:
            case AnyValue() | IntegerValue() | FloatValue() | StringValue() | VectorValue():
                return cls(obj)
            case bool():
                raise TypeError('bool has no corresponding value kind')
            case int():
                return cls(IntegerValue(obj))
            case float():
                return cls(FloatValue(obj))
            case str() | bytes() | bytearray() | memoryview():
                return cls(StringValue(obj))
            case list() | tuple():
                return cls(VectorValue(cls.from_python(item) for item in obj))
            case _:
                raise TypeError(f'unsupported type: {type(obj).__name__}')

    def to_python(self) -> int | float | bytes | list[Any]:
        """ Convert to native Python objects, vectors become lists and strings become bytes.
        """
        match self._value:
            case IntegerValue() | FloatValue() | StringValue():
                return self._value.payload
            case VectorValue():
                return [item.to_python() for item in self._value]
            case _:
                assert_never(self._value)

    def __eq__(self, other: object) -> bool:
        # unwrapping on both sides, the concrete kinds take care of refusing cross-kind comparisons
        match other:
            case AnyValue():
                return self._value == other._value
            case IntegerValue() | FloatValue() | StringValue() | VectorValue():
                return self._value == other
            case _:
                return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f'AnyValue({self._value!r})'


def encode_any(serializer: Serializer, value: AnyValue, /) -> None:
    value.serialize(serializer)


def decode_any(deserializer: Deserializer, /, *, depth: int = 0) -> AnyValue:
    return AnyValue.deserialize(deserializer, depth=depth)
