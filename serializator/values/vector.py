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

from collections.abc import Iterable, Iterator
from itertools import zip_longest
from typing import TYPE_CHECKING, Any, overload

from typing_extensions import override

from serializator.conf import get_global_settings
from serializator.serialization import Deserializer, NestingTooDeepError, Serializer
from serializator.serialization.compound_encoding.collection import decode_count
from serializator.serialization.encoding.int import encode_uint64
from serializator.values.base import BaseValue
from serializator.values.type_tag import TypeTag, decode_raw_tag, encode_tag, peek_tag

if TYPE_CHECKING:
    from serializator.values.any_value import AnyValue, ValueKind, ValueLike


class VectorValue(BaseValue[tuple['AnyValue', ...]]):
    """ An ordered sequence of values of any kind, vectors included.

    Layout: [tag=3][N: u64 little-endian][value_0]...[value_N-1], each element carries its own tag.

    Elements are kept in insertion order, they are never sorted or deduplicated. Since a vector can only be built from
    values that already exist it can never contain itself.

    Nested vectors are walked with an explicit stack when encoding, decoding, comparing, hashing and printing, so the
    nesting depth is bounded by memory and not by the interpreter's recursion limit.
    """

    __slots__ = ()
    _tag = TypeTag.VECTOR

    def __init__(self, values: Iterable[ValueLike] = ()) -> None:
        super().__init__(values)

    def __len__(self) -> int:
        return len(self._payload)

    def __iter__(self) -> Iterator[AnyValue]:
        return iter(self._payload)

    @overload
    def __getitem__(self, index: int) -> AnyValue:
        ...

    @overload
    def __getitem__(self, index: slice) -> tuple[AnyValue, ...]:
        ...

    def __getitem__(self, index: int | slice) -> AnyValue | tuple[AnyValue, ...]:
        return self._payload[index]

    def walk(self) -> Iterator[ValueKind]:
        """ Yield every nested value depth-first, in the order they appear on the wire.

        A nested vector is yielded right before its own elements.

        >>> from serializator.values import IntegerValue, StringValue
        >>> inner = VectorValue([StringValue('b')])
        >>> list(VectorValue([IntegerValue(1), inner, IntegerValue(2)]).walk())
        [IntegerValue(1), VectorValue([StringValue(b'b')]), StringValue(b'b'), IntegerValue(2)]
        """
        stack = [iter(self._payload)]
        while stack:
            item = next(stack[-1], None)
            if item is None:
                stack.pop()
                continue
            value = item.value
            yield value
            if isinstance(value, VectorValue):
                stack.append(iter(value._payload))

    @override
    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        assert isinstance(other, VectorValue)
        if len(self) != len(other):
            return False
        # the walk with every vector's length describes the whole tree, comparing it pairwise is enough
        for left, right in zip_longest(self.walk(), other.walk()):
            if isinstance(left, VectorValue) and isinstance(right, VectorValue):
                if len(left) != len(right):
                    return False
            elif left != right:
                return False
        return True

    @override
    def __hash__(self) -> int:
        shape: list[Any] = [len(self)]
        for value in self.walk():
            shape.append((TypeTag.VECTOR, len(value)) if isinstance(value, VectorValue) else hash(value))
        return hash((self._tag, tuple(shape)))

    @override
    def __repr__(self) -> str:
        parts = [f'{type(self).__name__}([']
        stack = [iter(self._payload)]
        first = True
        while stack:
            item = next(stack[-1], None)
            if item is None:
                stack.pop()
                parts.append('])')
                first = False
                continue
            if not first:
                parts.append(', ')
            value = item.value
            if isinstance(value, VectorValue):
                parts.append(f'{type(value).__name__}([')
                stack.append(iter(value._payload))
                first = True
            else:
                parts.append(repr(value))
                first = False
        return ''.join(parts)

    @override
    @classmethod
    def _check_payload(cls, payload: Any, /) -> tuple[AnyValue, ...]:
        from serializator.values.any_value import AnyValue
        if isinstance(payload, (str, bytes, bytearray, memoryview)) or not isinstance(payload, Iterable):
            raise TypeError(f'expected an iterable of values, got {type(payload).__name__}')
        return tuple(item if isinstance(item, AnyValue) else AnyValue(item) for item in payload)

    @override
    def _serialize_payload(self, serializer: Serializer, /) -> None:
        encode_uint64(serializer, len(self._payload))
        for value in self.walk():
            if isinstance(value, VectorValue):
                encode_tag(serializer, TypeTag.VECTOR)
                encode_uint64(serializer, len(value._payload))
            else:
                value.serialize(serializer)

    @override
    @classmethod
    def _deserialize_payload(cls, deserializer: Deserializer, /, *, depth: int) -> tuple[AnyValue, ...]:
        from serializator.values.any_value import AnyValue, decode_any
        settings = get_global_settings()
        max_depth = settings.MAX_NESTING_DEPTH
        max_length = settings.MAX_VECTOR_LENGTH

        # one frame per vector being decoded: its declared count and the elements read so far, the last frame is the
        # innermost vector and `depth + len(stack) - 1` is its nesting depth
        if max_depth is not None and depth >= max_depth:
            raise NestingTooDeepError(f'vectors nested deeper than {max_depth}')
        stack: list[tuple[int, list[AnyValue]]] = [(decode_count(deserializer, max_length=max_length), [])]
        while True:
            count, items = stack[-1]
            if len(items) == count:
                stack.pop()
                if not stack:
                    return tuple(items)
                stack[-1][1].append(AnyValue(cls(items)))
                continue
            if peek_tag(deserializer) is TypeTag.VECTOR:
                if max_depth is not None and depth + len(stack) >= max_depth:
                    raise NestingTooDeepError(f'vectors nested deeper than {max_depth}')
                decode_raw_tag(deserializer)
                stack.append((decode_count(deserializer, max_length=max_length), []))
            else:
                items.append(decode_any(deserializer, depth=depth + len(stack)))
