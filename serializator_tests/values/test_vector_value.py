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

import struct

import pytest

from serializator.serialization import (
    NestingTooDeepError,
    TagMismatchError,
    TooLongError,
    UnderrunError,
    UnknownTagError,
)
from serializator import Serializator
from serializator.conf import get_global_settings
from serializator.values import AnyValue, FloatValue, IntegerValue, StringValue, TypeTag, VectorValue
from serializator_tests.utils import EXAMPLE_VECTOR, override_settings


def _nested(depth: int) -> VectorValue:
    value = VectorValue([IntegerValue(depth)])
    for i in range(depth - 1):
        value = VectorValue([value, StringValue(str(i))])
    return value


def test_example_layout() -> None:
    vector = VectorValue([StringValue('qwerty'), IntegerValue(100500)])
    assert vector.to_bytes() == EXAMPLE_VECTOR


def test_example_decode() -> None:
    vector = VectorValue.from_bytes(EXAMPLE_VECTOR)
    assert len(vector) == 2
    assert vector[0].get(StringValue).text == 'qwerty'
    assert vector[1].get(IntegerValue).payload == 100500
    assert vector == VectorValue([StringValue('qwerty'), IntegerValue(100500)])


def test_empty_vector() -> None:
    vector = VectorValue()
    assert vector.to_bytes() == struct.pack('<QQ', 3, 0)
    assert VectorValue.from_bytes(vector.to_bytes()) == vector
    assert len(vector) == 0


def test_accepts_any_mix_of_kinds_in_order() -> None:
    inner = VectorValue([FloatValue(0.5)])
    items = [IntegerValue(1), AnyValue(StringValue('b')), inner, FloatValue(2.0)]
    vector = VectorValue(items)
    assert [item.tag for item in vector] == [TypeTag.INTEGER, TypeTag.STRING, TypeTag.VECTOR, TypeTag.FLOAT]
    assert vector[2] == inner
    assert vector[1:3] == (AnyValue(StringValue('b')), AnyValue(inner))
    assert VectorValue.from_bytes(vector.to_bytes()) == vector


def test_accepts_generators() -> None:
    vector = VectorValue(IntegerValue(i) for i in range(3))
    assert vector.to_bytes() == struct.pack('<QQ', 3, 3) + b''.join(IntegerValue(i).to_bytes() for i in range(3))


def test_order_is_part_of_identity() -> None:
    a, b = IntegerValue(1), IntegerValue(2)
    assert VectorValue([a, b]) != VectorValue([b, a])
    assert VectorValue([a, b]) == VectorValue([a, b])
    assert hash(VectorValue([a, b])) == hash(VectorValue([a, b]))


def test_rejects_invalid_items() -> None:
    with pytest.raises(TypeError):
        VectorValue([1])
    with pytest.raises(TypeError):
        VectorValue('abc')
    with pytest.raises(TypeError):
        VectorValue(42)


def test_nested_vectors_round_trip() -> None:
    value = _nested(20)
    assert VectorValue.from_bytes(value.to_bytes()) == value


# well past the interpreter's default recursion limit
DEEP = 3000


def test_deep_nesting_round_trip_with_default_settings() -> None:
    assert get_global_settings().MAX_NESTING_DEPTH is None
    value = _nested(DEEP)
    data = Serializator([value]).serialize()
    decoded, = Serializator.deserialize(data)
    assert decoded == value
    assert hash(decoded) == hash(value)
    assert Serializator([decoded]).serialize() == data
    assert repr(value).count('VectorValue([') == DEEP


def test_deep_nesting_equality() -> None:
    left = VectorValue([IntegerValue(0)])
    right = VectorValue([IntegerValue(1)])
    for _ in range(DEEP):
        left = VectorValue([left])
        right = VectorValue([right])
    assert left != right
    assert left != VectorValue([left])
    assert left == VectorValue.from_bytes(left.to_bytes())


def test_deeply_nested_input_decodes_without_recursion() -> None:
    depth = 20_000
    data = struct.pack('<QQ', TypeTag.VECTOR, 1) * (depth - 1) + struct.pack('<QQ', TypeTag.VECTOR, 0)
    value = VectorValue.from_bytes(data)
    assert sum(1 for _ in value.walk()) == depth - 1
    assert value.to_bytes() == data
    with override_settings(MAX_NESTING_DEPTH=100):
        with pytest.raises(NestingTooDeepError):
            VectorValue.from_bytes(data)


def test_nesting_limit() -> None:
    value = _nested(5)
    data = value.to_bytes()
    with override_settings(MAX_NESTING_DEPTH=5):
        assert VectorValue.from_bytes(data) == value
    with override_settings(MAX_NESTING_DEPTH=4):
        with pytest.raises(NestingTooDeepError):
            VectorValue.from_bytes(data)
    with override_settings(MAX_NESTING_DEPTH=None):
        assert VectorValue.from_bytes(data) == value


def test_vector_length_limit() -> None:
    data = VectorValue([IntegerValue(1), IntegerValue(2)]).to_bytes()
    with override_settings(MAX_VECTOR_LENGTH=1):
        with pytest.raises(TooLongError):
            VectorValue.from_bytes(data)


def test_truncation_is_an_underrun() -> None:
    data = VectorValue([StringValue('qwerty'), VectorValue([FloatValue(1.0)]), IntegerValue(100500)]).to_bytes()
    for size in range(len(data)):
        with pytest.raises(UnderrunError):
            VectorValue.from_bytes(data[:size])


def test_unknown_element_tag_aborts_the_vector() -> None:
    # the integer's tag is replaced with 7
    data = bytearray(EXAMPLE_VECTOR)
    data[38:46] = struct.pack('<Q', 7)
    with pytest.raises(UnknownTagError):
        VectorValue.from_bytes(bytes(data))


def test_tag_mismatch() -> None:
    with pytest.raises(TagMismatchError):
        VectorValue.from_bytes(IntegerValue(3).to_bytes())


def test_huge_declared_count() -> None:
    data = struct.pack('<QQ', 3, 2**64 - 1) + IntegerValue(1).to_bytes()
    with pytest.raises(UnderrunError):
        VectorValue.from_bytes(data)


def test_repr() -> None:
    assert repr(VectorValue([IntegerValue(1), StringValue('a')])) == "VectorValue([IntegerValue(1), StringValue(b'a')])"


def test_nested_repr() -> None:
    value = VectorValue([VectorValue(), IntegerValue(1), VectorValue([VectorValue([FloatValue(0.5)])])])
    expected = 'VectorValue([VectorValue([]), IntegerValue(1), VectorValue([VectorValue([FloatValue(0.5)])])])'
    assert repr(value) == expected


def test_walk_follows_wire_order() -> None:
    inner = VectorValue([StringValue('b'), VectorValue()])
    value = VectorValue([IntegerValue(1), inner, FloatValue(2.0)])
    assert list(value.walk()) == [IntegerValue(1), inner, StringValue('b'), VectorValue(), FloatValue(2.0)]
