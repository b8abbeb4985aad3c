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

import math
import struct
import unittest

import pytest

from serializator.serialization import Deserializer, TagMismatchError, TrailingDataError, UnderrunError
from serializator.values import FloatValue, IntegerValue, StringValue, TypeTag


class IntegerValueTest(unittest.TestCase):
    def test_layout(self) -> None:
        self.assertEqual(IntegerValue(100500).to_bytes(), struct.pack('<QQ', 0, 100500))

    def test_round_trip(self) -> None:
        for n in [0, 1, 255, 2**32, 2**64 - 1]:
            value = IntegerValue(n)
            self.assertEqual(IntegerValue.from_bytes(value.to_bytes()), value)

    def test_rejects_invalid_payloads(self) -> None:
        self.assertRaises(ValueError, IntegerValue, -1)
        self.assertRaises(ValueError, IntegerValue, 2**64)
        self.assertRaises(TypeError, IntegerValue, 1.0)
        self.assertRaises(TypeError, IntegerValue, True)
        self.assertRaises(TypeError, IntegerValue, '1')

    def test_tag_and_payload(self) -> None:
        value = IntegerValue(7)
        self.assertIs(value.tag, TypeTag.INTEGER)
        self.assertEqual(value.payload, 7)


class FloatValueTest(unittest.TestCase):
    def test_layout(self) -> None:
        self.assertEqual(FloatValue(1.5).to_bytes(), struct.pack('<Qd', 1, 1.5))

    def test_int_is_converted(self) -> None:
        value = FloatValue(2)
        self.assertIsInstance(value.payload, float)
        self.assertEqual(value, FloatValue(2.0))

    def test_rejects_invalid_payloads(self) -> None:
        self.assertRaises(TypeError, FloatValue, '1.0')
        self.assertRaises(TypeError, FloatValue, False)

    def test_equality_is_bitwise(self) -> None:
        nan = FloatValue(math.nan)
        self.assertEqual(nan, FloatValue.from_bytes(nan.to_bytes()))
        self.assertNotEqual(FloatValue(0.0), FloatValue(-0.0))
        self.assertEqual(hash(FloatValue(math.inf)), hash(FloatValue(math.inf)))

    def test_special_values_round_trip(self) -> None:
        for x in [math.inf, -math.inf, math.nan, -0.0, 5e-324, 1.7976931348623157e308]:
            value = FloatValue(x)
            self.assertEqual(FloatValue.from_bytes(value.to_bytes()), value)


class StringValueTest(unittest.TestCase):
    def test_layout(self) -> None:
        self.assertEqual(StringValue('qwerty').to_bytes(), struct.pack('<QQ', 2, 6) + b'qwerty')
        self.assertEqual(StringValue(b'').to_bytes(), struct.pack('<QQ', 2, 0))

    def test_str_is_utf8_encoded(self) -> None:
        value = StringValue('π')
        self.assertEqual(value.payload, b'\xcf\x80')
        self.assertEqual(value.text, 'π')
        self.assertEqual(value, StringValue(b'\xcf\x80'))

    def test_arbitrary_bytes(self) -> None:
        value = StringValue(bytearray(b'\x00\xff\x00'))
        self.assertEqual(value.payload, b'\x00\xff\x00')
        self.assertEqual(StringValue.from_bytes(value.to_bytes()), value)
        with self.assertRaises(UnicodeDecodeError):
            value.text

    def test_rejects_invalid_payloads(self) -> None:
        self.assertRaises(TypeError, StringValue, 1)
        self.assertRaises(TypeError, StringValue, ['a'])


def test_equality_is_only_between_same_kind() -> None:
    assert IntegerValue(1) != FloatValue(1.0)
    assert IntegerValue(0) != StringValue(b'')
    assert IntegerValue(1) != 1
    assert StringValue('a') != 'a'
    assert IntegerValue(3) == IntegerValue(3)
    assert len({IntegerValue(3), IntegerValue(3), FloatValue(3)}) == 2


@pytest.mark.parametrize('kind, other', [
    (IntegerValue, FloatValue(1.0)),
    (FloatValue, StringValue('x')),
    (StringValue, IntegerValue(3)),
])
def test_tag_mismatch(kind, other) -> None:
    with pytest.raises(TagMismatchError):
        kind.from_bytes(other.to_bytes())


def test_tag_mismatch_on_unknown_tag() -> None:
    data = struct.pack('<QQ', 9, 1)
    with pytest.raises(TagMismatchError):
        IntegerValue.from_bytes(data)


@pytest.mark.parametrize('value', [IntegerValue(100500), FloatValue(-2.5), StringValue('qwerty')])
def test_truncation_is_an_underrun(value) -> None:
    data = value.to_bytes()
    for size in range(len(data)):
        with pytest.raises(UnderrunError):
            type(value).from_bytes(data[:size])


def test_from_bytes_rejects_trailing_data() -> None:
    with pytest.raises(TrailingDataError):
        IntegerValue.from_bytes(IntegerValue(1).to_bytes() + b'\x00')


def test_deserialize_consumes_exactly_one_value() -> None:
    data = StringValue('ab').to_bytes() + IntegerValue(5).to_bytes()
    de = Deserializer.build_bytes_deserializer(data)
    assert StringValue.deserialize(de) == StringValue('ab')
    assert IntegerValue.deserialize(de) == IntegerValue(5)
    de.finalize()


def test_string_length_limit() -> None:
    from serializator.serialization import TooLongError
    from serializator_tests.utils import override_settings

    data = StringValue('qwerty').to_bytes()
    with override_settings(MAX_STRING_LENGTH=5):
        with pytest.raises(TooLongError):
            StringValue.from_bytes(data)
    with override_settings(MAX_STRING_LENGTH=6):
        assert StringValue.from_bytes(data) == StringValue('qwerty')


def test_repr() -> None:
    assert repr(IntegerValue(3)) == 'IntegerValue(3)'
    assert repr(StringValue('a')) == "StringValue(b'a')"
