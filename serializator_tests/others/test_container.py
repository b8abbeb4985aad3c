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

import logging
import struct
import unittest

import pytest

from serializator import (
    AnyValue,
    FloatValue,
    IntegerValue,
    Serializator,
    StringValue,
    TooLongError,
    TrailingDataError,
    UnderrunError,
    UnknownTagError,
    VectorValue,
)
from serializator_tests.utils import EXAMPLE_PACKET, override_settings


def _sample_values() -> list:
    return [
        IntegerValue(2**64 - 1),
        FloatValue(-1.25),
        StringValue('hello'),
        VectorValue([
            StringValue(b'\x00\x01'),
            VectorValue([IntegerValue(0), VectorValue()]),
            FloatValue(float('nan')),
        ]),
        AnyValue(IntegerValue(42)),
    ]


class SerializatorTest(unittest.TestCase):
    def test_example_packet(self) -> None:
        packet = Serializator()
        packet.push(VectorValue([StringValue('qwerty'), IntegerValue(100500)]))
        self.assertEqual(packet.serialize(), EXAMPLE_PACKET)

    def test_example_packet_decode(self) -> None:
        values = Serializator.deserialize(EXAMPLE_PACKET)
        self.assertEqual(len(values), 1)
        vector = values[0].get(VectorValue)
        self.assertEqual(vector[0], StringValue('qwerty'))
        self.assertEqual(vector[1], IntegerValue(100500))

    def test_empty_packet(self) -> None:
        data = Serializator().serialize()
        self.assertEqual(data, b'\x00' * 8)
        self.assertEqual(Serializator.deserialize(data), [])

    def test_round_trip_keeps_order(self) -> None:
        values = _sample_values()
        packet = Serializator(values)
        decoded = Serializator.deserialize(packet.serialize())
        self.assertEqual(decoded, [AnyValue(value) for value in values])

    def test_rebuilt_packet_has_the_same_bytes(self) -> None:
        data = Serializator(_sample_values()).serialize()
        rebuilt = Serializator()
        for value in Serializator.deserialize(data):
            rebuilt.push(value)
        self.assertEqual(rebuilt.serialize(), data)
        self.assertEqual(Serializator.from_bytes(data), rebuilt)

    def test_push_rejects_other_types(self) -> None:
        packet = Serializator()
        self.assertRaises(TypeError, packet.push, 1)
        self.assertRaises(TypeError, packet.push, 'a')
        self.assertRaises(TypeError, packet.push, Serializator())
        self.assertEqual(len(packet), 0)

    def test_push_does_not_deduplicate(self) -> None:
        packet = Serializator()
        packet.push(IntegerValue(1))
        packet.push(IntegerValue(1))
        self.assertEqual(list(packet), [AnyValue(IntegerValue(1))] * 2)
        self.assertEqual(packet.values, (AnyValue(IntegerValue(1)), AnyValue(IntegerValue(1))))


def test_truncation_at_every_prefix_is_an_underrun() -> None:
    for data in [EXAMPLE_PACKET, Serializator(_sample_values()).serialize()]:
        for size in range(len(data)):
            with pytest.raises(UnderrunError):
                Serializator.deserialize(data[:size])


def test_unknown_top_level_tag() -> None:
    data = struct.pack('<QQQ', 1, 4, 0)
    with pytest.raises(UnknownTagError):
        Serializator.deserialize(data)


def test_unknown_tag_in_a_later_value_aborts_everything() -> None:
    data = struct.pack('<Q', 2) + IntegerValue(1).to_bytes() + struct.pack('<QQ', 99, 0)
    with pytest.raises(UnknownTagError):
        Serializator.deserialize(data)


def test_trailing_data() -> None:
    with pytest.raises(TrailingDataError):
        Serializator.deserialize(EXAMPLE_PACKET + b'\x00')
    with override_settings(ALLOW_TRAILING_DATA=True):
        assert len(Serializator.deserialize(EXAMPLE_PACKET + b'\x00')) == 1


def test_packet_values_limit() -> None:
    data = Serializator([IntegerValue(1), IntegerValue(2)]).serialize()
    with override_settings(MAX_PACKET_VALUES=1):
        with pytest.raises(TooLongError):
            Serializator.deserialize(data)


def test_accepts_any_buffer() -> None:
    assert Serializator.deserialize(bytearray(EXAMPLE_PACKET)) == Serializator.deserialize(memoryview(EXAMPLE_PACKET))


def test_decode_failure_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG):
        with pytest.raises(UnderrunError):
            Serializator.deserialize(EXAMPLE_PACKET[:-1])
    assert 'packet decode failed' in caplog.text
