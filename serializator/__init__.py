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
A compact binary format for a closed set of dynamically typed values: unsigned integers, floats, byte strings and
vectors of those, plus a container that (de)serializes an ordered sequence of values as one packet.

    >>> from serializator import IntegerValue, Serializator, StringValue, VectorValue
    >>> packet = Serializator()
    >>> packet.push(VectorValue([StringValue('qwerty'), IntegerValue(100500)]))
    >>> data = packet.serialize()
    >>> len(data)
    62
    >>> Serializator.from_bytes(data) == packet
    True
"""

from serializator.container import Serializator
from serializator.exception import SerializatorError
from serializator.serialization import (
    BadDataError,
    NestingTooDeepError,
    SerializationError,
    TagMismatchError,
    TooLongError,
    TrailingDataError,
    UnderrunError,
    UnknownTagError,
)
from serializator.values import AnyValue, FloatValue, IntegerValue, StringValue, TypeTag, VectorValue
from serializator.version import __version__

__all__ = [
    'Serializator',
    'AnyValue',
    'IntegerValue',
    'FloatValue',
    'StringValue',
    'VectorValue',
    'TypeTag',
    'SerializatorError',
    'SerializationError',
    'UnderrunError',
    'BadDataError',
    'UnknownTagError',
    'TagMismatchError',
    'TrailingDataError',
    'TooLongError',
    'NestingTooDeepError',
    '__version__',
]
