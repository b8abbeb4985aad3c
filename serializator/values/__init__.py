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

from serializator.values.any_value import AnyValue, PythonValue, ValueKind, ValueLike, decode_any, encode_any
from serializator.values.base import BaseValue
from serializator.values.scalar import FloatValue, IntegerValue, StringValue
from serializator.values.type_tag import TypeTag, decode_tag, encode_tag, peek_tag
from serializator.values.vector import VectorValue

__all__ = [
    'TypeTag',
    'encode_tag',
    'decode_tag',
    'peek_tag',
    'BaseValue',
    'IntegerValue',
    'FloatValue',
    'StringValue',
    'VectorValue',
    'AnyValue',
    'ValueKind',
    'ValueLike',
    'PythonValue',
    'encode_any',
    'decode_any',
]
