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

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar, final

from typing_extensions import Self

from serializator.serialization import Buffer, Deserializer, Serializer, TagMismatchError
from serializator.values.type_tag import TypeTag, decode_raw_tag, encode_tag

T = TypeVar('T')


class BaseValue(ABC, Generic[T]):
    """ Shared skeleton of every concrete value kind.

    A value is a `TypeTag` paired with a payload of type `T`. The tag, the (de)serialization skeleton (tag first, then
    the payload), equality and hashing are implemented here once, concrete kinds only say which tag they use and how
    their payload is validated, written and read.

    Values are immutable after construction, decoding always builds a new instance.
    """

    __slots__ = ('_payload',)

    # XXX: subclasses must define this value
    _tag: ClassVar[TypeTag]

    _payload: T

    def __init__(self, payload: Any) -> None:
        self._payload = self._check_payload(payload)

    @final
    @property
    def tag(self) -> TypeTag:
        return self._tag

    @final
    @property
    def payload(self) -> T:
        return self._payload

    @final
    def serialize(self, serializer: Serializer, /) -> None:
        """ Write the 8-byte tag followed by the payload.
        """
        # XXX: subclasses must implement BaseValue._serialize_payload, not BaseValue.serialize
        encode_tag(serializer, self._tag)
        self._serialize_payload(serializer)

    @final
    @classmethod
    def deserialize(cls, deserializer: Deserializer, /, *, depth: int = 0) -> Self:
        """ Read a tag and fail with TagMismatchError if it isn't the tag of this kind, then read the payload.

        The `depth` is the number of vectors enclosing this value, it is only used to bound nesting.
        """
        # XXX: subclasses must implement BaseValue._deserialize_payload, not BaseValue.deserialize
        raw_tag = decode_raw_tag(deserializer)
        if raw_tag != cls._tag:
            raise TagMismatchError(f'expected tag {cls._tag.name} ({int(cls._tag)}), got {raw_tag}')
        return cls(cls._deserialize_payload(deserializer, depth=depth))

    @final
    def to_bytes(self) -> bytes:
        """ Shortcut to quickly convert a value to `bytes` and avoid using the serialization system.
        """
        serializer = Serializer.build_bytes_serializer()
        self.serialize(serializer)
        return bytes(serializer.finalize())

    @final
    @classmethod
    def from_bytes(cls, data: Buffer, /) -> Self:
        """ Shortcut to quickly parse a value from `bytes`, trailing data is an error.
        """
        deserializer = Deserializer.build_bytes_deserializer(data)
        value = cls.deserialize(deserializer)
        deserializer.finalize()
        return value

    def __eq__(self, other: object) -> bool:
        # equality is only defined between values of the same kind
        if type(other) is not type(self):
            return NotImplemented
        assert isinstance(other, BaseValue)
        return self._payload_key() == other._payload_key()

    def __hash__(self) -> int:
        return hash((self._tag, self._payload_key()))

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._payload!r})'

    def _payload_key(self) -> Any:
        """ What equality and hashing compare, the payload itself unless a kind needs something more precise.
        """
        return self._payload

    @classmethod
    @abstractmethod
    def _check_payload(cls, payload: Any, /) -> T:
        """ Validate (and normalize) a payload given to the constructor.

        Should raise TypeError if the payload has an incompatible type and ValueError if it has a compatible type but
        the value cannot be encoded.
        """
        raise NotImplementedError

    @abstractmethod
    def _serialize_payload(self, serializer: Serializer, /) -> None:
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def _deserialize_payload(cls, deserializer: Deserializer, /, *, depth: int) -> T:
        raise NotImplementedError
