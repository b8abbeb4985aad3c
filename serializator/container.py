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

from structlog import get_logger

from serializator.conf import get_global_settings
from serializator.serialization import Buffer, Deserializer, SerializationError, Serializer
from serializator.serialization.compound_encoding.collection import decode_collection, encode_collection
from serializator.values.any_value import AnyValue, ValueLike, decode_any, encode_any

logger = get_logger()


class Serializator:
    """ An ordered sequence of values that is (de)serialized as one packet.

    Layout: [N: u64 little-endian][value_0]...[value_N-1]

    The count is plain framing, it has no tag. Values are kept and encoded in insertion order.
    """

    def __init__(self, values: Iterable[ValueLike] = ()) -> None:
        self.log = logger.new()
        self._storage: list[AnyValue] = []
        for value in values:
            self.push(value)

    def push(self, value: ValueLike) -> None:
        """Append one value of any kind, raises TypeError for anything else."""
        self._storage.append(AnyValue(value))

    @property
    def values(self) -> tuple[AnyValue, ...]:
        return tuple(self._storage)

    def __len__(self) -> int:
        return len(self._storage)

    def __iter__(self) -> Iterator[AnyValue]:
        return iter(self._storage)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Serializator):
            return NotImplemented
        return self._storage == other._storage

    def __repr__(self) -> str:
        return f'Serializator({self._storage!r})'

    def serialize(self) -> bytes:
        serializer = Serializer.build_bytes_serializer()
        encode_collection(serializer, self._storage, encode_any)
        data = bytes(serializer.finalize())
        self.log.debug('serialized packet', count=len(self._storage), size=len(data))
        return data

    @staticmethod
    def deserialize(data: Buffer) -> list[AnyValue]:
        """ Decode a whole packet into its values, in order.

        Any error aborts the decode, nothing is returned for a partially valid packet. Bytes after the last value are
        rejected with TrailingDataError unless the `ALLOW_TRAILING_DATA` setting is enabled.
        """
        settings = get_global_settings()
        log = logger.new()
        deserializer = Deserializer.build_bytes_deserializer(data)
        try:
            values = decode_collection(deserializer, decode_any, list, max_length=settings.MAX_PACKET_VALUES)
            if not settings.ALLOW_TRAILING_DATA:
                deserializer.finalize()
        except SerializationError as e:
            log.debug('packet decode failed', size=len(memoryview(data)), error=repr(e))
            raise
        log.debug('deserialized packet', count=len(values), size=len(memoryview(data)))
        return values

    @classmethod
    def from_bytes(cls, data: Buffer) -> Serializator:
        """Decode a packet and push all its values into a new instance."""
        return cls(cls.deserialize(data))
