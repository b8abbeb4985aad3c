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

from serializator.exception import SerializatorError


class SerializationError(SerializatorError):
    """Base class for every error raised while encoding or decoding a byte stream."""
    pass


class UnderrunError(SerializationError):
    """Fewer bytes remain than a field declares it needs."""
    pass


# XXX: kept as an alias, a lot of the low level code talks about "running out of data"
OutOfDataError = UnderrunError


class BadDataError(SerializationError):
    """The bytes are available but they don't describe a valid value."""
    pass


class UnknownTagError(BadDataError):
    """A tag does not match any known TypeTag."""
    pass


class TagMismatchError(BadDataError):
    """A concrete decoder read a tag different from the one it expects."""
    pass


class TrailingDataError(BadDataError):
    """There are bytes left after a complete decode."""
    pass


class TooLongError(SerializationError):
    """A declared length or count is above the configured maximum."""
    pass


class NestingTooDeepError(SerializationError):
    """Vectors are nested deeper than the configured maximum."""
    pass
