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

from typing import Optional

from pydantic import field_validator

from serializator.utils.pydantic import BaseModel


class SerializatorSettings(BaseModel):
    # Maximum declared length of a String payload accepted on decode, `None` means unbounded.
    MAX_STRING_LENGTH: Optional[int] = None

    # Maximum declared element count of a Vector accepted on decode, `None` means unbounded.
    MAX_VECTOR_LENGTH: Optional[int] = None

    # Maximum declared number of top-level values in a packet accepted on decode, `None` means unbounded.
    MAX_PACKET_VALUES: Optional[int] = None

    # Maximum number of Vectors nested on any path of a decoded value, `None` means unbounded.
    MAX_NESTING_DEPTH: Optional[int] = None

    # Whether bytes after the last value of a packet are ignored instead of rejected.
    ALLOW_TRAILING_DATA: bool = False

    @field_validator('MAX_STRING_LENGTH', 'MAX_VECTOR_LENGTH', 'MAX_PACKET_VALUES', 'MAX_NESTING_DEPTH')
    @classmethod
    def _check_non_negative(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 0:
            raise ValueError('limits cannot be negative')
        return value

    @classmethod
    def from_yaml(cls, *, filepath: str) -> 'SerializatorSettings':
        """Takes a filepath to a yaml file and returns a validated SerializatorSettings instance."""
        from pathlib import Path

        from serializator.utils.yaml import model_from_extended_yaml
        return model_from_extended_yaml(cls, filepath=filepath, custom_root=Path(__file__).parent)
