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

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any
from unittest.mock import patch

from serializator.conf import SerializatorSettings

# The packet from the format's defining example: one vector holding String("qwerty") and Integer(100500)
EXAMPLE_PACKET = bytes([
    0x01, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x03, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x02, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x02, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x06, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x71, 0x77, 0x65, 0x72, 0x74, 0x79, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x94, 0x88,
    0x01, 0x00, 0x00, 0x00, 0x00, 0x00,
])

# The same vector without the packet's count
EXAMPLE_VECTOR = EXAMPLE_PACKET[8:]


@contextmanager
def override_settings(**kwargs: Any) -> Iterator[SerializatorSettings]:
    """Temporarily replace the global settings with a copy that has the given fields changed."""
    from serializator.conf import get_settings

    current = get_settings.get_global_settings()
    source = get_settings.get_settings_source()
    settings = current.model_copy(update=kwargs)
    metadata = get_settings._SettingsMetadata(source=source, settings=settings)
    with patch.object(get_settings, '_settings_singleton', metadata):
        yield settings
