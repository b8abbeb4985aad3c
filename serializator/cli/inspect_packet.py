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

import json
from typing import Any, Optional

from structlog import get_logger
from typing_extensions import assert_never

from serializator.values import AnyValue, FloatValue, IntegerValue, StringValue, VectorValue

logger = get_logger()


def value_to_json(value: AnyValue) -> Any:
    """ Convert a value to something `json.dump` accepts.

    Strings are rendered as text when they hold valid UTF-8, otherwise as `{"hex": "..."}`.
    """
    inner = value.value
    match inner:
        case IntegerValue() | FloatValue():
            return inner.payload
        case StringValue():
            try:
                return inner.text
            except UnicodeDecodeError:
                return {'hex': inner.payload.hex()}
        case VectorValue():
            return [value_to_json(item) for item in inner]
        case _:
            assert_never(inner)


def main(argv: Optional[list[str]] = None) -> int:
    from serializator import SerializationError, Serializator
    from serializator.cli.util import create_parser, read_file_or_exit

    parser = create_parser()
    parser.add_argument('--indent', type=int, default=None, help='Number of spaces to use for indentation')
    parser.add_argument('file', help='File holding one serialized packet')
    args = parser.parse_args(argv)

    data = read_file_or_exit(args.file)

    try:
        values = Serializator.deserialize(data)
    except SerializationError as e:
        logger.error('invalid packet', file=args.file, error=repr(e))
        return 2

    print(json.dumps([value_to_json(value) for value in values], indent=args.indent))
    return 0
