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

from structlog import get_logger

logger = get_logger()


def roundtrip(data: bytes) -> bool:
    """ Decode a packet, push every value into a fresh container, encode it again and compare with the input.
    """
    from serializator import Serializator

    log = logger.new()

    log.info('deserialize...', size=len(data))
    values = Serializator.deserialize(data)

    packet = Serializator()
    for value in values:
        packet.push(value)

    log.info('serialize...', count=len(packet))
    return packet.serialize() == data


def main(argv: Optional[list[str]] = None) -> int:
    from serializator import SerializationError
    from serializator.cli.util import create_parser, read_file_or_exit

    parser = create_parser()
    parser.add_argument('file', help='File holding one serialized packet')
    args = parser.parse_args(argv)

    data = read_file_or_exit(args.file)

    try:
        result = roundtrip(data)
    except SerializationError as e:
        logger.error('invalid packet', file=args.file, error=repr(e))
        return 2

    print(f'Comparison result: {str(result).lower()}')
    return 0 if result else 1
