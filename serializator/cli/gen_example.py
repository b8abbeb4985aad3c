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

from typing import TYPE_CHECKING, Optional

from structlog import get_logger

if TYPE_CHECKING:
    from serializator import Serializator

logger = get_logger()


def build_example() -> 'Serializator':
    """ The packet with a single vector holding the string "qwerty" followed by the integer 100500.
    """
    from serializator import IntegerValue, Serializator, StringValue, VectorValue

    packet = Serializator()
    packet.push(VectorValue([StringValue('qwerty'), IntegerValue(100500)]))
    return packet


def main(argv: Optional[list[str]] = None) -> int:
    from serializator.cli.util import create_parser

    parser = create_parser()
    parser.add_argument('out', help='Output file where the packet will be written')
    args = parser.parse_args(argv)

    data = build_example().serialize()
    with open(args.out, 'wb') as fp:
        fp.write(data)

    logger.info('example packet written', out=args.out, size=len(data))
    return 0
