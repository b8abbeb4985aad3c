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

import os
import sys
from collections import defaultdict
from types import ModuleType
from typing import Optional

from structlog import get_logger

logger = get_logger()


class CliManager:
    def __init__(self) -> None:
        self.basename: str = os.path.basename(sys.argv[0])
        self.command_list: dict[str, ModuleType] = {}
        self.cmd_description: dict[str, str] = {}
        self.groups: dict[str, list[str]] = defaultdict(list)
        self.longest_cmd: int = 0

        from . import gen_example, inspect_packet, roundtrip

        self.add_cmd('packet', 'roundtrip', roundtrip, 'Decode a packet, re-encode it and compare with the input')
        self.add_cmd('packet', 'inspect', inspect_packet, 'Decode a packet and print its values as JSON')
        self.add_cmd('dev', 'gen_example', gen_example, 'Write the example packet to a file')

    def add_cmd(self, group: str, cmd: str, module: ModuleType, short_description: Optional[str] = None) -> None:
        self.command_list[cmd] = module
        self.groups[group].append(cmd)
        if short_description:
            self.cmd_description[cmd] = short_description
        self.longest_cmd = max(self.longest_cmd, len(cmd))

    def help(self) -> None:
        print()
        print('Available subcommands:')
        print()

        groups = list(self.groups.keys())
        groups.sort()

        from colorama import Fore, Style
        for group in groups:
            print(Fore.RED + Style.BRIGHT + '[{}]'.format(group) + Style.RESET_ALL)
            for cmd in self.groups[group]:
                filling = ' ' * (self.longest_cmd - len(cmd))
                description = self.cmd_description.get(cmd, '')
                print('    {}{}   {}'.format(cmd, filling, description))
            print()

    def execute_from_command_line(self, argv: Optional[list[str]] = None) -> int:
        from serializator.cli.util import process_logging_options, process_logging_output, setup_logging

        argv = list(sys.argv[1:] if argv is None else argv)

        if not argv:
            self.help()
            return 0

        cmd = argv.pop(0)
        if cmd == 'help':
            self.help()
            return 0

        if cmd not in self.command_list:
            print('Unknown command: "{}"'.format(cmd))
            print('Type "{} help" for usage.'.format(self.basename))
            return -1

        module = self.command_list[cmd]

        logging_output = process_logging_output(argv)
        logging_options = process_logging_options(argv)
        setup_logging(logging_output=logging_output, logging_options=logging_options)

        return module.main(argv)


def main() -> None:
    try:
        sys.exit(CliManager().execute_from_command_line())
    except KeyboardInterrupt:
        logger.warn('Aborting and exiting...')
        sys.exit(1)
    except Exception:
        logger.exception('Uncaught exception:')
        sys.exit(2)


if __name__ == '__main__':
    main()
