#!/usr/bin/env python3
"""
Morse Command Line Utility

Dispatches the `morse` and `text` commands to the morse translator.

Usage:
    python morse.py morse --text "HELLO WORLD"
    python morse.py text --morse ".... . .-.. .-.. --- / .-- --- .-. .-.. -.."
"""

import argparse
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional

from morse_translator import MorseError, MorseTranslator


USAGE = (
    "morse is a simple utility to work with morse code.\n"
    "\n"
    "Commands:\n"
    "  morse --text \"<text>\"\n"
    "  text --morse \"<morse-code>\"\n"
    "\n"
    "Run `morse <command> -h` to get help for a specific command.\n"
)


@dataclass
class Command:
    """A named subcommand of the utility."""
    name: str
    description: str
    run: Callable[[List[str]], None]


class CommandArgumentParser(argparse.ArgumentParser):
    """
    Argument parser for a single command.

    Help goes to stderr. Flags are accepted with one or two dashes, and
    parsing stops at the first non-flag argument or at '--'; everything
    from there on is ignored.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.string_flags = set()

    def print_help(self, file=None):
        super().print_help(file or sys.stderr)

    def add_flag(self, name: str, help: str):
        """Add a boolean flag such as -debug / --debug."""
        self.add_argument(f'-{name}', f'--{name}', dest=name, action='store_true', help=help)

    def add_string_flag(self, name: str, help: str):
        """Add a string flag such as -text / --text, defaulting to ''."""
        self.add_argument(f'-{name}', f'--{name}', dest=name, default='', help=help)
        self.string_flags.update((f'-{name}', f'--{name}'))

    def parse_flags(self, args: List[str]) -> argparse.Namespace:
        """
        Parse the leading flags of args.

        Values of string flags are attached with '=' so that values which
        start with a dash, like the morse code '-.-', are not read as flags.

        Args:
            args: Arguments following the command name

        Returns:
            Parsed flags
        """
        flags = []
        remaining = iter(args)
        for arg in remaining:
            if arg == '--' or arg == '-' or not arg.startswith('-'):
                break
            if arg in self.string_flags:
                value = next(remaining, None)
                flags.append(arg if value is None else f'{arg}={value}')
            else:
                flags.append(arg)

        return self.parse_args(flags)


def usage():
    """Print the top-level usage text to stderr."""
    print(USAGE, file=sys.stderr)


def _command_parser(name: str, description: str) -> CommandArgumentParser:
    parser = CommandArgumentParser(
        prog=f"morse {name}",
        description=description
    )
    parser.add_flag('debug', 'Enable debug output')
    return parser


def morse_from_text(args: List[str]):
    """Run the `morse` command: print the morse code for --text."""
    parser = _command_parser('morse', 'Converts text into morse code')
    parser.add_string_flag('text', 'The text to convert to morse code')
    opts = parser.parse_flags(args)

    translator = MorseTranslator(debug=opts.debug)
    print(translator.to_morse(opts.text))


def text_from_morse(args: List[str]):
    """Run the `text` command: print the text for --morse."""
    parser = _command_parser('text', 'Converts morse code into text')
    parser.add_string_flag('morse', 'The morse code to convert to text')
    opts = parser.parse_flags(args)

    translator = MorseTranslator(debug=opts.debug)
    print(translator.from_morse(opts.morse))


COMMANDS = [
    Command(name='morse', description='Converts text into morse code', run=morse_from_text),
    Command(name='text', description='Converts morse code into text', run=text_from_morse),
]


def run_command(name: str, args: List[str]) -> int:
    """
    Run a command by name.

    Args:
        name: Command name ('morse' or 'text')
        args: Arguments following the command name

    Returns:
        Process exit status
    """
    command = next((cmd for cmd in COMMANDS if cmd.name == name), None)
    if command is None:
        print(f"command \"{name}\" not found\n", file=sys.stderr)
        usage()
        return 1

    try:
        command.run(args)
    except MorseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Command line interface for the morse translator."""
    if argv is None:
        argv = sys.argv[1:]

    if argv and argv[0] == '--':
        argv = argv[1:]
    elif argv and argv[0] in ('-h', '-help', '--help'):
        usage()
        return 0
    elif argv and argv[0].startswith('-') and argv[0] != '-':
        flag = argv[0].lstrip('-').split('=', 1)[0]
        print(f"flag provided but not defined: -{flag}", file=sys.stderr)
        usage()
        return 2

    if not argv:
        usage()
        return 1

    return run_command(argv[0], argv[1:])


if __name__ == '__main__':
    sys.exit(main())
