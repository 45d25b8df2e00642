"""Interactive command loop driving a single IndexedSequence."""

import argparse
import logging
import sys
from typing import TextIO

from indexedseq import __version__
from indexedseq.core import IndexedSequence
from indexedseq.errors import OutOfRangeError
from indexedseq.index import DEFAULT_CAPACITY
from indexedseq.types import MENU_ALIASES, CommandName

logger = logging.getLogger(__name__)

MENU = "1.Insert  2.Remove  3.Get  4.Print  5.Size  0.Exit"

# Syntax shown when a command gets the wrong arguments
USAGE: dict[CommandName, str] = {
    "insert": "insert <position> <value>",
    "remove": "remove <position>",
    "get": "get <position>",
    "print": "print",
    "size": "size",
    "help": "help",
    "quit": "quit",
}

# Number of integer arguments each command takes
_ARITY: dict[CommandName, int] = {
    "insert": 2,
    "remove": 1,
    "get": 1,
    "print": 0,
    "size": 0,
    "help": 0,
    "quit": 0,
}

_NAMES: dict[str, CommandName] = {name: name for name in _ARITY}
_NAMES["exit"] = "quit"
_NAMES.update(MENU_ALIASES)


class Shell:
    """
    Line-oriented shell over one IndexedSequence.

    The sequence is owned by the caller and passed in, so the same instance
    can be inspected after the loop ends.
    """

    PROMPT = "> "

    def __init__(
        self,
        sequence: IndexedSequence,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        interactive: bool = True,
    ) -> None:
        self.sequence = sequence
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.interactive = interactive

    def _write(self, text: str) -> None:
        print(text, file=self.stdout)

    def execute(self, line: str) -> bool:
        """
        Run one command line.

        Returns:
            False if the command asks the loop to stop, True otherwise.
        """
        words = line.split()
        if not words:
            return True

        name = _NAMES.get(words[0].lower())
        if name is None:
            logger.debug("Unknown command %r", words[0])
            self._write("Invalid choice")
            return True

        try:
            args = [int(word) for word in words[1:]]
        except ValueError:
            args = None
        if args is None or len(args) != _ARITY[name]:
            logger.debug("Bad arguments for %s: %r", name, words[1:])
            self._write(f"usage: {USAGE[name]}")
            return True

        logger.debug("Dispatching %s %s", name, args)
        try:
            return self._dispatch(name, args)
        except OutOfRangeError as e:
            logger.debug("Rejected %s: %s", name, e)
            self._write("invalid index")
            return True

    def _dispatch(self, name: CommandName, args: list[int]) -> bool:
        seq = self.sequence
        if name == "insert":
            seq.insert(args[0], args[1])
        elif name == "remove":
            seq.remove_at(args[0])
        elif name == "get":
            self._write(f"Value at index {args[0]} = {seq.get(args[0])}")
        elif name == "print":
            self._write(seq.format())
        elif name == "size":
            self._write(f"Current size: {seq.size()}")
        elif name == "help":
            self._write(MENU)
            for usage in USAGE.values():
                self._write(f"  {usage}")
        elif name == "quit":
            return False
        return True

    def run(self) -> int:
        """Read and execute commands until quit or end of input. Returns the exit code."""
        if self.interactive:
            self._write(MENU)
        while True:
            if self.interactive:
                self.stdout.write(self.PROMPT)
                self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                if self.interactive:
                    self._write("")
                return 0
            if not self.execute(line):
                return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="indexedseq",
        description="Interactive shell over an indexed integer sequence.",
    )
    parser.add_argument(
        "--capacity",
        type=int,
        default=DEFAULT_CAPACITY,
        help=f"initial index capacity (default: {DEFAULT_CAPACITY})",
    )
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--quiet", action="store_true", help="do not print the menu or prompt")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Console entry point."""
    parser = build_parser()
    options = parser.parse_args(argv)
    if options.capacity < 1:
        parser.error("--capacity must be at least 1")
    if options.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    sequence = IndexedSequence.create(capacity=options.capacity)
    return Shell(sequence, interactive=not options.quiet).run()
