"""An interactive shell with count, search and typeline built in."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from myshell.commands import CommandError, count, search, typeline
from myshell.runner import run_external
from myshell.tokens import tokenize

PROMPT = "MYSHELL $]"


class Shell:
    """Reads command lines, runs built-ins directly and everything else as programs."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self.stdin = stdin
        self.stdout = stdout

    def _builtin(self, tokens: list[str]) -> str | None:
        """Output of a built-in command, or None when the tokens name none."""
        name = tokens[0]
        if len(tokens) == 3 and name == "count":
            return count(tokens[1], tokens[2])
        if len(tokens) == 3 and name == "typeline":
            return typeline(tokens[1], tokens[2])
        if len(tokens) == 4 and name == "search":
            return search(tokens[1], tokens[2], tokens[3])
        return None

    def execute(self, line: str) -> None:
        """Run one command line, writing any output or error to stdout."""
        tokens = tokenize(line)
        if not tokens:
            return
        try:
            output = self._builtin(tokens)
            if output is None:
                self.stdout.flush()
                run_external(tokens)
            else:
                self.stdout.write(output)
        except CommandError as exc:
            self.stdout.write(f"{exc}\n")

    def run(self) -> None:
        """Prompt for and execute command lines until input ends."""
        while True:
            self.stdout.write(PROMPT)
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                break
            self.execute(line)


def main(argv: list[str] | None = None) -> int:
    """Start an interactive shell on the standard streams."""
    parser = argparse.ArgumentParser(
        prog="myshell",
        description="A small shell with count, search and typeline commands.",
    )
    parser.parse_args(argv)
    Shell(sys.stdin, sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())