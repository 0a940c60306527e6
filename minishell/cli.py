"""The interactive read-parse loop."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterable, Sequence

from minishell.environment import EnvEntry, copy_environment
from minishell.lexer import ShellError, Token, tokenize
from minishell.parser import Command, parse

PROMPT = "minishell-$ "


def _report(message: str) -> None:
    sys.stderr.write(message + "\n")


def _read_input(prompt: str) -> str | None:
    try:
        return input(prompt)
    except EOFError:
        return None


class Shell:
    """Shell state: environment, last exit status and the latest parse."""

    def __init__(self, env: Iterable[str]) -> None:
        self.env: list[EnvEntry] = copy_environment(env)
        if not self.env:
            raise ShellError("Failed to copy environment!", exit_status=1)
        self.last_exit_status = 0
        self.tokens: list[Token] = []
        self.commands: list[Command] = []

    def process_line(self, line: str) -> list[Command]:
        """Tokenize and parse one line; errors are reported and set the status."""
        try:
            self.tokens = tokenize(line)
            self.commands = parse(self.tokens)
        except ShellError as err:
            self.last_exit_status = err.exit_status
            self.tokens = []
            self.commands = []
            _report(str(err))
        return self.commands

    def run(self, read_line: Callable[[str], str | None]) -> int:
        """Read lines until read_line returns None; return the last exit status."""
        while True:
            line = read_line(PROMPT)
            if line is None:
                _report("exit")
                return self.last_exit_status
            self.process_line(line)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive shell."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        sys.stderr.write("Invalid Arguments !")
        return 1
    try:
        shell = Shell(f"{key}={value}" for key, value in os.environ.items())
    except ShellError as err:
        _report(str(err))
        return err.exit_status
    try:
        import readline  # noqa: F401  line editing and history for input()
    except ImportError:
        pass
    return shell.run(_read_input)


if __name__ == "__main__":
    sys.exit(main())