"""Syntax checking and grouping of tokens into commands."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from itertools import zip_longest

from minishell.lexer import ShellError, Token, TokenType


@dataclass
class Redirection:
    """A redirection attached to a command."""

    type: TokenType
    target: str
    fd: int = -1
    ambiguous: bool = False
    should_expand: bool = True


@dataclass
class Command:
    """One command of a pipeline: its words joined by spaces and its redirections."""

    line: str | None = None
    argc: int = 0
    redirections: list[Redirection] = field(default_factory=list)


class ShellSyntaxError(ShellError):
    """Raised for a misplaced pipe or redirection."""

    def __init__(self, token: str) -> None:
        super().__init__(
            f"minishell: syntax error near unexpected token `{token}'", exit_status=258
        )
        self.token = token


def validate_syntax(tokens: Iterable[Token]) -> None:
    """Raise ShellSyntaxError if the token sequence is malformed."""
    tokens = list(tokens)
    previous: Token | None = None
    for token, following in zip_longest(tokens, tokens[1:]):
        if token.type is TokenType.END:
            break
        if token.type is TokenType.PIPE and (
            previous is None or previous.type is TokenType.PIPE
        ):
            raise ShellSyntaxError("|")
        if token.type.is_redirection and (
            following is None or following.type is not TokenType.WORD
        ):
            raise ShellSyntaxError("newline")
        previous = token
    else:
        return
    if previous is not None and previous.type is TokenType.PIPE:
        raise ShellSyntaxError("newline")


def count_command_args(tokens: Iterable[Token]) -> int:
    """Count the words of the first command, not counting redirection targets."""
    count = 0
    stream = iter(tokens)
    for token in stream:
        if token.type in (TokenType.PIPE, TokenType.END):
            break
        if token.type is TokenType.WORD:
            count += 1
        elif token.type.is_redirection:
            next(stream, None)
    return count


def _segments(tokens: Iterable[Token]) -> Iterator[list[Token]]:
    segment: list[Token] = []
    for token in tokens:
        if token.type is TokenType.END:
            break
        if token.type is TokenType.PIPE:
            yield segment
            segment = []
            continue
        segment.append(token)
    if segment:
        yield segment


def _build_command(segment: list[Token]) -> Command:
    command = Command(argc=count_command_args(segment))
    words: list[str] = []
    stream = iter(segment)
    for token in stream:
        if token.type is TokenType.WORD:
            words.append(token.value or "")
        elif token.type.is_redirection:
            target = next(stream, None)
            if target is None or target.type is not TokenType.WORD:
                raise ShellSyntaxError("newline")
            command.redirections.append(Redirection(token.type, target.value or ""))
    command.line = " ".join(words) if words else None
    return command


def parse_pipeline(tokens: Iterable[Token]) -> list[Command]:
    """Group tokens into commands separated by pipes, without validation."""
    return [_build_command(segment) for segment in _segments(tokens)]


def parse(tokens: Iterable[Token]) -> list[Command]:
    """Validate the tokens and build the pipeline of commands."""
    tokens = list(tokens)
    validate_syntax(tokens)
    return parse_pipeline(tokens)