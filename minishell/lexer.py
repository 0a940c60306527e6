"""Splitting an input line into shell tokens."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_SPACES = frozenset(" \t\n\v\f\r")
_OPERATOR_CHARS = frozenset("|<>")
_QUOTES = frozenset("'\"")


class TokenType(enum.Enum):
    """Kinds of token produced by the lexer."""

    WORD = enum.auto()
    PIPE = enum.auto()
    REDIR_IN = enum.auto()
    REDIR_OUT = enum.auto()
    APPEND = enum.auto()
    HEREDOC = enum.auto()
    END = enum.auto()

    @property
    def is_redirection(self) -> bool:
        """True for the four redirection operators."""
        return self in _REDIRECTIONS


_REDIRECTIONS = frozenset(
    {TokenType.REDIR_IN, TokenType.REDIR_OUT, TokenType.APPEND, TokenType.HEREDOC}
)

# Two-character operators come first so that they win over their prefixes.
_OPERATORS = (
    ("<<", TokenType.HEREDOC),
    (">>", TokenType.APPEND),
    ("|", TokenType.PIPE),
    ("<", TokenType.REDIR_IN),
    (">", TokenType.REDIR_OUT),
)


@dataclass(frozen=True)
class Token:
    """A single lexical token; only words carry a value."""

    type: TokenType
    value: str | None = None


class ShellError(Exception):
    """An error reported to the user, with the exit status it sets."""

    def __init__(self, message: str, exit_status: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.exit_status = exit_status

    def __str__(self) -> str:
        return self.message


class UnclosedQuoteError(ShellError):
    """Raised when a line ends inside a quoted section."""

    def __init__(self, quote: str) -> None:
        kind = "single" if quote == "'" else "double"
        super().__init__(f"minishell: unclosed {kind} quote", exit_status=1)
        self.quote = quote


def is_space(char: str) -> bool:
    """True for a blank or one of the control characters 9 to 13."""
    return char in _SPACES


def is_operator(char: str) -> bool:
    """True for a character that starts an operator."""
    return char in _OPERATOR_CHARS


def is_quote(char: str) -> bool:
    """True for a single or double quote."""
    return char in _QUOTES


def find_unclosed_quote(text: str) -> str | None:
    """Return the quote character left open at the end of text, if any."""
    quote = None
    for char in text:
        if quote is None:
            if is_quote(char):
                quote = char
        elif char == quote:
            quote = None
    return quote


def check_quotes_balance(text: str) -> None:
    """Raise UnclosedQuoteError if text ends inside a quote."""
    quote = find_unclosed_quote(text)
    if quote is not None:
        raise UnclosedQuoteError(quote)


def word_length(text: str) -> int:
    """Length of the word at the start of text, quotes kept together."""
    quote = None
    for length, char in enumerate(text):
        if quote is None:
            if is_quote(char):
                quote = char
            elif is_space(char) or is_operator(char):
                return length
        elif char == quote:
            quote = None
    return len(text)


def _match_operator(text: str, pos: int) -> tuple[TokenType, int] | None:
    for symbol, token_type in _OPERATORS:
        if text.startswith(symbol, pos):
            return token_type, len(symbol)
    return None


def tokenize(text: str) -> list[Token]:
    """Split a line into tokens, ending with an END token."""
    check_quotes_balance(text)
    tokens: list[Token] = []
    pos = 0
    size = len(text)
    while pos < size:
        while pos < size and is_space(text[pos]):
            pos += 1
        if pos >= size:
            break
        operator = _match_operator(text, pos)
        if operator is not None:
            token_type, width = operator
            tokens.append(Token(token_type))
            pos += width
            continue
        length = word_length(text[pos:])
        tokens.append(Token(TokenType.WORD, text[pos : pos + length]))
        pos += length
    tokens.append(Token(TokenType.END))
    return tokens