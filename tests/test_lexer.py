import pytest

from minishell.lexer import (
    ShellError,
    Token,
    TokenType,
    UnclosedQuoteError,
    check_quotes_balance,
    find_unclosed_quote,
    is_operator,
    is_quote,
    is_space,
    tokenize,
    word_length,
)


def types(text):
    return [token.type for token in tokenize(text)]


def test_character_classes():
    assert is_space(" ") and is_space("\t") and is_space("\r")
    assert not is_space("a")
    assert not is_space("")
    assert all(is_operator(c) for c in "|<>")
    assert not is_operator("&")
    assert is_quote("'") and is_quote('"')
    assert not is_quote("`")


def test_simple_words():
    tokens = tokenize("echo hello")
    assert tokens == [
        Token(TokenType.WORD, "echo"),
        Token(TokenType.WORD, "hello"),
        Token(TokenType.END),
    ]


def test_empty_and_blank_lines_give_only_end():
    assert tokenize("") == [Token(TokenType.END)]
    assert tokenize(" \t\n ") == [Token(TokenType.END)]


def test_operators_without_spaces():
    assert types("a>>b<<c|d<e>f") == [
        TokenType.WORD,
        TokenType.APPEND,
        TokenType.WORD,
        TokenType.HEREDOC,
        TokenType.WORD,
        TokenType.PIPE,
        TokenType.WORD,
        TokenType.REDIR_IN,
        TokenType.WORD,
        TokenType.REDIR_OUT,
        TokenType.WORD,
        TokenType.END,
    ]


def test_operators_carry_no_value():
    for token in tokenize("| < > << >>"):
        assert token.value is None


def test_quoted_section_stays_in_one_word():
    tokens = tokenize("echo 'a | b' \"c > d\"")
    assert [t.value for t in tokens[:-1]] == ["echo", "'a | b'", '"c > d"']


def test_quotes_join_adjacent_text():
    tokens = tokenize("ab'c d'ef next")
    assert tokens[0].value == "ab'c d'ef"
    assert tokens[1].value == "next"


def test_word_length():
    assert word_length("abc def") == 3
    assert word_length("ab|c") == 2
    assert word_length("'x y'z w") == len("'x y'z")
    assert word_length("plain") == len("plain")


def test_find_unclosed_quote():
    assert find_unclosed_quote("'\"") == "'"
    assert find_unclosed_quote("\"it's\"") is None
    assert find_unclosed_quote('say "hi') == '"'


def test_check_quotes_balance_messages():
    with pytest.raises(UnclosedQuoteError) as single:
        check_quotes_balance("echo 'oops")
    assert str(single.value) == "minishell: unclosed single quote"
    assert single.value.exit_status == 1
    with pytest.raises(UnclosedQuoteError) as double:
        check_quotes_balance('echo "oops')
    assert str(double.value) == "minishell: unclosed double quote"


def test_tokenize_rejects_unbalanced_quotes():
    with pytest.raises(ShellError):
        tokenize("cat 'file")


@pytest.mark.parametrize("text", ["ls -l", "a|b", "x > y >> z", "'q w' e"])
def test_always_ends_with_single_end(text):
    result = types(text)
    assert result[-1] is TokenType.END
    assert result.count(TokenType.END) == 1