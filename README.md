# minishell

`minishell` is a small interactive shell front end. It reads lines at a
`minishell-$ ` prompt and splits each line into tokens. It checks the syntax of
the pipeline and groups the words and redirections of each command.

## Installing

```
pip install .
```

## Running

```
minishell
```

The command takes no arguments. If it is given any, it writes
`Invalid Arguments !` to standard error and exits with status 1.

At startup the shell copies the process environment into a list of `EnvEntry`
objects. If the environment is empty, it prints `Failed to copy environment!`
and exits with status 1.

Line editing and history come from Python's `readline` module where it is
available. End of input (Ctrl-D) prints `exit` and leaves with the status that
the last line set.

Errors go to standard error, and each one sets the exit status:

| Input | Message | Status |
|-------|---------|--------|
| an unclosed `'` or `"` | `minishell: unclosed single quote` / `minishell: unclosed double quote` | 1 |
| `\|` at the start of a line, or two pipes in a row | ``minishell: syntax error near unexpected token `|'`` | 258 |
| a redirection not followed by a word, or a line ending in `\|` | ``minishell: syntax error near unexpected token `newline'`` | 258 |

## What it does not do

The shell only reads and parses. It does not run commands, open redirection
files, read here-documents, expand variables or remove quotes. It has no
built-in commands. A parsed line is kept on the `Shell` object and nothing
more happens to it.

## Using the library

```python
from minishell.lexer import tokenize
from minishell.parser import parse

commands = parse(tokenize('cat < in.txt | grep "a b" >> out.txt'))
for command in commands:
    print(command.line, command.argc, [(r.type, r.target) for r in command.redirections])
```

Quotes stay in the word text. In the example above, the second command's
`line` is `grep "a b"`.

### `minishell.lexer`

- `TokenType` has the members `WORD`, `PIPE`, `REDIR_IN`, `REDIR_OUT`,
  `APPEND`, `HEREDOC` and `END`. The property `is_redirection` is true for the
  four redirection kinds.
- `Token(type, value=None)` is a token. Only words carry a value.
- `tokenize(text)` returns a list of tokens that always ends with an `END`
  token. The operators are `|`, `<`, `>`, `>>` and `<<`. A word keeps quoted
  sections together, spaces and operators included.
- `is_space`, `is_operator` and `is_quote` are tests on a single character.
- `word_length(text)` gives the length of the word at the start of `text`.
- `find_unclosed_quote(text)` returns the quote left open at the end of the
  line, or `None`.
- `check_quotes_balance(text)` raises `UnclosedQuoteError` when a quote is left
  open.
- `ShellError` carries a `message` and an `exit_status`. It is the base class of
  the errors in this package.

### `minishell.parser`

- `validate_syntax(tokens)` raises `ShellSyntaxError` (exit status 258) on
  misplaced pipes and redirections.
- `count_command_args(tokens)` counts the words of the first command. It does
  not count redirection targets.
- `parse_pipeline(tokens)` splits the tokens at pipes into `Command` objects. It
  does not validate them first.
- `parse(tokens)` validates the tokens and then builds the pipeline.
- `Command` has the fields `line` (the words joined by single spaces, or `None`),
  `argc` and `redirections`.
- `Redirection` has the fields `type`, `target`, `fd` (default `-1`),
  `ambiguous` (default `False`) and `should_expand` (default `True`).

### `minishell.environment`

- `parse_env_entry(text)` splits `KEY=value` at the first `=`. If there is no
  `=`, the value is empty.
- `copy_environment(entries)` parses a sequence of such strings into `EnvEntry`
  objects, in their original order.

### `minishell.cli`

- `Shell(env)` holds the environment, `last_exit_status`, `tokens` and
  `commands`.
- `Shell.process_line(line)` tokenizes and parses one line and returns the
  commands. On an error it reports the message, sets the status and returns an
  empty list.
- `Shell.run(read_line)` calls `read_line(prompt)` until it returns `None`, then
  returns the last exit status.
- `main(argv=None)` is the entry point of the `minishell` command.

## Running the tests

```
pip install .[test]
pytest
```