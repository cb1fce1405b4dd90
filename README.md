# minishell

An interactive prompt for shell command lines. Each line you type is split
into shell tokens (words, pipes, `&&`, `||`, redirections, heredoc markers
and parentheses), and the tokens are printed one per line.

## Installing

```
pip install .
```

## Interactive use

```
minishell
```

It prompts with `minishell> ` and reads lines until end of input. Type a
command line:

```
minishell> cat < in.txt | grep "a b" && echo done
Token 0: Type = WORD, Value = [cat]
Token 1: Type = REDIR_IN, Value = [<]
Token 2: Type = WORD, Value = [in.txt]
Token 3: Type = PIPE, Value = [|]
Token 4: Type = WORD, Value = [grep]
Token 5: Type = WORD, Value = ["a b"]
Token 6: Type = AND, Value = [&&]
Token 7: Type = WORD, Value = [echo]
Token 8: Type = WORD, Value = [done]
```

- Blank characters (space, tab, newline, vertical tab, form feed, carriage
  return) separate tokens. Empty lines are skipped.
- The operators are `|`, `||`, `&&`, `<`, `<<`, `>`, `>>`, `(` and `)`.
- Quoted text stays part of its word, with the quotes kept. A backslash
  escapes the next character, both outside quotes and inside double quotes.
- If a quote is never closed, minishell prints
  `minishell: syntax error: unclosed quote` and no tokens for that line.
  A lone `&` gives `minishell: syntax error: unsupported operator '&'`.
- Where the `readline` module is available, non-empty lines are added to
  its history.
- End input (Ctrl-D) to leave; minishell prints `exit`.

`minishell --help` shows the usage; the command takes no other options.

## As a library

```python
from minishell.lexer import tokenize
from minishell.debug import format_token_list
from minishell.tokens import LexError, TokenType

tokens = tokenize("ls -l >> out.txt")
assert [t.type for t in tokens] == [
    TokenType.WORD, TokenType.WORD, TokenType.REDIR_APPEND, TokenType.WORD,
]
print(format_token_list(tokens), end="")

try:
    tokenize("echo 'oops")
except LexError as err:
    print(err)  # syntax error: unclosed quote
```

- `minishell.tokens` holds `Token` (a frozen `value`/`type` pair),
  `TokenType`, `LexError` (a `ValueError`), the single-token readers
  `read_operator` and `read_word`, the character tests `is_whitespace` and
  `is_operator`, and syntax-tree types `NodeType`, `Redirection`,
  `CommandNode` and `OperatorNode`.
- `minishell.lexer.tokenize` returns the list of tokens of a line.
- `minishell.debug` has `token_type_name`, `format_token_list` and
  `print_token_list`, which give the numbered dump shown above.

### String helpers

`minishell.cstr` has helpers that follow C library conventions: `atoi`,
`atol`, `itoa`, `split`, `strtrim`, `strnstr`, `strncmp`, `strcmp`,
`strchr` and `strrchr`. Searches return an index, or `None` when nothing
is found (searching for `"\0"` gives the string's length). Comparisons
return the difference of the first differing character codes. `atoi` and
`atol` skip leading blanks, accept one sign, stop at the first non-digit
and wrap the result to a signed 32-bit value.

### Formatting

`minishell.printf.format_printf` returns formatted text and
`minishell.printf.printf` writes it to standard output and returns its
length. They take the conversions `%c %s %p %d %i %u %x %X %%`. `%s` of
`None` gives `(null)`, `%p` of zero gives `(nil)`, `%d`/`%i` wrap to a
signed 32-bit value and `%u`/`%x`/`%X` to an unsigned one. Too few
arguments raise `TypeError`.

## What it does not do

minishell only splits lines into tokens. It does not build syntax trees
from them (the tree types in `minishell.tokens` are data classes only),
remove quotes, expand variables, perform redirections, or run commands.

## Running the tests

```
pip install ".[test]"
pytest
```