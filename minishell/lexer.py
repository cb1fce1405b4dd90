"""Split a command line into tokens."""

from __future__ import annotations

from .tokens import LexError, Token, is_operator, is_whitespace, read_operator, read_word


def tokenize(line: str) -> list[Token]:
    """Return the tokens of ``line`` in order.

    Raises LexError on an unclosed quote or an unsupported operator.
    """
    tokens: list[Token] = []
    pos = 0
    while pos < len(line):
        char = line[pos]
        if is_whitespace(char):
            pos += 1
            continue
        if is_operator(char):
            token = read_operator(line[pos:])
            if token is None:
                raise LexError(f"syntax error: unsupported operator '{char}'")
        else:
            token = read_word(line[pos:])
        tokens.append(token)
        pos += len(token.value)
    return tokens