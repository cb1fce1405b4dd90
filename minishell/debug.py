"""Human-readable dumps of token lists."""

from __future__ import annotations

from collections.abc import Iterable

from .tokens import Token, TokenType

_TYPE_NAMES = {
    TokenType.WORD: "WORD",
    TokenType.PIPE: "PIPE",
    TokenType.AND: "AND",
    TokenType.OR: "OR",
    TokenType.REDIR_IN: "REDIR_IN",
    TokenType.REDIR_OUT: "REDIR_OUT",
    TokenType.HEREDOC: "HEREDOC",
    TokenType.REDIR_APPEND: "REDIR_APPEND",
    TokenType.LPAREN: "L_PAREN",
    TokenType.RPAREN: "R_PAREN",
}


def token_type_name(token_type: object) -> str:
    """Return the display name of a token type, or UNKNOWN."""
    return _TYPE_NAMES.get(token_type, "UNKNOWN")


def format_token_list(tokens: Iterable[Token]) -> str:
    """Render tokens one per line, numbered from zero."""
    return "".join(
        f"Token {index}: Type = {token_type_name(token.type)}, Value = [{token.value}]\n"
        for index, token in enumerate(tokens)
    )


def print_token_list(tokens: Iterable[Token]) -> None:
    """Write the rendering of ``tokens`` to standard output."""
    print(format_token_list(tokens), end="")