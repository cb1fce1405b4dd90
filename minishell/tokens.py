"""Token and syntax-tree types, and the primitive readers the lexer is built on."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Union

WHITESPACE = frozenset(" \t\n\v\f\r")
OPERATOR_CHARS = frozenset("|<>&()")
QUOTES = frozenset("'\"")


class TokenType(enum.Enum):
    """Kinds of token produced by the lexer."""

    WORD = enum.auto()
    PIPE = enum.auto()
    AND = enum.auto()
    OR = enum.auto()
    REDIR_IN = enum.auto()
    REDIR_OUT = enum.auto()
    HEREDOC = enum.auto()
    REDIR_APPEND = enum.auto()
    LPAREN = enum.auto()
    RPAREN = enum.auto()


@dataclass(frozen=True)
class Token:
    """A single lexical unit of a command line."""

    value: str
    type: TokenType


class LexError(ValueError):
    """Raised when a command line cannot be split into tokens."""


class NodeType(enum.Enum):
    """Kinds of node in a command syntax tree."""

    COMMAND = enum.auto()
    PIPE = enum.auto()
    AND = enum.auto()
    OR = enum.auto()


@dataclass
class Redirection:
    """A redirection attached to a simple command."""

    filename: str
    type: TokenType


@dataclass
class CommandNode:
    """A simple command: its arguments and redirections."""

    args: list[str] = field(default_factory=list)
    redirections: list[Redirection] = field(default_factory=list)


@dataclass
class OperatorNode:
    """A binary operator (pipe, and, or) joining two subtrees."""

    type: NodeType
    left: AstNode
    right: AstNode


AstNode = Union[CommandNode, OperatorNode]

_DOUBLE_OPERATORS = {
    "<<": TokenType.HEREDOC,
    ">>": TokenType.REDIR_APPEND,
    "&&": TokenType.AND,
    "||": TokenType.OR,
}

_SINGLE_OPERATORS = {
    "|": TokenType.PIPE,
    "<": TokenType.REDIR_IN,
    ">": TokenType.REDIR_OUT,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}


def is_whitespace(c: str) -> bool:
    """Return True if ``c`` is a blank character that separates tokens."""
    return c in WHITESPACE


def is_operator(c: str) -> bool:
    """Return True if ``c`` starts an operator token."""
    return c in OPERATOR_CHARS


def read_operator(line: str) -> Token | None:
    """Read the operator at the start of ``line``.

    Returns None when ``line`` does not start with a recognised operator
    (for instance a lone ``&``).
    """
    pair = line[:2]
    if pair in _DOUBLE_OPERATORS:
        return Token(pair, _DOUBLE_OPERATORS[pair])
    first = line[:1]
    if first in _SINGLE_OPERATORS:
        return Token(first, _SINGLE_OPERATORS[first])
    return None


def _skip_quoted(line: str, start: int) -> int:
    """Return the index just past the quoted section opening at ``start``."""
    quote = line[start]
    end = len(line)
    pos = start + 1
    while pos < end:
        char = line[pos]
        if char == quote:
            return pos + 1
        if quote == '"' and char == "\\" and pos + 1 < end:
            pos += 2
        else:
            pos += 1
    raise LexError("syntax error: unclosed quote")


def _word_length(line: str) -> int:
    end = len(line)
    pos = 0
    while pos < end and not is_whitespace(line[pos]) and not is_operator(line[pos]):
        char = line[pos]
        if char in QUOTES:
            pos = _skip_quoted(line, pos)
        elif char == "\\" and pos + 1 < end:
            pos += 2
        else:
            pos += 1
    return pos


def read_word(line: str) -> Token:
    """Read the word at the start of ``line``, keeping quotes and escapes verbatim.

    Raises LexError if a quoted section is never closed.
    """
    return Token(line[: _word_length(line)], TokenType.WORD)