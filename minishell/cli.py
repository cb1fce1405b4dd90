"""Interactive prompt that reads command lines and shows their tokens."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .debug import print_token_list
from .lexer import tokenize
from .tokens import LexError

try:
    import readline
except ImportError:  # platforms without GNU readline
    readline = None

PROMPT = "minishell> "


def main(argv: Sequence[str] | None = None) -> int:
    """Run the read-tokenize-print loop until end of input."""
    parser = argparse.ArgumentParser(
        prog="minishell", description="Read command lines and print their tokens."
    )
    parser.parse_args(argv)

    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print("exit")
            return 0
        if not line:
            continue
        if readline is not None:
            readline.add_history(line)
        try:
            tokens = tokenize(line)
        except LexError as exc:
            print(f"minishell: {exc}")
            continue
        print_token_list(tokens)


if __name__ == "__main__":
    raise SystemExit(main())