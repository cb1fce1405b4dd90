"""Shell command-line tokenizer with an interactive prompt, C-style string helpers and a small printf."""

__version__ = "0.1.0"