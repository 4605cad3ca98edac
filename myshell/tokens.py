"""Splitting of command lines into shell tokens."""

MAX_TOKENS = 4


def tokenize(line: str) -> list[str]:
    """Split a command line on whitespace, keeping at most four tokens.

    Blank lines give an empty list.
    """
    return line.split()[:MAX_TOKENS]