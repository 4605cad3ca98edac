"""Built-in shell commands: count, search and typeline."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path


class CommandError(Exception):
    """Raised when a built-in command cannot do its work."""


@dataclass(frozen=True)
class Counts:
    """Character, word and line counts of a piece of text."""

    characters: int
    words: int
    lines: int


def count_text(data: bytes | str) -> Counts:
    """Count characters, words and lines.

    Every space, tab and newline ends a word; every newline ends a line.
    For bytes, characters are bytes.
    """
    text = data.decode("latin-1") if isinstance(data, bytes) else data
    lines = text.count("\n")
    separators = text.count(" ") + text.count("\t") + lines
    return Counts(characters=len(text), words=separators, lines=lines)


def _read_bytes(path, message: str) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise CommandError(message) from exc


def _read_text(path, message: str) -> str:
    return _read_bytes(path, message).decode("utf-8", errors="surrogateescape")


def count(option: str, path) -> str:
    """Report the number of characters (c), words (w) or lines (l) in a file."""
    data = _read_bytes(path, f"Unable To Open File  {path} !!")
    counts = count_text(data)
    if option == "c":
        return f"Number Of Character  :{counts.characters} \n"
    if option == "w":
        return f"Number Of Words    : {counts.words} \n"
    if option == "l":
        return f"Number Of Lines   : {counts.lines} \n"
    raise CommandError("Invalid Option Is Given For Count Command !!!")


def _complete_lines(text: str) -> list[str]:
    """Lines that end with a newline, newline kept; a trailing partial line is dropped."""
    return [part + "\n" for part in text.split("\n")[:-1]]


def _occurrences(line: str, pattern: str) -> int:
    """Number of possibly overlapping occurrences of pattern in line."""
    found = 0
    start = line.find(pattern)
    while start != -1:
        found += 1
        start = line.find(pattern, start + 1)
    return found


def search(option: str, pattern: str, path) -> str:
    """Search a file for a pattern.

    F reports the first matching line, A every matching line and
    C the number of occurrences.
    """
    text = _read_text(path, f"Unable To Open Files  {path}  !!")
    lines = _complete_lines(text)
    if option == "F":
        first = next((line for line in lines if pattern in line), None)
        return "" if first is None else f"First Occurance Line : {first} \n"
    if option == "A":
        header = f"Displaying All Occarances of {pattern}  \n"
        matches = (f" Occurance Line  is   : {line} \n" for line in lines if pattern in line)
        return header + "".join(matches)
    if option == "C":
        total = sum(_occurrences(line, pattern) for line in lines)
        return f"{pattern} Is Occures {total} times  \n"
    raise CommandError("Invalid optionnn is given  !!!")


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(value: str) -> int:
    """Parse a leading integer the way atoi does; anything else is 0."""
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else 0


def _stop_index(text: str, limit: int) -> int:
    """Index just past the character at which the newline count first equals limit."""
    seen = 0
    for index, char in enumerate(text):
        if char == "\n":
            seen += 1
        if seen == limit:
            return index + 1
    return len(text)


def typeline(option: str, path) -> str:
    """Show lines of a file.

    "a" shows the whole file, a number n >= 0 the first n lines and a
    negative number -n the last n lines.
    """
    text = _read_text(path, f"Unable To Open File  {path} ")
    if option == "a":
        return f"Displaying All Lines From {path} \n{text}"
    wanted = _leading_int(option)
    if wanted >= 0:
        header = f"Displaying First {wanted} Lines From {path} \n"
        return header + text[: _stop_index(text, wanted)]
    skip = text.count("\n") + wanted
    return text[_stop_index(text, skip):]