"""Running external programs on behalf of the shell."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

from myshell.commands import CommandError


def run_external(tokens: Sequence[str]) -> int:
    """Run a program with its arguments, wait for it and return its exit status.

    The program inherits the standard streams of the current process and is
    looked up on PATH.
    """
    if not tokens:
        raise ValueError("no command given")
    program = tokens[0]
    try:
        completed = subprocess.run(list(tokens), check=False)
    except FileNotFoundError as exc:
        raise CommandError(f"{program}: command not found") from exc
    except PermissionError as exc:
        raise CommandError(f"{program}: permission denied") from exc
    except OSError as exc:
        raise CommandError(f"{program}: {exc.strerror or exc}") from exc
    return completed.returncode