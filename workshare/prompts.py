"""Interactive prompts that keep asking until a valid number is given."""

from __future__ import annotations

import re
import sys
from typing import TextIO

_LEADING_INT = re.compile(r"[+-]?\d+")


def ask_positive_int(
    prompt: str,
    error_message: str = "Invalid input!",
    maximum: int | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Prompt until a positive integer (at most ``maximum``, if given) is read.

    Blank lines are skipped without re-prompting. Every rejected line is
    answered with ``error_message``. Raises EOFError when input runs out.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    while True:
        stdout.write(prompt)
        stdout.flush()

        line = stdin.readline()
        while line and not line.strip():
            line = stdin.readline()
        if not line:
            raise EOFError("input ended before a valid number was given")

        match = _LEADING_INT.match(line.split()[0])
        if match:
            value = int(match.group())
            if value > 0 and (maximum is None or value <= maximum):
                return value

        stdout.write(f"{error_message}\n")