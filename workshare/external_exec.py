"""Run a program chosen by the user as a child process and wait for it."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
import time
from collections.abc import Sequence

_MAX_PATH = 255


def _start(path: str | os.PathLike[str]) -> subprocess.Popen:
    # The program is run by path, never looked up on PATH.
    text = os.fspath(path)
    executable = text if os.path.dirname(text) else os.path.join(os.curdir, text)
    return subprocess.Popen([text], executable=executable)


def run_program(path: str | os.PathLike[str]) -> int:
    """Run the program at ``path`` with no arguments and return its exit status.

    Raises OSError if the program cannot be started.
    """
    return _start(path).wait()


def _read_path() -> str:
    print("Enter the path of the program the child process should execute:", flush=True)
    while True:
        line = sys.stdin.readline()
        if not line:
            raise EOFError("no program path was given")
        if line.split():
            return line.split()[0][:_MAX_PATH]


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for a program, run it as a child process and wait for it to finish."""
    parser = argparse.ArgumentParser(description="Run a program in a child process.")
    parser.add_argument("path", nargs="?", help="program to run")
    parser.add_argument("--delay", type=float, default=2.0, help="pause before waiting, in seconds")
    args = parser.parse_args(argv)

    try:
        path = args.path if args.path is not None else _read_path()
    except EOFError as exc:
        print(f"Error reading the program path: {exc}", file=sys.stderr)
        return 1

    me = os.getpid()
    try:
        process = _start(path)
    except OSError as exc:
        print(f"Error executing '{path}': {exc}", file=sys.stderr)
    else:
        print(f"Child (PID {process.pid}): executing '{path}'")
        print(
            f"Parent (PID {me}): waiting for child (PID {process.pid}) to finish...",
            flush=True,
        )
        time.sleep(args.delay)
        process.wait()
    print(f"Parent (PID {me}): child process finished", flush=True)
    return 0