"""Child processes that each print the Collatz sequence of a number taken from their PID."""

from __future__ import annotations

import argparse
import os
import sys
import time
import traceback
from collections.abc import Callable, Sequence

from workshare.prompts import ask_positive_int


def tens_and_hundreds(pid: int) -> int:
    """Return the number formed by the hundreds and tens digits of ``pid``."""
    hundreds = (pid // 100) % 10
    tens = (pid // 10) % 10
    return hundreds * 10 + tens


def collatz_sequence(x: int) -> list[int]:
    """Return the Collatz sequence that starts at ``x`` and ends at 1."""
    if x < 1:
        raise ValueError("the Collatz sequence is defined for positive integers only")
    sequence = []
    while x != 1:
        sequence.append(x)
        x = x // 2 if x % 2 == 0 else 3 * x + 1
    sequence.append(1)
    return sequence


def _fork(child: Callable[[], None]) -> int:
    """Run ``child`` in a forked process and return its PID to the parent."""
    sys.stdout.flush()
    sys.stderr.flush()
    pid = os.fork()
    if pid == 0:
        code = 0
        try:
            child()
        except BaseException:
            traceback.print_exc()
            code = 1
        finally:
            sys.stdout.flush()
            sys.stderr.flush()
            os._exit(code)
    return pid


def _run_child(delay: float) -> None:
    pid = os.getpid()
    print(f"\n[Context switch]: Child process (pid {pid}) started.")
    print(f"State: current = {pid}, parent = {os.getppid()}, child = 0")
    print(f"Child (pid {pid}) separating PID number into tens and hundreds...", flush=True)
    time.sleep(delay)

    number = tens_and_hundreds(pid)
    print(f"PID {pid} separated into tens and hundreds: {number}")
    print(f"Child (pid {pid}) generating Collatz sequence for number {number}...", flush=True)
    time.sleep(delay)

    try:
        sequence = collatz_sequence(number)
    except ValueError as exc:
        print(f"No Collatz sequence for number {number}: {exc}")
        return
    print(f"Collatz sequence for number {number}: " + " ".join(map(str, sequence)))


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for a number of processes and run them one after another."""
    parser = argparse.ArgumentParser(
        description="Start child processes that print Collatz sequences."
    )
    parser.add_argument("--delay", type=float, default=2.0, help="pause between steps in seconds")
    args = parser.parse_args(argv)

    quantity = ask_positive_int(
        "Enter the number of processes: ", "Invalid quantity. Try again."
    )

    for _ in range(quantity):
        child = _fork(lambda: _run_child(args.delay))
        me = os.getpid()
        print(f"\nParent process (pid {me}) running. Child process (pid {child}) created.")
        print(f"State: current = {me}, parent = {os.getppid()}, child = {child}")
        print(f"Parent (pid {me}) waiting for child (pid {child})", flush=True)
        finished, _ = os.waitpid(child, 0)
        time.sleep(args.delay)
        print(f"Child (pid {finished}) finished")
        print(f"\n[Context switch]: Control returned to parent (pid {me})")
        print(f"State: current = {me}, parent = {os.getppid()}, child = 0 (finished)", flush=True)
    return 0