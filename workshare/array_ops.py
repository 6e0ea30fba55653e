"""Child processes that generate random arrays and combine them element by element."""

from __future__ import annotations

import argparse
import os
import random
import sys
import time
import traceback
from collections.abc import Callable, Sequence
from enum import Enum, auto

from workshare.prompts import ask_positive_int

ArrayOperation = Callable[[Sequence[int], Sequence[int]], list[int]]


class ParityPattern(Enum):
    """Parities of a parent's and a child's process IDs."""

    BOTH_EVEN = auto()
    BOTH_ODD = auto()
    PARENT_EVEN_CHILD_ODD = auto()
    PARENT_ODD_CHILD_EVEN = auto()


def _is_even(number: int) -> bool:
    return number % 2 == 0


def parity_pattern(parent: int, child: int) -> ParityPattern:
    """Classify a parent and child PID pair by their parities."""
    if _is_even(parent) and _is_even(child):
        return ParityPattern.BOTH_EVEN
    if not _is_even(parent) and not _is_even(child):
        return ParityPattern.BOTH_ODD
    if _is_even(parent):
        return ParityPattern.PARENT_EVEN_CHILD_ODD
    return ParityPattern.PARENT_ODD_CHILD_EVEN


def random_array(size: int, rng: random.Random | None = None) -> list[int]:
    """Return ``size`` random integers in ``[0, 100)``."""
    if size < 0:
        raise ValueError("size must not be negative")
    rng = rng if rng is not None else random.Random()
    return [rng.randrange(100) for _ in range(size)]


def _check_lengths(a: Sequence[int], b: Sequence[int]) -> None:
    if len(a) != len(b):
        raise ValueError("arrays must have the same length")


def multiply_arrays(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the element-wise product of ``a`` and ``b``."""
    _check_lengths(a, b)
    return [x * y for x, y in zip(a, b)]


def subtract_arrays(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the element-wise difference ``a - b``."""
    _check_lengths(a, b)
    return [x - y for x, y in zip(a, b)]


def sum_arrays(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the element-wise sum of ``a`` and ``b``."""
    _check_lengths(a, b)
    return [x + y for x, y in zip(a, b)]


_DESCRIPTIONS: dict[ArrayOperation, tuple[str, str]] = {
    multiply_arrays: ("multiplying", "*"),
    subtract_arrays: ("subtracting", "-"),
    sum_arrays: ("summing", "+"),
}

_OPERATIONS: dict[ParityPattern, tuple[ArrayOperation, ...]] = {
    ParityPattern.BOTH_EVEN: (multiply_arrays,),
    ParityPattern.BOTH_ODD: (subtract_arrays,),
    ParityPattern.PARENT_ODD_CHILD_EVEN: (sum_arrays,),
    ParityPattern.PARENT_EVEN_CHILD_ODD: (multiply_arrays, subtract_arrays, sum_arrays),
}


def operations_for(pattern: ParityPattern) -> tuple[ArrayOperation, ...]:
    """Return the array operations a child applies, in order, for ``pattern``."""
    return _OPERATIONS[pattern]


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


def _print_results(
    operation: ArrayOperation, a: Sequence[int], b: Sequence[int], result: Sequence[int], delay: float
) -> None:
    _, symbol = _DESCRIPTIONS[operation]
    for i, (x, y, r) in enumerate(zip(a, b, result)):
        print(f"array1[{i}] {symbol} array2[{i}] = {x} {symbol} {y} = {r}", flush=True)
        time.sleep(delay)


def _apply(operation: ArrayOperation, a: Sequence[int], b: Sequence[int], delay: float) -> list[int]:
    verb, _ = _DESCRIPTIONS[operation]
    print(f"Child (pid {os.getpid()}) {verb} arrays...", flush=True)
    time.sleep(delay)
    result = operation(a, b)
    _print_results(operation, a, b, result, delay)
    return result


def _print_child_start() -> None:
    pid = os.getpid()
    print(f"\n[Context switch]: Child process (pid {pid}) started.")
    print(f"State: current = {pid}, parent = {os.getppid()}, child = 0", flush=True)


def _print_parent_start(child: int, verb: str, label: str) -> None:
    me = os.getpid()
    print(f"\nParent process (pid {me}) {verb}. {label} (pid {child}) created.")
    print(f"State: current = {me}, parent = {os.getppid()}, child = {child}", flush=True)


def _wait_for_child(child: int, delay: float, child_label: str) -> None:
    me = os.getpid()
    print(f"Parent (pid {me}) waiting for {child_label} (pid {child})", flush=True)
    finished, _ = os.waitpid(child, 0)
    time.sleep(delay)
    print(f"Child (pid {finished}) finished")
    print(f"\n[Context switch]: Control returned to Parent (pid {me})")
    print(f"State: current = {me}, parent = {os.getppid()}, child = 0 (finished)", flush=True)
    time.sleep(delay)
    print(f"Parent (pid {me}) exiting.")
    print("Program finished.", flush=True)


def _parser(description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--delay", type=float, default=2.0, help="pause between steps in seconds")
    return parser


def _multiplication_child(size: int, seed: int | None, delay: float) -> None:
    _print_child_start()
    pid = os.getpid()
    rng = random.Random(seed if seed is not None else time.time_ns() ^ pid)

    print(f"Child (pid {pid}) generating random arrays...", flush=True)
    time.sleep(delay)
    a = random_array(size, rng)
    b = random_array(size, rng)
    for i, (x, y) in enumerate(zip(a, b)):
        print(f"array1[{i}] = {x}, array2[{i}] = {y}", flush=True)
        time.sleep(delay)

    print(f"Child (pid {pid}) multiplying arrays...", flush=True)
    _print_results(multiply_arrays, a, b, multiply_arrays(a, b), delay)


def multiplication_main(argv: Sequence[str] | None = None) -> int:
    """Ask for a size; a child process multiplies two random arrays while the parent waits."""
    args = _parser("Multiply two random arrays in a child process.").parse_args(argv)
    size = ask_positive_int("Enter the size of the array: ", "Invalid size. Try again.")

    child = _fork(lambda: _multiplication_child(size, args.seed, args.delay))
    _print_parent_start(child, "executing", "Child process")
    _wait_for_child(child, args.delay, "child")
    return 0


def _print_generated(name: str, values: Sequence[int], delay: float) -> None:
    for i, value in enumerate(values):
        print(f"{name}[{i}] = {value}", flush=True)
        time.sleep(delay)


def _parity_child(size: int, rng: random.Random, delay: float) -> None:
    parent_before = os.getppid()
    time.sleep(delay)
    _print_child_start()
    pid = os.getpid()

    print(f"Child (pid {pid}) generating random arrays...", flush=True)
    time.sleep(delay)
    a = random_array(size, rng)
    _print_generated("array1", a, delay)
    b = random_array(size, rng)
    _print_generated("array2", b, delay)

    for operation in operations_for(parity_pattern(parent_before, pid)):
        _apply(operation, a, b, delay)

    if not _is_even(pid):
        print(f"Child (pid {pid}) exiting.")
        print("Program finished.", flush=True)


def parity_main(argv: Sequence[str] | None = None) -> int:
    """Ask for a size; a child combines two random arrays as the PIDs' parities dictate.

    The parent waits for the child only when the child's PID is even.
    """
    args = _parser("Combine random arrays according to process ID parity.").parse_args(argv)
    size = ask_positive_int(
        "Enter the size of the array: ", "Invalid input! Please enter a positive integer."
    )
    rng = random.Random(args.seed if args.seed is not None else time.time_ns() ^ os.getpid())

    child = _fork(lambda: _parity_child(size, rng, args.delay))
    _print_parent_start(child, "running", "Child")

    if _is_even(child):
        _wait_for_child(child, args.delay, "Child")
    else:
        me = os.getpid()
        print(f"Parent (pid {me}) will not wait for Child (pid {child})")
        print(f"Parent (pid {me}) exiting.", flush=True)
    return 0