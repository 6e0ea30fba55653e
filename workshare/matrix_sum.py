"""Element-wise matrix addition shared out between worker threads."""

from __future__ import annotations

import argparse
import random
import threading
import time
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor

from workshare.partition import split_range
from workshare.prompts import ask_positive_int

Matrix = list[list[int]]


def random_matrix(
    rows: int, cols: int, high: int = 100, rng: random.Random | None = None
) -> Matrix:
    """Return a ``rows`` x ``cols`` matrix of integers in ``[0, high)``."""
    rng = rng if rng is not None else random.Random()
    return [[rng.randrange(high) for _ in range(cols)] for _ in range(rows)]


def format_matrix(matrix: Sequence[Sequence[int]], width: int = 3) -> str:
    """Render a matrix with each value right-aligned in ``width`` columns."""
    return "".join(
        "".join(f"{value:{width}d} " for value in row) + "\n" for row in matrix
    )


def _shape(matrix: Sequence[Sequence[int]]) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows have different lengths")
    return rows, cols


def add_matrices(
    a: Sequence[Sequence[int]],
    b: Sequence[Sequence[int]],
    threads: int = 1,
    report: Callable[[str], None] | None = None,
) -> Matrix:
    """Return ``a + b``, with the elements shared out between ``threads`` threads.

    ``report``, if given, receives one line per thread range and per element.
    """
    rows, cols = _shape(a)
    if _shape(b) != (rows, cols):
        raise ValueError("matrices must have the same shape")
    elements = rows * cols
    if not 1 <= threads <= max(elements, 1):
        raise ValueError(f"threads must be between 1 and {max(elements, 1)}")

    lock = threading.Lock()

    def say(line: str) -> None:
        if report is not None:
            with lock:
                report(line)

    def work(thread_id: int, indices: range) -> list[int]:
        sums = []
        for index in indices:
            i, j = divmod(index, cols)
            x, y = a[i][j], b[i][j]
            sums.append(x + y)
            say(f"Thread {thread_id} sums element [{i + 1},{j + 1}]: {x} + {y} = {x + y}")
        return sums

    with ThreadPoolExecutor(max_workers=threads) as pool:
        futures = []
        for thread_id, indices in enumerate(split_range(elements, threads)):
            futures.append(pool.submit(work, thread_id, indices))
            say(f"Thread {thread_id} -> range [{indices.start + 1}, {indices.stop + 1})")
        flat = [value for future in futures for value in future.result()]

    return [flat[r * cols:(r + 1) * cols] for r in range(rows)]


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for a size and thread count, add two random matrices and show them."""
    parser = argparse.ArgumentParser(description="Add two random matrices with threads.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    rows = ask_positive_int("Enter the number of rows: ")
    cols = ask_positive_int("Enter the number of columns: ")

    a = random_matrix(rows, cols, rng=rng)
    b = random_matrix(rows, cols, rng=rng)

    print("\nMatrix A:")
    print(format_matrix(a), end="")
    print("\nMatrix B:")
    print(format_matrix(b), end="")

    elements = rows * cols
    threads = ask_positive_int(
        f"Enter the number of threads (up to {elements}): ", maximum=elements
    )

    started = time.perf_counter()
    c = add_matrices(a, b, threads, report=print)
    elapsed = time.perf_counter() - started

    print("\nMatrix C (A + B):")
    print(format_matrix(c), end="")
    print(f"Total time: {elapsed:f} seconds")
    return 0