"""Matrix transposition shared out between worker threads."""

from __future__ import annotations

import argparse
import random
import threading
import time
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor

from workshare.matrix_sum import format_matrix, random_matrix
from workshare.partition import split_range
from workshare.prompts import ask_positive_int

Matrix = list[list[int]]


def transpose_matrix(
    matrix: Sequence[Sequence[int]],
    threads: int = 1,
    report: Callable[[str], None] | None = None,
) -> Matrix:
    """Return the transpose of ``matrix``, its elements shared out between ``threads`` threads.

    ``report``, if given, receives one line per thread range and per element.
    """
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows have different lengths")
    elements = rows * cols
    if not 1 <= threads <= max(elements, 1):
        raise ValueError(f"threads must be between 1 and {max(elements, 1)}")

    result = [[0] * rows for _ in range(cols)]
    lock = threading.Lock()

    def say(line: str) -> None:
        if report is not None:
            with lock:
                report(line)

    def work(thread_id: int, indices: range) -> None:
        for index in indices:
            i, j = divmod(index, cols)
            value = matrix[i][j]
            result[j][i] = value
            say(f"Thread {thread_id} transposes [{i}][{j}] = {value} → [{j}][{i}]")

    with ThreadPoolExecutor(max_workers=threads) as pool:
        futures = []
        for thread_id, indices in enumerate(split_range(elements, threads)):
            futures.append(pool.submit(work, thread_id, indices))
            say(f"Thread {thread_id} -> range [{indices.start + 1}, {indices.stop})")
        for future in futures:
            future.result()

    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for a size and thread count, transpose a random matrix and show it."""
    parser = argparse.ArgumentParser(description="Transpose a random matrix with threads.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    rows = ask_positive_int("Enter the number of rows: ")
    cols = ask_positive_int("Enter the number of columns: ")

    a = random_matrix(rows, cols, rng=rng)
    print("\nMatrix A:")
    print(format_matrix(a), end="")

    elements = rows * cols
    threads = ask_positive_int(
        f"Enter the number of threads (up to {elements}): ", maximum=elements
    )

    started = time.perf_counter()
    b = transpose_matrix(a, threads, report=print)
    elapsed = time.perf_counter() - started

    print("\nMatrix B (transposed):")
    print(format_matrix(b), end="")
    print(f"Total time: {elapsed:f} seconds")
    return 0