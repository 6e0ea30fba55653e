"""Matrix product with the rows of the result shared out between worker threads."""

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


def _check_rectangular(matrix: Sequence[Sequence[int]], name: str) -> tuple[int, int]:
    if not matrix or not matrix[0]:
        raise ValueError(f"matrix {name} must not be empty")
    cols = len(matrix[0])
    if any(len(row) != cols for row in matrix):
        raise ValueError(f"rows of matrix {name} have different lengths")
    return len(matrix), cols


def multiply_matrices(
    a: Sequence[Sequence[int]],
    b: Sequence[Sequence[int]],
    threads: int = 1,
    report: Callable[[str], None] | None = None,
) -> Matrix:
    """Return ``a x b``, with the rows of the result shared out between ``threads`` threads.

    ``report``, if given, receives one line per thread range and per computed element.
    """
    m, n = _check_rectangular(a, "A")
    rows_b, _ = _check_rectangular(b, "B")
    if rows_b != n:
        raise ValueError("columns of A must match rows of B")
    if threads < 1:
        raise ValueError("threads must be positive")

    columns = list(zip(*b))
    lock = threading.Lock()

    def say(line: str) -> None:
        if report is not None:
            with lock:
                report(line)

    def work(thread_id: int, rows: range) -> Matrix:
        block = []
        for i in rows:
            result_row = []
            for j, column in enumerate(columns):
                total = sum(x * y for x, y in zip(a[i], column))
                result_row.append(total)
                say(f"Thread {thread_id} computes C[{i}][{j}] = {total}")
            block.append(result_row)
        return block

    with ThreadPoolExecutor(max_workers=threads) as pool:
        futures = []
        for thread_id, rows in enumerate(split_range(m, threads)):
            futures.append(pool.submit(work, thread_id, rows))
            say(f"Thread {thread_id} -> rows [{rows.start}, {rows.stop})")
        return [row for future in futures for row in future.result()]


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for dimensions and a thread count, multiply two random matrices and show them."""
    parser = argparse.ArgumentParser(description="Multiply two random matrices with threads.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    m = ask_positive_int("Enter the number of rows of matrix A (M): ")
    n = ask_positive_int("Enter the number of columns of A and rows of B (N): ")
    p = ask_positive_int("Enter the number of columns of matrix B (P): ")
    threads = ask_positive_int("Enter the number of threads: ")

    a = random_matrix(m, n, high=10, rng=rng)
    b = random_matrix(n, p, high=10, rng=rng)

    print("\nMatrix A:")
    print(format_matrix(a, width=4), end="")
    print("\nMatrix B:")
    print(format_matrix(b, width=4), end="")

    started = time.perf_counter()
    c = multiply_matrices(a, b, threads, report=print)
    elapsed = time.perf_counter() - started

    print("\nResult matrix (A x B):")
    print(format_matrix(c, width=4), end="")
    print(f"\nExecution time: {elapsed:.6f} seconds")
    return 0