"""Element-wise vector product shared out between worker threads."""

from __future__ import annotations

import argparse
import random
import threading
import time
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor

from workshare.partition import split_range
from workshare.prompts import ask_positive_int


def format_vector(name: str, vector: Sequence[int]) -> str:
    """Render a vector as ``name: v1 v2 ... ``."""
    return f"{name}: " + "".join(f"{value} " for value in vector)


def multiply_vectors(
    a: Sequence[int],
    b: Sequence[int],
    threads: int = 1,
    report: Callable[[str], None] | None = None,
) -> list[int]:
    """Return the element-wise product of ``a`` and ``b`` computed by ``threads`` threads.

    ``report``, if given, receives one line per thread range and per element.
    """
    if len(a) != len(b):
        raise ValueError("vectors must have the same length")
    size = len(a)
    if not 1 <= threads <= max(size, 1):
        raise ValueError(f"threads must be between 1 and {max(size, 1)}")

    lock = threading.Lock()

    def say(line: str) -> None:
        if report is not None:
            with lock:
                report(line)

    def work(thread_id: int, indices: range) -> list[int]:
        products = []
        for i in indices:
            product = a[i] * b[i]
            products.append(product)
            say(f"Thread {thread_id} multiplies element [{i}]: {a[i]} * {b[i]} = {product}")
        return products

    with ThreadPoolExecutor(max_workers=threads) as pool:
        futures = []
        for thread_id, indices in enumerate(split_range(size, threads)):
            futures.append(pool.submit(work, thread_id, indices))
            say(f"Thread {thread_id} -> range [{indices.start}, {indices.stop})")
        return [value for future in futures for value in future.result()]


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for a size and thread count, multiply two random vectors and show them."""
    parser = argparse.ArgumentParser(description="Multiply two random vectors with threads.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    size = ask_positive_int("Enter the vector size: ")
    a = [rng.randrange(100) for _ in range(size)]
    b = [rng.randrange(100) for _ in range(size)]

    print("\nVector A:")
    print(format_vector("A", a))
    print("\nVector B:")
    print(format_vector("B", b))

    threads = ask_positive_int(
        f"Enter the number of threads (up to {size}): ", maximum=size
    )

    started = time.perf_counter()
    c = multiply_vectors(a, b, threads, report=print)
    elapsed = time.perf_counter() - started

    print("\nVector C (A * B):")
    print(format_vector("C", c))
    print(f"Total time: {elapsed:f} seconds")
    return 0