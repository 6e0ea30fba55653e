"""Colour to grey-scale image conversion with the rows shared out between threads."""

from __future__ import annotations

import argparse
import sys
import threading
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor

from PIL import Image

from workshare.partition import split_range

THREAD_COUNT = 4


def gray_value(blue: int, green: int, red: int) -> int:
    """Return the grey level of a pixel from its blue, green and red channels."""
    return int(0.11 * blue + 0.59 * green + 0.30 * red)


def convert_to_gray(
    image: Image.Image,
    threads: int = THREAD_COUNT,
    report: Callable[[str], None] | None = None,
) -> Image.Image:
    """Return a grey-scale ("L") copy of ``image``, its rows shared out between threads.

    ``report``, if given, receives the range of each thread and when it starts and ends.
    """
    if threads < 1:
        raise ValueError("threads must be positive")

    rgb = image.convert("RGB")
    width, height = rgb.size
    data = rgb.tobytes()
    stride = width * 3
    lock = threading.Lock()

    def say(line: str) -> None:
        if report is not None:
            with lock:
                report(line)

    def work(thread_id: int, rows: range) -> bytes:
        say(f"Thread {thread_id} starting: rows {rows.start} up to {rows.stop - 1}")
        chunk = data[rows.start * stride:rows.stop * stride]
        gray = bytes(
            gray_value(b, g, r) for r, g, b in zip(chunk[0::3], chunk[1::3], chunk[2::3])
        )
        say(f"Thread {thread_id} finished.")
        return gray

    with ThreadPoolExecutor(max_workers=threads) as pool:
        futures = []
        for thread_id, rows in enumerate(split_range(height, threads)):
            futures.append(pool.submit(work, thread_id, rows))
            say(f"Thread {thread_id} -> rows [{rows.start}, {rows.stop - 1}]")
        pixels = b"".join(future.result() for future in futures)

    return Image.frombytes("L", (width, height), pixels)


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for an image, convert it to grey scale, save it and show both versions."""
    parser = argparse.ArgumentParser(description="Convert an image to grey scale with threads.")
    parser.add_argument("path", nargs="?", help="image to convert")
    parser.add_argument("--output", default="output_gray.jpg", help="where to save the result")
    parser.add_argument("--no-show", action="store_true", help="do not display the images")
    args = parser.parse_args(argv)

    path = args.path if args.path is not None else input("Type the image's path: ")

    try:
        with Image.open(path) as opened:
            image = opened.convert("RGB")
    except OSError:
        print(f"Error loading image: {path}", file=sys.stderr)
        return 1

    gray = convert_to_gray(image, THREAD_COUNT, report=print)
    gray.save(args.output)

    if not args.no_show:
        image.show(title="Original Color")
        gray.show(title="Gray Scale")
    return 0