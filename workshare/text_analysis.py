"""Word and letter statistics for every text file in a directory, one thread per file."""

from __future__ import annotations

import argparse
import os
import string
import sys
from collections import Counter
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

MAX_WORD_LEN = 1000
MAX_THREADS = 1000
_BUCKETS = 1000
_LETTERS = frozenset(string.ascii_letters)
_VOWELS = frozenset("aeiou")
_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


@dataclass(frozen=True)
class FileReport:
    """Statistics gathered from one text file."""

    name: str
    words: int
    vowels: int
    consonants: int
    top_word: str
    top_word_count: int
    top_vowel: str
    top_vowel_count: int
    top_consonant: str
    top_consonant_count: int

    def format(self) -> str:
        """Render the report as the block of lines printed for a file."""
        return (
            f"File: {self.name}\n"
            f"Number of words: {self.words}\n"
            f"Number of vowels: {self.vowels}\n"
            f"Number of consonants: {self.consonants}\n"
            f"Most frequent word: {self.top_word} ({self.top_word_count} times)\n"
            f"Most frequent vowel: {self.top_vowel} ({self.top_vowel_count} times)\n"
            f"Most frequent consonant: {self.top_consonant} "
            f"({self.top_consonant_count} times)\n\n"
        )


def _bucket(word: str) -> int:
    value = 0
    for ch in word:
        value = ((value << 5) + ord(ch)) & 0xFFFFFFFF
    return value % _BUCKETS


def _most_frequent_word(counts: dict[str, int]) -> tuple[str, int]:
    # Ties go to the word met first when scanning buckets in order,
    # newest insertion first within a bucket.
    ordered = sorted(
        enumerate(counts.items()), key=lambda item: (_bucket(item[1][0]), -item[0])
    )
    best, best_count = "", 0
    for _, (word, count) in ordered:
        if count > best_count:
            best, best_count = word, count
    return best, best_count


def _most_frequent_letter(counts: Counter[str], letters: str) -> tuple[str, int]:
    best, best_count = "", 0
    for letter in letters:
        if counts[letter] > best_count:
            best, best_count = letter, counts[letter]
    return best, best_count


def analyse_text(name: str, text: str) -> FileReport:
    """Count words and ASCII letters in ``text`` and find the most frequent of each."""
    word_counts: dict[str, int] = {}
    letter_counts: Counter[str] = Counter()
    words = 0
    current: list[str] = []

    def finish_word() -> None:
        nonlocal words
        if current:
            word = "".join(current)
            word_counts[word] = word_counts.get(word, 0) + 1
            words += 1
            current.clear()

    for ch in text:
        if ch in _LETTERS:
            lower = ch.lower()
            letter_counts[lower] += 1
            if len(current) < MAX_WORD_LEN - 1:
                current.append(lower)
        else:
            finish_word()
    finish_word()

    vowel_letters = "".join(c for c in string.ascii_lowercase if c in _VOWELS)
    consonant_letters = "".join(c for c in string.ascii_lowercase if c not in _VOWELS)
    top_word, top_word_count = _most_frequent_word(word_counts)
    top_vowel, top_vowel_count = _most_frequent_letter(letter_counts, vowel_letters)
    top_consonant, top_consonant_count = _most_frequent_letter(
        letter_counts, consonant_letters
    )

    return FileReport(
        name=name,
        words=words,
        vowels=sum(letter_counts[c] for c in vowel_letters),
        consonants=sum(letter_counts[c] for c in consonant_letters),
        top_word=top_word,
        top_word_count=top_word_count,
        top_vowel=top_vowel,
        top_vowel_count=top_vowel_count,
        top_consonant=top_consonant,
        top_consonant_count=top_consonant_count,
    )


def analyse_file(directory: str | os.PathLike[str], name: str) -> FileReport:
    """Analyse ``directory/name`` and write its upper-cased copy to ``name.upper.txt``."""
    folder = Path(directory)
    text = (folder / name).read_bytes().decode("latin-1")
    (folder / f"{name}.upper.txt").write_bytes(text.translate(_UPPER).encode("latin-1"))
    return analyse_text(name, text)


def find_text_files(directory: str | os.PathLike[str]) -> list[str]:
    """Return the sorted names of ``.txt`` files in ``directory``, skipping ``.upper.txt`` copies."""
    with os.scandir(directory) as entries:
        return sorted(
            entry.name
            for entry in entries
            if ".txt" in entry.name
            and ".upper.txt" not in entry.name
            and entry.is_file()
        )


def analyse_directory(directory: str | os.PathLike[str]) -> list[FileReport]:
    """Analyse every text file in ``directory`` in its own thread.

    Files that cannot be read or written are reported on stderr and skipped.
    """
    names = find_text_files(directory)
    if len(names) > MAX_THREADS:
        print("Thread limit exceeded!", file=sys.stderr)
        names = names[:MAX_THREADS]
    if not names:
        return []

    reports = []
    with ThreadPoolExecutor(max_workers=len(names)) as pool:
        futures = [(name, pool.submit(analyse_file, directory, name)) for name in names]
        for name, future in futures:
            try:
                reports.append(future.result())
            except OSError as exc:
                print(f"Error processing file {name}: {exc}", file=sys.stderr)
    return reports


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for a directory and print the statistics of each text file in it."""
    parser = argparse.ArgumentParser(description="Analyse the text files in a directory.")
    parser.add_argument("directory", nargs="?", help="directory holding .txt files")
    args = parser.parse_args(argv)

    directory = args.directory
    if directory is None:
        directory = input("Enter the path of the directory with the .txt files: ")

    try:
        reports = analyse_directory(directory)
    except OSError as exc:
        print(f"Error opening directory: {exc}", file=sys.stderr)
        return 1

    for report in reports:
        print(report.format(), end="")
    return 0