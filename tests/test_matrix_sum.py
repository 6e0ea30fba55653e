import io
import random
import sys

import pytest

from workshare.matrix_sum import add_matrices, format_matrix, main, random_matrix


def test_random_matrix_shape_and_bounds():
    m = random_matrix(3, 4, rng=random.Random(1))
    assert len(m) == 3
    assert all(len(row) == 4 for row in m)
    assert all(0 <= v < 100 for row in m for v in row)


def test_random_matrix_is_reproducible_with_seed():
    first = random_matrix(2, 5, 10, random.Random(42))
    assert len(first) == 2
    assert all(len(row) == 5 for row in first)
    assert all(0 <= v < 10 for row in first for v in row)
    second = random_matrix(2, 5, 10, random.Random(42))
    assert second == first


def test_format_matrix_layout():
    assert format_matrix([[1, 2], [30, 400]]) == "  1   2 \n 30 400 \n"


def test_adding_zero_matrix_is_identity():
    a = random_matrix(3, 3, rng=random.Random(5))
    zero = [[0] * 3 for _ in range(3)]
    assert add_matrices(a, zero, threads=2) == a


@pytest.mark.parametrize("threads", [1, 2, 5, 12])
def test_sum_is_consistent_with_operands(threads):
    rng = random.Random(7)
    a = random_matrix(3, 4, rng=rng)
    b = random_matrix(3, 4, rng=rng)
    c = add_matrices(a, b, threads=threads)
    assert [[c[i][j] - a[i][j] for j in range(4)] for i in range(3)] == b


def test_thread_count_does_not_change_result():
    rng = random.Random(3)
    a = random_matrix(4, 5, rng=rng)
    b = random_matrix(4, 5, rng=rng)
    assert add_matrices(a, b, threads=1) == add_matrices(a, b, threads=7)
    assert add_matrices(a, b, threads=3) == add_matrices(b, a, threads=3)


def test_report_lines():
    lines = []
    add_matrices([[1, 2, 3]], [[4, 5, 6]], threads=2, report=lines.append)
    assert len(lines) == 5
    assert "Thread 0 -> range [1, 3)" in lines
    assert "Thread 1 sums element [1,3]: 3 + 6 = 9" in lines


def test_shape_mismatch_raises():
    with pytest.raises(ValueError):
        add_matrices([[1, 2]], [[1], [2]])


@pytest.mark.parametrize("threads", [0, 5])
def test_invalid_thread_count_raises(threads):
    with pytest.raises(ValueError):
        add_matrices([[1, 2]], [[3, 4]], threads=threads)


def test_main_runs_interactively(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("2\n3\n9\n2\n"))
    assert main(["--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Matrix C (A + B):" in out
    assert "Invalid input!" in out
    assert "Thread 1 -> range [4, 7)" in out
    assert "Total time:" in out