import io
import random

import pytest

from workshare.matrix_sum import random_matrix
from workshare.transpose import main, transpose_matrix


def test_small_example():
    assert transpose_matrix([[1, 2, 3], [4, 5, 6]]) == [[1, 4], [2, 5], [3, 6]]


def test_double_transpose_is_identity():
    a = random_matrix(4, 6, rng=random.Random(2))
    assert transpose_matrix(transpose_matrix(a, 5), 3) == a


@pytest.mark.parametrize("threads", [1, 2, 4, 7, 12])
def test_thread_count_does_not_change_result(threads):
    a = random_matrix(3, 4, rng=random.Random(9))
    assert transpose_matrix(a, threads) == transpose_matrix(a, 1)


def test_elements_moved():
    a = random_matrix(3, 5, rng=random.Random(4))
    b = transpose_matrix(a, 2)
    assert len(b) == 5
    assert all(b[j][i] == a[i][j] for i in range(3) for j in range(5))


def test_report_lines():
    lines = []
    transpose_matrix([[1, 2], [3, 4], [5, 6]], threads=4, report=lines.append)
    assert "Thread 0 -> range [1, 2)" in lines
    assert "Thread 3 -> range [6, 6)" in lines
    assert len([line for line in lines if "transposes" in line]) == 6


def test_too_many_threads_raise():
    with pytest.raises(ValueError):
        transpose_matrix([[1, 2]], threads=3)


def test_ragged_matrix_raises():
    with pytest.raises(ValueError):
        transpose_matrix([[1, 2], [3]])


def test_main_prints_transposed(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n3\n9\n3\n"))
    assert main(["--seed", "0"]) == 0
    out = capsys.readouterr().out
    assert "Matrix B (transposed):" in out
    assert "Invalid input!" in out