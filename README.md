# workshare

A set of small console programs that show how work is divided between
threads and between processes. The arithmetic programs ask for their sizes
interactively, re-prompting until they get a valid positive number, and
report which worker handled which part of the job.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Thread programs

The work is split into contiguous ranges, as evenly as possible: when the
total does not divide evenly, the first workers each take one extra item
(`workshare.partition.split_range`).

| Command | What it does |
| --- | --- |
| `workshare-matrix-sum` | Adds two random matrices (values 0–99) element by element, each thread summing its own range of elements. |
| `workshare-vector-product` | Multiplies two random vectors (values 0–99) element by element. |
| `workshare-matrix-product` | Computes the product of an M×N and an N×P random matrix (values 0–9), threads sharing out the rows of the result. |
| `workshare-transpose` | Transposes a random matrix, threads sharing out the elements. |
| `workshare-text-analysis [DIRECTORY]` | For every `.txt` file in a directory (one thread per file), counts words, vowels and consonants, finds the most frequent word, vowel and consonant, and writes an upper-case copy next to it as `<name>.upper.txt`. Asks for the directory if it is not given. |
| `workshare-gray [PATH] [--output FILE] [--no-show]` | Converts an image to grey scale using four threads, each handling a band of rows, saves it (`output_gray.jpg` by default) and opens both images in the system's image viewer unless `--no-show` is given. Asks for the path if it is not given. |

The four arithmetic commands accept `--seed N` to make the random values
repeatable, and print the elapsed time at the end.

The same building blocks can be used from Python:

```python
from workshare.matrix_sum import add_matrices, random_matrix, format_matrix

a = random_matrix(3, 4)
b = random_matrix(3, 4)
c = add_matrices(a, b, threads=2)
print(format_matrix(c))
```

Each of `add_matrices`, `multiply_vectors`, `multiply_matrices`,
`transpose_matrix` and `convert_to_gray` takes an optional `report`
callable that receives one line of progress at a time.

`workshare.text_analysis.analyse_text` returns a `FileReport` for a piece
of text, and `FileReport.format()` renders it as the program prints it.
`workshare.image_converter.gray_value(blue, green, red)` gives the grey level
used for each pixel.

## Process programs

These need a system with `fork` (Linux, macOS and other POSIX systems).
Each accepts `--delay SECONDS` (default 2) for the pauses between steps.

| Command | What it does |
| --- | --- |
| `workshare-collatz` | Starts one child process after another; each child takes the hundreds and tens digits of its own PID and prints the Collatz sequence for that number. |
| `workshare-exec [PATH]` | Runs a program in a child process while the parent waits. The program is run by its path, not looked up on `PATH`. Asks for the path if it is not given. |
| `workshare-array-multiply [--seed N]` | A child process fills two random arrays and multiplies them element by element while the parent waits. |
| `workshare-array-parity [--seed N]` | Like the above, but the operation depends on whether the parent and child PIDs are even or odd: multiply, subtract, add, or all three. The parent waits only when the child's PID is even. |

The pure parts are available as functions, for example:

```python
from workshare.collatz import collatz_sequence, tens_and_hundreds
from workshare.array_ops import parity_pattern, operations_for

tens_and_hundreds(12345)      # 34: the hundreds and tens digits
collatz_sequence(6)           # [6, 3, 10, 5, 16, 8, 4, 2, 1]
operations_for(parity_pattern(4, 7))   # multiply, subtract, then sum
```

`workshare.external_exec.run_program(path)` runs a program and returns its
exit status.