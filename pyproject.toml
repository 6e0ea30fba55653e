[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "workshare"
version = "0.1.0"
description = "Small teaching programs that split work across threads and processes: matrix and vector arithmetic, text analysis, grey-scale conversion and process demos."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "threads",
    "processes",
    "fork",
    "concurrency",
    "teaching",
    "matrix",
    "collatz",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
workshare-matrix-sum = "workshare.matrix_sum:main"
workshare-vector-product = "workshare.vector_product:main"
workshare-matrix-product = "workshare.matrix_product:main"
workshare-transpose = "workshare.transpose:main"
workshare-text-analysis = "workshare.text_analysis:main"
workshare-gray = "workshare.image_converter:main"
workshare-collatz = "workshare.collatz:main"
workshare-exec = "workshare.external_exec:main"
workshare-array-multiply = "workshare.array_ops:multiplication_main"
workshare-array-parity = "workshare.array_ops:parity_main"

[tool.hatch.build.targets.wheel]
packages = ["workshare"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
