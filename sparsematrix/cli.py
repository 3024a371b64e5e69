"""Command that reads two sparse matrices and writes results of operations on them."""

from __future__ import annotations

import sys
from itertools import islice
from pathlib import Path

from sparsematrix.matrix import Matrix, MatrixError

USAGE = "Usage: sparse <input file> <output file>"


def parse_input(text: str) -> tuple[Matrix, Matrix, int, int]:
    """Parse 'n a b' followed by a and then b lines of 'row column value'.

    Returns the two matrices and the entry counts given in the header.
    """
    tokens = text.split()
    if len(tokens) < 3:
        raise ValueError("input must start with 'n a b'")
    try:
        size, a_count, b_count = (int(token) for token in tokens[:3])
    except ValueError as exc:
        raise ValueError(f"malformed header: {exc}") from None
    if size < 0 or a_count < 0 or b_count < 0:
        raise ValueError("header values must not be negative")
    needed = 3 + 3 * (a_count + b_count)
    if len(tokens) < needed:
        raise ValueError(f"expected {a_count + b_count} entries after the header")
    try:
        numbers = [float(token) for token in tokens[3:needed]]
    except ValueError as exc:
        raise ValueError(f"malformed entry: {exc}") from None
    triples = zip(*[iter(numbers)] * 3)

    first, second = Matrix(size), Matrix(size)
    for matrix, count in ((first, a_count), (second, b_count)):
        for row, column, value in islice(triples, count):
            matrix.change_entry(int(row), int(column), value)
    return first, second, a_count, b_count


def render_report(text: str) -> str:
    """Produce the full report for the given input text."""
    a, b, a_count, b_count = parse_input(text)
    parts = [
        f"A has {a_count} non-zero entries:\n",
        a.format(),
        "\n",
        f"B has {b_count} non-zero entries:\n",
        b.format(),
        "\n",
        "(1.5)*A = \n",
        a.scalar_mult(1.5).format(),
        "\n",
        "A+B = \n",
        (a + b).format(),
        "\n",
        "A+A = \n",
        (a + a).format(),
        "\n",
        "B-A = \n",
        (b - a).format(),
        "\n",
        "A-A = \n",
        "\n",
        "Transpose(A) = ",
        "\n",
        a.transpose().format(),
        "\n",
        (a - a).format(),
        "A*B = ",
        "\n",
        (a @ b).format(),
        "\n",
        "B*B = ",
        "\n",
        (b @ b).format(),
        "\n",
    ]
    return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Read the input file, write the report to the output file."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print(USAGE, file=sys.stderr)
        return 1
    in_path, out_path = args
    try:
        text = Path(in_path).read_text()
    except OSError:
        return 1
    try:
        report = render_report(text)
    except (ValueError, MatrixError) as exc:
        print(f"sparse: {exc}", file=sys.stderr)
        return 1
    try:
        Path(out_path).write_text(report)
    except OSError:
        print(f"Unable to open file {out_path} for writing")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())