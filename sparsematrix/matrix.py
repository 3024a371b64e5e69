"""Square sparse matrices stored as rows of sorted (column, value) entries."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from sparsematrix.cursorlist import CursorList


class MatrixError(Exception):
    """Raised when a matrix operation's precondition is not met."""


@dataclass(frozen=True)
class Entry:
    """A non-zero value at a given column of a row."""

    column: int
    value: float


def vector_dot(p: Iterable[Entry], q: Iterable[Entry]) -> float:
    """Dot product of two sparse rows given as entries sorted by column."""
    q_values = {entry.column: entry.value for entry in q}
    total = 0.0
    for entry in p:
        other = q_values.get(entry.column)
        if other is not None:
            total += entry.value * other
    return total


class Matrix:
    """An n-by-n matrix holding only its non-zero entries.

    Rows and columns are numbered from 1 to n.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, size: int) -> None:
        if size < 0:
            raise MatrixError(f"matrix size must not be negative, got {size}")
        self._size = size
        self._nnz = 0
        self._rows = [CursorList() for _ in range(size)]

    @property
    def size(self) -> int:
        """Number of rows (and columns)."""
        return self._size

    @property
    def nnz(self) -> int:
        """Number of non-zero entries."""
        return self._nnz

    def _check(self, index: int, what: str) -> None:
        if not 1 <= index <= self._size:
            raise MatrixError(f"{what} {index} is outside 1..{self._size}")

    def _row(self, i: int) -> CursorList:
        self._check(i, "row")
        return self._rows[i - 1]

    def row(self, i: int) -> tuple[Entry, ...]:
        """The non-zero entries of row i, in column order."""
        return tuple(self._row(i))

    def _numbered_rows(self):
        return enumerate(self._rows, start=1)

    def make_zero(self) -> None:
        """Remove every entry."""
        for row in self._rows:
            row.clear()
        self._nnz = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._size == other._size and all(
            list(mine) == list(theirs) for mine, theirs in zip(self._rows, other._rows)
        )

    def change_entry(self, i: int, j: int, x: float) -> None:
        """Set entry (i, j) to x; a zero value removes the entry."""
        row = self._row(i)
        self._check(j, "column")
        x = float(x)
        row.move_front()
        while row.index >= 0:
            entry = row.current
            if entry.column == j:
                if x != 0:
                    row.current = Entry(j, x)
                else:
                    row.delete()
                    self._nnz -= 1
                return
            if entry.column > j:
                break
            row.move_next()
        if x == 0:
            return
        if row.index >= 0:
            row.insert_before(Entry(j, x))
        else:
            row.append(Entry(j, x))
        self._nnz += 1

    def _append(self, i: int, column: int, value: float) -> None:
        self._rows[i - 1].append(Entry(column, value))
        self._nnz += 1

    def copy(self) -> Matrix:
        """Return an independent matrix with the same entries."""
        result = Matrix(self._size)
        result._rows = [CursorList(row) for row in self._rows]
        result._nnz = self._nnz
        return result

    def transpose(self) -> Matrix:
        """Return the transpose."""
        result = Matrix(self._size)
        for i, row in self._numbered_rows():
            for entry in row:
                result._append(entry.column, i, entry.value)
        return result

    def scalar_mult(self, x: float) -> Matrix:
        """Return x times this matrix; a zero scalar leaves the entries as they are."""
        if x == 0:
            return self.copy()
        result = Matrix(self._size)
        for i, row in self._numbered_rows():
            for entry in row:
                result._append(i, entry.column, x * entry.value)
        return result

    def _combine(self, other: Matrix, sign: float) -> Matrix:
        if self._size != other._size:
            raise MatrixError(
                f"matrices differ in size: {self._size} and {other._size}"
            )
        result = Matrix(self._size)
        for i, (mine, theirs) in enumerate(zip(self._rows, other._rows), start=1):
            totals: dict[int, float] = {entry.column: entry.value for entry in mine}
            for entry in theirs:
                if entry.column in totals:
                    totals[entry.column] = totals[entry.column] + sign * entry.value
                else:
                    totals[entry.column] = sign * entry.value
            for column in sorted(totals):
                value = totals[column]
                if value != 0:
                    result._append(i, column, value)
        return result

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._combine(other, 1.0)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._combine(other, -1.0)

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._size != other._size:
            raise MatrixError(
                f"matrices differ in size: {self._size} and {other._size}"
            )
        result = Matrix(self._size)
        columns = list(other.transpose()._numbered_rows())
        for i, row in self._numbered_rows():
            if not row:
                continue
            for j, column in columns:
                if not column:
                    continue
                value = vector_dot(row, column)
                if value != 0:
                    result._append(i, j, value)
        return result

    def format(self) -> str:
        """One line per non-empty row: 'i: (col, value) ...'."""
        return "".join(
            f"{i}: "
            + "".join(f"({entry.column}, {entry.value:.1f}) " for entry in row)
            + "\n"
            for i, row in self._numbered_rows()
            if row
        )

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Matrix(size={self._size}, nnz={self._nnz})"