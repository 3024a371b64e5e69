# sparsematrix

Square sparse matrices whose rows are kept as sorted sequences of non-zero
entries, together with the doubly linked list with a movable cursor that
backs each row. There are no third-party dependencies.

## Installing

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Matrices

```python
from sparsematrix.matrix import Matrix, vector_dot

m = Matrix(3)
m.change_entry(1, 1, 3.0)
m.change_entry(1, 2, 2.0)
m.change_entry(2, 3, 3.0)

print(m.size)            # 3
print(m.nnz)             # 3
print(m, end="")         # 1: (1, 3.0) (2, 2.0)
                         # 2: (3, 3.0)

doubled = m.scalar_mult(2)
total = m + doubled
difference = doubled - m
product = m @ m
flipped = m.transpose()
same = m.copy() == m     # True

first_row = m.row(1)     # (Entry(column=1, value=3.0), Entry(column=2, value=2.0))
dot = vector_dot(m.row(1), flipped.row(1))
```

Everything lives in `sparsematrix.matrix`:

- `Matrix(size)` is a `size`-by-`size` matrix with no entries. Rows and
  columns are numbered from 1. `size` and `nnz` are read-only properties.
- `change_entry(i, j, x)` sets entry `(i, j)`; setting it to zero removes it.
  An index outside `1..size` raises `MatrixError`.
- `row(i)` returns the non-zero `Entry(column, value)` objects of row `i` in
  column order. `Entry` is a frozen dataclass.
- `make_zero()` removes every entry.
- `copy()`, `transpose()` and `scalar_mult(x)` return new matrices.
  `scalar_mult(0)` returns an unchanged copy rather than an empty matrix.
- `+`, `-` and `@` combine two matrices of the same size; different sizes
  raise `MatrixError`. Entries that come out as zero are dropped.
- `==` compares size and entries. Matrices are not hashable.
- `format()` (also `str()`) gives one line per non-empty row, in the form
  `i: (column, value) ...` with values to one decimal place.
- `vector_dot(p, q)` takes the dot product of two rows given as iterables of
  entries.

## The cursor list

`sparsematrix.cursorlist.CursorList` is a sequence with a cursor that either
sits on one element or is undefined.

```python
from sparsematrix.cursorlist import CursorList

items = CursorList([1, 2, 3])
items.move_front()
items.insert_after(10)        # [1, 10, 2, 3]
items.move_next()
print(items.current)          # 10
items.current = 11
items.delete()                # cursor becomes undefined
print(items.index)            # -1
print(list(items.concat(CursorList([4]))))   # [1, 2, 3, 4]
```

- `len()` and iteration give the length and the elements front to back.
- `front()` and `back()` return the end elements.
- `index` is the cursor's position, or -1 when it is undefined; `current`
  reads or replaces the element under the cursor.
- `move_front`, `move_back`, `move_prev` and `move_next` move the cursor;
  stepping past either end makes it undefined.
- `prepend`, `append`, `insert_before`, `insert_after`, `delete_front`,
  `delete_back`, `delete` and `clear` change the list; `concat(other)`
  returns a new list.

Misuse, such as reading the front of an empty list or inserting with an
undefined cursor, raises `ListError`.

## Command line

    sparsematrix INPUT OUTPUT

The input file starts with `n a b`: the matrix size and the number of
entries of matrices A and B. Then come `a` triples `row column value` for A
and `b` triples for B (whitespace separated). The output file receives, in
order, A, B, `(1.5)*A`, `A+B`, `A+A`, `B-A`, then the `A-A =` heading
followed by `Transpose(A) =` and the transpose of A, after which the rows of
A−A are written, and finally `A*B` and `B*B`. The counts shown in the A and
B headings are the ones from the header line.

The command exits with status 1 and writes nothing if it is not given
exactly two arguments, if the input cannot be read or is malformed, or if
the output file cannot be written.