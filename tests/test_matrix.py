import pytest

from sparsematrix.matrix import Entry, Matrix, MatrixError, vector_dot


@pytest.fixture
def sample():
    m = Matrix(100)
    m.change_entry(1, 1, 3)
    m.change_entry(1, 2, 2)
    m.change_entry(2, 3, 3)
    m.change_entry(2, 5, 6)
    m.change_entry(3, 4, 6)
    return m


def identity(n):
    m = Matrix(n)
    for i in range(1, n + 1):
        m.change_entry(i, i, 1)
    return m


def small(values):
    m = Matrix(len(values))
    for i, row in enumerate(values, start=1):
        for j, value in enumerate(row, start=1):
            m.change_entry(i, j, value)
    return m


def test_format_of_sample(sample):
    assert sample.format() == "1: (1, 3.0) (2, 2.0) \n2: (3, 3.0) (5, 6.0) \n3: (4, 6.0) \n"
    assert str(sample) == sample.format()


def test_nnz_tracks_changes(sample):
    assert sample.nnz == 5
    sample.change_entry(1, 1, 7)
    assert sample.nnz == 5
    assert sample.row(1)[0] == Entry(1, 7.0)
    sample.change_entry(1, 1, 0)
    assert sample.nnz == 4
    sample.change_entry(50, 50, 0)
    assert sample.nnz == 4


def test_rows_are_kept_sorted():
    m = Matrix(10)
    for column in (5, 1, 3, 9, 2):
        m.change_entry(4, column, column)
    assert [e.column for e in m.row(4)] == [1, 2, 3, 5, 9]


@pytest.mark.parametrize("i,j", [(0, 1), (101, 1), (1, 0), (1, 101)])
def test_change_entry_out_of_range(sample, i, j):
    with pytest.raises(MatrixError):
        sample.change_entry(i, j, 1)


def test_row_out_of_range(sample):
    with pytest.raises(MatrixError):
        sample.row(0)


def test_negative_size():
    with pytest.raises(MatrixError):
        Matrix(-1)


def test_difference_with_itself_is_empty(sample):
    scaled = sample.scalar_mult(4)
    d = scaled - scaled
    assert d.nnz == 0
    assert d.format() == ""
    assert d == Matrix(100)


def test_sum_with_itself_is_double(sample):
    assert sample + sample == sample.scalar_mult(2)


def test_scalar_round_trip(sample):
    assert sample.scalar_mult(4).scalar_mult(0.25) == sample


def test_scalar_zero_keeps_entries(sample):
    result = sample.scalar_mult(0)
    assert result == sample
    result.change_entry(1, 1, 0)
    assert sample.nnz == 5


def test_transpose(sample):
    t = sample.transpose()
    assert t.nnz == sample.nnz
    assert t.row(5) == (Entry(2, 6.0),)
    assert t.transpose() == sample


def test_copy_is_independent(sample):
    c = sample.copy()
    assert c == sample
    c.change_entry(1, 1, 0)
    assert c != sample
    assert sample.nnz == 5
    assert c.nnz == 4


def test_make_zero(sample):
    sample.make_zero()
    assert sample.nnz == 0
    assert sample == Matrix(100)


def test_identity_product(sample):
    eye = identity(100)
    assert eye @ sample == sample
    assert sample @ eye == sample


def test_product_transpose_rule():
    a = small([[1, 2, 0], [0, 3, 4], [5, 0, 6]])
    b = small([[0, 1, 2], [3, 0, 0], [1, 1, 1]])
    assert (a @ b).transpose() == b.transpose() @ a.transpose()


def test_product_nnz_matches_entries():
    a = small([[1, 2, 0], [0, 3, 4], [5, 0, 6]])
    p = a @ a
    assert p.nnz == sum(len(p.row(i)) for i in range(1, 4))


def test_sum_then_difference_round_trip():
    a = small([[1, 2, 0], [0, 3, 4], [5, 0, 6]])
    b = small([[0, -2, 2], [3, 0, 0], [1, 1, 1]])
    s = a + b
    assert s - b == a
    assert s.nnz == sum(len(s.row(i)) for i in range(1, 4))


def test_sum_with_negation_cancels(sample):
    assert (sample + sample.scalar_mult(-1)).nnz == 0


def test_size_mismatch():
    with pytest.raises(MatrixError):
        Matrix(2) + Matrix(3)
    with pytest.raises(MatrixError):
        Matrix(2) - Matrix(3)
    with pytest.raises(MatrixError):
        Matrix(2) @ Matrix(3)


def test_equality_rules():
    assert Matrix(2) != Matrix(3)
    assert (Matrix(2) == "matrix") is False


def test_vector_dot():
    p = [Entry(1, 1.0), Entry(3, 2.0)]
    q = [Entry(2, 5.0), Entry(3, 4.0)]
    assert vector_dot(p, q) == 8.0
    assert vector_dot([Entry(1, 1.0)], [Entry(2, 1.0)]) == 0.0