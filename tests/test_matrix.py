import pytest

from drillbook.matrix import diagonals, format_matrix, matrix_multiply, zigzag

SQUARE = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 16]]


def test_multiply_source_example():
    a = [[1, 2, 3], [1, 5, 6], [5, 6, 3]]
    b = [[6], [6], [8]]
    assert matrix_multiply(a, b) == [[42], [84], [90]]


def test_multiply_identity():
    identity = [[1 if i == j else 0 for j in range(4)] for i in range(4)]
    assert matrix_multiply(SQUARE, identity) == SQUARE
    assert matrix_multiply(identity, SQUARE) == SQUARE


def test_multiply_associative():
    a = [[1, 2], [3, 4]]
    b = [[0, 1], [1, 0]]
    c = [[2, 0], [0, 3]]
    assert matrix_multiply(matrix_multiply(a, b), c) == matrix_multiply(
        a, matrix_multiply(b, c)
    )


def test_multiply_shape():
    result = matrix_multiply([[1, 2, 3]], [[1, 0], [0, 1], [1, 1]])
    assert len(result) == 1 and len(result[0]) == 2


def test_multiply_dimension_mismatch():
    with pytest.raises(ValueError):
        matrix_multiply([[1, 2]], [[1, 2]])


def test_multiply_ragged():
    with pytest.raises(ValueError):
        matrix_multiply([[1, 2], [3]], [[1], [2]])


def test_format_matrix_round_trip():
    text = format_matrix(SQUARE)
    lines = text.splitlines()
    assert len(lines) == len(SQUARE)
    assert [[int(part) for part in line.split()] for line in lines] == SQUARE


def test_format_matrix_width():
    assert format_matrix([[1]]) == " 1"


def test_zigzag_rows_alternate():
    values = zigzag(SQUARE)
    assert sorted(values) == sorted(v for row in SQUARE for v in row)
    assert values[:4] == SQUARE[0]
    assert values[4:8] == SQUARE[1][::-1]
    assert values[8:12] == SQUARE[2]


def test_diagonals():
    main, anti = diagonals(SQUARE)
    assert main == [1, 6, 11, 16]
    flipped = [row[::-1] for row in SQUARE]
    assert diagonals(flipped)[0] == anti


def test_diagonals_not_square():
    with pytest.raises(ValueError):
        diagonals([[1, 2, 3], [4, 5, 6]])