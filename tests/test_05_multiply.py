"""Test matrix products in both representations."""
from decimal import Context, Decimal
import logging
import random
import pytest
import bigmatrix as bm
from bigmatrix import immutable_operations as ops
from bigmatrix import MatrixDimensionError
from conftest import build_matrix


def identity(n, representation):
    return build_matrix([[1 if i == j else 0 for j in range(n)] for i in range(n)], representation)


def random_values(rows, columns, seed, density=1.0):
    rng = random.Random(seed)
    return [[Decimal(rng.randint(-50, 50)) / 10 if rng.random() < density else 0 for _ in range(columns)]
            for _ in range(rows)]


@pytest.mark.parametrize("multiply", [ops.dense_multiply, ops.sparse_multiply])
def test_identity_times_matrix(multiply, representation):
    values = random_values(3, 2, seed=42)
    m = build_matrix(values, representation)
    result = multiply(identity(3, representation), m)
    assert (result.shape() == (3, 2))
    assert (ops.dense_equals(result, m))


@pytest.mark.parametrize("multiply", [ops.dense_multiply, ops.sparse_multiply])
def test_disjoint_shared_indices_multiply_to_zero(multiply):
    left = bm.sparse_matrix(2, 4, 0, [(0, 0, 1), (1, 1, 2)])
    right = bm.sparse_matrix(4, 3, 0, [(2, 0, 3), (3, 2, 4)])
    result = multiply(left, right)
    assert (result.shape() == (2, 3))
    assert (ops.dense_equals(result, bm.matrix([[0, 0, 0], [0, 0, 0]])))
    assert (ops.sparse_sum(result) == 0)


def test_multiply_dimensions(make_matrix):
    left = make_matrix([[1, 2, 3], [4, 5, 6]])
    with pytest.raises(MatrixDimensionError):
        ops.dense_multiply(left, make_matrix([[1, 2], [3, 4]]))
    with pytest.raises(MatrixDimensionError):
        ops.sparse_multiply(left, make_matrix([[1, 2], [3, 4]]))
    right = make_matrix([[1, 0, 0, 1], [0, 1, 0, 1], [0, 0, 1, 1]])
    result = ops.dense_multiply(left, right)
    assert (result.shape() == (2, 4))
    assert (result.to_nested_list() == [[1, 2, 3, 6], [4, 5, 6, 15]])
    assert (ops.sparse_multiply(left, right).shape() == (2, 4))


def test_dense_multiply_strips_trailing_zeros():
    left = bm.matrix([['0.50', '0.50']])
    right = bm.matrix([['2.0'], ['2.0']])
    result = ops.dense_multiply(left, right)
    assert (str(result.get(0, 0)) == '2')


@pytest.mark.parametrize("seed", range(5))
def test_sparse_and_dense_products_agree(seed, math_context):
    left_values = random_values(4, 5, seed, density=0.4)
    right_values = random_values(5, 3, seed + 100, density=0.4)
    dense = ops.dense_multiply(bm.matrix(left_values), bm.matrix(right_values), math_context)
    sparse = ops.sparse_multiply(build_matrix(left_values, 'sparse'), build_matrix(right_values, 'sparse'),
                                 math_context)
    assert (sparse.is_sparse())
    assert (ops.dense_equals(dense, sparse))


def test_strategy_selects_sparse_result_for_sparse_operands(caplog):
    left = bm.sparse_matrix(4, 4, 0, [(0, 0, 1), (3, 2, 2)])
    right = bm.sparse_matrix(4, 4, 0, [(0, 1, 5), (2, 3, 6)])
    with caplog.at_level(logging.DEBUG, logger='bigmatrix.immutable_operations'):
        result = ops.dense_multiply(left, right)
    assert (result.is_sparse())
    assert ('sparse result' in caplog.text)
    assert (set(result.get_coords()) == {(0, 1), (3, 3)})
    assert (result.get(3, 3) == 12)


def test_strategy_selects_dense_result_otherwise():
    sparse_left = bm.sparse_matrix(2, 2, 0, [(0, 0, 1), (0, 1, 1), (1, 0, 1)])
    sparse_right = bm.sparse_matrix(2, 2, 0, [(0, 0, 1)])
    assert (not ops.dense_multiply(sparse_left, sparse_right).is_sparse())
    nonzero_default = bm.sparse_matrix(2, 2, 1)
    assert (not ops.dense_multiply(nonzero_default, sparse_right).is_sparse())
    dense = bm.matrix([[1, 0], [0, 1]])
    assert (not ops.dense_multiply(dense, sparse_right).is_sparse())


@pytest.mark.timeout(15)
def test_sparse_multiply_only_stores_contributing_cells():
    left = bm.sparse_matrix(1000, 1000, 0, [(1, 7, 2), (500, 3, 3)])
    right = bm.sparse_matrix(1000, 1000, 0, [(7, 9, 4), (3, 999, 5), (8, 8, 1)])
    result = ops.sparse_multiply(left, right)
    assert (result.shape() == (1000, 1000))
    assert (dict(result.get_coord_values()) == {(1, 9): 8, (500, 999): 15})


def test_sparse_multiply_honors_nonzero_defaults(math_context):
    left_values = [[1, 1, 3], [1, 1, 1]]
    right_values = [[2, 2], [2, 5], [2, 2]]
    left = build_matrix(left_values, 'sparse', default_value=1)
    right = build_matrix(right_values, 'sparse', default_value=2)
    assert (left.get_sparse_default_value() == 1)
    result = ops.sparse_multiply(left, right, math_context)
    expected = ops.dense_multiply(bm.matrix(left_values), bm.matrix(right_values), math_context)
    assert (result.is_sparse())
    assert (result.get_sparse_default_value() == 6)
    assert (ops.dense_equals(result, expected))
    assert (expected.to_nested_list() == [[10, 13], [6, 9]])


def test_scalar_multiply_dispatch(make_matrix):
    m = make_matrix([[1, 2], [0, 4]])
    assert (ops.dense_multiply(m, 3).to_nested_list() == [[3, 6], [0, 12]])
    assert (ops.sparse_multiply(m, '0.5').to_nested_list() == [[Decimal('0.5'), 1], [0, 2]])


def test_disable_logger_silences_strategy_messages(caplog):
    left = bm.sparse_matrix(2, 2, 0, [(0, 0, 1)])
    with caplog.at_level(logging.DEBUG, logger='bigmatrix.immutable_operations'):
        with bm.DisableLogger():
            ops.dense_multiply(left, left)
    assert (caplog.records == [])
