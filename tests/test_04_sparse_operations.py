"""Test sparse matrix operations."""
from decimal import Context, Decimal, ROUND_HALF_UP
import pytest
import bigmatrix as bm
from bigmatrix import immutable_operations as ops
from bigmatrix import Coord, MatrixDimensionError


@pytest.fixture
def s1():
    return bm.sparse_matrix(3, 3, 1, [(0, 0, 5), (1, 2, '2.5')])


@pytest.fixture
def s2():
    return bm.sparse_matrix(3, 3, 2, [(0, 0, -5), (2, 1, 4)])


def test_sparse_add(s1, s2):
    result = ops.sparse_add(s1, s2)
    assert (result.is_sparse())
    assert (result.get_sparse_default_value() == 3)
    assert (result.to_nested_list() == [[0, 3, 3], [3, 3, Decimal('4.5')], [3, 5, 3]])
    assert (set(result.get_coords()) == {Coord(0, 0), Coord(1, 2), Coord(2, 1)})


def test_sparse_add_commutes(s1, s2):
    assert (ops.sparse_equals(ops.sparse_add(s1, s2), ops.sparse_add(s2, s1)))


def test_sparse_add_drops_cells_equal_to_default():
    left = bm.sparse_matrix(2, 2, 0, [(0, 0, 1)])
    right = bm.sparse_matrix(2, 2, 0, [(0, 0, -1)])
    result = ops.sparse_add(left, right)
    assert (list(result.get_coords()) == [])
    assert (result.sparse_empty_size() == 4)


def test_sparse_subtract(s1, s2):
    result = ops.sparse_subtract(s1, s2)
    assert (result.get_sparse_default_value() == -1)
    assert (result.to_nested_list() == [[10, -1, -1], [-1, -1, Decimal('0.5')], [-1, -3, -1]])


def test_sparse_dimension_mismatch():
    left = bm.sparse_matrix(2, 3)
    right = bm.sparse_matrix(3, 2)
    with pytest.raises(MatrixDimensionError):
        ops.sparse_add(left, right)
    with pytest.raises(MatrixDimensionError):
        ops.sparse_subtract(left, right)


def test_sparse_parity_with_dense():
    values = [[0, 1, 0], [2, 0, 0]]
    other = [[3, 0, 0], [0, 0, '-0.5']]
    dense_result = ops.dense_add(bm.matrix(values), bm.matrix(other))
    sparse_result = ops.sparse_add(bm.sparse_matrix(2, 3, 0, [(0, 1, 1), (1, 0, 2)]),
                                   bm.sparse_matrix(2, 3, 0, [(0, 0, 3), (1, 2, '-0.5')]))
    assert (ops.dense_equals(dense_result, sparse_result))
    assert (ops.sparse_equals(dense_result, sparse_result))


def test_sparse_scalar_multiply(s1):
    result = ops.sparse_multiply(s1, Decimal(2))
    assert (result.get_sparse_default_value() == 2)
    assert (result.get(0, 0) == 10)
    assert (result.get(1, 2) == 5)
    assert (result.get(2, 2) == 2)
    assert (ops.sparse_scalar_multiply(s1, 0).sparse_empty_size() == 9)


def test_sparse_element_operation(s1):
    result = ops.sparse_element_operation(s1, lambda value: value + 1)
    assert (result.get_sparse_default_value() == 2)
    assert (result.to_nested_list() == [[6, 2, 2], [2, 2, Decimal('3.5')], [2, 2, 2]])


def test_sparse_transpose():
    m = bm.sparse_matrix(2, 3, 9, [(0, 2, 1), (1, 0, 2)])
    result = ops.sparse_transpose(m)
    assert (result.shape() == (3, 2))
    assert (result.get_sparse_default_value() == 9)
    assert (result.to_nested_list() == [[9, 2], [9, 9], [1, 9]])
    assert (ops.sparse_equals(ops.sparse_transpose(result), m))


@pytest.mark.timeout(15)
def test_sparse_sum(s1):
    assert (ops.sparse_sum(s1) == Decimal('14.5'))
    assert (ops.sparse_sum(s1) == ops.dense_sum(s1))
    assert (ops.sparse_sum(bm.sparse_matrix(1000, 1000, '0.001')) == 1000)


def test_sparse_product(s1):
    assert (ops.sparse_product(s1) == Decimal('12.5'))
    assert (ops.sparse_product(s1) == ops.dense_product(s1))
    assert (ops.sparse_product(bm.sparse_matrix(10, 10, 2)) == 2**100)
    assert (ops.sparse_product(bm.sparse_matrix(0, 0, 0)) == 1)


def test_sparse_product_with_context():
    m = bm.sparse_matrix(10, 10, 2, [(0, 0, 3)])
    context = Context(prec=4)
    assert (ops.sparse_product(m, context) == context.multiply(context.power(Decimal(2), 99), Decimal(3)))


def test_sparse_product_short_circuits_on_zero_default():
    m = bm.sparse_matrix(2, 2, 0, [(0, 0, 'NaN'), (1, 1, 'Infinity')])
    assert (ops.sparse_product(m) == 0)
    assert (ops.sparse_product(m, Context(prec=3)) == 0)


def test_sparse_product_fully_explicit_ignores_zero_default():
    m = bm.sparse_matrix(1, 2, 0, [(0, 0, 3), (0, 1, 4)])
    assert (m.sparse_empty_size() == 0)
    assert (ops.sparse_product(m) == 12)


def test_sparse_round():
    m = bm.sparse_matrix(2, 3, '1.23456', [(0, 2, '9.87654'), (1, 0, '2.000')])
    context = Context(prec=2, rounding=ROUND_HALF_UP)
    result = ops.sparse_round(m, context)
    assert (result.shape() == (2, 3))
    assert (result.get_sparse_default_value() == Decimal('1.2'))
    assert (result.to_nested_list() == [[Decimal('1.2'), Decimal('1.2'), Decimal('9.9')],
                                        [2, Decimal('1.2'), Decimal('1.2')]])
    assert (str(result.get(1, 0)) == '2')


def test_sparse_round_idempotent():
    m = bm.sparse_matrix(3, 2, '0.333333', [(2, 1, '12345.678')])
    context = Context(prec=3)
    once = ops.sparse_round(m, context)
    assert (ops.sparse_equals(once, ops.sparse_round(once, context)))
