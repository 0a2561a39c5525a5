#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""
Operations on immutable decimal matrices.

Every operation exists in a dense and a sparse variant. Dense variants iterate
over all cells; sparse variants touch only the explicitly stored cells and
derive the default value of the result from the default values of the
operands. All operations return fresh frozen matrices (or Decimal scalars for
reductions) and never modify their operands.

The ``math_context`` argument is a ``decimal.Context`` used for every
arithmetic step, or ``None`` for exact arithmetic.

API:
    >>> from bigmatrix import immutable_operations as ops
    >>> result = ops.sparse_add(left, right, math_context)
"""

import logging
from decimal import Context, Decimal
from typing import Callable, Optional

from .decimal_math import DecimalMath, Numeric, ONE, ZERO
from .dense_big_matrix import DenseImmutableBigMatrix
from .big_matrix import AbstractBigMatrix, BigMatrix
from .matrix_utils import check_columns_other_rows, check_same_size, is_sparse_with_lots_of_zeroes
from .sparse_big_matrix import SparseImmutableBigMatrix

LOG = logging.getLogger(__name__)

__all__ = [
    'dense_add', 'dense_subtract', 'dense_multiply', 'dense_scalar_multiply', 'dense_matrix_multiply',
    'dense_element_operation', 'dense_transpose', 'dense_sum', 'dense_product', 'dense_round', 'dense_equals',
    'sparse_add', 'sparse_subtract', 'sparse_multiply', 'sparse_scalar_multiply', 'sparse_matrix_multiply',
    'sparse_element_operation', 'sparse_transpose', 'sparse_sum', 'sparse_product', 'sparse_round',
    'sparse_equals'
]


# =============================================================================
# Dense operations
# =============================================================================

def dense_add(left: BigMatrix, right: BigMatrix, math_context: Optional[Context] = None) -> BigMatrix:
    check_same_size(left, right)
    return DenseImmutableBigMatrix.copy_of(left.lazy_add(right, math_context))


def dense_subtract(left: BigMatrix, right: BigMatrix, math_context: Optional[Context] = None) -> BigMatrix:
    check_same_size(left, right)
    return DenseImmutableBigMatrix.copy_of(left.lazy_subtract(right, math_context))


def dense_multiply(left: BigMatrix, right, math_context: Optional[Context] = None) -> BigMatrix:
    """
    Multiply a matrix by a scalar or by another matrix.

    Args:
        left: Left operand
        right: Scalar value or right matrix operand
        math_context: Precision context, or None for exact arithmetic

    Returns:
        Elementwise scaled matrix, or the matrix product
    """
    if isinstance(right, BigMatrix):
        return dense_matrix_multiply(left, right, math_context)
    return dense_scalar_multiply(left, right, math_context)


def dense_scalar_multiply(left: BigMatrix, value: Numeric, math_context: Optional[Context] = None) -> BigMatrix:
    value = DecimalMath.to_decimal(value)
    return DenseImmutableBigMatrix.copy_of(left.lazy_multiply(value, math_context))


def dense_matrix_multiply(left: BigMatrix, right: BigMatrix, math_context: Optional[Context] = None) -> BigMatrix:
    """
    Matrix product by accumulating every output cell over the shared dimension.

    The result is sparse if both operands are sparse with lots of zeroes and
    dense otherwise. Each cell sum is stripped of trailing zeros.
    """
    check_columns_other_rows(left, right)

    rows = left.rows()
    columns = right.columns()

    if is_sparse_with_lots_of_zeroes(left) and is_sparse_with_lots_of_zeroes(right):
        LOG.debug('Multiplying %dx%d by %dx%d into a sparse result.', left.rows(), left.columns(),
                  right.rows(), right.columns())
        result = SparseImmutableBigMatrix(rows, columns)
    else:
        LOG.debug('Multiplying %dx%d by %dx%d into a dense result.', left.rows(), left.columns(),
                  right.rows(), right.columns())
        result = DenseImmutableBigMatrix(rows, columns)

    _fill_product(left, right, result, range(rows), range(columns), math_context)
    return result.as_immutable_matrix()


def _dot(left: BigMatrix, right: BigMatrix, row: int, column: int, math_context: Optional[Context]) -> Decimal:
    total = ZERO
    for index in range(left.columns()):
        value = DecimalMath.multiply(left.get(row, index), right.get(index, column), math_context)
        total = DecimalMath.add(total, value, math_context)
    return total


def _fill_product(left: BigMatrix, right: BigMatrix, result: AbstractBigMatrix, rows, columns,
                  math_context: Optional[Context]) -> None:
    for row in rows:
        for column in columns:
            total = _dot(left, right, row, column, math_context)
            result.internal_set(row, column, DecimalMath.strip_trailing_zeros(total))


def dense_element_operation(matrix: BigMatrix, operation: Callable[[Decimal], Decimal]) -> BigMatrix:
    return DenseImmutableBigMatrix.copy_of(matrix.lazy_element_operation(operation))


def dense_transpose(matrix: BigMatrix) -> BigMatrix:
    return DenseImmutableBigMatrix.copy_of(matrix.lazy_transpose())


def dense_sum(matrix: BigMatrix, math_context: Optional[Context] = None) -> Decimal:
    result = ZERO
    for row in range(matrix.rows()):
        for column in range(matrix.columns()):
            result = DecimalMath.add(result, matrix.get(row, column), math_context)
    return result


def dense_product(matrix: BigMatrix, math_context: Optional[Context] = None) -> Decimal:
    result = ONE
    for row in range(matrix.rows()):
        for column in range(matrix.columns()):
            result = DecimalMath.multiply(result, matrix.get(row, column), math_context)
    return result


def dense_round(matrix: BigMatrix, math_context: Optional[Context] = None) -> BigMatrix:
    return DenseImmutableBigMatrix.copy_of(matrix.lazy_round(math_context))


def dense_equals(left: BigMatrix, right: BigMatrix) -> bool:
    """Compare all cells by numeric value (1.0 equals 1.00)."""
    if left is right:
        return True
    if left.rows() != right.rows() or left.columns() != right.columns():
        return False
    for row in range(left.rows()):
        for column in range(left.columns()):
            if left.get(row, column) != right.get(row, column):
                return False
    return True


# =============================================================================
# Sparse operations
# =============================================================================

def _merged_coords(left: BigMatrix, right: BigMatrix) -> set:
    merged = set(left.get_coords())
    merged.update(right.get_coords())
    return merged


def sparse_equals(left: BigMatrix, right: BigMatrix) -> bool:
    """
    Compare two matrices through their explicit cells.

    Default values are only compared if both matrices have implicit cells;
    otherwise a differing default is never observable.
    """
    if left is right:
        return True
    if left.rows() != right.rows() or left.columns() != right.columns():
        return False

    if (left.sparse_empty_size() != 0 and right.sparse_empty_size() != 0
            and left.get_sparse_default_value() != right.get_sparse_default_value()):
        return False

    for row, column in _merged_coords(left, right):
        if left.get(row, column) != right.get(row, column):
            return False
    return True


def sparse_add(left: BigMatrix, right: BigMatrix, math_context: Optional[Context] = None) -> BigMatrix:
    check_same_size(left, right)

    default_value = DecimalMath.add(left.get_sparse_default_value(), right.get_sparse_default_value(), math_context)
    result = SparseImmutableBigMatrix(left.rows(), left.columns(), default_value)

    for row, column in _merged_coords(left, right):
        value = DecimalMath.add(left.get(row, column), right.get(row, column), math_context)
        result.internal_set(row, column, value)

    return result.as_immutable_matrix()


def sparse_subtract(left: BigMatrix, right: BigMatrix, math_context: Optional[Context] = None) -> BigMatrix:
    check_same_size(left, right)

    default_value = DecimalMath.subtract(left.get_sparse_default_value(), right.get_sparse_default_value(),
                                         math_context)
    result = SparseImmutableBigMatrix(left.rows(), left.columns(), default_value)

    for row, column in _merged_coords(left, right):
        value = DecimalMath.subtract(left.get(row, column), right.get(row, column), math_context)
        result.internal_set(row, column, value)

    return result.as_immutable_matrix()


def sparse_multiply(left: BigMatrix, right, math_context: Optional[Context] = None) -> BigMatrix:
    """
    Multiply a matrix by a scalar or by another matrix, keeping the result sparse.

    Args:
        left: Left operand
        right: Scalar value or right matrix operand
        math_context: Precision context, or None for exact arithmetic

    Returns:
        Sparse scaled matrix, or the sparse matrix product
    """
    if isinstance(right, BigMatrix):
        return sparse_matrix_multiply(left, right, math_context)
    return sparse_scalar_multiply(left, right, math_context)


def sparse_scalar_multiply(left: BigMatrix, value: Numeric, math_context: Optional[Context] = None) -> BigMatrix:
    value = DecimalMath.to_decimal(value)
    default_value = DecimalMath.multiply(left.get_sparse_default_value(), value, math_context)
    result = SparseImmutableBigMatrix(left.rows(), left.columns(), default_value)

    for coord, cell in left.get_coord_values():
        result.internal_set(coord.row, coord.column, DecimalMath.multiply(cell, value, math_context))

    return result.as_immutable_matrix()


def sparse_matrix_multiply(left: BigMatrix, right: BigMatrix, math_context: Optional[Context] = None) -> BigMatrix:
    """
    Matrix product over the explicit cells only.

    The explicit values of ``left`` are grouped by row and those of ``right``
    by column. For every pair of a left row and a right column the products
    are summed over the shared indices present in both groups, in ascending
    index order. This requires zero default values; if either operand has a
    nonzero default the defaults are taken into account as well.
    """
    check_columns_other_rows(left, right)

    left_by_row_column = left.to_sparse_nested_map()
    right_by_column_row = right.to_transposed_sparse_nested_map()

    rows = left.rows()
    columns = right.columns()

    if not (left.get_sparse_default_value().is_zero() and right.get_sparse_default_value().is_zero()):
        return _sparse_multiply_with_defaults(left, right, left_by_row_column, right_by_column_row, math_context)

    result = SparseImmutableBigMatrix(rows, columns)

    for row, left_row in left_by_row_column.items():
        for column, right_column in right_by_column_row.items():
            common_indices = left_row.keys() & right_column.keys()
            if not common_indices:
                continue
            total = ZERO
            for index in sorted(common_indices):
                value = DecimalMath.multiply(left_row[index], right_column[index], math_context)
                total = DecimalMath.add(total, value, math_context)
            result.internal_set(row, column, total)

    return result.as_immutable_matrix()


def _sparse_multiply_with_defaults(left: BigMatrix, right: BigMatrix, left_by_row_column, right_by_column_row,
                                   math_context: Optional[Context]) -> BigMatrix:
    # A cell whose left row and right column have no explicit values is the
    # default product accumulated over the shared dimension.
    LOG.debug('Sparse multiply with nonzero default values (%s, %s).', left.get_sparse_default_value(),
              right.get_sparse_default_value())
    default_term = DecimalMath.multiply(left.get_sparse_default_value(), right.get_sparse_default_value(),
                                        math_context)
    default_value = ZERO
    for _ in range(left.columns()):
        default_value = DecimalMath.add(default_value, default_term, math_context)

    rows = left.rows()
    columns = right.columns()
    result = SparseImmutableBigMatrix(rows, columns, DecimalMath.strip_trailing_zeros(default_value))

    _fill_product(left, right, result, sorted(left_by_row_column), range(columns), math_context)
    remaining_rows = [row for row in range(rows) if row not in left_by_row_column]
    _fill_product(left, right, result, remaining_rows, sorted(right_by_column_row), math_context)

    return result.as_immutable_matrix()


def sparse_element_operation(matrix: BigMatrix, operation: Callable[[Decimal], Decimal]) -> BigMatrix:
    default_value = operation(matrix.get_sparse_default_value())
    result = SparseImmutableBigMatrix(matrix.rows(), matrix.columns(), default_value)

    for coord, value in matrix.get_coord_values():
        result.internal_set(coord.row, coord.column, operation(value))

    return result.as_immutable_matrix()


def sparse_transpose(matrix: BigMatrix) -> BigMatrix:
    result = SparseImmutableBigMatrix(matrix.columns(), matrix.rows(), matrix.get_sparse_default_value())

    for coord, value in matrix.get_coord_values():
        result.internal_set(coord.column, coord.row, value)

    return result.as_immutable_matrix()


def sparse_sum(matrix: BigMatrix, math_context: Optional[Context] = None) -> Decimal:
    """Sum of the explicit values plus the default value times the number of implicit cells."""
    common = DecimalMath.multiply(Decimal(matrix.sparse_empty_size()), matrix.get_sparse_default_value(),
                                  math_context)

    values_sum = ZERO
    for _, value in matrix.get_coord_values():
        values_sum = DecimalMath.add(values_sum, value, math_context)

    return DecimalMath.add(common, values_sum, math_context)


def sparse_product(matrix: BigMatrix, math_context: Optional[Context] = None) -> Decimal:
    """
    Product of all cells.

    The default value is raised to the number of implicit cells first. If that
    power is zero the product is zero and the explicit values are not read.
    """
    common = DecimalMath.pow(matrix.get_sparse_default_value(), matrix.sparse_empty_size(), math_context)

    if common.is_zero():
        return common

    values_product = ONE
    for _, value in matrix.get_coord_values():
        values_product = DecimalMath.multiply(values_product, value, math_context)

    return DecimalMath.multiply(common, values_product, math_context)


def sparse_round(matrix: BigMatrix, math_context: Optional[Context] = None) -> BigMatrix:
    default_value = DecimalMath.round(matrix.get_sparse_default_value(), math_context)
    result = SparseImmutableBigMatrix(matrix.rows(), matrix.columns(), default_value)

    for coord, value in matrix.get_coord_values():
        result.internal_set(coord.row, coord.column, DecimalMath.round(value, math_context))

    return result.as_immutable_matrix()
