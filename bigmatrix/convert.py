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
Construction of matrices and conversion from and to numpy and scipy.sparse.

Values are converted with ``DecimalMath.to_decimal``: floats go through their
shortest repr, so a numpy array holding 0.1 yields ``Decimal('0.1')``.
"""

from typing import Iterable, Optional, Tuple

import numpy as np
from scipy import sparse

from .decimal_math import Numeric, ZERO
from .dense_big_matrix import DenseImmutableBigMatrix
from .big_matrix import BigMatrix
from .sparse_big_matrix import SparseImmutableBigMatrix


def matrix(values) -> DenseImmutableBigMatrix:
    """
    Create a dense matrix from a list of rows or a 2-D numpy array.

    Args:
        values: Nested sequence of numbers, or numpy array

    Returns:
        Frozen DenseImmutableBigMatrix
    """
    if isinstance(values, np.ndarray):
        return from_numpy(values)
    return DenseImmutableBigMatrix.from_rows(values)


def sparse_matrix(rows: int,
                  columns: int,
                  default_value: Numeric = ZERO,
                  entries: Optional[Iterable[Tuple[int, int, Numeric]]] = None) -> SparseImmutableBigMatrix:
    """Create a sparse matrix from (row, column, value) triples."""
    return SparseImmutableBigMatrix.from_entries(rows, columns, entries or (), default_value)


def from_numpy(array: np.ndarray) -> DenseImmutableBigMatrix:
    if array.ndim != 2:
        raise ValueError(f"expected a 2-D array, got {array.ndim} dimensions")
    rows, columns = array.shape
    result = DenseImmutableBigMatrix(rows, columns)
    for i in range(rows):
        for j in range(columns):
            result.internal_set(i, j, array[i, j])
    return result.as_immutable_matrix()


def from_scipy_sparse(sp_matrix: sparse.spmatrix) -> SparseImmutableBigMatrix:
    """
    Create a sparse matrix with default value 0 from a scipy sparse matrix.

    Duplicate entries of the input are summed, as scipy does.
    """
    rows, columns = sp_matrix.shape
    result = SparseImmutableBigMatrix(rows, columns)

    coo = sparse.coo_matrix(sp_matrix)
    coo.sum_duplicates()
    for i, j, v in zip(coo.row, coo.col, coo.data):
        result.internal_set(int(i), int(j), v)

    return result.as_immutable_matrix()


def to_numpy(matrix: BigMatrix, dtype=float) -> np.ndarray:
    """
    Convert to a numpy array.

    With ``dtype=object`` the Decimal values are kept; otherwise they are
    converted with ``dtype``.
    """
    array = np.empty((matrix.rows(), matrix.columns()), dtype=object)
    array.fill(matrix.get_sparse_default_value())
    if matrix.is_sparse():
        for coord, value in matrix.get_coord_values():
            array[coord.row, coord.column] = value
    else:
        for i in range(matrix.rows()):
            for j in range(matrix.columns()):
                array[i, j] = matrix.get(i, j)
    if dtype is object:
        return array
    return array.astype(dtype)


def to_scipy_sparse(matrix: BigMatrix, dtype=float) -> sparse.csr_matrix:
    """
    Convert a matrix with default value 0 to a scipy CSR matrix.

    Only the explicit values are transferred, so a sparse matrix with a
    nonzero default cannot be converted.
    """
    if not matrix.get_sparse_default_value().is_zero():
        raise ValueError(f"Cannot convert matrix with default value {matrix.get_sparse_default_value()} "
                         "to a scipy sparse matrix")
    rows, columns, data = [], [], []
    for coord, value in matrix.get_coord_values():
        if value.is_zero():
            continue
        rows.append(coord.row)
        columns.append(coord.column)
        data.append(value)
    coo = sparse.coo_matrix((np.array(data, dtype=object).astype(dtype), (rows, columns)),
                            shape=(matrix.rows(), matrix.columns()))
    return coo.tocsr()
