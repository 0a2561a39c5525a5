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
"""Shape checks and representation heuristics used by the matrix operations"""

from .errors import MatrixDimensionError
from .big_matrix import BigMatrix
from .names import SPARSE_FILL_THRESHOLD


def _shape_str(matrix: BigMatrix) -> str:
    return f"{matrix.rows()}x{matrix.columns()}"


def check_same_size(left: BigMatrix, right: BigMatrix) -> None:
    """Raise MatrixDimensionError unless both matrices have the same shape."""
    if left.rows() != right.rows() or left.columns() != right.columns():
        raise MatrixDimensionError(
            f"Matrix dimensions don't match: {_shape_str(left)} vs {_shape_str(right)}",
            left.shape(), right.shape())


def check_columns_other_rows(left: BigMatrix, right: BigMatrix) -> None:
    """Raise MatrixDimensionError unless left.columns() == right.rows()."""
    if left.columns() != right.rows():
        raise MatrixDimensionError(
            f"Matrix dimensions incompatible for multiplication: {_shape_str(left)} * {_shape_str(right)}",
            left.shape(), right.shape())


def is_sparse_with_lots_of_zeroes(matrix: BigMatrix) -> bool:
    """
    True for sparse matrices with a zero default value and at most
    SPARSE_FILL_THRESHOLD of their cells stored explicitly.
    """
    if not matrix.is_sparse():
        return False
    if not matrix.get_sparse_default_value().is_zero():
        return False
    size = matrix.rows() * matrix.columns()
    if size == 0:
        return True
    return (size - matrix.sparse_empty_size()) / size <= SPARSE_FILL_THRESHOLD
