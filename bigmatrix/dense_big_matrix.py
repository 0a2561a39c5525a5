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
"""Dense matrix storing every cell in a flat row-major list"""

from decimal import Decimal
from typing import List, Sequence

from .decimal_math import DecimalMath, Numeric, ZERO
from .big_matrix import AbstractBigMatrix, BigMatrix


class DenseImmutableBigMatrix(AbstractBigMatrix):
    """
    Immutable dense matrix.

    A new instance is a zero matrix that can be filled with ``internal_set``
    until ``as_immutable_matrix`` is called. The factory class methods return
    matrices that are already frozen.
    """

    def __init__(self, rows: int, columns: int):
        super().__init__(rows, columns)
        self._values = [ZERO] * (rows * columns)

    @classmethod
    def copy_of(cls, matrix: BigMatrix) -> 'DenseImmutableBigMatrix':
        """Materialize any matrix (including lazy views) into a frozen dense matrix."""
        result = cls(matrix.rows(), matrix.columns())
        index = 0
        for row in range(matrix.rows()):
            for column in range(matrix.columns()):
                result._values[index] = DecimalMath.to_decimal(matrix.get(row, column))
                index += 1
        return result.as_immutable_matrix()

    @classmethod
    def from_rows(cls, values: Sequence[Sequence[Numeric]]) -> 'DenseImmutableBigMatrix':
        """Create a frozen matrix from a list of rows."""
        rows = len(values)
        columns = len(values[0]) if rows > 0 else 0
        result = cls(rows, columns)
        for row, row_values in enumerate(values):
            if len(row_values) != columns:
                raise ValueError(f"row {row} has {len(row_values)} values, expected {columns}")
            for column, value in enumerate(row_values):
                result.internal_set(row, column, value)
        return result.as_immutable_matrix()

    def _get(self, row: int, column: int) -> Decimal:
        return self._values[row * self._columns + column]

    def _set(self, row: int, column: int, value: Decimal) -> None:
        self._values[row * self._columns + column] = value

    def to_nested_list(self) -> List[List[Decimal]]:
        columns = self._columns
        return [self._values[row * columns:(row + 1) * columns] for row in range(self._rows)]
