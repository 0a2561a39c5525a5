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
Sparse matrix storing a shared default value and the cells deviating from it.

Cells without an explicit entry read as the default value. Setting a cell to a
value numerically equal to the default removes its explicit entry, so the
explicit entries are always exactly the deviating cells.
"""

from decimal import Decimal
from typing import Iterable, Iterator, Tuple

from .decimal_math import DecimalMath, Numeric, ZERO
from .big_matrix import AbstractBigMatrix, Coord, CoordValue


class SparseImmutableBigMatrix(AbstractBigMatrix):
    """Immutable sparse matrix with an arbitrary (not necessarily zero) default value."""

    def __init__(self, rows: int, columns: int, default_value: Numeric = ZERO):
        super().__init__(rows, columns)
        self._default_value = DecimalMath.to_decimal(default_value)
        self._data = {}  # Coord -> Decimal

    @classmethod
    def from_entries(cls, rows: int, columns: int, entries: Iterable[Tuple[int, int, Numeric]] = (),
                     default_value: Numeric = ZERO) -> 'SparseImmutableBigMatrix':
        """
        Create a frozen sparse matrix.

        Args:
            rows: Number of rows
            columns: Number of columns
            entries: (row, column, value) triples for the explicit cells
            default_value: Value of all other cells

        Returns:
            SparseImmutableBigMatrix with the given entries
        """
        result = cls(rows, columns, default_value)
        for row, column, value in entries:
            result.internal_set(row, column, value)
        return result.as_immutable_matrix()

    def is_sparse(self) -> bool:
        return True

    def get_sparse_default_value(self) -> Decimal:
        return self._default_value

    def sparse_empty_size(self) -> int:
        return self._rows * self._columns - len(self._data)

    def sparse_filled_ratio(self) -> float:
        size = self._rows * self._columns
        if size == 0:
            return 0.0
        return len(self._data) / size

    def get_coords(self) -> Iterator[Coord]:
        return iter(self._data.keys())

    def get_coord_values(self) -> Iterator[CoordValue]:
        for coord, value in self._data.items():
            yield CoordValue(coord, value)

    def _get(self, row: int, column: int) -> Decimal:
        return self._data.get(Coord(row, column), self._default_value)

    def _set(self, row: int, column: int, value: Decimal) -> None:
        coord = Coord(row, column)
        if value == self._default_value:
            self._data.pop(coord, None)
        else:
            self._data[coord] = value

    def __repr__(self):
        return (f"{type(self).__name__}(rows={self._rows}, columns={self._columns}, "
                f"default_value={self._default_value}, explicit={len(self._data)})")
