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
"""Read-only matrix views computing their values on demand"""

from decimal import Decimal
from typing import Callable

from .big_matrix import BigMatrix


class LazyBigMatrix(BigMatrix):
    """
    Matrix whose cells are produced by a function of (row, column).

    Nothing is stored; every ``get`` calls the function again. Views are
    turned into concrete matrices with ``DenseImmutableBigMatrix.copy_of``.
    """

    def __init__(self, rows: int, columns: int, function: Callable[[int, int], Decimal]):
        self._rows = rows
        self._columns = columns
        self._function = function

    def rows(self) -> int:
        return self._rows

    def columns(self) -> int:
        return self._columns

    def get(self, row: int, column: int) -> Decimal:
        if not (0 <= row < self._rows and 0 <= column < self._columns):
            raise IndexError(f"({row}, {column}) out of range for {self._rows}x{self._columns} matrix")
        return self._function(row, column)
