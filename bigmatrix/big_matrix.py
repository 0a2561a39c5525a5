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
Matrix contract shared by the dense and the sparse representation.

A matrix is a read-only grid of Decimal values. ``BigMatrix`` defines what the
operations in ``immutable_operations`` consume: extents, cell access, the
sparse default value and an enumeration of the explicitly stored cells.
``AbstractBigMatrix`` adds the builder lifecycle of concrete matrices: a fresh
matrix is filled with ``internal_set`` and then frozen with
``as_immutable_matrix``; after that it cannot be written again.
"""

from abc import ABC, abstractmethod
from decimal import Context, Decimal
from typing import Callable, Dict, Iterator, List, NamedTuple, Optional

from .decimal_math import DecimalMath, Numeric, ZERO


class Coord(NamedTuple):
    """Zero-based (row, column) position of a cell."""
    row: int
    column: int


class CoordValue(NamedTuple):
    """An explicitly stored cell and its value."""
    coord: Coord
    value: Decimal


class BigMatrix(ABC):
    """
    Read-only matrix of Decimal values.

    Subclasses implement ``rows``, ``columns`` and ``get``. The sparse hooks
    default to the dense interpretation: the default value is zero, no cell
    is implicit and every cell is enumerated as explicit.
    """

    @abstractmethod
    def rows(self) -> int:
        """Get number of rows"""

    @abstractmethod
    def columns(self) -> int:
        """Get number of columns"""

    @abstractmethod
    def get(self, row: int, column: int) -> Decimal:
        """Get the value at the specified position"""

    def shape(self):
        return self.rows(), self.columns()

    def is_sparse(self) -> bool:
        return False

    def get_sparse_default_value(self) -> Decimal:
        return ZERO

    def sparse_empty_size(self) -> int:
        """Number of cells that are not explicitly stored."""
        return 0

    def get_coords(self) -> Iterator[Coord]:
        for row in range(self.rows()):
            for column in range(self.columns()):
                yield Coord(row, column)

    def get_coord_values(self) -> Iterator[CoordValue]:
        for coord in self.get_coords():
            yield CoordValue(coord, self.get(coord.row, coord.column))

    def to_sparse_nested_map(self) -> Dict[int, Dict[int, Decimal]]:
        """Group the explicit values by row, then column."""
        result = {}
        for coord, value in self.get_coord_values():
            result.setdefault(coord.row, {})[coord.column] = value
        return result

    def to_transposed_sparse_nested_map(self) -> Dict[int, Dict[int, Decimal]]:
        """Group the explicit values by column, then row."""
        result = {}
        for coord, value in self.get_coord_values():
            result.setdefault(coord.column, {})[coord.row] = value
        return result

    def to_nested_list(self) -> List[List[Decimal]]:
        return [[self.get(row, column) for column in range(self.columns())] for row in range(self.rows())]

    # Lazy views
    def lazy_add(self, other: 'BigMatrix', math_context: Optional[Context] = None) -> 'BigMatrix':
        from .lazy_matrix import LazyBigMatrix
        return LazyBigMatrix(
            self.rows(), self.columns(),
            lambda row, column: DecimalMath.add(self.get(row, column), other.get(row, column), math_context))

    def lazy_subtract(self, other: 'BigMatrix', math_context: Optional[Context] = None) -> 'BigMatrix':
        from .lazy_matrix import LazyBigMatrix
        return LazyBigMatrix(
            self.rows(), self.columns(),
            lambda row, column: DecimalMath.subtract(self.get(row, column), other.get(row, column), math_context))

    def lazy_multiply(self, value: Decimal, math_context: Optional[Context] = None) -> 'BigMatrix':
        from .lazy_matrix import LazyBigMatrix
        return LazyBigMatrix(self.rows(), self.columns(),
                             lambda row, column: DecimalMath.multiply(self.get(row, column), value, math_context))

    def lazy_element_operation(self, operation: Callable[[Decimal], Decimal]) -> 'BigMatrix':
        from .lazy_matrix import LazyBigMatrix
        return LazyBigMatrix(self.rows(), self.columns(), lambda row, column: operation(self.get(row, column)))

    def lazy_transpose(self) -> 'BigMatrix':
        from .lazy_matrix import LazyBigMatrix
        return LazyBigMatrix(self.columns(), self.rows(), lambda row, column: self.get(column, row))

    def lazy_round(self, math_context: Optional[Context] = None) -> 'BigMatrix':
        from .lazy_matrix import LazyBigMatrix
        return LazyBigMatrix(self.rows(), self.columns(),
                             lambda row, column: DecimalMath.round(self.get(row, column), math_context))

    # Operations. Binary operations use the sparse algorithms only if both operands are sparse.
    def _both_sparse(self, other: 'BigMatrix') -> bool:
        return self.is_sparse() and other.is_sparse()

    def add(self, other: 'BigMatrix', math_context: Optional[Context] = None) -> 'BigMatrix':
        from . import immutable_operations as ops
        if self._both_sparse(other):
            return ops.sparse_add(self, other, math_context)
        return ops.dense_add(self, other, math_context)

    def subtract(self, other: 'BigMatrix', math_context: Optional[Context] = None) -> 'BigMatrix':
        from . import immutable_operations as ops
        if self._both_sparse(other):
            return ops.sparse_subtract(self, other, math_context)
        return ops.dense_subtract(self, other, math_context)

    def multiply(self, other, math_context: Optional[Context] = None) -> 'BigMatrix':
        """Multiply by a matrix (matrix product) or by a scalar."""
        from . import immutable_operations as ops
        if isinstance(other, BigMatrix):
            if self._both_sparse(other):
                return ops.sparse_multiply(self, other, math_context)
            return ops.dense_multiply(self, other, math_context)
        if self.is_sparse():
            return ops.sparse_multiply(self, other, math_context)
        return ops.dense_multiply(self, other, math_context)

    def element_operation(self, operation: Callable[[Decimal], Decimal]) -> 'BigMatrix':
        from . import immutable_operations as ops
        if self.is_sparse():
            return ops.sparse_element_operation(self, operation)
        return ops.dense_element_operation(self, operation)

    def transpose(self) -> 'BigMatrix':
        from . import immutable_operations as ops
        if self.is_sparse():
            return ops.sparse_transpose(self)
        return ops.dense_transpose(self)

    def round(self, math_context: Optional[Context] = None) -> 'BigMatrix':
        from . import immutable_operations as ops
        if self.is_sparse():
            return ops.sparse_round(self, math_context)
        return ops.dense_round(self, math_context)

    def sum(self, math_context: Optional[Context] = None) -> Decimal:
        from . import immutable_operations as ops
        if self.is_sparse():
            return ops.sparse_sum(self, math_context)
        return ops.dense_sum(self, math_context)

    def product(self, math_context: Optional[Context] = None) -> Decimal:
        from . import immutable_operations as ops
        if self.is_sparse():
            return ops.sparse_product(self, math_context)
        return ops.dense_product(self, math_context)

    # Python operators
    def __add__(self, other):
        if not isinstance(other, BigMatrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, BigMatrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if isinstance(other, BigMatrix):
            return NotImplemented
        try:
            scalar = DecimalMath.to_decimal(other)
        except TypeError:
            return NotImplemented
        return self.multiply(scalar)

    __rmul__ = __mul__

    def __matmul__(self, other):
        if not isinstance(other, BigMatrix):
            return NotImplemented
        return self.multiply(other)

    def __neg__(self):
        return self.element_operation(lambda value: -value)

    def __getitem__(self, index):
        row, column = index
        return self.get(row, column)

    def __eq__(self, other):
        if not isinstance(other, BigMatrix):
            return NotImplemented
        from . import immutable_operations as ops
        if self._both_sparse(other):
            return ops.sparse_equals(self, other)
        return ops.dense_equals(self, other)

    def __hash__(self):
        # Equal matrices have numerically equal sums, and Decimal hashes are numeric.
        return hash((self.rows(), self.columns(), self.sum()))

    def __repr__(self):
        return f"{type(self).__name__}(rows={self.rows()}, columns={self.columns()})"


class AbstractBigMatrix(BigMatrix):
    """Concrete matrix storage with the builder/freeze lifecycle."""

    def __init__(self, rows: int, columns: int):
        if rows < 0:
            raise ValueError(f"negative row count: {rows}")
        if columns < 0:
            raise ValueError(f"negative column count: {columns}")
        self._rows = rows
        self._columns = columns
        self._immutable = False

    def rows(self) -> int:
        return self._rows

    def columns(self) -> int:
        return self._columns

    def check_coord(self, row: int, column: int) -> None:
        if not 0 <= row < self._rows:
            raise IndexError(f"row {row} out of range [0, {self._rows})")
        if not 0 <= column < self._columns:
            raise IndexError(f"column {column} out of range [0, {self._columns})")

    def get(self, row: int, column: int) -> Decimal:
        self.check_coord(row, column)
        return self._get(row, column)

    def internal_set(self, row: int, column: int, value: Numeric) -> None:
        """Set a value while the matrix is still being built."""
        if self._immutable:
            raise TypeError(f"{type(self).__name__} is immutable")
        self.check_coord(row, column)
        self._set(row, column, DecimalMath.to_decimal(value))

    def as_immutable_matrix(self) -> 'AbstractBigMatrix':
        self._immutable = True
        return self

    def is_immutable(self) -> bool:
        return self._immutable

    @abstractmethod
    def _get(self, row: int, column: int) -> Decimal:
        pass

    @abstractmethod
    def _set(self, row: int, column: int, value: Decimal) -> None:
        pass
