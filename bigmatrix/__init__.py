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
"""bigmatrix package for arbitrary-precision decimal matrices with dense and sparse storage"""

from .names import *
import logging


class DisableLogger():
    """Environment in which logging is disabled"""

    def __enter__(self):
        logging.disable(logging.CRITICAL)

    def __exit__(self, exit_type, exit_value, exit_traceback):
        logging.disable(logging.NOTSET)


from .errors import MatrixDimensionError
from .decimal_math import DecimalMath, EXACT
from .big_matrix import BigMatrix, Coord, CoordValue
from .lazy_matrix import LazyBigMatrix
from .dense_big_matrix import DenseImmutableBigMatrix
from .sparse_big_matrix import SparseImmutableBigMatrix
from . import immutable_operations
from .immutable_operations import *
from .convert import matrix, sparse_matrix, from_numpy, from_scipy_sparse, to_numpy, to_scipy_sparse
