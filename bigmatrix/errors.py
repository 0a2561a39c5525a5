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
"""Exceptions raised by the matrix operations"""


class MatrixDimensionError(ValueError):
    """Operand shapes are not compatible with the requested operation.

    Raised for add/subtract on matrices of different shape and for matrix
    products whose inner dimensions disagree. Arithmetic failures of the
    decimal layer are not wrapped; they propagate as raised by decimal.
    """

    def __init__(self, message, left_shape=None, right_shape=None):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape
