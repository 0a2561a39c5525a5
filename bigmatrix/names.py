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
"""Static strings and constants used in the bigmatrix package

    Representations

        DENSE = 'dense'

        SPARSE = 'sparse'

    Strategy selection

        SPARSE_FILL_THRESHOLD = 0.5
            Largest share of explicitly stored cells for which a sparse
            matrix with a zero default still counts as "sparse with lots of
            zeroes" when choosing the result type of a matrix product.
"""

DENSE = 'dense'
SPARSE = 'sparse'
REPRESENTATIONS = (DENSE, SPARSE)

SPARSE_FILL_THRESHOLD = 0.5
