import pytest
from decimal import Context
import bigmatrix as bm
from bigmatrix.names import *


def build_matrix(values, representation, default_value=0):
    """Build a frozen matrix holding ``values`` in the given representation."""
    if representation == DENSE:
        return bm.matrix(values)
    rows = len(values)
    columns = len(values[0]) if rows > 0 else 0
    entries = [(row, column, value) for row, row_values in enumerate(values) for column, value in enumerate(row_values)]
    return bm.sparse_matrix(rows, columns, default_value, entries)


@pytest.fixture(params=REPRESENTATIONS, scope="session")
def representation(request: pytest.FixtureRequest) -> str:
    """Provide session-level fixture for parametrized matrix representations."""
    return request.param


@pytest.fixture
def make_matrix(representation):
    """Provide a factory building matrices in the current representation."""

    def make(values, default_value=0):
        return build_matrix(values, representation, default_value)

    return make


@pytest.fixture(params=[None, Context(prec=5)], ids=["exact", "prec5"], scope="session")
def math_context(request: pytest.FixtureRequest):
    """Provide session-level fixture for exact and rounded arithmetic."""
    return request.param
